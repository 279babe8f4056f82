"""Single-selection toggle coordinated with an external selection authority.

The local state is one index into the current slice list (-1 when nothing
is selected). It is independent of the cross-filter highlight state, which
arrives with the data. While a cross-filter is active the masks govern
slice opacity and selection changes only reach the authority.
"""
import logging
from typing import NamedTuple, Protocol

from .types import SelectionKey
from .commands import PathCmd, GroupCmd
from .constants import FADE_OPACITY, FULL_OPACITY

logger = logging.getLogger(__name__)


class SelectionAuthority(Protocol):
    def select(self, key: SelectionKey, additive: bool) -> None: ...
    def clear(self) -> None: ...


class SelectionState(NamedTuple):
    index: int = -1

    @property
    def selected(self) -> bool:
        return self.index >= 0


UNSELECTED = SelectionState()


def click_item(state: SelectionState, index: int, keys: list[SelectionKey],
               authority: SelectionAuthority | None) -> SelectionState:
    """Click on slice or legend row `index`: select it, or clear if it was selected."""
    if not 0 <= index < len(keys):
        raise IndexError(f"No slice {index} (have {len(keys)})")
    if state.index == index:
        logger.debug("toggle off slice %d", index)
        if authority is not None:
            authority.clear()
        return UNSELECTED
    logger.debug("select slice %d", index)
    if authority is not None:
        authority.select(keys[index], False)
    return SelectionState(index)


def click_background(state: SelectionState,
                     authority: SelectionAuthority | None) -> SelectionState:
    """Click on empty chart area.

    The authority is always told to clear: its filter can outlive the local
    selection, which every new render pass resets.
    """
    if authority is not None:
        authority.clear()
    return UNSELECTED


def slice_opacity(state: SelectionState, index: int) -> float:
    if not state.selected or state.index == index:
        return FULL_OPACITY
    return FADE_OPACITY


def apply_selection(commands: list, state: SelectionState, has_highlights: bool) -> list:
    """Commands with slice opacity set from the local selection."""
    if has_highlights:
        return commands
    out = []
    for cmd in commands:
        if isinstance(cmd, GroupCmd):
            out.append(cmd._replace(children=apply_selection(cmd.children, state, has_highlights)))
        elif isinstance(cmd, PathCmd) and cmd.role == "slice" and cmd.index is not None:
            out.append(cmd._replace(opacity=slice_opacity(state, cmd.index)))
        else:
            out.append(cmd)
    return out
