"""Chart instance: holds the render state and routes clicks."""
import logging

from .types import Viewport
from .data import Palette
from .settings import load_settings
from .render import RenderResult, render, restyle
from .selection import SelectionAuthority, click_item, click_background
from .svg import to_svg

logger = logging.getLogger(__name__)


class DonutChart:
    """One donut chart on one drawing surface.

    Updates and clicks are expected serially from the host's event loop.
    """

    def __init__(self, authority: SelectionAuthority | None = None,
                 palette: Palette | None = None):
        self.authority = authority
        self.palette = palette or Palette()
        self.result: RenderResult | None = None
        self.viewport = Viewport(0, 0)

    def update(self, rows, viewport: Viewport | tuple[float, float],
               objects: dict | None = None, categorical: bool = True) -> RenderResult:
        """New data or settings: re-render from scratch and drop the selection."""
        previous = self.result.state if self.result else None
        self.viewport = Viewport(*viewport)
        self.result = render(rows, self.viewport, load_settings(objects), self.palette,
                             categorical, previous)
        return self.result

    @property
    def selected(self) -> int:
        return self.result.state.selection.index if self.result else -1

    @property
    def commands(self) -> list:
        if self.result is None:
            return []
        return restyle(self.result, self.result.state.selection)

    def _interactive(self) -> bool:
        if self.result is None or self.result.outcome != "rendered":
            logger.debug("click ignored, nothing rendered")
            return False
        return True

    def click(self, index: int) -> int:
        """Click on slice or legend row `index`. Returns the selected index."""
        if not self._interactive():
            return -1
        state = self.result.state
        keys = [s.key for s in state.data.slices]
        selection = click_item(state.selection, index, keys, self.authority)
        self.result = self.result._replace(state=state._replace(selection=selection))
        return selection.index

    def click_background(self) -> int:
        if not self._interactive():
            return -1
        state = self.result.state
        selection = click_background(state.selection, self.authority)
        self.result = self.result._replace(state=state._replace(selection=selection))
        return selection.index

    def to_svg(self) -> str:
        return to_svg(self.commands, self.viewport)
