"""Draw commands: the renderer's output, applied by a surface adapter."""
from typing import NamedTuple, Union

from .types import Point, PathData
from .mask import SliceMask


class PathCmd(NamedTuple):
    d: PathData
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float = 0
    opacity: float | None = None
    mask: SliceMask | None = None
    index: int | None = None      # slice index, for selection
    role: str = "slice"           # "slice" or "leader"


class CircleCmd(NamedTuple):
    cx: float
    cy: float
    r: float
    fill: str
    opacity: float | None = None
    index: int | None = None
    role: str = "swatch"


class TextCmd(NamedTuple):
    x: float
    y: float
    text: str
    font_size: float
    fill: str
    anchor: str = "start"
    baseline: str | None = None
    dy: str | None = None
    weight: str = "normal"
    italic: bool = False
    opacity: float | None = None
    index: int | None = None
    role: str = "text"    # data-label, total, total-label, legend, more, message


class GroupCmd(NamedTuple):
    translate: Point
    children: list


DrawCommand = Union[PathCmd, CircleCmd, TextCmd, GroupCmd]


def walk(commands: list) -> list:
    """Flatten groups, depth first. Coordinates stay group-relative."""
    flat = []
    for cmd in commands:
        if isinstance(cmd, GroupCmd):
            flat.extend(walk(cmd.children))
        else:
            flat.append(cmd)
    return flat
