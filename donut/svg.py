"""SVG adapter: applies draw commands to an SVG document string."""
from html import escape

from .types import PathData, Viewport
from .commands import PathCmd, CircleCmd, TextCmd, GroupCmd
from .mask import SliceMask
from .constants import FONT_FAMILY, FADE_OPACITY

SVG_NS = "http://www.w3.org/2000/svg"


def _num(v) -> str:
    if isinstance(v, int):
        return str(v)
    return f"{v:.2f}"


def format_path(d: PathData) -> str:
    """Path data as an SVG `d` attribute, e.g. 'M 0.00 -10.00 A ... Z'."""
    return " ".join(" ".join([op[0], *(_num(v) for v in op[1:])]) for op in d)


def _opacity(op: float | None) -> str:
    return "" if op is None else f' opacity="{op:g}"'


# ============================================================
# Mask Definitions
# ============================================================
def mask_defs(defs: list, mask_id: str, mask: SliceMask):
    """<mask> (and its gradient) for one slice."""
    r = mask.radius
    if mask.kind == "faded":
        defs.append(f'<mask id="{mask_id}"><rect x="{-2*r:.2f}" y="{-2*r:.2f}"'
                    f' width="{4*r:.2f}" height="{4*r:.2f}" fill="white"'
                    f' opacity="{FADE_OPACITY}"/></mask>')
        return
    grad_id = mask_id.replace("mask", "gradient")
    defs.append(f'<radialGradient id="{grad_id}" cx="50%" cy="50%" r="50%"'
                f' gradientUnits="objectBoundingBox" spreadMethod="pad">')
    for st in mask.stops:
        defs.append(f'  <stop offset="{st.offset:.2f}%" stop-color="white" stop-opacity="{st.opacity:g}"/>')
    defs.append('</radialGradient>')
    defs.append(f'<mask id="{mask_id}"><circle cx="0" cy="0" r="{r:.2f}" fill="url(#{grad_id})"/></mask>')


# ============================================================
# Element Emitters
# ============================================================
def _path(out: list, defs: list, cmd: PathCmd):
    attrs = [f'd="{format_path(cmd.d)}"', f'fill="{cmd.fill or "none"}"']
    if cmd.stroke:
        attrs.append(f'stroke="{cmd.stroke}" stroke-width="{cmd.stroke_width:g}"')
    if cmd.index is not None and cmd.role == "slice":
        attrs.append(f'data-selection-id="{cmd.index}"')
    if cmd.mask is not None:
        mask_id = f"slice-mask-{cmd.index}"
        mask_defs(defs, mask_id, cmd.mask)
        attrs.append(f'mask="url(#{mask_id})"')
    out.append(f'<path class="{cmd.role}" ' + " ".join(attrs) + f'{_opacity(cmd.opacity)}/>')


def _circle(out: list, cmd: CircleCmd):
    out.append(f'<circle class="{cmd.role}" cx="{cmd.cx:.2f}" cy="{cmd.cy:.2f}" r="{cmd.r:g}"'
               f' fill="{cmd.fill}"{_opacity(cmd.opacity)}/>')


def _text(out: list, cmd: TextCmd):
    attrs = f'x="{cmd.x:.2f}" y="{cmd.y:.2f}" text-anchor="{cmd.anchor}"'
    if cmd.baseline:
        attrs += f' dominant-baseline="{cmd.baseline}"'
    if cmd.dy:
        attrs += f' dy="{cmd.dy}"'
    attrs += f' font-size="{cmd.font_size:g}" fill="{cmd.fill}"'
    if cmd.weight != "normal":
        attrs += f' font-weight="{cmd.weight}"'
    if cmd.italic:
        attrs += ' font-style="italic"'
    out.append(f'<text class="{cmd.role}" {attrs}{_opacity(cmd.opacity)}>{escape(cmd.text)}</text>')


def emit(out: list, defs: list, commands: list):
    for cmd in commands:
        if isinstance(cmd, GroupCmd):
            out.append(f'<g transform="translate({cmd.translate[0]:.2f}, {cmd.translate[1]:.2f})">')
            emit(out, defs, cmd.children)
            out.append('</g>')
        elif isinstance(cmd, PathCmd):
            _path(out, defs, cmd)
        elif isinstance(cmd, CircleCmd):
            _circle(out, cmd)
        elif isinstance(cmd, TextCmd):
            _text(out, cmd)
        else:
            raise TypeError(f"Unknown draw command: {cmd!r}")


def to_svg(commands: list, viewport: Viewport | tuple[float, float]) -> str:
    """Complete SVG document for a command list. Returns SVG string."""
    w, h = viewport
    body, defs = [], []
    emit(body, defs, commands)
    out = [f'<svg xmlns="{SVG_NS}" width="{w:g}" height="{h:g}" viewBox="0 0 {w:g} {h:g}"'
           f' font-family="{FONT_FAMILY}">']
    out.append(f'<rect class="background" width="{w:g}" height="{h:g}" fill="white"/>')
    if defs:
        out.append('<defs>')
        out.extend(defs)
        out.append('</defs>')
    out.extend(body)
    out.append('</svg>')
    return "\n".join(out)
