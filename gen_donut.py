"""Generate a donut chart SVG from a JSON rows file.

Data file: {"rows": [[category, value, highlight], ...], "categorical": true}
Settings file (optional): {"legend": {"position": "left-center"}, ...}
"""
import argparse
import json
import logging
import sys

from donut import Palette, load_settings, render, to_svg

logger = logging.getLogger("gen_donut")


def _load_json(path: str, what: str):
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"[gen_donut] ERROR: cannot read {what} {path}: {exc}")


def build_svg(data: dict, objects: dict | None, width: float, height: float) -> tuple[str, str]:
    """Render one chart. Returns (outcome, svg)."""
    rows = [tuple(r) + (None,) * (3 - len(r)) for r in data.get("rows", [])]
    result = render(rows, (width, height), load_settings(objects), Palette(),
                    categorical=data.get("categorical", True))
    if result.reason:
        logger.warning("render faulted: %s", result.reason)
    return result.outcome, to_svg(result.commands, (width, height))


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data", required=True)
    parser.add_argument("--settings")
    parser.add_argument("--width", type=float, default=600)
    parser.add_argument("--height", type=float, default=400)
    parser.add_argument("--output", required=True)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    data = _load_json(args.data, "data")
    objects = _load_json(args.settings, "settings") if args.settings else None
    if not isinstance(data, dict):
        raise SystemExit("[gen_donut] ERROR: data file must hold an object with 'rows'.")

    outcome, svg = build_svg(data, objects, args.width, args.height)
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(svg)
    logger.info("%s: wrote %s", outcome, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
