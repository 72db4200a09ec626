#!/usr/bin/env python3
"""lsystem_svg.py

A deterministic L-system renderer that writes SVG path data.

Key features:
- Single-character production rules, expanded one simultaneous pass at a time.
- Turtle interpretation with branching via push/pop ("[" and "]").
- Exact accumulation: turtle positions are Fractions, floats only appear
  inside the one cos/sin evaluation per forward step.
- Normalisation into a unit square, mapped onto the physical canvas with a
  single transform matrix.
- Byte-stable output: every coordinate is rounded to 7 decimal digits.

Run:
  python lsystem_svg.py draw F F 90 4 "F=>F+F-F-F+F" --width 100 -o koch.svg
  python lsystem_svg.py render example/plant.json -o plant.svg
  python lsystem_svg.py presets
  python lsystem_svg.py --help
"""

from __future__ import annotations

import argparse
import itertools
import json
import logging
import math
import os
import sys
from collections.abc import Generator, Iterable, Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from typing import Any, NamedTuple, TextIO, cast

logger = logging.getLogger(__name__)

# turn-left, turn-right, reverse-heading, push-state, pop-state
RESERVED = frozenset("+-|[]")

RULE_SEPARATOR = "=>"

# Digits kept for every number written into the document.
PRECISION = 7

PI = Fraction(Decimal("3.1415926535897932384626433833"))

_HALF = Fraction(1, 2)

# Grid for trig results before they enter exact accumulation.
_TRIG_QUANTUM = Decimal("1e-15")
_TRIG_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


# -------------------------
# Errors / Validation
# -------------------------


class ConfigError(ValueError):
    pass


class RenderError(RuntimeError):
    """A grammar that cannot be turned into a drawing."""


class UnbalancedBracketsError(RenderError):
    pass


class EmptyDrawingError(RenderError):
    pass


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def _as_int(x: Any, path: str) -> int:
    _require(
        isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer"
    )
    return int(x)


def _as_str(x: Any, path: str) -> str:
    _require(isinstance(x, str), f"{path} must be a string")
    return cast(str, x)


def _as_dict(x: Any, path: str) -> dict[str, Any]:
    _require(isinstance(x, dict), f"{path} must be an object")
    return cast(dict[str, Any], x)


def _as_decimal(x: Any, path: str) -> Decimal:
    """Accept ints, floats and numeric strings; floats go through repr so that
    90.1 means 90.1 and not its binary approximation."""
    _require(
        isinstance(x, (int, float, str)) and not isinstance(x, bool),
        f"{path} must be a number",
    )
    try:
        value = Decimal(repr(x)) if isinstance(x, float) else Decimal(x)
    except InvalidOperation as e:
        raise ConfigError(f"{path} must be a number, got {x!r}") from e
    _require(value.is_finite(), f"{path} must be finite")
    return value


# -------------------------
# Grammar model
# -------------------------


def degrees_to_radians(degrees: Decimal | int | str) -> Fraction:
    return Fraction(Decimal(degrees)) * PI / 180


@dataclass(frozen=True)
class LSystem:
    axiom: str
    # symbols that move the turtle forward and draw
    draw: frozenset[str]
    # turn angle in radians
    angle: Fraction
    iterations: int
    rules: dict[str, str] = field(default_factory=dict)


def parse_rule(text: str) -> tuple[str, str]:
    """Parse one rule of the form ``"F=>F+F"``."""
    symbol, sep, replacement = text.partition(RULE_SEPARATOR)
    _require(bool(sep), f"rule {text!r} must contain {RULE_SEPARATOR!r}")
    _check_rule(symbol, replacement, f"rule {text!r}")
    return symbol, replacement


def _check_rule(symbol: str, replacement: str, path: str) -> None:
    _require(
        len(symbol) == 1, f"{path}: {RULE_SEPARATOR} must be preceded by a single char"
    )
    _require(
        symbol not in RESERVED,
        f"{path}: '{symbol}' is a turtle command and cannot be rewritten",
    )
    _require(
        len(replacement) > 0,
        f"{path}: {RULE_SEPARATOR} must be followed by a replacement string",
    )


def parse_rules(texts: Iterable[str]) -> dict[str, str]:
    rules: dict[str, str] = {}
    for text in texts:
        symbol, replacement = parse_rule(text)
        _require(symbol not in rules, f"duplicate rule for '{symbol}'")
        rules[symbol] = replacement
    return rules


def missing_rules(lsystem: LSystem) -> set[str]:
    """Symbols that appear in the grammar but have no production."""
    seen = set(lsystem.axiom) | set(lsystem.draw)
    for replacement in lsystem.rules.values():
        seen.update(replacement)
    return {s for s in seen if s not in RESERVED and s not in lsystem.rules}


# -------------------------
# Expansion
# -------------------------


def expand(axiom: str, rules: Mapping[str, str], iterations: int) -> str:
    """Rewrite ``axiom`` ``iterations`` times.

    Every pass replaces all symbols simultaneously. Turtle commands are never
    rewritten and symbols without a rule rewrite to themselves.
    """
    _require(iterations >= 0, "iterations must be >= 0")

    state = axiom
    for generation in range(1, iterations + 1):
        state = "".join(ch if ch in RESERVED else rules.get(ch, ch) for ch in state)
        logger.debug("generation %d: %d symbols", generation, len(state))
    return state


def stream_expand(
    axiom: str, rules: Mapping[str, str], iterations: int
) -> Generator[str, None, None]:
    """Yield the symbols of ``expand(axiom, rules, iterations)`` in order
    without building the full string.

    Uses an explicit stack of (string, index, depth) frames.
    """
    _require(iterations >= 0, "iterations must be >= 0")

    stack: list[tuple[str, int, int]] = [(axiom, 0, 0)]

    while stack:
        s, i, d = stack.pop()
        if i >= len(s):
            continue

        ch = s[i]
        stack.append((s, i + 1, d))

        if d < iterations and ch in rules and ch not in RESERVED:
            # Replacement goes on top of its continuation so it is fully
            # traversed first.
            stack.append((rules[ch], 0, d + 1))
        else:
            yield ch


# -------------------------
# Turtle interpreter
# -------------------------


@dataclass(frozen=True)
class TurtleState:
    x: Fraction
    y: Fraction
    heading: Fraction

    @classmethod
    def initial(cls) -> TurtleState:
        # +y points down, so "up" is -90 degrees
        return cls(Fraction(0), Fraction(0), -PI / 2)


class Stroke(NamedTuple):
    x: Fraction
    y: Fraction
    # True when the point was reached by popping state: a new sub-path starts.
    move: bool


def _snap(value: float) -> Fraction:
    return Fraction(Decimal(value).quantize(_TRIG_QUANTUM, context=_TRIG_CONTEXT))


def _unit_step(heading: Fraction) -> tuple[Fraction, Fraction]:
    # cos/sin land on a fixed 15-digit grid so that cos(pi/2) is exactly 0
    rad = float(heading)
    return _snap(math.cos(rad)), _snap(math.sin(rad))


def interpret(
    symbols: Iterable[str],
    *,
    draw: Iterable[str],
    angle: Fraction,
    start: TurtleState | None = None,
) -> list[Stroke]:
    """Walk ``symbols`` once and return the stroke points in order.

    - ``+`` / ``-`` add / subtract ``angle`` from the heading
    - ``|`` negates the heading
    - ``[`` saves position and heading, ``]`` restores them and starts a new
      sub-path at the restored position
    - a symbol in ``draw`` moves one unit forward and records the new position
    - anything else is ignored
    """
    drawable = frozenset(draw)
    if start is None:
        start = TurtleState.initial()
    x, y, heading = start.x, start.y, start.heading

    strokes: list[Stroke] = []
    stack: list[TurtleState] = []

    for index, sym in enumerate(symbols):
        if sym == "+":
            heading += angle
        elif sym == "-":
            heading -= angle
        elif sym == "|":
            heading = -heading
        elif sym == "[":
            stack.append(TurtleState(x, y, heading))
        elif sym == "]":
            if not stack:
                raise UnbalancedBracketsError(
                    f"unbalanced brackets: ']' at symbol {index} has no matching '['"
                )
            st = stack.pop()
            x, y, heading = st.x, st.y, st.heading
            strokes.append(Stroke(x, y, True))
        elif sym in drawable:
            dx, dy = _unit_step(heading)
            x += dx
            y += dy
            strokes.append(Stroke(x, y, False))

    if stack:
        logger.debug("%d '[' left open at end of input", len(stack))
    logger.debug(
        "interpreted %d stroke points (%d sub-path breaks)",
        len(strokes),
        sum(1 for s in strokes if s.move),
    )
    return strokes


# -------------------------
# Normalisation
# -------------------------


class SvgUnit(Enum):
    NONE = ""
    EM = "em"
    EX = "ex"
    PX = "px"
    IN = "in"
    CM = "cm"
    MM = "mm"
    PT = "pt"
    PC = "pc"
    PERCENT = "%"

    @classmethod
    def parse(cls, text: str) -> SvgUnit:
        """Accept either the name (``"percent"``, ``"none"``) or the token
        written into the document (``"%"``, ``""``)."""
        key = text.strip().lower()
        for unit in cls:
            if key in (unit.name.lower(), unit.value):
                return unit
        choices = ", ".join(u.name.lower() for u in cls)
        raise ConfigError(f"unknown unit {text!r}; expected one of: {choices}")


@dataclass(frozen=True)
class Canvas:
    width: Decimal
    height: Decimal
    unit: SvgUnit = SvgUnit.MM

    def __post_init__(self) -> None:
        _require(self.width > 0, "canvas width must be > 0")
        _require(self.height > 0, "canvas height must be > 0")

    @property
    def scale(self) -> Decimal:
        return min(self.width, self.height)


class Bounds(NamedTuple):
    min_x: Fraction
    min_y: Fraction
    max_x: Fraction
    max_y: Fraction


def compute_bounds(strokes: Iterable[Stroke]) -> Bounds:
    it = iter(strokes)
    first = next(it, None)
    if first is None:
        raise EmptyDrawingError("no drawable geometry produced")
    min_x = max_x = first.x
    min_y = max_y = first.y
    for s in it:
        if s.x < min_x:
            min_x = s.x
        if s.x > max_x:
            max_x = s.x
        if s.y < min_y:
            min_y = s.y
        if s.y > max_y:
            max_y = s.y
    return Bounds(min_x, min_y, max_x, max_y)


def _centering_offset(size: Decimal, scale: Decimal) -> Fraction:
    return Fraction(size - scale) / Fraction(scale) / 2


def normalize(strokes: list[Stroke], canvas: Canvas) -> list[Stroke]:
    """Map stroke points into the unit square.

    Each axis is scaled by its own range. The canvas axis that is longer than
    ``canvas.scale`` gets a centering offset so that, after the serializer's
    ``matrix(scale, 0, 0, scale, 0, 0)``, the drawing sits in the middle of
    the canvas. An axis with zero range collapses onto 1/2.
    """
    bounds = compute_bounds(strokes)
    logger.debug("bounds: %s", bounds)

    range_x = bounds.max_x - bounds.min_x
    range_y = bounds.max_y - bounds.min_y
    offset_x = _centering_offset(canvas.width, canvas.scale)
    offset_y = _centering_offset(canvas.height, canvas.scale)

    def norm(v: Fraction, lo: Fraction, span: Fraction, offset: Fraction) -> Fraction:
        if not span:
            return _HALF + offset
        return (v - lo) / span + offset

    return [
        Stroke(
            norm(s.x, bounds.min_x, range_x, offset_x),
            norm(s.y, bounds.min_y, range_y, offset_y),
            s.move,
        )
        for s in strokes
    ]


# -------------------------
# SVG writing
# -------------------------


@dataclass(frozen=True)
class SvgStyle:
    stroke: str = "#000"
    stroke_linecap: str = "round"
    stroke_linejoin: str = "round"


def _ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)


def format_number(value: Fraction | Decimal | int, precision: int = PRECISION) -> str:
    """Round ``value`` half-to-even at ``precision`` digits.

    Trailing zeros are stripped and zero is always written as ``0``.
    """
    q = 10**precision
    scaled = round(Fraction(value) * q)
    if not scaled:
        return "0"
    sign = "-" if scaled < 0 else ""
    whole, frac = divmod(abs(scaled), q)
    if not frac:
        return f"{sign}{whole}"
    digits = f"{frac:0{precision}d}".rstrip("0")
    return f"{sign}{whole}.{digits}"


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def path_data(strokes: Iterable[Stroke]) -> str:
    commands: list[str] = []
    for i, s in enumerate(strokes):
        op = "M" if i == 0 or s.move else "L"
        commands.append(f"{op} {format_number(s.x)} {format_number(s.y)}")
    return " ".join(commands)


def svg_document(
    strokes: list[Stroke], canvas: Canvas, style: SvgStyle = SvgStyle()
) -> str:
    """Serialize normalised strokes into a complete SVG document."""
    w = format_number(canvas.width)
    h = format_number(canvas.height)
    scale = format_number(canvas.scale)
    unit = canvas.unit.value

    path_attrs = (
        f'fill="none" stroke="{_escape(style.stroke)}" '
        f'stroke-width="{format_number(1 / Fraction(canvas.scale))}" '
        f'stroke-linecap="{_escape(style.stroke_linecap)}" '
        f'stroke-linejoin="{_escape(style.stroke_linejoin)}" '
        f'transform="matrix({scale},0,0,{scale},0,0)"'
    )

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" '
        f'width="{w}{unit}" height="{h}{unit}" viewBox="0 0 {w} {h}" version="1.1">'
    )
    lines.append(f'  <path {path_attrs} d="{path_data(strokes)}"/>')
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def render_svg(lsystem: LSystem, canvas: Canvas, style: SvgStyle = SvgStyle()) -> str:
    """Run the whole pipeline in memory and return the SVG document."""
    for sym in sorted(missing_rules(lsystem)):
        logger.warning(
            'no replacement rule for %r; assuming self-replacement ("%s%s%s")',
            sym,
            sym,
            RULE_SEPARATOR,
            sym,
        )

    symbols = expand(lsystem.axiom, lsystem.rules, lsystem.iterations)
    strokes = interpret(symbols, draw=lsystem.draw, angle=lsystem.angle)
    return svg_document(normalize(strokes, canvas), canvas, style)


def render(
    lsystem: LSystem,
    canvas: Canvas,
    sink: TextIO,
    style: SvgStyle = SvgStyle(),
) -> None:
    """Render ``lsystem`` and write the document to ``sink``.

    Nothing is written unless the whole document was produced.
    """
    document = render_svg(lsystem, canvas, style)
    sink.write(document)


def write_svg(document: str, out_path: str) -> None:
    _ensure_parent_dir(out_path)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(document)
    logger.debug("wrote %d bytes to %s", len(document), out_path)


# -------------------------
# Config parsing
# -------------------------


@dataclass(frozen=True)
class RenderConfig:
    name: str
    lsystem: LSystem
    canvas: Canvas
    style: SvgStyle


def _parse_rules_field(obj: Any) -> dict[str, str]:
    if isinstance(obj, list):
        for i, text in enumerate(obj):
            _as_str(text, f"rules[{i}]")
        return parse_rules(obj)

    rules_obj = _as_dict(obj, "rules")
    rules: dict[str, str] = {}
    for k, v in rules_obj.items():
        replacement = _as_str(v, f"rules['{k}']")
        _check_rule(k, replacement, f"rules['{k}']")
        rules[k] = replacement
    return rules


def parse_config(obj: dict[str, Any]) -> RenderConfig:
    obj = _as_dict(obj, "root")

    name = _as_str(obj.get("name", "L-System"), "name")
    axiom = _as_str(obj.get("axiom", ""), "axiom")
    _require(len(axiom) > 0, "axiom must be non-empty")

    iterations = _as_int(obj.get("iterations", 0), "iterations")
    _require(iterations >= 0, "iterations must be >= 0")

    angle = _as_decimal(obj.get("angle", 90), "angle")
    rules = _parse_rules_field(obj.get("rules", []))

    draw = _as_str(obj.get("draw", ""), "draw")
    _require(len(draw) > 0, "draw must name at least one symbol")
    variables = set(axiom) | set(rules)
    for replacement in rules.values():
        variables.update(replacement)
    for sym in draw:
        _require(sym not in RESERVED, f"draw: '{sym}' is a turtle command")
        _require(sym in variables, f"draw: unknown variable '{sym}'")

    canvas_obj = _as_dict(obj.get("canvas", {}), "canvas")
    canvas = Canvas(
        width=_as_decimal(canvas_obj.get("width", 100), "canvas.width"),
        height=_as_decimal(canvas_obj.get("height", 100), "canvas.height"),
        unit=SvgUnit.parse(_as_str(canvas_obj.get("unit", "mm"), "canvas.unit")),
    )

    style_obj = _as_dict(obj.get("style", {}), "style")
    style = SvgStyle(
        stroke=_as_str(style_obj.get("stroke", "#000"), "style.stroke"),
        stroke_linecap=_as_str(
            style_obj.get("stroke_linecap", "round"), "style.stroke_linecap"
        ),
        stroke_linejoin=_as_str(
            style_obj.get("stroke_linejoin", "round"), "style.stroke_linejoin"
        ),
    )

    return RenderConfig(
        name=name,
        lsystem=LSystem(
            axiom=axiom,
            draw=frozenset(draw),
            angle=degrees_to_radians(angle),
            iterations=iterations,
            rules=rules,
        ),
        canvas=canvas,
        style=style,
    )


def load_json(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        try:
            return cast(dict[str, Any], json.load(f))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


# -------------------------
# Presets
# -------------------------

# Next to the module in a checkout; under <prefix>/share when installed.
PRESET_LOCATIONS = (
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "example", "presets.json"),
    os.path.join(sys.prefix, "share", "lsystem-svg", "presets.json"),
)


def find_presets(locations: Iterable[str] = PRESET_LOCATIONS) -> str:
    for path in locations:
        if os.path.isfile(path):
            return path
    raise ConfigError("no bundled presets found; pass --file PATH")


def load_presets(path: str | None = None) -> dict[str, RenderConfig]:
    """Load named configs from a ``{"presets": [...]}`` file, keyed by
    lower-cased name in file order. Without ``path`` the bundled file is used."""
    if path is None:
        path = find_presets()
    obj = _as_dict(load_json(path), "root")
    entries = obj.get("presets")
    _require(isinstance(entries, list), "presets must be a list")

    presets: dict[str, RenderConfig] = {}
    for i, entry in enumerate(cast(list[Any], entries)):
        entry = _as_dict(entry, f"presets[{i}]")
        _require("name" in entry, f"presets[{i}] must have a name")
        cfg = parse_config(entry)
        key = cfg.name.lower()
        _require(key not in presets, f"duplicate preset '{cfg.name}'")
        presets[key] = cfg
    return presets


# -------------------------
# CLI / Help
# -------------------------

HELP_EPILOG = r"""
GRAMMAR

  Rules are written "<symbol>=><replacement>", e.g. "F=>F+F-F-F+F".
  Symbols without a rule rewrite to themselves (a warning is logged).

  Turtle commands (never rewritten):
    +   turn left by the angle
    -   turn right by the angle
    |   reverse the heading
    [   save position and heading
    ]   restore the last saved state and start a new sub-path there

  Symbols listed in DRAW move the turtle one unit forward and draw.
  Every other symbol is ignored by the turtle.

INPUT JSON SYNTAX (render)

  {
    "name": "Koch",
    "axiom": "F",
    "draw": "F",
    "angle": 90,
    "iterations": 4,
    "rules": ["F=>F+F-F-F+F"],
    "canvas": {"width": 100, "height": 100, "unit": "mm"},
    "style": {"stroke": "#000", "stroke_linecap": "round"}
  }

  angle is in degrees. rules may also be an object {"F": "F+F-F-F+F"}.
  canvas.unit is one of: none, em, ex, px, in, cm, mm, pt, pc, percent.
"""


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lsystem-svg",
        description="Deterministic L-system renderer that outputs SVG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    pd = sub.add_parser("draw", help="Render an L-system given on the command line.")
    pd.add_argument("axiom", help="Initial string.")
    pd.add_argument("draw", help="Symbols that should be drawn, e.g. 'FG'.")
    pd.add_argument("angle", help="Turn angle in degrees.")
    pd.add_argument("iterations", type=int, help="Number of times the rules run.")
    pd.add_argument(
        "rules", nargs="*", help='Replacement rules, e.g. "F=>F+F-F-F+F".'
    )
    pd.add_argument("--width", default="100", help="Canvas width (default 100).")
    pd.add_argument("--height", default="100", help="Canvas height (default 100).")
    pd.add_argument("--unit", default="mm", help="Canvas unit (default mm).")
    pd.add_argument("-o", "--output", help="SVG path; stdout when omitted.")

    pr = sub.add_parser("render", help="Render a JSON config to SVG.")
    pr.add_argument("config", help="Path to the input JSON config.")
    pr.add_argument("-o", "--output", help="SVG path; stdout when omitted.")

    pv = sub.add_parser(
        "validate", help="Validate a JSON config and print a brief summary."
    )
    pv.add_argument("config", help="Path to the input JSON config.")

    pp = sub.add_parser("presets", help="List presets, or render one by name.")
    pp.add_argument("name", nargs="?", help="Preset to render.")
    pp.add_argument("-o", "--output", help="SVG path; stdout when omitted.")
    pp.add_argument(
        "--file", default=None, help="Presets JSON (default: bundled)."
    )

    return p


# -------------------------
# Commands
# -------------------------


def _emit(document: str, output: str | None) -> None:
    if output is None or output == "-":
        sys.stdout.write(document)
    else:
        write_svg(document, output)


def _render_config(cfg: RenderConfig, output: str | None) -> None:
    document = render_svg(cfg.lsystem, cfg.canvas, cfg.style)
    _emit(document, output)


def cmd_draw(args: argparse.Namespace) -> None:
    cfg = parse_config(
        {
            "axiom": args.axiom,
            "draw": args.draw,
            "angle": args.angle,
            "iterations": args.iterations,
            "rules": list(args.rules),
            "canvas": {"width": args.width, "height": args.height, "unit": args.unit},
        }
    )
    _render_config(cfg, args.output)


def cmd_render(config_path: str, output: str | None) -> None:
    _render_config(parse_config(load_json(config_path)), output)


_VALIDATE_SYMBOL_LIMIT = 10_000


def cmd_validate(config_path: str) -> None:
    cfg = parse_config(load_json(config_path))
    ls = cfg.lsystem

    print(f"name: {cfg.name}")
    print(f"axiom length: {len(ls.axiom)}")
    print(f"iterations: {ls.iterations}")
    print(f"rules: {len(ls.rules)}")
    print(f"draw: {''.join(sorted(ls.draw))}")
    print(
        "canvas: "
        f"{format_number(cfg.canvas.width)}x{format_number(cfg.canvas.height)}"
        f"{cfg.canvas.unit.value}"
    )
    for sym in sorted(missing_rules(ls)):
        print(f"warning: no replacement rule for '{sym}'")

    raw = stream_expand(ls.axiom, ls.rules, ls.iterations)
    bounded = list(itertools.islice(raw, _VALIDATE_SYMBOL_LIMIT))
    truncated = len(bounded) == _VALIDATE_SYMBOL_LIMIT
    strokes = interpret(bounded, draw=ls.draw, angle=ls.angle)
    sym_label = f"{len(bounded)}+" if truncated else str(len(bounded))
    print(f"symbols (sampled): {sym_label}")
    print(f"stroke points: {len(strokes)}")
    print(f"sub-paths: {1 + sum(1 for s in strokes[1:] if s.move) if strokes else 0}")
    if truncated:
        print(
            f"warning: expansion exceeds {_VALIDATE_SYMBOL_LIMIT} symbols; "
            "geometry stats are based on the first portion only"
        )
    if not strokes:
        raise ConfigError("Config produces no drawable geometry")


def cmd_presets(name: str | None, output: str | None, path: str | None) -> None:
    presets = load_presets(path)
    if name is None:
        for cfg in presets.values():
            print(cfg.name)
        return

    cfg = presets.get(name.lower())
    if cfg is None:
        available = ", ".join(c.name for c in presets.values())
        raise ConfigError(f"unknown preset {name!r}; available: {available}")
    _render_config(cfg, output)


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.cmd == "draw":
            cmd_draw(args)
        elif args.cmd == "render":
            cmd_render(args.config, args.output)
        elif args.cmd == "validate":
            cmd_validate(args.config)
        elif args.cmd == "presets":
            cmd_presets(args.name, args.output, args.file)
        else:
            raise AssertionError("unreachable")
    except ConfigError as e:
        logger.error("Config error: %s", e)
        return 2
    except RenderError as e:
        logger.error("Render error: %s", e)
        return 1
    except OSError as e:
        logger.error("File error: %s", e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
