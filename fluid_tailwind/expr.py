"""Generate fluid `clamp()` expressions and decode the ones we generated.

Every generated value ends with a metadata comment::

    clamp(1rem, 0.5rem + 2.5vw, 2rem) /* fluid from 1rem at 20rem to 2rem at 60rem */

The comment is the only thing `parse_expr` reads, so a value can be rewritten
for another breakpoint pair later in the same build. Values returned by
`generate_expr` are `FluidValue` strings that also carry the decoded form on
`.expr`, which callers holding the object can use without re-parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import FluidValueError
from .length import CSSLength
from .precision import decimal_places, to_precision

ACCESSIBILITY_MARKER = "SC 1.4.4"
ZOOM = 5
MIN_GROWTH = 2

CONTAINER_NAME_RE = re.compile(r"^[\w-]+$")
# markers that follow the container name in the comment
RESERVED_NAMES = {"dynamic", "SC"}

EXPR_RE = re.compile(
    r"/\* fluid from (?P<from>\S+) at (?P<from_bp>\S+) to (?P<to>\S+) at (?P<to_bp>\S+)"
    r"(?P<container> container(?: (?!(?:dynamic|SC)(?= |\*))(?P<name>[\w-]+))?)?"
    r"(?P<dynamic> dynamic)?"
    r"(?P<a11y> SC 1\.4\.4(?: fails at (?P<failing>\S+))?)?"
    r" \*/\s*$"
)


@dataclass(frozen=True)
class FluidExpr:
    from_: CSSLength
    from_bp: CSSLength
    to: CSSLength
    to_bp: CSSLength
    is_container: bool = False
    container_name: Optional[str] = None
    check_accessibility: bool = False
    failing_bp: Optional[CSSLength] = None
    dynamic: bool = False

    @property
    def comment(self) -> str:
        parts = [
            f"fluid from {self.from_.css_text} at {self.from_bp.css_text}"
            f" to {self.to.css_text} at {self.to_bp.css_text}"
        ]
        if self.is_container:
            parts.append("container" if not self.container_name else f"container {self.container_name}")
        if self.dynamic:
            parts.append("dynamic")
        if self.check_accessibility:
            marker = ACCESSIBILITY_MARKER
            if self.failing_bp is not None:
                marker += f" fails at {self.failing_bp.css_text}"
            parts.append(marker)
        return f"/* {' '.join(parts)} */"


class FluidValue(str):
    """CSS value text with its `FluidExpr` attached as `.expr`."""

    expr: FluidExpr

    def __new__(cls, text: str, expr: FluidExpr):
        value = super().__new__(cls, text)
        value.expr = expr
        return value


def _line(from_: CSSLength, from_bp: CSSLength, to: CSSLength, to_bp: CSSLength) -> Tuple[float, float]:
    slope = (to.number - from_.number) / (to_bp.number - from_bp.number)
    intercept = from_.number - from_bp.number * slope
    return slope, intercept


def _clamp(low: float, value: float, high: float) -> float:
    return max(low, min(value, high))


def find_inaccessible_breakpoint(
    from_: CSSLength,
    from_bp: CSSLength,
    to: CSSLength,
    to_bp: CSSLength,
) -> Optional[CSSLength]:
    """Return the first breakpoint failing WCAG SC 1.4.4, or None.

    Width units do not scale with browser zoom, so the zoomed curve keeps the
    slope while the bounds and intercept grow by the zoom factor.
    """
    slope, intercept = _line(from_, from_bp, to, to_bp)
    low, high = sorted((from_.number, to.number))

    def zoom1(width: float) -> float:
        return _clamp(low, intercept + slope * width, high)

    def zoom5(width: float) -> float:
        return _clamp(ZOOM * low, ZOOM * intercept + slope * width, ZOOM * high)

    if ZOOM * from_.number < MIN_GROWTH * zoom1(ZOOM * from_bp.number):
        return from_bp
    if zoom5(to_bp.number) < MIN_GROWTH * to.number:
        return to_bp
    return None


def _static_body(expr: FluidExpr, slope: float, intercept: float, precision: int) -> str:
    unit = expr.from_.unit or ""
    width_unit = "cqw" if expr.is_container else "vw"
    low, high = sorted((expr.from_.number, expr.to.number))
    min_text = f"{to_precision(low, precision)}{unit}"
    max_text = f"{to_precision(high, precision)}{unit}"
    slope_text = f"{to_precision(slope * 100, precision)}{width_unit}"
    if intercept < 0 and slope > 0:
        preferred = f"{slope_text} - {to_precision(-intercept, precision)}{unit}"
    else:
        preferred = f"{to_precision(intercept, precision)}{unit} + {slope_text}"
    return f"clamp({min_text}, {preferred}, {max_text})"


def _dynamic_body(expr: FluidExpr, precision: int) -> str:
    unit = expr.from_.unit or ""
    if expr.from_bp.unit != unit:
        raise FluidValueError(
            "mismatching-units",
            f"Dynamic fluid values need breakpoints in {unit} (got {expr.from_bp.css_text})",
        )
    scrubber = "100cqw" if expr.is_container else "100vw"
    low, high = sorted((expr.from_.number, expr.to.number))
    from_bp = f"var(--fluid-from-bp, {to_precision(expr.from_bp.number, precision)})"
    to_bp = f"var(--fluid-to-bp, {to_precision(expr.to_bp.number, precision)})"
    delta = to_precision(expr.to.number - expr.from_.number, precision)
    preferred = (
        f"calc({expr.from_.css_text} + {delta} * (var(--fluid-scrubber, {scrubber}) - {from_bp} * 1{unit})"
        f" / ({to_bp} - {from_bp}))"
    )
    return (
        f"clamp({to_precision(low, precision)}{unit}, {preferred}, {to_precision(high, precision)}{unit})"
    )


def generate_expr(
    from_: CSSLength,
    from_bp: CSSLength,
    to: CSSLength,
    to_bp: CSSLength,
    *,
    is_container: bool = False,
    container_name: Optional[str] = None,
    check_accessibility: bool = False,
    dynamic: bool = False,
) -> FluidValue:
    if from_.unit != to.unit:
        raise FluidValueError("mismatching-units", f"Cannot interpolate {from_.css_text} to {to.css_text}")
    if from_bp.unit != to_bp.unit:
        raise FluidValueError(
            "mismatching-units", f"Breakpoints {from_bp.css_text} and {to_bp.css_text} use different units"
        )
    if from_bp.number == to_bp.number:
        raise FluidValueError("no-change", "Fluid breakpoints must be distinct")
    if is_container and container_name is not None:
        if not CONTAINER_NAME_RE.match(container_name) or container_name in RESERVED_NAMES:
            raise FluidValueError("invalid-container-name", f"Cannot use {container_name!r} as a container name")

    precision = max(
        decimal_places(from_.number),
        decimal_places(from_bp.number),
        decimal_places(to.number),
        decimal_places(to_bp.number),
        2,
    )
    slope, intercept = _line(from_, from_bp, to, to_bp)
    failing_bp = None
    if check_accessibility:
        failing_bp = find_inaccessible_breakpoint(from_, from_bp, to, to_bp)

    expr = FluidExpr(
        from_=from_,
        from_bp=from_bp,
        to=to,
        to_bp=to_bp,
        is_container=is_container,
        container_name=container_name if is_container else None,
        check_accessibility=check_accessibility,
        failing_bp=failing_bp,
        dynamic=dynamic,
    )
    if failing_bp is not None:
        body = from_.css_text
    elif dynamic:
        body = _dynamic_body(expr, precision)
    else:
        body = _static_body(expr, slope, intercept, precision)
    return FluidValue(f"{body} {expr.comment}", expr)


def regenerate(expr: FluidExpr) -> FluidValue:
    return generate_expr(
        expr.from_,
        expr.from_bp,
        expr.to,
        expr.to_bp,
        is_container=expr.is_container,
        container_name=expr.container_name,
        check_accessibility=expr.check_accessibility,
        dynamic=expr.dynamic,
    )


def parse_expr(css_value: str) -> Optional[FluidExpr]:
    """Decode the metadata comment of a generated value; None if absent."""
    if isinstance(css_value, FluidValue):
        return css_value.expr
    match = EXPR_RE.search(css_value or "")
    if not match:
        return None
    lengths = [CSSLength.parse(match.group(key)) for key in ("from", "from_bp", "to", "to_bp")]
    if any(length is None for length in lengths):
        return None
    from_, from_bp, to, to_bp = lengths
    failing = match.group("failing")
    return FluidExpr(
        from_=from_,
        from_bp=from_bp,
        to=to,
        to_bp=to_bp,
        is_container=match.group("container") is not None,
        container_name=match.group("name"),
        check_accessibility=match.group("a11y") is not None,
        failing_bp=CSSLength.parse(failing) if failing else None,
        dynamic=match.group("dynamic") is not None,
    )
