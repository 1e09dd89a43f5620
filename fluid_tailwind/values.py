"""Validation of candidate utility values before they reach the generator."""

from __future__ import annotations

import re
from typing import Any, Optional, Tuple

from .context import Context
from .errors import FluidValueError
from .length import CSSLength
from .log import LogLevel, warn

THEME_FN_RE = re.compile(r"^([+-]?)theme\((.*?)\)$")


def _fail(category: str, message: str, level: Optional[LogLevel]) -> None:
    if level is None:
        return None
    warn(category, message)
    if level is LogLevel.RISK:
        raise FluidValueError(category, message)
    return None


def resolve_theme_function(value: str, context: Context) -> Any:
    """Expand `theme(path)` (optionally signed) using the context's theme."""
    match = THEME_FN_RE.match(value.strip())
    if not match or context.theme is None:
        return value
    sign, lookup = match.groups()
    resolved = context.theme(lookup.strip().strip("'\""))
    if not isinstance(resolved, str):
        return resolved
    return f"{sign}{resolved}"


def parse_value(raw: Any, context: Context, level: Optional[LogLevel] = None) -> Optional[CSSLength]:
    if not raw:
        return None
    if isinstance(raw, str):
        raw = resolve_theme_function(raw, context)
    value = CSSLength.parse(raw)
    if value is None:
        return _fail("non-lengths", "Fluid utilities can only work with length values", level)
    if value.unit is None:
        # unitless zero
        value = CSSLength(value.number, context.unit)
    if value.unit != context.unit:
        return _fail(
            "mismatching-units",
            f"Fluid units must all match (expected {context.unit}, got {value.css_text})",
            level,
        )
    return value


def parse_values(
    raw_from: Any,
    raw_to: Any,
    context: Context,
    level: Optional[LogLevel] = None,
) -> Optional[Tuple[CSSLength, CSSLength]]:
    if not raw_from or not raw_to:
        return _fail("missing-values", "Fluid utilities require two values", level)
    from_ = parse_value(raw_from, context, level)
    to = parse_value(raw_to, context, level)
    if from_ is None or to is None:
        return None
    if from_.number == to.number:
        return _fail("no-change", "Fluid utilities require two distinct values", level)
    return from_, to
