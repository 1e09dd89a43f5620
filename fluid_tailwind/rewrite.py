"""Regenerate fluid declarations for a different breakpoint pair."""

from __future__ import annotations

import re
from dataclasses import replace
from enum import Enum
from typing import List, Optional, Tuple, Union

from .context import Context
from .css import Declaration, RuleContainer
from .errors import FluidValueError
from .expr import FluidExpr, FluidValue, generate_expr, regenerate
from .length import CSSLength
from .log import LogLevel, warn
from .values import parse_value

ARBITRARY_RE = re.compile(r"^\[(.*?)\]$")

BreakpointArg = Union[CSSLength, str, None]


class RewriteOutcome(Enum):
    REWRITTEN = "rewritten"
    NO_FLUID = "no-fluid"
    NO_CHANGE = "no-change"
    INVALID = "invalid"

    @property
    def keeps_rule(self) -> bool:
        return self in (RewriteOutcome.REWRITTEN, RewriteOutcome.NO_FLUID)


def resolve_breakpoint(raw: BreakpointArg, context: Context, at_container: bool) -> Optional[CSSLength]:
    """Resolve a breakpoint argument; None means "use the default".

    Strings are looked up by name first, then parsed as a length
    (`[...]` brackets are stripped). Raises FluidValueError when unusable.
    """
    if raw is None or isinstance(raw, CSSLength):
        return raw
    match = ARBITRARY_RE.match(raw)
    if match:
        raw = match.group(1)
    else:
        named = context.breakpoints(at_container).get(raw)
        if named is not None:
            return named
    return parse_value(raw, context, LogLevel.RISK)


def _apply(targets: List[Tuple[Declaration, FluidValue]]) -> RewriteOutcome:
    for decl, value in targets:
        decl.replace_value(value)
    return RewriteOutcome.REWRITTEN


def _fluid_decls(container: RuleContainer) -> List[Tuple[Declaration, FluidExpr]]:
    found = []
    for decl in container.walk_decls():
        expr = decl.expr
        if expr is not None:
            found.append((decl, expr))
    return found


def rewrite_exprs(
    container: RuleContainer,
    context: Context,
    breakpoints: Tuple[BreakpointArg, BreakpointArg],
    at_container: Union[bool, str] = False,
) -> RewriteOutcome:
    """Rewrite every fluid declaration in `container` for a new breakpoint pair.

    Either every fluid declaration is rewritten or none is.
    """
    is_container = bool(at_container)
    container_name = at_container if isinstance(at_container, str) else None
    if is_container and not context.has_containers:
        return RewriteOutcome.INVALID
    try:
        from_bp = resolve_breakpoint(breakpoints[0], context, is_container)
        to_bp = resolve_breakpoint(breakpoints[1], context, is_container)
    except FluidValueError:
        return RewriteOutcome.INVALID
    default_from, default_to = context.default_breakpoints(is_container)
    from_bp = from_bp or default_from
    to_bp = to_bp or default_to

    found = _fluid_decls(container)
    if not found:
        return RewriteOutcome.NO_FLUID
    if from_bp.number == to_bp.number:
        warn("no-change", "Fluid utilities require two distinct breakpoints")
        return RewriteOutcome.NO_CHANGE

    targets = []
    for decl, expr in found:
        try:
            value = generate_expr(
                expr.from_,
                from_bp,
                expr.to,
                to_bp,
                is_container=is_container,
                container_name=container_name,
                check_accessibility=expr.check_accessibility,
                dynamic=expr.dynamic,
            )
        except FluidValueError as err:
            warn(err.category, err.message)
            return RewriteOutcome.INVALID
        targets.append((decl, value))
    return _apply(targets)


def make_dynamic(container: RuleContainer) -> RewriteOutcome:
    """Switch fluid declarations to read breakpoints from custom properties."""
    found = _fluid_decls(container)
    if not found:
        return RewriteOutcome.NO_FLUID
    targets = []
    for decl, expr in found:
        try:
            value = regenerate(replace(expr, dynamic=True, failing_bp=None))
        except FluidValueError as err:
            warn(err.category, err.message)
            return RewriteOutcome.INVALID
        targets.append((decl, value))
    return _apply(targets)
