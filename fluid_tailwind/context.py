"""Resolve theme breakpoints into the read-only context shared by a build."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import FluidConfigError
from .length import CSSLength

ThemeFn = Callable[[str], Any]

SIDES = ("from", "to")


class BreakpointSet:
    """The simple-length entries of one raw theme breakpoint mapping."""

    def __init__(self, kind: str, raw: Mapping[str, Any]):
        self.kind = kind
        self.raw = dict(raw)
        self.breakpoints: Dict[str, CSSLength] = {}
        for name, value in self.raw.items():
            parsed = CSSLength.parse(value)
            if parsed is not None:
                self.breakpoints[name] = parsed

    @property
    def theme_key(self) -> str:
        return "containers" if self.kind == "container" else "screens"

    @property
    def defaults_key(self) -> str:
        return "defaultContainers" if self.kind == "container" else "defaultScreens"

    def _setting(self, side: str) -> str:
        return f"`theme.fluid.{self.defaults_key}[{SIDES.index(side)}]`"

    @cached_property
    def sorted(self) -> List[CSSLength]:
        values = list(self.breakpoints.values())
        if not values:
            raise FluidConfigError(
                f"Cannot infer fluid breakpoints because there are no simple values in `theme.{self.theme_key}`"
            )
        if len({value.unit for value in values}) > 1:
            raise FluidConfigError(
                f"Cannot infer fluid breakpoints because `theme.{self.theme_key}` contains values of different units"
            )
        return sorted(values, key=lambda value: value.number)

    def resolve_default(self, side: str, raw: Any) -> CSSLength:
        if isinstance(raw, str):
            parsed = CSSLength.parse(self.raw.get(raw, raw))
            if parsed is None or parsed.unit is None:
                raise FluidConfigError(f"Invalid value for {self._setting(side)}: {raw!r}")
            return parsed
        if raw is not None:
            raise FluidConfigError(f"Invalid value for {self._setting(side)}: {raw!r}")
        try:
            ordered = self.sorted
        except FluidConfigError as err:
            raise FluidConfigError(f"Cannot resolve {self._setting(side)}: {err}") from err
        return ordered[0] if side == "from" else ordered[-1]

    def resolve_defaults(self, setting: Any) -> Tuple[CSSLength, CSSLength]:
        raw_from, raw_to = _default_pair(setting, self.defaults_key)
        return self.resolve_default("from", raw_from), self.resolve_default("to", raw_to)


@dataclass(frozen=True)
class Context:
    screens: Dict[str, CSSLength]
    default_from_screen: CSSLength
    default_to_screen: CSSLength
    unit: str
    containers: Optional[Dict[str, CSSLength]] = None
    default_from_container: Optional[CSSLength] = None
    default_to_container: Optional[CSSLength] = None
    prefer_containers: bool = False
    theme: Optional[ThemeFn] = field(default=None, compare=False, repr=False)

    @property
    def has_containers(self) -> bool:
        return self.default_from_container is not None and self.default_to_container is not None

    def breakpoints(self, at_container: bool) -> Dict[str, CSSLength]:
        if at_container:
            return self.containers or {}
        return self.screens

    def default_breakpoints(self, at_container: bool) -> Tuple[CSSLength, CSSLength]:
        if at_container:
            if not self.has_containers:
                raise FluidConfigError("Container breakpoints require `theme.containers`")
            return self.default_from_container, self.default_to_container
        return self.default_from_screen, self.default_to_screen


def _default_pair(setting: Any, key: str) -> Tuple[Any, Any]:
    if setting is None:
        return None, None
    if isinstance(setting, str) or not isinstance(setting, Sequence) or len(setting) > 2:
        raise FluidConfigError(f"`theme.fluid.{key}` must be a list of at most two breakpoints")
    padded = list(setting) + [None] * (2 - len(setting))
    return padded[0], padded[1]


def get_context(theme: ThemeFn) -> Context:
    """Build the context for one plugin invocation; raises FluidConfigError."""
    fluid = theme("fluid") or {}
    if not isinstance(fluid, Mapping):
        raise FluidConfigError("`theme.fluid` must be a mapping")

    raw_screens = theme("screens") or {}
    screens = BreakpointSet("screen", raw_screens)
    from_screen, to_screen = screens.resolve_defaults(fluid.get("defaultScreens"))
    defaults = [from_screen, to_screen]

    containers: Optional[BreakpointSet] = None
    from_container = to_container = None
    raw_containers = theme("containers")
    if raw_containers:
        containers = BreakpointSet("container", raw_containers)
        from_container, to_container = containers.resolve_defaults(fluid.get("defaultContainers"))
        defaults += [from_container, to_container]

    units = {bp.unit for bp in defaults}
    if len(units) != 1 or None in units:
        raise FluidConfigError("All default fluid breakpoints must have the same units")

    prefer_containers = bool(fluid.get("preferContainers", False))
    if prefer_containers and containers is None:
        raise FluidConfigError("`theme.fluid.preferContainers` requires `theme.containers`")

    return Context(
        screens=screens.breakpoints,
        default_from_screen=from_screen,
        default_to_screen=to_screen,
        unit=from_screen.unit,
        containers=containers.breakpoints if containers is not None else None,
        default_from_container=from_container,
        default_to_container=to_container,
        prefer_containers=prefer_containers,
        theme=theme,
    )
