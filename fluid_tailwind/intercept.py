"""Give every length-valued utility a fluid `~` counterpart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from .api import Plugin, PluginAPI, UtilityFn, UtilityOptions, VariantFn, VariantOptions
from .context import Context, get_context
from .expr import generate_expr
from .log import LogLevel
from .values import parse_value, parse_values

FLUID_PREFIX = "~"
LENGTH_TYPES = {"length", "any"}

TransformValueFn = Callable[[Any], Any]


def first_value(value: Any) -> Any:
    """Reduce multi-part theme values such as `("1rem", "1.5rem")` to their first part."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


@dataclass
class InterceptOptions:
    add_original: bool = True
    # utility name (or "DEFAULT") -> transform; None excludes the utility
    transform: Dict[str, Optional[TransformValueFn]] = field(default_factory=dict)
    strict: bool = False


class InterceptedAPI(PluginAPI):
    def __init__(self, api: PluginAPI, context: Context, options: InterceptOptions):
        self.api = api
        self.context = context
        self.options = options

    @property
    def level(self) -> LogLevel:
        return LogLevel.RISK if self.options.strict else LogLevel.WARN

    def theme(self, path: str, default: Any = None) -> Any:
        return self.api.theme(path, default)

    def core_plugin_enabled(self, name: str) -> bool:
        return self.api.core_plugin_enabled(name)

    def add_utilities(self, utilities: Dict[str, Dict[str, Any]]) -> None:
        if self.options.add_original:
            self.api.add_utilities(utilities)

    def add_variant(self, name: str, definition: Union[str, VariantFn]) -> None:
        if self.options.add_original:
            self.api.add_variant(name, definition)

    def match_variant(self, name: str, fn: VariantFn, options: Optional[VariantOptions] = None) -> None:
        if self.options.add_original:
            self.api.match_variant(name, fn, options)

    def _is_excluded(self, name: str) -> bool:
        return name in self.options.transform and self.options.transform[name] is None

    def _transform(self, name: str) -> TransformValueFn:
        transform = self.options.transform.get(name) or self.options.transform.get("DEFAULT")
        return transform or first_value

    @staticmethod
    def _apply(transform: TransformValueFn, value: Any) -> Any:
        if value is None:
            return None
        transformed = transform(value)
        return value if transformed is None else transformed

    def _filter_values(self, names: List[str], values: Dict[str, Any]) -> Dict[str, Any]:
        transforms = list(dict.fromkeys(self._transform(name) for name in names))
        return {
            key: value
            for key, value in values.items()
            if all(parse_value(self._apply(t, value), self.context) for t in transforms)
        }

    def match_utilities(self, utilities: Dict[str, UtilityFn], options: Optional[UtilityOptions] = None) -> None:
        options = options or UtilityOptions()
        if self.options.add_original:
            self.api.match_utilities(utilities, options)
        if options.type and not LENGTH_TYPES.intersection(options.type):
            return

        names = [name for name in utilities if not self._is_excluded(name)]
        if not names:
            return
        values = self._filter_values(names, options.values)
        # The DEFAULT value doubles as the modifier when none is given
        default = values.get("DEFAULT")
        modifiers = {key: value for key, value in values.items() if key != "DEFAULT"}

        self.api.match_utilities(
            {f"{FLUID_PREFIX}{name}": self._fluid_utility(name, utilities[name], default) for name in names},
            UtilityOptions(
                values=values,
                modifiers=modifiers,
                type=options.type,
                # negation would apply to the value but not the modifier
                supports_negative_values=False,
            ),
        )

    match_components = match_utilities

    def _fluid_utility(self, name: str, original: UtilityFn, default: Any) -> UtilityFn:
        transform = self._transform(name)
        context = self.context

        def fluid(value, modifier=None):
            if modifier is None and default is not None:
                modifier = default
            parsed = parse_values(
                self._apply(transform, value),
                self._apply(transform, modifier),
                context,
                self.level,
            )
            if parsed is None:
                return None
            from_, to = parsed
            at_container = context.prefer_containers
            from_bp, to_bp = context.default_breakpoints(at_container)
            return original(generate_expr(from_, from_bp, to, to_bp, is_container=at_container), modifier=None)

        fluid.__name__ = f"fluid_{name}"
        return fluid


def intercept_utilities(
    api: PluginAPI,
    context: Context,
    options: Optional[InterceptOptions] = None,
) -> PluginAPI:
    return InterceptedAPI(api, context, options or InterceptOptions())


def fluidize(plugin: Plugin, options: Optional[InterceptOptions] = None) -> Plugin:
    """Wrap a plugin so its length utilities also get fluid versions."""

    def handler(api: PluginAPI) -> None:
        plugin(intercept_utilities(api, get_context(api.theme), options))

    handler.__name__ = f"fluid_{getattr(plugin, '__name__', 'plugin')}"
    return handler
