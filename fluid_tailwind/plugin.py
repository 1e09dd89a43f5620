"""The fluid plugin: fluid core utilities, `~text` and breakpoint variants."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .api import PluginAPI, UtilityOptions, VariantOptions, add_variant_with_modifier
from .context import Context, get_context
from .core_plugins import CORE_PLUGINS
from .expr import generate_expr
from .intercept import FLUID_PREFIX, InterceptOptions, intercept_utilities
from .length import CSSLength
from .log import LogLevel, warn
from .precision import format_number, multiply
from .rewrite import BreakpointArg, make_dynamic, rewrite_exprs
from .values import parse_value, parse_values


def _number(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _loosely_equal(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if str(a) == str(b):
        return True
    number = _number(a)
    return number is not None and number == _number(b)


def _font_size_parts(value: Any) -> Tuple[Any, Dict[str, Any]]:
    if value is None:
        return None, {}
    if not isinstance(value, (list, tuple)):
        return value, {}
    size = value[0] if value else None
    options = value[1] if len(value) > 1 else {}
    if isinstance(options, (str, int, float)):
        options = {"lineHeight": str(options)}
    return size, dict(options or {})


def breakpoint_properties(from_bp: CSSLength, to_bp: CSSLength, is_container: bool = False) -> Dict[str, str]:
    return {
        "--fluid-from-bp": format_number(from_bp.number),
        "--fluid-to-bp": format_number(to_bp.number),
        "--fluid-scrubber": "100cqw" if is_container else "100vw",
    }


def _rewrite_variant(context: Context, breakpoints: Tuple[BreakpointArg, BreakpointArg], at_container: bool = False):
    def variant(container):
        return "&" if rewrite_exprs(container, context, breakpoints, at_container).keeps_rule else None

    return variant


def _add_fluid_text(api: PluginAPI, context: Context) -> None:
    at_container = context.prefer_containers
    from_bp, to_bp = context.default_breakpoints(at_container)

    def fluid_line(from_: CSSLength, to: CSSLength) -> str:
        if from_.number == to.number:
            return from_.css_text
        return generate_expr(from_, from_bp, to, to_bp, is_container=at_container)

    # only entries whose font size shares the context unit are offered as values
    values = {
        key: value
        for key, value in (api.theme("fontSize") or {}).items()
        if parse_value(_font_size_parts(value)[0], context)
    }
    default = values.get("DEFAULT")
    modifiers = {key: value for key, value in values.items() if key != "DEFAULT"}

    def fluid_text(value, modifier=None):
        if modifier is None and default is not None:
            modifier = default
        from_size, from_options = _font_size_parts(value)
        to_size, to_options = _font_size_parts(modifier)

        sizes = parse_values(from_size, to_size, context, LogLevel.WARN)
        if sizes is None:
            return None
        rules: Dict[str, Any] = {
            "font-size": generate_expr(
                sizes[0], from_bp, sizes[1], to_bp, is_container=at_container, check_accessibility=True
            )
        }

        from_lh, to_lh = from_options.get("lineHeight"), to_options.get("lineHeight")
        if _loosely_equal(from_lh, to_lh):
            rules["line-height"] = from_lh
        else:
            from_len = parse_value(from_lh, context)
            to_len = parse_value(to_lh, context)
            # a unitless line height next to a length is relative to its font size
            if from_len is None and to_len is not None and _number(from_lh) is not None:
                from_len = CSSLength(multiply(sizes[0].number, _number(from_lh)), sizes[0].unit)
            elif from_len is not None and to_len is None and _number(to_lh) is not None:
                to_len = CSSLength(multiply(sizes[1].number, _number(to_lh)), sizes[1].unit)
            if from_len is None or to_len is None:
                warn("missing-values", "Attempted to set fluid text with incompatible line heights")
                return None
            rules["line-height"] = fluid_line(from_len, to_len)

        from_ls, to_ls = from_options.get("letterSpacing"), to_options.get("letterSpacing")
        if _loosely_equal(from_ls, to_ls):
            rules["letter-spacing"] = from_ls
        else:
            spacing = parse_values(from_ls, to_ls, context, LogLevel.WARN)
            if spacing is None:
                return None
            rules["letter-spacing"] = generate_expr(spacing[0], from_bp, spacing[1], to_bp, is_container=at_container)

        from_fw, to_fw = from_options.get("fontWeight"), to_options.get("fontWeight")
        if not _loosely_equal(from_fw, to_fw):
            return None
        rules["font-weight"] = from_fw
        return rules

    api.match_utilities(
        {f"{FLUID_PREFIX}text": fluid_text},
        UtilityOptions(
            values=values,
            modifiers=modifiers,
            type=("absolute-size", "relative-size", "length", "percentage"),
        ),
    )


def _add_breakpoint_properties(api: PluginAPI, context: Context, at_container: bool) -> None:
    raw = api.theme("containers" if at_container else "screens") or {}
    values = {key: value for key, value in raw.items() if isinstance(value, str)}
    default_from, default_to = context.default_breakpoints(at_container)

    def producer(value, modifier=None):
        from_bp = parse_value(value, context, LogLevel.WARN) if value else default_from
        to_bp = parse_value(modifier, context, LogLevel.WARN) if modifier else default_to
        if from_bp is None or to_bp is None:
            return None
        if from_bp.number == to_bp.number:
            warn("no-change", "Fluid utilities require two distinct breakpoints")
            return None
        return breakpoint_properties(from_bp, to_bp, at_container)

    name = f"{FLUID_PREFIX}@bps" if at_container else f"{FLUID_PREFIX}bps"
    api.match_utilities(
        {name: producer},
        UtilityOptions(values={**values, "DEFAULT": None}, modifiers=values, type=("length",)),
    )


def _add_screen_variants(api: PluginAPI, context: Context) -> None:
    screens = context.screens
    if "DEFAULT" in screens:
        warn("inaccessible-breakpoint", "Your DEFAULT screen breakpoint must be renamed to be used in fluid variants")

    for s1_key, s1 in screens.items():
        for s2_key, s2 in screens.items():
            if s2_key == s1_key:
                continue
            api.add_variant(f"~{s1_key}/{s2_key}", _rewrite_variant(context, (s1, s2)))

        def from_screen(container, modifier=None, s1=s1):
            return "&" if rewrite_exprs(container, context, (s1, modifier)).keeps_rule else None

        add_variant_with_modifier(api, f"~{s1_key}", from_screen)
        api.add_variant(f"~/{s1_key}", _rewrite_variant(context, (None, s1)))

    def to_arbitrary(container, modifier=None):
        return "&" if rewrite_exprs(container, context, (None, modifier)).keeps_rule else None

    def from_min(container, value=None, modifier=None):
        return "&" if rewrite_exprs(container, context, (value, modifier)).keeps_rule else None

    add_variant_with_modifier(api, "~", to_arbitrary)
    api.match_variant("~min", from_min)


def _add_container_variants(api: PluginAPI, context: Context) -> None:
    containers = context.containers or {}
    if "DEFAULT" in containers:
        warn(
            "inaccessible-breakpoint",
            "Your DEFAULT container breakpoint must be renamed to be used in fluid variants",
        )

    for c1_key, c1 in containers.items():
        for c2_key, c2 in containers.items():
            if c2_key == c1_key:
                continue
            api.add_variant(f"~@{c1_key}/{c2_key}", _rewrite_variant(context, (c1, c2), True))

        def from_container(container, modifier=None, c1=c1):
            return "&" if rewrite_exprs(container, context, (c1, modifier), True).keeps_rule else None

        add_variant_with_modifier(api, f"~@{c1_key}", from_container)
        api.add_variant(f"~@/{c1_key}", _rewrite_variant(context, (None, c1), True))

    def at_container(container, value=None, modifier=None):
        return "&" if rewrite_exprs(container, context, (value, modifier), True).keeps_rule else None

    # DEFAULT lets `~@/...` and bare `~@` fall back to theme.fluid.defaultContainers
    api.match_variant("~@", at_container, VariantOptions(values={**containers, "DEFAULT": None}))


def fluid_core_plugins(api: PluginAPI) -> None:
    context = get_context(api.theme)

    intercepted = intercept_utilities(api, context, InterceptOptions(add_original=False, transform={"text": None}))
    for name, plugin in CORE_PLUGINS.items():
        if api.core_plugin_enabled(name):
            plugin(intercepted)

    _add_fluid_text(api, context)
    _add_breakpoint_properties(api, context, at_container=False)
    _add_screen_variants(api, context)
    if context.has_containers:
        _add_breakpoint_properties(api, context, at_container=True)
        _add_container_variants(api, context)

    api.add_variant("~vars", lambda container: "&" if make_dynamic(container).keeps_rule else None)
