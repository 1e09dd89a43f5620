from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .api import PluginAPI, UtilityOptions

LENGTH_TYPES = ("length", "percentage")
SIBLINGS = "& > :not([hidden]) ~ :not([hidden])"

PSEUDO_PREFIXES = {
    "hover": ":hover",
    "focus": ":focus",
    "active": ":active",
    "disabled": ":disabled",
}

DISPLAY = {
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "hidden": "none",
}


def _props(*props: str):
    def producer(value, modifier=None):
        return {prop: value for prop in props}

    return producer


def _values(api: PluginAPI, key: str, extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    values = dict(api.theme(key) or {})
    values.update(extra or {})
    return values


def flatten_colors(colors: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for name, value in colors.items():
        key = f"{prefix}-{name}" if prefix else name
        if isinstance(value, Mapping):
            flat.update(flatten_colors(value, key))
        else:
            flat[key] = value
    return flat


def padding(api: PluginAPI) -> None:
    api.match_utilities(
        {
            "p": _props("padding"),
            "px": _props("padding-left", "padding-right"),
            "py": _props("padding-top", "padding-bottom"),
            "pt": _props("padding-top"),
            "pr": _props("padding-right"),
            "pb": _props("padding-bottom"),
            "pl": _props("padding-left"),
        },
        UtilityOptions(values=_values(api, "spacing"), type=LENGTH_TYPES),
    )


def margin(api: PluginAPI) -> None:
    api.match_utilities(
        {
            "m": _props("margin"),
            "mx": _props("margin-left", "margin-right"),
            "my": _props("margin-top", "margin-bottom"),
            "mt": _props("margin-top"),
            "mr": _props("margin-right"),
            "mb": _props("margin-bottom"),
            "ml": _props("margin-left"),
        },
        UtilityOptions(
            values=_values(api, "spacing", {"auto": "auto"}),
            type=LENGTH_TYPES,
            supports_negative_values=True,
        ),
    )


def gap(api: PluginAPI) -> None:
    api.match_utilities(
        {"gap": _props("gap"), "gap-x": _props("column-gap"), "gap-y": _props("row-gap")},
        UtilityOptions(values=_values(api, "spacing"), type=LENGTH_TYPES),
    )


def space(api: PluginAPI) -> None:
    api.match_utilities(
        {
            "space-x": lambda value, modifier=None: {SIBLINGS: {"margin-left": value}},
            "space-y": lambda value, modifier=None: {SIBLINGS: {"margin-top": value}},
        },
        UtilityOptions(values=_values(api, "spacing"), type=LENGTH_TYPES, supports_negative_values=True),
    )


def inset(api: PluginAPI) -> None:
    api.match_utilities(
        {
            "inset": _props("top", "right", "bottom", "left"),
            "top": _props("top"),
            "right": _props("right"),
            "bottom": _props("bottom"),
            "left": _props("left"),
        },
        UtilityOptions(
            values=_values(api, "spacing", {"auto": "auto", "full": "100%", "1/2": "50%"}),
            type=LENGTH_TYPES,
            supports_negative_values=True,
        ),
    )


def sizing(api: PluginAPI) -> None:
    api.match_utilities({"w": _props("width")}, UtilityOptions(values=_values(api, "width"), type=LENGTH_TYPES))
    api.match_utilities({"h": _props("height")}, UtilityOptions(values=_values(api, "height"), type=LENGTH_TYPES))
    api.match_utilities(
        {"max-w": _props("max-width")},
        UtilityOptions(values=_values(api, "maxWidth"), type=LENGTH_TYPES),
    )


def font_size(api: PluginAPI) -> None:
    def producer(value, modifier=None):
        size, options = value if isinstance(value, (list, tuple)) else (value, {})
        if not isinstance(options, Mapping):
            options = {"lineHeight": options}
        rules = {
            "font-size": size,
            "line-height": modifier if modifier is not None else options.get("lineHeight"),
            "letter-spacing": options.get("letterSpacing"),
            "font-weight": options.get("fontWeight"),
        }
        return rules

    api.match_utilities(
        {"text": producer},
        UtilityOptions(
            values=_values(api, "fontSize"),
            modifiers=_values(api, "lineHeight"),
            type=("absolute-size", "relative-size", "length", "percentage"),
        ),
    )


def letter_spacing(api: PluginAPI) -> None:
    api.match_utilities(
        {"tracking": _props("letter-spacing")},
        UtilityOptions(values=_values(api, "letterSpacing"), type=("length",), supports_negative_values=True),
    )


def line_height(api: PluginAPI) -> None:
    api.match_utilities(
        {"leading": _props("line-height")},
        UtilityOptions(values=_values(api, "lineHeight"), type=("length", "number")),
    )


def border_radius(api: PluginAPI) -> None:
    api.match_utilities(
        {"rounded": _props("border-radius")},
        UtilityOptions(values=_values(api, "borderRadius"), type=("length",)),
    )


def text_color(api: PluginAPI) -> None:
    api.match_utilities(
        {"text": _props("color")},
        UtilityOptions(values=flatten_colors(api.theme("colors") or {}), type=("color",)),
    )


def background_color(api: PluginAPI) -> None:
    api.match_utilities(
        {"bg": _props("background-color")},
        UtilityOptions(values=flatten_colors(api.theme("colors") or {}), type=("color",)),
    )


def display(api: PluginAPI) -> None:
    api.add_utilities({name: {"display": value} for name, value in DISPLAY.items()})


def screens(api: PluginAPI) -> None:
    for name, value in (api.theme("screens") or {}).items():
        if isinstance(value, str):
            api.add_variant(name, f"@media (min-width: {value})")


def pseudo_classes(api: PluginAPI) -> None:
    for name, pseudo in PSEUDO_PREFIXES.items():
        api.add_variant(name, f"&{pseudo}")


CORE_PLUGINS = {
    "padding": padding,
    "margin": margin,
    "gap": gap,
    "space": space,
    "inset": inset,
    "sizing": sizing,
    "fontSize": font_size,
    "letterSpacing": letter_spacing,
    "lineHeight": line_height,
    "borderRadius": border_radius,
    "textColor": text_color,
    "backgroundColor": background_color,
    "display": display,
    "screens": screens,
    "pseudoClasses": pseudo_classes,
}
