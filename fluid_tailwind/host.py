"""A small Tailwind-style host: registers utilities and variants, renders rules."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .api import Plugin, PluginAPI, UtilityFn, UtilityOptions, VariantFn, VariantOptions
from .core_plugins import CORE_PLUGINS
from .css import Declaration, RuleContainer, RuleSpec
from .length import CSSLength, is_length
from .log import reset_warnings
from .theme import default_theme

logger = logging.getLogger("fluid_tailwind")

ARBITRARY_RE = re.compile(r"^\[(?P<value>[^\]]+)\]$")
COLOR_RE = re.compile(r"^(#[0-9a-fA-F]{3,8}|(rgb|rgba|hsl|hsla)\(.+\))$")
COLOR_KEYWORDS = {"transparent", "currentColor", "inherit"}
SIZE_KEYWORDS = {
    "absolute-size": {"xx-small", "x-small", "small", "medium", "large", "x-large", "xx-large", "xxx-large"},
    "relative-size": {"larger", "smaller"},
}

_MISSING = object()


def escape_class(name: str) -> str:
    replacements = {
        "\\": "\\\\",
        ":": "\\:",
        "/": "\\/",
        ".": "\\.",
        "%": "\\%",
        "#": "\\#",
        "[": "\\[",
        "]": "\\]",
        "(": "\\(",
        ")": "\\)",
        ",": "\\,",
        "~": "\\~",
        "@": "\\@",
        " ": "\\ ",
    }
    return "".join(replacements.get(ch, ch) for ch in name)


def split_top_level(text: str, separator: str) -> List[str]:
    """Split on `separator` outside of square brackets."""
    parts: List[str] = []
    depth = 0
    current = ""
    for ch in text:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth = max(depth - 1, 0)
        if ch == separator and depth == 0:
            parts.append(current)
            current = ""
            continue
        current += ch
    parts.append(current)
    return parts


def split_modifier(text: str) -> Tuple[str, Optional[str]]:
    parts = split_top_level(text, "/")
    if len(parts) == 1:
        return text, None
    return "/".join(parts[:-1]), parts[-1]


def matches_type(value: str, types: Sequence[str]) -> bool:
    if not types or "any" in types:
        return True
    for kind in types:
        if kind == "length" and is_length(value):
            return True
        if kind == "percentage" and value.endswith("%"):
            return True
        if kind == "number" and re.match(r"^[+-]?[0-9]*\.?[0-9]+$", value):
            return True
        if kind == "color" and (COLOR_RE.match(value) or value in COLOR_KEYWORDS):
            return True
        if value in SIZE_KEYWORDS.get(kind, ()):
            return True
    return False


def negate(value: Any) -> Any:
    if not isinstance(value, str):
        return _MISSING
    length = CSSLength.parse(value)
    if length is None:
        return _MISSING
    return value[1:] if value.startswith("-") else f"-{value}"


def _lookup(key: str, values: Optional[Mapping[str, Any]], types: Sequence[str]) -> Any:
    match = ARBITRARY_RE.match(key)
    if match:
        value = match.group("value").replace("_", " ")
        return value if matches_type(value, types) else _MISSING
    if values is not None and key in values:
        return values[key]
    return _MISSING


class Stylesheet(PluginAPI):
    """Collects registrations from plugins and turns class candidates into CSS."""

    def __init__(
        self,
        theme: Optional[Mapping[str, Any]] = None,
        plugins: Sequence[Plugin] = (),
        core_plugins: Optional[Iterable[str]] = None,
    ):
        # each stylesheet is one build; warnings are shown once per build
        reset_warnings()
        self._theme: Dict[str, Any] = dict(default_theme() if theme is None else theme)
        self._core_plugins = None if core_plugins is None else set(core_plugins)
        self._static: Dict[str, Dict[str, Any]] = {}
        self._utilities: List[Tuple[str, UtilityFn, UtilityOptions]] = []
        self._variants: Dict[str, VariantFn] = {}
        self._match_variants: Dict[str, Tuple[VariantFn, VariantOptions]] = {}

        for name, plugin in CORE_PLUGINS.items():
            if self.core_plugin_enabled(name):
                plugin(self)
        for plugin in plugins:
            plugin(self)

    # PluginAPI

    def theme(self, path: str, default: Any = None) -> Any:
        node: Any = self._theme
        segments = path.split(".")
        while segments:
            if not isinstance(node, Mapping):
                return default
            # keys such as "0.5" contain dots, so try the longest key first
            for size in range(len(segments), 0, -1):
                key = ".".join(segments[:size])
                if key in node:
                    node = node[key]
                    segments = segments[size:]
                    break
            else:
                return default
        return node

    def core_plugin_enabled(self, name: str) -> bool:
        return self._core_plugins is None or name in self._core_plugins

    def add_utilities(self, utilities: Dict[str, Dict[str, Any]]) -> None:
        for name, rules in utilities.items():
            self._static[name.lstrip(".")] = rules

    def match_utilities(self, utilities: Dict[str, UtilityFn], options: Optional[UtilityOptions] = None) -> None:
        options = options or UtilityOptions()
        for name, fn in utilities.items():
            self._utilities.append((name, fn, options))
        self._utilities.sort(key=lambda item: len(item[0]), reverse=True)

    def add_variant(self, name: str, definition: Union[str, VariantFn]) -> None:
        if isinstance(definition, str):
            template = definition

            def definition(container):
                return template

        self._variants[name] = definition

    def match_variant(self, name: str, fn: VariantFn, options: Optional[VariantOptions] = None) -> None:
        self._match_variants[name] = (fn, options or VariantOptions())

    # candidates

    def _call_utility(self, body: str, negative: bool) -> Optional[Dict[str, Any]]:
        if not negative and body in self._static:
            return self._static[body]
        for name, fn, options in self._utilities:
            if not body.startswith(name):
                continue
            remainder = body[len(name):]
            if remainder and remainder[0] not in "-/":
                continue
            rest = remainder[1:] if remainder.startswith("-") else remainder
            if rest in options.values:
                value, modifier = options.values[rest], None
            else:
                value_key, modifier_key = split_modifier(rest)
                value = _lookup(value_key or "DEFAULT", options.values, options.type)
                modifier = None
                if modifier_key is not None:
                    if options.modifiers is None:
                        continue
                    modifier = _lookup(modifier_key, options.modifiers, ("any",))
                    if modifier is _MISSING:
                        continue
            if value is _MISSING:
                continue
            if negative:
                if not options.supports_negative_values:
                    continue
                value = negate(value)
                if value is _MISSING:
                    continue
            rules = fn(value, modifier=modifier)
            if rules:
                return rules
        return None

    def utility_rules(self, utility: str) -> List[RuleSpec]:
        negative = utility.startswith("-")
        rules = self._call_utility(utility[1:] if negative else utility, negative)
        if not rules:
            return []
        base = RuleSpec("")
        specs = [base]
        for prop, value in rules.items():
            if isinstance(value, Mapping):
                nested = RuleSpec(prop[1:] if prop.startswith("&") else f" {prop}")
                nested.declarations = [
                    Declaration.from_value(p, v) for p, v in value.items() if v is not None
                ]
                specs.append(nested)
            elif value is not None:
                base.declarations.append(Declaration.from_value(prop, value))
        return [spec for spec in specs if spec.declarations]

    def _resolve_variant(self, name: str) -> Optional[Tuple[VariantFn, Dict[str, Any]]]:
        if name in self._variants:
            return self._variants[name], {}
        base, modifier_key = split_modifier(name)
        for variant_name, (fn, options) in self._match_variants.items():
            if base == variant_name and "DEFAULT" in options.values:
                return fn, {"value": options.values["DEFAULT"], "modifier": modifier_key}
        for variant_name in sorted(self._match_variants, key=len, reverse=True):
            fn, options = self._match_variants[variant_name]
            if variant_name.endswith("@") and base.startswith(variant_name):
                key = base[len(variant_name):]
            elif base.startswith(f"{variant_name}-"):
                key = base[len(variant_name) + 1:]
            else:
                continue
            value = _lookup(key, options.values, ("any",))
            if value is not _MISSING:
                return fn, {"value": value, "modifier": modifier_key}
        return None

    def candidate_rules(self, candidate: str) -> List[str]:
        *variants, utility = split_top_level(candidate, ":")
        specs = self.utility_rules(utility)
        if not specs:
            return []
        container = RuleContainer(specs)
        selector = f".{escape_class(candidate)}"
        at_rules: List[str] = []
        for name in variants:
            resolved = self._resolve_variant(name)
            if resolved is None:
                logger.debug("Unknown variant %r in %r", name, candidate)
                return []
            fn, kwargs = resolved
            result = fn(container, **kwargs)
            if not result:
                return []
            if result.startswith("@"):
                at_rules.append(result)
            elif result != "&":
                selector = result.replace("&", selector)

        css_rules = []
        for spec in container.specs:
            body = "; ".join(decl.css_text for decl in spec.declarations)
            rule = f"{selector}{spec.selector_suffix} {{{body}}}"
            for at_rule in reversed(at_rules):
                rule = f"{at_rule} {{{rule}}}"
            css_rules.append(rule)
        return css_rules

    def build(self, candidates: Iterable[str]) -> List[str]:
        css_rules: List[str] = []
        for candidate in sorted(set(candidates)):
            css_rules.extend(self.candidate_rules(candidate))
        return css_rules
