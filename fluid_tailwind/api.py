"""The plugin-facing interface a utility host implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, Union

# fn(value, modifier=None) -> {property: value} or None to emit nothing
UtilityFn = Callable[..., Optional[Dict[str, Any]]]
# fn(container, value=None, modifier=None) -> "&", an "@media ..." rule, or None to drop
VariantFn = Callable[..., Optional[str]]


@dataclass
class UtilityOptions:
    values: Dict[str, Any] = field(default_factory=dict)
    modifiers: Optional[Dict[str, Any]] = None
    type: Tuple[str, ...] = ()
    supports_negative_values: bool = False


@dataclass
class VariantOptions:
    values: Dict[str, Any] = field(default_factory=dict)


class PluginAPI(ABC):
    @abstractmethod
    def theme(self, path: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    def core_plugin_enabled(self, name: str) -> bool:
        ...

    @abstractmethod
    def add_utilities(self, utilities: Dict[str, Dict[str, Any]]) -> None:
        ...

    @abstractmethod
    def match_utilities(self, utilities: Dict[str, UtilityFn], options: Optional[UtilityOptions] = None) -> None:
        ...

    @abstractmethod
    def add_variant(self, name: str, definition: Union[str, VariantFn]) -> None:
        ...

    @abstractmethod
    def match_variant(self, name: str, fn: VariantFn, options: Optional[VariantOptions] = None) -> None:
        ...

    def match_components(self, components: Dict[str, UtilityFn], options: Optional[UtilityOptions] = None) -> None:
        self.match_utilities(components, options)


Plugin = Callable[[PluginAPI], None]


def add_variant_with_modifier(api: PluginAPI, name: str, fn: Callable[..., Optional[str]]) -> None:
    """Register `name` and `name/<modifier>` as one variant."""

    def variant(container, value=None, modifier=None):
        return fn(container, modifier=modifier)

    api.match_variant(name, variant, VariantOptions(values={"DEFAULT": None}))
