from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .expr import FluidExpr, FluidValue, parse_expr


@dataclass
class Declaration:
    prop: str
    value: str
    fluid: Optional[FluidExpr] = None

    @classmethod
    def from_value(cls, prop: str, value: str) -> "Declaration":
        fluid = value.expr if isinstance(value, FluidValue) else None
        return cls(prop, str(value), fluid)

    @property
    def expr(self) -> Optional[FluidExpr]:
        if self.fluid is not None:
            return self.fluid
        return parse_expr(self.value)

    def replace_value(self, value: str) -> None:
        self.value = str(value)
        self.fluid = value.expr if isinstance(value, FluidValue) else None

    @property
    def css_text(self) -> str:
        return f"{self.prop}: {self.value}"


@dataclass
class RuleSpec:
    selector_suffix: str
    declarations: List[Declaration] = field(default_factory=list)


class RuleContainer:
    """The rules produced for one class candidate, handed to variants."""

    def __init__(self, specs: List[RuleSpec]):
        self.specs = specs

    def walk_decls(self) -> Iterator[Declaration]:
        for spec in self.specs:
            yield from spec.declarations

    def __len__(self) -> int:
        return len(self.specs)
