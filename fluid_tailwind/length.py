from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .precision import format_number

LENGTH_UNITS = (
    "cm", "mm", "Q", "in", "pc", "pt", "px",
    "em", "ex", "ch", "rem", "lh", "rlh",
    "vw", "vh", "vmin", "vmax", "vb", "vi",
    "svw", "svh", "lvw", "lvh", "dvw", "dvh",
    "cqw", "cqh", "cqi", "cqb", "cqmin", "cqmax",
)
LENGTH_FUNCTIONS = ("min", "max", "clamp", "calc")

NUMBER_PATTERN = r"[+-]?[0-9]*\.?[0-9]+(?:[eE][+-]?[0-9]+)?"
LENGTH_RE = re.compile(
    rf"^{NUMBER_PATTERN}(?:{'|'.join(sorted(LENGTH_UNITS, key=len, reverse=True))})$"
)
FUNCTION_RE = re.compile(rf"^(?:{'|'.join(LENGTH_FUNCTIONS)})\(.+?\)")
SPLIT_RE = re.compile(r"^(.*?)([A-Za-z]+)$")


def is_length(value: str) -> bool:
    if value == "0":
        return True
    return bool(LENGTH_RE.match(value) or FUNCTION_RE.match(value))


@dataclass(frozen=True)
class CSSLength:
    number: float
    unit: Optional[str] = None

    @property
    def css_text(self) -> str:
        return f"{format_number(self.number)}{self.unit or ''}"

    def __str__(self) -> str:
        return self.css_text

    @classmethod
    def test(cls, raw: Any) -> bool:
        return isinstance(raw, str) and is_length(raw.strip())

    @classmethod
    def parse(cls, raw: Any) -> Optional["CSSLength"]:
        if not cls.test(raw):
            return None
        text = raw.strip()
        if text == "0":
            return cls(0.0)
        match = SPLIT_RE.match(text)
        if not match:
            return None
        try:
            number = float(match.group(1))
        except ValueError:
            return None
        return cls(number, match.group(2))
