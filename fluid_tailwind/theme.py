"""Default theme values, keyed the way Tailwind theme sections are."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .length import CSSLength
from .precision import format_number

ROOT_FONT_SIZE_PX = 16

SCREENS_PX = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

CONTAINERS = {
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
}

SPACING_SCALE = {
    "0": "0rem",
    "px": "1px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "40": "10rem",
    "48": "12rem",
    "60": "15rem",
}

FONT_SIZES = {
    "xs": ("0.75rem", {"lineHeight": "1rem"}),
    "sm": ("0.875rem", {"lineHeight": "1.25rem"}),
    "base": ("1rem", {"lineHeight": "1.5rem"}),
    "lg": ("1.125rem", {"lineHeight": "1.75rem"}),
    "xl": ("1.25rem", {"lineHeight": "1.75rem"}),
    "2xl": ("1.5rem", {"lineHeight": "2rem"}),
    "3xl": ("1.875rem", {"lineHeight": "2.25rem"}),
    "4xl": ("2.25rem", {"lineHeight": "2.5rem"}),
    "5xl": ("3rem", {"lineHeight": "1"}),
    "6xl": ("3.75rem", {"lineHeight": "1"}),
    "7xl": ("4.5rem", {"lineHeight": "1"}),
    "8xl": ("6rem", {"lineHeight": "1"}),
}

LETTER_SPACING = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

LINE_HEIGHT = {
    "none": "1",
    "tight": "1.25",
    "normal": "1.5",
    "relaxed": "1.625",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
}

BORDER_RADIUS = {
    "none": "0px",
    "sm": "0.125rem",
    "DEFAULT": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

COLORS = {
    "transparent": "transparent",
    "current": "currentColor",
    "black": "#000000",
    "white": "#ffffff",
    "gray": {"100": "#f3f4f6", "300": "#d1d5db", "500": "#6b7280", "700": "#374151", "900": "#111827"},
    "blue": {"400": "#60a5fa", "500": "#3b82f6", "600": "#2563eb", "700": "#1d4ed8"},
    "red": {"400": "#f87171", "500": "#ef4444", "600": "#dc2626"},
}

SIZE_EXTRAS = {
    "auto": "auto",
    "full": "100%",
    "1/2": "50%",
    "1/3": "33.333333%",
    "2/3": "66.666667%",
}


def default_screens_in_rems(screens: Mapping[str, Any] = SCREENS_PX) -> Dict[str, Any]:
    """Convert simple px screens to rems so they share units with the spacing scale."""
    converted: Dict[str, Any] = {}
    for name, value in screens.items():
        length = CSSLength.parse(value) if isinstance(value, str) else None
        if length is None or length.unit != "px":
            converted[name] = value
            continue
        converted[name] = f"{format_number(length.number / ROOT_FONT_SIZE_PX)}rem"
    return converted


def default_theme() -> Dict[str, Any]:
    return {
        "screens": default_screens_in_rems(),
        "containers": dict(CONTAINERS),
        "spacing": dict(SPACING_SCALE),
        "fontSize": dict(FONT_SIZES),
        "letterSpacing": dict(LETTER_SPACING),
        "lineHeight": dict(LINE_HEIGHT),
        "borderRadius": dict(BORDER_RADIUS),
        "colors": dict(COLORS),
        "width": {**SPACING_SCALE, **SIZE_EXTRAS, "screen": "100vw"},
        "height": {**SPACING_SCALE, **SIZE_EXTRAS, "screen": "100vh"},
        "maxWidth": {**CONTAINERS, "none": "none", "full": "100%"},
        "fluid": {},
    }
