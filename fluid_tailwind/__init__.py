"""Fluid `clamp()` utilities and variants for Tailwind-style stylesheets."""

from .api import Plugin, PluginAPI, UtilityOptions, VariantOptions, add_variant_with_modifier
from .context import BreakpointSet, Context, get_context
from .css import Declaration, RuleContainer, RuleSpec
from .errors import FluidConfigError, FluidError, FluidValueError
from .expr import FluidExpr, FluidValue, find_inaccessible_breakpoint, generate_expr, parse_expr
from .host import Stylesheet
from .intercept import InterceptOptions, fluidize, intercept_utilities
from .length import CSSLength, is_length
from .log import LogLevel, setup_logging
from .plugin import breakpoint_properties, fluid_core_plugins
from .rewrite import RewriteOutcome, make_dynamic, rewrite_exprs
from .theme import default_screens_in_rems, default_theme
from .values import parse_value, parse_values

__all__ = [
    "BreakpointSet",
    "CSSLength",
    "Context",
    "Declaration",
    "FluidConfigError",
    "FluidError",
    "FluidExpr",
    "FluidValue",
    "FluidValueError",
    "InterceptOptions",
    "LogLevel",
    "Plugin",
    "PluginAPI",
    "RewriteOutcome",
    "RuleContainer",
    "RuleSpec",
    "Stylesheet",
    "UtilityOptions",
    "VariantOptions",
    "add_variant_with_modifier",
    "breakpoint_properties",
    "default_screens_in_rems",
    "default_theme",
    "find_inaccessible_breakpoint",
    "fluid_core_plugins",
    "fluidize",
    "generate_expr",
    "get_context",
    "intercept_utilities",
    "is_length",
    "make_dynamic",
    "parse_expr",
    "parse_value",
    "parse_values",
    "rewrite_exprs",
    "setup_logging",
]
