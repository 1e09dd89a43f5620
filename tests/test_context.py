from __future__ import annotations

import pytest

from fluid_tailwind.context import BreakpointSet, get_context
from fluid_tailwind.errors import FluidConfigError
from fluid_tailwind.length import CSSLength
from fluid_tailwind.theme import default_screens_in_rems

from .conftest import SCREENS, theme_lookup


def rem(number: float) -> CSSLength:
    return CSSLength(number, "rem")


def test_defaults_are_inferred_from_sorted_screens() -> None:
    context = get_context(theme_lookup({"screens": {"lg": "64rem", "sm": "40rem", "md": "48rem"}}))
    assert context.default_from_screen == rem(40)
    assert context.default_to_screen == rem(64)
    assert context.unit == "rem"
    assert not context.has_containers


def test_non_simple_screens_are_ignored() -> None:
    context = get_context(
        theme_lookup({"screens": {"sm": "40rem", "print": {"raw": "print"}, "md": "48rem"}})
    )
    assert list(context.screens) == ["sm", "md"]


def test_mixed_units_cannot_be_inferred() -> None:
    with pytest.raises(FluidConfigError, match="different units"):
        get_context(theme_lookup({"screens": {"sm": "640px", "md": "48rem"}}))


def test_empty_screens_cannot_be_inferred() -> None:
    with pytest.raises(FluidConfigError, match="no simple values"):
        get_context(theme_lookup({"screens": {}}))


def test_explicit_defaults_by_name_and_literal() -> None:
    context = get_context(
        theme_lookup({"screens": dict(SCREENS), "fluid": {"defaultScreens": ["30rem", "lg"]}})
    )
    assert context.default_from_screen == rem(30)
    assert context.default_to_screen == rem(64)


def test_one_explicit_default_infers_the_other() -> None:
    context = get_context(theme_lookup({"screens": dict(SCREENS), "fluid": {"defaultScreens": ["md"]}}))
    assert context.default_from_screen == rem(48)
    assert context.default_to_screen == rem(80)


def test_explicit_defaults_skip_inference() -> None:
    context = get_context(
        theme_lookup({"screens": {"sm": "640px", "md": "48rem"}, "fluid": {"defaultScreens": ["md", "70rem"]}})
    )
    assert (context.default_from_screen, context.default_to_screen) == (rem(48), rem(70))


@pytest.mark.parametrize("setting", [["nope"], [12], ["0"], "md"])
def test_invalid_default_settings(setting) -> None:
    with pytest.raises(FluidConfigError):
        get_context(theme_lookup({"screens": dict(SCREENS), "fluid": {"defaultScreens": setting}}))


def test_container_defaults(container_context) -> None:
    assert container_context.has_containers
    assert container_context.default_breakpoints(True) == (rem(24), rem(32))
    assert container_context.breakpoints(True)["md"] == rem(28)


def test_defaults_must_share_units() -> None:
    with pytest.raises(FluidConfigError, match="same units"):
        get_context(theme_lookup({"screens": dict(SCREENS), "containers": {"sm": "384px", "md": "448px"}}))


def test_prefer_containers_requires_containers() -> None:
    with pytest.raises(FluidConfigError, match="preferContainers"):
        get_context(theme_lookup({"screens": dict(SCREENS), "fluid": {"preferContainers": True}}))


def test_container_breakpoints_without_containers(context) -> None:
    with pytest.raises(FluidConfigError):
        context.default_breakpoints(True)


def test_sorted_breakpoints_are_cached() -> None:
    bps = BreakpointSet("screen", SCREENS)
    assert bps.sorted is bps.sorted
    assert [bp.number for bp in bps.sorted] == [40, 48, 64, 80]


def test_default_screens_in_rems() -> None:
    screens = {"sm": "640px", "print": {"raw": "print"}, "wide": "90em", "2xl": "1536px"}
    assert default_screens_in_rems(screens) == {
        "sm": "40rem",
        "print": {"raw": "print"},
        "wide": "90em",
        "2xl": "96rem",
    }
