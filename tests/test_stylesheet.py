from __future__ import annotations

import pytest

from fluid_tailwind.host import Stylesheet, escape_class, split_top_level
from fluid_tailwind.plugin import fluid_core_plugins
from fluid_tailwind.theme import default_theme

from .conftest import categories


@pytest.fixture(scope="module")
def sheet():
    return Stylesheet(plugins=[fluid_core_plugins])


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("p-4", ".p-4 {padding: 1rem}"),
        ("-m-4", ".-m-4 {margin: -1rem}"),
        ("w-1/2", ".w-1\\/2 {width: 50%}"),
        ("flex", ".flex {display: flex}"),
        ("text-blue-500", ".text-blue-500 {color: #3b82f6}"),
        ("space-y-4", ".space-y-4 > :not([hidden]) ~ :not([hidden]) {margin-top: 1rem}"),
        ("p-[3px]", ".p-\\[3px\\] {padding: 3px}"),
        ("md:p-4", "@media (min-width: 48rem) {.md\\:p-4 {padding: 1rem}}"),
        ("hover:p-4", ".hover\\:p-4:hover {padding: 1rem}"),
    ],
)
def test_core_utilities(sheet, candidate, expected) -> None:
    assert sheet.candidate_rules(candidate) == [expected]


def test_fluid_padding(sheet) -> None:
    assert sheet.candidate_rules("~p-4/8") == [
        ".\\~p-4\\/8 {padding: clamp(1rem, 0.29rem + 1.79vw, 2rem) /* fluid from 1rem at 40rem to 2rem at 96rem */}"
    ]


def test_fluid_screen_range_variant(sheet) -> None:
    assert sheet.candidate_rules("~md/lg:~p-4/8") == [
        ".\\~md\\/lg\\:\\~p-4\\/8 {padding: clamp(1rem, 6.25vw - 2rem, 2rem)"
        " /* fluid from 1rem at 48rem to 2rem at 64rem */}"
    ]


def test_fluid_container_variant(sheet) -> None:
    (rule,) = sheet.candidate_rules("~@md/lg:~p-4/8")
    assert "padding: clamp(1rem, 25cqw - 6rem, 2rem) /* fluid from 1rem at 28rem to 2rem at 32rem container */" in rule


def test_default_modifier(sheet) -> None:
    (rule,) = sheet.candidate_rules("~rounded-lg")
    assert "border-radius: clamp(0.25rem, " in rule
    assert "/* fluid from 0.5rem at 40rem to 0.25rem at 96rem */" in rule


def test_fluid_text_interpolates_line_height(sheet) -> None:
    (rule,) = sheet.candidate_rules("~text-base/2xl")
    assert rule.startswith(".\\~text-base\\/2xl {font-size: clamp(1rem, ")
    assert "to 1.5rem at 96rem SC 1.4.4 */" in rule
    assert "line-height: clamp(1.5rem, " in rule
    assert "letter-spacing" not in rule
    assert "font-weight" not in rule


def test_fluid_text_reports_inaccessible_sizes(sheet) -> None:
    (rule,) = sheet.candidate_rules("~text-base/5xl")
    assert "font-size: 1rem /* fluid from 1rem at 40rem to 3rem at 96rem SC 1.4.4 fails at 40rem */" in rule
    # the unitless line height of 5xl is relative to its 3rem font size
    assert "line-height: clamp(1.5rem, " in rule
    assert "to 3rem at 96rem */" in rule


def test_breakpoint_properties(sheet) -> None:
    assert sheet.candidate_rules("~bps-sm/lg") == [
        ".\\~bps-sm\\/lg {--fluid-from-bp: 40; --fluid-to-bp: 64; --fluid-scrubber: 100vw}"
    ]
    (rule,) = sheet.candidate_rules("~@bps")
    assert "--fluid-from-bp: 20; --fluid-to-bp: 80; --fluid-scrubber: 100cqw" in rule


def test_dynamic_variant(sheet) -> None:
    (rule,) = sheet.candidate_rules("~vars:~p-4/8")
    assert "var(--fluid-from-bp, 40)" in rule
    assert "var(--fluid-to-bp, 96)" in rule
    assert rule.endswith(" dynamic */}")


def test_arbitrary_breakpoint_variants(sheet) -> None:
    (rule,) = sheet.candidate_rules("~md/[70rem]:~p-4/8")
    assert "/* fluid from 1rem at 48rem to 2rem at 70rem */" in rule
    (rule,) = sheet.candidate_rules("~/lg:~p-4/8")
    assert "/* fluid from 1rem at 40rem to 2rem at 64rem */" in rule
    (rule,) = sheet.candidate_rules("~min-[30rem]/md:~p-4/8")
    assert "/* fluid from 1rem at 30rem to 2rem at 48rem */" in rule


def test_variants_leave_plain_utilities_alone(sheet) -> None:
    assert sheet.candidate_rules("~md/lg:p-4") == [".\\~md\\/lg\\:p-4 {padding: 1rem}"]


def test_equal_breakpoints_drop_the_rule(sheet, caplog) -> None:
    assert sheet.candidate_rules("~md/[48rem]:~p-4/8") == []
    assert categories(caplog) == ["no-change"]


def test_mismatching_modifier_drops_the_rule(sheet, caplog) -> None:
    assert sheet.candidate_rules("~p-4/[1px]") == []
    assert categories(caplog) == ["mismatching-units"]


def test_missing_modifier(sheet, caplog) -> None:
    assert sheet.candidate_rules("~p-4") == []
    assert categories(caplog) == ["missing-values"]


def test_unknown_candidates(sheet) -> None:
    assert sheet.candidate_rules("foo-bar") == []
    assert sheet.candidate_rules("nope:p-4") == []


def test_build_is_sorted_and_independent(sheet) -> None:
    rules = sheet.build(["p-4", "~p-4/[1px]", "flex", "p-4"])
    assert rules == [".flex {display: flex}", ".p-4 {padding: 1rem}"]


def test_theme_lookup(sheet) -> None:
    assert sheet.theme("spacing.0.5") == "0.125rem"
    assert sheet.theme("colors.blue.500") == "#3b82f6"
    assert sheet.theme("missing.key", "x") == "x"


def test_disabled_core_plugins() -> None:
    sheet = Stylesheet(plugins=[fluid_core_plugins], core_plugins=["margin"])
    assert sheet.candidate_rules("p-4") == []
    assert sheet.candidate_rules("~p-4/8") == []
    assert sheet.candidate_rules("~m-4/8")


def test_default_screen_is_reported(caplog) -> None:
    theme = default_theme()
    theme["screens"] = {"DEFAULT": "30rem", **theme["screens"]}
    Stylesheet(theme, plugins=[fluid_core_plugins])
    assert "inaccessible-breakpoint" in categories(caplog)


def test_escape_class() -> None:
    assert escape_class("~p-4/8") == "\\~p-4\\/8"
    assert escape_class("~@md:p-[1.5rem]") == "\\~\\@md\\:p-\\[1\\.5rem\\]"


def test_split_top_level_respects_brackets() -> None:
    assert split_top_level("~md/[a:b]:p-4", ":") == ["~md/[a:b]", "p-4"]


def test_each_build_reports_its_own_warnings(caplog) -> None:
    for _ in range(2):
        assert Stylesheet(plugins=[fluid_core_plugins]).build(["~p-4/[16px]"]) == []
    assert categories(caplog) == ["mismatching-units", "mismatching-units"]


def test_unitless_line_height_is_scaled_exactly() -> None:
    theme = default_theme()
    theme["fontSize"] = {"a": ("1.1rem", {"lineHeight": "1.1"}), "b": ("2rem", {"lineHeight": "2rem"})}
    (rule,) = Stylesheet(theme, plugins=[fluid_core_plugins]).candidate_rules("~text-a/b")
    assert "line-height: clamp(1.21rem, " in rule
    assert "/* fluid from 1.21rem at 40rem to 2rem at 96rem */" in rule
    assert "00000" not in rule
