from __future__ import annotations

from fluid_tailwind.css import Declaration, RuleContainer, RuleSpec
from fluid_tailwind.expr import generate_expr
from fluid_tailwind.length import CSSLength
from fluid_tailwind.rewrite import RewriteOutcome, make_dynamic, resolve_breakpoint, rewrite_exprs

from .conftest import categories


def rem(number: float) -> CSSLength:
    return CSSLength(number, "rem")


def make_container(*, check_accessibility: bool = False, as_text: bool = False) -> RuleContainer:
    value = generate_expr(rem(1), rem(40), rem(2), rem(80), check_accessibility=check_accessibility)
    fluid = Declaration("font-size", str(value)) if as_text else Declaration.from_value("font-size", value)
    return RuleContainer([RuleSpec("", [fluid, Declaration("color", "red")])])


def values(container: RuleContainer):
    return [decl.value for decl in container.walk_decls()]


def test_rewrite_to_named_screens(context) -> None:
    container = make_container()
    assert rewrite_exprs(container, context, ("md", "lg")) is RewriteOutcome.REWRITTEN
    fluid, color = container.walk_decls()
    assert fluid.value == "clamp(1rem, 6.25vw - 2rem, 2rem) /* fluid from 1rem at 48rem to 2rem at 64rem */"
    assert fluid.expr.from_ == rem(1)
    assert fluid.expr.to == rem(2)
    assert color.value == "red"


def test_rewrite_decodes_plain_text(context) -> None:
    container = make_container(as_text=True)
    assert container.specs[0].declarations[0].fluid is None
    assert rewrite_exprs(container, context, (rem(48), rem(64))) is RewriteOutcome.REWRITTEN
    assert container.specs[0].declarations[0].expr.from_bp == rem(48)


def test_missing_side_uses_default(context) -> None:
    container = make_container()
    rewrite_exprs(container, context, (None, "[60rem]"))
    assert values(container)[0].endswith("/* fluid from 1rem at 40rem to 2rem at 60rem */")


def test_equal_breakpoints_leave_rule_unchanged(context, caplog) -> None:
    container = make_container()
    before = values(container)
    outcome = rewrite_exprs(container, context, ("md", "[48rem]"))
    assert outcome is RewriteOutcome.NO_CHANGE
    assert not outcome.keeps_rule
    assert values(container) == before
    assert categories(caplog) == ["no-change"]


def test_no_fluid_declarations(context) -> None:
    container = RuleContainer([RuleSpec("", [Declaration("padding", "1rem")])])
    outcome = rewrite_exprs(container, context, ("md", "lg"))
    assert outcome is RewriteOutcome.NO_FLUID
    assert outcome.keeps_rule


def test_invalid_breakpoint_is_rejected(context, caplog) -> None:
    container = make_container()
    before = values(container)
    assert rewrite_exprs(container, context, ("md", "[1000px]")) is RewriteOutcome.INVALID
    assert values(container) == before
    assert categories(caplog) == ["mismatching-units"]


def test_container_rewrite_needs_containers(context) -> None:
    assert rewrite_exprs(make_container(), context, ("sm", "md"), at_container=True) is RewriteOutcome.INVALID


def test_named_container_rewrite(container_context) -> None:
    container = make_container()
    assert rewrite_exprs(container, container_context, ("sm", "lg"), at_container="card").keeps_rule
    assert values(container)[0] == (
        "clamp(1rem, 12.5cqw - 2rem, 2rem) /* fluid from 1rem at 24rem to 2rem at 32rem container card */"
    )


def test_accessibility_check_survives_rewrite(context) -> None:
    container = make_container(check_accessibility=True)
    rewrite_exprs(container, context, ("md", "lg"))
    assert values(container)[0].endswith("SC 1.4.4 */")


def test_make_dynamic(context) -> None:
    container = make_container()
    assert make_dynamic(container) is RewriteOutcome.REWRITTEN
    value = values(container)[0]
    assert "var(--fluid-from-bp, 40)" in value
    assert value.endswith(" dynamic */")


def test_resolve_breakpoint(context) -> None:
    assert resolve_breakpoint(None, context, False) is None
    assert resolve_breakpoint("lg", context, False) == rem(64)
    assert resolve_breakpoint("[30rem]", context, False) == rem(30)
    assert resolve_breakpoint("50rem", context, False) == rem(50)
