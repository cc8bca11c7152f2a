from unittest.mock import Mock

import pytest

from patternkit.application.template.executor import TemplateExecutor
from patternkit.domain.core.exceptions import (
    DuplicateRegistrationError,
    UnboundStepError,
    ValidationError,
    VariantNotRegisteredError,
)
from patternkit.domain.template.report import ReportVariant
from patternkit.domain.template.skeleton import AlgorithmSkeleton, iterate_lines
from patternkit.domain.template.variants import html_report

EXPECTED_TAGS = ["<s>", "<h>R</h>", "<b>", "<p>a</p>", "<p>b</p>", "</b>", "<e>"]


@pytest.fixture
def executor(tag_skeleton):
    return TemplateExecutor(tag_skeleton)


@pytest.fixture
def variant(tag_skeleton, tag_bindings):
    return ReportVariant(name="tags", title="R", lines=["a", "b"], bindings=tag_bindings,
                         skeleton=tag_skeleton)


class TestTemplateExecutor:
    """Step order, body iteration and completeness checks."""

    def test_execute_tag_example(self, executor, variant):
        assert executor.execute(variant) == EXPECTED_TAGS

    def test_steps_run_in_skeleton_order(self, executor, variant, tag_skeleton):
        steps = [step for step, _ in executor.iter_steps(variant)]
        assert steps == list(tag_skeleton.steps)

    def test_step_order_is_independent_of_bindings(self, executor, tag_skeleton, tag_bindings):
        silent = {name: (lambda *args: None) for name in tag_bindings}
        variant = ReportVariant(title="quiet", lines=["x"], bindings=silent, skeleton=tag_skeleton)

        steps = [step for step, _ in executor.iter_steps(variant)]

        assert steps == list(tag_skeleton.steps)
        assert executor.execute(variant) == []

    def test_variable_steps_invoked_once_in_order(self, tag_skeleton):
        calls = []

        def recorder(step):
            def bind(report, *args):
                calls.append((step,) + args)
                return step
            return bind

        bindings = {name: recorder(name) for name in tag_skeleton.variable_steps}
        variant = ReportVariant(title="R", lines=["a", "b"], bindings=bindings, skeleton=tag_skeleton)

        TemplateExecutor(tag_skeleton).execute(variant)

        assert calls == [
            ("start",), ("head",), ("bodyStart",),
            ("line", "a"), ("line", "b"),
            ("bodyEnd",), ("end",),
        ]

    def test_body_lines_between_body_start_and_end(self, executor, tag_skeleton, tag_bindings):
        lines = [f"line {i}" for i in range(5)]
        variant = ReportVariant(title="R", lines=lines, bindings=tag_bindings, skeleton=tag_skeleton)

        fragments = executor.execute(variant)

        start, end = fragments.index("<b>"), fragments.index("</b>")
        assert fragments[start + 1:end] == [f"<p>{line}</p>" for line in lines]

    def test_empty_body_still_emits_boundaries(self, executor, tag_skeleton, tag_bindings):
        variant = ReportVariant(title="R", lines=[], bindings=tag_bindings, skeleton=tag_skeleton)

        fragments = executor.execute(variant)

        assert fragments == ["<s>", "<h>R</h>", "<b>", "</b>", "<e>"]
        assert dict(executor.iter_steps(variant))["body"] == []

    def test_line_binding_not_called_for_empty_body(self, executor, tag_skeleton, tag_bindings):
        line = Mock(return_value="never")
        variant = ReportVariant(title="R", bindings=dict(tag_bindings, line=line), skeleton=tag_skeleton)

        executor.execute(variant)

        line.assert_not_called()

    def test_variant_for_other_skeleton_fails_before_output(self, executor):
        # bound for the report skeleton, not the tag skeleton
        other = html_report("R", ["a"])
        with pytest.raises(UnboundStepError) as exc:
            executor.iter_steps(other)
        assert exc.value.missing_steps == ["bodyStart", "bodyEnd"]

    def test_non_string_fragment_rejected(self, executor, tag_skeleton, tag_bindings):
        variant = ReportVariant(
            title="R", bindings=dict(tag_bindings, head=lambda report: 42), skeleton=tag_skeleton
        )
        with pytest.raises(ValidationError):
            executor.execute(variant)

    def test_custom_fixed_step(self):
        skeleton = AlgorithmSkeleton(
            name="framed",
            steps=["rule", "title", "body", "rule_end"],
            fixed_steps={
                "rule": lambda context: ["=" * len(context.variant.title)],
                "body": iterate_lines("item"),
                "rule_end": lambda context: ["=" * len(context.variant.title)],
            },
            variable_steps=["title", "item"],
        )
        variant = ReportVariant(
            title="Menu",
            lines=["tea", "cake"],
            bindings={"title": lambda r: r.title.upper(), "item": lambda r, line: f"* {line}"},
            skeleton=skeleton,
        )

        assert TemplateExecutor(skeleton).execute(variant) == [
            "====", "MENU", "* tea", "* cake", "====",
        ]

    def test_undeclared_binding_in_fixed_step_raises_unbound(self):
        skeleton = AlgorithmSkeleton(
            name="footnoted",
            steps=["head", "note"],
            fixed_steps={"note": lambda context: [context.render("footnote")]},
            variable_steps=["head"],
        )
        variant = ReportVariant(title="R", bindings={"head": lambda r: r.title}, skeleton=skeleton)

        with pytest.raises(UnboundStepError) as exc:
            TemplateExecutor(skeleton).execute(variant)

        assert exc.value.missing_steps == ["footnote"]
        assert not isinstance(exc.value, KeyError)


class TestTemplateExecutorRegistry:
    """Named variant registration."""

    def test_register_and_execute(self, executor, variant):
        executor.register("tags", variant)

        assert executor.registered_variants() == ["tags"]
        assert executor.execute_registered("tags") == EXPECTED_TAGS

    def test_register_rejects_incomplete_variant(self, executor):
        with pytest.raises(UnboundStepError):
            executor.register("html", html_report("R"))
        assert executor.registered_variants() == []

    def test_duplicate_registration_rejected(self, executor, variant):
        executor.register("tags", variant)
        with pytest.raises(DuplicateRegistrationError):
            executor.register("tags", variant)

    def test_unknown_variant(self, executor):
        with pytest.raises(VariantNotRegisteredError):
            executor.execute_registered("missing")
