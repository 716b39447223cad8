"""Property-based tests that lint generated JavaScript test files."""

from hypothesis import given
from hypothesis import strategies as st

from splurge_assert_lint.rules.classifier import ASSERT_IDIOMS, DEFAULT_MESSAGE, EXPECT_IDIOMS
from tests.hypothesis_config import PARSING_SETTINGS
from tests.property.strategies import RELATIONAL_OPERATORS, js_comparisons, js_plain_arguments
from tests.test_utils import in_suite, lint_code


class TestLintProperties:
    """End-to-end properties over generated sources."""

    @PARSING_SETTINGS
    @given(argument=js_plain_arguments(), function_style=st.sampled_from(["function", "arrow"]))
    def test_plain_arguments_are_never_reported(self, argument, function_style):
        code = in_suite(f"expect({argument}).to.be.ok;\nassert.ok({argument});", function_style=function_style)
        assert lint_code(code) == []

    @PARSING_SETTINGS
    @given(comparison=js_comparisons(RELATIONAL_OPERATORS))
    def test_relational_comparison_reported_once_per_dialect(self, comparison):
        code = in_suite(f"expect({comparison}).to.be.ok;\nassert.ok({comparison});")
        diagnostics = lint_code(code)

        operator = comparison.split(" ")[1]
        assert [d.params["should_use"] for d in diagnostics] == [EXPECT_IDIOMS[operator], ASSERT_IDIOMS[operator]]

    @PARSING_SETTINGS
    @given(comparison=js_comparisons(RELATIONAL_OPERATORS))
    def test_comparison_outside_tests_is_never_reported(self, comparison):
        code = f"expect({comparison}).to.be.ok;\nfunction helper() {{ assert.ok({comparison}); }}\n"
        assert lint_code(code) == []

    @PARSING_SETTINGS
    @given(comparison=js_comparisons(RELATIONAL_OPERATORS))
    def test_negated_comparison_gets_default_message(self, comparison):
        code = in_suite(f"expect(!({comparison})).to.be.ok;")
        assert [d.message for d in lint_code(code)] == [DEFAULT_MESSAGE]
