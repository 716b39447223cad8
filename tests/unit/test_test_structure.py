"""Unit tests for mocha test and suite recognition."""

import pytest

from splurge_assert_lint.detectors.test_structure import TestStructureDetector
from splurge_assert_lint.syntax import JsVisitor, parse_source


class _Collector(JsVisitor):
    def __init__(self):
        self.calls = []
        self.functions = []

    def visit_call_expression(self, node):
        self.calls.append(node)

    def visit_function_expression(self, node):
        self.functions.append(node)

    def visit_arrow_function(self, node):
        self.functions.append(node)


def _collect(code):
    collector = _Collector()
    collector.walk(parse_source(code))
    return collector


def _first_call(code):
    return _collect(code).calls[0]


@pytest.fixture
def detector():
    return TestStructureDetector()


@pytest.mark.parametrize(
    "code", ["it('a', f);", "specify('a', f);", "test('a', f);", "it.only('a', f);", "it.skip('a', f);", "xit('a', f);"]
)
def test_test_call_forms(detector, code):
    call = _first_call(code)
    assert detector.is_test_call(call)
    assert not detector.is_suite_call(call)


@pytest.mark.parametrize("code", ["describe('a', f);", "context('a', f);", "xdescribe('a', f);", "suite.skip('a', f);"])
def test_suite_call_forms(detector, code):
    call = _first_call(code)
    assert detector.is_suite_call(call)
    assert not detector.is_test_call(call)


@pytest.mark.parametrize("code", ["itx('a', f);", "it.each('a', f);", "obj.it('a', f);", "x('a', f);", "it()();"])
def test_non_test_calls(detector, code):
    assert not detector.is_test_call(_first_call(code))


@pytest.mark.parametrize(
    "code,skipped",
    [
        ("it.skip('a', f);", True),
        ("xit('a', f);", True),
        ("describe.skip('a', f);", True),
        ("xcontext('a', f);", True),
        ("it.only('a', f);", False),
        ("it('a', f);", False),
        ("xfoo('a', f);", False),
    ],
)
def test_skipped_calls(detector, code, skipped):
    assert detector.is_skipped_call(_first_call(code)) is skipped


def test_callee_parts(detector):
    assert detector.callee_parts(_first_call("it('a');")) == ("it", None)
    assert detector.callee_parts(_first_call("it.skip('a');")) == ("it", "skip")
    assert detector.callee_parts(_first_call("a.b.c();")) is None


def test_test_body_detection(detector):
    collected = _collect("it('adds', function () { helper(function () {}); });")
    body, nested = collected.functions
    assert detector.is_test_body(body)
    assert not detector.is_test_body(nested)
    assert detector.test_title(body) == "adds"


def test_suite_callback_is_not_a_test_body(detector):
    collected = _collect("describe('thing', () => {});")
    assert not detector.is_test_body(collected.functions[0])


def test_skipped_ancestor_through_suite(detector):
    collected = _collect("describe.skip('s', () => { it('t', () => {}); });")
    test_body = collected.functions[1]
    assert detector.is_test_body(test_body)
    assert detector.is_skipped_ancestor(test_body)


def test_no_skipped_ancestor(detector):
    collected = _collect("describe('s', () => { it.only('t', () => {}); });")
    assert not detector.is_skipped_ancestor(collected.functions[1])


def test_custom_names():
    detector = TestStructureDetector(test_names=["check"], suite_names=["group"])
    assert detector.is_test_call(_first_call("check('a', f);"))
    assert detector.is_skipped_call(_first_call("xgroup('a', f);"))
    assert not detector.is_test_call(_first_call("it('a', f);"))


def test_title_of_template_literal_is_none(detector):
    collected = _collect("it(`dynamic ${x}`, () => {});")
    assert detector.test_title(collected.functions[0]) is None
