from .assertions import AssertionFailure, assert_equals, assert_true, fail
from .kernel import (
    ExecutionReport,
    OutcomeKind,
    StructuralError,
    SuiteBuilder,
    TestGroup,
    TestInfo,
    TestOutcome,
    run_tests,
)
from .kernel.tags import after_each, after_suite, attach_tag, before_each, before_suite, disabled, order, test

__all__ = [
    "AssertionFailure",
    "assert_equals",
    "assert_true",
    "fail",
    "ExecutionReport",
    "OutcomeKind",
    "StructuralError",
    "SuiteBuilder",
    "TestGroup",
    "TestInfo",
    "TestOutcome",
    "run_tests",
    "after_each",
    "after_suite",
    "attach_tag",
    "before_each",
    "before_suite",
    "disabled",
    "order",
    "test",
]
