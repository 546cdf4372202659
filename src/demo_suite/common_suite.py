from __future__ import annotations

from suite_kernel import (
    after_each,
    after_suite,
    assert_equals,
    assert_true,
    before_each,
    before_suite,
    disabled,
    order,
    test,
)
from suite_kernel.observability import LogChannel, StderrLogSink

# Diagnostics go to stderr so stdout carries only the report.
log = LogChannel(sink=StderrLogSink(), source="demo_suite")


class CommonSuite:
    # Reference group: one success per assertion kind, a failure, an error and a skip.

    @before_suite
    @staticmethod
    def start_up_suite() -> None:
        log.info("Before Suite")

    @after_suite
    @staticmethod
    def tear_down_suite() -> None:
        log.info("After Suite")

    @before_each
    def start_up(self) -> None:
        log.info("Before Each")

    @after_each
    def tear_down(self) -> None:
        log.info("After Each")

    @test
    @order(7)
    def simpleTest(self) -> None:
        log.info("Third test")
        assert_equals(1, 1)

    @test
    def erroredTest(self) -> None:
        log.info("Last test")
        raise RuntimeError("This test fails")

    @test
    @disabled
    def disabledTest(self) -> None:
        log.info("This should not be seen")

    @test
    @order
    def calculationsTest(self) -> None:
        log.info("Second Test")
        assert_equals(1, 2)

    @test
    @order(1)
    def testIsItTrue(self) -> None:
        log.info("First Test")
        assert_true(True)
