from __future__ import annotations

import json

import pytest

from demo_suite.common_suite import CommonSuite
from demo_suite.main import main
from suite_kernel.kernel.collector import collect_and_validate
from suite_kernel.kernel.discovery import discover_group
from suite_kernel.kernel.ordering import order_tests
from suite_kernel.kernel.outcome import OutcomeKind
from suite_kernel.kernel.runner import run_tests


def _names(infos) -> list[str]:
    return [info.display_name for info in infos]


def test_common_suite_execution_sequence() -> None:
    # Order=0 (bare @order) first, then 1, then 7, then the unordered test; disabled is never invoked.
    metadata = collect_and_validate(discover_group(CommonSuite).units)
    enabled = [unit.display_name for unit in order_tests(metadata.tests) if unit.enabled]
    assert enabled == ["calculationsTest", "testIsItTrue", "simpleTest", "erroredTest"]


def test_common_suite_report(capsys: pytest.CaptureFixture[str]) -> None:
    report = run_tests(CommonSuite)
    assert _names(report[OutcomeKind.SUCCESS]) == ["testIsItTrue", "simpleTest"]
    assert _names(report[OutcomeKind.FAILED]) == ["calculationsTest"]
    assert _names(report[OutcomeKind.ERROR]) == ["erroredTest"]
    assert _names(report[OutcomeKind.SKIPPED]) == ["disabledTest"]
    assert str(report[OutcomeKind.FAILED][0].outcome.reason) == "Expected [1] but got [2]"
    assert isinstance(report[OutcomeKind.ERROR][0].outcome.reason, RuntimeError)

    messages = [json.loads(line)["message"] for line in capsys.readouterr().err.splitlines()]
    assert messages[0] == "Before Suite"
    assert messages[-1] == "After Suite"
    assert "This should not be seen" not in messages
    # Each of the four invoked tests is wrapped by its per-test hooks.
    assert messages.count("Before Each") == 4
    assert messages.count("After Each") == 4


def test_demo_main_prints_report(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Failed (1):" in out
    assert "Total 5: 2 success, 1 failed, 1 error, 1 skipped" in out


def test_demo_main_keeps_diagnostics_off_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--format", "json"])
    captured = capsys.readouterr()
    assert json.loads(captured.out)["summary"]["failed"] == 1
    assert "After Suite" in captured.err
