from __future__ import annotations

import pytest

from suite_kernel.assertions import AssertionFailure
from suite_kernel.kernel.outcome import OutcomeKind, TestOutcome, classify


def test_classify_absence_of_signal_is_success() -> None:
    assert classify(None) == TestOutcome.success()


def test_classify_assertion_failure_is_failed() -> None:
    exc = AssertionFailure("nope")
    outcome = classify(exc)
    assert outcome.kind is OutcomeKind.FAILED
    assert outcome.reason is exc


@pytest.mark.parametrize("exc", [RuntimeError("boom"), TypeError("bad call"), AssertionError("bare assert")])
def test_classify_other_signals_are_errors(exc: Exception) -> None:
    # Only the collaborator's signal means Failed; a bare AssertionError is an Error.
    outcome = classify(exc)
    assert outcome.kind is OutcomeKind.ERROR
    assert outcome.reason is exc


def test_outcome_reason_presence_is_validated() -> None:
    with pytest.raises(ValueError):
        TestOutcome(OutcomeKind.FAILED)
    with pytest.raises(ValueError):
        TestOutcome(OutcomeKind.SUCCESS, RuntimeError("x"))
