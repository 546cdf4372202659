from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from suite_kernel.assertions import AssertionFailure


class OutcomeKind(Enum):
    SUCCESS = "success"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class TestOutcome:
    # Tagged variant; reason is only carried by FAILED and ERROR.
    __test__ = False

    kind: OutcomeKind
    reason: BaseException | None = None

    def __post_init__(self) -> None:
        carries_reason = self.kind in (OutcomeKind.FAILED, OutcomeKind.ERROR)
        if carries_reason and self.reason is None:
            raise ValueError(f"{self.kind.name} outcome requires a reason")
        if not carries_reason and self.reason is not None:
            raise ValueError(f"{self.kind.name} outcome must not carry a reason")

    @classmethod
    def success(cls) -> TestOutcome:
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def skipped(cls) -> TestOutcome:
        return cls(OutcomeKind.SKIPPED)

    @classmethod
    def failed(cls, reason: BaseException) -> TestOutcome:
        return cls(OutcomeKind.FAILED, reason)

    @classmethod
    def error(cls, reason: BaseException) -> TestOutcome:
        return cls(OutcomeKind.ERROR, reason)


@dataclass(frozen=True, slots=True)
class TestInfo:
    __test__ = False

    display_name: str
    outcome: TestOutcome

    @property
    def kind(self) -> OutcomeKind:
        return self.outcome.kind


def classify(signal: BaseException | None) -> TestOutcome:
    # Only the assertion collaborator's signal counts as a failure; anything else is an error.
    if signal is None:
        return TestOutcome.success()
    if isinstance(signal, AssertionFailure):
        return TestOutcome.failed(signal)
    return TestOutcome.error(signal)
