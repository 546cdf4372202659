from __future__ import annotations

from collections.abc import Iterable

from suite_kernel.kernel.outcome import OutcomeKind, TestInfo

# Kinds that did not occur in a run are absent, never mapped to empty lists.
ExecutionReport = dict[OutcomeKind, list[TestInfo]]


def aggregate(infos: Iterable[TestInfo]) -> ExecutionReport:
    report: ExecutionReport = {}
    for info in infos:
        report.setdefault(info.kind, []).append(info)
    return report


def count_by_kind(report: ExecutionReport) -> dict[OutcomeKind, int]:
    return {kind: len(report.get(kind, [])) for kind in OutcomeKind}


def has_failures(report: ExecutionReport) -> bool:
    return bool(report.get(OutcomeKind.FAILED) or report.get(OutcomeKind.ERROR))
