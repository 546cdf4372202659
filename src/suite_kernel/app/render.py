from __future__ import annotations

import json

from suite_kernel.kernel.outcome import OutcomeKind, TestInfo
from suite_kernel.kernel.report import ExecutionReport, count_by_kind

_SECTION_TITLES = {
    OutcomeKind.SUCCESS: "Success",
    OutcomeKind.FAILED: "Failed",
    OutcomeKind.ERROR: "Error",
    OutcomeKind.SKIPPED: "Skipped",
}


def render_text(report: ExecutionReport, *, show_reasons: bool = True) -> str:
    lines: list[str] = []
    for kind in OutcomeKind:
        infos = report.get(kind)
        if not infos:
            continue
        lines.append(f"{_SECTION_TITLES[kind]} ({len(infos)}):")
        for info in infos:
            reason = _reason_text(info)
            if show_reasons and reason is not None:
                lines.append(f"  - {info.display_name}: {reason}")
            else:
                lines.append(f"  - {info.display_name}")
    counts = count_by_kind(report)
    summary = ", ".join(f"{counts[kind]} {kind.value}" for kind in OutcomeKind)
    lines.append(f"Total {sum(counts.values())}: {summary}")
    return "\n".join(lines)


def render_json(report: ExecutionReport) -> str:
    counts = count_by_kind(report)
    payload = {
        "summary": {kind.value: counts[kind] for kind in OutcomeKind},
        "results": {
            kind.value: [_info_to_dict(info) for info in infos]
            for kind, infos in sorted(report.items(), key=lambda item: list(OutcomeKind).index(item[0]))
        },
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _reason_text(info: TestInfo) -> str | None:
    reason = info.outcome.reason
    if reason is None:
        return None
    return f"{type(reason).__name__}: {reason}"


def _info_to_dict(info: TestInfo) -> dict[str, object]:
    return {"name": info.display_name, "reason": _reason_text(info)}
