from __future__ import annotations

import inspect

from suite_kernel.kernel.collector import collect_and_validate
from suite_kernel.kernel.discovery import discover_group
from suite_kernel.kernel.errors import StructuralError
from suite_kernel.kernel.executor import LifecycleExecutor
from suite_kernel.kernel.report import ExecutionReport, aggregate
from suite_kernel.kernel.units import TestGroup
from suite_kernel.observability.logging import LogChannel, null_channel


def run_tests(group: TestGroup | type, *, log: LogChannel | None = None) -> ExecutionReport:
    # Returns a complete report or raises StructuralError; there is no partial report.
    log = log or null_channel()
    if inspect.isclass(group):
        group = discover_group(group)
    if not isinstance(group, TestGroup):
        raise StructuralError(f"Cannot run {type(group).__name__}; expected a class or TestGroup")

    # Metadata is derived fresh on every run.
    metadata = collect_and_validate(group.units, log=log)
    log.debug(
        "Suite collected",
        group=group.name,
        tests=len(metadata.tests),
        hooks=len(metadata.before_suite)
        + len(metadata.after_suite)
        + len(metadata.before_each)
        + len(metadata.after_each),
    )
    executor = LifecycleExecutor(factory=group.factory, group_name=group.name, log=log)
    return aggregate(executor.execute(metadata))
