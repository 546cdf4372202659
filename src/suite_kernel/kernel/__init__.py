from .builder import SuiteBuilder
from .collector import collect_and_validate
from .discovery import discover_group
from .errors import StructuralError
from .executor import LifecycleExecutor
from .ordering import normalize_order, order_tests, resolve_order, sort_key
from .outcome import OutcomeKind, TestInfo, TestOutcome, classify
from .report import ExecutionReport, aggregate, count_by_kind, has_failures
from .runner import run_tests
from .tags import Scope, TestRole
from .units import DeclaredUnit, HookUnit, SuiteMetadata, TestGroup, TestUnit

# Kernel exports cover collection, ordering, execution and reporting.
__all__ = [
    "SuiteBuilder",
    "collect_and_validate",
    "discover_group",
    "StructuralError",
    "LifecycleExecutor",
    "normalize_order",
    "order_tests",
    "resolve_order",
    "sort_key",
    "OutcomeKind",
    "TestInfo",
    "TestOutcome",
    "classify",
    "ExecutionReport",
    "aggregate",
    "count_by_kind",
    "has_failures",
    "run_tests",
    "Scope",
    "TestRole",
    "DeclaredUnit",
    "HookUnit",
    "SuiteMetadata",
    "TestGroup",
    "TestUnit",
]
