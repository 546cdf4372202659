from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from suite_kernel.kernel.errors import StructuralError
from suite_kernel.kernel.ordering import order_tests
from suite_kernel.kernel.outcome import TestInfo, TestOutcome, classify
from suite_kernel.kernel.units import HookUnit, SuiteMetadata, TestUnit
from suite_kernel.observability.logging import LogChannel, null_channel


@dataclass(frozen=True, slots=True)
class LifecycleExecutor:
    # Drives suite hooks once and per-test hooks + body per enabled test, strictly sequentially.
    factory: Callable[[], object]
    group_name: str = "group"
    log: LogChannel = field(default_factory=null_channel)

    def execute(self, metadata: SuiteMetadata) -> list[TestInfo]:
        self._run_hooks("before_suite", metadata.before_suite, None)
        infos = [self._run_test(unit, metadata) for unit in order_tests(metadata.tests)]
        # Not reached when instance creation aborted the loop above.
        self._run_hooks("after_suite", metadata.after_suite, None)
        return infos

    def _run_test(self, unit: TestUnit, metadata: SuiteMetadata) -> TestInfo:
        if not unit.enabled:
            self.log.info("Test skipped", test=unit.display_name, group=self.group_name)
            return TestInfo(display_name=unit.display_name, outcome=TestOutcome.skipped())

        # Construction failures are structural and end the whole run.
        instance = self._new_instance()
        self.log.debug("Test started", test=unit.display_name, group=self.group_name)
        self._run_hooks("before_each", metadata.before_each, instance)
        signal: BaseException | None = None
        try:
            unit.target(instance)
        except KeyboardInterrupt:
            raise
        except BaseException as exc:  # noqa: BLE001 - SystemExit and friends are test errors too
            signal = exc
        finally:
            self._run_hooks("after_each", metadata.after_each, instance)

        outcome = classify(signal)
        self.log.info(
            "Test finished",
            test=unit.display_name,
            group=self.group_name,
            outcome=outcome.kind.value,
            reason=str(outcome.reason) if outcome.reason is not None else None,
        )
        return TestInfo(display_name=unit.display_name, outcome=outcome)

    def _new_instance(self) -> object:
        try:
            return self.factory()
        except Exception as exc:  # noqa: BLE001 - wrap with explicit error
            raise StructuralError(f"Unable to create instance of group: {self.group_name}") from exc

    def _run_hooks(self, phase: str, hooks: Sequence[HookUnit], instance: object | None) -> None:
        # The first failing hook ends its phase; the failure is logged and swallowed.
        current = None
        try:
            for hook in hooks:
                current = hook
                if instance is None:
                    hook.target()
                else:
                    hook.target(instance)
        except KeyboardInterrupt:
            raise
        except BaseException as exc:  # noqa: BLE001 - hook failures never reach the report
            self.log.error(
                "Unable to run support methods (After- or Before-)",
                phase=phase,
                hook=current.identifier if current is not None else None,
                group=self.group_name,
                error=f"{type(exc).__name__}: {exc}",
            )
