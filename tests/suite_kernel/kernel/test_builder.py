from __future__ import annotations

import pytest

from suite_kernel.kernel.builder import SuiteBuilder
from suite_kernel.kernel.errors import StructuralError
from suite_kernel.kernel.outcome import OutcomeKind
from suite_kernel.kernel.runner import run_tests
from suite_kernel.kernel.tags import DisabledTag, OrderTag, Scope, TestTag


class _State:
    def __init__(self) -> None:
        self.value = 0


def test_builder_declares_units_with_role_scopes() -> None:
    def check(state: _State) -> None:
        pass

    group = (
        SuiteBuilder(name="built", factory=_State)
        .before_suite(lambda: None)
        .test(check, name="Check", explicit_order=2, disabled=True)
        .build()
    )
    suite_hook, test_unit = group.units
    assert suite_hook.scope is Scope.SUITE
    assert test_unit.scope is Scope.INSTANCE
    assert test_unit.identifier == "check"
    assert test_unit.tags == (TestTag(name="Check"), OrderTag(value=2), DisabledTag())


def test_builder_group_runs_with_fresh_state() -> None:
    # Builder groups go through the same pipeline as decorated classes.
    seen: list[int] = []

    def bump(state: _State) -> None:
        state.value += 1
        seen.append(state.value)

    group = (
        SuiteBuilder(name="built", factory=_State)
        .test(bump, name="a")
        .test(bump, name="b")
        .build()
    )
    report = run_tests(group)
    assert seen == [1, 1]
    assert [i.display_name for i in report[OutcomeKind.SUCCESS]] == ["a", "b"]


def test_builder_rejects_bad_inputs() -> None:
    with pytest.raises(StructuralError):
        SuiteBuilder(name="", factory=_State).build()
    with pytest.raises(StructuralError):
        SuiteBuilder(name="x", factory=None).build()  # type: ignore[arg-type]
    with pytest.raises(StructuralError):
        SuiteBuilder(name="x", factory=_State).test("nope")  # type: ignore[arg-type]
