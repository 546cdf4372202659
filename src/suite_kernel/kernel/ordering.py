from __future__ import annotations

from collections.abc import Iterable

from suite_kernel.kernel.units import TestUnit

MIN_ORDER = 0
MAX_ORDER = 10


def resolve_order(unit: TestUnit) -> int | None:
    # Explicit Order tag wins over the inline order of the Test tag.
    if unit.explicit_order is not None:
        return unit.explicit_order
    return unit.inline_order


def normalize_order(value: int) -> int:
    return max(MIN_ORDER, min(value, MAX_ORDER))


def sort_key(unit: TestUnit) -> tuple[int, int, str]:
    # Unset order sorts after every set one; display name breaks ties.
    value = resolve_order(unit)
    if value is None:
        return (1, 0, unit.display_name)
    return (0, normalize_order(value), unit.display_name)


def order_tests(units: Iterable[TestUnit]) -> list[TestUnit]:
    return sorted(units, key=sort_key)
