"""Pure query helpers over in-memory collections.

None of these functions mutate their input; they keep the input order unless
the helper is explicitly a sort.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, TypeVar, Union

T = TypeVar("T")

FieldGetter = Union[str, Callable[[object], object]]


def _get(item, field: FieldGetter):
    if callable(field):
        return field(item)
    if isinstance(item, dict):
        return item.get(field)
    return getattr(item, field)


def filter_by_text(items: Iterable[T], query: str, *fields: FieldGetter) -> list[T]:
    """Case-insensitive substring match on any of ``fields``.

    An empty query matches everything; whitespace is part of the query.
    """
    needle = (query or "").lower()
    if not needle:
        return list(items)

    out = []
    for item in items:
        for field in fields:
            value = _get(item, field)
            if value is not None and needle in str(value).lower():
                out.append(item)
                break
    return out


def count_by(items: Iterable[T], key: FieldGetter) -> dict[str, int]:
    counts: dict[str, int] = {}
    for item in items:
        k = _get(item, key) or ""
        counts[k] = counts.get(k, 0) + 1
    return counts


def sum_by(items: Iterable[T], key: FieldGetter, value: FieldGetter) -> dict[str, float]:
    totals: dict[str, float] = {}
    for item in items:
        k = _get(item, key) or ""
        totals[k] = totals.get(k, 0) + _get(item, value)
    return totals


def total(items: Iterable[T], value: FieldGetter):
    return sum(_get(item, value) for item in items)


def percent(part: int, whole: int) -> int:
    """Whole-number percentage rounded half-up; 0 when ``whole`` is 0."""
    if not whole:
        return 0
    ratio = Decimal(part) * 100 / Decimal(whole)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
