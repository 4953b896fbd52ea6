"""Field-by-field comparison of two open records."""

from __future__ import annotations

from collections.abc import Mapping

from claimdiff.compare.reconcile import union

_MISSING = object()


def values_equal(value_a: object, value_b: object) -> bool:
    """Deep equality for decoded JSON values.

    Same as ``==`` except that booleans never equal numbers (``True != 1``).
    """
    if isinstance(value_a, bool) or isinstance(value_b, bool):
        return type(value_a) is type(value_b) and value_a == value_b
    if isinstance(value_a, Mapping) and isinstance(value_b, Mapping):
        if value_a.keys() != value_b.keys():
            return False
        return all(values_equal(value_a[key], value_b[key]) for key in value_a)
    if isinstance(value_a, list | tuple) and isinstance(value_b, list | tuple):
        if len(value_a) != len(value_b):
            return False
        return all(values_equal(a, b) for a, b in zip(value_a, value_b, strict=True))
    return value_a == value_b


def diff_fields(record_a: Mapping[str, object], record_b: Mapping[str, object]) -> list[str]:
    """Return the sorted names of fields that differ between the two records.

    A field present in only one record counts as different.
    """
    differing = []
    for name in union(record_a, record_b):
        value_a = record_a.get(name, _MISSING)
        value_b = record_b.get(name, _MISSING)
        if value_a is _MISSING or value_b is _MISSING or not values_equal(value_a, value_b):
            differing.append(name)
    return differing
