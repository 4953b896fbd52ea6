"""Key set reconciliation shared by every diff engine."""

from __future__ import annotations

from collections.abc import Iterable


def reconcile(set_a: Iterable[str], set_b: Iterable[str]) -> tuple[list[str], list[str]]:
    """Return ``(only_in_b, only_in_a)``, each sorted ascending.

    Duplicates in either input are ignored. Both results are always lists,
    empty when there is nothing to report.
    """
    keys_a = set(set_a)
    keys_b = set(set_b)
    return sorted(keys_b - keys_a), sorted(keys_a - keys_b)


def union(set_a: Iterable[str], set_b: Iterable[str]) -> list[str]:
    """Return every key found in either input, deduplicated and sorted."""
    return sorted(set(set_a) | set(set_b))
