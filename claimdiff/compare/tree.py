"""Leaf-level diff of two arbitrary JSON subtrees.

Both trees are flattened into ``/path/to/leaf`` entries (object keys sorted,
array items by index) and the two entry lists are matched by path. Null
leaves and empty containers produce no entries.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from claimdiff.compare.fields import values_equal
from claimdiff.models.claim import JSONValue
from claimdiff.models.reports import FieldDiff, TreeDiff

_PATH_DELIMITER = "/"


@dataclass(frozen=True)
class Leaf:
    path: str
    value: JSONValue


def format_value(value: JSONValue) -> str:
    """Render a leaf value the way JSON writes it, without quoting strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def flatten(node: JSONValue, path: str = "", filters: Sequence[str] | None = None) -> list[Leaf]:
    """Collect every leaf under *node*.

    With *filters*, only leaves whose path contains ``/<filter>/`` for some
    filter are kept.
    """
    if node is None:
        return []

    if isinstance(node, Mapping):
        leaves = []
        for key in sorted(node):
            leaves.extend(flatten(node[key], path + _PATH_DELIMITER + key, filters))
        return leaves

    if isinstance(node, list | tuple):
        leaves = []
        for index, item in enumerate(node):
            leaves.extend(flatten(item, path + _PATH_DELIMITER + str(index), filters))
        return leaves

    if not filters:
        return [Leaf(path, node)]
    # One entry per matching filter, so overlapping filters repeat the leaf.
    return [Leaf(path, node) for f in filters if f"{_PATH_DELIMITER}{f}{_PATH_DELIMITER}" in path]


def compare_trees(
    name: str,
    claim1_tree: JSONValue,
    claim2_tree: JSONValue,
    filters: Sequence[str] | None = None,
) -> TreeDiff:
    """Compare two JSON subtrees leaf by leaf.

    Differences and claim1-only entries keep claim1's traversal order;
    claim2-only entries keep claim2's.
    """
    claim1_leaves = flatten(claim1_tree, "", filters)
    claim2_leaves = flatten(claim2_tree, "", filters)

    claim1_values = {leaf.path: leaf.value for leaf in claim1_leaves}
    claim2_values = {leaf.path: leaf.value for leaf in claim2_leaves}

    fields = []
    claim1_only = []
    for leaf in claim1_leaves:
        if leaf.path in claim2_values:
            other = claim2_values[leaf.path]
            if not values_equal(leaf.value, other):
                fields.append(FieldDiff(field_path=leaf.path, claim1_value=leaf.value, claim2_value=other))
        else:
            claim1_only.append(f"{leaf.path}={format_value(leaf.value)}")

    claim2_only = [
        f"{leaf.path}={format_value(leaf.value)}" for leaf in claim2_leaves if leaf.path not in claim1_values
    ]

    return TreeDiff(
        name=name,
        fields=tuple(fields),
        fields_in_claim1_only=tuple(claim1_only),
        fields_in_claim2_only=tuple(claim2_only),
    )
