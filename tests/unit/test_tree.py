"""Tests for the leaf-level JSON tree diff."""

from __future__ import annotations

import json

from claimdiff.compare.tree import Leaf, compare_trees, flatten, format_value
from claimdiff.models.reports import FieldDiff, TreeDiff

_COMPLEX = """
{
  "field1": [
    {"internalField1": "hello"},
    {"internalField2": "goodbye"}
  ],
  "field2": "value2",
  "field3": {
    "internalField3": {
      "interestingField": ["hello3", "goodbye3"],
      "notInterestingField": 10
    },
    "internalField4": "field4Value"
  }
}
"""


class TestFlatten:
    def test_empty_object(self) -> None:
        assert flatten({}) == []

    def test_null(self) -> None:
        assert flatten(None) == []
        assert flatten({"a": None}) == []

    def test_scalars(self) -> None:
        assert flatten({"field1": "value1", "field2": 5}) == [Leaf("/field1", "value1"), Leaf("/field2", 5)]

    def test_nested_object(self) -> None:
        assert flatten({"field1": {"internalField1": "hello"}}) == [Leaf("/field1/internalField1", "hello")]

    def test_keys_sorted_and_arrays_indexed(self) -> None:
        leaves = flatten(json.loads(_COMPLEX))
        assert [leaf.path for leaf in leaves] == [
            "/field1/0/internalField1",
            "/field1/1/internalField2",
            "/field2",
            "/field3/internalField3/interestingField/0",
            "/field3/internalField3/interestingField/1",
            "/field3/internalField3/notInterestingField",
            "/field3/internalField4",
        ]

    def test_filter_on_top_level_field(self) -> None:
        leaves = flatten(json.loads(_COMPLEX), filters=["field1"])
        assert leaves == [Leaf("/field1/0/internalField1", "hello"), Leaf("/field1/1/internalField2", "goodbye")]

    def test_filter_on_inner_field(self) -> None:
        leaves = flatten(json.loads(_COMPLEX), filters=["interestingField"])
        assert leaves == [
            Leaf("/field3/internalField3/interestingField/0", "hello3"),
            Leaf("/field3/internalField3/interestingField/1", "goodbye3"),
        ]


class TestFormatValue:
    def test_values(self) -> None:
        assert format_value("abc") == "abc"
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(5.0) == "5"
        assert format_value(2.5) == "2.5"
        assert format_value(7) == "7"


class TestCompareTrees:
    def test_empty(self) -> None:
        assert compare_trees("VERSIONS", {}, {}) == TreeDiff(name="VERSIONS")

    def test_matching(self) -> None:
        versions = {"claimFormat": "v0.0.1", "k8s": "v1.23.1", "ocp": "4.12", "tnf": "v4.2.0"}
        diff = compare_trees("VERSIONS", versions, dict(versions))
        assert diff.is_empty

    def test_value_difference_and_one_sided_fields(self) -> None:
        diff = compare_trees(
            "VERSIONS",
            {"claimFormat": "v0.0.1", "k8s": "v1.23.1", "ocClient": "4.11"},
            {"claimFormat": "v0.0.1", "k8s": "v1.24.0", "tnfGitCommit": "abc123"},
        )
        assert diff.fields == (FieldDiff(field_path="/k8s", claim1_value="v1.23.1", claim2_value="v1.24.0"),)
        assert diff.fields_in_claim1_only == ("/ocClient=4.11",)
        assert diff.fields_in_claim2_only == ("/tnfGitCommit=abc123",)
        assert not diff.is_empty

    def test_bool_vs_number_is_a_difference(self) -> None:
        diff = compare_trees("X", {"a": True}, {"a": 1})
        assert diff.fields == (FieldDiff(field_path="/a", claim1_value=True, claim2_value=1),)
