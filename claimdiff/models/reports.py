"""Diff report data structures.

Every report sequence is a tuple sorted by its identity key, so two runs over
the same inputs always produce identical reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from claimdiff.models.claim import JSONValue

NOT_FOUND_IN_CLAIM1 = "not found in claim1"
NOT_FOUND_IN_CLAIM2 = "not found in claim2"

# Network difference tags
DIFFERENT_CNI_VERSION = "cniVersion"
DIFFERENT_DISABLE_CHECK = "disable_check"
DIFFERENT_PLUGINS = "plugins"

# Node difference tags
DIFFERENT_CNIS = "CNIs"

TC_RESULT_NOT_FOUND = "not found"


def is_not_found_tag(tag: str) -> bool:
    """Return True if *tag* marks an entry present in only one claim."""
    return tag in (NOT_FOUND_IN_CLAIM1, NOT_FOUND_IN_CLAIM2)


@dataclass(frozen=True)
class CNIPluginDiffReport:
    """Differences of one plugin, keyed by its ``type``.

    ``differences`` holds the names of fields whose values differ, or a
    single not-found tag.
    """

    plugin_name: str
    differences: tuple[str, ...] = ()


@dataclass(frozen=True)
class CNINetworkDiffReport:
    """Differences of one CNI network on a node."""

    network_name: str
    differences: tuple[str, ...] = ()
    plugin_diffs: tuple[CNIPluginDiffReport, ...] = ()


@dataclass(frozen=True)
class NodeDiffReport:
    """Differences of one node across both claims."""

    node_name: str
    differences: tuple[str, ...] = ()
    cni_network_diffs: tuple[CNINetworkDiffReport, ...] = ()


@dataclass(frozen=True)
class RolesSummary:
    """Node role counts of a single claim."""

    master_nodes: int = 0
    worker_nodes: int = 0
    master_worker_nodes: int = 0


@dataclass(frozen=True)
class DiffReport:
    """Cluster nodes comparison: role summaries plus per-node differences."""

    claim1_summary: RolesSummary = field(default_factory=RolesSummary)
    claim2_summary: RolesSummary = field(default_factory=RolesSummary)
    node_diffs: tuple[NodeDiffReport, ...] = ()


@dataclass(frozen=True)
class TcResultDifference:
    """A test case whose state differs, or that exists in only one claim."""

    name: str
    claim1_result: str
    claim2_result: str


@dataclass(frozen=True)
class TcResultsSummary:
    """Count of test case states in one claim.

    ``other`` counts states outside passed/skipped/failed (e.g. "error").
    """

    passed: int = 0
    skipped: int = 0
    failed: int = 0
    other: int = 0


@dataclass(frozen=True)
class TcDiffReport:
    """Test case results comparison."""

    claim1_summary: TcResultsSummary = field(default_factory=TcResultsSummary)
    claim2_summary: TcResultsSummary = field(default_factory=TcResultsSummary)
    differences: tuple[TcResultDifference, ...] = ()
    differing_count: int = 0


@dataclass(frozen=True)
class FieldDiff:
    """A leaf path present in both trees with different values."""

    field_path: str
    claim1_value: JSONValue
    claim2_value: JSONValue


@dataclass(frozen=True)
class TreeDiff:
    """Leaf-level comparison of two JSON subtrees.

    The only-in lists hold ``path=value`` strings.
    """

    name: str
    fields: tuple[FieldDiff, ...] = ()
    fields_in_claim1_only: tuple[str, ...] = ()
    fields_in_claim2_only: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.fields or self.fields_in_claim1_only or self.fields_in_claim2_only)


@dataclass(frozen=True)
class AbnormalEventsCount:
    """Number of abnormal cluster events recorded by each claim."""

    claim1: int = 0
    claim2: int = 0


@dataclass(frozen=True)
class ConfigurationsDiffReport:
    """Suite configuration comparison plus abnormal event counts."""

    config: TreeDiff
    abnormal_events: AbnormalEventsCount = field(default_factory=AbnormalEventsCount)


@dataclass(frozen=True)
class NodeInventoryDiffReport:
    """Leaf-level comparison of the raw node sections.

    ``nodes`` only covers node labels and annotations.
    """

    nodes: TreeDiff
    csi: TreeDiff
    hardware: TreeDiff


@dataclass(frozen=True)
class ClaimComparison:
    """Every section compared between two claims.

    ``configurations`` and ``node_inventory`` are None when not computed.
    """

    versions: TreeDiff
    test_cases: TcDiffReport
    nodes: DiffReport
    configurations: ConfigurationsDiffReport | None = None
    node_inventory: NodeInventoryDiffReport | None = None
