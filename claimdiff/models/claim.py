"""In-memory claim document schema consumed by the comparison engines."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

# Decoded JSON value: str, int, float, bool, None, list or dict of those.
JSONValue = object

# A CNI plugin config is an open mapping; only "type" is required.
CNIPlugin = Mapping[str, JSONValue]

PLUGIN_IDENTITY_KEY = "type"

MASTER_NODE_LABELS = frozenset({"node-role.kubernetes.io/master", "node-role.kubernetes.io/control-plane"})
WORKER_NODE_LABELS = frozenset({"node-role.kubernetes.io/worker"})


class ResultState(StrEnum):
    """Final state of a test case."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class NodeDescriptor:
    """Summary of a cluster node as recorded in the claim."""

    name: str
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def is_master(self) -> bool:
        return any(label in MASTER_NODE_LABELS for label in self.labels)

    @property
    def is_worker(self) -> bool:
        return any(label in WORKER_NODE_LABELS for label in self.labels)


@dataclass(frozen=True)
class CNINetwork:
    """A CNI network configuration list.

    See https://github.com/containernetworking/cni/blob/main/SPEC.md#section-1-network-configuration-format
    """

    name: str
    cni_version: str = ""
    disable_check: bool = False
    plugins: tuple[CNIPlugin, ...] = ()


@dataclass(frozen=True)
class TestCaseResult:
    """Outcome of a single test case."""

    __test__ = False  # not a pytest test class

    id: str
    suite: str = ""
    state: str = ""


@dataclass(frozen=True)
class ClaimDocument:
    """Parsed claim artifact. Read-only for every engine."""

    node_summaries: dict[str, NodeDescriptor] = field(default_factory=dict)
    cni_networks_by_node: dict[str, tuple[CNINetwork, ...]] = field(default_factory=dict)
    results_by_suite: dict[str, tuple[TestCaseResult, ...]] = field(default_factory=dict)
    versions: dict[str, JSONValue] = field(default_factory=dict)
    # Raw sections compared leaf by leaf.
    node_summary_tree: dict[str, JSONValue] = field(default_factory=dict)
    csi_driver: JSONValue = None
    nodes_hw_info: JSONValue = None
    configuration: JSONValue = None
    abnormal_events_count: int = 0
