"""Claim file loader.

Maps a claim JSON document onto ClaimDocument. Only the sections the
comparison engines need are read:

    claim.nodes.nodeSummary                   node name -> Kubernetes Node object
    claim.nodes.cniNetworks / cniPlugins      node name -> list of CNI networks
    claim.results                             suite -> result object or list of them
    claim.versions                            any JSON object
    claim.configurations                      Config tree and AbnormalEvents list
    claim.nodes.csiDriver / nodesHwInfo       any JSON, compared leaf by leaf

Missing sections yield empty maps. Anything structurally wrong raises
ClaimLoadError.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from claimdiff.errors import ClaimLoadError
from claimdiff.models.claim import CNINetwork, ClaimDocument, NodeDescriptor, TestCaseResult
from claimdiff.observability.logging import get_logger

_logger = get_logger("loader")

# cniNetworks replaced cniPlugins in newer claim formats.
_CNI_KEYS = ("cniNetworks", "cniPlugins")


def _object(value: Any, what: str, source: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ClaimLoadError(source, f"{what} must be an object, got {type(value).__name__}")
    return value


def _list(value: Any, what: str, source: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ClaimLoadError(source, f"{what} must be an array, got {type(value).__name__}")
    return value


def _parse_node(name: str, raw: Any, source: str) -> NodeDescriptor:
    node = _object(raw, f"nodeSummary['{name}']", source)
    metadata = _object(node.get("metadata"), f"nodeSummary['{name}'].metadata", source)
    labels = _object(metadata.get("labels"), f"nodeSummary['{name}'].metadata.labels", source)
    return NodeDescriptor(name=name, labels={str(k): str(v) for k, v in labels.items()})


def _parse_network(node: str, raw: Any, source: str) -> CNINetwork:
    what = f"CNI network on node '{node}'"
    network = _object(raw, what, source)
    raw_plugins = _list(network.get("plugins"), f"{what} plugins", source)
    plugins = tuple(_object(plugin, f"plugin of {what}", source) for plugin in raw_plugins)
    disable_check = network.get("disableCheck")
    if disable_check is None:
        disable_check = False
    if not isinstance(disable_check, bool):
        raise ClaimLoadError(source, f"{what} disableCheck must be a boolean, got {type(disable_check).__name__}")
    return CNINetwork(
        name=str(network.get("name", "")),
        cni_version=str(network.get("cniVersion", "")),
        disable_check=disable_check,
        plugins=plugins,
    )


def _parse_result(suite: str, raw: Any, source: str) -> TestCaseResult:
    result = _object(raw, f"result in '{suite}'", source)
    # Older claims spell the key "TestID".
    test_id = _object(result.get("testID", result.get("TestID")), f"testID in '{suite}'", source)
    case_id = test_id.get("id")
    if not isinstance(case_id, str) or not case_id:
        raise ClaimLoadError(source, f"result in '{suite}' has no test case id")
    return TestCaseResult(id=case_id, suite=str(test_id.get("suite", suite)), state=str(result.get("state", "")))


def parse_claim(data: Any, source: str = "<memory>") -> ClaimDocument:
    """Build a ClaimDocument from an already-decoded claim JSON document."""
    root = _object(data, "document", source)
    if "claim" not in root:
        raise ClaimLoadError(source, "missing top-level 'claim' object")
    claim = _object(root["claim"], "claim", source)
    nodes = _object(claim.get("nodes"), "claim.nodes", source)

    node_summary_tree = dict(_object(nodes.get("nodeSummary"), "claim.nodes.nodeSummary", source))
    node_summaries = {name: _parse_node(name, raw, source) for name, raw in node_summary_tree.items()}

    cni_key = next((key for key in _CNI_KEYS if nodes.get(key) is not None), _CNI_KEYS[0])
    cni_networks_by_node = {
        node: tuple(_parse_network(node, raw, source) for raw in _list(networks, f"CNI networks of '{node}'", source))
        for node, networks in _object(nodes.get(cni_key), f"claim.nodes.{cni_key}", source).items()
    }

    results_by_suite = {}
    for suite, entry in _object(claim.get("results"), "claim.results", source).items():
        entries = entry if isinstance(entry, list) else [entry]
        results_by_suite[suite] = tuple(_parse_result(suite, raw, source) for raw in entries)

    versions = dict(_object(claim.get("versions"), "claim.versions", source))
    configurations = _object(claim.get("configurations"), "claim.configurations", source)
    abnormal_events = _list(configurations.get("AbnormalEvents"), "claim.configurations.AbnormalEvents", source)

    return ClaimDocument(
        node_summaries=node_summaries,
        cni_networks_by_node=cni_networks_by_node,
        results_by_suite=results_by_suite,
        versions=versions,
        node_summary_tree=node_summary_tree,
        csi_driver=nodes.get("csiDriver"),
        nodes_hw_info=nodes.get("nodesHwInfo"),
        configuration=configurations.get("Config"),
        abnormal_events_count=len(abnormal_events),
    )


def load_claim(path: str | Path) -> ClaimDocument:
    """Read and parse the claim file at *path*.

    Raises ClaimLoadError if the file cannot be read, is not UTF-8 or is not
    valid JSON.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ClaimLoadError(source, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ClaimLoadError(source, f"not valid UTF-8: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ClaimLoadError(source, f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ClaimLoadError(source, "invalid JSON: nested too deeply") from exc

    claim = parse_claim(data, source)
    _logger.info(
        "claim_loaded",
        path=source,
        nodes=len(claim.node_summaries),
        suites=len(claim.results_by_suite),
    )
    return claim
