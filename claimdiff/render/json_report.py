"""JSON serialisation of diff reports.

Key names match the JSON documents earlier releases produced. Empty nested
report lists (a node's networks, a network's plugins) are omitted.
"""

from __future__ import annotations

import json
from typing import Any

from claimdiff.models.reports import (
    ClaimComparison,
    CNINetworkDiffReport,
    CNIPluginDiffReport,
    ConfigurationsDiffReport,
    DiffReport,
    NodeDiffReport,
    NodeInventoryDiffReport,
    RolesSummary,
    TcDiffReport,
    TcResultsSummary,
    TreeDiff,
)


def plugin_diff_to_dict(report: CNIPluginDiffReport) -> dict[str, Any]:
    return {"pluginName": report.plugin_name, "differences": list(report.differences)}


def network_diff_to_dict(report: CNINetworkDiffReport) -> dict[str, Any]:
    data: dict[str, Any] = {"networkName": report.network_name, "differences": list(report.differences)}
    if report.plugin_diffs:
        data["pluginsDiffReport"] = [plugin_diff_to_dict(p) for p in report.plugin_diffs]
    return data


def node_diff_to_dict(report: NodeDiffReport) -> dict[str, Any]:
    data: dict[str, Any] = {"nodeName": report.node_name, "differences": list(report.differences)}
    if report.cni_network_diffs:
        data["cniNetworksDiffReport"] = [network_diff_to_dict(n) for n in report.cni_network_diffs]
    return data


def _roles_to_dict(summary: RolesSummary) -> dict[str, int]:
    return {
        "masterNodes": summary.master_nodes,
        "workerNodes": summary.worker_nodes,
        "masterAndWorkerNodes": summary.master_worker_nodes,
    }


def nodes_to_dict(report: DiffReport) -> dict[str, Any]:
    return {
        "nodesRolesSummary": {
            "claim1": _roles_to_dict(report.claim1_summary),
            "claim2": _roles_to_dict(report.claim2_summary),
        },
        "nodesDiffReport": [node_diff_to_dict(n) for n in report.node_diffs],
    }


def _results_summary_to_dict(summary: TcResultsSummary) -> dict[str, int]:
    data = {"Passed": summary.passed, "Skipped": summary.skipped, "Failed": summary.failed}
    if summary.other:
        data["Other"] = summary.other
    return data


def results_to_dict(report: TcDiffReport) -> dict[str, Any]:
    return {
        "claimFile1ResultsSummary": _results_summary_to_dict(report.claim1_summary),
        "claimFile2ResultsSummary": _results_summary_to_dict(report.claim2_summary),
        "resultsDifferences": [
            {"Name": d.name, "Claim1Result": d.claim1_result, "Claim2Result": d.claim2_result}
            for d in report.differences
        ],
        "differentTestCasesResults": report.differing_count,
    }


def tree_to_dict(diff: TreeDiff) -> dict[str, Any]:
    return {
        "name": diff.name,
        "fields": [
            {"field": f.field_path, "claim1Value": f.claim1_value, "claim2Value": f.claim2_value} for f in diff.fields
        ],
        "fieldsInClaim1Only": list(diff.fields_in_claim1_only),
        "fieldsInClaim2Only": list(diff.fields_in_claim2_only),
    }


def configurations_to_dict(report: ConfigurationsDiffReport) -> dict[str, Any]:
    return {
        "CertSuiteConfig": tree_to_dict(report.config),
        "abnormalEventsCount": {"claim1": report.abnormal_events.claim1, "claim2": report.abnormal_events.claim2},
    }


def node_inventory_to_dict(report: NodeInventoryDiffReport) -> dict[str, Any]:
    return {
        "nodes": tree_to_dict(report.nodes),
        "CSI": tree_to_dict(report.csi),
        "hardware": tree_to_dict(report.hardware),
    }


def comparison_to_dict(comparison: ClaimComparison) -> dict[str, Any]:
    """Build the report document; sections that were not computed are left out."""
    data: dict[str, Any] = {
        "versions": tree_to_dict(comparison.versions),
        "testCases": results_to_dict(comparison.test_cases),
    }
    if comparison.configurations is not None:
        data["configurations"] = configurations_to_dict(comparison.configurations)
    data["nodes"] = nodes_to_dict(comparison.nodes)
    if comparison.node_inventory is not None:
        data["nodeInventory"] = node_inventory_to_dict(comparison.node_inventory)
    return data


def render_json(comparison: ClaimComparison, indent: int = 2) -> str:
    """Serialise *comparison* to a JSON document ending with a newline."""
    return json.dumps(comparison_to_dict(comparison), indent=indent or None) + "\n"
