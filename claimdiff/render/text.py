"""Fixed-width text tables for diff reports.

The layouts are consumed by scripts and compared literally in tests, so
column widths and separators must not change.
"""

from __future__ import annotations

from collections.abc import Sequence

from claimdiff.compare.tree import format_value
from claimdiff.models.reports import (
    ClaimComparison,
    CNINetworkDiffReport,
    CNIPluginDiffReport,
    ConfigurationsDiffReport,
    DiffReport,
    NodeInventoryDiffReport,
    TcDiffReport,
    TreeDiff,
    is_not_found_tag,
)

NO_DIFFS = "<none>"

_CNI_NAME_WIDTH = 30
_NODE_NAME_WIDTH = 60
_ROLES_COLUMN_WIDTH = 10
_TC_STATUS_WIDTH = 15
_TC_COUNT_WIDTH = 20
_TC_NAME_WIDTH = 60
_TC_RESULT_WIDTH = 10
_TREE_COLUMNS_GAP = 5
_EVENTS_COUNT_WIDTH = 12


def _row(*columns: object, widths: Sequence[int]) -> str:
    """Left-justify every column but the last to its width."""
    padded = [f"{column!s:<{width}}" for column, width in zip(columns, widths, strict=False)]
    return "".join(padded) + str(columns[-1]) + "\n"


def _only_tag_is_not_found(differences: Sequence[str]) -> bool:
    return len(differences) == 1 and is_not_found_tag(differences[0])


def render_plugin_diffs(reports: Sequence[CNIPluginDiffReport]) -> str:
    """Render plugin differences.

    PLUGIN                        DIFFERENCES
    bridge                        hairpinMode,ipam
    tuning                        not found in claim1
    """
    widths = (_CNI_NAME_WIDTH,)
    text = _row("PLUGIN", "DIFFERENCES", widths=widths)
    for report in reports:
        text += _row(report.plugin_name, ",".join(report.differences), widths=widths)
    return text


def render_network_diffs(reports: Sequence[CNINetworkDiffReport]) -> str:
    """Render CNI network differences.

    CNI-NETWORK                   DIFFERENCES
    crio                          cniVersion,plugins
    """
    widths = (_CNI_NAME_WIDTH,)
    text = _row("CNI-NETWORK", "DIFFERENCES", widths=widths)
    for report in reports:
        text += _row(report.network_name, ",".join(report.differences), widths=widths)
    return text


def render_nodes(report: DiffReport) -> str:
    """Render the role summary, the per-node table and each node's CNI tables.

    Nodes and networks missing from one claim only appear in their parent
    table; there is nothing below them to show.
    """
    roles_widths = (_ROLES_COLUMN_WIDTH,) * 3
    text = "CLUSTER NODES ROLES SUMMARY\n"
    text += "---------------------------\n"
    text += _row("CLAIM", "MASTERS", "WORKERS", "MASTER+WORKER", widths=roles_widths)
    for label, summary in (("claim1", report.claim1_summary), ("claim2", report.claim2_summary)):
        text += _row(
            label,
            summary.master_nodes,
            summary.worker_nodes,
            summary.master_worker_nodes,
            widths=roles_widths,
        )
    text += "\n"

    text += "CLUSTER NODES DIFFERENCES\n"
    text += "-------------------------\n"
    if not report.node_diffs:
        return text + NO_DIFFS + "\n"

    widths = (_NODE_NAME_WIDTH,)
    text += _row("NODE", "DIFFERENCES", widths=widths)
    for node_diff in report.node_diffs:
        text += _row(node_diff.node_name, ",".join(node_diff.differences), widths=widths)

    for node_diff in report.node_diffs:
        if _only_tag_is_not_found(node_diff.differences):
            continue

        text += f"\nNODE: {node_diff.node_name}\n"
        text += render_network_diffs(node_diff.cni_network_diffs)

        for network_diff in node_diff.cni_network_diffs:
            if _only_tag_is_not_found(network_diff.differences):
                continue
            text += f"\nNODE: {node_diff.node_name}, CNI-NETWORK: {network_diff.network_name}\n"
            text += render_plugin_diffs(network_diff.plugin_diffs)

    return text


def render_test_cases(report: TcDiffReport) -> str:
    """Render the per-claim results summary and the differing test cases."""
    summary_widths = (_TC_STATUS_WIDTH, _TC_COUNT_WIDTH)
    claim1, claim2 = report.claim1_summary, report.claim2_summary

    text = "RESULTS SUMMARY\n"
    text += "---------------\n"
    text += _row("STATUS", "# in CLAIM-1", "# in CLAIM-2", widths=summary_widths)
    text += _row("passed", claim1.passed, claim2.passed, widths=summary_widths)
    text += _row("skipped", claim1.skipped, claim2.skipped, widths=summary_widths)
    text += _row("failed", claim1.failed, claim2.failed, widths=summary_widths)
    if claim1.other or claim2.other:
        text += _row("other", claim1.other, claim2.other, widths=summary_widths)
    text += "\n"

    text += "RESULTS DIFFERENCES\n"
    text += "-------------------\n"
    if not report.differences:
        return text + NO_DIFFS + "\n"

    diff_widths = (_TC_NAME_WIDTH, _TC_RESULT_WIDTH)
    text += _row("TEST CASE NAME", "CLAIM-1", "CLAIM-2", widths=diff_widths)
    for diff in report.differences:
        text += _row(diff.name, diff.claim1_result, diff.claim2_result, widths=diff_widths)
    return text


def render_tree(diff: TreeDiff) -> str:
    """Render a tree diff as three sections: differences and each claim's own fields.

    The first two columns are as wide as their longest entry plus a gap.
    """
    path_width = max([len("FIELD"), *(len(f.field_path) for f in diff.fields)]) + _TREE_COLUMNS_GAP
    value_width = max([len("CLAIM 1"), *(len(format_value(f.claim1_value)) for f in diff.fields)]) + _TREE_COLUMNS_GAP
    widths = (path_width, value_width)

    text = f"{diff.name}: Differences\n"
    text += _row("FIELD", "CLAIM 1", "CLAIM 2", widths=widths)
    if diff.fields:
        for field in diff.fields:
            text += _row(
                field.field_path,
                format_value(field.claim1_value),
                format_value(field.claim2_value),
                widths=widths,
            )
    else:
        text += NO_DIFFS + "\n"

    for label, entries in (("CLAIM 1", diff.fields_in_claim1_only), ("CLAIM 2", diff.fields_in_claim2_only)):
        text += f"\n{diff.name}: Only in {label}\n"
        text += "".join(f"{entry}\n" for entry in entries) if entries else NO_DIFFS + "\n"

    return text


def render_configurations(report: ConfigurationsDiffReport) -> str:
    """Render the suite configuration tree diff and the abnormal events counts."""
    widths = (_EVENTS_COUNT_WIDTH,)
    text = "CONFIGURATIONS\n"
    text += "--------------\n\n"
    text += render_tree(report.config)
    text += "\nCluster abnormal events count\n"
    text += _row("CLAIM 1", "CLAIM 2", widths=widths)
    text += _row(report.abnormal_events.claim1, report.abnormal_events.claim2, widths=widths)
    return text


def render_node_inventory(report: NodeInventoryDiffReport) -> str:
    text = "CLUSTER NODES INVENTORY\n"
    text += "-----------------------\n\n"
    return text + "\n".join(render_tree(diff) for diff in (report.nodes, report.csi, report.hardware))


def render_comparison(comparison: ClaimComparison) -> str:
    """Render every section separated by blank lines.

    Order: versions, results, configurations, cluster nodes, node inventory.
    Sections that were not computed are left out.
    """
    sections = [render_tree(comparison.versions), render_test_cases(comparison.test_cases)]
    if comparison.configurations is not None:
        sections.append(render_configurations(comparison.configurations))
    sections.append(render_nodes(comparison.nodes))
    if comparison.node_inventory is not None:
        sections.append(render_node_inventory(comparison.node_inventory))
    return "\n".join(sections)
