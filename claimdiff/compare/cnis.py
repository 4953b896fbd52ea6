"""CNI network and plugin diff engines.

Networks are matched by name and plugins by their ``type`` field. An entry
missing from one claim gets a single not-found tag and is not descended into.
Entries equal on both sides produce no report.
"""

from __future__ import annotations

from collections.abc import Sequence

from claimdiff.compare.fields import diff_fields
from claimdiff.compare.reconcile import union
from claimdiff.errors import PluginIdentityError
from claimdiff.models.claim import PLUGIN_IDENTITY_KEY, CNINetwork, CNIPlugin
from claimdiff.models.reports import (
    DIFFERENT_CNI_VERSION,
    DIFFERENT_DISABLE_CHECK,
    DIFFERENT_PLUGINS,
    NOT_FOUND_IN_CLAIM1,
    NOT_FOUND_IN_CLAIM2,
    CNINetworkDiffReport,
    CNIPluginDiffReport,
)
from claimdiff.observability.logging import get_logger

_logger = get_logger("compare.cnis")


def plugin_name(plugin: CNIPlugin, network: str = "") -> str:
    """Return the identity of *plugin*: the value of its ``type`` field."""
    name = plugin.get(PLUGIN_IDENTITY_KEY)
    if not isinstance(name, str):
        raise PluginIdentityError(plugin, network)
    return name


def plugins_by_name(plugins: Sequence[CNIPlugin], network: str = "") -> dict[str, CNIPlugin]:
    return {plugin_name(plugin, network): plugin for plugin in plugins}


def networks_by_name(networks: Sequence[CNINetwork]) -> dict[str, CNINetwork]:
    return {network.name: network for network in networks}


def diff_plugins(
    plugins_a: Sequence[CNIPlugin],
    plugins_b: Sequence[CNIPlugin],
    network: str = "",
) -> list[CNIPluginDiffReport]:
    """Compare the plugin lists of the same network in two claims.

    Raises PluginIdentityError if any plugin has no string ``type``.
    """
    claim1_plugins = plugins_by_name(plugins_a, network)
    claim2_plugins = plugins_by_name(plugins_b, network)

    reports = []
    for name in union(claim1_plugins, claim2_plugins):
        if name not in claim1_plugins:
            reports.append(CNIPluginDiffReport(plugin_name=name, differences=(NOT_FOUND_IN_CLAIM1,)))
            continue
        if name not in claim2_plugins:
            reports.append(CNIPluginDiffReport(plugin_name=name, differences=(NOT_FOUND_IN_CLAIM2,)))
            continue

        differences = diff_fields(claim1_plugins[name], claim2_plugins[name])
        if differences:
            reports.append(CNIPluginDiffReport(plugin_name=name, differences=tuple(differences)))

    return reports


def _diff_network(network1: CNINetwork, network2: CNINetwork) -> CNINetworkDiffReport | None:
    differences = []
    if network1.cni_version != network2.cni_version:
        differences.append(DIFFERENT_CNI_VERSION)
    if network1.disable_check != network2.disable_check:
        differences.append(DIFFERENT_DISABLE_CHECK)

    plugin_reports = diff_plugins(network1.plugins, network2.plugins, network=network1.name)
    if plugin_reports:
        differences.append(DIFFERENT_PLUGINS)

    if not differences:
        return None
    return CNINetworkDiffReport(
        network_name=network1.name,
        differences=tuple(differences),
        plugin_diffs=tuple(plugin_reports),
    )


def diff_networks(networks_a: Sequence[CNINetwork], networks_b: Sequence[CNINetwork]) -> list[CNINetworkDiffReport]:
    """Compare the CNI networks of the same node in two claims."""
    claim1_networks = networks_by_name(networks_a)
    claim2_networks = networks_by_name(networks_b)
    names = union(claim1_networks, claim2_networks)

    reports = []
    for name in names:
        if name not in claim1_networks:
            reports.append(CNINetworkDiffReport(network_name=name, differences=(NOT_FOUND_IN_CLAIM1,)))
            continue
        if name not in claim2_networks:
            reports.append(CNINetworkDiffReport(network_name=name, differences=(NOT_FOUND_IN_CLAIM2,)))
            continue

        report = _diff_network(claim1_networks[name], claim2_networks[name])
        if report is not None:
            reports.append(report)

    _logger.debug("cni_networks_compared", networks=len(names), differing=len(reports))
    return reports
