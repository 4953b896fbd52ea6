"""Tests for the CNI network and plugin diff engines."""

from __future__ import annotations

import pytest

from claimdiff.compare.cnis import diff_networks, diff_plugins, networks_by_name, plugin_name, plugins_by_name
from claimdiff.errors import PluginIdentityError
from claimdiff.models.claim import CNINetwork
from claimdiff.models.reports import CNINetworkDiffReport, CNIPluginDiffReport, is_not_found_tag

_BRIDGE = {"type": "bridge", "bridge": "cni0", "ipMasq": True, "hairpinMode": True}
_LOOPBACK = {"type": "loopback"}
_MULTUS = {"type": "multus", "kubeconfig": "/etc/kubernetes/cni/net.d/multus.d/multus.kubeconfig"}


def _net(
    name: str = "crio",
    cni_version: str = "0.4.0",
    disable_check: bool = False,
    plugins: tuple[dict, ...] = (),
) -> CNINetwork:
    return CNINetwork(name=name, cni_version=cni_version, disable_check=disable_check, plugins=plugins)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestMaps:
    def test_networks_by_name_empty(self) -> None:
        assert networks_by_name([]) == {}

    def test_networks_by_name_any_order(self) -> None:
        nets = networks_by_name([_net("name2"), _net("name1")])
        assert sorted(nets) == ["name1", "name2"]
        assert nets["name1"].name == "name1"

    def test_plugins_by_name(self) -> None:
        plugins = plugins_by_name([_MULTUS, _LOOPBACK])
        assert plugins == {"loopback": _LOOPBACK, "multus": _MULTUS}

    def test_plugin_without_type_raises(self) -> None:
        with pytest.raises(PluginIdentityError, match="crio"):
            plugin_name({"name": "nameless"}, network="crio")

    def test_plugin_with_non_string_type_raises(self) -> None:
        with pytest.raises(PluginIdentityError):
            plugin_name({"type": 3})


class TestIsNotFoundTag:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("", False),
            ("diff1", False),
            ("diff1,diff2", False),
            ("not found in claim0", False),
            ("not found in claim1,ipam", False),
            ("not found in claim1", True),
            ("not found in claim2", True),
        ],
    )
    def test_tags(self, tag: str, expected: bool) -> None:
        assert is_not_found_tag(tag) is expected


# =====================================================================
# diff_plugins
# =====================================================================


class TestDiffPlugins:
    def test_empty_lists(self) -> None:
        assert diff_plugins([], []) == []

    def test_identical_plugins(self) -> None:
        assert diff_plugins([_BRIDGE, _LOOPBACK], [_LOOPBACK, _BRIDGE]) == []

    def test_plugin_missing_in_claim2(self) -> None:
        reports = diff_plugins([_MULTUS, _LOOPBACK], [_LOOPBACK])
        assert reports == [CNIPluginDiffReport(plugin_name="multus", differences=("not found in claim2",))]

    def test_plugin_missing_in_claim1(self) -> None:
        reports = diff_plugins([_LOOPBACK], [_LOOPBACK, _MULTUS])
        assert reports == [CNIPluginDiffReport(plugin_name="multus", differences=("not found in claim1",))]

    def test_field_differences_sorted(self) -> None:
        changed = {"type": "bridge", "bridge": "cni0", "ipMasq": False, "newFakeFlag": True}
        reports = diff_plugins([_BRIDGE], [changed])
        assert reports == [
            CNIPluginDiffReport(plugin_name="bridge", differences=("hairpinMode", "ipMasq", "newFakeFlag")),
        ]

    def test_reports_sorted_by_plugin_name(self) -> None:
        tuning = {"type": "tuning", "mtu": 1500}
        reports = diff_plugins([tuning, _BRIDGE], [{"type": "tuning", "mtu": 9000}, _LOOPBACK])
        assert [r.plugin_name for r in reports] == ["bridge", "loopback", "tuning"]
        assert reports[0].differences == ("not found in claim2",)
        assert reports[1].differences == ("not found in claim1",)
        assert reports[2].differences == ("mtu",)

    def test_missing_type_in_either_side_raises(self) -> None:
        with pytest.raises(PluginIdentityError):
            diff_plugins([_BRIDGE], [{"bridge": "cni0"}], network="crio")


# =====================================================================
# diff_networks
# =====================================================================


class TestDiffNetworks:
    def test_empty(self) -> None:
        assert diff_networks([], []) == []

    def test_same_networks(self) -> None:
        nets = [_net("crio", plugins=(_BRIDGE, _LOOPBACK)), _net("podman")]
        assert diff_networks(nets, nets) == []

    def test_network_only_in_claim1(self) -> None:
        reports = diff_networks([_net("podman"), _net("crio")], [_net("podman")])
        assert reports == [CNINetworkDiffReport(network_name="crio", differences=("not found in claim2",))]

    def test_network_only_in_claim2(self) -> None:
        reports = diff_networks([_net("podman")], [_net("podman"), _net("crio")])
        assert reports == [CNINetworkDiffReport(network_name="crio", differences=("not found in claim1",))]

    def test_missing_network_with_broken_plugin_is_not_descended(self) -> None:
        broken = _net("crio", plugins=({"name": "no-type"},))
        reports = diff_networks([broken], [])
        assert reports[0].differences == ("not found in claim2",)

    def test_cni_version_and_disable_check(self) -> None:
        reports = diff_networks(
            [_net("crio", cni_version="0.4.0", disable_check=False)],
            [_net("crio", cni_version="1.0.0", disable_check=True)],
        )
        assert reports == [
            CNINetworkDiffReport(network_name="crio", differences=("cniVersion", "disable_check")),
        ]

    def test_plugins_tag_attaches_plugin_reports(self) -> None:
        reports = diff_networks(
            [_net("crio", cni_version="0.4.0", plugins=(_MULTUS, _BRIDGE))],
            [_net("crio", cni_version="1.0.0", plugins=(_BRIDGE,))],
        )
        assert len(reports) == 1
        report = reports[0]
        assert report.differences == ("cniVersion", "plugins")
        assert report.plugin_diffs == (
            CNIPluginDiffReport(plugin_name="multus", differences=("not found in claim2",)),
        )

    def test_reports_sorted_by_network_name(self) -> None:
        reports = diff_networks([_net("zeta"), _net("alpha")], [_net("mid")])
        assert [r.network_name for r in reports] == ["alpha", "mid", "zeta"]
