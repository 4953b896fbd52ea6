"""Shared fixtures for claimdiff integration tests.

Builds claim documents shaped like the ones the compliance suite writes and
stores them under tmp_path, so tests exercise the loader, engines, renderers
and CLI together.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Claim document builders
# ---------------------------------------------------------------------------

_MASTER_LABELS = {"node-role.kubernetes.io/master": "", "node-role.kubernetes.io/worker": ""}
_WORKER_LABELS = {"node-role.kubernetes.io/worker": "", "kubernetes.io/os": "linux"}


def _node(name: str, labels: dict[str, str]) -> dict[str, Any]:
    return {"metadata": {"name": name, "labels": labels}, "status": {"nodeInfo": {"kubeletVersion": "v1.27.4"}}}


def _crio_network(ip_masq: bool = True, cni_version: str = "0.4.0") -> dict[str, Any]:
    return {
        "name": "crio",
        "cniVersion": cni_version,
        "disableCheck": False,
        "plugins": [
            {
                "type": "bridge",
                "bridge": "cni0",
                "isGateway": True,
                "ipMasq": ip_masq,
                "hairpinMode": True,
                "ipam": {"type": "host-local", "routes": [{"dst": "0.0.0.0/0"}], "ranges": [[{"subnet": "10.85.0.0/16"}]]},
            },
            {"type": "portmap", "capabilities": {"portMappings": True}},
        ],
    }


def _result(case_id: str, suite: str, state: str) -> dict[str, Any]:
    return {
        "testID": {"id": case_id, "suite": suite, "tags": "common"},
        "state": state,
        "startTime": "2023-09-21 10:11:12 +0000 UTC",
        "endTime": "2023-09-21 10:11:13 +0000 UTC",
    }


def base_claim() -> dict[str, Any]:
    """A two-node cluster with one CNI network per node and three test cases."""
    return {
        "claim": {
            "versions": {"claimFormat": "v0.1.0", "k8s": "v1.27.4", "ocp": "4.14.0", "tnf": "v4.5.0"},
            "nodes": {
                "nodeSummary": {
                    "master-0": _node("master-0", _MASTER_LABELS),
                    "worker-0": _node("worker-0", _WORKER_LABELS),
                },
                "cniNetworks": {
                    "master-0": [_crio_network()],
                    "worker-0": [_crio_network()],
                },
                "nodesHwInfo": {},
            },
            "configurations": {
                "Config": {
                    "targetNameSpaces": [{"name": "tnf"}],
                    "podsUnderTestLabels": ["redhat-best-practices-for-k8s.com/generic: target"],
                },
                "AbnormalEvents": [],
            },
            "results": {
                "access-control": [
                    _result("access-control-ssh-daemons", "access-control", "passed"),
                    _result("access-control-sys-admin-capability-check", "access-control", "passed"),
                ],
                "lifecycle": [_result("lifecycle-pod-scheduling", "lifecycle", "skipped")],
            },
        }
    }


def changed_claim() -> dict[str, Any]:
    """base_claim() after an upgrade.

    Adds a node and a target namespace, turns bridge ipMasq off, fails a test
    case and records two abnormal events.
    """
    claim = copy.deepcopy(base_claim())
    body = claim["claim"]
    body["versions"]["k8s"] = "v1.28.2"
    body["nodes"]["nodeSummary"]["worker-1"] = _node("worker-1", _WORKER_LABELS)
    body["nodes"]["cniNetworks"]["worker-1"] = [_crio_network()]
    body["nodes"]["cniNetworks"]["worker-0"] = [_crio_network(ip_masq=False)]
    body["results"]["lifecycle"][0]["state"] = "failed"
    body["configurations"]["Config"]["targetNameSpaces"].append({"name": "tnf-extra"})
    body["configurations"]["AbnormalEvents"] = [
        {"reason": "BackOff", "involvedObject": {"kind": "Pod", "name": "test-0"}},
        {"reason": "FailedMount", "involvedObject": {"kind": "Pod", "name": "test-1"}},
    ]
    return claim


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def write_claim(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a function that writes a claim document to tmp_path."""

    def _write(name: str, document: Any) -> Path:
        path = tmp_path / name
        path.write_text(document if isinstance(document, str) else json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def base_claim_doc() -> dict[str, Any]:
    return base_claim()


@pytest.fixture()
def changed_claim_doc() -> dict[str, Any]:
    return changed_claim()


@pytest.fixture()
def claim_files(write_claim: Callable[[str, Any], Path]) -> tuple[Path, Path]:
    """Paths of base_claim() and changed_claim() written as claim1.json and claim2.json."""
    return write_claim("claim1.json", base_claim()), write_claim("claim2.json", changed_claim())
