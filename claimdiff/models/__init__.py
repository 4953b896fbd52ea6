"""Core data structures for claimdiff."""

from claimdiff.models.claim import (
    CNINetwork,
    CNIPlugin,
    ClaimDocument,
    NodeDescriptor,
    ResultState,
    TestCaseResult,
)
from claimdiff.models.config import ClaimDiffConfig, CompareConfig
from claimdiff.models.reports import (
    AbnormalEventsCount,
    ClaimComparison,
    CNINetworkDiffReport,
    CNIPluginDiffReport,
    ConfigurationsDiffReport,
    DiffReport,
    FieldDiff,
    NodeDiffReport,
    NodeInventoryDiffReport,
    RolesSummary,
    TcDiffReport,
    TcResultDifference,
    TcResultsSummary,
    TreeDiff,
)

__all__ = [
    "AbnormalEventsCount",
    "CNINetwork",
    "CNINetworkDiffReport",
    "CNIPlugin",
    "CNIPluginDiffReport",
    "ClaimComparison",
    "ClaimDiffConfig",
    "ClaimDocument",
    "CompareConfig",
    "ConfigurationsDiffReport",
    "DiffReport",
    "FieldDiff",
    "NodeDescriptor",
    "NodeDiffReport",
    "NodeInventoryDiffReport",
    "ResultState",
    "RolesSummary",
    "TcDiffReport",
    "TcResultDifference",
    "TcResultsSummary",
    "TestCaseResult",
    "TreeDiff",
]
