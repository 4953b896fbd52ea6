"""Suite configuration diff engine."""

from __future__ import annotations

from claimdiff.compare.tree import compare_trees
from claimdiff.models.claim import ClaimDocument
from claimdiff.models.reports import AbnormalEventsCount, ConfigurationsDiffReport

CONFIG_SECTION = "Cert Suite Configuration"


def diff_configurations(claim_a: ClaimDocument, claim_b: ClaimDocument) -> ConfigurationsDiffReport:
    """Compare the suite configuration trees and count each claim's abnormal events."""
    return ConfigurationsDiffReport(
        config=compare_trees(CONFIG_SECTION, claim_a.configuration, claim_b.configuration),
        abnormal_events=AbnormalEventsCount(
            claim1=claim_a.abnormal_events_count,
            claim2=claim_b.abnormal_events_count,
        ),
    )
