"""Test case results diff engine."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from claimdiff.compare.reconcile import union
from claimdiff.models.claim import ResultState, TestCaseResult
from claimdiff.models.reports import TC_RESULT_NOT_FOUND, TcDiffReport, TcResultDifference, TcResultsSummary
from claimdiff.observability.logging import get_logger

_logger = get_logger("compare.testcases")

ResultsBySuite = Mapping[str, TestCaseResult | Iterable[TestCaseResult]]


def results_map(results_by_suite: ResultsBySuite | None) -> dict[str, str]:
    """Flatten suite-keyed results into ``{case id: state}``.

    The storage key may be a suite name holding several cases, so the case's
    own ``id`` is used as the key.
    """
    states: dict[str, str] = {}
    for entry in (results_by_suite or {}).values():
        cases = (entry,) if isinstance(entry, TestCaseResult) else entry
        for case in cases:
            states[case.id] = case.state
    return states


def results_summary(states: Mapping[str, str]) -> TcResultsSummary:
    counts = {state: 0 for state in ResultState}
    other = 0
    for state in states.values():
        if state in counts:
            counts[ResultState(state)] += 1
        else:
            other += 1
    return TcResultsSummary(
        passed=counts[ResultState.PASSED],
        skipped=counts[ResultState.SKIPPED],
        failed=counts[ResultState.FAILED],
        other=other,
    )


def diff_test_cases(results_a: ResultsBySuite | None, results_b: ResultsBySuite | None) -> TcDiffReport:
    """Compare test case states between two claims.

    A case missing from one claim is reported with ``"not found"`` on that
    side. Cases with the same state on both sides are not reported.
    """
    claim1_states = results_map(results_a)
    claim2_states = results_map(results_b)

    differences = []
    for name in union(claim1_states, claim2_states):
        claim1_state = claim1_states.get(name, TC_RESULT_NOT_FOUND)
        claim2_state = claim2_states.get(name, TC_RESULT_NOT_FOUND)
        if name in claim1_states and name in claim2_states and claim1_state == claim2_state:
            continue
        differences.append(TcResultDifference(name=name, claim1_result=claim1_state, claim2_result=claim2_state))

    _logger.debug(
        "test_cases_compared",
        claim1_cases=len(claim1_states),
        claim2_cases=len(claim2_states),
        differing=len(differences),
    )
    return TcDiffReport(
        claim1_summary=results_summary(claim1_states),
        claim2_summary=results_summary(claim2_states),
        differences=tuple(differences),
        differing_count=len(differences),
    )
