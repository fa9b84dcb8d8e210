"""Tests for org_contributors.pipeline.aggregation covering merge, ranking, and short-circuit.

Run with:
    pytest tests/test_aggregation.py --maxfail=1 -v --cov=org_contributors.pipeline.aggregation --cov-report=term-missing
"""

import random

from org_contributors.pipeline import aggregation
from org_contributors.retrieval.errors import ApiCallError, Err, NotFoundError, Ok
from org_contributors.retrieval.models import Contributor, ContributorTotal


def _pairs(totals):
    return [(t.login, t.contributions) for t in totals]


def test_merge_ranks_distinct_logins():
    outcomes = [
        Ok([Contributor("alice", 45), Contributor("bob", 12), Contributor("carol", 1)]),
        Ok([Contributor("dave", 0), Contributor("eve", 80)]),
        Ok([]),
    ]
    result = aggregation.merge_contributors(outcomes)
    assert _pairs(result.value) == [("eve", 80), ("alice", 45), ("bob", 12), ("carol", 1), ("dave", 0)]


def test_merge_sums_duplicate_logins():
    outcomes = [
        Ok([Contributor("bob", 45), Contributor("bob", 12), Contributor("carol", 1)]),
        Ok([Contributor("dave", 0), Contributor("bob", 80)]),
        Ok([]),
    ]
    result = aggregation.merge_contributors(outcomes)
    assert result.value == [
        ContributorTotal("bob", 137),
        ContributorTotal("carol", 1),
        ContributorTotal("dave", 0),
    ]


def test_merge_with_no_repositories_is_empty_success():
    result = aggregation.merge_contributors([])
    assert result.is_ok()
    assert result.value == []


def test_merge_returns_first_failure_in_join_order():
    first = Err(NotFoundError("first"))
    outcomes = [Ok([Contributor("a", 1)]), first, Err(ApiCallError("second")), Ok([])]
    assert aggregation.merge_contributors(outcomes) is first


def test_equal_totals_break_ties_by_login():
    totals = {"zed": 5, "amy": 5, "max": 9, "bob": 5}
    assert _pairs(aggregation.rank_totals(totals)) == [("max", 9), ("amy", 5), ("bob", 5), ("zed", 5)]


def test_merge_is_order_independent():
    rng = random.Random(1234)
    logins = ["alice", "bob", "carol", "dave", "eve"]
    contributors = [Contributor(rng.choice(logins), rng.randint(0, 50)) for _ in range(200)]
    expected = {}
    for contributor in contributors:
        expected[contributor.login] = expected.get(contributor.login, 0) + contributor.contributions

    for _ in range(5):
        rng.shuffle(contributors)
        chunks = [Ok(contributors[i:i + 17]) for i in range(0, len(contributors), 17)]
        merged = aggregation.merge_contributors(chunks).value
        assert {t.login: t.contributions for t in merged} == expected
        assert len(merged) == len(expected)
        counts = [t.contributions for t in merged]
        assert counts == sorted(counts, reverse=True)


def test_sum_contributions_single_entry_unchanged():
    assert aggregation.sum_contributions([Contributor("solo", 7)]) == {"solo": 7}
