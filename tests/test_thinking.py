"""
Sequential thinking: append-only log, corrected totals, branch bookkeeping.
"""

from core.models import ThoughtRecord
from core.thinking import ThoughtLog


def _record(number, total=3, **extra):
    return ThoughtRecord(
        thought=f"thought {number}",
        thought_number=number,
        total_thoughts=total,
        next_thought_needed=True,
        **extra,
    )


def test_each_record_grows_log_by_one():
    log = ThoughtLog()
    for n in range(1, 4):
        summary = log.record_thought(_record(n))
        assert len(log) == n
        assert summary["thoughtHistoryLength"] == n


def test_total_is_corrected_in_response_only():
    log = ThoughtLog()
    record = _record(5, total=3)
    summary = log.record_thought(record)
    assert summary["totalThoughts"] == 5
    assert log.history[-1].total_thoughts == 3


def test_total_left_alone_when_within_estimate():
    summary = ThoughtLog().record_thought(_record(2, total=4))
    assert summary["totalThoughts"] == 4


def test_revision_flags():
    log = ThoughtLog()
    log.record_thought(_record(1))
    summary = log.record_thought(_record(2, is_revision=True, revises_thought=1))
    assert summary["isRevision"] is True
    assert summary["revisesThought"] == 1
    assert summary["startsBranch"] is False


def test_revision_of_unknown_thought_is_accepted():
    summary = ThoughtLog().record_thought(_record(1, is_revision=True, revises_thought=9))
    assert summary["revisesThought"] == 9


def test_branches_listed_in_first_seen_order():
    log = ThoughtLog()
    log.record_thought(_record(1))
    log.record_thought(_record(2, branch_from_thought=1, branch_id="b"))
    log.record_thought(_record(3, branch_from_thought=1, branch_id="a"))
    summary = log.record_thought(_record(4, branch_from_thought=2, branch_id="b"))

    assert summary["startsBranch"] is True
    assert summary["branches"] == ["b", "a"]
    assert [r.thought_number for r in log.branches["b"]] == [2, 4]


def test_branch_id_without_branch_point_is_not_indexed():
    log = ThoughtLog()
    summary = log.record_thought(_record(1, branch_id="orphan"))
    assert summary["branches"] == []
    assert summary["branchId"] == "orphan"


def test_history_is_a_read_only_view():
    log = ThoughtLog()
    log.record_thought(_record(1))
    history = log.history
    log.record_thought(_record(2))
    assert len(history) == 1
    assert len(log.history) == 2
