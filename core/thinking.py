# =============================================================================
# core/thinking.py  -  Sequential Thinking Log
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Keeps the append-only history of one sequential-thinking conversation
#   and derives the per-call summary the tool returns.
#
# STATE RULES:
#   - Records are appended in call order and never removed or changed.
#   - A record that carries BOTH branch_from_thought and branch_id is also
#     indexed under that branch id.
#   - revises_thought / branch_from_thought are not checked against the
#     log: a revision of a thought the log never saw is still accepted.
#
# OWNERSHIP:
#   A ThoughtLog belongs to one ReasoningToolkit (core/toolkit.py), never
#   to the module, so every server instance and every test gets its own.
# =============================================================================

from core.models import ThoughtRecord


class ThoughtLog:
    """Ordered history of ThoughtRecords plus a branch index."""

    def __init__(self) -> None:
        self._history: list[ThoughtRecord] = []
        self._branches: dict[str, list[ThoughtRecord]] = {}

    def __len__(self) -> int:
        return len(self._history)

    @property
    def history(self) -> tuple[ThoughtRecord, ...]:
        return tuple(self._history)

    @property
    def branches(self) -> dict[str, tuple[ThoughtRecord, ...]]:
        """Branch id -> records on that branch, in first-seen branch order."""
        return {bid: tuple(records) for bid, records in self._branches.items()}

    def record_thought(self, record: ThoughtRecord) -> dict:
        """Append a validated thought and summarize the log for the caller.

        The reported totalThoughts is raised to thoughtNumber when the
        caller has run past its own estimate.  Only the response is
        corrected; the stored record keeps what the caller sent.

        Returns:
            A dict with the thought's position, the corrected total, its
            revision/branch flags, the branch ids seen so far, and the
            history length after the append.
        """
        self._history.append(record)
        if record.branch_from_thought is not None and record.branch_id:
            self._branches.setdefault(record.branch_id, []).append(record)

        return {
            "thoughtNumber": record.thought_number,
            "totalThoughts": max(record.total_thoughts, record.thought_number),
            "nextThoughtNeeded": record.next_thought_needed,
            "isRevision": record.is_revision,
            "revisesThought": record.revises_thought,
            "startsBranch": record.branch_from_thought is not None,
            "branchId": record.branch_id,
            "branches": list(self._branches),
            "thoughtHistoryLength": len(self._history),
        }
