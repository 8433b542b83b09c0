# =============================================================================
# core/sessions.py  -  Session Stores for Collaborative Reasoning & Decisions
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the latest snapshot of every collaborative-reasoning session and
#   every decision analysis, keyed by the caller-supplied id.
#
# REPLACE, NEVER MERGE:
#   Each accepted call's payload fully replaces what was stored under its
#   id.  The caller resends the accumulated history every time, so the
#   store is just "last write wins".  Repeating the same payload therefore
#   leaves the store unchanged and yields the same summary.
#
# WHAT IS NOT CHECKED:
#   - iteration may go up, down, or stay put between calls.
#   - activePersonaId / nextPersonaId may name a persona that isn't listed.
#   - outcome probabilities for an option need not sum to 1.
#   The summaries surface some of these facts (activePersonaKnown,
#   expectedValues) without rejecting anything.
# =============================================================================

from typing import Callable, Generic, Optional, TypeVar

from core.models import CollaborativeReasoning, DecisionFramework

T = TypeVar("T")


class SessionStore(Generic[T]):
    """id -> latest snapshot, with a summarizer for the tool response."""

    def __init__(self, key: Callable[[T], str], summarize: Callable[[T], dict]) -> None:
        self._key = key
        self._summarize = summarize
        self._snapshots: dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._snapshots)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._snapshots

    def get(self, session_id: str) -> Optional[T]:
        return self._snapshots.get(session_id)

    def ids(self) -> list[str]:
        return list(self._snapshots)

    def advance(self, snapshot: T) -> dict:
        """Store the snapshot under its id (replacing any prior one) and summarize it."""
        self._snapshots[self._key(snapshot)] = snapshot
        return self._summarize(snapshot)


# -----------------------------------------------------------------------------
# Summaries
# -----------------------------------------------------------------------------
def summarize_collaboration(data: CollaborativeReasoning) -> dict:
    persona_ids = {p.id for p in data.personas}
    return {
        "sessionId": data.session_id,
        "topic": data.topic,
        "stage": data.stage,
        "iteration": data.iteration,
        "activePersonaId": data.active_persona_id,
        "nextPersonaId": data.next_persona_id,
        "nextContributionNeeded": data.next_contribution_needed,
        "personaCount": len(data.personas),
        "contributionCount": len(data.contributions),
        "consensusPointCount": len(data.consensus_points),
        "disagreementCount": len(data.disagreements),
        "keyInsightCount": len(data.key_insights),
        "openQuestionCount": len(data.open_questions),
        "hasFinalRecommendation": bool(data.final_recommendation),
        "activePersonaKnown": data.active_persona_id in persona_ids,
        "status": "success",
    }


def expected_values(data: DecisionFramework) -> dict[str, float]:
    """Per option: sum of probability * value over its outcomes.

    Probabilities are taken as given; an option whose outcomes sum to 1.4
    simply gets a larger expected value.
    """
    values = {option.id: 0.0 for option in data.options}
    for outcome in data.possible_outcomes:
        values[outcome.option_id] = (
            values.get(outcome.option_id, 0.0) + outcome.probability * outcome.value
        )
    return values


def summarize_decision(data: DecisionFramework) -> dict:
    summary = {
        "decisionId": data.decision_id,
        "decisionStatement": data.decision_statement,
        "analysisType": data.analysis_type,
        "stage": data.stage,
        "iteration": data.iteration,
        "nextStageNeeded": data.next_stage_needed,
        "optionCount": len(data.options),
        "criteriaCount": len(data.criteria),
        "outcomeCount": len(data.possible_outcomes),
        "stakeholderCount": len(data.stakeholders),
        "hasRecommendation": bool(data.recommendation),
        "status": "success",
    }
    if data.analysis_type == "expected-value":
        summary["expectedValues"] = expected_values(data)
    elif data.analysis_type == "weighted-criteria":
        summary["criteriaWeightTotal"] = sum(c.weight for c in data.criteria)
    return summary


def collaboration_store() -> SessionStore[CollaborativeReasoning]:
    return SessionStore(key=lambda data: data.session_id, summarize=summarize_collaboration)


def decision_store() -> SessionStore[DecisionFramework]:
    return SessionStore(key=lambda data: data.decision_id, summarize=summarize_decision)
