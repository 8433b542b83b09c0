# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every record a reasoning tool
# accepts.  The validators in core/validation.py turn a loose JSON payload
# into one of these; everything downstream (state tracking, formatting,
# response shaping) works on the typed record only.
#
# NAMING:
#   Fields are snake_case here.  The wire format is camelCase
#   ("thoughtNumber", "activePersonaId", ...); the mapping happens once, in
#   the validators (inbound) and in core/toolkit.py (outbound summaries).
#
# LIFETIME:
#   Every record is created at call time.  Only ThoughtRecord and the two
#   session snapshots outlive the call, inside the state trackers.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional


# -----------------------------------------------------------------------------
# ThoughtRecord  -  one step of a sequential-thinking conversation
# -----------------------------------------------------------------------------
# total_thoughts is an estimate, not a cap: thought_number may run past it
# and the record is still accepted.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ThoughtRecord:
    """A single thought in the sequential-thinking log."""

    thought: str
    thought_number: int                # 1-based position the caller assigns
    total_thoughts: int                # Caller's current estimate
    next_thought_needed: bool

    # --- Revision / branching bookkeeping ---
    is_revision: bool = False
    revises_thought: Optional[int] = None
    branch_from_thought: Optional[int] = None
    branch_id: Optional[str] = None
    needs_more_thoughts: bool = False


# -----------------------------------------------------------------------------
# Template records  -  stateless, one per call
# -----------------------------------------------------------------------------
@dataclass
class MentalModel:
    """A mental model applied to a problem (first principles, pareto, ...)."""

    model_name: str
    problem: str
    steps: list[str] = field(default_factory=list)
    reasoning: str = ""
    conclusion: str = ""


@dataclass
class DesignPattern:
    """A software design pattern applied to a context."""

    pattern_name: str
    context: str
    implementation: list[str] = field(default_factory=list)
    benefits: list[str] = field(default_factory=list)
    tradeoffs: list[str] = field(default_factory=list)
    code_example: Optional[str] = None
    languages: Optional[list[str]] = None


@dataclass
class ProgrammingParadigm:
    """A programming paradigm applied to a problem."""

    paradigm_name: str
    problem: str
    approach: list[str] = field(default_factory=list)
    benefits: list[str] = field(default_factory=list)
    limitations: list[str] = field(default_factory=list)
    code_example: Optional[str] = None
    languages: Optional[list[str]] = None


@dataclass
class DebuggingApproach:
    """A systematic debugging method applied to an issue."""

    approach_name: str
    issue: str
    steps: list[str] = field(default_factory=list)
    findings: str = ""
    resolution: str = ""


# -----------------------------------------------------------------------------
# Collaborative reasoning  -  a panel of personas working on one topic
# -----------------------------------------------------------------------------
@dataclass
class Persona:
    """One simulated expert taking part in a collaborative session."""

    id: str
    name: str
    expertise: list[str] = field(default_factory=list)
    background: str = ""
    perspective: str = ""
    biases: list[str] = field(default_factory=list)
    communication_style: str = ""
    communication_tone: str = ""


@dataclass
class Contribution:
    """Something a persona said: an observation, question, insight, ..."""

    persona_id: str
    content: str
    type: str                          # observation | question | insight | ...
    confidence: float                  # 0.0 - 1.0
    reference_ids: list[str] = field(default_factory=list)


@dataclass
class Position:
    persona_id: str
    position: str
    arguments: list[str] = field(default_factory=list)


@dataclass
class Disagreement:
    topic: str
    positions: list[Position] = field(default_factory=list)


@dataclass
class CollaborativeReasoning:
    """The full state of a collaborative session as sent by the caller.

    Each call carries the complete accumulated history; the tracker stores
    it as-is under session_id.
    """

    topic: str
    personas: list[Persona]
    contributions: list[Contribution]
    stage: str                         # problem-definition | ideation | ...
    active_persona_id: str
    session_id: str
    iteration: int
    next_contribution_needed: bool

    next_persona_id: Optional[str] = None
    consensus_points: list[str] = field(default_factory=list)
    disagreements: list[Disagreement] = field(default_factory=list)
    key_insights: list[str] = field(default_factory=list)
    open_questions: list[str] = field(default_factory=list)
    final_recommendation: Optional[str] = None
    suggested_contribution_types: list[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Decision framework  -  options, criteria and outcomes for one decision
# -----------------------------------------------------------------------------
@dataclass
class DecisionOption:
    id: str
    name: str
    description: str


@dataclass
class Criterion:
    id: str
    name: str
    description: str
    weight: float                      # 0.0 - 1.0, not normalized


@dataclass
class Outcome:
    id: str
    description: str
    probability: float                 # Per-option sums are not checked
    value: float
    option_id: str
    confidence_in_estimate: float


@dataclass
class DecisionFramework:
    """The full state of a decision analysis as sent by the caller."""

    decision_statement: str
    options: list[DecisionOption]
    analysis_type: str                 # pros-cons | weighted-criteria | ...
    stage: str                         # problem-definition | ... | decision
    decision_id: str
    iteration: int
    next_stage_needed: bool

    criteria: list[Criterion] = field(default_factory=list)
    stakeholders: list[str] = field(default_factory=list)
    constraints: list[str] = field(default_factory=list)
    time_horizon: Optional[str] = None
    risk_tolerance: Optional[str] = None
    possible_outcomes: list[Outcome] = field(default_factory=list)
    recommendation: Optional[str] = None
    rationale: Optional[str] = None
