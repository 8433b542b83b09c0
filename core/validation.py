# =============================================================================
# core/validation.py  -  Payload Validators (one per tool)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the untyped argument dict of a tool call into one of the typed
#   records in core/models.py, or raises ValidationError.
#
# THE LENIENCY POLICY:
#   - Required fields are strict: missing, None, or the wrong primitive type
#     is an error that names the field and the expected type.
#   - Optional collections degrade to an empty list instead of failing, and
#     every element is stringified.
#   - Enumerated fields (modelName, stage, analysisType, ...) are NOT checked
#     against their enumerations.  The enumerations are published in the
#     tool descriptions for the client's benefit only.
#
# Validation never touches state: a payload that fails here leaves the
# thought log and session stores exactly as they were.
# =============================================================================

from collections.abc import Mapping
from typing import Any, Optional

from core.models import (
    CollaborativeReasoning,
    Contribution,
    Criterion,
    DebuggingApproach,
    DecisionFramework,
    DecisionOption,
    DesignPattern,
    Disagreement,
    MentalModel,
    Outcome,
    Persona,
    Position,
    ProgrammingParadigm,
    ThoughtRecord,
)


class ValidationError(ValueError):
    """A required field is missing or has the wrong type."""


# -----------------------------------------------------------------------------
# Field helpers
# -----------------------------------------------------------------------------
def _is_number(value: Any) -> bool:
    # bool is a subclass of int; true/false are never numbers on the wire.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_mapping(value: Any, name: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ValidationError(f"Invalid {name}: must be an object")
    return value


def require_string(data: Mapping, name: str) -> str:
    value = data.get(name)
    if not value or not isinstance(value, str):
        raise ValidationError(f"Invalid {name}: must be a string")
    return value


def require_number(data: Mapping, name: str, minimum: Optional[float] = None):
    value = data.get(name)
    if not _is_number(value):
        raise ValidationError(f"Invalid {name}: must be a number")
    if minimum is not None and value < minimum:
        raise ValidationError(f"Invalid {name}: must be a number >= {minimum}")
    return value


def require_positive_int(data: Mapping, name: str) -> int:
    """Thought numbers are 1-based integers; 3.0 is accepted as 3."""
    value = data.get(name)
    if (
        not _is_number(value)
        or (isinstance(value, float) and not value.is_integer())
        or value < 1
    ):
        raise ValidationError(f"Invalid {name}: must be a positive integer")
    return int(value)


def require_boolean(data: Mapping, name: str) -> bool:
    value = data.get(name)
    if not isinstance(value, bool):
        raise ValidationError(f"Invalid {name}: must be a boolean")
    return value


def require_array(data: Mapping, name: str) -> list:
    value = data.get(name)
    if not isinstance(value, list):
        raise ValidationError(f"Invalid {name}: must be an array")
    return value


def _items(data: Mapping, name: str) -> list:
    value = data.get(name)
    return value if isinstance(value, list) else []


def optional_positive_int(data: Mapping, name: str) -> Optional[int]:
    if data.get(name) is None:
        return None
    return require_positive_int(data, name)


def optional_string(data: Mapping, name: str, default: Optional[str] = None) -> Optional[str]:
    value = data.get(name)
    return value if isinstance(value, str) else default


def optional_boolean(data: Mapping, name: str) -> bool:
    return data.get(name) is True


def string_list(value: Any) -> list[str]:
    """Absent or non-array values become []; elements are stringified."""
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else str(item) for item in value]


def optional_string_list(value: Any) -> Optional[list[str]]:
    return string_list(value) if isinstance(value, list) else None


# -----------------------------------------------------------------------------
# Sequential thinking
# -----------------------------------------------------------------------------
def validate_thought(payload: Any) -> ThoughtRecord:
    data = _as_mapping(payload, "input")
    return ThoughtRecord(
        thought=require_string(data, "thought"),
        thought_number=require_positive_int(data, "thoughtNumber"),
        total_thoughts=require_positive_int(data, "totalThoughts"),
        next_thought_needed=require_boolean(data, "nextThoughtNeeded"),
        is_revision=optional_boolean(data, "isRevision"),
        revises_thought=optional_positive_int(data, "revisesThought"),
        branch_from_thought=optional_positive_int(data, "branchFromThought"),
        branch_id=optional_string(data, "branchId"),
        needs_more_thoughts=optional_boolean(data, "needsMoreThoughts"),
    )


# -----------------------------------------------------------------------------
# Template tools
# -----------------------------------------------------------------------------
def validate_mental_model(payload: Any) -> MentalModel:
    data = _as_mapping(payload, "input")
    return MentalModel(
        model_name=require_string(data, "modelName"),
        problem=require_string(data, "problem"),
        steps=string_list(data.get("steps")),
        reasoning=optional_string(data, "reasoning", ""),
        conclusion=optional_string(data, "conclusion", ""),
    )


def validate_design_pattern(payload: Any) -> DesignPattern:
    data = _as_mapping(payload, "input")
    return DesignPattern(
        pattern_name=require_string(data, "patternName"),
        context=require_string(data, "context"),
        implementation=string_list(data.get("implementation")),
        benefits=string_list(data.get("benefits")),
        tradeoffs=string_list(data.get("tradeoffs")),
        code_example=optional_string(data, "codeExample"),
        languages=optional_string_list(data.get("languages")),
    )


def validate_programming_paradigm(payload: Any) -> ProgrammingParadigm:
    data = _as_mapping(payload, "input")
    return ProgrammingParadigm(
        paradigm_name=require_string(data, "paradigmName"),
        problem=require_string(data, "problem"),
        approach=string_list(data.get("approach")),
        benefits=string_list(data.get("benefits")),
        limitations=string_list(data.get("limitations")),
        code_example=optional_string(data, "codeExample"),
        languages=optional_string_list(data.get("languages")),
    )


def validate_debugging_approach(payload: Any) -> DebuggingApproach:
    data = _as_mapping(payload, "input")
    return DebuggingApproach(
        approach_name=require_string(data, "approachName"),
        issue=require_string(data, "issue"),
        steps=string_list(data.get("steps")),
        findings=optional_string(data, "findings", ""),
        resolution=optional_string(data, "resolution", ""),
    )


# -----------------------------------------------------------------------------
# Collaborative reasoning
# -----------------------------------------------------------------------------
def _persona(item: Any, index: int) -> Persona:
    data = _as_mapping(item, f"personas[{index}]")
    communication = data.get("communication")
    if not isinstance(communication, Mapping):
        communication = {}
    return Persona(
        id=require_string(data, "id"),
        name=require_string(data, "name"),
        expertise=string_list(data.get("expertise")),
        background=optional_string(data, "background", ""),
        perspective=optional_string(data, "perspective", ""),
        biases=string_list(data.get("biases")),
        communication_style=optional_string(communication, "style", ""),
        communication_tone=optional_string(communication, "tone", ""),
    )


def _contribution(item: Any, index: int) -> Contribution:
    data = _as_mapping(item, f"contributions[{index}]")
    persona_id = require_string(data, "personaId")
    content = require_string(data, "content")
    kind = require_string(data, "type")
    confidence = data.get("confidence")
    if not _is_number(confidence) or not 0 <= confidence <= 1:
        raise ValidationError("Invalid confidence: must be a number between 0 and 1")
    return Contribution(
        persona_id=persona_id,
        content=content,
        type=kind,
        confidence=confidence,
        reference_ids=string_list(data.get("referenceIds")),
    )


def _disagreement(item: Any, index: int) -> Disagreement:
    data = _as_mapping(item, f"disagreements[{index}]")
    positions = []
    for raw in _items(data, "positions"):
        if not isinstance(raw, Mapping):
            continue
        positions.append(Position(
            persona_id=optional_string(raw, "personaId", ""),
            position=optional_string(raw, "position", ""),
            arguments=string_list(raw.get("arguments")),
        ))
    return Disagreement(
        topic=optional_string(data, "topic", ""),
        positions=positions,
    )


def validate_collaborative_reasoning(payload: Any) -> CollaborativeReasoning:
    data = _as_mapping(payload, "input")
    topic = require_string(data, "topic")
    personas = [_persona(p, i) for i, p in enumerate(require_array(data, "personas"))]
    contributions = [
        _contribution(c, i) for i, c in enumerate(require_array(data, "contributions"))
    ]
    return CollaborativeReasoning(
        topic=topic,
        personas=personas,
        contributions=contributions,
        stage=require_string(data, "stage"),
        active_persona_id=require_string(data, "activePersonaId"),
        session_id=require_string(data, "sessionId"),
        iteration=require_number(data, "iteration", minimum=0),
        next_contribution_needed=require_boolean(data, "nextContributionNeeded"),
        next_persona_id=optional_string(data, "nextPersonaId"),
        consensus_points=string_list(data.get("consensusPoints")),
        disagreements=[_disagreement(d, i) for i, d in enumerate(_items(data, "disagreements"))],
        key_insights=string_list(data.get("keyInsights")),
        open_questions=string_list(data.get("openQuestions")),
        final_recommendation=optional_string(data, "finalRecommendation"),
        suggested_contribution_types=string_list(data.get("suggestedContributionTypes")),
    )


# -----------------------------------------------------------------------------
# Decision framework
# -----------------------------------------------------------------------------
def _option(item: Any, index: int) -> DecisionOption:
    data = _as_mapping(item, f"options[{index}]")
    return DecisionOption(
        id=optional_string(data, "id") or f"option-{index + 1}",
        name=require_string(data, "name"),
        description=require_string(data, "description"),
    )


def _criterion(item: Any, index: int) -> Criterion:
    data = _as_mapping(item, f"criteria[{index}]")
    return Criterion(
        id=optional_string(data, "id") or f"criterion-{index + 1}",
        name=require_string(data, "name"),
        description=require_string(data, "description"),
        weight=require_number(data, "weight"),
    )


def _outcome(item: Any, index: int) -> Outcome:
    data = _as_mapping(item, f"possibleOutcomes[{index}]")
    return Outcome(
        id=optional_string(data, "id") or f"outcome-{index + 1}",
        description=require_string(data, "description"),
        probability=require_number(data, "probability"),
        value=require_number(data, "value"),
        option_id=require_string(data, "optionId"),
        confidence_in_estimate=require_number(data, "confidenceInEstimate"),
    )


def validate_decision_framework(payload: Any) -> DecisionFramework:
    data = _as_mapping(payload, "input")
    statement = require_string(data, "decisionStatement")
    options = [_option(o, i) for i, o in enumerate(require_array(data, "options"))]

    return DecisionFramework(
        decision_statement=statement,
        options=options,
        analysis_type=require_string(data, "analysisType"),
        stage=require_string(data, "stage"),
        decision_id=require_string(data, "decisionId"),
        iteration=require_number(data, "iteration", minimum=0),
        next_stage_needed=require_boolean(data, "nextStageNeeded"),
        criteria=[_criterion(c, i) for i, c in enumerate(_items(data, "criteria"))],
        stakeholders=string_list(data.get("stakeholders")),
        constraints=string_list(data.get("constraints")),
        time_horizon=optional_string(data, "timeHorizon"),
        risk_tolerance=optional_string(data, "riskTolerance"),
        possible_outcomes=[
            _outcome(o, i) for i, o in enumerate(_items(data, "possibleOutcomes"))
        ],
        recommendation=optional_string(data, "recommendation"),
        rationale=optional_string(data, "rationale"),
    )
