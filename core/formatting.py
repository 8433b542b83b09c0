# =============================================================================
# core/formatting.py  -  Human-Readable Renderings (stderr side channel)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Renders each validated record as a coloured text block for the
#   operator watching the server's stderr.  Nothing here affects what the
#   tool returns to the client.
#
# ANSI COLOR CODES:
#   Same plain escape sequences the MCP logging helpers use.  Headings are
#   bold + colour, list items are numbered (ordered steps) or bulleted
#   (unordered facts).
# =============================================================================

from core.models import (
    CollaborativeReasoning,
    DebuggingApproach,
    DecisionFramework,
    DesignPattern,
    MentalModel,
    ProgrammingParadigm,
    ThoughtRecord,
)

_BOLD = "\033[1m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"
_MAGENTA = "\033[35m"
_CYAN = "\033[36m"
_RESET = "\033[0m"


def _heading(color: str, text: str) -> str:
    return f"{_BOLD}{color}{text}{_RESET}"


def _bold(text: str) -> str:
    return f"{_BOLD}{text}{_RESET}"


def _numbered(color: str, title: str, items: list[str]) -> str:
    if not items:
        return ""
    lines = [f"\n{_heading(color, title)}"]
    lines += [f"{_bold(f'{i}.')} {item}" for i, item in enumerate(items, start=1)]
    return "\n".join(lines) + "\n"


def _bulleted(color: str, title: str, items: list[str]) -> str:
    if not items:
        return ""
    lines = [f"\n{_heading(color, title)}"]
    lines += [f"{_bold('•')} {item}" for item in items]
    return "\n".join(lines) + "\n"


def _paragraph(color: str, title: str, text: str | None) -> str:
    return f"\n{_heading(color, title)} {text}\n" if text else ""


# -----------------------------------------------------------------------------
# Sequential thinking  -  a bordered box per thought
# -----------------------------------------------------------------------------
def format_thought(record: ThoughtRecord) -> str:
    if record.is_revision:
        prefix, color = "🔄 Revision", _YELLOW
        context = f" (revising thought {record.revises_thought})"
    elif record.branch_from_thought is not None:
        prefix, color = "🌿 Branch", _GREEN
        context = f" (from thought {record.branch_from_thought}, ID: {record.branch_id})"
    else:
        prefix, color, context = "💭 Thought", _BLUE, ""

    total = max(record.total_thoughts, record.thought_number)
    header = f"{prefix} {record.thought_number}/{total}{context}"
    width = max(len(header), len(record.thought)) + 2
    border = "─" * width

    return (
        f"\n┌{border}┐\n"
        f"│ {color}{header}{_RESET}{' ' * (width - len(header) - 1)}│\n"
        f"├{border}┤\n"
        f"│ {record.thought}{' ' * (width - len(record.thought) - 1)}│\n"
        f"└{border}┘"
    )


# -----------------------------------------------------------------------------
# Template tools
# -----------------------------------------------------------------------------
def format_mental_model(data: MentalModel) -> str:
    output = f"\n{_heading(_BLUE, 'Mental Model:')} {_bold(data.model_name)}\n"
    output += f"{_heading(_GREEN, 'Problem:')} {data.problem}\n"
    output += _numbered(_YELLOW, "Steps:", data.steps)
    output += _paragraph(_MAGENTA, "Reasoning:", data.reasoning)
    output += _paragraph(_CYAN, "Conclusion:", data.conclusion)
    return output


def format_design_pattern(data: DesignPattern) -> str:
    output = f"\n{_heading(_BLUE, 'Design Pattern:')} {_bold(data.pattern_name)}\n"
    output += f"{_heading(_GREEN, 'Context:')} {data.context}\n"
    output += _numbered(_YELLOW, "Implementation:", data.implementation)
    output += _bulleted(_MAGENTA, "Benefits:", data.benefits)
    output += _bulleted(_RED, "Tradeoffs:", data.tradeoffs)
    if data.languages:
        output += f"\n{_heading(_CYAN, 'Applicable Languages:')} {', '.join(data.languages)}\n"
    if data.code_example:
        output += f"\n{_heading(_GREEN, 'Code Example:')}\n{data.code_example}\n"
    return output


def format_programming_paradigm(data: ProgrammingParadigm) -> str:
    output = f"\n{_heading(_BLUE, 'Programming Paradigm:')} {_bold(data.paradigm_name)}\n"
    output += f"{_heading(_GREEN, 'Problem:')} {data.problem}\n"
    output += _numbered(_YELLOW, "Approach:", data.approach)
    output += _bulleted(_MAGENTA, "Benefits:", data.benefits)
    output += _bulleted(_RED, "Limitations:", data.limitations)
    if data.languages:
        output += f"\n{_heading(_CYAN, 'Applicable Languages:')} {', '.join(data.languages)}\n"
    if data.code_example:
        output += f"\n{_heading(_GREEN, 'Code Example:')}\n{data.code_example}\n"
    return output


def format_debugging_approach(data: DebuggingApproach) -> str:
    output = f"\n{_heading(_BLUE, 'Debugging Approach:')} {_bold(data.approach_name)}\n"
    output += f"{_heading(_GREEN, 'Issue:')} {data.issue}\n"
    output += _numbered(_YELLOW, "Steps:", data.steps)
    output += _paragraph(_MAGENTA, "Findings:", data.findings)
    output += _paragraph(_CYAN, "Resolution:", data.resolution)
    return output


# -----------------------------------------------------------------------------
# Collaborative reasoning
# -----------------------------------------------------------------------------
def format_collaboration(data: CollaborativeReasoning) -> str:
    names = {p.id: p.name for p in data.personas}
    output = f"\n{_heading(_BLUE, 'Collaborative Reasoning:')} {_bold(data.topic)}\n"
    output += (
        f"{_heading(_GREEN, 'Stage:')} {data.stage} "
        f"(session {data.session_id}, iteration {data.iteration})\n"
    )
    active = names.get(data.active_persona_id, data.active_persona_id)
    output += f"{_heading(_GREEN, 'Active persona:')} {active}\n"

    if data.personas:
        output += f"\n{_heading(_YELLOW, 'Personas:')}\n"
        for persona in data.personas:
            expertise = ", ".join(persona.expertise) or "general"
            output += f"{_bold('•')} {_bold(persona.name)} ({persona.id}): {expertise}\n"
            if persona.perspective:
                output += f"    {persona.perspective}\n"

    if data.contributions:
        output += f"\n{_heading(_MAGENTA, 'Contributions:')}\n"
        for contribution in data.contributions:
            author = names.get(contribution.persona_id, contribution.persona_id)
            output += (
                f"{_bold(author)} [{contribution.type}, "
                f"confidence {contribution.confidence:.2f}]: {contribution.content}\n"
            )

    output += _bulleted(_GREEN, "Consensus Points:", data.consensus_points)

    if data.disagreements:
        output += f"\n{_heading(_RED, 'Disagreements:')}\n"
        for disagreement in data.disagreements:
            output += f"{_bold('•')} {disagreement.topic}\n"
            for position in disagreement.positions:
                author = names.get(position.persona_id, position.persona_id)
                output += f"    {author}: {position.position}\n"

    output += _bulleted(_CYAN, "Key Insights:", data.key_insights)
    output += _bulleted(_YELLOW, "Open Questions:", data.open_questions)
    output += _paragraph(_GREEN, "Final Recommendation:", data.final_recommendation)

    if data.next_contribution_needed:
        upcoming = names.get(data.next_persona_id, data.next_persona_id) or "any persona"
        output += f"\n{_heading(_BLUE, 'Next contribution:')} {upcoming}\n"
    return output


# -----------------------------------------------------------------------------
# Decision framework
# -----------------------------------------------------------------------------
def format_decision(data: DecisionFramework, expected: dict[str, float] | None = None) -> str:
    output = f"\n{_heading(_BLUE, 'Decision:')} {_bold(data.decision_statement)}\n"
    output += (
        f"{_heading(_GREEN, 'Stage:')} {data.stage} "
        f"({data.analysis_type}, decision {data.decision_id}, iteration {data.iteration})\n"
    )

    if data.options:
        output += f"\n{_heading(_YELLOW, 'Options:')}\n"
        for option in data.options:
            line = f"{_bold('•')} {_bold(option.name)} ({option.id}): {option.description}"
            if expected is not None and option.id in expected:
                line += f"  [EV {expected[option.id]:.2f}]"
            output += line + "\n"

    if data.criteria:
        output += f"\n{_heading(_MAGENTA, 'Criteria:')}\n"
        for criterion in data.criteria:
            output += f"{_bold('•')} {criterion.name} (weight {criterion.weight:.2f}): {criterion.description}\n"

    if data.possible_outcomes:
        output += f"\n{_heading(_CYAN, 'Possible Outcomes:')}\n"
        for outcome in data.possible_outcomes:
            output += (
                f"{_bold('•')} [{outcome.option_id}] {outcome.description} "
                f"(p={outcome.probability:.2f}, value={outcome.value}, "
                f"confidence={outcome.confidence_in_estimate:.2f})\n"
            )

    output += _bulleted(_GREEN, "Stakeholders:", data.stakeholders)
    output += _bulleted(_RED, "Constraints:", data.constraints)
    output += _paragraph(_YELLOW, "Time Horizon:", data.time_horizon)
    output += _paragraph(_YELLOW, "Risk Tolerance:", data.risk_tolerance)
    output += _paragraph(_GREEN, "Recommendation:", data.recommendation)
    output += _paragraph(_CYAN, "Rationale:", data.rationale)
    return output
