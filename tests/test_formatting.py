"""
Formatter output: headings, list numbering, thought boxes.
"""

import re

from core.formatting import (
    format_collaboration,
    format_decision,
    format_design_pattern,
    format_mental_model,
    format_thought,
)
from core.models import DesignPattern, MentalModel, ThoughtRecord
from core.sessions import expected_values
from core.validation import validate_collaborative_reasoning, validate_decision_framework

_ANSI = re.compile(r"\033\[[0-9;]*m")


def plain(text):
    return _ANSI.sub("", text)


def test_thought_box_plain_thought():
    record = ThoughtRecord(thought="look closer", thought_number=2, total_thoughts=4, next_thought_needed=True)
    lines = plain(format_thought(record)).strip().splitlines()

    assert "💭 Thought 2/4" in lines[1]
    assert "look closer" in lines[3]
    assert len({len(line) for line in lines}) == 1


def test_thought_box_revision_and_branch_labels():
    revision = ThoughtRecord("again", 3, 3, True, is_revision=True, revises_thought=1)
    branch = ThoughtRecord("other way", 4, 3, True, branch_from_thought=2, branch_id="alt")

    assert "🔄 Revision 3/3 (revising thought 1)" in plain(format_thought(revision))
    assert "🌿 Branch 4/4 (from thought 2, ID: alt)" in plain(format_thought(branch))


def test_mental_model_numbers_steps_and_skips_empty_sections():
    text = plain(format_mental_model(MentalModel("first_principles", "x", steps=["a", "b"])))
    assert "Mental Model: first_principles" in text
    assert "1. a" in text
    assert "2. b" in text
    assert "Conclusion:" not in text


def test_design_pattern_languages_and_code():
    text = plain(format_design_pattern(DesignPattern(
        "security", "auth", benefits=["safer"], code_example="check()", languages=["py", "go"],
    )))
    assert "• safer" in text
    assert "Applicable Languages: py, go" in text
    assert "Code Example:\ncheck()" in text


def test_collaboration_uses_persona_names(collaboration_payload):
    text = plain(format_collaboration(validate_collaborative_reasoning(collaboration_payload)))
    assert "Active persona: Ada Architect" in text
    assert "Next contribution: Oscar Ops" in text
    assert "confidence 0.80" in text


def test_decision_shows_expected_values(decision_payload):
    data = validate_decision_framework(decision_payload)
    text = plain(format_decision(data, expected_values(data)))
    assert "[EV 55.00]" in text
    assert "[EV 40.00]" in text
    assert "Possible Outcomes:" in text
