# =============================================================================
# core/toolkit.py  -  The Seven Reasoning Tools
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Runs every tool call through the same pipeline:
#
#       payload ──▶ validate ──▶ render ──▶ update state ──▶ respond
#                   (core/       (stderr)   (thought log /   (envelope)
#                    validation)              session store)
#
#   The rendering is built before state changes, so a call that fails
#   anywhere before the update leaves the log and stores untouched.
#
#   Only three tools touch state (sequentialthinking, collaborativereasoning,
#   decisionframework); the four template tools skip that step.
#
# THE RESPONSE ENVELOPE:
#   {"content": [{"type": "text", "text": "<JSON summary>"}]}
#   On failure the text decodes to {"error": ..., "status": "failed"} and
#   the envelope carries "isError": true.  Errors never escape a call: every
#   exception is turned into a failed envelope here.
#
# STATE OWNERSHIP:
#   The thought log and both session stores live on the toolkit instance.
#   tools/mcp_server.py creates one toolkit per server; tests create one per
#   test.
# =============================================================================

import json
import logging
from collections.abc import Callable
from typing import Any

from core.formatting import (
    format_collaboration,
    format_debugging_approach,
    format_decision,
    format_design_pattern,
    format_mental_model,
    format_programming_paradigm,
    format_thought,
)
from core.sessions import collaboration_store, decision_store, expected_values
from core.thinking import ThoughtLog
from core.validation import (
    ValidationError,
    validate_collaborative_reasoning,
    validate_debugging_approach,
    validate_decision_framework,
    validate_design_pattern,
    validate_mental_model,
    validate_programming_paradigm,
    validate_thought,
)

logger = logging.getLogger(__name__)


def success(summary: dict) -> dict:
    return {"content": [{"type": "text", "text": json.dumps(summary, indent=2)}]}


def failure(message: str) -> dict:
    body = {"error": message, "status": "failed"}
    return {
        "content": [{"type": "text", "text": json.dumps(body, indent=2)}],
        "isError": True,
    }


class ReasoningToolkit:
    """Owns the reasoning state and exposes one method per tool.

    Args:
        echo_renderings: When False, the coloured renderings are not written
            to the log (DISABLE_THOUGHT_LOGGING).
    """

    def __init__(self, echo_renderings: bool = True) -> None:
        self.echo_renderings = echo_renderings
        self.thoughts = ThoughtLog()
        self.collaborations = collaboration_store()
        self.decisions = decision_store()

        self.handlers: dict[str, Callable[[Any], dict]] = {
            "sequentialthinking": self.sequential_thinking,
            "mentalmodel": self.mental_model,
            "designpattern": self.design_pattern,
            "programmingparadigm": self.programming_paradigm,
            "debuggingapproach": self.debugging_approach,
            "collaborativereasoning": self.collaborative_reasoning,
            "decisionframework": self.decision_framework,
        }

    def call(self, tool_name: str, payload: Any) -> dict:
        """Dispatch by wire name.  Raises KeyError for an unknown tool."""
        return self.handlers[tool_name](payload)

    # -------------------------------------------------------------------------
    # Pipeline plumbing
    # -------------------------------------------------------------------------
    def _run(self, tool_name: str, work: Callable[[], dict]) -> dict:
        try:
            summary = work()
        except ValidationError as exc:
            logger.warning("%s rejected input: %s", tool_name, exc)
            return failure(str(exc))
        except Exception as exc:
            logger.exception("%s failed unexpectedly", tool_name)
            return failure(str(exc))
        return success(summary)

    def _render(self, text: str) -> None:
        if self.echo_renderings:
            logger.info(text)

    # -------------------------------------------------------------------------
    # Stateful tools
    # -------------------------------------------------------------------------
    def sequential_thinking(self, payload: Any) -> dict:
        def work() -> dict:
            record = validate_thought(payload)
            rendering = format_thought(record)
            summary = self.thoughts.record_thought(record)
            self._render(rendering)
            return summary

        return self._run("sequentialthinking", work)

    def collaborative_reasoning(self, payload: Any) -> dict:
        def work() -> dict:
            data = validate_collaborative_reasoning(payload)
            rendering = format_collaboration(data)
            summary = self.collaborations.advance(data)
            self._render(rendering)
            return summary

        return self._run("collaborativereasoning", work)

    def decision_framework(self, payload: Any) -> dict:
        def work() -> dict:
            data = validate_decision_framework(payload)
            expected = expected_values(data) if data.analysis_type == "expected-value" else None
            rendering = format_decision(data, expected)
            summary = self.decisions.advance(data)
            self._render(rendering)
            return summary

        return self._run("decisionframework", work)

    # -------------------------------------------------------------------------
    # Template tools (stateless)
    # -------------------------------------------------------------------------
    def mental_model(self, payload: Any) -> dict:
        def work() -> dict:
            data = validate_mental_model(payload)
            self._render(format_mental_model(data))
            return {
                "modelName": data.model_name,
                "status": "success",
                "hasSteps": len(data.steps) > 0,
                "hasConclusion": bool(data.conclusion),
            }

        return self._run("mentalmodel", work)

    def design_pattern(self, payload: Any) -> dict:
        def work() -> dict:
            data = validate_design_pattern(payload)
            self._render(format_design_pattern(data))
            return {
                "patternName": data.pattern_name,
                "status": "success",
                "hasImplementation": len(data.implementation) > 0,
                "hasCodeExample": bool(data.code_example),
            }

        return self._run("designpattern", work)

    def programming_paradigm(self, payload: Any) -> dict:
        def work() -> dict:
            data = validate_programming_paradigm(payload)
            self._render(format_programming_paradigm(data))
            return {
                "paradigmName": data.paradigm_name,
                "status": "success",
                "hasApproach": len(data.approach) > 0,
                "hasCodeExample": bool(data.code_example),
            }

        return self._run("programmingparadigm", work)

    def debugging_approach(self, payload: Any) -> dict:
        def work() -> dict:
            data = validate_debugging_approach(payload)
            self._render(format_debugging_approach(data))
            return {
                "approachName": data.approach_name,
                "status": "success",
                "hasSteps": len(data.steps) > 0,
                "hasResolution": bool(data.resolution),
            }

        return self._run("debuggingapproach", work)
