# tests/conftest.py
"""
Pytest fixtures shared by the reasoning-tool tests.
"""

import copy
import json

import pytest

from core.toolkit import ReasoningToolkit


# ═══════════════════════════════════════════════════════════
# TOOLKIT
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def toolkit():
    """A fresh toolkit: empty thought log, empty session stores."""
    return ReasoningToolkit(echo_renderings=False)


@pytest.fixture
def decode():
    """Decode the JSON text carried by a response envelope."""
    def _decode(envelope):
        return json.loads(envelope["content"][0]["text"])
    return _decode


# ═══════════════════════════════════════════════════════════
# SAMPLE PAYLOADS
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def collaboration_payload():
    """A collaborative-reasoning call with two personas and one contribution."""
    return copy.deepcopy({
        "topic": "Should we split the monolith?",
        "personas": [
            {
                "id": "arch",
                "name": "Ada Architect",
                "expertise": ["distributed systems"],
                "background": "Ran platform teams",
                "perspective": "Long-term maintainability",
                "biases": ["prefers services"],
                "communication": {"style": "direct", "tone": "calm"},
            },
            {
                "id": "ops",
                "name": "Oscar Ops",
                "expertise": ["on-call", "observability"],
                "background": "SRE",
                "perspective": "Operational cost",
                "biases": [],
                "communication": {"style": "terse", "tone": "skeptical"},
            },
        ],
        "contributions": [
            {
                "personaId": "arch",
                "content": "Deploys are coupled across teams.",
                "type": "observation",
                "confidence": 0.8,
            },
        ],
        "stage": "ideation",
        "activePersonaId": "arch",
        "nextPersonaId": "ops",
        "sessionId": "collab-1",
        "iteration": 1,
        "nextContributionNeeded": True,
    })


@pytest.fixture
def decision_payload():
    """A decision-framework call with two options and per-option outcomes."""
    return copy.deepcopy({
        "decisionStatement": "Which database should we adopt?",
        "options": [
            {"id": "pg", "name": "Postgres", "description": "Relational"},
            {"id": "dyn", "name": "DynamoDB", "description": "Managed key-value"},
        ],
        "criteria": [
            {"id": "cost", "name": "Cost", "description": "Monthly spend", "weight": 0.6},
            {"id": "ops", "name": "Ops load", "description": "Maintenance", "weight": 0.4},
        ],
        "analysisType": "expected-value",
        "stage": "evaluation",
        "possibleOutcomes": [
            {"description": "Smooth rollout", "probability": 0.7, "value": 100,
             "optionId": "pg", "confidenceInEstimate": 0.6},
            {"description": "Migration pain", "probability": 0.3, "value": -50,
             "optionId": "pg", "confidenceInEstimate": 0.5},
            {"description": "Vendor lock-in", "probability": 1.0, "value": 40,
             "optionId": "dyn", "confidenceInEstimate": 0.7},
        ],
        "decisionId": "db-choice",
        "iteration": 0,
        "nextStageNeeded": True,
    })
