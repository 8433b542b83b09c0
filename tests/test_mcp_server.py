"""
MCP surface: tool listing, calls through FastMCP's in-memory client, settings.
"""

import asyncio
import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from core.toolkit import ReasoningToolkit
from tools.mcp_server import Settings, create_server, load_settings


def _call(server, tool_name, arguments):
    async def run():
        async with Client(server) as client:
            return await client.call_tool(tool_name, arguments)
    return asyncio.run(run())


def _call_unchecked(server, tool_name, arguments):
    async def run():
        async with Client(server) as client:
            return await client.call_tool(tool_name, arguments, raise_on_error=False)
    return asyncio.run(run())


def _text(result):
    return json.loads(result.content[0].text)


@pytest.fixture
def served():
    toolkit = ReasoningToolkit(echo_renderings=False)
    return toolkit, create_server(toolkit)


def test_lists_all_seven_tools(served):
    _, server = served

    async def run():
        async with Client(server) as client:
            return await client.list_tools()

    names = {tool.name for tool in asyncio.run(run())}
    assert names == {
        "sequentialthinking", "mentalmodel", "designpattern", "programmingparadigm",
        "debuggingapproach", "collaborativereasoning", "decisionframework",
    }


def test_sequential_thinking_over_mcp(served):
    toolkit, server = served
    result = _call(server, "sequentialthinking", {
        "thought": "deeper", "thoughtNumber": 5, "totalThoughts": 3, "nextThoughtNeeded": False,
    })
    body = _text(result)

    assert body["totalThoughts"] == 5
    assert body["thoughtHistoryLength"] == 1
    assert len(toolkit.thoughts) == 1


def test_optional_arguments_are_not_forwarded_as_null(served):
    toolkit, server = served
    _call(server, "sequentialthinking", {
        "thought": "start", "thoughtNumber": 1, "totalThoughts": 2, "nextThoughtNeeded": True,
    })
    record = toolkit.thoughts.history[0]
    assert record.revises_thought is None
    assert record.is_revision is False


def test_core_validation_failure_surfaces_as_tool_error(served):
    toolkit, server = served
    with pytest.raises(ToolError, match="failed"):
        _call(server, "sequentialthinking", {
            "thought": "zero", "thoughtNumber": 0, "totalThoughts": 3, "nextThoughtNeeded": True,
        })
    assert len(toolkit.thoughts) == 0


def test_collaboration_over_mcp(served, collaboration_payload):
    toolkit, server = served
    body = _text(_call(server, "collaborativereasoning", collaboration_payload))
    assert body["sessionId"] == "collab-1"
    assert body["personaCount"] == 2
    assert "collab-1" in toolkit.collaborations


def test_servers_keep_separate_state(collaboration_payload):
    first = ReasoningToolkit(echo_renderings=False)
    second = ReasoningToolkit(echo_renderings=False)
    _call(create_server(first), "collaborativereasoning", collaboration_payload)
    assert len(first.collaborations) == 1
    assert len(second.collaborations) == 0


# ═══════════════════════════════════════════════════════════
# LENIENT INPUT AND FAILED BODIES OVER MCP
# ═══════════════════════════════════════════════════════════

def test_non_array_optional_collection_becomes_empty(served):
    _, server = served
    body = _text(_call(server, "mentalmodel", {
        "modelName": "first_principles", "problem": "x", "steps": "not-a-list",
    }))
    assert body["status"] == "success"
    assert body["hasSteps"] is False


def test_numeric_list_items_are_stringified(served, collaboration_payload):
    toolkit, server = served
    collaboration_payload["consensusPoints"] = [1, 2.5]
    body = _text(_call(server, "collaborativereasoning", collaboration_payload))

    assert body["consensusPointCount"] == 2
    assert toolkit.collaborations.get("collab-1").consensus_points == ["1", "2.5"]


def test_fractional_iteration_accepted(served, collaboration_payload, decision_payload):
    toolkit, server = served
    collaboration_payload["iteration"] = 1.5
    decision_payload["iteration"] = 2.5
    decision_payload["stakeholders"] = "board"

    collab = _text(_call(server, "collaborativereasoning", collaboration_payload))
    decision = _text(_call(server, "decisionframework", decision_payload))

    assert collab["iteration"] == 1.5
    assert decision["iteration"] == 2.5
    assert decision["stakeholderCount"] == 0
    assert len(toolkit.decisions) == 1


@pytest.mark.parametrize("arguments,message", [
    ({"thoughtNumber": 1, "totalThoughts": 3, "nextThoughtNeeded": True},
     "Invalid thought: must be a string"),
    ({"thought": "x", "thoughtNumber": "1", "totalThoughts": 3, "nextThoughtNeeded": True},
     "Invalid thoughtNumber: must be a positive integer"),
    ({"thought": "x", "thoughtNumber": 1, "totalThoughts": 3, "nextThoughtNeeded": "yes"},
     "Invalid nextThoughtNeeded: must be a boolean"),
])
def test_bad_required_field_returns_failed_body(served, arguments, message):
    toolkit, server = served
    result = _call_unchecked(server, "sequentialthinking", arguments)

    assert result.is_error is True
    assert _text(result) == {"error": message, "status": "failed"}
    assert len(toolkit.thoughts) == 0


def test_missing_collaboration_field_returns_failed_body(served, collaboration_payload):
    toolkit, server = served
    del collaboration_payload["personas"]
    result = _call_unchecked(server, "collaborativereasoning", collaboration_payload)

    assert result.is_error is True
    assert _text(result) == {"error": "Invalid personas: must be an array", "status": "failed"}
    assert len(toolkit.collaborations) == 0


def test_published_schema_keeps_wire_types(served):
    _, server = served

    async def run():
        async with Client(server) as client:
            return await client.list_tools()

    tools = {tool.name: tool for tool in asyncio.run(run())}
    thinking = tools["sequentialthinking"].inputSchema["properties"]
    model = tools["mentalmodel"].inputSchema["properties"]

    assert thinking["thought"]["type"] == "string"
    assert thinking["thoughtNumber"]["type"] == "number"
    assert thinking["nextThoughtNeeded"]["type"] == "boolean"
    assert model["steps"]["type"] == "array"


# ═══════════════════════════════════════════════════════════
# SETTINGS
# ═══════════════════════════════════════════════════════════

def test_settings_defaults():
    assert load_settings({}) == Settings()


def test_settings_from_environment():
    settings = load_settings({
        "DISABLE_THOUGHT_LOGGING": "True",
        "CLEAR_THOUGHT_LOG_LEVEL": "debug",
        "CLEAR_THOUGHT_TRANSPORT": "http",
    })
    assert settings.disable_thought_logging is True
    assert settings.log_level == "DEBUG"
    assert settings.transport == "http"


@pytest.mark.parametrize("value", ["", "0", "false", "no"])
def test_thought_logging_enabled_unless_truthy(value):
    assert load_settings({"DISABLE_THOUGHT_LOGGING": value}).disable_thought_logging is False
