# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (all seven reasoning tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes the reasoning tools over MCP.  Each tool is a thin wrapper
#   around a ReasoningToolkit method from core/: it collects the call's
#   arguments into a dict, hands them to the toolkit, logs the exchange,
#   and returns the toolkit's summary.
#
# HOW IT WORKS (the flow):
#   1. The client calls a tool by name (e.g., "sequentialthinking")
#   2. FastMCP routes the call to the decorated function below
#   3. The function forwards the arguments to core/toolkit.py
#   4. On success the summary dict goes back as JSON text;
#      on failure a ToolError carries {"error": ..., "status": "failed"}
#      and the client sees isError: true
#
# TOOL NAMES:
#   The wire names are fixed ("mentalmodel", "decisionframework", ...) and so
#   are the argument names (camelCase, e.g. "thoughtNumber").  Python
#   parameter names below follow the wire, not PEP 8.
#
# ENUMERATIONS:
#   modelName, stage, analysisType, ... are plain strings here.  The allowed
#   values are listed in each docstring for the client; nothing enforces
#   them.  Required fields are listed in each docstring too: they are
#   enforced by core/validation.py, not by FastMCP.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server
#     b) Via the entry point:  python main.py
# =============================================================================

import json
import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import WithJsonSchema

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.toolkit import ReasoningToolkit

# =============================================================================
# Argument types
# =============================================================================
# Every argument is accepted as-is (Any, default None) and checked by
# core/validation.py, so a missing or mistyped field comes back as the
# toolkit's {"error", "status": "failed"} body and optional collections
# get the lenient treatment (non-array -> [], items stringified).
# WithJsonSchema only shapes the published inputSchema for clients.
# =============================================================================
Text = Annotated[Any, WithJsonSchema({"type": "string"})]
Count = Annotated[Any, WithJsonSchema({"type": "number", "minimum": 1})]
Number = Annotated[Any, WithJsonSchema({"type": "number", "minimum": 0})]
Flag = Annotated[Any, WithJsonSchema({"type": "boolean"})]
Strings = Annotated[Any, WithJsonSchema({"type": "array", "items": {"type": "string"}})]
Objects = Annotated[Any, WithJsonSchema({"type": "array", "items": {"type": "object"}})]

# =============================================================================
# Settings
# =============================================================================
# Read once from the environment (after .env is loaded):
#   DISABLE_THOUGHT_LOGGING   true/1/yes -> no coloured renderings on stderr
#   CLEAR_THOUGHT_LOG_LEVEL   DEBUG / INFO / WARNING ... (default INFO)
#   CLEAR_THOUGHT_TRANSPORT   stdio (default), http, sse, streamable-http
# =============================================================================
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    disable_thought_logging: bool = False
    log_level: str = "INFO"
    transport: str = "stdio"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from an environment mapping (os.environ by default)."""
    env = os.environ if environ is None else environ
    return Settings(
        disable_thought_logging=env.get("DISABLE_THOUGHT_LOGGING", "").strip().lower() in _TRUTHY,
        log_level=env.get("CLEAR_THOUGHT_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        transport=env.get("CLEAR_THOUGHT_TRANSPORT", "stdio").strip() or "stdio",
    )


load_dotenv()
settings = load_settings()

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the stdio transport uses STDOUT for the MCP JSON
# stream.  A log line on stdout would corrupt the protocol.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages (rejections)
# =============================================================================
_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _arguments(**fields: Any) -> dict:
    # Omitted optional arguments arrive as None; the toolkit expects them absent.
    return {name: value for name, value in fields.items() if value is not None}


def _respond(toolkit: ReasoningToolkit, tool_name: str, arguments: dict) -> dict:
    """Run one call through the toolkit and unwrap its envelope.

    Raises:
        ToolError: with the {"error", "status"} JSON as its message when the
            toolkit reports a failure.
    """
    _log_request(tool_name, **arguments)
    envelope = toolkit.call(tool_name, arguments)
    text = envelope["content"][0]["text"]
    body = json.loads(text)
    if envelope.get("isError"):
        _log_status(f"{tool_name} failed: {body['error']}")
        _log_response(tool_name, body)
        raise ToolError(text)
    return _log_response(tool_name, body)


# =============================================================================
# Server factory
# =============================================================================
# Every server gets its own ReasoningToolkit, so the thought log and the
# session stores are per-server.  The module-level `mcp` below is the one
# the entry point runs.
# =============================================================================
def create_server(toolkit: Optional[ReasoningToolkit] = None) -> FastMCP:
    """Create a FastMCP server exposing the seven reasoning tools."""
    if toolkit is None:
        toolkit = ReasoningToolkit(echo_renderings=not settings.disable_thought_logging)

    server = FastMCP("clear-thought")

    # =========================================================================
    # TOOL 1: sequentialthinking
    # =========================================================================
    # The only tool with a global history: every accepted call appends to
    # the toolkit's thought log.
    # =========================================================================
    @server.tool(name="sequentialthinking")
    def sequentialthinking(
        thought: Text = None,
        thoughtNumber: Count = None,
        totalThoughts: Count = None,
        nextThoughtNeeded: Flag = None,
        isRevision: Flag = None,
        revisesThought: Count = None,
        branchFromThought: Count = None,
        branchId: Text = None,
        needsMoreThoughts: Flag = None,
    ) -> dict:
        """A detailed tool for dynamic and reflective problem-solving through thoughts.

        Required: thought, thoughtNumber, totalThoughts, nextThoughtNeeded.

        This tool helps analyze problems through a flexible thinking process
        that can adapt and evolve.  Each thought can build on, question, or
        revise previous insights as understanding deepens.

        When to use this tool:
        - Breaking down complex problems into steps
        - Planning and design with room for revision
        - Analysis that might need course correction
        - Problems where the full scope might not be clear initially
        - Tasks that need to maintain context over multiple steps

        You should:
        1. Start with an initial estimate of needed thoughts, but be ready to adjust
        2. Feel free to question or revise previous thoughts
        3. Don't hesitate to add more thoughts if needed, even at the "end"
        4. Mark thoughts that revise previous thinking or branch into new paths
        5. Generate a solution hypothesis and verify it against the chain of thought
        6. Only set nextThoughtNeeded to false when truly done

        Args:
            thought: The current thinking step.
            thoughtNumber: Position of this thought (1-based; may exceed totalThoughts).
            totalThoughts: Current estimate of thoughts needed (advisory).
            nextThoughtNeeded: Whether another thought should follow.
            isRevision: Whether this thought revises earlier thinking.
            revisesThought: Which thought number is being reconsidered.
            branchFromThought: Thought number this branch starts from.
            branchId: Identifier of the branch.
            needsMoreThoughts: Whether more thoughts than estimated are needed.

        Returns:
            thoughtNumber, totalThoughts (never below thoughtNumber),
            nextThoughtNeeded, isRevision, startsBranch, branches (ids seen
            so far) and thoughtHistoryLength.
        """
        return _respond(toolkit, "sequentialthinking", _arguments(
            thought=thought, thoughtNumber=thoughtNumber, totalThoughts=totalThoughts,
            nextThoughtNeeded=nextThoughtNeeded, isRevision=isRevision,
            revisesThought=revisesThought, branchFromThought=branchFromThought,
            branchId=branchId, needsMoreThoughts=needsMoreThoughts,
        ))

    # =========================================================================
    # TOOLS 2-5: the stateless templates
    # =========================================================================
    @server.tool(name="mentalmodel")
    def mentalmodel(
        modelName: Text = None,
        problem: Text = None,
        steps: Strings = None,
        reasoning: Text = None,
        conclusion: Text = None,
    ) -> dict:
        """A tool for applying structured mental models to problem-solving.

        Required: modelName, problem.

        Supported models (modelName): first_principles, opportunity_cost,
        error_propagation, rubber_duck, pareto_principle, occams_razor.

        Returns:
            modelName, status, hasSteps, hasConclusion.
        """
        return _respond(toolkit, "mentalmodel", _arguments(
            modelName=modelName, problem=problem, steps=steps,
            reasoning=reasoning, conclusion=conclusion,
        ))

    @server.tool(name="designpattern")
    def designpattern(
        patternName: Text = None,
        context: Text = None,
        implementation: Strings = None,
        benefits: Strings = None,
        tradeoffs: Strings = None,
        codeExample: Text = None,
        languages: Strings = None,
    ) -> dict:
        """A tool for applying design patterns to software architecture and implementation.

        Required: patternName, context.

        Supported patterns (patternName): modular_architecture,
        api_integration, state_management, async_processing, scalability,
        security, agentic_design.

        Returns:
            patternName, status, hasImplementation, hasCodeExample.
        """
        return _respond(toolkit, "designpattern", _arguments(
            patternName=patternName, context=context, implementation=implementation,
            benefits=benefits, tradeoffs=tradeoffs, codeExample=codeExample,
            languages=languages,
        ))

    @server.tool(name="programmingparadigm")
    def programmingparadigm(
        paradigmName: Text = None,
        problem: Text = None,
        approach: Strings = None,
        benefits: Strings = None,
        limitations: Strings = None,
        codeExample: Text = None,
        languages: Strings = None,
    ) -> dict:
        """A tool for applying different programming paradigms to solve problems.

        Required: paradigmName, problem.

        Supported paradigms (paradigmName): imperative, procedural,
        object_oriented, functional, declarative, logic, event_driven,
        aspect_oriented, concurrent, reactive.

        Returns:
            paradigmName, status, hasApproach, hasCodeExample.
        """
        return _respond(toolkit, "programmingparadigm", _arguments(
            paradigmName=paradigmName, problem=problem, approach=approach,
            benefits=benefits, limitations=limitations, codeExample=codeExample,
            languages=languages,
        ))

    @server.tool(name="debuggingapproach")
    def debuggingapproach(
        approachName: Text = None,
        issue: Text = None,
        steps: Strings = None,
        findings: Text = None,
        resolution: Text = None,
    ) -> dict:
        """A tool for applying systematic debugging approaches to solve technical issues.

        Required: approachName, issue.

        Supported approaches (approachName): binary_search,
        reverse_engineering, divide_conquer, backtracking,
        cause_elimination, program_slicing.

        Returns:
            approachName, status, hasSteps, hasResolution.
        """
        return _respond(toolkit, "debuggingapproach", _arguments(
            approachName=approachName, issue=issue, steps=steps,
            findings=findings, resolution=resolution,
        ))

    # =========================================================================
    # TOOL 6: collaborativereasoning
    # =========================================================================
    # Stored per sessionId.  Each call replaces the session's snapshot, so
    # the client must resend the accumulated personas and contributions.
    # =========================================================================
    @server.tool(name="collaborativereasoning")
    def collaborativereasoning(
        topic: Text = None,
        personas: Objects = None,
        contributions: Objects = None,
        stage: Text = None,
        activePersonaId: Text = None,
        sessionId: Text = None,
        iteration: Number = None,
        nextContributionNeeded: Flag = None,
        nextPersonaId: Text = None,
        consensusPoints: Strings = None,
        disagreements: Objects = None,
        keyInsights: Strings = None,
        openQuestions: Strings = None,
        finalRecommendation: Text = None,
        suggestedContributionTypes: Strings = None,
    ) -> dict:
        """A detailed tool for simulating expert collaboration with diverse perspectives.

        Required: topic, personas, contributions, stage, activePersonaId,
        sessionId, iteration, nextContributionNeeded.

        Coordinates multiple viewpoints on one topic through the stages
        problem-definition, ideation, critique, integration, decision,
        reflection.

        Args:
            topic: What the panel is discussing.
            personas: [{id, name, expertise[], background, perspective,
                biases[], communication: {style, tone}}]
            contributions: [{personaId, content, type, confidence (0-1),
                referenceIds[]}] where type is one of observation, question,
                insight, concern, suggestion, challenge, synthesis.
            stage: Current stage of the collaboration.
            activePersonaId: Persona speaking now.
            sessionId: Unique identifier for this collaboration session.
            iteration: Current iteration of the collaboration (>= 0).
            nextContributionNeeded: Whether another contribution is needed.
            nextPersonaId: Persona expected to speak next.
            consensusPoints: Points the personas agree on.
            disagreements: [{topic, positions: [{personaId, position, arguments[]}]}]
            keyInsights: Insights gathered so far.
            openQuestions: Questions still open.
            finalRecommendation: The panel's recommendation, once reached.
            suggestedContributionTypes: Contribution types worth adding next.

        Returns:
            sessionId, stage, iteration, activePersonaId, counts of personas,
            contributions, consensus points and disagreements, and status.
        """
        return _respond(toolkit, "collaborativereasoning", _arguments(
            topic=topic, personas=personas, contributions=contributions, stage=stage,
            activePersonaId=activePersonaId, sessionId=sessionId, iteration=iteration,
            nextContributionNeeded=nextContributionNeeded, nextPersonaId=nextPersonaId,
            consensusPoints=consensusPoints, disagreements=disagreements,
            keyInsights=keyInsights, openQuestions=openQuestions,
            finalRecommendation=finalRecommendation,
            suggestedContributionTypes=suggestedContributionTypes,
        ))

    # =========================================================================
    # TOOL 7: decisionframework
    # =========================================================================
    # Same replace-by-id pattern, keyed by decisionId.
    # =========================================================================
    @server.tool(name="decisionframework")
    def decisionframework(
        decisionStatement: Text = None,
        options: Objects = None,
        analysisType: Text = None,
        stage: Text = None,
        decisionId: Text = None,
        iteration: Number = None,
        nextStageNeeded: Flag = None,
        criteria: Objects = None,
        stakeholders: Strings = None,
        constraints: Strings = None,
        timeHorizon: Text = None,
        riskTolerance: Text = None,
        possibleOutcomes: Objects = None,
        recommendation: Text = None,
        rationale: Text = None,
    ) -> dict:
        """A detailed tool for structured decision analysis and rational choice.

        Required: decisionStatement, options, analysisType, stage, decisionId,
        iteration, nextStageNeeded.

        Evaluates options, criteria and outcomes with one of the analysis
        types pros-cons, weighted-criteria, decision-tree, expected-value,
        scenario-analysis.  Stages: problem-definition, options-generation,
        criteria-definition, evaluation, sensitivity-analysis, decision.

        Args:
            decisionStatement: The decision to be made.
            options: [{id, name, description}]
            analysisType: Analysis framework in use.
            stage: Current stage of the decision process.
            decisionId: Unique identifier for this decision analysis.
            iteration: Current iteration of the decision process (>= 0).
            nextStageNeeded: Whether another stage is needed in the process.
            criteria: [{id, name, description, weight (0-1)}]
            stakeholders: Who is affected.
            constraints: Hard limits on the decision.
            timeHorizon: Period the decision covers.
            riskTolerance: risk-averse, risk-neutral or risk-seeking.
            possibleOutcomes: [{id, description, probability (0-1), value,
                optionId, confidenceInEstimate (0-1)}]
            recommendation: Chosen option, once reached.
            rationale: Why.

        Returns:
            decisionId, stage, iteration, counts of options/criteria/outcomes,
            status, and expectedValues per option for expected-value analysis.
        """
        return _respond(toolkit, "decisionframework", _arguments(
            decisionStatement=decisionStatement, options=options, analysisType=analysisType,
            stage=stage, decisionId=decisionId, iteration=iteration,
            nextStageNeeded=nextStageNeeded, criteria=criteria, stakeholders=stakeholders,
            constraints=constraints, timeHorizon=timeHorizon, riskTolerance=riskTolerance,
            possibleOutcomes=possibleOutcomes, recommendation=recommendation,
            rationale=rationale,
        ))

    return server


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# The name "clear-thought" becomes the server identity in MCP.
mcp = create_server()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run(transport=settings.transport)
