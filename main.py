# =============================================================================
# main.py  -  Entry Point for the Clear Thought MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (DISABLE_THOUGHT_LOGGING, CLEAR_THOUGHT_LOG_LEVEL, ...)
#   2. Builds the FastMCP server with a fresh ReasoningToolkit
#      (tools/mcp_server.py)
#   3. Serves the seven reasoning tools over the configured transport
#      (stdio unless CLEAR_THOUGHT_TRANSPORT says otherwise)
#
# CONNECTING A CLIENT:
#   Point any MCP client at this script as a stdio server, e.g.
#     {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
#   The client discovers the tools (sequentialthinking, mentalmodel, ...)
#   automatically.
#
# STATE:
#   The thought log and the session stores live in this process only.
#   Restarting the server starts every conversation from scratch.
# =============================================================================

import logging

from dotenv import load_dotenv

# Load environment variables from .env BEFORE importing the server module,
# which reads its settings at import time.
load_dotenv()

from tools.mcp_server import mcp, settings


def main() -> None:
    """Run the reasoning tool server until the client disconnects."""
    logging.info(f"Clear Thought MCP Server running on {settings.transport}")
    mcp.run(transport=settings.transport)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
