# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It:
#     1. Declares each tool's name, arguments and description
#     2. Forwards the arguments to core.toolkit.ReasoningToolkit
#     3. Logs every request and response to stderr
#     4. Turns a failed envelope into a ToolError (isError on the wire)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate payloads (core/validation.py does)
#   - They do NOT hold state (the toolkit instance does)
# =============================================================================
