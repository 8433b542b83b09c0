# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the reasoning-tool logic: validation, state
# tracking, formatting and response shaping.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, dotenv, or any transport code.
#   Every module here is plain Python and can be driven directly from a
#   REPL or a test with no server running.
#
# Entry point for callers: core.toolkit.ReasoningToolkit.
# =============================================================================
