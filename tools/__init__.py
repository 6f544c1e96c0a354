# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP registrations.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP host and core/.  It:
#     1. Declares tool names and input schemas (typed, annotated parameters)
#     2. Binds each tool to a CanvaOperations method
#     3. Serializes Ok results to JSON text and Err results to isError output
#     4. Binds the canva:// resource templates to the markdown renderers
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or talk HTTP (that's core/dispatcher.py)
#   - They do NOT decide between mock and live data (also the dispatcher)
# =============================================================================
