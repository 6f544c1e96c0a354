# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the logic for talking to the Canva API.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The dispatcher, placeholder
#   data, domain operations and markdown renderers can be used and tested
#   without an MCP host.
#
# LAYERS (leaves first):
#   credentials.py → mock_data.py → dispatcher.py → canva.py → resources.py
# =============================================================================
