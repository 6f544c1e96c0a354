# =============================================================================
# main.py  —  Entry Point for the Canva MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads CANVA_APP_ID / CANVA_API_KEY from the environment (or .env)
#   2. Builds the credential context ONCE (warns if credentials are missing)
#   3. Wires dispatcher → domain operations → FastMCP server
#   4. Serves tools and resources over stdio
#
# WITHOUT CREDENTIALS:
#   The server still starts.  Every call answers with deterministic
#   placeholder data instead of hitting the Canva API.
# =============================================================================

from tools.mcp_server import build_default_server, configure_logging


def main() -> None:
    configure_logging()
    server = build_default_server()
    server.run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
