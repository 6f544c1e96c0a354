# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool & Resource Server (ALL registrations)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares every MCP tool and resource the agent can use.  Each tool is a
#   thin wrapper around a core/ domain operation: it logs the call, awaits
#   the operation and turns the Ok / Err result into MCP output.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name (e.g., "get_design")
#   2. FastMCP validates the arguments against the function signature
#   3. The wrapper calls CanvaOperations → RequestDispatcher
#   4. Ok(payload)  → the payload as 2-space-indented JSON text
#      Err(error)   → ToolError("Error: <message>"), i.e. isError: true
#
# RESOURCES:
#   canva://{section}           → static documentation
#   canva://design/{designId}   → markdown view of a design
#   canva://brand/{brandId}     → markdown view of a brand
#   canva://asset/{assetId}     → markdown view of an asset
#   Resource renderers never fail: errors become an "Error retrieving ..." doc.
#
# WIRING:
#   create_server() takes a ready CanvaOperations, so the credential context
#   is built once by the caller and injected.  No module-level client.
#
# RUNNING THIS SERVER:
#   a) python main.py
#   b) python -m tools.mcp_server
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from core.canva import CanvaOperations
from core.credentials import CredentialContext
from core.dispatcher import RequestDispatcher
from core.models import DEFAULT_LIMIT, AssetType, DispatchResult, Err, ImageUrl, Limit
from core.resources import (
    render_asset,
    render_brand,
    render_design,
    render_documentation,
)

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything printed to stdout would corrupt the MCP JSON stream.
#
# ANSI COLOR CODES:
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for responses
#   - YELLOW for intermediate status messages
#   - RED for errors surfaced to the agent
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

SERVER_NAME = "canva-api"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
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


def _to_tool_output(tool_name: str, result: DispatchResult) -> str:
    """Log the outcome, then turn it into tool output.

    Ok  → JSON text (2-space indent).
    Err → raises ToolError, which FastMCP reports with isError: true.
    """
    if isinstance(result, Err):
        logging.info(f"{_RED}  ← {tool_name} error: {result.message}{_RESET}")
        raise ToolError(f"Error: {result.message}")

    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result.value, separators=(',', ':'))}{_RESET}"
    )
    return json.dumps(result.value, indent=2)


# -----------------------------------------------------------------------------
# Shared argument descriptions (these end up in the tool input schemas)
# -----------------------------------------------------------------------------
DesignId = Annotated[str, Field(description="The unique identifier for a design")]
BrandId = Annotated[str, Field(description="The unique identifier for a brand")]
AssetId = Annotated[str, Field(description="The unique identifier for an asset")]
UserId = Annotated[str, Field(description="The unique identifier for a user")]
StartAfter = Annotated[Optional[str], Field(description="Token for pagination")]
ImageUrlArg = Annotated[
    ImageUrl,
    Field(description="URL of the image to upload", json_schema_extra={"format": "uri"}),
]


# =============================================================================
# Server factory
# =============================================================================
# Tool parameter names (designId, startAfter, type, ...) are the argument
# names agents send, so they stay camelCase here even though core/ uses
# snake_case.
# =============================================================================
def create_server(operations: CanvaOperations) -> FastMCP:
    """Build the FastMCP server with every tool and resource bound to `operations`."""
    mcp = FastMCP(SERVER_NAME)
    mode = "live" if operations.dispatcher.live else "mock"

    # =========================================================================
    # Design tools
    # =========================================================================
    @mcp.tool()
    async def get_design(designId: DesignId) -> str:
        """Get information about a specific design."""
        _log_request("get_design", designId=designId)
        return _to_tool_output("get_design", await operations.get_design(designId))

    @mcp.tool()
    async def list_designs(limit: Limit = DEFAULT_LIMIT, startAfter: StartAfter = None) -> str:
        """List designs with optional pagination.

        Pass the previous response's nextPageToken as startAfter to get
        the next page.
        """
        _log_request("list_designs", limit=limit, startAfter=startAfter)
        return _to_tool_output("list_designs", await operations.list_designs(limit, startAfter))

    # =========================================================================
    # Brand tools
    # =========================================================================
    @mcp.tool()
    async def get_brand(brandId: BrandId) -> str:
        """Get information about a specific brand."""
        _log_request("get_brand", brandId=brandId)
        return _to_tool_output("get_brand", await operations.get_brand(brandId))

    @mcp.tool()
    async def list_brands(limit: Limit = DEFAULT_LIMIT, startAfter: StartAfter = None) -> str:
        """List brands with optional pagination."""
        _log_request("list_brands", limit=limit, startAfter=startAfter)
        return _to_tool_output("list_brands", await operations.list_brands(limit, startAfter))

    # =========================================================================
    # Asset tools
    # =========================================================================
    @mcp.tool()
    async def get_asset(assetId: AssetId) -> str:
        """Get information about a specific asset."""
        _log_request("get_asset", assetId=assetId)
        return _to_tool_output("get_asset", await operations.get_asset(assetId))

    @mcp.tool()
    async def list_assets(
        limit: Limit = DEFAULT_LIMIT,
        startAfter: StartAfter = None,
        type: Annotated[Optional[AssetType], Field(description="Type of asset")] = None,
    ) -> str:
        """List assets with optional filtering by type and pagination."""
        _log_request("list_assets", limit=limit, startAfter=startAfter, type=type)
        return _to_tool_output(
            "list_assets", await operations.list_assets(limit, startAfter, type)
        )

    @mcp.tool()
    async def upload_image(
        url: ImageUrlArg,
        title: Annotated[Optional[str], Field(description="Title for the image")] = None,
        brandId: Annotated[Optional[str], Field(description="Brand to associate the image with")] = None,
    ) -> str:
        """Upload an image to Canva from a public URL."""
        _log_request("upload_image", url=url, title=title, brandId=brandId)
        return _to_tool_output("upload_image", await operations.upload_image(url, title, brandId))

    # =========================================================================
    # User tools
    # =========================================================================
    @mcp.tool()
    async def get_user(userId: UserId) -> str:
        """Get information about a specific user."""
        _log_request("get_user", userId=userId)
        return _to_tool_output("get_user", await operations.get_user(userId))

    @mcp.tool()
    async def list_users(limit: Limit = DEFAULT_LIMIT, startAfter: StartAfter = None) -> str:
        """List users with optional pagination."""
        _log_request("list_users", limit=limit, startAfter=startAfter)
        return _to_tool_output("list_users", await operations.list_users(limit, startAfter))

    # =========================================================================
    # Resources
    # =========================================================================
    @mcp.resource("canva://{section}", name="canva_docs", mime_type="text/markdown")
    def documentation(section: str) -> str:
        """Canva API documentation by section."""
        return render_documentation(section)

    @mcp.resource("canva://design/{designId}", name="canva_design", mime_type="text/markdown")
    async def design(designId: str) -> str:
        """A Canva design rendered as markdown."""
        return await render_design(operations, designId)

    @mcp.resource("canva://brand/{brandId}", name="canva_brand", mime_type="text/markdown")
    async def brand(brandId: str) -> str:
        """A Canva brand kit rendered as markdown."""
        return await render_brand(operations, brandId)

    @mcp.resource("canva://asset/{assetId}", name="canva_asset", mime_type="text/markdown")
    async def asset(assetId: str) -> str:
        """A Canva asset rendered as markdown."""
        return await render_asset(operations, assetId)

    _log_status(f"Server '{SERVER_NAME}' ready ({mode} mode)")
    return mcp


def build_default_server() -> FastMCP:
    """Wire the server from the environment (and a .env file, if present)."""
    load_dotenv()
    credentials = CredentialContext.from_env()
    return create_server(CanvaOperations(RequestDispatcher(credentials)))


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    configure_logging()
    build_default_server().run()
