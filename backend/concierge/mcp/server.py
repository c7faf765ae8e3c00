"""MCP Server for Concierge Analytics: Streamable HTTP transport.

Runs as a standalone service next to the HTTP API and exposes the
portfolio analytics tool to assistants.

Uses the FastMCP high-level API with streamable_http_app() for
Streamable HTTP transport (single /mcp endpoint).
"""

import contextlib
import logging

import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from concierge.config import settings
from concierge.database import async_session_factory
from concierge.mcp import mcp, set_session_factory

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Make session factory available to tool modules
set_session_factory(async_session_factory)

# ---------------------------------------------------------------------------
# Import tool modules: triggers @mcp.tool() registration
# ---------------------------------------------------------------------------
import concierge.mcp.tools.analytics_tools  # noqa: F401, E402


# ---------------------------------------------------------------------------
# Health check endpoint (not part of MCP, just for container healthchecks)
# ---------------------------------------------------------------------------
async def health(request):
    return JSONResponse({"status": "healthy", "service": "concierge-analytics-mcp"})


# ---------------------------------------------------------------------------
# Starlette ASGI app: mounts MCP Streamable HTTP app + health check
# ---------------------------------------------------------------------------
# Create the MCP ASGI sub-app first so session_manager is initialized
mcp_http_app = mcp.streamable_http_app()


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    """Manage MCP session manager lifecycle."""
    async with mcp.session_manager.run():
        logger.info("MCP server started (Streamable HTTP transport)")
        yield
        logger.info("MCP server shutting down")


app = Starlette(
    routes=[
        Route("/health", health),
        Mount("/", app=mcp_http_app),
    ],
    lifespan=lifespan,
)

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.mcp_port)
