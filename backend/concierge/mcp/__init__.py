"""MCP package: shared FastMCP instance and session factory."""

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from concierge.config import settings

# Shared FastMCP instance: tools register on this via @mcp.tool()
mcp = FastMCP(
    name="concierge-analytics-mcp",
    instructions=(
        "Concierge Analytics MCP server. Provides occupancy, RevPAR, ADR and "
        "revenue breakdowns for a property-management organisation."
    ),
    port=settings.mcp_port,
    stateless_http=True,
    json_response=True,
    transport_security=TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=[f"localhost:{settings.mcp_port}", f"mcp:{settings.mcp_port}", f"127.0.0.1:{settings.mcp_port}"],
    ),
)

# Session factory: set by server.py at startup, used by tool modules
_session_factory = None


def set_session_factory(factory):
    global _session_factory
    _session_factory = factory


def get_session_factory():
    if _session_factory is None:
        raise RuntimeError("MCP session factory not initialized. Is server.py running?")
    return _session_factory
