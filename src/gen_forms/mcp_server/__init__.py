"""
MCP Server module for Gen-Forms.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from gen_forms.mcp_server.server import create_mcp_server, create_sse_app, run_mcp_server
from gen_forms.mcp_server.tools import get_mcp_tools, mcp_call_procedure

__all__ = [
    "create_mcp_server",
    "create_sse_app",
    "run_mcp_server",
    "get_mcp_tools",
    "mcp_call_procedure",
]
