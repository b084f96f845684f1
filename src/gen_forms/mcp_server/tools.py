"""
MCP Tool definitions for Gen-Forms.

Exposes every RPC procedure as an MCP tool with the same name.
"""

import logging
from typing import Any

from gen_forms.errors import GenFormsError
from gen_forms.procedures import PROCEDURES, call_procedure, error_payload
from gen_forms.service import FormService

logger = logging.getLogger("gen-forms-mcp")


async def mcp_call_procedure(
    service: FormService,
    name: str,
    arguments: dict[str, Any] | None,
) -> dict[str, Any]:
    """
    MCP-compatible wrapper around ``call_procedure``.

    Returns:
        ``{"result": ...}`` on success, ``{"error": {"code", "message"}}``
        on failure. Errors are reported to the client instead of raised so
        the MCP session stays open.
    """
    try:
        result = await call_procedure(service, name, arguments)
        return {"result": result}
    except GenFormsError as e:
        logger.warning(f"Tool {name} rejected: {e.code}: {e.message}")
        return {"error": error_payload(e)}
    except Exception as e:
        logger.exception(f"Error in {name}: {e}")
        return {"error": error_payload(e)}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": procedure.name,
            "description": procedure.description,
            "inputSchema": procedure.input_schema(),
        }
        for procedure in PROCEDURES.values()
    ]
