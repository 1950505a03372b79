"""
JSON-RPC 2.0 endpoint for MCP clients.

POST /mcp accepts a single JSON-RPC request and dispatches it to the same
tool, prompt and resource handlers as the REST endpoints.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from . import __version__
from .errors import METHOD_NOT_FOUND, McpError, from_validation_error, internal_error
from .handlers import prompts, resources, tools
from .models import PromptGetRequest, ResourceReadRequest, ToolCallRequest
from .service import OEISService

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2025-06-18"
PARSE_ERROR = -32700
INVALID_REQUEST = -32600

SERVER_NAME = "oeis-mcp-server"
SERVER_TITLE = "OEIS MCP server"
INSTRUCTIONS = (
    "This server provides access to the OEIS (On-Line Encyclopedia of Integer Sequences) database. "
    "Tools: get_url (returns the OEIS homepage URL), "
    "find_by_id (search for a sequence by ID like 'A000045'), "
    "search_by_subsequence (search for sequences matching a given subsequence like [1,1,2,3,5]). "
    "Prompts: sequence_analysis (provides comprehensive analysis of an OEIS sequence). "
    "Resources: oeis://sequence/{id} (direct access to sequence data as JSON). "
    "Use this server to look up integer sequences, analyze their mathematical properties, "
    "and explore relationships between sequences."
)

router = APIRouter(tags=["MCP"])

Handler = Callable[[OEISService, Dict[str, Any]], Awaitable[Dict[str, Any]]]


async def _initialize(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {"tools": {}, "prompts": {}, "resources": {}},
        "serverInfo": {"name": SERVER_NAME, "title": SERVER_TITLE, "version": __version__},
        "instructions": INSTRUCTIONS,
    }


async def _ping(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    return {}


async def _list_tools(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    return (await tools.list_tools()).model_dump(exclude_none=True)


async def _call_tool(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    request = ToolCallRequest.model_validate(params)
    return (await tools.call_tool(service, request)).model_dump(exclude_none=True)


async def _list_prompts(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    return (await prompts.list_prompts()).model_dump(exclude_none=True)


async def _get_prompt(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    request = PromptGetRequest.model_validate(params)
    result = await prompts.get_prompt(service, request)
    # MCP wraps message text in a content block
    return {
        "description": result.description,
        "messages": [
            {"role": message.role, "content": {"type": "text", "text": message.content}}
            for message in result.messages
        ],
    }


async def _list_resource_templates(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    return (await resources.list_resource_templates()).model_dump(exclude_none=True)


async def _read_resource(service: OEISService, params: Dict[str, Any]) -> Dict[str, Any]:
    request = ResourceReadRequest.model_validate(params)
    return (await resources.read_resource(service, request)).model_dump(exclude_none=True)


METHOD_REGISTRY: Dict[str, Handler] = {
    "initialize": _initialize,
    "ping": _ping,
    "tools/list": _list_tools,
    "tools/call": _call_tool,
    "prompts/list": _list_prompts,
    "prompts/get": _get_prompt,
    "resources/templates/list": _list_resource_templates,
    "resources/read": _read_resource,
}


def _error(request_id: Any, code: int, message: str, data: Optional[Dict[str, Any]] = None) -> JSONResponse:
    error: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return JSONResponse({"jsonrpc": "2.0", "id": request_id, "error": error})


@router.post("/mcp", summary="MCP JSON-RPC endpoint")
async def mcp_endpoint(request: Request):
    """
    Handle one JSON-RPC 2.0 message.
    
    Requests get a JSON-RPC response; notifications (no id) get 202 Accepted.
    """
    try:
        message = await request.json()
    except ValueError:
        return _error(None, PARSE_ERROR, "Parse error")

    if not isinstance(message, dict) or message.get("jsonrpc") != "2.0" or "method" not in message:
        return _error(None, INVALID_REQUEST, "Invalid Request")

    request_id = message.get("id")
    method = message["method"]
    params = message.get("params") or {}

    if "id" not in message:
        logger.debug(f"Notification received: {method}")
        return Response(status_code=202)

    handler = METHOD_REGISTRY.get(method)
    if handler is None:
        return _error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    logger.info(f"JSON-RPC call: {method}")
    service: OEISService = request.app.state.service
    try:
        result = await handler(service, params)
    except ValidationError as e:
        err = from_validation_error(e)
        return _error(request_id, err.code, err.message, err.data)
    except McpError as e:
        return _error(request_id, e.code, e.message, e.data)
    except Exception as e:
        logger.error(f"Unhandled exception in {method}: {e}", exc_info=True)
        err = internal_error(str(e), {"type": type(e).__name__})
        return _error(request_id, err.code, err.message, err.data)

    return JSONResponse({"jsonrpc": "2.0", "id": request_id, "result": result})
