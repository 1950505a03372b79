"""
MCP Tool Endpoint Handlers

Handles tool listing and execution for MCP protocol.
Exposes OEIS tools: get_url, find_by_id, search_by_subsequence
"""

import json
import logging
from typing import Dict, Any

from pydantic import ValidationError

from ..backend.models import (
    EmptyRequest,
    FindRequest,
    FindResponse,
    SearchRequest,
    SearchResponse,
)
from ..errors import from_validation_error, invalid_params
from ..models import (
    ToolDefinition,
    ToolListResponse,
    ToolCallRequest,
    ToolCallResponse,
)
from ..service import OEISService

logger = logging.getLogger(__name__)


def _structured(payload: Dict[str, Any]) -> ToolCallResponse:
    """Wrap a structured result, echoing it as text for clients without structured output."""
    return ToolCallResponse(
        content=[{"type": "text", "text": json.dumps(payload)}],
        structuredContent=payload,
        isError=False,
    )


async def _get_url(service: OEISService, request: EmptyRequest) -> ToolCallResponse:
    return ToolCallResponse(content=[{"type": "text", "text": service.base_url}], isError=False)


async def _find_by_id(service: OEISService, request: FindRequest) -> ToolCallResponse:
    logger.info(f"Find sequence by ID: {request.id!r}")
    result = await service.find_sequence(request.id)
    return _structured(FindResponse(result=result).model_dump(mode="json"))


async def _search_by_subsequence(service: OEISService, request: SearchRequest) -> ToolCallResponse:
    logger.info(f"Search sequences by subsequence: {request.subsequence}")
    results = await service.search_sequences(request.subsequence)
    return _structured(SearchResponse(results=results).model_dump(mode="json"))


# Tool registry with metadata
TOOL_REGISTRY: Dict[str, Dict[str, Any]] = {
    "get_url": {
        "description": "Get a URL of OEIS entry.",
        "input_model": EmptyRequest,
        "handler": _get_url,
    },
    "find_by_id": {
        "description": "Find a sequence by its ID.",
        "input_model": FindRequest,
        "handler": _find_by_id,
    },
    "search_by_subsequence": {
        "description": "Search sequences by subsequence.",
        "input_model": SearchRequest,
        "handler": _search_by_subsequence,
    },
}


async def list_tools() -> ToolListResponse:
    """
    List all available tools.
    
    Returns:
        ToolListResponse with list of tool definitions
    """
    tools = [
        ToolDefinition(
            name=name,
            description=metadata["description"],
            inputSchema=metadata["input_model"].model_json_schema()
        )
        for name, metadata in TOOL_REGISTRY.items()
    ]
    
    return ToolListResponse(tools=tools)


async def call_tool(service: OEISService, request: ToolCallRequest) -> ToolCallResponse:
    """
    Execute a tool call.
    
    Args:
        service: Service wrapping the OEIS backend
        request: Tool call request with name and arguments
        
    Returns:
        ToolCallResponse with tool output
        
    Raises:
        McpError: INVALID_PARAMS for an unknown tool, malformed arguments or an
            unknown sequence ID; INTERNAL_ERROR if the backend failed
    """
    tool_name = request.name
    
    if tool_name not in TOOL_REGISTRY:
        raise invalid_params(f"Tool '{tool_name}' not found. Available tools: {list(TOOL_REGISTRY.keys())}")
    
    metadata = TOOL_REGISTRY[tool_name]
    try:
        arguments = metadata["input_model"].model_validate(request.arguments)
    except ValidationError as e:
        raise from_validation_error(e) from e
    
    return await metadata["handler"](service, arguments)
