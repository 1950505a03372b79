"""
MCP Resource Endpoint Handlers

Handles resource template listing and reading for MCP protocol.
Exposes resources: oeis://sequence/{id}
"""

import json
import logging
from typing import Dict, Any

from ..errors import SEQUENCE_URI_TEMPLATE, invalid_resource_uri
from ..models import (
    ResourceContent,
    ResourceTemplateDefinition,
    ResourceTemplateListResponse,
    ResourceReadRequest,
    ResourceReadResponse,
)
from ..service import OEISService

logger = logging.getLogger(__name__)

SEQUENCE_URI_PREFIX = "oeis://sequence/"


# Resource template registry
RESOURCE_TEMPLATE_REGISTRY: Dict[str, Dict[str, Any]] = {
    "sequence": {
        "uriTemplate": SEQUENCE_URI_TEMPLATE,
        "name": "OEIS Sequence",
        "description": "OEIS sequence data by ID (e.g., A000045)",
        "mimeType": "application/json",
    }
}


def parse_sequence_uri(uri: str) -> str:
    """
    Extract the sequence ID from oeis://sequence/{id}.
    
    Raises:
        McpError: INVALID_PARAMS if the URI does not use the sequence prefix
    """
    if not uri.startswith(SEQUENCE_URI_PREFIX):
        raise invalid_resource_uri(uri)
    return uri[len(SEQUENCE_URI_PREFIX):]


async def list_resource_templates() -> ResourceTemplateListResponse:
    """
    List all resource templates. Nothing is fetched from OEIS here.
    
    Returns:
        ResourceTemplateListResponse with list of template definitions
    """
    logger.info("Listing resource templates")
    templates = [
        ResourceTemplateDefinition(**metadata)
        for metadata in RESOURCE_TEMPLATE_REGISTRY.values()
    ]
    return ResourceTemplateListResponse(resourceTemplates=templates)


async def read_resource(service: OEISService, request: ResourceReadRequest) -> ResourceReadResponse:
    """
    Read a resource by URI.
    
    Args:
        service: Service wrapping the OEIS backend
        request: Resource read request with URI
        
    Returns:
        ResourceReadResponse with the sequence as pretty-printed JSON
        
    Raises:
        McpError: INVALID_PARAMS if the URI is malformed or the sequence is unknown;
            INTERNAL_ERROR if the backend failed
    """
    uri = request.uri
    logger.info(f"Reading resource: {uri!r}")
    
    sequence_id = parse_sequence_uri(uri)
    sequence = await service.find_sequence(sequence_id)
    
    content = ResourceContent(
        uri=uri,
        mimeType="text",
        text=json.dumps(sequence.model_dump(mode="json"), indent=2, ensure_ascii=False),
    )
    return ResourceReadResponse(contents=[content])
