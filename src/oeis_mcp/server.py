"""
MCP Server - Main FastAPI Application

Implements Model Context Protocol server exposing:
- /tool/* endpoints for OEIS tools
- /resource/* endpoints for the sequence resource template
- /prompt/* endpoints for prompts
- /mcp JSON-RPC endpoint over the same catalog

The OEIS backend is injected through create_app; the module-level app uses the
network client configured from the environment.
"""

import logging
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .backend.base import OEISBackend
from .backend.client import OEISClient
from .config import Settings, get_settings
from .errors import INTERNAL_ERROR, INVALID_PARAMS, McpError, from_error_list
from .handlers import tools, resources, prompts
from .jsonrpc import INSTRUCTIONS, SERVER_TITLE, router as jsonrpc_router
from .models import (
    ToolListResponse,
    ToolCallRequest,
    ToolCallResponse,
    ResourceTemplateListResponse,
    ResourceReadRequest,
    ResourceReadResponse,
    PromptListResponse,
    PromptGetRequest,
    PromptGetResponse,
    MCPError,
)
from .service import OEISService

logger = logging.getLogger(__name__)


def get_service(request: Request) -> OEISService:
    """Dependency returning the service bound to the running app."""
    return request.app.state.service


# ============================================================================
# Error Handlers
# ============================================================================

async def mcp_error_handler(request: Request, exc: McpError):
    """Handle MCP errors: invalid parameters -> 400, internal errors -> 500."""
    status_code = 400 if exc.code == INVALID_PARAMS else 500
    if status_code == 500:
        logger.error(f"Internal error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content=MCPError(code=exc.code, message=exc.message, data=exc.data).model_dump()
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies as invalid parameters."""
    return await mcp_error_handler(request, from_error_list(exc.errors()))


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=MCPError(
            code=INTERNAL_ERROR,
            message="Internal server error",
            data={"type": type(exc).__name__, "detail": str(exc)}
        ).model_dump()
    )


def create_app(backend: Optional[OEISBackend] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.
    
    Args:
        backend: OEIS backend to query; defaults to the HTTP client
        settings: Configuration; defaults to values read from the environment
        
    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    if backend is None:
        backend = OEISClient(search_url=settings.search_url, timeout=settings.request_timeout)

    app = FastAPI(
        title="MCP Server - OEIS",
        description="Model Context Protocol server for the On-Line Encyclopedia of Integer Sequences",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.service = OEISService(backend, base_url=settings.base_url)

    app.add_exception_handler(McpError, mcp_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # ========================================================================
    # Health Check
    # ========================================================================

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "MCP Server",
            "version": __version__
        }

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": SERVER_TITLE,
            "version": __version__,
            "protocol": "Model Context Protocol",
            "instructions": INSTRUCTIONS,
            "endpoints": {
                "tools": "/tool/list, /tool/call",
                "resources": "/resource/templates, /resource/read",
                "prompts": "/prompt/list, /prompt/get",
                "jsonrpc": "/mcp",
                "docs": "/docs"
            }
        }

    # ========================================================================
    # Tool Endpoints
    # ========================================================================

    @app.get(
        "/tool/list",
        response_model=ToolListResponse,
        tags=["Tools"],
        summary="List available tools"
    )
    async def list_tools_endpoint():
        """
        List all available tools.
        
        Returns a list of tool definitions with their schemas.
        """
        return await tools.list_tools()

    @app.post(
        "/tool/call",
        response_model=ToolCallResponse,
        response_model_exclude_none=True,
        tags=["Tools"],
        summary="Call a tool"
    )
    async def call_tool_endpoint(
        request: ToolCallRequest,
        service: OEISService = Depends(get_service)
    ):
        """
        Execute a tool call.
        
        - **name**: Tool name to call
        - **arguments**: Tool arguments as JSON object
        
        Returns tool execution result.
        """
        return await tools.call_tool(service, request)

    # ========================================================================
    # Resource Endpoints
    # ========================================================================

    @app.get(
        "/resource/templates",
        response_model=ResourceTemplateListResponse,
        tags=["Resources"],
        summary="List resource templates"
    )
    async def list_resource_templates_endpoint():
        """
        List all resource templates.
        
        Returns URI templates that can be passed to /resource/read once filled in.
        """
        return await resources.list_resource_templates()

    @app.post(
        "/resource/read",
        response_model=ResourceReadResponse,
        tags=["Resources"],
        summary="Read a resource"
    )
    async def read_resource_endpoint(
        request: ResourceReadRequest,
        service: OEISService = Depends(get_service)
    ):
        """
        Read a resource by URI.
        
        - **uri**: Resource URI (e.g., "oeis://sequence/A000045")
        
        Returns resource contents.
        """
        return await resources.read_resource(service, request)

    # ========================================================================
    # Prompt Endpoints
    # ========================================================================

    @app.get(
        "/prompt/list",
        response_model=PromptListResponse,
        tags=["Prompts"],
        summary="List available prompts"
    )
    async def list_prompts_endpoint():
        """
        List all available prompts.
        
        Returns a list of prompt definitions with their arguments.
        """
        return await prompts.list_prompts()

    @app.post(
        "/prompt/get",
        response_model=PromptGetResponse,
        tags=["Prompts"],
        summary="Get a prompt"
    )
    async def get_prompt_endpoint(
        request: PromptGetRequest,
        service: OEISService = Depends(get_service)
    ):
        """
        Render a prompt.
        
        - **name**: Prompt name
        - **arguments**: Prompt arguments (e.g., {"sequence_id": "A000045"})
        
        Returns prompt messages ready for LLM use.
        """
        return await prompts.get_prompt(service, request)

    app.include_router(jsonrpc_router)

    return app


# Configure logging
logging.basicConfig(level=get_settings().log_level)

app = create_app()
