"""
MCP Protocol Request/Response Models

This module defines Pydantic models for MCP protocol requests and responses
following the Model Context Protocol specification.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Literal


# ============================================================================
# Tool Models
# ============================================================================

class ToolDefinition(BaseModel):
    """MCP tool definition schema."""
    name: str = Field(..., description="Tool name/identifier")
    description: str = Field(..., description="Tool description")
    inputSchema: Dict[str, Any] = Field(..., description="JSON schema for tool inputs")


class ToolListResponse(BaseModel):
    """Response for listing available tools."""
    tools: List[ToolDefinition] = Field(..., description="List of available tools")


class ToolCallRequest(BaseModel):
    """Request to call a tool."""
    name: str = Field(..., description="Tool name to call")
    arguments: Dict[str, Any] = Field(default_factory=dict, description="Tool arguments")


class ToolCallResponse(BaseModel):
    """Response from tool call."""
    content: List[Dict[str, Any]] = Field(..., description="Tool output content")
    structuredContent: Optional[Dict[str, Any]] = Field(None, description="Structured tool output")
    isError: bool = Field(default=False, description="Whether the result is an error")


# ============================================================================
# Resource Models
# ============================================================================

class ResourceTemplateDefinition(BaseModel):
    """MCP resource template definition schema."""
    uriTemplate: str = Field(..., description="RFC 6570 URI template")
    name: str = Field(..., description="Resource name")
    description: Optional[str] = Field(None, description="Resource description")
    mimeType: Optional[str] = Field(None, description="MIME type of the resource")


class ResourceTemplateListResponse(BaseModel):
    """Response for listing resource templates."""
    resourceTemplates: List[ResourceTemplateDefinition] = Field(..., description="List of resource templates")


class ResourceReadRequest(BaseModel):
    """Request to read a resource."""
    uri: str = Field(..., description="Resource URI to read")


class ResourceContent(BaseModel):
    """Text contents of a resource."""
    uri: str = Field(..., description="URI the contents were read from")
    mimeType: Optional[str] = Field(None, description="MIME type of the contents")
    text: str = Field(..., description="Resource text")


class ResourceReadResponse(BaseModel):
    """Response from reading a resource."""
    contents: List[ResourceContent] = Field(..., description="Resource contents")


# ============================================================================
# Prompt Models
# ============================================================================

class PromptArgument(BaseModel):
    """Prompt argument definition."""
    name: str = Field(..., description="Argument name")
    description: Optional[str] = Field(None, description="Argument description")
    required: bool = Field(default=True, description="Whether argument is required")


class PromptDefinition(BaseModel):
    """MCP prompt definition schema."""
    name: str = Field(..., description="Prompt name/identifier")
    description: Optional[str] = Field(None, description="Prompt description")
    arguments: List[PromptArgument] = Field(default_factory=list, description="Prompt arguments")


class PromptListResponse(BaseModel):
    """Response for listing available prompts."""
    prompts: List[PromptDefinition] = Field(..., description="List of available prompts")


class PromptGetRequest(BaseModel):
    """Request to get a prompt."""
    name: str = Field(..., description="Prompt name")
    arguments: Optional[Dict[str, str]] = Field(None, description="Prompt arguments")


class PromptMessage(BaseModel):
    """A single message of a rendered prompt."""
    role: Literal["user", "assistant"] = Field(..., description="Message author")
    content: str = Field(..., description="Message text")


class PromptGetResponse(BaseModel):
    """Response from getting a prompt."""
    description: Optional[str] = Field(None, description="Prompt description")
    messages: List[PromptMessage] = Field(..., description="Prompt messages")


# ============================================================================
# Error Models
# ============================================================================

class MCPError(BaseModel):
    """MCP error response."""
    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    data: Optional[Dict[str, Any]] = Field(None, description="Additional error data")
