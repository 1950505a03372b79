"""
MCP Endpoint Handlers

This package contains handlers for MCP protocol endpoints:
- tools: Tool listing and execution
- resources: Resource template listing and reading
- prompts: Prompt listing and retrieval
"""
