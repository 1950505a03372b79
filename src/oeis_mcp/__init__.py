"""
OEIS Model Context Protocol (MCP) Server

This package implements an MCP server that exposes the On-Line Encyclopedia of
Integer Sequences (OEIS):
- Tools: get_url, find_by_id, search_by_subsequence
- Prompts: sequence_analysis
- Resources: oeis://sequence/{id}

The server exposes these capabilities to AI agents via HTTP endpoints and a
JSON-RPC endpoint mounted at /mcp.
"""

__version__ = "0.1.0"
