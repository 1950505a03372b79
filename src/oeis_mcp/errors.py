"""
MCP error kinds and the mapping from backend outcomes to them.

Callers see exactly two kinds:
- INVALID_PARAMS: the supplied key matched nothing, or the input/URI is malformed
- INTERNAL_ERROR: the backend failed (transport or parse failure)
"""

from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

from .backend.base import BackendError

# JSON-RPC error codes used by MCP
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
METHOD_NOT_FOUND = -32601

SEQUENCE_URI_TEMPLATE = "oeis://sequence/{id}"


class McpError(Exception):
    """Error surfaced to MCP callers with a machine-readable code."""

    def __init__(self, code: int, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def __repr__(self) -> str:
        return f"McpError(code={self.code}, message={self.message!r})"


def invalid_params(message: str, data: Optional[Dict[str, Any]] = None) -> McpError:
    return McpError(INVALID_PARAMS, message, data)


def internal_error(message: str, data: Optional[Dict[str, Any]] = None) -> McpError:
    return McpError(INTERNAL_ERROR, message, data)


def sequence_not_found(sequence_id: str) -> McpError:
    return invalid_params(f"No sequence found (by id: {sequence_id})")


def invalid_resource_uri(uri: str) -> McpError:
    return invalid_params(
        f"Invalid resource URI: {uri}. Expected format: {SEQUENCE_URI_TEMPLATE}",
        {"uri": uri},
    )


def from_backend_error(exc: BackendError) -> McpError:
    return internal_error(str(exc))


def from_error_list(error_list: Sequence[Dict[str, Any]]) -> McpError:
    """Map pydantic-style error dicts (loc, msg, type) to INVALID_PARAMS."""
    errors = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in error_list
    ]
    return invalid_params(f"Invalid arguments: {len(errors)} validation error(s)", {"errors": errors})


def from_validation_error(exc: ValidationError) -> McpError:
    """Map a pydantic validation failure on caller input to INVALID_PARAMS."""
    return from_error_list(exc.errors())
