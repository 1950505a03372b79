"""
Tests for MCP Server endpoints

Tests cover:
- Tool listing and execution
- Resource template listing and reading
- Prompt listing and retrieval
- Error responses (invalid parameters vs internal errors)
- JSON-RPC endpoint
"""

import pytest


# ============================================================================
# Health Check Tests
# ============================================================================

def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "MCP Server"


def test_root_endpoint(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "service" in data
    assert "endpoints" in data
    assert "oeis://sequence/{id}" in data["instructions"]


# ============================================================================
# Tool Endpoint Tests
# ============================================================================

def test_list_tools(client):
    """Test listing tools."""
    response = client.get("/tool/list")
    assert response.status_code == 200
    data = response.json()
    assert len(data["tools"]) == 3
    
    tool_names = [tool["name"] for tool in data["tools"]]
    assert tool_names == ["get_url", "find_by_id", "search_by_subsequence"]


def test_call_tool_get_url(client):
    """Test calling get_url tool."""
    response = client.post("/tool/call", json={"name": "get_url"})
    assert response.status_code == 200
    data = response.json()
    assert data["content"] == [{"type": "text", "text": "https://oeis.org"}]
    assert data["isError"] is False


def test_call_tool_find_by_id(client, fibonacci):
    """Test calling find_by_id tool."""
    request = {
        "name": "find_by_id",
        "arguments": {"id": "A000045"}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 200
    data = response.json()
    assert data["structuredContent"]["result"] == fibonacci.model_dump(mode="json")
    assert data["isError"] is False


def test_call_tool_find_by_id_not_found(client):
    """Test find_by_id with an unknown ID returns invalid parameters."""
    request = {
        "name": "find_by_id",
        "arguments": {"id": "NON_EXISTENT"}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == -32602
    assert data["message"] == "No sequence found (by id: NON_EXISTENT)"


def test_call_tool_find_by_id_backend_error(client):
    """Test find_by_id with a failing backend returns an internal error."""
    request = {
        "name": "find_by_id",
        "arguments": {"id": "ERROR_CASE"}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 500
    data = response.json()
    assert data["code"] == -32603
    assert "Mock error" in data["message"]


def test_call_tool_search_empty(client):
    """Test search_by_subsequence with no matches returns an empty list."""
    request = {
        "name": "search_by_subsequence",
        "arguments": {"subsequence": [999, 888, 777]}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 200
    assert response.json()["structuredContent"] == {"results": []}


def test_call_tool_search_backend_error(client):
    """Test search_by_subsequence with a failing backend returns an internal error."""
    request = {
        "name": "search_by_subsequence",
        "arguments": {"subsequence": [1, 2, 3]}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 500
    assert response.json()["code"] == -32603


def test_call_tool_invalid_name(client):
    """Test calling non-existent tool."""
    request = {
        "name": "invalid_tool",
        "arguments": {}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 400


def test_call_tool_missing_arguments(client, backend):
    """Test calling tool with missing required arguments."""
    request = {
        "name": "find_by_id",
        "arguments": {}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == -32602
    assert data["data"]["errors"][0]["loc"] == ["id"]
    assert backend.calls == []


@pytest.mark.parametrize("path,body", [
    ("/resource/read", {}),
    ("/tool/call", {"arguments": {"id": "A000045"}}),
    ("/prompt/get", {"name": "sequence_analysis", "arguments": {"sequence_id": 45}}),
])
def test_malformed_body_is_invalid_params(client, backend, path, body):
    """Test that request bodies failing validation return the invalid-parameters kind."""
    response = client.post(path, json=body)
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == -32602
    assert data["data"]["errors"]
    assert backend.calls == []


def test_call_tool_search_rejects_non_integer_terms(client, backend):
    """Test that search terms are not coerced from strings, booleans or floats."""
    request = {
        "name": "search_by_subsequence",
        "arguments": {"subsequence": ["1", True, 2.0]}
    }
    
    response = client.post("/tool/call", json=request)
    assert response.status_code == 400
    assert response.json()["code"] == -32602
    assert backend.calls == []


# ============================================================================
# Resource Endpoint Tests
# ============================================================================

def test_list_resource_templates(client):
    """Test listing resource templates."""
    response = client.get("/resource/templates")
    assert response.status_code == 200
    templates = response.json()["resourceTemplates"]
    assert len(templates) == 1
    assert templates[0]["uriTemplate"] == "oeis://sequence/{id}"
    assert templates[0]["mimeType"] == "application/json"


def test_read_resource(client, fibonacci):
    """Test reading a sequence resource."""
    response = client.post("/resource/read", json={"uri": "oeis://sequence/A000045"})
    assert response.status_code == 200
    contents = response.json()["contents"]
    assert len(contents) == 1
    assert contents[0]["uri"] == "oeis://sequence/A000045"
    assert contents[0]["mimeType"] == "text"
    assert '"name": "Fibonacci numbers"' in contents[0]["text"]


def test_read_resource_invalid_uri(client, backend):
    """Test reading resource with invalid URI."""
    response = client.post("/resource/read", json={"uri": "invalid://uri"})
    assert response.status_code == 400
    data = response.json()
    assert "invalid://uri" in data["message"]
    assert data["data"] == {"uri": "invalid://uri"}
    assert backend.calls == []


def test_read_resource_not_found(client):
    """Test reading non-existent sequence."""
    response = client.post("/resource/read", json={"uri": "oeis://sequence/NON_EXISTENT"})
    assert response.status_code == 400
    assert "No sequence found" in response.json()["message"]


# ============================================================================
# Prompt Endpoint Tests
# ============================================================================

def test_list_prompts(client):
    """Test listing prompts."""
    response = client.get("/prompt/list")
    assert response.status_code == 200
    prompts = response.json()["prompts"]
    assert [p["name"] for p in prompts] == ["sequence_analysis"]


def test_get_prompt_sequence_analysis(client):
    """Test rendering the sequence_analysis prompt."""
    request = {
        "name": "sequence_analysis",
        "arguments": {"sequence_id": "A000045"}
    }
    
    response = client.post("/prompt/get", json=request)
    assert response.status_code == 200
    messages = response.json()["messages"]
    assert [m["role"] for m in messages] == ["user", "assistant"]
    assert "# OEIS Sequence A000045" in messages[1]["content"]


def test_get_prompt_invalid_name(client):
    """Test getting non-existent prompt."""
    response = client.post("/prompt/get", json={"name": "nonexistent_prompt"})
    assert response.status_code == 400


def test_get_prompt_backend_error(client):
    """Test the prompt surfaces backend failures as internal errors."""
    request = {
        "name": "sequence_analysis",
        "arguments": {"sequence_id": "ERROR_CASE"}
    }
    
    response = client.post("/prompt/get", json=request)
    assert response.status_code == 500
    assert response.json()["code"] == -32603


# ============================================================================
# JSON-RPC Endpoint Tests
# ============================================================================

def _rpc(client, method, params=None, request_id=1):
    message = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        message["params"] = params
    return client.post("/mcp", json=message)


def test_jsonrpc_initialize(client):
    response = _rpc(client, "initialize", {"protocolVersion": "2025-06-18", "capabilities": {}})
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["protocolVersion"] == "2025-06-18"
    assert set(result["capabilities"]) == {"tools", "prompts", "resources"}
    assert result["serverInfo"]["name"] == "oeis-mcp-server"


def test_jsonrpc_notification_accepted(client):
    response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert response.status_code == 202


def test_jsonrpc_null_id_is_a_request(client):
    response = client.post("/mcp", json={"jsonrpc": "2.0", "id": None, "method": "ping"})
    assert response.status_code == 200
    data = response.json()
    assert data["id"] is None
    assert data["result"] == {}


@pytest.mark.parametrize("method,key,count", [
    ("tools/list", "tools", 3),
    ("prompts/list", "prompts", 1),
    ("resources/templates/list", "resourceTemplates", 1),
])
def test_jsonrpc_listings(client, method, key, count):
    response = _rpc(client, method)
    assert len(response.json()["result"][key]) == count


def test_jsonrpc_call_tool(client, fibonacci):
    response = _rpc(client, "tools/call", {"name": "find_by_id", "arguments": {"id": "A000045"}}, request_id=7)
    data = response.json()
    assert data["id"] == 7
    assert data["result"]["structuredContent"]["result"]["number"] == fibonacci.number


def test_jsonrpc_call_tool_not_found(client):
    response = _rpc(client, "tools/call", {"name": "find_by_id", "arguments": {"id": "NON_EXISTENT"}})
    error = response.json()["error"]
    assert error["code"] == -32602
    assert "No sequence found" in error["message"]


def test_jsonrpc_call_tool_backend_error(client):
    response = _rpc(client, "tools/call", {"name": "search_by_subsequence", "arguments": {"subsequence": [1, 2, 3]}})
    assert response.json()["error"]["code"] == -32603


def test_jsonrpc_get_prompt(client):
    response = _rpc(client, "prompts/get", {"name": "sequence_analysis", "arguments": {"sequence_id": "A000045"}})
    messages = response.json()["result"]["messages"]
    assert messages[0]["role"] == "user"
    assert messages[1]["content"]["type"] == "text"
    assert "**Comments:**" in messages[1]["content"]["text"]


def test_jsonrpc_read_resource(client):
    response = _rpc(client, "resources/read", {"uri": "oeis://sequence/A000045"})
    contents = response.json()["result"]["contents"]
    assert contents[0]["uri"] == "oeis://sequence/A000045"


def test_jsonrpc_read_resource_invalid_uri(client):
    response = _rpc(client, "resources/read", {"uri": "invalid://uri"})
    error = response.json()["error"]
    assert error["code"] == -32602
    assert error["data"] == {"uri": "invalid://uri"}


def test_jsonrpc_invalid_params_shape(client):
    response = _rpc(client, "resources/read", {})
    assert response.json()["error"]["code"] == -32602


def test_jsonrpc_unknown_method(client):
    response = _rpc(client, "sampling/createMessage")
    assert response.json()["error"]["code"] == -32601


def test_jsonrpc_parse_error(client):
    response = client.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.json()["error"]["code"] == -32700
