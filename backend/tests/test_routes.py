"""
HelloAPI - Route Tests
=======================

What:  End-to-end tests for the five endpoints through the full middleware stack.
How:   HTTPX AsyncClient over ASGITransport (no real server or socket).

What we test:
    ✅ Exact response bodies for every route
    ✅ Path parameter echo for assorted names
    ✅ Query parameter defaults and pass-through
    ✅ JSON body echo and the 400 cases
    ✅ Unknown routes and wrong methods give 404
"""

from urllib.parse import quote

import pytest


class TestHello:
    """GET /"""

    @pytest.mark.asyncio
    async def test_hello_world(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Hello, World!", "status": "success"}

    @pytest.mark.asyncio
    async def test_hello_world_exact_bytes(self, test_client):
        """Body is compact JSON with message before status."""
        response = await test_client.get("/")
        assert response.content == b'{"message":"Hello, World!","status":"success"}'
        assert response.headers["content-type"] == "application/json"


class TestUserGreeting:
    """GET /user/{name}"""

    @pytest.mark.asyncio
    async def test_greets_alice(self, test_client):
        response = await test_client.get("/user/alice")
        assert response.status_code == 200
        assert response.json() == {"message": "Hello, alice!", "user": "alice"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name",
        ["bob", "john doe", "José", "a.b-c_d", "123", "%41", "名前"],
    )
    async def test_user_is_echoed_unchanged(self, test_client, name):
        response = await test_client.get(f"/user/{quote(name, safe='')}")
        assert response.status_code == 200
        assert response.json() == {"message": f"Hello, {name}!", "user": name}

    @pytest.mark.asyncio
    async def test_extra_segment_is_not_matched(self, test_client):
        """The name parameter spans exactly one path segment."""
        response = await test_client.get("/user/alice/extra")
        assert response.status_code == 404


class TestSearch:
    """GET /search"""

    @pytest.mark.asyncio
    async def test_defaults(self, test_client):
        response = await test_client.get("/search")
        assert response.status_code == 200
        assert response.json() == {"query": "", "limit": "10"}

    @pytest.mark.asyncio
    async def test_both_params(self, test_client):
        response = await test_client.get("/search", params={"q": "foo", "limit": "5"})
        assert response.status_code == 200
        assert response.json() == {"query": "foo", "limit": "5"}

    @pytest.mark.asyncio
    async def test_limit_is_not_parsed(self, test_client):
        """Non-numeric limits are echoed, not rejected."""
        response = await test_client.get("/search", params={"limit": "abc"})
        assert response.status_code == 200
        assert response.json() == {"query": "", "limit": "abc"}

    @pytest.mark.asyncio
    async def test_present_but_empty_values_override_defaults(self, test_client):
        response = await test_client.get("/search?q=&limit=")
        assert response.json() == {"query": "", "limit": ""}

    @pytest.mark.asyncio
    async def test_query_is_url_decoded(self, test_client):
        response = await test_client.get("/search?q=hello%20world")
        assert response.json()["query"] == "hello world"

    @pytest.mark.asyncio
    async def test_repeated_param_uses_first_value(self, test_client):
        response = await test_client.get("/search?q=a&q=b&limit=1&limit=2")
        assert response.json() == {"query": "a", "limit": "1"}


class TestData:
    """POST /data"""

    @pytest.mark.asyncio
    async def test_echoes_object(self, test_client):
        response = await test_client.post("/data", json={"a": 1})
        assert response.status_code == 200
        assert response.json() == {
            "message": "Data received successfully",
            "data": {"a": 1},
        }

    @pytest.mark.asyncio
    async def test_echoes_nested_values(self, test_client):
        payload = {
            "name": "widget",
            "tags": ["x", "y"],
            "dims": {"w": 1.5, "h": 2},
            "active": True,
            "note": None,
        }
        response = await test_client.post("/data", json=payload)
        assert response.status_code == 200
        assert response.json()["data"] == payload

    @pytest.mark.asyncio
    async def test_empty_object(self, test_client):
        response = await test_client.post("/data", json={})
        assert response.status_code == 200
        assert response.json()["data"] == {}

    @pytest.mark.asyncio
    async def test_content_type_is_ignored(self, test_client):
        response = await test_client.post(
            "/data",
            content=b'{"a": 1}',
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 200
        assert response.json()["data"] == {"a": 1}

    @pytest.mark.asyncio
    async def test_malformed_body(self, test_client):
        response = await test_client.post(
            "/data",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        body = response.json()
        assert list(body) == ["error"]
        assert isinstance(body["error"], str)
        assert body["error"]

    @pytest.mark.asyncio
    async def test_empty_body(self, test_client):
        response = await test_client.post("/data")
        assert response.status_code == 400
        assert response.json()["error"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw, kind",
        [
            (b"[1, 2]", "array"),
            (b'"text"', "string"),
            (b"42", "number"),
            (b"true", "boolean"),
        ],
    )
    async def test_non_object_json(self, test_client, raw, kind):
        response = await test_client.post("/data", content=raw)
        assert response.status_code == 400
        assert response.json() == {"error": f"Expected a JSON object, got {kind}"}

    @pytest.mark.asyncio
    async def test_null_body_echoes_null(self, test_client):
        response = await test_client.post("/data", content=b"null")
        assert response.status_code == 200
        assert response.json() == {"message": "Data received successfully", "data": None}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw",
        [b'{"a":1} {"b":2}', b'{"a":1}xyz', b'  \n{"a":1}\n[]'],
    )
    async def test_content_after_first_value_is_ignored(self, test_client, raw):
        response = await test_client.post("/data", content=raw)
        assert response.status_code == 200
        assert response.json()["data"] == {"a": 1}

    @pytest.mark.asyncio
    async def test_null_followed_by_garbage(self, test_client):
        response = await test_client.post("/data", content=b"nullx")
        assert response.status_code == 400
        assert "after top-level value" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_get_is_not_routed(self, test_client):
        response = await test_client.get("/data")
        assert response.status_code == 404


class TestHealth:
    """GET /health"""

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestNotFound:
    """Requests that match no route."""

    @pytest.mark.asyncio
    async def test_unknown_path(self, test_client):
        response = await test_client.get("/unknown-path")
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert "/unknown-path" in body["message"]
        assert body["request_id"] == response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [("POST", "/"), ("DELETE", "/user/alice"), ("PUT", "/search"), ("POST", "/health")],
    )
    async def test_wrong_method_is_404(self, test_client, method, path):
        """A known path with an unregistered method is reported as no route."""
        response = await test_client.request(method, path)
        assert response.status_code == 404
        assert response.json()["message"] == f"No route for {method} {path}"
        assert "allow" not in response.headers
