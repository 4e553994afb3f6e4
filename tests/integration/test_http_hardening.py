"""Request correlation, security headers and CORS."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration


async def test_request_id_generated(client: AsyncClient, auth_headers: dict):
    response = await client.get("/api/v1/project", headers=auth_headers)

    request_id = response.headers["x-request-id"]
    # asgi-correlation-id generates UUID4 hex strings by default
    assert len(request_id) in (32, 36)


async def test_request_id_propagated(client: AsyncClient, auth_headers: dict):
    incoming = "0f9a6c3e5b2d4e8f9a1b2c3d4e5f6a7b"
    response = await client.get(
        "/api/v1/project", headers={**auth_headers, "X-Request-ID": incoming}
    )
    assert response.headers["x-request-id"] == incoming


async def test_different_requests_have_different_ids(client: AsyncClient, auth_headers: dict):
    first = await client.get("/api/v1/project", headers=auth_headers)
    second = await client.get("/api/v1/project", headers=auth_headers)
    assert first.headers["x-request-id"] != second.headers["x-request-id"]


async def test_security_headers_present(client: AsyncClient, auth_headers: dict):
    response = await client.get("/api/v1/project", headers=auth_headers)

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert "max-age=" in response.headers["strict-transport-security"]
    assert "frame-ancestors 'none'" in response.headers["content-security-policy"]
    assert response.headers["cache-control"] == "no-store"


async def test_health_is_cacheable(client: AsyncClient):
    response = await client.get("/health")
    assert "cache-control" not in response.headers
    assert response.headers["x-content-type-options"] == "nosniff"


async def test_cors_preflight_for_allowed_origin(client: AsyncClient, engine):
    response = await client.options(
        "/api/v1/project",
        headers={
            "Origin": "http://localhost:8501",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Authorization, Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8501"
    assert "PUT" in response.headers["access-control-allow-methods"]


async def test_cors_rejects_unknown_origin(client: AsyncClient, engine):
    response = await client.options(
        "/api/v1/project",
        headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers
