import httpx
import pytest

from book_tracker.app import create_app
from book_tracker.config import Settings


@pytest.mark.anyio
async def test_security_headers_present():
    transport = httpx.ASGITransport(app=create_app(Settings()))
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        resp = await client.get("/books")
    headers = resp.headers
    assert headers["X-Content-Type-Options"] == "nosniff"
    assert headers["X-Frame-Options"] == "DENY"
    assert headers["Referrer-Policy"] == "no-referrer"
    assert headers["Cache-Control"] == "no-store"


@pytest.mark.anyio
async def test_request_id_echoed_or_generated():
    transport = httpx.ASGITransport(app=create_app(Settings()))
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        echoed = await client.get("/health", headers={"X-Request-ID": "abc-123"})
        generated = await client.get("/health")
    assert echoed.headers["X-Request-ID"] == "abc-123"
    assert len(generated.headers["X-Request-ID"]) == 36


@pytest.mark.anyio
async def test_cors_only_when_origins_configured():
    settings = Settings(cors_origins="http://front.example")
    transport = httpx.ASGITransport(app=create_app(settings))
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        resp = await client.get("/books", headers={"Origin": "http://front.example"})
    assert resp.headers["access-control-allow-origin"] == "http://front.example"

