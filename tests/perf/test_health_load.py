import asyncio

import httpx
import pytest

from book_tracker.app import create_app
from book_tracker.config import Settings


@pytest.mark.anyio
async def test_reads_under_load():
    transport = httpx.ASGITransport(app=create_app(Settings()))
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        results = await asyncio.gather(*[client.get("/books") for _ in range(20)])
    assert all(r.status_code == 200 for r in results)
    assert all(len(r.json()["data"]) == 3 for r in results)
