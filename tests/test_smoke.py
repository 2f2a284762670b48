"""
tests.test_smoke

Minimal smoke tests to validate the component host can boot and serve core endpoints.

Responsibilities:
- Run the app lifespan and probe /healthz and /readyz.
- Ensure shutdown drops mounted components.
"""

from __future__ import annotations

import httpx
import pytest

from promptable.api.app import create_app
from promptable.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints() -> None:
    app = create_app(settings=Settings(env="test"))

    # httpx ASGITransport does not drive lifespan; run it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/healthz")
            assert r.status_code == 200
            assert r.json()["status"] == "ok"
            assert "x-request-id" in r.headers

            r = await client.get("/readyz")
            assert r.status_code == 200
            body = r.json()
            assert body["status"] == "ready"
            assert "item-list" in body["components"]
            assert body["mounted"] == 0

            r = await client.post("/v1/components", json={"name": "item-list"})
            assert r.status_code == 201
            assert len(app.state.sessions) == 1

    assert len(app.state.sessions) == 0
