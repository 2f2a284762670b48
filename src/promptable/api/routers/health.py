"""
promptable.api.routers.health

Health and readiness endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from promptable.api.deps import registry_dep, sessions_dep
from promptable.components.registry import ComponentRegistry, SessionStore

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    registry: ComponentRegistry = Depends(registry_dep),
    sessions: SessionStore = Depends(sessions_dep),
) -> dict[str, Any]:
    # Ready once at least one component class can be mounted.
    status = "ready" if registry.names() else "not_ready"
    return {"status": status, "components": registry.names(), "mounted": len(sessions)}
