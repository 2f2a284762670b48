"""
promptable.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the settings, registry, and session store stashed on `app.state`.
"""

from __future__ import annotations

from fastapi import Request

from promptable.components.registry import ComponentRegistry, SessionStore
from promptable.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def registry_dep(request: Request) -> ComponentRegistry:
    return request.app.state.registry  # type: ignore[attr-defined]


def sessions_dep(request: Request) -> SessionStore:
    # Created once in `promptable.api.app.create_app`.
    return request.app.state.sessions  # type: ignore[attr-defined]
