"""
promptable.api.routers.components

Component session endpoints.

Responsibilities:
- Mount and unmount components in the in-memory session store.
- Dispatch actions and report completed/halted outcomes with modal effects.
- Accept two-way binding updates and serve the rendered prompt modal.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
)

from promptable.api.deps import registry_dep, sessions_dep, settings_dep
from promptable.components.base import Component
from promptable.components.errors import (
    ActionArgumentsError,
    UnbindableFieldError,
    UnknownActionError,
    UnknownComponentError,
)
from promptable.components.registry import ComponentRegistry, SessionStore
from promptable.observability.logging import get_logger
from promptable.presentation.render import render_prompt
from promptable.presentation.view import PromptView
from promptable.prompt.controller import Promptable
from promptable.settings import Settings

router = APIRouter(prefix="/v1/components", tags=["components"])

log = get_logger(__name__)


class MountRequest(BaseModel):
    name: str


class CallRequest(BaseModel):
    method: str
    args: list[Any] = Field(default_factory=list)
    kwargs: dict[str, Any] = Field(default_factory=dict)


class UpdateRequest(BaseModel):
    field: str
    value: Any = None


def _get_component(sessions: SessionStore, component_id: str) -> Component:
    try:
        component = sessions.get(component_id)
    except UnknownComponentError as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e)) from e
    structlog.contextvars.bind_contextvars(component_id=component.id, component=component.name)
    return component


def _render_state(component: Component) -> dict[str, Any]:
    out: dict[str, Any] = {
        "effects": [e.to_dict() for e in component.modals.drain_effects()],
        "snapshot": jsonable_encoder(component.snapshot()),
    }
    if isinstance(component, Promptable):
        out["prompt"] = PromptView.from_component(component).model_dump()
    return out


@router.post("", status_code=HTTP_201_CREATED)
async def mount_component(
    body: MountRequest,
    registry: ComponentRegistry = Depends(registry_dep),
    sessions: SessionStore = Depends(sessions_dep),
    settings: Settings = Depends(settings_dep),
) -> dict[str, Any]:
    try:
        component = registry.create(body.name, settings=settings)
    except UnknownComponentError as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e)) from e
    sessions.add(component)
    log.info("component_mounted", component=component.name, component_id=component.id)
    return {"id": component.id, **_render_state(component)}


@router.post("/{component_id}/call")
async def call_action(
    component_id: str,
    body: CallRequest,
    sessions: SessionStore = Depends(sessions_dep),
) -> dict[str, Any]:
    component = _get_component(sessions, component_id)
    try:
        outcome = component.call(body.method, *body.args, **body.kwargs)
    except (UnknownActionError, ActionArgumentsError) as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return {
        "status": outcome.status,
        "method": outcome.method,
        "result": jsonable_encoder(outcome.result),
        **_render_state(component),
    }


@router.post("/{component_id}/update")
async def update_field(
    component_id: str,
    body: UpdateRequest,
    sessions: SessionStore = Depends(sessions_dep),
) -> dict[str, Any]:
    component = _get_component(sessions, component_id)
    try:
        component.update(body.field, body.value)
    except UnbindableFieldError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return _render_state(component)


@router.get("/{component_id}/prompt", response_class=HTMLResponse)
async def prompt_fragment(
    component_id: str,
    sessions: SessionStore = Depends(sessions_dep),
) -> HTMLResponse:
    component = _get_component(sessions, component_id)
    if not isinstance(component, Promptable):
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Component has no prompt")
    return HTMLResponse(render_prompt(PromptView.from_component(component)))


@router.delete("/{component_id}")
async def unmount_component(
    component_id: str,
    sessions: SessionStore = Depends(sessions_dep),
) -> dict[str, str]:
    component = _get_component(sessions, component_id)
    sessions.remove(component.id)
    log.info("component_unmounted")
    return {"status": "unmounted", "id": component.id}


# --- Module Notes -----------------------------------------------------------
# A halted call is a normal 200 response with `status == "halted"`; the client shows the
# modal from `effects` and later posts `prompt_confirm` to the same component id.
