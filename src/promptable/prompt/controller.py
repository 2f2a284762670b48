"""
promptable.prompt.controller

Confirmation prompt controller, mixed into components.

Responsibilities:
- `prompt()`: capture the running action, open the modal, halt the action.
- `prompt_confirm()`: replay the captured action with the resuming flag set.
- `prompt_cancel()`: abandon the pending action.
- Intercept `PromptHalt` in the component `exception` hook.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from promptable.components.base import action
from promptable.observability.logging import get_logger
from promptable.prompt.signals import PromptHalt, PromptUsageError
from promptable.prompt.state import PendingAction, PromptDefaults, PromptPhase, PromptState

log = get_logger(__name__)


class Promptable:
    """
    Mixin adding a halting confirmation prompt to a component.

    Use as `class Things(Promptable, Component)` and call `self.prompt(...)` as the
    first statement that must not run unconfirmed, directly inside an `@action`
    method. The first call halts the action; after the user confirms, the same
    action is dispatched again with the same arguments and `prompt()` returns.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.prompt_modal_name: str = self.settings.modal_name  # type: ignore[attr-defined]
        self.prompt_defaults = PromptDefaults.from_settings(self.settings)  # type: ignore[attr-defined]
        self.prompt_state = PromptState(self.prompt_defaults)
        self.prompt_pending_action: PendingAction | None = None
        self.prompt_resuming: bool = False

    @property
    def prompt_phase(self) -> PromptPhase:
        if self.prompt_resuming:
            return PromptPhase.resuming
        if self.prompt_pending_action is not None:
            return PromptPhase.awaiting_confirmation
        return PromptPhase.idle

    def prompt(
        self,
        question: str,
        body: str | None = None,
        cancel_label: str | None = None,
        confirm_label: str | None = None,
        required_word: str | None = None,
    ) -> None:
        """
        Ask the user to confirm before the calling action continues.

        Raises `PromptHalt` on first entry; returns immediately while the action
        is being replayed after confirmation.
        """

        if not question:
            raise ValueError("prompt question must be non-empty")

        call = self.current_call  # type: ignore[attr-defined]
        if call is None and not self.prompt_resuming:
            raise PromptUsageError("prompt() must be called from inside an @action method")

        self.prompt_state.open(
            question,
            body=body,
            cancel_label=cancel_label,
            confirm_label=confirm_label,
            required_word=required_word,
        )

        if self.prompt_resuming:
            self.prompt_resuming = False
            return

        self.prompt_pending_action = PendingAction(
            method=call.method, args=call.args, kwargs=dict(call.kwargs)
        )
        self.modals.show(self.prompt_modal_name)  # type: ignore[attr-defined]
        log.info(
            "prompt_opened",
            component_id=self.id,  # type: ignore[attr-defined]
            action=call.method,
            required_word=bool(self.prompt_state.required_word),
        )
        raise PromptHalt(question=question)

    @action
    def prompt_confirm(self) -> Any:
        self.modals.close(self.prompt_modal_name)  # type: ignore[attr-defined]

        pending = self.prompt_pending_action
        if pending is None:
            self.reset_prompt_state()
            log.debug("prompt_confirm_noop", component_id=self.id)  # type: ignore[attr-defined]
            return None

        self.prompt_pending_action = None
        self.reset_prompt_state()

        fn = self.resolve_action(pending.method)  # type: ignore[attr-defined]
        if fn is None:
            log.warning(
                "prompt_action_unresolved",
                component_id=self.id,  # type: ignore[attr-defined]
                action=pending.method,
            )
            return None

        log.info("prompt_confirmed", component_id=self.id, action=pending.method)  # type: ignore[attr-defined]
        self.prompt_resuming = True
        try:
            return fn(*pending.args, **pending.kwargs)
        finally:
            self.prompt_resuming = False
            # A replay that halted again keeps its new prompt open.
            if self.prompt_pending_action is None:
                self.reset_prompt_state()

    @action
    def prompt_cancel(self) -> None:
        self.modals.close(self.prompt_modal_name)  # type: ignore[attr-defined]
        pending = self.prompt_pending_action
        self.prompt_pending_action = None
        self.reset_prompt_state()
        if pending is not None:
            log.info("prompt_cancelled", component_id=self.id, action=pending.method)  # type: ignore[attr-defined]

    def reset_prompt_state(self) -> None:
        self.prompt_state.reset(self.prompt_defaults)

    def exception(self, exc: Exception, stop_propagation: Callable[[], None]) -> None:
        if isinstance(exc, PromptHalt):
            stop_propagation()
            return
        super().exception(exc, stop_propagation)  # type: ignore[misc]

    def bindings(self) -> dict[str, Callable[[Any], None]]:
        out = dict(super().bindings())  # type: ignore[misc]
        out["prompt_confirmation"] = self._bind_prompt_confirmation
        return out

    def _bind_prompt_confirmation(self, value: Any) -> None:
        self.prompt_state.typed_confirmation = None if value is None else str(value)

    def snapshot(self) -> dict[str, Any]:
        out = dict(super().snapshot())  # type: ignore[misc]
        out["prompt"] = self.prompt_state.to_dict()
        out["prompt_open"] = self.modals.is_open(self.prompt_modal_name)  # type: ignore[attr-defined]
        out["prompt_phase"] = self.prompt_phase.value
        out["prompt_pending_action"] = (
            self.prompt_pending_action.to_dict() if self.prompt_pending_action else None
        )
        return out


# --- Module Notes -----------------------------------------------------------
# Replay resolves the captured name through the component's `@action` registry, so a
# pending action can only ever re-enter a method that was dispatchable in the first place.
