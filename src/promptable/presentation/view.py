"""
promptable.presentation.view

Read-only projection of a component's prompt state.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from promptable.prompt.controller import Promptable


class PromptView(BaseModel):
    model_config = ConfigDict(frozen=True)

    modal_name: str
    component_id: str
    open: bool
    question: str
    body: str | None = None
    cancel_label: str
    confirm_label: str
    required_word: str | None = None
    typed_confirmation: str | None = None
    confirm_enabled: bool
    enter_submits: bool

    @property
    def placeholder(self) -> str | None:
        if not self.required_word:
            return None
        return f"Type `{self.required_word}` to continue..."

    @classmethod
    def from_component(cls, component: Promptable) -> PromptView:
        state = component.prompt_state
        return cls(
            modal_name=component.prompt_modal_name,
            component_id=component.id,  # type: ignore[attr-defined]
            open=component.modals.is_open(component.prompt_modal_name),  # type: ignore[attr-defined]
            question=state.question,
            body=state.body,
            cancel_label=state.cancel_label,
            confirm_label=state.confirm_label,
            required_word=state.required_word,
            typed_confirmation=state.typed_confirmation,
            confirm_enabled=state.confirm_enabled,
            enter_submits=state.enter_submits,
        )
