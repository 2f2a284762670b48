"""
promptable.prompt.state

Prompt state owned by a single component instance.

Responsibilities:
- Hold the question, body text, button labels, and required confirmation word.
- Keep the user's typed confirmation consistent with the required word.
- Describe the call captured for replay (`PendingAction`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from promptable.settings import Settings


class PromptPhase(str, enum.Enum):
    idle = "IDLE"
    awaiting_confirmation = "AWAITING_CONFIRMATION"
    resuming = "RESUMING"


@dataclass(frozen=True, slots=True)
class PromptDefaults:
    question: str = "Are you sure you wish to proceed?"
    body: str | None = None
    cancel_label: str = "Cancel"
    confirm_label: str = "Delete"

    @classmethod
    def from_settings(cls, settings: Settings) -> PromptDefaults:
        return cls(
            question=settings.prompt_question,
            body=settings.prompt_body,
            cancel_label=settings.prompt_cancel_label,
            confirm_label=settings.prompt_confirm_label,
        )


@dataclass(frozen=True, slots=True)
class PendingAction:
    """
    The action call captured when a prompt opened.

    `args`/`kwargs` are held exactly as the action received them; they are not
    copied or validated before replay.
    """

    method: str | None
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"method": self.method, "args": list(self.args), "kwargs": dict(self.kwargs)}


class PromptState:
    """
    Mutable prompt fields for one component.

    `typed_confirmation` is cleared every time the prompt opens and every time
    `required_word` changes value.
    """

    __slots__ = (
        "question",
        "body",
        "cancel_label",
        "confirm_label",
        "typed_confirmation",
        "_required_word",
    )

    def __init__(self, defaults: PromptDefaults | None = None) -> None:
        self._required_word: str | None = None
        self.typed_confirmation: str | None = None
        self.reset(defaults or PromptDefaults())

    @property
    def required_word(self) -> str | None:
        return self._required_word

    @required_word.setter
    def required_word(self, value: str | None) -> None:
        if value != self._required_word:
            self.typed_confirmation = None
        self._required_word = value

    @property
    def confirm_enabled(self) -> bool:
        if not self._required_word:
            return True
        return self.typed_confirmation == self._required_word

    @property
    def enter_submits(self) -> bool:
        # Enter only confirms once a required word has been typed correctly.
        return bool(self._required_word) and self.typed_confirmation == self._required_word

    def open(
        self,
        question: str,
        *,
        body: str | None = None,
        cancel_label: str | None = None,
        confirm_label: str | None = None,
        required_word: str | None = None,
    ) -> None:
        """
        Apply the arguments of a prompt request. Fields left as `None` keep their
        current value; the typed confirmation is always cleared.
        """

        self.question = question
        if body is not None:
            self.body = body
        if cancel_label is not None:
            self.cancel_label = cancel_label
        if confirm_label is not None:
            self.confirm_label = confirm_label
        if required_word is not None:
            self.required_word = required_word
        self.typed_confirmation = None

    def reset(self, defaults: PromptDefaults) -> None:
        self.question = defaults.question
        self.body = defaults.body
        self.cancel_label = defaults.cancel_label
        self.confirm_label = defaults.confirm_label
        self.required_word = None
        self.typed_confirmation = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "question": self.question,
            "body": self.body,
            "cancel_label": self.cancel_label,
            "confirm_label": self.confirm_label,
            "required_word": self.required_word,
            "typed_confirmation": self.typed_confirmation,
            "confirm_enabled": self.confirm_enabled,
            "enter_submits": self.enter_submits,
        }
