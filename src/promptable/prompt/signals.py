"""
promptable.prompt.signals

Control-flow exceptions used by the prompt controller.

Responsibilities:
- Halt an in-progress component action while a confirmation prompt is open.
- Report misuse of the prompt API.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False, slots=True)
class PromptHalt(Exception):
    """
    Raised by `Promptable.prompt()` the first time it runs inside an action.
    The component host intercepts it through the `exception` lifecycle hook and
    reports the action as halted instead of failed.
    """

    message: str = "Prompt opened; halting action until user responds."
    question: str = ""

    def __str__(self) -> str:
        return self.message


class PromptUsageError(RuntimeError):
    """
    Raised when `prompt()` is called outside of a dispatched `@action` method,
    where there is no call to capture for replay.
    """


# --- Module Notes -----------------------------------------------------------
# PromptHalt must never be caught by business code; a broad `except Exception` around
# `self.prompt(...)` would swallow the halt and let the action run unconfirmed.
