"""
tests.test_prompt_state

Prompt state invariants: defaults, required-word gating, typed confirmation resets.
"""

from __future__ import annotations

from promptable.prompt.state import PendingAction, PromptDefaults, PromptState
from promptable.settings import Settings


def test_defaults_applied_on_construction() -> None:
    state = PromptState()
    assert state.question == "Are you sure you wish to proceed?"
    assert state.body is None
    assert state.cancel_label == "Cancel"
    assert state.confirm_label == "Delete"
    assert state.required_word is None
    assert state.typed_confirmation is None


def test_defaults_from_settings() -> None:
    defaults = PromptDefaults.from_settings(
        Settings(env="test", prompt_question="Really?", prompt_confirm_label="Yes")
    )
    state = PromptState(defaults)
    assert state.question == "Really?"
    assert state.confirm_label == "Yes"


def test_required_word_gates_confirm() -> None:
    state = PromptState()
    state.open("Purge?", required_word="DELETE")
    assert not state.confirm_enabled
    assert not state.enter_submits

    state.typed_confirmation = "delet"
    assert not state.confirm_enabled
    assert not state.enter_submits

    state.typed_confirmation = "DELETE"
    assert state.confirm_enabled
    assert state.enter_submits


def test_confirm_enabled_without_required_word() -> None:
    state = PromptState()
    state.open("Delete?")
    assert state.confirm_enabled
    # Enter shortcut only exists for the required-word input.
    assert not state.enter_submits


def test_changing_required_word_clears_typed_confirmation() -> None:
    state = PromptState()
    state.required_word = "DELETE"
    state.typed_confirmation = "DELETE"
    state.required_word = "PURGE"
    assert state.typed_confirmation is None

    state.typed_confirmation = "PU"
    state.required_word = "PURGE"  # unchanged value
    assert state.typed_confirmation == "PU"


def test_open_clears_typed_confirmation_and_keeps_unset_fields() -> None:
    state = PromptState()
    state.open("First?", body="Body", confirm_label="Remove", required_word="X")
    state.typed_confirmation = "X"

    state.open("Second?")
    assert state.question == "Second?"
    assert state.body == "Body"
    assert state.confirm_label == "Remove"
    assert state.required_word == "X"
    assert state.typed_confirmation is None


def test_reset_restores_defaults() -> None:
    state = PromptState()
    state.open("Purge?", body="Gone", cancel_label="No", confirm_label="Purge", required_word="DELETE")
    state.reset(PromptDefaults())
    assert state.to_dict() == {
        "question": "Are you sure you wish to proceed?",
        "body": None,
        "cancel_label": "Cancel",
        "confirm_label": "Delete",
        "required_word": None,
        "typed_confirmation": None,
        "confirm_enabled": True,
        "enter_submits": False,
    }


def test_pending_action_to_dict() -> None:
    pending = PendingAction(method="delete_item", args=(42,), kwargs={"hard": True})
    assert pending.to_dict() == {"method": "delete_item", "args": [42], "kwargs": {"hard": True}}
