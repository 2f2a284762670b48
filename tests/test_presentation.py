"""
tests.test_presentation

Rendering of the prompt modal from component state.
"""

from __future__ import annotations

from promptable.components.demo import ItemList
from promptable.presentation.render import nl2br, render_prompt
from promptable.presentation.view import PromptView
from promptable.settings import Settings


def _component() -> ItemList:
    return ItemList(settings=Settings(env="test"), items={1: "<b>Alpha</b>"})


def test_closed_modal_renders_hidden_with_defaults() -> None:
    html = render_prompt(PromptView.from_component(_component()))

    assert 'data-modal="promptable"' in html
    assert "hidden" in html
    assert "Are you sure you wish to proceed?" in html
    assert 'name="prompt_confirmation"' not in html


def test_open_prompt_renders_question_and_escaped_body() -> None:
    component = _component()
    component.call("delete_item", 1)

    view = PromptView.from_component(component)
    html = render_prompt(view)

    assert view.open
    assert "hidden" not in html
    assert "Delete this item?" in html
    assert "&lt;b&gt;Alpha&lt;/b&gt;" in html
    assert "<b>Alpha</b>" not in html
    assert "will be removed.<br>" in html
    assert 'data-action="prompt_confirm"' in html
    assert 'data-action="prompt_cancel"' in html


def test_required_word_disables_confirm_until_typed() -> None:
    component = _component()
    component.call("purge")

    html = render_prompt(PromptView.from_component(component))
    assert 'placeholder="Type `DELETE` to continue..."' in html
    assert 'data-enter-submits="false"' in html
    assert "disabled>Purge</button>" in html

    component.update("prompt_confirmation", "DELETE")
    html = render_prompt(PromptView.from_component(component))
    assert 'data-enter-submits="true"' in html
    assert 'value="DELETE"' in html
    assert "disabled>Purge</button>" not in html


def test_nl2br() -> None:
    assert nl2br(None) == ""
    assert str(nl2br("a\n<b>")) == "a<br>\n&lt;b&gt;"
