"""
promptable.presentation.render

Jinja2 rendering for the prompt modal.

Responsibilities:
- Load templates shipped inside the package.
- Render a `PromptView` into the modal HTML fragment.
"""

from __future__ import annotations

from functools import lru_cache

import jinja2
from markupsafe import Markup, escape

from promptable.presentation.view import PromptView


def nl2br(value: str | None) -> Markup:
    if not value:
        return Markup("")
    lines = str(value).splitlines()
    return Markup("<br>\n").join(escape(line) for line in lines)


@lru_cache(maxsize=1)
def get_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.PackageLoader("promptable.presentation", "templates"),
        autoescape=jinja2.select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["nl2br"] = nl2br
    return env


def render_prompt(view: PromptView) -> str:
    return get_environment().get_template("prompt.html").render(view=view)


# --- Module Notes -----------------------------------------------------------
# The client runtime reads the `data-*` attributes; the `x-*` attributes keep the
# confirm button and Enter shortcut in sync with typing before the next round trip.
