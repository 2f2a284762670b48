"""
promptable.prompt

Confirmation prompt package.

Responsibilities:
- Halting signal, prompt state, pending action, and the `Promptable` controller mixin.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Components opt in by mixing `promptable.prompt.controller.Promptable` in front of
# `promptable.components.base.Component`.
