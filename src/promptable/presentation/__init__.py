"""
promptable.presentation

Presentation adapter for the confirmation prompt.

Responsibilities:
- Read-only prompt view model.
- Jinja2 rendering of the modal dialog.
"""

# Package marker.
