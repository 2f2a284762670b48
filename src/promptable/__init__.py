"""
promptable

Top-level package for the Promptable confirmation-prompt component runtime.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; components import `promptable.prompt` and `promptable.components` directly.
