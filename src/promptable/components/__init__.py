"""
promptable.components

Server-driven component runtime.

Responsibilities:
- Component base class, `@action` dispatch, lifecycle exception hook.
- Modal surfaces, component registry, and the in-memory session store.
"""

# Package marker.
