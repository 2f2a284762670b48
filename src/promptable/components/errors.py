"""
promptable.components.errors

Domain exceptions raised by the component runtime. The API layer maps them to
HTTP status codes.
"""

from __future__ import annotations


class ComponentError(Exception):
    pass


class UnknownComponentError(ComponentError, LookupError):
    def __init__(self, ref: str) -> None:
        super().__init__(f"unknown component: {ref}")
        self.ref = ref


class UnknownActionError(ComponentError, LookupError):
    def __init__(self, component: str, method: str | None) -> None:
        super().__init__(f"{component} has no action named {method!r}")
        self.component = component
        self.method = method


class UnbindableFieldError(ComponentError, ValueError):
    def __init__(self, component: str, field: str) -> None:
        super().__init__(f"{component} does not bind field {field!r}")
        self.component = component
        self.field = field


class ActionArgumentsError(ComponentError, TypeError):
    def __init__(self, component: str, method: str, reason: str) -> None:
        super().__init__(f"{component}.{method}: {reason}")
        self.component = component
        self.method = method
