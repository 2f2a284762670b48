"""
promptable.components.base

Component base class for the server-driven runtime.

Responsibilities:
- Mark dispatchable methods (`@action`) and record the call being dispatched.
- Dispatch actions by name and turn intercepted exceptions into tagged outcomes.
- Two-way bind client fields and snapshot public state.
"""

from __future__ import annotations

import functools
import inspect
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, TypeVar

from promptable.components.errors import (
    ActionArgumentsError,
    UnbindableFieldError,
    UnknownActionError,
)
from promptable.components.modals import ModalBus
from promptable.observability.logging import get_logger
from promptable.settings import Settings, get_settings

log = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

OutcomeStatus = Literal["completed", "halted"]


@dataclass(frozen=True, slots=True)
class ActionCall:
    method: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ActionOutcome:
    """
    Result of dispatching one action: either it ran to completion, or an
    exception was intercepted by the `exception` hook and the action halted.
    """

    status: OutcomeStatus
    method: str
    result: Any = None

    @property
    def halted(self) -> bool:
        return self.status == "halted"


def action(fn: F) -> F:
    """
    Mark a component method as dispatchable by name.

    While the method runs, its name and arguments are available as
    `Component.current_call`; nested actions shadow the outer call.
    """

    @functools.wraps(fn)
    def _wrapped(self: Component, *args: Any, **kwargs: Any) -> Any:
        with self._dispatching(ActionCall(method=fn.__name__, args=args, kwargs=kwargs)):
            return fn(self, *args, **kwargs)

    _wrapped.__component_action__ = True  # type: ignore[attr-defined]
    return _wrapped  # type: ignore[return-value]


class Component:
    name: ClassVar[str] = "component"
    _actions: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        names: set[str] = set()
        for klass in cls.__mro__:
            for attr, value in vars(klass).items():
                if getattr(value, "__component_action__", False):
                    names.add(attr)
        cls._actions = frozenset(names)

    def __init__(self, *, component_id: str | None = None, settings: Settings | None = None) -> None:
        self.id = component_id or uuid.uuid4().hex
        self.settings = settings or get_settings()
        self.modals = ModalBus()
        self._call_stack: list[ActionCall] = []

    @classmethod
    def actions(cls) -> frozenset[str]:
        return cls._actions

    @property
    def current_call(self) -> ActionCall | None:
        return self._call_stack[-1] if self._call_stack else None

    @contextmanager
    def _dispatching(self, call: ActionCall) -> Iterator[None]:
        self._call_stack.append(call)
        try:
            yield
        finally:
            self._call_stack.pop()

    def resolve_action(self, method: str | None) -> Callable[..., Any] | None:
        if not method or method not in self._actions:
            return None
        return getattr(self, method)

    def call(self, method: str, /, *args: Any, **kwargs: Any) -> ActionOutcome:
        fn = self.resolve_action(method)
        if fn is None:
            raise UnknownActionError(self.name, method)

        try:
            inspect.signature(fn).bind(*args, **kwargs)
        except TypeError as e:
            raise ActionArgumentsError(self.name, method, str(e)) from e

        try:
            result = fn(*args, **kwargs)
        except Exception as e:
            stopped = False

            def stop_propagation() -> None:
                nonlocal stopped
                stopped = True

            self.exception(e, stop_propagation)
            if not stopped:
                raise
            log.info("action_halted", component=self.name, component_id=self.id, action=method)
            return ActionOutcome(status="halted", method=method)

        return ActionOutcome(status="completed", method=method, result=result)

    def exception(self, exc: Exception, stop_propagation: Callable[[], None]) -> None:
        """
        Lifecycle hook run when a dispatched action raises. Call `stop_propagation()`
        to report the action as halted instead of re-raising.
        """

    def bindings(self) -> dict[str, Callable[[Any], None]]:
        """
        Fields the client may write through two-way binding, mapped to setters.
        """

        return {}

    def update(self, field_name: str, value: Any) -> None:
        setter = self.bindings().get(field_name)
        if setter is None:
            raise UnbindableFieldError(self.name, field_name)
        setter(value)

    def snapshot(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "modals": self.modals.open_modals}


# --- Module Notes -----------------------------------------------------------
# The base class never swallows exceptions on its own; only an `exception` override
# (see `promptable.prompt.controller.Promptable`) decides what counts as a halt.
