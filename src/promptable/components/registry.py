"""
promptable.components.registry

Component class registry and in-memory session store.

Responsibilities:
- Resolve component classes by their public name at mount time.
- Hold live component instances between round trips (process memory only).
"""

from __future__ import annotations

from promptable.components.base import Component
from promptable.components.errors import UnknownComponentError
from promptable.settings import Settings


class ComponentRegistry:
    def __init__(self) -> None:
        self._classes: dict[str, type[Component]] = {}

    def register(self, cls: type[Component]) -> type[Component]:
        # Returns the class so this can be used as a decorator.
        self._classes[cls.name] = cls
        return cls

    def names(self) -> list[str]:
        return sorted(self._classes)

    def create(self, name: str, *, settings: Settings) -> Component:
        cls = self._classes.get(name)
        if cls is None:
            raise UnknownComponentError(name)
        return cls(settings=settings)


class SessionStore:
    """
    Live components keyed by id.

    Nothing is written to disk: a restart drops every mounted component,
    including any pending prompt.
    """

    def __init__(self) -> None:
        self._components: dict[str, Component] = {}

    def add(self, component: Component) -> Component:
        self._components[component.id] = component
        return component

    def get(self, component_id: str) -> Component:
        component = self._components.get(component_id)
        if component is None:
            raise UnknownComponentError(component_id)
        return component

    def remove(self, component_id: str) -> None:
        self._components.pop(component_id, None)

    def clear(self) -> None:
        self._components.clear()

    def __len__(self) -> int:
        return len(self._components)


def default_registry() -> ComponentRegistry:
    from promptable.components.demo import ItemList

    registry = ComponentRegistry()
    registry.register(ItemList)
    return registry
