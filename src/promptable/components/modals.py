"""
promptable.components.modals

Named modal surfaces for a component.

Responsibilities:
- Track which modals are open.
- Record show/close effects so the host can forward them to the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

ModalCommand = Literal["show", "close"]


@dataclass(frozen=True, slots=True)
class ModalEffect:
    modal: str
    action: ModalCommand

    def to_dict(self) -> dict[str, Any]:
        return {"modal": self.modal, "action": self.action}


class ModalBus:
    def __init__(self) -> None:
        self._open: set[str] = set()
        self._effects: list[ModalEffect] = []

    def show(self, name: str) -> None:
        self._open.add(name)
        self._effects.append(ModalEffect(modal=name, action="show"))

    def close(self, name: str) -> None:
        self._open.discard(name)
        self._effects.append(ModalEffect(modal=name, action="close"))

    def is_open(self, name: str) -> bool:
        return name in self._open

    @property
    def open_modals(self) -> list[str]:
        return sorted(self._open)

    def drain_effects(self) -> list[ModalEffect]:
        """
        Return and forget the effects recorded since the last drain (one per round trip).
        """

        effects, self._effects = self._effects, []
        return effects
