"""
promptable.components.demo

Demo component used by the bundled app and the tests.
"""

from __future__ import annotations

from typing import Any

from promptable.components.base import Component, action
from promptable.prompt.controller import Promptable

_SEED_ITEMS = {1: "Quarterly report", 2: "Team offsite notes", 42: "Legacy export"}


class ItemList(Promptable, Component):
    name = "item-list"

    def __init__(self, *, items: dict[int, str] | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.items: dict[int, str] = dict(_SEED_ITEMS if items is None else items)
        self.deleted: list[int] = []

    @action
    def delete_item(self, item_id: int) -> int:
        label = self.items.get(item_id, f"#{item_id}")
        self.prompt(
            "Delete this item?",
            body=f"\"{label}\" will be removed.\nChanges cannot be undone.",
        )
        self.items.pop(item_id, None)
        self.deleted.append(item_id)
        return item_id

    @action
    def purge(self) -> int:
        self.prompt(
            "Purge every item?",
            body="All items will be removed.",
            confirm_label="Purge",
            required_word="DELETE",
        )
        count = len(self.items)
        self.deleted.extend(self.items)
        self.items.clear()
        return count

    @action
    def rename_item(self, item_id: int, label: str) -> str:
        # No confirmation needed.
        self.items[item_id] = label
        return label

    def snapshot(self) -> dict[str, Any]:
        out = super().snapshot()
        out["items"] = [{"id": k, "label": v} for k, v in sorted(self.items.items())]
        out["deleted"] = list(self.deleted)
        return out
