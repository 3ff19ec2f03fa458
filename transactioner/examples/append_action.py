"""Append action - appends an item to a list."""

from typing import Any

from transactioner.action import IAction


__all__ = (
    'AppendAction',
)


class AppendAction(IAction):

    def __init__(self, items: list[Any], item: Any):
        self._items = items
        self._item = item
        self._appended = 0

    def forward(self) -> None:
        self._items.append(self._item)
        self._appended += 1

    def compensate(self) -> None:
        if not self._appended:
            return
        # Removes the last occurrence, which is the one appended by forward().
        for i in range(len(self._items) - 1, -1, -1):
            if self._items[i] is self._item:
                del self._items[i]
                break
        self._appended -= 1

    def __repr__(self) -> str:
        return "%s(item=%r)" % (type(self).__name__, self._item)
