"""Set item action - assigns a mapping key and remembers what it replaced."""

from typing import Any, MutableMapping

from transactioner.action import IAction


__all__ = (
    'SetItemAction',
)


_missing = object()


class SetItemAction(IAction):
    """Sets `data[key] = value`.

    The previous value is captured when forward() runs, so compensate()
    restores it, or deletes the key if it was absent. If forward() failed
    before capturing anything, compensate() does nothing.
    """

    def __init__(self, data: MutableMapping[Any, Any], key: Any, value: Any):
        """Initialize action.

        Args:
            data: The mapping to modify.
            key: The key to assign.
            value: The new value.
        """
        self._data = data
        self._key = key
        self._value = value
        self._previous: list[Any] = []

    def forward(self) -> None:
        self._previous.append(self._data.get(self._key, _missing))
        self._data[self._key] = self._value

    def compensate(self) -> None:
        if not self._previous:
            return
        previous = self._previous.pop()
        if previous is _missing:
            self._data.pop(self._key, None)
        else:
            self._data[self._key] = previous

    def __repr__(self) -> str:
        return "%s(key=%r, value=%r)" % (type(self).__name__, self._key, self._value)
