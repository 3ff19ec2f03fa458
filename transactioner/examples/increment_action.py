"""Increment action - adds a step to a value held in a mapping."""

from typing import Any, MutableMapping

from transactioner.action import IAction


__all__ = (
    'IncrementAction',
)


class IncrementAction(IAction):
    """Adds `step` to `data[key]`; compensation subtracts it again.

    Running the same instance several times increments several times, and
    every run registers its own compensation. Only increments that were
    applied are subtracted, so compensating a failed forward() is a no-op.
    """

    def __init__(self, data: MutableMapping[Any, Any], key: Any, step: int = 1):
        self._data = data
        self._key = key
        self._step = step
        self._applied = 0

    def forward(self) -> None:
        self._data[self._key] += self._step
        self._applied += 1

    def compensate(self) -> None:
        if not self._applied:
            return
        self._data[self._key] -= self._step
        self._applied -= 1

    def __repr__(self) -> str:
        return "%s(key=%r, step=%r)" % (type(self).__name__, self._key, self._step)
