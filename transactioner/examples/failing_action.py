"""Failing action - always fails, for demonstrating automatic rollback."""

from typing import Any, Callable

from transactioner.action import IAction


__all__ = (
    'FailingAction',
)


def _noop() -> None:
    pass


class FailingAction(IAction):
    """Action whose forward() always raises.

    Its compensation is still registered before forward() runs, so it is
    executed by the automatic rollback.
    """

    def __init__(self, compensate: Callable[[], Any] = _noop, error: Exception | None = None):
        """Initialize action.

        Args:
            compensate: Callable run when the action is compensated.
            error: Exception raised by forward(); RuntimeError by default.
        """
        self._compensate = compensate
        self._error = error

    def forward(self) -> None:
        """Attempt the action (always fails).

        Raises:
            Exception: The configured error, or RuntimeError.
        """
        if self._error is not None:
            raise self._error
        raise RuntimeError("Intentional failure")

    def compensate(self) -> None:
        self._compensate()

    def __repr__(self) -> str:
        return "%s(error=%r)" % (type(self).__name__, self._error)
