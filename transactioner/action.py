"""Action - a forward operation paired with its compensation."""

from abc import ABCMeta, abstractmethod
from typing import Any, Callable


__all__ = (
    'IAction',
    'Action',
)


class IAction(metaclass=ABCMeta):
    """Abstract base class for reversible actions.

    Each action encapsulates two operations:
    - forward(): Mutates external state, applied immediately by Transaction.run()
    - compensate(): Reverses that mutation if the transaction is rolled back

    Actions are opaque to the transaction: it only sequences and invokes them.
    """

    @abstractmethod
    def forward(self) -> None:
        """Apply the action.

        Raising any exception makes the owning transaction roll back.
        """
        ...

    @abstractmethod
    def compensate(self) -> None:
        """Undo the effect of forward().

        Called during rollback. It is also called when forward() itself raised,
        so it must tolerate a forward() that had partial or no effect.
        """
        ...


class Action(IAction):
    """Action built from a pair of zero-argument callables."""

    def __init__(self, forward: Callable[[], Any], compensate: Callable[[], Any]):
        """Initialize action.

        Args:
            forward: Callable applied by Transaction.run().
            compensate: Callable that undoes forward().
        """
        self._forward: Callable[[], Any] = forward
        self._compensate: Callable[[], Any] = compensate

    @property
    def forward_callable(self) -> Callable[[], Any]:
        return self._forward

    @property
    def compensate_callable(self) -> Callable[[], Any]:
        return self._compensate

    def forward(self) -> None:
        self._forward()

    def compensate(self) -> None:
        self._compensate()

    def __repr__(self) -> str:
        return "%s(forward=%r, compensate=%r)" % (type(self).__name__, self._forward, self._compensate)
