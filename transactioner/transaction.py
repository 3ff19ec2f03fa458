"""Transaction - executes reversible actions and keeps their compensations."""

import logging
from typing import Any, Callable

from transactioner.action import IAction
from transactioner.errors import AlreadyCommittedError, AlreadyRolledBackError
from transactioner.status import TransactionStatus


__all__ = (
    'Transaction',
)


Undoer = Callable[[], Any]


class Transaction:
    """In-process compensating transaction.

    Forward actions are applied as soon as they are run. The compensation of
    each one is kept in an ordered registry (the undoers) until the
    transaction is either:
    - committed: the undoers are discarded and the forward effects are kept
    - rolled back: the undoers are executed in reverse order of registration

    A committed or rolled back transaction refuses further run(), commit()
    and rollback() calls until reset() is called.
    """

    def __init__(self, source: 'Transaction | None' = None):
        """Initialize transaction.

        Args:
            source: Optional transaction to inherit the state from. Its undoers
                are copied into a new registry and its status is copied, so
                the two transactions never share a registry.
        """
        self._logger = logging.getLogger(".".join((type(self).__module__, type(self).__name__)))
        if source is not None:
            self._undoers: list[Undoer] = list(source.undoers)
            self._status: TransactionStatus = source.status
        else:
            self._undoers = []
            self._status = TransactionStatus.UNFINISHED

    @property
    def undoers(self) -> list[Undoer]:
        """Compensations of applied actions, in order of registration (for inspection/testing)."""
        return self._undoers

    @property
    def status(self) -> TransactionStatus:
        return self._status

    @property
    def is_finished(self) -> bool:
        """True if the transaction has been committed or rolled back."""
        return self._status.is_terminal

    def run(self, *actions: IAction) -> 'Transaction':
        """Apply actions in order, registering the compensation of each one.

        The compensation is registered before forward() is called, so a
        forward() that fails midway is compensated too. If any forward()
        raises, the transaction is rolled back at once, the remaining actions
        are skipped and the error is not re-raised.

        Args:
            *actions: Actions to apply.

        Returns:
            The transaction itself, to make calls chainable.

        Raises:
            AlreadyCommittedError: If the transaction is committed.
            AlreadyRolledBackError: If the transaction is rolled back.
            Exception: Any error raised by a compensation during the
                automatic rollback.
        """
        self._check_status()
        for action in actions:
            # An action may have finished the transaction itself.
            self._check_status()
            self._undoers.append(action.compensate)
            try:
                action.forward()
            except Exception:
                self._logger.warning(
                    "Action %r failed, rolling back %d action(s)", action, len(self._undoers),
                    exc_info=True
                )
                return self.rollback()
        return self

    def commit(self) -> 'Transaction':
        """Keep the applied actions and discard their compensations.

        Raises:
            AlreadyCommittedError: If the transaction is committed.
            AlreadyRolledBackError: If the transaction is rolled back.
        """
        self._check_status()
        self._logger.debug("Committing %d action(s)", len(self._undoers))
        self._undoers = []
        self._status = TransactionStatus.COMMITTED
        return self

    def rollback(self) -> 'Transaction':
        """Execute the compensations in reverse order of registration.

        The status is switched to ROLLED_BACK before any compensation runs.
        Each undoer is removed from the registry right after it returns; if
        one raises, the error propagates and that undoer and the ones
        registered before it stay in the registry, unexecuted.

        Raises:
            AlreadyCommittedError: If the transaction is committed.
            AlreadyRolledBackError: If the transaction is rolled back.
            Exception: Any error raised by a compensation.
        """
        self._check_status()
        self._status = TransactionStatus.ROLLED_BACK
        self._logger.debug("Rolling back %d action(s)", len(self._undoers))
        while self._undoers:
            self._undoers[-1]()
            self._undoers.pop()
        return self

    def reset(self) -> 'Transaction':
        """Return to UNFINISHED status. The undoers are left untouched."""
        self._logger.debug("Resetting %s transaction", self._status.name)
        self._status = TransactionStatus.UNFINISHED
        return self

    def _check_status(self) -> None:
        if self._status is TransactionStatus.COMMITTED:
            raise AlreadyCommittedError()
        if self._status is TransactionStatus.ROLLED_BACK:
            raise AlreadyRolledBackError()

    def __enter__(self) -> 'Transaction':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if not self.is_finished:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        return False

    def __copy__(self) -> 'Transaction':
        return type(self)(self)

    def __repr__(self) -> str:
        return "%s(status=%s, undoers=%d)" % (type(self).__name__, self._status.name, len(self._undoers))
