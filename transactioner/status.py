"""Transaction status - lifecycle states of a transaction."""

from enum import IntEnum


__all__ = (
    'TransactionStatus',
)


class TransactionStatus(IntEnum):
    """Lifecycle state of a Transaction.

    COMMITTED and ROLLED_BACK are terminal: once reached, the transaction
    refuses run(), commit() and rollback() until it is reset().
    """

    UNFINISHED = 0
    COMMITTED = 1
    ROLLED_BACK = 2

    @property
    def is_terminal(self) -> bool:
        """True if the status blocks further mutation."""
        return self is not TransactionStatus.UNFINISHED
