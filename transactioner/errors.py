"""Errors raised by a transaction whose status is already terminal."""

from transactioner.status import TransactionStatus


__all__ = (
    'TransactionStatusError',
    'AlreadyCommittedError',
    'AlreadyRolledBackError',
)


class TransactionStatusError(Exception):
    """Raised when an operation is invalid for the current transaction status."""

    status: TransactionStatus

    def __init__(self, status: TransactionStatus, message: str):
        self.status = status
        super().__init__(message)


class AlreadyCommittedError(TransactionStatusError):
    """Raised by run(), commit() or rollback() on a committed transaction."""

    def __init__(self):
        super().__init__(TransactionStatus.COMMITTED, "Transaction is already committed")


class AlreadyRolledBackError(TransactionStatusError):
    """Raised by run(), commit() or rollback() on a rolled back transaction."""

    def __init__(self):
        super().__init__(TransactionStatus.ROLLED_BACK, "Transaction is already rolled back")
