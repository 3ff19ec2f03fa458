"""Simple in-process compensating transactions.

A Transaction applies reversible actions immediately and keeps a record of
how to undo each one until the caller decides the batch succeeded (commit,
the record is discarded) or failed (rollback, the record is replayed in
reverse order). A forward action that raises rolls the transaction back
automatically.

Key Components:
- IAction: Base class for reversible actions (forward + compensate)
- Action: Action built from a pair of callables
- Transaction: Runs actions and commits or rolls them back
- TransactionStatus: UNFINISHED, COMMITTED or ROLLED_BACK
- AlreadyCommittedError, AlreadyRolledBackError: Raised by finished transactions

Example:
    from transactioner import Action, Transaction

    data = {"i": 0}
    operation = Action(
        forward=lambda: data.update(i=data["i"] + 1),
        compensate=lambda: data.update(i=data["i"] - 1),
    )

    transaction = Transaction()
    transaction.run(operation).run(operation).run(operation)
    transaction.rollback()
    assert data["i"] == 0

    with Transaction() as transaction:
        transaction.run(operation)
    assert data["i"] == 1  # committed on exit
"""

from transactioner.action import Action, IAction
from transactioner.errors import (
    AlreadyCommittedError,
    AlreadyRolledBackError,
    TransactionStatusError,
)
from transactioner.status import TransactionStatus
from transactioner.transaction import Transaction


__all__ = (
    'Action',
    'AlreadyCommittedError',
    'AlreadyRolledBackError',
    'IAction',
    'Transaction',
    'TransactionStatus',
    'TransactionStatusError',
)
