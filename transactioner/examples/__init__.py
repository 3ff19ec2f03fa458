"""Example actions over plain Python containers.

This module contains reusable reversible actions, demonstrating:
- IncrementAction: Adds a step to a numeric mapping value
- SetItemAction: Sets a mapping key, restoring the previous value on undo
- AppendAction: Appends an item to a list
- FailingAction: Always fails, for testing automatic rollback
"""

from transactioner.examples.append_action import AppendAction
from transactioner.examples.failing_action import FailingAction
from transactioner.examples.increment_action import IncrementAction
from transactioner.examples.set_item_action import SetItemAction


__all__ = (
    'AppendAction',
    'FailingAction',
    'IncrementAction',
    'SetItemAction',
)
