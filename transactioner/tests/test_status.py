"""Tests for TransactionStatus and status errors."""

import unittest

from transactioner.errors import AlreadyCommittedError, AlreadyRolledBackError, TransactionStatusError
from transactioner.status import TransactionStatus


class TransactionStatusTestCase(unittest.TestCase):
    """Test cases for TransactionStatus."""

    def test_values(self):
        """Statuses keep their numeric codes."""
        self.assertEqual(TransactionStatus.UNFINISHED, 0)
        self.assertEqual(TransactionStatus.COMMITTED, 1)
        self.assertEqual(TransactionStatus.ROLLED_BACK, 2)

    def test_is_terminal(self):
        """Only COMMITTED and ROLLED_BACK are terminal."""
        self.assertFalse(TransactionStatus.UNFINISHED.is_terminal)
        self.assertTrue(TransactionStatus.COMMITTED.is_terminal)
        self.assertTrue(TransactionStatus.ROLLED_BACK.is_terminal)


class TransactionStatusErrorTestCase(unittest.TestCase):
    """Test cases for the status errors."""

    def test_already_committed(self):
        """AlreadyCommittedError carries the COMMITTED status."""
        error = AlreadyCommittedError()
        self.assertIsInstance(error, TransactionStatusError)
        self.assertIs(error.status, TransactionStatus.COMMITTED)
        self.assertIn("committed", str(error))

    def test_already_rolled_back(self):
        """AlreadyRolledBackError carries the ROLLED_BACK status."""
        error = AlreadyRolledBackError()
        self.assertIsInstance(error, TransactionStatusError)
        self.assertIs(error.status, TransactionStatus.ROLLED_BACK)
        self.assertIn("rolled back", str(error))

    def test_errors_are_distinct(self):
        self.assertFalse(issubclass(AlreadyCommittedError, AlreadyRolledBackError))
        self.assertFalse(issubclass(AlreadyRolledBackError, AlreadyCommittedError))


if __name__ == '__main__':
    unittest.main()
