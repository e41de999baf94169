"""Transactional operations across several queries."""

import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass

from simplebank.models import Entry, Transfer
from simplebank.queries import Queries


@dataclass(frozen=True)
class TransferTxResult:
    """What a money transfer created."""

    transfer: Transfer
    from_entry: Entry
    to_entry: Entry


class Store(Queries):
    """Queries plus transactions; expects a connection in autocommit mode."""

    def __init__(self, connection):
        super().__init__(connection)

    @contextmanager
    def transaction(self):
        """Run a block in a transaction, committing on success and rolling back on error."""
        self._connection.execute("BEGIN IMMEDIATE")
        try:
            yield Queries(self._connection)
        except BaseException as exc:
            try:
                self._connection.execute("ROLLBACK")
            except sqlite3.Error as rb_exc:
                raise sqlite3.OperationalError(
                    f"tx err: {exc}, rb err: {rb_exc}"
                ) from exc
            raise
        else:
            self._connection.execute("COMMIT")

    def transfer_tx(self, from_account_id, to_account_id, amount):
        """Record a transfer and its two entries in one transaction."""
        with self.transaction() as queries:
            transfer = queries.create_transfer(from_account_id, to_account_id, amount)
            from_entry = queries.create_entry(from_account_id, -amount)
            to_entry = queries.create_entry(to_account_id, amount)
        return TransferTxResult(transfer=transfer, from_entry=from_entry, to_entry=to_entry)