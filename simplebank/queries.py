"""SQLite-backed queries over accounts, entries and transfers."""

import sqlite3
from datetime import datetime, timezone

from simplebank.models import Account, Entry, Transfer

_SCHEMA = """
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner TEXT NOT NULL,
    balance INTEGER NOT NULL,
    currency TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS entries (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS transfers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    from_account_id INTEGER NOT NULL REFERENCES accounts (id),
    to_account_id INTEGER NOT NULL REFERENCES accounts (id),
    amount INTEGER NOT NULL,
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS accounts_owner_idx ON accounts (owner);
CREATE INDEX IF NOT EXISTS entries_account_id_idx ON entries (account_id);
CREATE INDEX IF NOT EXISTS transfers_from_idx ON transfers (from_account_id);
CREATE INDEX IF NOT EXISTS transfers_to_idx ON transfers (to_account_id);
CREATE INDEX IF NOT EXISTS transfers_from_to_idx
    ON transfers (from_account_id, to_account_id);
"""

_ACCOUNT_COLUMNS = "id, owner, balance, currency, created_at"
_ENTRY_COLUMNS = "id, account_id, amount, created_at"
_TRANSFER_COLUMNS = "id, from_account_id, to_account_id, amount, created_at"


class NoRowsError(LookupError):
    """Raised when a query that must return one row finds none."""


def connect(path):
    """Open a database in autocommit mode with foreign keys enforced."""
    connection = sqlite3.connect(path, isolation_level=None)
    connection.execute("PRAGMA foreign_keys = ON")
    return connection


def create_schema(connection):
    """Create the bank tables and indexes if they do not exist yet."""
    connection.executescript(_SCHEMA)


def _now():
    return datetime.now(timezone.utc).isoformat()


def _account(row):
    account_id, owner, balance, currency, created_at = row
    return Account(account_id, owner, balance, currency, datetime.fromisoformat(created_at))


def _entry(row):
    entry_id, account_id, amount, created_at = row
    return Entry(entry_id, account_id, amount, datetime.fromisoformat(created_at))


def _transfer(row):
    transfer_id, from_id, to_id, amount, created_at = row
    return Transfer(transfer_id, from_id, to_id, amount, datetime.fromisoformat(created_at))


def _check_page(limit, offset):
    if limit < 0:
        raise ValueError("LIMIT must not be negative")
    if offset < 0:
        raise ValueError("OFFSET must not be negative")


class Queries:
    """Typed queries run on one database connection."""

    def __init__(self, connection):
        self._connection = connection

    def _one(self, sql, params, mapper):
        row = self._connection.execute(sql, params).fetchone()
        if row is None:
            raise NoRowsError("no rows in result set")
        return mapper(row)

    def _many(self, sql, params, mapper):
        return [mapper(row) for row in self._connection.execute(sql, params)]

    def _insert(self, sql, params):
        return self._connection.execute(sql, params).lastrowid

    def create_account(self, owner, balance, currency):
        """Insert an account and return it."""
        account_id = self._insert(
            "INSERT INTO accounts (owner, balance, currency, created_at) "
            "VALUES (?, ?, ?, ?)",
            (owner, balance, currency, _now()),
        )
        return self.get_account(account_id)

    def get_account(self, account_id):
        """Return the account with the given id."""
        return self._one(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = ? LIMIT 1",
            (account_id,),
            _account,
        )

    def list_accounts(self, limit, offset):
        """Return a page of accounts ordered by id."""
        _check_page(limit, offset)
        return self._many(
            f"SELECT {_ACCOUNT_COLUMNS} FROM accounts ORDER BY id LIMIT ? OFFSET ?",
            (limit, offset),
            _account,
        )

    def update_account(self, account_id, balance):
        """Set an account's balance and return the updated account."""
        cursor = self._connection.execute(
            "UPDATE accounts SET balance = ? WHERE id = ?", (balance, account_id)
        )
        if cursor.rowcount == 0:
            raise NoRowsError("no rows in result set")
        return self.get_account(account_id)

    def delete_account(self, account_id):
        """Delete the account with the given id, if there is one."""
        self._connection.execute("DELETE FROM accounts WHERE id = ?", (account_id,))

    def create_entry(self, account_id, amount):
        """Insert an entry and return it."""
        entry_id = self._insert(
            "INSERT INTO entries (account_id, amount, created_at) VALUES (?, ?, ?)",
            (account_id, amount, _now()),
        )
        return self.get_entry(entry_id)

    def get_entry(self, entry_id):
        """Return the entry with the given id."""
        return self._one(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE id = ? LIMIT 1",
            (entry_id,),
            _entry,
        )

    def list_entries(self, account_id, limit, offset):
        """Return a page of one account's entries ordered by id."""
        _check_page(limit, offset)
        return self._many(
            f"SELECT {_ENTRY_COLUMNS} FROM entries WHERE account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (account_id, limit, offset),
            _entry,
        )

    def create_transfer(self, from_account_id, to_account_id, amount):
        """Insert a transfer and return it."""
        transfer_id = self._insert(
            "INSERT INTO transfers (from_account_id, to_account_id, amount, created_at) "
            "VALUES (?, ?, ?, ?)",
            (from_account_id, to_account_id, amount, _now()),
        )
        return self.get_transfer(transfer_id)

    def get_transfer(self, transfer_id):
        """Return the transfer with the given id."""
        return self._one(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers WHERE id = ? LIMIT 1",
            (transfer_id,),
            _transfer,
        )

    def list_transfers(self, from_account_id, to_account_id, limit, offset):
        """Return a page of transfers from or to the given accounts, ordered by id."""
        _check_page(limit, offset)
        return self._many(
            f"SELECT {_TRANSFER_COLUMNS} FROM transfers "
            "WHERE from_account_id = ? OR to_account_id = ? "
            "ORDER BY id LIMIT ? OFFSET ?",
            (from_account_id, to_account_id, limit, offset),
            _transfer,
        )