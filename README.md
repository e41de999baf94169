# simplebank

A small data layer for a toy bank. It keeps accounts, the ledger entries that
record changes to an account's balance, and the transfers between accounts,
in an SQLite database. It uses only the Python standard library.

## Modules

- `simplebank.models`: the frozen dataclasses `Account` (`id`, `owner`,
  `balance`, `currency`, `created_at`), `Entry` (`id`, `account_id`,
  `amount`, `created_at`) and `Transfer` (`id`, `from_account_id`,
  `to_account_id`, `amount`, `created_at`). `created_at` is a timezone-aware
  UTC `datetime` set when the row is inserted.
- `simplebank.queries`:
  - `connect(path)` opens an SQLite database in autocommit mode with foreign
    keys enforced.
  - `create_schema(connection)` creates the `accounts`, `entries` and
    `transfers` tables and their indexes if they do not exist yet.
  - `Queries(connection)` has one method per query:
    - accounts: `create_account(owner, balance, currency)`,
      `get_account(account_id)`, `list_accounts(limit, offset)`,
      `update_account(account_id, balance)`, `delete_account(account_id)`
    - entries: `create_entry(account_id, amount)`, `get_entry(entry_id)`,
      `list_entries(account_id, limit, offset)`
    - transfers: `create_transfer(from_account_id, to_account_id, amount)`,
      `get_transfer(transfer_id)`,
      `list_transfers(from_account_id, to_account_id, limit, offset)`
  - `NoRowsError` (a `LookupError`) is raised by the `get_*` methods when no
    row has the given id, and by `update_account` when there is no such
    account. `delete_account` of a missing id does nothing.
- `simplebank.store`: `Store(connection)` is a `Queries` that can also run
  transactions. It expects a connection in autocommit mode, such as one from
  `connect`.
  - `Store.transaction()` is a context manager that begins a transaction and
    yields a `Queries` bound to it. It commits when the block finishes and
    rolls back when the block raises, re-raising the error. If the rollback
    itself fails, `sqlite3.OperationalError` is raised naming both errors.
  - `Store.transfer_tx(from_account_id, to_account_id, amount)` records a
    transfer together with two entries, `-amount` for the sending account and
    `amount` for the receiving one, in a single transaction, and returns a
    `TransferTxResult` with `transfer`, `from_entry` and `to_entry`.
- `simplebank.random_util`: helpers for test data: `random_int(min_value,
  max_value)` (both ends included; `ValueError` if `max_value < min_value`),
  `random_string(n)` (lowercase letters), `random_owner()` (four letters),
  `random_money()` (0 to 1000) and `random_currency()` (`EUR` or `USD`).

## Example

```python
from simplebank.queries import NoRowsError, Queries, connect, create_schema
from simplebank.store import Store

connection = connect(":memory:")
create_schema(connection)

queries = Queries(connection)
alice = queries.create_account("alice", 500, "EUR")
bob = queries.create_account("bob", 100, "EUR")
carol = queries.create_account("carol", 0, "USD")

store = Store(connection)
result = store.transfer_tx(alice.id, bob.id, 10)
print(result.from_entry.amount, result.to_entry.amount)  # -10 10

for transfer in queries.list_transfers(alice.id, alice.id, 5, 0):
    print(transfer)

queries.delete_account(carol.id)
try:
    queries.get_account(carol.id)
except NoRowsError:
    print("carol is gone")
```

Lists are ordered by id and take a `limit` and an `offset`, so large tables
can be read page by page; a negative `limit` or `offset` raises `ValueError`.
`list_transfers` returns transfers that either leave the first account given
or arrive at the second.

Because foreign keys are enforced, an entry or transfer must refer to existing
accounts, and an account that entries or transfers refer to cannot be deleted
(`sqlite3.IntegrityError`).

## What it does not do

- `transfer_tx` records the transfer and its entries but does not change the
  `balance` of either account, and does not check currencies or whether the
  sending account has enough money. Use `update_account` for balances.
- There is no command-line tool and no server; the package is a library used
  from Python code.
- Storage is SQLite only.