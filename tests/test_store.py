import sqlite3
from concurrent.futures import ThreadPoolExecutor

import pytest

from simplebank.queries import NoRowsError, connect, create_schema
from simplebank.random_util import random_currency, random_money, random_owner
from simplebank.store import Store


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "bank.db"
    connection = connect(str(path))
    create_schema(connection)
    connection.close()
    return str(path)


@pytest.fixture
def store(db_path):
    connection = connect(db_path)
    yield Store(connection)
    connection.close()


def create_random_account(store):
    return store.create_account(random_owner(), random_money(), random_currency())


def _transfer_in_own_connection(db_path, from_id, to_id, amount):
    connection = connect(db_path)
    try:
        return Store(connection).transfer_tx(from_id, to_id, amount)
    finally:
        connection.close()


def test_transfer_tx(store, db_path):
    account1 = create_random_account(store)
    account2 = create_random_account(store)
    n = 5
    amount = 10

    with ThreadPoolExecutor(max_workers=n) as pool:
        futures = [
            pool.submit(_transfer_in_own_connection, db_path, account1.id, account2.id, amount)
            for _ in range(n)
        ]
        results = [future.result() for future in futures]

    for result in results:
        transfer = result.transfer
        assert transfer.from_account_id == account1.id
        assert transfer.to_account_id == account2.id
        assert transfer.amount == amount
        assert transfer.id != 0
        assert store.get_transfer(transfer.id) == transfer

        from_entry = result.from_entry
        assert from_entry.account_id == account1.id
        assert from_entry.amount == -amount
        assert from_entry.id != 0
        assert store.get_entry(from_entry.id) == from_entry

        to_entry = result.to_entry
        assert to_entry.account_id == account2.id
        assert to_entry.amount == amount
        assert to_entry.id != 0
        assert store.get_entry(to_entry.id) == to_entry

    assert len({result.transfer.id for result in results}) == n


def test_transfer_tx_rolls_back_on_failure(store):
    account = create_random_account(store)
    with pytest.raises(sqlite3.IntegrityError):
        store.transfer_tx(account.id, 999999, 10)
    assert store.list_transfers(account.id, account.id, 10, 0) == []
    assert store.list_entries(account.id, 10, 0) == []


def test_transaction_commits(store):
    with store.transaction() as queries:
        account = queries.create_account("abcd", 50, "EUR")
    assert store.get_account(account.id) == account


def test_transaction_rolls_back_on_exception(store):
    with pytest.raises(RuntimeError):
        with store.transaction() as queries:
            account = queries.create_account("abcd", 50, "EUR")
            raise RuntimeError("boom")
    with pytest.raises(NoRowsError):
        store.get_account(account.id)


def test_store_runs_plain_queries(store):
    account = create_random_account(store)
    updated = store.update_account(account.id, account.balance + 1)
    assert updated.balance == account.balance + 1