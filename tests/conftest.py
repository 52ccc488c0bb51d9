# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from catalog.api import create_app
from catalog.data.store import CatalogStore
from catalog.domain.errors import CollaboratorError


class FakeAccountsClient:
    """In-memory stand-in for the accounts service that records every call."""

    def __init__(self, accounts=None):
        self.accounts = accounts if accounts is not None else {
            "acc_123": {"id": "acc_123", "name": "Test User", "balance": 200},
            "acc_789": {"id": "acc_789", "name": "Low Balance User", "balance": 10},
        }
        self.calls = []

    def get_account(self, account_id):
        self.calls.append(("get_account", account_id))
        if account_id not in self.accounts:
            raise CollaboratorError(404, "account not found")
        return self.accounts[account_id]

    def credit_account(self, account_id, amount):
        self.calls.append(("credit_account", account_id, amount))
        account = self.accounts.get(account_id)
        if account is None:
            raise CollaboratorError(404, "account not found")
        new_balance = account["balance"] + amount
        if amount < 0 and new_balance < 0:
            raise CollaboratorError(400, "insufficient balance")
        account["balance"] = new_balance
        return {"balance": new_balance, "currency": "USD"}

    def credit_calls(self):
        return [c for c in self.calls if c[0] == "credit_account"]


@pytest.fixture
def store() -> CatalogStore:
    return CatalogStore()


@pytest.fixture
def accounts() -> FakeAccountsClient:
    return FakeAccountsClient()


@pytest.fixture
def client(store, accounts) -> TestClient:
    """Catalog app with charging disabled."""
    return TestClient(create_app(store=store, accounts_client=accounts, charge_on_assign=False))


@pytest.fixture
def charging_client(store, accounts) -> TestClient:
    """Catalog app with charge-on-assign enabled."""
    return TestClient(create_app(store=store, accounts_client=accounts, charge_on_assign=True))
