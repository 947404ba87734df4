"""Tests for the in-memory ledger."""

import pytest
from decimal import Decimal

from privatebank.exceptions import (
    AccountAlreadyExistsError,
    AccountDoesNotExistError,
    TransactionAlreadyExistsError,
    TransactionDoesNotExistError,
)
from privatebank.ledger import Ledger


@pytest.fixture
def ledger():
    ledger = Ledger()
    ledger.create("Adam")
    return ledger


class TestAccounts:
    """Tests for account bookkeeping."""

    def test_create_and_get(self, ledger):
        """Test a new account starts empty."""
        assert ledger.get("Adam") == []
        assert "Adam" in ledger
        assert len(ledger) == 1

    def test_create_twice_fails(self, ledger):
        """Test account names are unique."""
        with pytest.raises(AccountAlreadyExistsError):
            ledger.create("Adam")

    def test_get_unknown_is_none(self, ledger):
        """Test absence is reported as None."""
        assert ledger.get("Eva") is None

    def test_names_sorted(self, ledger):
        """Test names come back in lexicographic order."""
        ledger.create("Berta")
        ledger.create("Anton")
        assert ledger.names() == ["Adam", "Anton", "Berta"]

    def test_delete(self, ledger, gift):
        """Test delete removes the account and returns its transactions."""
        ledger.insert("Adam", gift)
        assert ledger.delete("Adam") == [gift]
        assert "Adam" not in ledger

    def test_delete_unknown_fails(self, ledger):
        """Test deleting an unknown account fails."""
        with pytest.raises(AccountDoesNotExistError):
            ledger.delete("Eva")

    def test_load_replaces(self, ledger, gift, rent):
        """Test load installs a list wholesale."""
        ledger.load("Adam", [gift, rent])
        ledger.load("Eva", [rent])
        assert ledger.get("Adam") == [gift, rent]
        assert ledger.names() == ["Adam", "Eva"]


class TestTransactions:
    """Tests for insert / contains / remove."""

    def test_insert_preserves_order(self, ledger, gift, rent, salary):
        """Test transactions keep insertion order."""
        for tx in (rent, salary, gift):
            ledger.insert("Adam", tx)
        assert ledger.get("Adam") == [rent, salary, gift]

    def test_insert_duplicate_fails(self, ledger, gift):
        """Test a value-equal transaction cannot be inserted twice."""
        ledger.insert("Adam", gift)
        with pytest.raises(TransactionAlreadyExistsError):
            ledger.insert("Adam", gift.with_amount(Decimal("200")))

    def test_insert_unknown_account_fails(self, ledger, gift):
        """Test inserting into an unknown account fails."""
        with pytest.raises(AccountDoesNotExistError):
            ledger.insert("Eva", gift)

    def test_contains(self, ledger, gift, rent):
        """Test membership is by value."""
        ledger.insert("Adam", gift)
        assert ledger.contains("Adam", gift.model_copy())
        assert not ledger.contains("Adam", rent)
        assert not ledger.contains("Eva", gift)

    def test_remove_equal(self, ledger, gift, rent, salary):
        """Test remove_equal deletes the matching entry and reports its index."""
        for tx in (gift, rent, salary):
            ledger.insert("Adam", tx)
        assert ledger.remove_equal("Adam", rent.model_copy()) == 1
        assert ledger.get("Adam") == [gift, salary]

    def test_remove_missing_fails(self, ledger, gift):
        """Test removing an absent transaction fails."""
        with pytest.raises(TransactionDoesNotExistError):
            ledger.remove_equal("Adam", gift)

    def test_restore(self, ledger, gift, rent, salary):
        """Test restore puts a removed entry back where it was."""
        for tx in (gift, rent, salary):
            ledger.insert("Adam", tx)
        index = ledger.remove_equal("Adam", rent)
        ledger.restore("Adam", index, rent)
        assert ledger.get("Adam") == [gift, rent, salary]


class TestEquality:
    """Tests for ledger comparison."""

    def test_equal_contents(self, gift):
        """Test two ledgers with the same accounts compare equal."""
        first, second = Ledger(), Ledger()
        first.load("Adam", [gift])
        second.load("Adam", [gift.model_copy()])
        assert first == second
        second.create("Eva")
        assert first != second
