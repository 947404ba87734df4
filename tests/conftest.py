"""Pytest fixtures shared by the PrivateBank tests."""

from decimal import Decimal

import pytest

from privatebank import PrivateBank
from privatebank.models import IncomingTransfer, OutgoingTransfer, Payment


@pytest.fixture
def bank_dir(tmp_path):
    """Directory for account files; deliberately not created yet."""
    return tmp_path / "accounts"


@pytest.fixture
def bank(bank_dir) -> PrivateBank:
    """Bank with 5% incoming and 10% outgoing interest."""
    return PrivateBank("TestBank", Decimal("0.05"), Decimal("0.1"), bank_dir)


@pytest.fixture
def salary() -> Payment:
    return Payment(
        date="01.01.2025",
        amount=Decimal("1000.0"),
        description="Lohn",
        incoming_interest=Decimal("0.05"),
        outgoing_interest=Decimal("0.1"),
    )


@pytest.fixture
def withdrawal() -> Payment:
    return Payment(
        date="04.01.2025",
        amount=Decimal("-100"),
        description="Bargeld",
    )


@pytest.fixture
def gift() -> IncomingTransfer:
    return IncomingTransfer(
        date="02.01.2025",
        amount=Decimal("200.0"),
        description="Geschenk",
        sender="Bob",
        recipient="Adam",
    )


@pytest.fixture
def rent() -> OutgoingTransfer:
    return OutgoingTransfer(
        date="03.01.2025",
        amount=Decimal("400.0"),
        description="Miete",
        sender="Adam",
        recipient="Vermieter",
    )
