"""
Transaction Models for PrivateBank

Every entry in an account is one of four transaction variants:

- Payment: a deposit (positive amount) or withdrawal (negative amount),
  with the bank's interest applied on top
- Transfer: money moved between a sender and a recipient
- IncomingTransfer: a transfer that credits the account
- OutgoingTransfer: a transfer that debits the account

DESIGN DECISION: The variants form a closed tagged union. Each model carries
a fixed `kind` discriminator (stored on disk as `CLASSNAME`), and the balance
effect is computed by a single `calculate()` that dispatches on that tag.

Records are frozen. Two records are equal when they are the same variant and
every field matches; duplicate detection and removal rely on this.
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Literal, Union

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from privatebank.exceptions import TransactionAttributeError


logger = structlog.get_logger(__name__)


TRANSACTION_KINDS = ("Payment", "Transfer", "IncomingTransfer", "OutgoingTransfer")

ZERO = Decimal("0")
ONE = Decimal("1")


def to_decimal(value, field_name: str = "value") -> Decimal:
    """
    Convert a numeric input to a finite Decimal.

    Floats go through their shortest repr so that 0.05 becomes Decimal("0.05")
    rather than the binary expansion. Anything that is not a number raises
    TransactionAttributeError.
    """
    if isinstance(value, float):
        value = repr(value)
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str)):
        raise TransactionAttributeError(f"{field_name} is not a number: {value!r}")
    try:
        result = Decimal(value.strip() if isinstance(value, str) else value)
    except InvalidOperation:
        raise TransactionAttributeError(f"{field_name} is not a number: {value!r}")
    if not result.is_finite():
        raise TransactionAttributeError(f"{field_name} must be finite, got {value!r}")
    return result


def check_interest(value: Decimal, field_name: str) -> Decimal:
    """Raise TransactionAttributeError unless 0 <= value <= 1."""
    if value < ZERO or value > ONE:
        raise TransactionAttributeError(
            f"{field_name} must be between 0 and 1, got {value}"
        )
    return value


def check_representable(value: Decimal, field_name: str) -> Decimal:
    """
    Raise TransactionAttributeError unless value survives a JSON number.

    Account files store numbers as doubles, so a value is only accepted when
    the double nearest to it reads back as the same Decimal.
    """
    if Decimal(repr(float(value))) != value:
        raise TransactionAttributeError(
            f"{field_name} has more precision than the account file can store: {value}"
        )
    return value


# =============================================================================
# BASE RECORD
# =============================================================================

class TransactionRecord(BaseModel):
    """
    Fields shared by every transaction variant.

    Not stored on its own; always one of the concrete variants below.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str = Field(
        ...,
        description="Transaction date as entered by the user, not parsed"
    )
    amount: Decimal = Field(
        ...,
        description="Raw amount; meaning depends on the variant"
    )
    description: str = Field(
        ...,
        description="Free text description"
    )

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v):
        return to_decimal(v, "amount")

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        return check_representable(v, "amount")

    def calculate(self) -> Decimal:
        """Net effect of this transaction on the account balance."""
        return calculate(self)

    def with_amount(self, amount) -> "TransactionRecord":
        """Return a copy with a new amount, validated like a fresh record."""
        data = self.model_dump(exclude={"kind"})
        data["amount"] = amount
        return type(self).model_validate(data)

    def __str__(self) -> str:
        return (
            f"date: {self.date}\n"
            f"description: {self.description}\n"
            f"amount: {self.calculate()}"
        )


# =============================================================================
# VARIANTS
# =============================================================================

class Payment(TransactionRecord):
    """
    Deposit or withdrawal.

    A positive amount is a deposit and earns `incoming_interest`; anything
    else is a withdrawal and is charged `outgoing_interest`.
    """
    kind: Literal["Payment"] = Field(default="Payment", alias="CLASSNAME")

    incoming_interest: Decimal = Field(
        default=ZERO,
        alias="incomingInterest",
        description="Interest applied to deposits (0-1)"
    )
    outgoing_interest: Decimal = Field(
        default=ZERO,
        alias="outgoingInterest",
        description="Interest applied to withdrawals (0-1)"
    )

    @field_validator("incoming_interest", "outgoing_interest", mode="before")
    @classmethod
    def coerce_interest(cls, v, info: ValidationInfo):
        return to_decimal(v, info.field_name)

    @field_validator("incoming_interest", "outgoing_interest")
    @classmethod
    def validate_interest(cls, v: Decimal, info: ValidationInfo) -> Decimal:
        check_interest(v, info.field_name)
        return check_representable(v, info.field_name)

    def with_interest(self, incoming_interest, outgoing_interest) -> "Payment":
        """Return a copy carrying the given interest rates."""
        data = self.model_dump(exclude={"kind"})
        data["incoming_interest"] = incoming_interest
        data["outgoing_interest"] = outgoing_interest
        return Payment.model_validate(data)

    def __str__(self) -> str:
        return (
            "===== Payment Details =====\n"
            f"{super().__str__()}\n"
            f"incoming interest: {self.incoming_interest}\n"
            f"outgoing interest: {self.outgoing_interest}\n"
            "==========================="
        )


class Transfer(TransactionRecord):
    """
    Money moved from `sender` to `recipient`.

    The stored amount is never negative; see `clamp_amount`.
    """
    kind: Literal["Transfer"] = Field(default="Transfer", alias="CLASSNAME")

    sender: str = Field(
        ...,
        description="Name of the sending party"
    )
    recipient: str = Field(
        ...,
        description="Name of the receiving party"
    )

    @field_validator("amount")
    @classmethod
    def clamp_amount(cls, v: Decimal) -> Decimal:
        """Non-positive transfer amounts are stored as 0."""
        if v <= ZERO:
            logger.warning("transfer_amount_clamped", requested=str(v))
            return ZERO
        return v

    def __str__(self) -> str:
        return (
            f"===== {self.kind} Details =====\n"
            f"{super().__str__()}\n"
            f"sender: {self.sender}\n"
            f"recipient: {self.recipient}\n"
            "============================"
        )


class IncomingTransfer(Transfer):
    """Transfer that credits the account."""
    kind: Literal["IncomingTransfer"] = Field(
        default="IncomingTransfer", alias="CLASSNAME"
    )


class OutgoingTransfer(Transfer):
    """Transfer that debits the account; it always counts negative."""
    kind: Literal["OutgoingTransfer"] = Field(
        default="OutgoingTransfer", alias="CLASSNAME"
    )


Transaction = Annotated[
    Union[Payment, Transfer, IncomingTransfer, OutgoingTransfer],
    Field(discriminator="kind"),
]


def calculate(record: TransactionRecord) -> Decimal:
    """
    Compute the balance effect of a record by its discriminator.

    Payment: amount plus interest (incoming for deposits, outgoing otherwise)
    Transfer, IncomingTransfer: amount
    OutgoingTransfer: negated amount
    """
    kind = record.kind
    if kind == "Payment":
        if record.amount > ZERO:
            return record.amount * (ONE + record.incoming_interest)
        return record.amount * (ONE + record.outgoing_interest)
    elif kind in ("Transfer", "IncomingTransfer"):
        return record.amount
    elif kind == "OutgoingTransfer":
        return -record.amount
    raise TypeError(
        f"Unknown transaction kind: {kind}; expected one of {', '.join(TRANSACTION_KINDS)}"
    )
