"""
Tagged JSON Codec

Converts transaction lists to and from the on-disk account format:

    [
      {
        "CLASSNAME": "Payment",
        "date": "01.01.2025",
        "amount": 1000.0,
        "description": "Lohn",
        "incomingInterest": 0.05,
        "outgoingInterest": 0.1
      }
    ]

`CLASSNAME` selects the variant. Amounts and rates are written as JSON
numbers and read back as Decimal. The models only accept values whose double
reads back unchanged, so every stored list survives the round trip exactly.
"""

import json
from decimal import Decimal

from pydantic import TypeAdapter, ValidationError

from privatebank.exceptions import TransactionAttributeError
from privatebank.models.transaction import Transaction, TransactionRecord
from privatebank.services.storage.interface import CodecError


DISCRIMINATOR = "CLASSNAME"

_TRANSACTION_LIST = TypeAdapter(list[Transaction])


def _json_value(value):
    if isinstance(value, Decimal):
        return float(value)
    return value


def encode_record(record: TransactionRecord) -> dict:
    """Convert one record to its tagged JSON object, discriminator first."""
    data = record.model_dump(by_alias=True)
    encoded = {DISCRIMINATOR: data.pop(DISCRIMINATOR)}
    for key, value in data.items():
        encoded[key] = _json_value(value)
    return encoded


def encode_transactions(transactions: list[TransactionRecord]) -> str:
    """Serialize a full account as a pretty-printed JSON array."""
    return json.dumps(
        [encode_record(record) for record in transactions],
        indent=2,
        ensure_ascii=False,
    )


def decode_transactions(text: str, source: str = "<string>") -> list[TransactionRecord]:
    """
    Parse a JSON array of tagged transactions.

    Empty input and a JSON null both decode to an empty list.

    Raises:
        CodecError: On malformed JSON, a non-array document, an unknown or
            missing CLASSNAME, or attribute values a record rejects
    """
    if not text.strip():
        return []

    try:
        raw = json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise CodecError(f"{source}: invalid JSON: {e}") from e

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise CodecError(
            f"{source}: expected a JSON array, got {type(raw).__name__}"
        )

    try:
        return _TRANSACTION_LIST.validate_python(raw)
    except ValidationError as e:
        raise CodecError(f"{source}: invalid transaction record: {e}") from e
    except TransactionAttributeError as e:
        raise CodecError(f"{source}: {e}") from e
