"""Domain exceptions raised by the bank and its ledger."""


class BankError(Exception):
    """Base exception for all bank operations."""
    pass


class AccountAlreadyExistsError(BankError):
    """An account with this name is already registered."""
    pass


class AccountDoesNotExistError(BankError):
    """No account with this name is registered."""
    pass


class TransactionAlreadyExistsError(BankError):
    """A value-equal transaction is already stored in the account."""
    pass


class TransactionDoesNotExistError(BankError):
    """No value-equal transaction is stored in the account."""
    pass


class TransactionAttributeError(BankError):
    """
    A transaction or bank attribute is outside its allowed range.

    Not a ValueError, so pydantic validators raising it do not wrap it
    in a ValidationError.
    """
    pass
