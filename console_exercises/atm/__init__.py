"""ATM simulator."""

from .account import (
    AccountError,
    AuthenticationError,
    Bank,
    BankAccount,
    InsufficientBalanceError,
)

__all__ = [
    "AccountError",
    "AuthenticationError",
    "Bank",
    "BankAccount",
    "InsufficientBalanceError",
]
