"""Bank accounts behind the ATM simulator."""

import logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


class AccountError(Exception):
    """Base class for account operation failures."""


class AuthenticationError(AccountError):
    """Raised when a PIN is rejected or the account is locked."""


class InsufficientBalanceError(AccountError):
    """Raised when a withdrawal exceeds the balance."""


class BankAccount:
    """An account with a balance, a PIN and lockout after repeated failures."""

    def __init__(
        self,
        initial_balance: float,
        pin: str,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self._balance = initial_balance
        self._pin = pin
        self._max_attempts = max_attempts
        self._failed_attempts = 0

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def failed_attempts(self) -> int:
        return self._failed_attempts

    @property
    def is_locked(self) -> bool:
        return self._failed_attempts >= self._max_attempts

    def authenticate(self, pin: str) -> None:
        """
        Check a PIN against the account.

        A successful attempt resets the failure counter.

        Raises:
            AuthenticationError: If the account is locked or the PIN is wrong
        """
        if self.is_locked:
            raise AuthenticationError(
                "Account is locked due to too many failed login attempts."
            )

        if pin != self._pin:
            self._failed_attempts += 1
            logger.info(
                "Rejected PIN (%d/%d)", self._failed_attempts, self._max_attempts
            )
            if self.is_locked:
                raise AuthenticationError("Too many failed attempts. Account is locked.")
            raise AuthenticationError("Incorrect PIN.")

        self._failed_attempts = 0

    def deposit(self, amount: float) -> float:
        """
        Add money to the account.

        Returns:
            The new balance

        Raises:
            ValueError: If the amount is not positive
        """
        if amount <= 0:
            raise ValueError("Deposit amount must be positive.")
        self._balance += amount
        return self._balance

    def withdraw(self, amount: float) -> float:
        """
        Take money from the account.

        Returns:
            The new balance

        Raises:
            ValueError: If the amount is not positive
            InsufficientBalanceError: If the amount exceeds the balance
        """
        if amount <= 0:
            raise ValueError("Withdrawal amount must be positive.")
        if amount > self._balance:
            raise InsufficientBalanceError("Insufficient balance for withdrawal.")
        self._balance -= amount
        return self._balance


class Bank:
    """Accounts keyed by user ID."""

    def __init__(self, accounts: dict[str, BankAccount] | None = None):
        self._accounts = dict(accounts or {})

    def get_account(self, user_id: str) -> BankAccount | None:
        return self._accounts.get(user_id)

    @classmethod
    def demo(cls, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> "Bank":
        """A bank seeded with the two demo accounts."""
        return cls(
            {
                "abc": BankAccount(1000, "123", max_attempts),
                "xyz": BankAccount(500, "567", max_attempts),
            }
        )
