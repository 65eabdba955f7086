from dataclasses import dataclass


@dataclass
class Account:
    """Represents a user account that created something."""

    id: int = 0
    """Unique identifier of the account."""

    name: str = ""
    """Human readable name of the account."""


@dataclass
class NullAccount(Account):
    """Placeholder account used where no real account is loaded.

    `NullAccount()` means "no creator". `NullAccount(id)` references an account
    that is only known by its identifier.
    """
