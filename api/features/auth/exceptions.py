"""Exceptions for the Auth feature."""
from api.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    CurrencyAPIException,
)


class UsernameTakenError(ConflictError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        super().__init__("Username already exists", {"username": username})


class InvalidCredentialsError(AuthenticationError):
    """Raised when the user is unknown or the password does not match."""

    def __init__(self):
        super().__init__("Invalid username or password")


class MalformedPasswordHashError(CurrencyAPIException):
    """Raised when a stored password hash is not ``<hash-hex>.<salt-hex>``."""

    def __init__(self, reason: str):
        super().__init__(
            f"Malformed stored password hash: {reason}",
            "MALFORMED_PASSWORD_HASH",
            {"reason": reason},
        )
