"""
Exceptions raised by workspace_auth.

The verification path itself never raises: it answers with booleans or a
VerificationResult. These cover bad input and storage-level conflicts.
"""


class AuthError(Exception):
    """Base class for workspace_auth errors."""


class InvalidInputError(AuthError, ValueError):
    """A caller supplied a value that cannot be used (e.g. an empty password)."""


class MalformedHashError(AuthError, ValueError):
    """A stored hash string could not be parsed."""


class DuplicateEmailError(AuthError):
    """An account with this email already exists."""

    def __init__(self, email: str):
        super().__init__(f"Account already exists for {email}")
        self.email = email


class AccountNotFoundError(AuthError, LookupError):
    """No account with the given identifier."""


class InvalidSecurityKeyError(AuthError):
    """A password set/reset was attempted with a wrong or missing security key."""
