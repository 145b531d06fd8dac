"""
Verification Result - Outcome of one authentication attempt.
"""

from enum import Enum


class VerificationResult(Enum):
    """
    Outcomes of checking an email/password pair.

    Callers showing these to an end user should collapse everything but
    SUCCESS into one generic "invalid credentials" message.
    """
    NO_SUCH_ACCOUNT = "no_such_account"
    PENDING_CREDENTIAL = "pending_credential"
    MISMATCH = "mismatch"
    SUCCESS = "success"

    @property
    def ok(self) -> bool:
        return self is VerificationResult.SUCCESS
