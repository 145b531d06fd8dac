"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from workspace_auth.domain.password_hash import PasswordHash
from workspace_auth.domain.credential import Credential
from workspace_auth.domain.security_key import SecurityKey
from workspace_auth.domain.account import Account, AccountRole
from workspace_auth.domain.session import Session
from workspace_auth.domain.verification import VerificationResult

__all__ = [
    "PasswordHash",
    "Credential",
    "SecurityKey",
    "Account",
    "AccountRole",
    "Session",
    "VerificationResult",
]
