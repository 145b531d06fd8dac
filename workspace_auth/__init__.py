"""
Workspace Auth - Account credentials and login for document workspaces.

Hexagonal architecture for password storage, verification, and session
assignment of organization-scoped accounts.

Usage:
    from workspace_auth import Account, AuthenticationGateway
    from workspace_auth.adapters import BcryptPasswordHasher, MemoryAccountRepository

    hasher = BcryptPasswordHasher(work_factor=8)
    accounts = MemoryAccountRepository(hasher)
    gateway = AuthenticationGateway(accounts)

    account = accounts.add(Account.create(
        account_id="acc_1", organization_id="org_1", email="alice@example.com",
        first_name="Alice", last_name="Ng", hasher=hasher,
    ))
    gateway.set_password(account, "correct-horse")

    session = {}
    gateway.log_in("alice@example.com", "correct-horse", session)
"""

__version__ = "0.1.0"

from workspace_auth.sdk.client import AuthClient
from workspace_auth.sdk.gateway import AuthenticationGateway
from workspace_auth.sdk.lifecycle import AccountLifecycle
from workspace_auth.domain.account import Account, AccountRole
from workspace_auth.domain.credential import Credential
from workspace_auth.domain.session import Session
from workspace_auth.domain.verification import VerificationResult

__all__ = [
    "AuthClient",
    "AuthenticationGateway",
    "AccountLifecycle",
    "Account",
    "AccountRole",
    "Credential",
    "Session",
    "VerificationResult",
]
