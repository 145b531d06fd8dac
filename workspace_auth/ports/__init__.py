"""
Ports - Interfaces for hashing, account storage, sessions, and notifications.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from workspace_auth.ports.password_hasher_port import PasswordHasherPort
from workspace_auth.ports.account_repository_port import AccountRepositoryPort
from workspace_auth.ports.session_port import SessionPort
from workspace_auth.ports.notifier_port import NotifierPort

__all__ = [
    "PasswordHasherPort",
    "AccountRepositoryPort",
    "SessionPort",
    "NotifierPort",
]
