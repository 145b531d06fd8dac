"""
Account Domain Model - A person with access to an organization's workspace.
"""

import hashlib
import re
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, Optional, TYPE_CHECKING

from workspace_auth.domain.credential import Credential
from workspace_auth.domain.security_key import SecurityKey

if TYPE_CHECKING:
    from workspace_auth.ports.password_hasher_port import PasswordHasherPort

_WHITESPACE = re.compile(r"\s")


class AccountRole(Enum):
    """Account roles within an organization."""
    ADMINISTRATOR = 1
    CONTRIBUTOR = 2


@dataclass
class Account:
    """
    Account entity - owns exactly one Credential.

    Domain rules:
    - account_id is immutable
    - email must be unique (enforced by the repository)
    - accounts have full privileges for their organization
    - an account created by an administrator starts pending, until the
      owner sets a password through the emailed security key
    """
    account_id: str
    organization_id: str
    email: str
    first_name: str
    last_name: str
    credential: Credential = field(repr=False)
    role: AccountRole = AccountRole.CONTRIBUTOR

    organization_name: Optional[str] = None
    security_key: Optional[SecurityKey] = field(default=None, repr=False)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create(
        cls,
        account_id: str,
        organization_id: str,
        email: str,
        first_name: str,
        last_name: str,
        hasher: "PasswordHasherPort",
        role: AccountRole = AccountRole.CONTRIBUTOR,
        organization_name: Optional[str] = None,
    ) -> "Account":
        """
        Create a new account with a pending credential.

        Returns:
            New account instance (not yet persisted)
        """
        return cls(
            account_id=account_id,
            organization_id=organization_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            credential=Credential.empty(hasher),
            role=role,
            organization_name=organization_name,
        )

    @property
    def pending(self) -> bool:
        """Assigned, but never logged into, with no password set?"""
        return self.credential.is_pending()

    def set_password(self, plaintext: str) -> "Account":
        """Replace the password. Persisting it is the caller's job."""
        self.credential.set_secret(plaintext)
        return self

    def authenticate(self, session: MutableMapping) -> "Account":
        """Save this account as the current account in the session."""
        session["account_id"] = self.account_id
        session["organization_id"] = self.organization_id
        return self

    def owns(self, resource: Any) -> bool:
        """An account owns a resource if it's tagged with the account_id."""
        if isinstance(resource, Mapping):
            return resource.get("account_id") == self.account_id
        return getattr(resource, "account_id", None) == self.account_id

    @property
    def full_name(self) -> str:
        # No middle names, for now.
        return f"{self.first_name} {self.last_name}"

    @property
    def rfc_email(self) -> str:
        """Email address with display name, for mail headers."""
        return f'"{self.full_name}" <{self.email}>'

    @property
    def hashed_email(self) -> str:
        """MD5 of the normalized email address, for Gravatar URLs."""
        normalized = _WHITESPACE.sub("", self.email.lower())
        return hashlib.md5(normalized.encode("utf-8")).hexdigest()

    @property
    def is_administrator(self) -> bool:
        return self.role == AccountRole.ADMINISTRATOR

    def to_dict(self) -> Dict[str, Any]:
        """
        Public projection (API responses).

        Never includes the password hash or security key.
        """
        return {
            "id": self.account_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "hashed_email": self.hashed_email,
            "pending": self.pending,
        }

    def to_record(self) -> Dict[str, Any]:
        """Storage projection, including the hash."""
        return {
            "account_id": self.account_id,
            "organization_id": self.organization_id,
            "organization_name": self.organization_name,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value,
            "hashed_password": self.credential.hashed_secret,
            "security_key": self.security_key.to_dict() if self.security_key else None,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, data: Dict[str, Any], hasher: "PasswordHasherPort") -> "Account":
        """Rebuild an account from its storage projection."""
        return cls(
            account_id=data["account_id"],
            organization_id=data["organization_id"],
            organization_name=data.get("organization_name"),
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            role=AccountRole(data.get("role", AccountRole.CONTRIBUTOR.value)),
            credential=Credential.from_hash(data.get("hashed_password"), hasher),
            security_key=SecurityKey.from_dict(data["security_key"]) if data.get("security_key") else None,
            created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else datetime.utcnow(),
        )
