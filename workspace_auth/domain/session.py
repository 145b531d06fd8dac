"""
Session Domain Model - Login state handed to the session store.
"""

import math
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Optional


@dataclass
class Session:
    """
    An authenticated account's session.

    `data` is the opaque key-value payload; login writes account_id and
    organization_id into it. The store may add its own keys.
    """
    session_id: str
    account_id: str
    organization_id: Optional[str]
    expires_at: datetime
    created_at: datetime = field(default_factory=datetime.utcnow)
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        account_id: str,
        organization_id: Optional[str] = None,
        ttl: int = 3600,
        data: Optional[Dict[str, Any]] = None,
    ) -> "Session":
        """Start a session that lives `ttl` seconds from now."""
        now = datetime.utcnow()
        payload = {"account_id": account_id, "organization_id": organization_id}
        payload.update(data or {})

        return cls(
            session_id=secrets.token_urlsafe(32),
            account_id=account_id,
            organization_id=organization_id,
            created_at=now,
            expires_at=now + timedelta(seconds=ttl),
            data=payload,
        )

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.utcnow()) < self.expires_at

    def remaining_seconds(self, now: Optional[datetime] = None) -> int:
        """Whole seconds until expiry, rounded up; 0 once expired."""
        left = (self.expires_at - (now or datetime.utcnow())).total_seconds()
        return max(0, math.ceil(left))

    def extend(self, seconds: int) -> None:
        """Push the expiry back by `seconds`."""
        self.expires_at += timedelta(seconds=seconds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "account_id": self.account_id,
            "organization_id": self.organization_id,
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        return cls(
            session_id=data["session_id"],
            account_id=data["account_id"],
            organization_id=data.get("organization_id"),
            created_at=datetime.fromisoformat(data["created_at"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
            data=data.get("data", {}),
        )
