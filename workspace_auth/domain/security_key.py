"""
Security Key Domain Model - One-time key mailed out to set or reset a password.
"""

import secrets
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


@dataclass
class SecurityKey:
    """Random url-safe key; the secure link in login/reset emails carries it."""
    key: str
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def generate(cls) -> "SecurityKey":
        return cls(key=secrets.token_urlsafe(32))

    def matches(self, candidate: str) -> bool:
        """Constant-time comparison against a presented key."""
        if not isinstance(candidate, str):
            return False
        return secrets.compare_digest(self.key.encode(), candidate.encode())

    def __repr__(self) -> str:
        return f"SecurityKey(created_at={self.created_at.isoformat()})"

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "created_at": self.created_at.isoformat()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SecurityKey":
        return cls(key=data["key"], created_at=datetime.fromisoformat(data["created_at"]))
