"""
Password Hash - Parsed form of a stored password hash.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordHash:
    """
    A stored hash string broken into its parts.

    The salt and work factor travel inside `encoded`, so no separate
    salt column is needed. Parsing once and keeping this object around
    avoids re-parsing on every verify.
    """
    encoded: str
    scheme: str
    work_factor: int
    salt: str

    def __repr__(self) -> str:
        return f"PasswordHash(scheme={self.scheme!r}, work_factor={self.work_factor})"
