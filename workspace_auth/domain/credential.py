"""
Credential Domain Model - An account's password, stored only as a salted hash.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from workspace_auth.domain.password_hash import PasswordHash
from workspace_auth.exceptions import InvalidInputError, MalformedHashError

if TYPE_CHECKING:
    from workspace_auth.ports.password_hasher_port import PasswordHasherPort

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Credential:
    """
    Credential entity - the authentication secret of one account.

    Domain rules:
    - hashed_secret is None if and only if the credential is pending
      (no password has ever been set)
    - plaintext only exists for the duration of set_secret/verify
    - set_secret replaces the whole hash; there is no partial update
    - a pending credential never matches anything
    """
    hasher: "PasswordHasherPort" = field(repr=False)
    hashed_secret: Optional[str] = field(default=None, repr=False)

    # Parsed form of hashed_secret, filled on first verify or by set_secret
    _parsed: Optional[PasswordHash] = field(default=None, init=False, repr=False)

    @classmethod
    def empty(cls, hasher: "PasswordHasherPort") -> "Credential":
        """Create a pending credential (no password set yet)."""
        return cls(hasher=hasher)

    @classmethod
    def from_hash(cls, hashed_secret: Optional[str], hasher: "PasswordHasherPort") -> "Credential":
        """Rehydrate a credential from its stored hash (None means pending)."""
        return cls(hasher=hasher, hashed_secret=hashed_secret)

    @property
    def pending(self) -> bool:
        return self.is_pending()

    def is_pending(self) -> bool:
        """Has this credential never had a password set?"""
        return self.hashed_secret is None

    def set_secret(self, plaintext: str) -> "Credential":
        """
        Hash and store a new password.

        Args:
            plaintext: The new password. Must be a non-empty string.

        Returns:
            self, no longer pending

        Raises:
            InvalidInputError: If plaintext is empty or not a string
        """
        if not isinstance(plaintext, str) or not plaintext:
            raise InvalidInputError("Password must be a non-empty string")

        encoded = self.hasher.hash(plaintext)
        parsed = self.hasher.parse(encoded)

        # Swap both together so the cache never describes an old hash
        self.hashed_secret = encoded
        self._parsed = parsed
        return self

    def verify(self, plaintext: str) -> bool:
        """
        Check a candidate password against the stored hash.

        Slow on purpose: the cost is set by the hasher's work factor.

        Args:
            plaintext: Candidate password

        Returns:
            True only if a password is set and the candidate matches it
        """
        if self.is_pending():
            return False
        if not isinstance(plaintext, str):
            return False

        parsed = self._parsed_hash()
        if parsed is None:
            return False
        return self.hasher.check(plaintext, parsed)

    def needs_rehash(self) -> bool:
        """Was the stored hash made with a different work factor than configured?"""
        if self.is_pending():
            return False
        parsed = self._parsed_hash()
        if parsed is None:
            return False
        return self.hasher.needs_rehash(parsed)

    def _parsed_hash(self) -> Optional[PasswordHash]:
        if self._parsed is None or self._parsed.encoded != self.hashed_secret:
            try:
                self._parsed = self.hasher.parse(self.hashed_secret)
            except MalformedHashError:
                logger.warning("Stored password hash is malformed; treating as non-matching")
                self._parsed = None
        return self._parsed
