"""
Bcrypt Password Hasher - Implements PasswordHasherPort with bcrypt.
"""

import logging
import re
from typing import Optional

import bcrypt

from workspace_auth.config import AuthSettings, load_settings
from workspace_auth.domain.password_hash import PasswordHash
from workspace_auth.exceptions import InvalidInputError, MalformedHashError
from workspace_auth.ports.password_hasher_port import PasswordHasherPort

logger = logging.getLogger(__name__)

# $<scheme>$<cost>$<22 chars salt><31 chars checksum>
_BCRYPT_HASH = re.compile(r"^\$(2[abxy]?)\$(\d{2})\$([./A-Za-z0-9]{22})[./A-Za-z0-9]{31}$")

# bcrypt only looks at the first 72 bytes of a password
_MAX_PASSWORD_BYTES = 72

MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31
DEFAULT_WORK_FACTOR = 8


class BcryptPasswordHasher(PasswordHasherPort):
    """
    Password hashing adapter using bcrypt.

    bcrypt embeds the salt and cost in its output ("$2b$08$..."), so the
    stored string is all that is needed to verify later. Each doubling of
    the work factor doubles the time per hash and per verify.
    """

    def __init__(self, work_factor: int = DEFAULT_WORK_FACTOR):
        """
        Initialize bcrypt hasher.

        Args:
            work_factor: bcrypt cost (log2 rounds), 4..31

        Raises:
            ValueError: If work_factor is out of range
        """
        if not MIN_WORK_FACTOR <= work_factor <= MAX_WORK_FACTOR:
            raise ValueError(
                f"bcrypt work factor must be between {MIN_WORK_FACTOR} and {MAX_WORK_FACTOR}, got {work_factor}"
            )
        self._work_factor = work_factor

    @classmethod
    def from_settings(cls, settings: Optional[AuthSettings] = None) -> "BcryptPasswordHasher":
        """Build a hasher with the configured work factor."""
        settings = settings or load_settings()
        return cls(work_factor=settings.bcrypt_work_factor)

    @property
    def work_factor(self) -> int:
        return self._work_factor

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._work_factor)
        try:
            hashed = bcrypt.hashpw(self._encode(plaintext), salt)
        except ValueError as e:
            raise InvalidInputError(f"Password cannot be hashed: {e}") from e
        return hashed.decode("ascii")

    def parse(self, encoded: str) -> PasswordHash:
        if not isinstance(encoded, str):
            raise MalformedHashError("Password hash must be a string")

        match = _BCRYPT_HASH.match(encoded)
        if not match:
            raise MalformedHashError("Not a bcrypt hash")

        scheme, cost, salt = match.groups()
        return PasswordHash(
            encoded=encoded,
            scheme=scheme,
            work_factor=int(cost),
            salt=salt,
        )

    def check(self, plaintext: str, parsed: PasswordHash) -> bool:
        try:
            return bcrypt.checkpw(self._encode(plaintext), parsed.encoded.encode("ascii"))
        except (ValueError, TypeError):
            logger.warning("bcrypt rejected a password check (scheme=%s)", parsed.scheme)
            return False

    def needs_rehash(self, parsed: PasswordHash) -> bool:
        return parsed.work_factor != self._work_factor

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        """UTF-8 encode and cut at bcrypt's 72-byte limit."""
        return plaintext.encode("utf-8")[:_MAX_PASSWORD_BYTES]
