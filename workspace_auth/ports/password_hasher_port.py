"""
Password Hasher Port - Interface for adaptive one-way password hashing.

Implementations:
- BcryptPasswordHasher: bcrypt with a configurable work factor
"""

from abc import ABC, abstractmethod
from workspace_auth.domain.password_hash import PasswordHash


class PasswordHasherPort(ABC):
    """Port: Hash passwords and check candidates against stored hashes."""

    @property
    @abstractmethod
    def work_factor(self) -> int:
        """Cost parameter used for new hashes."""
        pass

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """
        Hash a password with a fresh salt.

        Args:
            plaintext: Password to hash

        Returns:
            Encoded hash with salt and work factor embedded
        """
        pass

    @abstractmethod
    def parse(self, encoded: str) -> PasswordHash:
        """
        Parse a stored hash string.

        Args:
            encoded: Hash string as stored

        Returns:
            Parsed hash

        Raises:
            MalformedHashError: If the string is not a hash this hasher understands
        """
        pass

    @abstractmethod
    def check(self, plaintext: str, parsed: PasswordHash) -> bool:
        """
        Compare a candidate password with a parsed hash in constant time.

        Args:
            plaintext: Candidate password
            parsed: Stored hash

        Returns:
            True if the candidate matches, False otherwise (never raises)
        """
        pass

    @abstractmethod
    def needs_rehash(self, parsed: PasswordHash) -> bool:
        """
        Check whether a stored hash was made with other parameters than current ones.

        Args:
            parsed: Stored hash

        Returns:
            True if the hash should be regenerated on next successful login
        """
        pass
