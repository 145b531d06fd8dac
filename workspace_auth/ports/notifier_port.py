"""
Notifier Port - Interface for out-of-band account emails.

Implementations:
- LogNotifierAdapter: Writes deliveries to the log (development)
"""

from abc import ABC, abstractmethod
from workspace_auth.domain.account import Account
from workspace_auth.domain.security_key import SecurityKey


class NotifierPort(ABC):
    """Port: Deliver login instructions and password reset requests."""

    @abstractmethod
    def deliver_login_instructions(self, account: Account, security_key: SecurityKey) -> None:
        """
        Send a pending account the link to set its first password.

        Args:
            account: Recipient
            security_key: Key to embed in the secure link
        """
        pass

    @abstractmethod
    def deliver_reset_request(self, account: Account, security_key: SecurityKey) -> None:
        """
        Send the link to reset a forgotten password.

        Args:
            account: Recipient
            security_key: Key to embed in the secure link
        """
        pass
