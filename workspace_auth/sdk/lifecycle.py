"""
Account Lifecycle - Login instructions, reset requests, and key-based password setting.
"""

import logging
from workspace_auth.domain.account import Account
from workspace_auth.domain.security_key import SecurityKey
from workspace_auth.exceptions import AccountNotFoundError, InvalidInputError, InvalidSecurityKeyError
from workspace_auth.ports.notifier_port import NotifierPort
from workspace_auth.sdk.gateway import AuthenticationGateway

logger = logging.getLogger(__name__)


class AccountLifecycle:
    """
    Out-of-band flows around the credential.

    An account created by someone else is pending; its owner gets an
    email with a secure key and uses it to set the first password. The
    same key mechanism serves password resets.
    """

    def __init__(self, gateway: AuthenticationGateway, notifier: NotifierPort):
        self._gateway = gateway
        self._notifier = notifier

    def send_login_instructions(self, account: Account) -> SecurityKey:
        """Email a pending account the link to set its password."""
        key = self._ensure_security_key(account)
        self._notifier.deliver_login_instructions(account, key)
        logger.info("Sent login instructions to account %s", account.account_id)
        return key

    def send_reset_request(self, account: Account) -> SecurityKey:
        """Email the link to reset a password."""
        key = self._ensure_security_key(account)
        self._notifier.deliver_reset_request(account, key)
        logger.info("Sent password reset request to account %s", account.account_id)
        return key

    def complete_with_key(self, account: Account, presented_key: str, plaintext: str) -> Account:
        """
        Set a password using the emailed security key.

        The key is checked against the stored one, not the copy on
        `account`, and is consumed atomically: it works once.

        Raises:
            InvalidSecurityKeyError: If no key is stored or it does not match
            InvalidInputError: If plaintext is empty (the key is kept)
        """
        if not isinstance(plaintext, str) or not plaintext:
            raise InvalidInputError("Password must be a non-empty string")

        if not self._gateway.accounts.consume_security_key(account.account_id, presented_key):
            logger.warning("Rejected security key for account %s", account.account_id)
            raise InvalidSecurityKeyError("Security key is invalid")

        account.security_key = None
        self._gateway.set_password(account, plaintext)
        return account

    def _ensure_security_key(self, account: Account) -> SecurityKey:
        if account.security_key is None:
            key = SecurityKey.generate()
            if not self._gateway.accounts.set_security_key(account.account_id, key):
                raise AccountNotFoundError(account.account_id)
            account.security_key = key
        return account.security_key
