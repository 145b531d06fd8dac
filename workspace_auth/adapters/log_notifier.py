"""
Log Notifier Adapter - Records account emails in the log instead of sending them.

WARNING: For development only. Nothing leaves the process.
"""

import logging
from workspace_auth.domain.account import Account
from workspace_auth.domain.security_key import SecurityKey
from workspace_auth.ports.notifier_port import NotifierPort

logger = logging.getLogger(__name__)


class LogNotifierAdapter(NotifierPort):
    """
    Logs deliveries that a mailer would otherwise send.

    The security key itself is never logged.
    """

    def __init__(self, log_level: int = logging.INFO):
        self._level = log_level

    def deliver_login_instructions(self, account: Account, security_key: SecurityKey) -> None:
        logger.log(self._level, "Login instructions for %s (account %s)", account.rfc_email, account.account_id)

    def deliver_reset_request(self, account: Account, security_key: SecurityKey) -> None:
        logger.log(self._level, "Password reset request for %s (account %s)", account.rfc_email, account.account_id)
