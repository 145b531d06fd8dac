"""
Basic Authentication Example - bcrypt passwords with in-memory accounts and sessions.
"""

from workspace_auth import Account, AccountLifecycle, AuthClient, AuthenticationGateway
from workspace_auth.adapters import (
    BcryptPasswordHasher,
    LogNotifierAdapter,
    MemoryAccountRepository,
    MemorySessionAdapter,
)
from workspace_auth.config import load_settings
from workspace_auth.logging import configure_logging


def main():
    settings = load_settings()
    configure_logging(settings.log_level)

    # Wire adapters
    hasher = BcryptPasswordHasher.from_settings(settings)
    accounts = MemoryAccountRepository(hasher)
    gateway = AuthenticationGateway(accounts)
    client = AuthClient(gateway=gateway, sessions=MemorySessionAdapter())
    lifecycle = AccountLifecycle(gateway, LogNotifierAdapter())

    # An administrator provisions an account: no password yet
    account = accounts.add(Account.create(
        account_id="acc_123",
        organization_id="org_acme",
        email="alice@example.com",
        first_name="Alice",
        last_name="Ng",
        hasher=hasher,
        organization_name="Acme Gazette",
    ))
    print(f"Created account: {account.full_name} (pending={account.pending})")

    # Login is refused while pending
    print(f"Login while pending: {client.login('alice@example.com', 'correct-horse')}")

    # The owner follows the emailed link
    key = lifecycle.send_login_instructions(account)
    lifecycle.complete_with_key(account, key.key, "correct-horse")
    print(f"Password set (pending={accounts.get('acc_123').pending})")

    # Login
    result = client.login("alice@example.com", "correct-horse")
    session = result["session"]
    print(f"\nLogin successful!")
    print(f"Session ID: {session['session_id']}")
    print(f"Session data: {session['data']}")
    print(f"Expires at: {session['expires_at']}")

    # Wrong password
    print(f"\nWrong password accepted: {client.login('alice@example.com', 'wrong-guess') is not None}")

    # Logout
    client.logout(session["session_id"])
    print(f"Session valid after logout: {client.get_session(session['session_id']) is not None}")


if __name__ == "__main__":
    main()
