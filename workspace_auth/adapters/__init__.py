"""
Adapters - Implementations of ports.

Password Hashing:
- BcryptPasswordHasher: bcrypt with a configurable work factor

Accounts:
- MemoryAccountRepository: In-memory account storage

Sessions:
- RedisSessionAdapter: Redis-backed sessions
- MemorySessionAdapter: In-memory sessions (testing)

Notifications:
- LogNotifierAdapter: Logs login/reset emails (development)
"""

from workspace_auth.adapters.bcrypt_hasher import BcryptPasswordHasher
from workspace_auth.adapters.memory_account import MemoryAccountRepository
from workspace_auth.adapters.redis_session import RedisSessionAdapter
from workspace_auth.adapters.memory_session import MemorySessionAdapter
from workspace_auth.adapters.log_notifier import LogNotifierAdapter

__all__ = [
    "BcryptPasswordHasher",
    "MemoryAccountRepository",
    "RedisSessionAdapter",
    "MemorySessionAdapter",
    "LogNotifierAdapter",
]
