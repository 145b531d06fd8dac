"""
Integration tests for Redis session adapter.

Requires Redis running on localhost:6379
Skip tests if Redis is not available.
"""

import pytest


@pytest.fixture
def redis_adapter():
    """Create Redis session adapter (skip if Redis unavailable)."""
    redis = pytest.importorskip("redis")
    from workspace_auth.adapters import RedisSessionAdapter

    r = redis.Redis(host="localhost", port=6379, decode_responses=True)
    try:
        r.ping()
    except redis.exceptions.ConnectionError:
        pytest.skip("Redis not available")

    adapter = RedisSessionAdapter(redis_client=r, prefix="test:session:")
    yield adapter

    # Cleanup: delete all test sessions
    for key in r.scan_iter("test:session:*"):
        r.delete(key)


class TestRedisSessionAdapter:
    """Test Redis session storage."""

    def test_create_session(self, redis_adapter):
        session = redis_adapter.create(account_id="acc_1", organization_id="org_1", ttl=3600)

        assert session.session_id is not None
        assert session.account_id == "acc_1"
        assert session.is_valid()

    def test_get_session(self, redis_adapter):
        created = redis_adapter.create(account_id="acc_1", organization_id="org_1", ttl=3600)

        retrieved = redis_adapter.get(created.session_id)
        assert retrieved is not None
        assert retrieved.session_id == created.session_id
        assert retrieved.data == {"account_id": "acc_1", "organization_id": "org_1"}

    def test_delete_session(self, redis_adapter):
        session = redis_adapter.create(account_id="acc_1", ttl=3600)

        assert redis_adapter.delete(session.session_id) is True
        assert redis_adapter.get(session.session_id) is None

    def test_list_by_account(self, redis_adapter):
        session1 = redis_adapter.create(account_id="acc_1", ttl=3600)
        session2 = redis_adapter.create(account_id="acc_1", ttl=3600)
        session3 = redis_adapter.create(account_id="acc_2", ttl=3600)

        session_ids = [s.session_id for s in redis_adapter.list_by_account("acc_1")]
        assert len(session_ids) == 2
        assert session1.session_id in session_ids
        assert session2.session_id in session_ids
        assert session3.session_id not in session_ids

    def test_extend_session(self, redis_adapter):
        session = redis_adapter.create(account_id="acc_1", ttl=3600)
        original_expiry = session.expires_at

        assert redis_adapter.extend(session.session_id, ttl=1800) is True
        assert redis_adapter.get(session.session_id).expires_at > original_expiry

    def test_session_ttl_expiration(self, redis_adapter):
        """Redis TTL removes the session."""
        import time

        session = redis_adapter.create(account_id="acc_1", ttl=1)
        assert redis_adapter.get(session.session_id) is not None

        time.sleep(2)

        assert redis_adapter.get(session.session_id) is None
