"""Tests for i18ncache.cache.redis_cache module."""

from unittest.mock import MagicMock, patch

import pytest
from redis import RedisError
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from i18ncache.cache.redis_cache import RedisCache, create_redis_client
from i18ncache.core.config import CacheSettings
from i18ncache.core.exceptions import CacheBackendError

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_client():
    """Redis client double."""
    return MagicMock()


@pytest.fixture
def cache(mock_client):
    return RedisCache(client=mock_client)


class TestCreateRedisClient:
    """Tests for create_redis_client()."""

    @patch("i18ncache.cache.redis_cache.Redis")
    @patch("i18ncache.cache.redis_cache.ConnectionPool")
    def test_pool_from_settings(self, mock_pool, mock_redis):
        settings = CacheSettings(REDIS_HOST="cache.internal", REDIS_PORT=6380, REDIS_DB=2)
        client = create_redis_client(settings)

        kwargs = mock_pool.call_args.kwargs
        assert kwargs["host"] == "cache.internal"
        assert kwargs["port"] == 6380
        assert kwargs["db"] == 2
        assert kwargs["decode_responses"] is True
        mock_redis.assert_called_once_with(connection_pool=mock_pool.return_value)
        assert client is mock_redis.return_value


class TestRedisCacheInitialization:
    """Tests for RedisCache initialization."""

    def test_defaults(self, cache, mock_client):
        assert cache.client is mock_client
        assert cache.prefix == "i18n"
        assert cache.ttl_seconds is None

    @patch("i18ncache.cache.redis_cache.create_redis_client")
    def test_builds_client_when_missing(self, mock_create):
        cache = RedisCache()
        mock_create.assert_called_once_with()
        assert cache.client is mock_create.return_value


class TestRedisCacheGet:
    """Tests for RedisCache.get()."""

    def test_prefixed_key(self, cache, mock_client):
        mock_client.get.return_value = "Si"
        assert cache.get("Yes.dom1.es") == "Si"
        mock_client.get.assert_called_once_with("i18n:Yes.dom1.es")

    def test_miss(self, cache, mock_client):
        mock_client.get.return_value = None
        assert cache.get("absent") is None

    @pytest.mark.parametrize(
        "error",
        [RedisConnectionError("refused"), RedisTimeoutError("slow"), RedisError("boom")],
    )
    def test_errors_are_misses(self, cache, mock_client, error):
        """An unreachable server degrades to untranslated output."""
        mock_client.get.side_effect = error
        assert cache.get("Yes.dom1.es") is None


class TestRedisCacheSet:
    """Tests for RedisCache.set() and set_many()."""

    def test_set(self, cache, mock_client):
        cache.set("k", "v")
        mock_client.set.assert_called_once_with("i18n:k", "v")

    def test_set_with_ttl(self, mock_client):
        cache = RedisCache(client=mock_client, prefix="app", ttl_seconds=60)
        cache.set("k", "v")
        mock_client.setex.assert_called_once_with("app:k", 60, "v")
        mock_client.set.assert_not_called()

    def test_set_error_raised(self, cache, mock_client):
        mock_client.set.side_effect = RedisError("read only")
        with pytest.raises(CacheBackendError) as exc_info:
            cache.set("k", "v")
        assert isinstance(exc_info.value.__cause__, RedisError)

    def test_set_many_pipelined(self, cache, mock_client):
        pipe = mock_client.pipeline.return_value
        cache.set_many({"a": "1", "b": "2"})

        mock_client.pipeline.assert_called_once_with(transaction=False)
        pipe.set.assert_any_call("i18n:a", "1")
        pipe.set.assert_any_call("i18n:b", "2")
        pipe.execute.assert_called_once_with()

    def test_set_many_with_ttl(self, mock_client):
        pipe = mock_client.pipeline.return_value
        RedisCache(client=mock_client, ttl_seconds=30).set_many({"a": "1"})
        pipe.setex.assert_called_once_with("i18n:a", 30, "1")

    def test_set_many_empty(self, cache, mock_client):
        cache.set_many({})
        mock_client.pipeline.assert_not_called()

    def test_set_many_error_raised(self, cache, mock_client):
        mock_client.pipeline.return_value.execute.side_effect = RedisError("oom")
        with pytest.raises(CacheBackendError) as exc_info:
            cache.set_many({"a": "1"})
        assert "1 keys" in str(exc_info.value)


class TestRedisCacheClear:
    """Tests for RedisCache.clear()."""

    def test_deletes_only_prefixed_keys(self, cache, mock_client):
        mock_client.scan_iter.return_value = iter(["i18n:a", "i18n:b"])
        mock_client.delete.return_value = 1

        cache.clear()

        mock_client.scan_iter.assert_called_once_with(match="i18n:*")
        mock_client.delete.assert_any_call("i18n:a")
        mock_client.delete.assert_any_call("i18n:b")
        assert mock_client.delete.call_count == 2

    def test_clear_error_raised(self, cache, mock_client):
        mock_client.scan_iter.side_effect = RedisError("down")
        with pytest.raises(CacheBackendError) as exc_info:
            cache.clear()
        assert isinstance(exc_info.value.__cause__, RedisError)


class TestRedisCacheWithTranslator:
    """The translator copes with Redis returning text."""

    def test_freshness_record_round_trip(self, catalog_dirs):
        """Integers come back as strings and still mark the catalog fresh."""
        from i18ncache.i18n.models import LoadTier
        from i18ncache.i18n.translator import Translator

        store = {}
        client = MagicMock()
        client.get.side_effect = lambda key: store.get(key)
        client.set.side_effect = lambda key, value: store.__setitem__(key, str(value))
        pipe = client.pipeline.return_value
        pipe.set.side_effect = lambda key, value: store.__setitem__(key, str(value))

        translator = Translator(cache=RedisCache(client=client))
        translator.bind_domain("dom1", catalog_dirs[0]).set_language("es")

        assert translator.translate("Yes", "dom1") == "Si"
        assert translator.load_domain("dom1") == LoadTier.FRESH
