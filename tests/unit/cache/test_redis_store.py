import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from beanmeta.cache import BlockingCache, CacheStore, InMemoryStore, RedisStore
from beanmeta.exceptions import StoreError


def test_stores_satisfy_protocol(fake_redis):
    assert isinstance(InMemoryStore("memory"), CacheStore)
    assert isinstance(RedisStore(fake_redis, "redis"), CacheStore)


def test_in_memory_store_operations():
    store = InMemoryStore("memory")
    store.put("a", 1)

    assert store.get("a") == 1
    assert store.remove("a") == 1
    assert store.remove("a") is None
    assert store.size() == 0


def test_identity_is_required(fake_redis):
    with pytest.raises(ValueError):
        InMemoryStore("")
    with pytest.raises(ValueError):
        RedisStore(fake_redis, "")


def test_put_and_get_round_trip(fake_redis):
    store = RedisStore(fake_redis, "reports", namespace="test")

    store.put("daily", {"rows": [1, 2, 3], "ok": True})

    assert store.get("daily") == {"rows": [1, 2, 3], "ok": True}
    assert fake_redis.dump_string("test:reports:daily") == b'{"rows":[1,2,3],"ok":true}'
    assert store.get("weekly") is None


def test_default_namespace(fake_redis):
    store = RedisStore(fake_redis, "reports")
    store.put("daily", 1)

    assert fake_redis.dump_string("beanmeta:reports:daily") == b"1"


def test_non_string_keys_are_json_encoded(fake_redis):
    store = RedisStore(fake_redis, "pairs", namespace="test")
    store.put((1, "a"), "value")

    assert fake_redis.dump_string('test:pairs:[1,"a"]') == b'"value"'
    assert store.get((1, "a")) == "value"


def test_remove_returns_value_and_deletes(fake_redis):
    store = RedisStore(fake_redis, "reports", namespace="test")
    store.put("daily", 5)

    assert store.remove("daily") == 5
    assert store.get("daily") is None
    assert store.remove("daily") is None


def test_size_and_clear_only_touch_own_prefix(fake_redis):
    mine = RedisStore(fake_redis, "mine", namespace="test")
    other = RedisStore(fake_redis, "other", namespace="test")
    mine.put("a", 1)
    mine.put("b", 2)
    other.put("a", 3)

    assert mine.size() == 2

    mine.clear()

    assert mine.size() == 0
    assert other.get("a") == 3


def test_unserializable_value_raises_store_error(fake_redis):
    store = RedisStore(fake_redis, "reports")

    with pytest.raises(StoreError) as exc_info:
        store.put("daily", object())

    assert exc_info.value.operation == "encode value"


def test_redis_failures_raise_store_error(fake_redis):
    store = RedisStore(fake_redis, "reports")
    fake_redis.fail_with = RedisConnectionError("down")

    with pytest.raises(StoreError) as exc_info:
        store.get("daily")
    assert isinstance(exc_info.value.__cause__, RedisConnectionError)

    with pytest.raises(StoreError):
        store.size()
    with pytest.raises(StoreError):
        store.clear()


def test_corrupt_payload_raises_store_error(fake_redis):
    store = RedisStore(fake_redis, "reports", namespace="test")
    fake_redis.set("test:reports:daily", b"{not json")

    with pytest.raises(StoreError):
        store.get("daily")


def test_blocking_cache_over_redis_store(fake_redis):
    cache = BlockingCache(RedisStore(fake_redis, "reports", namespace="test"))

    assert cache.get("daily") is None
    cache.put("daily", [1, 2])

    assert cache.get("daily") == [1, 2]
    assert cache.size() == 1
