import threading
import time

import pytest

from beanmeta.cache import BlockingCache, InMemoryStore, interrupt
from beanmeta.config import CacheSettings
from beanmeta.exceptions import InterruptedWaitError, LockTimeoutError, StoreError


class CountingStore(InMemoryStore):
    """In-memory store that records how often values are written."""

    def __init__(self, identity: str = "counting"):
        super().__init__(identity)
        self.puts = 0
        self._count_lock = threading.Lock()

    def put(self, key, value):
        with self._count_lock:
            self.puts += 1
        super().put(key, value)


class FailingStore(InMemoryStore):
    def get(self, key):
        raise StoreError.operation_failed(self.identity, "get", key)


def _held_by_me(cache: BlockingCache, key) -> bool:
    lock = cache._locks.get(key)
    return lock is not None and lock.is_held_by_current_thread()


def _run(target):
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


class TestMissThenFill:
    def test_miss_keeps_lock_until_put(self):
        cache = BlockingCache(InMemoryStore("orders"))

        assert cache.get("k") is None
        assert _held_by_me(cache, "k")

        cache.put("k", "v")
        assert not _held_by_me(cache, "k")
        assert cache.get("k") == "v"
        assert not _held_by_me(cache, "k")

    def test_put_without_lock_is_safe(self):
        cache = BlockingCache(InMemoryStore("orders"))

        cache.put("k", "v")

        assert cache.size() == 1
        assert cache.identity == "orders"

    def test_concurrent_gets_compute_once(self):
        store = CountingStore()
        cache = BlockingCache(store)
        barrier = threading.Barrier(2)
        computations = []
        results = []

        def worker():
            barrier.wait()
            value = cache.get("report")
            if value is None:
                computations.append(threading.get_ident())
                time.sleep(0.1)
                value = {"rows": 3}
                cache.put("report", value)
            results.append(value)

        threads = [_run(worker), _run(worker)]
        for thread in threads:
            thread.join(timeout=5)

        assert len(computations) == 1
        assert store.puts == 1
        assert len(results) == 2
        assert results[0] is results[1]

    def test_compute_if_absent_runs_factory_once(self):
        store = CountingStore()
        cache = BlockingCache(store)
        calls = []
        barrier = threading.Barrier(3)
        results = []

        def factory(key):
            calls.append(key)
            time.sleep(0.05)
            return f"value-for-{key}"

        def worker():
            barrier.wait()
            results.append(cache.compute_if_absent("k", factory))

        threads = [_run(worker) for _ in range(3)]
        for thread in threads:
            thread.join(timeout=5)

        assert calls == ["k"]
        assert results == ["value-for-k"] * 3
        assert store.puts == 1

    def test_compute_if_absent_releases_lock_when_factory_fails(self):
        cache = BlockingCache(InMemoryStore("orders"))

        def factory(key):
            raise KeyError(key)

        with pytest.raises(KeyError):
            cache.compute_if_absent("k", factory)

        assert not _held_by_me(cache, "k")
        assert cache.compute_if_absent("k", lambda key: 5) == 5


class TestTimeouts:
    def test_get_times_out_while_another_thread_fills(self):
        cache = BlockingCache(InMemoryStore("slow"), timeout_ms=50)
        locked = threading.Event()

        def holder():
            cache.get("k")
            locked.set()
            time.sleep(0.2)
            cache.put("k", "v")

        thread = _run(holder)
        assert locked.wait(timeout=5)

        started = time.monotonic()
        with pytest.raises(LockTimeoutError) as exc_info:
            cache.get("k")
        elapsed = time.monotonic() - started

        assert 0.04 <= elapsed < 0.18
        assert exc_info.value.key == "k"
        assert exc_info.value.identity == "slow"
        assert not _held_by_me(cache, "k")

        thread.join(timeout=5)
        assert cache.get("k") == "v"

    def test_negative_timeout_is_rejected(self):
        cache = BlockingCache(InMemoryStore("orders"))

        with pytest.raises(ValueError):
            cache.timeout_ms = -1


class TestInterruption:
    def test_interrupted_waiter_raises_and_holds_nothing(self):
        cache = BlockingCache(InMemoryStore("orders"))
        locked = threading.Event()
        release = threading.Event()
        outcome = {}

        def holder():
            cache.get("k")
            locked.set()
            release.wait(timeout=5)
            cache.put("k", "v")

        def waiter():
            try:
                cache.get("k")
            except InterruptedWaitError as exc:
                outcome["error"] = exc
                outcome["held"] = _held_by_me(cache, "k")

        holder_thread = _run(holder)
        assert locked.wait(timeout=5)
        waiter_thread = _run(waiter)
        time.sleep(0.05)

        interrupt(waiter_thread)
        waiter_thread.join(timeout=5)
        release.set()
        holder_thread.join(timeout=5)

        assert isinstance(outcome["error"], InterruptedWaitError)
        assert outcome["held"] is False
        assert cache.get("k") == "v"

    def test_interrupting_finished_thread_does_not_reach_later_threads(self):
        cache = BlockingCache(InMemoryStore("orders"), timeout_ms=50)
        finished = _run(lambda: None)
        finished.join(timeout=5)
        interrupt(finished)

        locked = threading.Event()
        release = threading.Event()
        outcomes = []

        def holder():
            cache.get("k")
            locked.set()
            release.wait(timeout=5)
            cache.put("k", "v")

        def waiter():
            try:
                cache.get("k")
            except (InterruptedWaitError, LockTimeoutError) as exc:
                outcomes.append(type(exc))

        holder_thread = _run(holder)
        assert locked.wait(timeout=5)
        for _ in range(5):
            _run(waiter).join(timeout=5)
        release.set()
        holder_thread.join(timeout=5)

        assert outcomes == [LockTimeoutError] * 5


class TestRemoveAndClear:
    def test_remove_keeps_lock_by_default(self):
        cache = BlockingCache(InMemoryStore("orders"))

        assert cache.get("k") is None
        assert cache.remove("k") is None

        assert _held_by_me(cache, "k")
        cache.put("k", "v")
        assert not _held_by_me(cache, "k")

    def test_remove_can_release_lock(self):
        cache = BlockingCache(InMemoryStore("orders"), release_on_remove=True)

        assert cache.get("k") is None
        cache.remove("k")

        assert not _held_by_me(cache, "k")

    def test_locks_survive_removal(self):
        cache = BlockingCache(InMemoryStore("orders"))
        cache.put("k", "v")
        cache.get("k")
        lock = cache._locks.get("k")

        cache.remove("k")
        cache.clear()

        assert cache._locks.get("k") is lock
        assert cache.size() == 0


class TestStoreFailures:
    def test_failed_read_releases_lock(self):
        cache = BlockingCache(FailingStore("broken"))

        with pytest.raises(StoreError):
            cache.get("k")

        assert not _held_by_me(cache, "k")


def test_from_settings_applies_configuration():
    settings = CacheSettings(timeout_ms=25, release_on_remove=True)

    cache = BlockingCache.from_settings(InMemoryStore("orders"), settings)

    assert cache.timeout_ms == 25
    assert cache.release_on_remove is True
