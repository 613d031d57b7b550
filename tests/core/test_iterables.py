import threading

import pytest

from mensura.core import iterables


def test_unique():
    """Repeated items should appear once, at their first position."""
    cases = {
        (): [],
        ('<meter>',): ['<meter>'],
        ('<meter>', '<second>', '<meter>'): ['<meter>', '<second>'],
        ('speed', 'speed', 'area'): ['speed', 'area'],
    }
    for items, expected in cases.items():
        assert iterables.unique(*items) == expected


def test_guard():
    """Test the class that substitutes values for known exceptions."""
    def func(arg: int):
        if arg == 0:
            raise KeyError
        if arg == 1:
            raise ValueError
        if arg == 2:
            raise ZeroDivisionError
        return arg
    guarded = iterables.Guard(func).catch(KeyError).catch(ValueError, -1)
    assert guarded.call(0) is None
    assert guarded.call(1) == -1
    assert guarded(3) == 3
    with pytest.raises(ZeroDivisionError):
        guarded.call(2)


def test_guard_subclass():
    """A guard should catch subclasses of known exceptions."""
    class Custom(ValueError):
        pass
    def func():
        raise Custom
    assert iterables.Guard(func).catch(ValueError, 'caught').call() == 'caught'


def test_locked_cache():
    """Test the thread-safe cache."""
    cache = iterables.LockedCache()
    assert len(cache) == 0
    assert cache.get('a') is None
    assert cache.store('a', 1) == 1
    assert cache['a'] == 1
    assert list(cache) == ['a']
    assert 'a' in cache
    cache.clear()
    assert 'a' not in cache
    with pytest.raises(KeyError):
        cache['a']


def test_disabled_cache():
    """A disabled cache should pass values through without storing them."""
    cache = iterables.LockedCache(enabled=False)
    assert cache.store('a', 1) == 1
    assert len(cache) == 0
    assert cache.get('a', 2) == 2
    assert 'disabled' in str(cache)


def test_locked_cache_threads():
    """Concurrent writers of one key should all finish with one value."""
    cache = iterables.LockedCache()
    barrier = threading.Barrier(8)
    results = []
    def work():
        barrier.wait()
        for _ in range(200):
            cache.store('key', ('<meter>', '<second>'))
            results.append(cache.get('key'))
            len(cache)
            list(cache)
    threads = [threading.Thread(target=work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    assert not any(thread.is_alive() for thread in threads)
    assert len(results) == 8 * 200
    assert set(results) == {('<meter>', '<second>')}
    assert list(cache) == ['key']
