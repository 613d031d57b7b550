import collections.abc
import threading
import typing


T = typing.TypeVar('T')
G = typing.TypeVar('G')


def unique(*items: T) -> typing.List[T]:
    """The distinct members of `items`, in order of first appearance."""
    collection = []
    for item in items:
        if item not in collection:
            collection.append(item)
    return collection


class ReprStrMixin:
    """A mixin class that provides support for `__repr__` and `__str__`.

    Subclasses may override `_display_string` to control the text that both
    methods show. The default text is the empty string, in which case
    `__repr__` shows only the qualified class name.
    """

    def _display_string(self) -> str:
        """The text to show in `__str__` and `__repr__`."""
        return ''

    def __str__(self) -> str:
        """The display string of this object."""
        return self._display_string()

    def __repr__(self) -> str:
        """The display string, qualified by module and class."""
        module = self.__module__.replace('mensura.core.', '')
        name = self.__class__.__qualname__
        return f"{module}.{name}({self._display_string()!r})"


class Guard:
    """Return fallback values instead of raising expected exceptions.

    Instances call a wrapped object and, when that raises a registered
    exception type, return the fallback value registered with it (``None``
    unless the caller gives one to `~Guard.catch`).
    """

    def __init__(self, __callable: typing.Callable[..., T]) -> None:
        self._call = __callable
        self._substitutions = {}

    def catch(self, exception: typing.Type[Exception], /, value: G=None):
        """Return `value` whenever the wrapped object raises `exception`.

        Subclasses of `exception` match too. This method returns the guard
        so that calls can chain.
        """
        self._substitutions[exception] = value
        return self

    def call(self, *args, **kwargs) -> typing.Union[T, G]:
        """Call the wrapped object, substituting for registered exceptions.

        Unregistered exceptions propagate.
        """
        try:
            return self._call(*args, **kwargs)
        except tuple(self._substitutions) as err:
            for exception, value in self._substitutions.items():
                if isinstance(err, exception):
                    return value
            raise

    def __call__(self, *args, **kwargs) -> typing.Union[T, G]:
        return self.call(*args, **kwargs)


class LockedCache(collections.abc.Mapping, ReprStrMixin):
    """A thread-safe memo of computed values.

    Reads and writes both acquire the same lock, so concurrent callers may
    compute the same value more than once but will never observe a partially
    updated mapping.
    """

    def __init__(self, enabled: bool=True) -> None:
        self._lock = threading.Lock()
        self._store = {}
        self.enabled = enabled
        """If false, `store` discards values and lookups always miss."""

    def __getitem__(self, __k):
        with self._lock:
            return self._store[__k]

    def __iter__(self):
        with self._lock:
            keys = list(self._store)
        yield from keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def get(self, __k, default=None):
        with self._lock:
            return self._store.get(__k, default)

    def store(self, key, value):
        """Remember `value` for `key`, if this cache is enabled."""
        if self.enabled:
            with self._lock:
                self._store[key] = value
        return value

    def clear(self) -> None:
        """Forget all stored values."""
        with self._lock:
            self._store.clear()

    def _display_string(self) -> str:
        state = 'enabled' if self.enabled else 'disabled'
        return f"{len(self)} entries, {state}"
