import collections
import numbers
import typing

from mensura.core import definitions
from mensura.core import iterables
from mensura.core import numerical


Formatter = typing.Callable[[numbers.Real, str], str]


def default_formatter(scalar: numbers.Real, units: str) -> str:
    """Join a scalar and units with a space."""
    return f"{numerical.format_number(scalar)} {units}".strip()


class UnitsFormatter:
    """Display strings for sequences of unit tokens.

    Repeated units collapse into a single name with a count (e.g., the tokens
    for ``'s*m*s'`` display as ``'s2*m'``), in order of first appearance.
    """

    def __init__(
        self,
        registry: definitions.Registry=definitions.REGISTRY,
    ) -> None:
        self.registry = registry
        self._cache = iterables.LockedCache()

    def units(
        self,
        numerator: typing.Sequence[str],
        denominator: typing.Sequence[str],
    ) -> str:
        """The display string for a unit fraction.

        Unitless fractions display as the empty string, and fractions with a
        unitless denominator display without ``'/'``.
        """
        top = tuple(numerator) == definitions.UNITY_ARRAY
        bottom = tuple(denominator) == definitions.UNITY_ARRAY
        if top and bottom:
            return ''
        string = self.stringify(numerator)
        if bottom:
            return string
        return f"{string}/{self.stringify(denominator)}"

    def stringify(self, tokens: typing.Sequence[str]) -> str:
        """The display string for one side of a unit fraction."""
        key = tuple(tokens)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        if key == definitions.UNITY_ARRAY:
            return self._cache.store(key, '1')
        counts = collections.Counter(self._output_names(key))
        string = '*'.join(
            name if count == 1 else f"{name}{count}"
            for name, count in counts.items()
        )
        return self._cache.store(key, string)

    def _output_names(self, tokens: typing.Sequence[str]) -> typing.List[str]:
        """Compute display names, joining each prefix to its unit."""
        output = self.registry.output_map
        names = []
        tokens = iter(tokens)
        for token in tokens:
            if self.registry.is_prefix(token):
                unit = next(tokens, None)
                names.append(output[token] + output.get(unit, ''))
            else:
                names.append(output[token])
        return names


_formatter = None


def get_formatter() -> UnitsFormatter:
    """The units formatter for the default registry."""
    global _formatter
    if _formatter is None:
        _formatter = UnitsFormatter()
    return _formatter
