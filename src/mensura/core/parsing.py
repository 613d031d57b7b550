"""Convert strings like ``'9.8 kg*m/s^2'`` into scalars and unit tokens."""

import logging
import re
import typing

from mensura.core import definitions
from mensura.core import errors
from mensura.core import iterables
from mensura.core import signature


LOGGER = logging.getLogger(__name__)


_SIGN = r'[+-]'
_INTEGER = r'[0-9]+'
_SIGNED_INTEGER = rf'{_SIGN}?{_INTEGER}'
_FRACTION = rf'\.{_INTEGER}'
_FLOAT = rf'(?:{_INTEGER}(?:{_FRACTION})?|{_FRACTION})'
_EXPONENT = rf'[Ee]{_SIGNED_INTEGER}'
_SCI_NUMBER = rf'{_FLOAT}(?:{_EXPONENT})?'
_SIGNED_NUMBER = rf'{_SIGN}?\s*{_SCI_NUMBER}'

QUANTITY = re.compile(rf'({_SIGNED_NUMBER})?\s*([^/]*)(?:/(.+))?', re.DOTALL)
"""An optional number, then units, then an optional ``/`` and more units."""

_TOP_POWER = re.compile(r'([^\s*0-9]+?)(?:\^|\*\*)?(-?[0-9]+)(?![a-zA-Z0-9])')
_BOTTOM_POWER = re.compile(r'([^\s*0-9]+?)(?:\^|\*\*)?([0-9]+)(?![a-zA-Z0-9])')
_SEPARATOR = re.compile(r'[\s*()]*')


class Parsed(typing.NamedTuple):
    """The components of a parsed quantity string."""

    scalar: float
    numerator: typing.Tuple[str, ...]
    denominator: typing.Tuple[str, ...]


def _alternatives(names: typing.Iterable[str]) -> str:
    """Create a regular-expression alternation, longest names first."""
    ordered = sorted(names, key=len, reverse=True)
    return '|'.join(re.escape(name) for name in ordered)


class Parser:
    """A parser bound to a registry of prefixes and units.

    Parameters
    ----------
    registry : `~definitions.Registry`, optional
        The prefixes and units to recognize. The default is the built-in
        registry.
    """

    def __init__(
        self,
        registry: definitions.Registry=definitions.REGISTRY,
    ) -> None:
        self.registry = registry
        prefixes = _alternatives(registry.prefix_map)
        units = _alternatives(registry.unit_map)
        self._unit = re.compile(rf'({prefixes})??({units})(?:\b|$)')
        self._cache = iterables.LockedCache()

    def parse(self, string: str) -> Parsed:
        """Parse `string` into a scalar, numerator, and denominator.

        A missing number means a scalar of 1, and missing units mean the
        quantity is unitless. Exponents (e.g., ``'m^2'``, ``'m**2'``, or
        ``'m2'``) expand to repeated units; negative exponents move units to
        the denominator.

        Raises
        ------
        ParseError
            The string is empty, has more than one ``/``, or contains text
            that is neither a number, a known unit, nor a separator. Also
            raised for an exponent larger in magnitude than
            `~signature.MAX_EXPONENT`.
        """
        if not isinstance(string, str):
            raise TypeError(
                f"Can't parse {string!r} of type {type(string)}"
            )
        text = string.strip()
        if not text:
            raise errors.ParseError(string, "nothing to parse")
        match = QUANTITY.fullmatch(text)
        if match is None:
            raise errors.ParseError(string, "missing denominator")
        number, top, bottom = match.groups()
        if bottom is not None and '/' in bottom:
            raise errors.ParseError(string, "more than one '/'")
        scalar = float(re.sub(r'\s', '', number)) if number else 1.0
        top, moved = self._expand(top, _TOP_POWER, string)
        if moved:
            bottom = f"{bottom} {moved}" if bottom else moved
        if bottom:
            bottom, _ = self._expand(bottom, _BOTTOM_POWER, string)
        numerator = self.tokenize(top, string)
        denominator = self.tokenize(bottom or '', string)
        return Parsed(scalar, numerator, denominator)

    def _expand(
        self,
        text: str,
        pattern: typing.Pattern,
        string: str,
    ) -> typing.Tuple[str, str]:
        """Replace each unit with an exponent by repeated units.

        Returns the expanded text and the text of any units with negative
        exponents, which belong on the other side of the ``/``.
        """
        moved = []
        while (match := pattern.search(text)):
            unit, power = match.group(1), int(match.group(2))
            if abs(power) > signature.MAX_EXPONENT:
                raise errors.ParseError(
                    string,
                    f"exponent {power} of {unit!r} is out of range"
                    f" (at most {signature.MAX_EXPONENT})"
                )
            if power == 0:
                # The unit disappears but it must still be a unit.
                self.tokenize(unit, string)
            repeated = ' '.join([unit] * abs(power))
            if power < 0:
                moved.append(repeated)
                repeated = ''
            text = f"{text[:match.start()]} {repeated} {text[match.end():]}"
        return text, ' '.join(moved)

    def tokenize(self, text: str, string: str=None) -> typing.Tuple[str, ...]:
        """Convert unit text into a sequence of unit and prefix tokens.

        The result is the unity sequence if `text` contains no units.
        """
        key = text.strip()
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        tokens = self._scan(key, string or text)
        LOGGER.debug("Parsed units %r as %s", key, tokens)
        return self._cache.store(key, tokens)

    def _scan(self, text: str, string: str) -> typing.Tuple[str, ...]:
        """Match known units, with optional prefixes, from left to right."""
        tokens = []
        position = _SEPARATOR.match(text).end()
        while position < len(text):
            match = self._unit.match(text, position)
            if match is None:
                unknown = re.split(r'[\s*()]', text[position:])[0]
                raise errors.UnrecognizedUnitError(unknown, string)
            prefix, unit = match.groups()
            if prefix:
                tokens.append(self.registry.prefix_map[prefix])
            tokens.append(self.registry.unit_map[unit])
            position = _SEPARATOR.match(text, match.end()).end()
        if len(tokens) > 1:
            tokens = [token for token in tokens if token != definitions.UNITY]
        return tuple(tokens) or definitions.UNITY_ARRAY


_parser = None


def get_parser() -> Parser:
    """The parser for the default registry."""
    global _parser
    if _parser is None:
        _parser = Parser()
    return _parser


def parse(string: str) -> Parsed:
    """Parse `string` with the default parser."""
    return get_parser().parse(string)
