"""Conversion between units.

The functions in this module operate on quantity objects (see
`~quantity.Quantity`) and create new instances of the same type via
``from_parts``, so they never modify their arguments.
"""

import logging
import numbers
import typing

import numpy

from mensura.core import definitions
from mensura.core import environment
from mensura.core import errors
from mensura.core import iterables
from mensura.core import numerical
from mensura.core import temperature


LOGGER = logging.getLogger(__name__)


class BaseUnitCache(iterables.LockedCache):
    """Base-unit reductions, keyed by unit string."""


_base_unit_cache = None


def get_base_unit_cache() -> BaseUnitCache:
    """The shared cache of base-unit reductions.

    The ``base_units`` option in the ``[cache]`` section of the configuration
    file determines whether this cache stores new values.
    """
    global _base_unit_cache
    if _base_unit_cache is None:
        enabled = environment.get('cache').getboolean('base_units', True)
        _base_unit_cache = BaseUnitCache(enabled=enabled)
    return _base_unit_cache


def to_base_units(
    numerator: typing.Sequence[str],
    denominator: typing.Sequence[str],
    registry: definitions.Registry=definitions.REGISTRY,
) -> definitions.Reduction:
    """Express a unit fraction as a scalar multiple of base units.

    Parameters
    ----------
    numerator, denominator : sequences of strings
        The prefix and unit tokens of the fraction.

    registry : `~definitions.Registry`, optional
        The registry that defines the tokens.

    Returns
    -------
    `~definitions.Reduction`
        The scalar factor and the base-unit tokens. The tokens are not
        simplified, so units may appear in both the numerator and the
        denominator.

    Raises
    ------
    UnrecognizedUnitError
        A token is neither a known prefix nor a known unit.
    """
    scalar = 1.0
    num = []
    den = []
    for token in numerator:
        if token == definitions.UNITY:
            continue
        if registry.is_prefix(token):
            factor = registry.prefixes[token].factor
            scalar = numerical.mul_safe(scalar, factor)
        else:
            reduction = registry.reduce(token)
            scalar *= reduction.scalar
            num.extend(reduction.numerator)
            den.extend(reduction.denominator)
    for token in denominator:
        if token == definitions.UNITY:
            continue
        if registry.is_prefix(token):
            scalar /= registry.prefixes[token].factor
        else:
            reduction = registry.reduce(token)
            scalar /= reduction.scalar
            num.extend(reduction.denominator)
            den.extend(reduction.numerator)
    return definitions.Reduction(
        scalar,
        tuple(num) or definitions.UNITY_ARRAY,
        tuple(den) or definitions.UNITY_ARRAY,
    )


def to_base(quantity, cache: BaseUnitCache=None):
    """Convert `quantity` to base units.

    Absolute temperatures convert to ``tempK``. Other quantities convert via
    their (cached) base-unit reduction.
    """
    if quantity.is_base():
        return quantity
    if quantity.is_temperature():
        return temperature.to_kelvin(quantity)
    if cache is None:
        cache = get_base_unit_cache()
    key = quantity.units()
    reduction = cache.get(key)
    if reduction is None:
        LOGGER.debug("Computing base units of %r", key)
        reduction = cache.store(
            key,
            to_base_units(quantity.numerator, quantity.denominator),
        )
    return type(quantity).from_parts(
        numerical.mul_safe(reduction.scalar, quantity.scalar),
        reduction.numerator,
        reduction.denominator,
    )


def convert(source, target):
    """Convert `source` into the units of `target`.

    The scalar of `target` does not matter. If the units are incompatible but
    the inverse of `source` is compatible with `target`, this converts the
    inverse (e.g., from ``'s/m'`` to ``'m/s'``).

    Raises
    ------
    IncompatibleUnitsError
        Neither `source` nor its inverse is compatible with `target`.
    """
    if target.units() == source.units():
        return source
    if not source.is_compatible(target):
        if source.is_inverse(target):
            LOGGER.debug(
                "Converting inverse of %r to %r",
                source.units(), target.units(),
            )
            return source.inverse().to(target)
        raise errors.IncompatibleUnitsError(source.units(), target.units())
    if target.is_temperature():
        return temperature.to_temperature(source, target)
    if target.is_degrees():
        return temperature.to_degrees(source, target)
    scalar = numerical.div_safe(source.base_scalar, target.base_scalar)
    return type(source).from_parts(
        scalar,
        target.numerator,
        target.denominator,
    )


def to_precision(source, precision):
    """Round `source` to the nearest multiple of `precision`.

    Raises
    ------
    IncompatibleUnitsError
        `source` is unitless but `precision` is not, or they have
        incompatible units.

    DivideByZeroError
        The scalar of `precision` is zero.
    """
    if not source.is_unitless():
        precision = precision.to(source.units())
    elif not precision.is_unitless():
        raise errors.IncompatibleUnitsError(source.units(), precision.units())
    if precision.scalar == 0:
        raise errors.DivideByZeroError
    rounded = numerical.round_half_up(source.scalar / precision.scalar)
    scalar = numerical.mul_safe(rounded, precision.scalar)
    return type(source).from_parts(
        scalar,
        source.numerator,
        source.denominator,
    )


def _find(tokens: typing.List[str], target: typing.Sequence[str], start: int):
    """The index of the first run of `target` at or after `start`, or -1."""
    size = len(target)
    for index in range(start, len(tokens) - size + 1):
        if tokens[index:index+size] == list(target):
            return index
    return -1


def _substitute(
    tokens: typing.Sequence[str],
    old: typing.Sequence[str],
    new: typing.Sequence[str],
    registry: definitions.Registry=definitions.REGISTRY,
) -> typing.Tuple[typing.List[str], int, float]:
    """Replace each run of `old` in `tokens` by `new`.

    A run of `old` may follow a prefix. The prefix stays in place unless `new`
    brings its own, in which case the prefix's factor goes into the returned
    scale. Also returns the number of replacements.
    """
    result = list(tokens)
    count = 0
    scale = 1.0
    index = _find(result, old, 0)
    while index > -1:
        replacement = list(new)
        prefixed = index > 0 and registry.is_prefix(result[index-1])
        if prefixed and registry.is_prefix(replacement[0]):
            index -= 1
            scale *= registry.prefixes[result[index]].factor
            result[index:index+len(old)+1] = replacement
        else:
            result[index:index+len(old)] = replacement
        count += 1
        index = _find(result, old, index + len(replacement))
    return result, count, scale


def convert_single_unit(source, base, target):
    """Replace every occurrence of one unit in `source` by another.

    This converts only the named unit, so, for example, converting ``'m'`` to
    ``'ft'`` in ``'3 m*s'`` gives a value in ``'ft*s'``. Occurrences in the
    denominator divide by the conversion factor. A prefixed occurrence keeps
    its prefix (``'km'`` becomes ``'kft'``) unless `target` has a prefix of
    its own.

    Raises
    ------
    UnitMismatchError
        Either `base` or `target` has a denominator.
    """
    for this in (base, target):
        if tuple(this.denominator) != definitions.UNITY_ARRAY:
            raise errors.UnitMismatchError(
                this.units(),
                "units should have no denominator"
                " for a single unit conversion",
            )
    factor = base.to(target).scalar
    scalar = source.scalar
    numerator, count, scale = _substitute(
        source.numerator, base.numerator, target.numerator
    )
    for _ in range(count):
        scalar *= factor
    scalar *= scale
    denominator, count, scale = _substitute(
        source.denominator, base.numerator, target.numerator
    )
    for _ in range(count):
        scalar /= factor
    scalar /= scale
    return type(source).from_parts(scalar, numerator, denominator)


Converter = typing.Callable[
    [typing.Union[numbers.Real, typing.Sequence[numbers.Real], numpy.ndarray]],
    typing.Union[numbers.Real, typing.List[numbers.Real], numpy.ndarray],
]


def build_converter(source, target) -> Converter:
    """Create a function that converts numbers from `source` to `target` units.

    The returned function accepts a single number, a list or tuple of numbers,
    or a `numpy.ndarray`. It returns a number, a list, or an array,
    respectively.

    Raises
    ------
    IncompatibleUnitsError
        `source` and `target` are incompatible.
    """
    if source.eq(target):
        return _identity
    if source.is_temperature() or target.is_temperature():
        def convert(value):
            return source.mul(value).to(target).scalar
        def convert_array(array: numpy.ndarray) -> numpy.ndarray:
            values = [convert(value) for value in array.flat]
            return numpy.array(values, dtype=float).reshape(array.shape)
    else:
        def convert(value):
            return (value * source.base_scalar) / target.base_scalar
        convert_array = convert
    def converter(value):
        if isinstance(value, numbers.Real):
            return convert(value)
        if isinstance(value, (list, tuple)):
            return [convert(v) for v in value]
        return convert_array(numpy.asarray(value, dtype=float))
    return converter


def _identity(value):
    return value
