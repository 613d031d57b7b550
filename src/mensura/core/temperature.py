"""Rules for arithmetic and conversion involving temperatures.

Units like ``tempC`` represent absolute temperatures, which have a zero point.
Units like ``degC`` represent temperature differences. The two kinds of unit
have the same signature, so they are compatible, but only some combinations
are meaningful:

- absolute - absolute = difference
- absolute +/- difference = absolute
- difference +/- difference = difference

Adding two absolute temperatures, or subtracting an absolute temperature from
a difference, is an error.
"""

import typing

from mensura.core import definitions
from mensura.core import errors


DIFFERENCES = {
    '<temp-K>': '<kelvin>',
    '<temp-C>': '<celsius>',
    '<temp-F>': '<fahrenheit>',
    '<temp-R>': '<rankine>',
}
"""The unit of temperature difference for each temperature scale."""


def is_degrees(
    numerator: typing.Sequence[str],
    denominator: typing.Sequence[str],
) -> bool:
    """True if the fraction is a single unit of temperature or difference."""
    return (
        len(numerator) == 1
        and tuple(denominator) == definitions.UNITY_ARRAY
        and (
            numerator[0] in definitions.TEMPERATURES
            or numerator[0] in definitions.DEGREES
        )
    )


def is_temperature(
    numerator: typing.Sequence[str],
    denominator: typing.Sequence[str],
) -> bool:
    """True if the fraction is a single unit of absolute temperature."""
    return (
        is_degrees(numerator, denominator)
        and numerator[0] in definitions.TEMPERATURES
    )


def check_arrays(
    numerator: typing.Sequence[str],
    denominator: typing.Sequence[str],
) -> None:
    """Make sure absolute temperatures appear only on their own.

    Raises
    ------
    InvalidTemperatureOperationError
        An absolute temperature unit appears in a denominator or alongside
        any other unit.
    """
    if any(token in definitions.TEMPERATURES for token in denominator):
        raise errors.InvalidTemperatureOperationError(
            "Cannot divide with temperatures"
        )
    if (
        len(numerator) > 1
        and any(token in definitions.TEMPERATURES for token in numerator)
    ):
        raise errors.InvalidTemperatureOperationError(
            "Cannot multiply by temperatures"
        )
    if (
        any(token in definitions.TEMPERATURES for token in numerator)
        and tuple(denominator) != definitions.UNITY_ARRAY
    ):
        raise errors.InvalidTemperatureOperationError(
            "Cannot divide with temperatures"
        )


def difference_unit(quantity) -> str:
    """The unit of temperature difference for an absolute temperature."""
    token = quantity.numerator[0]
    if token not in DIFFERENCES:
        raise errors.InvalidTemperatureOperationError(
            f"Unknown temperature units {quantity.units()!r}"
        )
    return DIFFERENCES[token]


def subtract_temperatures(lhs, rhs):
    """Compute the difference between two absolute temperatures."""
    unit = difference_unit(lhs)
    scalar = lhs.scalar - rhs.to(lhs.units()).scalar
    return type(lhs).from_parts(scalar, (unit,))


def add_difference(temperature, difference):
    """Shift an absolute temperature up by a temperature difference."""
    unit = _units_of(difference_unit(temperature))
    scalar = temperature.scalar + difference.to(unit).scalar
    return type(temperature).from_parts(scalar, temperature.numerator)


def subtract_difference(temperature, difference):
    """Shift an absolute temperature down by a temperature difference."""
    unit = _units_of(difference_unit(temperature))
    scalar = temperature.scalar - difference.to(unit).scalar
    return type(temperature).from_parts(scalar, temperature.numerator)


def to_kelvin_difference(quantity) -> float:
    """The size of `quantity` as a kelvin difference.

    Absolute temperatures count from the zero of their own scale, so this
    does not account for the offset between scales.
    """
    token = quantity.numerator[0]
    if token in definitions.DEGREES:
        return quantity.base_scalar
    if token in {'<temp-K>', '<temp-C>'}:
        return quantity.scalar
    if token in {'<temp-F>', '<temp-R>'}:
        return quantity.scalar * 5 / 9
    raise errors.InvalidTemperatureOperationError(
        f"Unknown temperature units {quantity.units()!r}"
    )


def to_degrees(source, target):
    """Convert `source` into the difference units of `target`."""
    kelvin = to_kelvin_difference(source)
    token = target.numerator[0]
    if token in {'<kelvin>', '<celsius>'}:
        scalar = kelvin
    elif token in {'<fahrenheit>', '<rankine>'}:
        scalar = kelvin * 9 / 5
    else:
        raise errors.InvalidTemperatureOperationError(
            f"Unknown type for temperature conversion to {target.units()!r}"
        )
    return type(source).from_parts(scalar, target.numerator)


def to_temperature(source, target):
    """Convert `source` into the absolute temperature units of `target`."""
    kelvin = source.base_scalar
    token = target.numerator[0]
    if token == '<temp-K>':
        scalar = kelvin
    elif token == '<temp-C>':
        scalar = kelvin - 273.15
    elif token == '<temp-F>':
        scalar = kelvin * 9 / 5 - 459.67
    elif token == '<temp-R>':
        scalar = kelvin * 9 / 5
    else:
        raise errors.InvalidTemperatureOperationError(
            f"Unknown type for temperature conversion to {target.units()!r}"
        )
    return type(source).from_parts(scalar, target.numerator)


def to_kelvin(quantity):
    """Convert `quantity` into an absolute temperature in kelvin."""
    token = quantity.numerator[0]
    if token in definitions.DEGREES:
        scalar = quantity.base_scalar
    elif token == '<temp-K>':
        scalar = quantity.scalar
    elif token == '<temp-C>':
        scalar = quantity.scalar + 273.15
    elif token == '<temp-F>':
        scalar = (quantity.scalar + 459.67) * 5 / 9
    elif token == '<temp-R>':
        scalar = quantity.scalar * 5 / 9
    else:
        raise errors.InvalidTemperatureOperationError(
            "Unknown type for temperature conversion"
            f" from {quantity.units()!r}"
        )
    if scalar < 0 and token in definitions.TEMPERATURES:
        raise errors.SubAbsoluteTemperatureError(
            quantity.scalar, quantity.units()
        )
    return type(quantity).from_parts(scalar, ('<temp-K>',))


def _units_of(token: str) -> str:
    """The display string of a single unit token."""
    return definitions.REGISTRY.output_map[token]
