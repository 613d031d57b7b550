"""Dimensional signatures of base-unit fractions.

A signature packs the exponent of each base dimension into a single integer.
The exponent of dimension ``i`` in `DIMENSIONS` has weight ``20**i``, so two
quantities are dimensionally compatible exactly when their signatures are
equal.
"""

import typing

from mensura.core import definitions


DIMENSIONS = (
    'length',
    'time',
    'temperature',
    'mass',
    'current',
    'substance',
    'luminosity',
    'currency',
    'information',
    'angle',
)
"""The kinds of base unit that contribute to a signature, in order."""


RADIX = 20

MAX_EXPONENT = RADIX // 2 - 1
"""The largest exponent magnitude a signature digit can hold."""


def vector(
    numerator: typing.Iterable[str],
    denominator: typing.Iterable[str],
    registry: definitions.Registry=definitions.REGISTRY,
) -> typing.List[int]:
    """Count the net exponent of each dimension in a base-unit fraction.

    Tokens whose kind is not in `DIMENSIONS` (e.g., prefixes, counting units,
    or percentages) do not contribute.
    """
    exponents = dict.fromkeys(DIMENSIONS, 0)
    for tokens, step in ((numerator, 1), (denominator, -1)):
        for token in tokens:
            kind = registry.kind_of(token)
            if kind in exponents:
                exponents[kind] += step
    return list(exponents.values())


def compute(
    numerator: typing.Iterable[str],
    denominator: typing.Iterable[str],
    registry: definitions.Registry=definitions.REGISTRY,
) -> int:
    """Compute the signature of a base-unit fraction."""
    exponents = vector(numerator, denominator, registry=registry)
    return sum(v * RADIX**i for i, v in enumerate(exponents))


def decode(signature: int) -> typing.Dict[str, int]:
    """Recover the nonzero dimension exponents from a signature.

    Exponents may be negative, so each digit lies in the balanced range
    ``[-RADIX // 2, RADIX // 2)``.

    Examples
    --------
    >>> signature.decode(-19)
    {'length': 1, 'time': -1}
    """
    exponents = {}
    remainder = signature
    for name in DIMENSIONS:
        digit = (remainder + RADIX // 2) % RADIX - RADIX // 2
        if digit:
            exponents[name] = digit
        remainder = (remainder - digit) // RADIX
    return exponents
