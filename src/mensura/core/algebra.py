import typing

from mensura.core import definitions
from mensura.core import numerical


Tokens = typing.Sequence[str]


class _Term:
    """The running state of one unit while combining fractions."""

    __slots__ = ('exponent', 'prefix', 'scales')

    def __init__(self, prefix: typing.Optional[str], exponent: int) -> None:
        self.exponent = exponent
        self.prefix = prefix
        self.scales = {1: 1.0, -1: 1.0}


def _pairs(
    tokens: Tokens,
    registry: definitions.Registry,
) -> typing.Iterator[typing.Tuple[typing.Optional[str], str]]:
    """Yield (prefix, unit) pairs, skipping unity tokens."""
    tokens = iter(t for t in tokens if t != definitions.UNITY)
    for token in tokens:
        if registry.is_prefix(token):
            unit = next(tokens, None)
            if unit is not None:
                yield token, unit
        else:
            yield None, token


def clean_terms(
    num1: Tokens,
    den1: Tokens,
    num2: Tokens,
    den2: Tokens,
    registry: definitions.Registry=definitions.REGISTRY,
) -> typing.Tuple[typing.Tuple[str, ...], typing.Tuple[str, ...], float]:
    """Combine two unit fractions into one, cancelling common units.

    Parameters
    ----------
    num1, den1 : sequences of strings
        The numerator and denominator tokens of the first fraction.

    num2, den2 : sequences of strings
        The numerator and denominator tokens of the second fraction. Callers
        that divide by the second fraction should pass its denominator as
        `num2` and its numerator as `den2`.

    Returns
    -------
    tuple
        The numerator tokens, the denominator tokens, and the scale factor by
        which to multiply the combined scalar.

    Notes
    -----
    Each unit keeps the prefix from its first appearance. When a later
    appearance has a different prefix, the ratio of prefix values moves into
    the scale factor, so that, for example, ``km*m`` combines into ``km2``
    with a scale factor of ``0.001``. Units with a net exponent of zero
    disappear. An empty side becomes the unity sequence.
    """
    terms: typing.Dict[str, _Term] = {}
    prefixes = registry.prefixes
    for tokens, direction in ((num1, 1), (den1, -1), (num2, 1), (den2, -1)):
        for prefix, unit in _pairs(tokens, registry):
            if unit not in terms:
                terms[unit] = _Term(prefix, direction)
                continue
            term = terms[unit]
            term.exponent += direction
            this = prefixes[prefix].factor if prefix else 1
            that = prefixes[term.prefix].factor if term.prefix else 1
            term.scales[direction] *= numerical.div_safe(this, that)
    numerator = []
    denominator = []
    scale = 1
    for unit, term in terms.items():
        pair = [term.prefix, unit] if term.prefix else [unit]
        if term.exponent > 0:
            numerator.extend(pair * term.exponent)
        elif term.exponent < 0:
            denominator.extend(pair * -term.exponent)
        scale *= numerical.div_safe(term.scales[1], term.scales[-1])
    return (
        tuple(numerator) or definitions.UNITY_ARRAY,
        tuple(denominator) or definitions.UNITY_ARRAY,
        scale,
    )
