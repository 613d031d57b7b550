import math
import numbers
import sys

from mensura.core import errors


def get_fractional(value: numbers.Real) -> int:
    """Count the decimal digits needed to represent the fractional part.

    This counts how many times `value` must be multiplied by 10 before the
    result is integral. Non-finite values have no fractional part.

    Examples
    --------
    >>> numerical.get_fractional(3)
    0
    >>> numerical.get_fractional(1.25)
    2
    """
    if not math.isfinite(value):
        return 0
    count = 0
    while math.fmod(value, 1) != 0:
        value *= 10
        count += 1
    return count


def round_half_up(value: numbers.Real) -> float:
    """Round to the nearest integer, sending halves toward +infinity.

    Unlike the built-in `round`, this does not round halves to even:

    >>> numerical.round_half_up(2.5)
    3
    >>> numerical.round_half_up(-2.5)
    -2
    """
    return math.floor(value + 0.5)


def round_to(value: numbers.Real, decimals: int) -> float:
    """Round `value` to `decimals` digits after the decimal point.

    Halves round toward +infinity, as in `round_half_up`. If scaling `value`
    by ``10**decimals`` would overflow, this returns `value` unchanged.
    """
    if decimals > sys.float_info.max_10_exp:
        return value
    factor = 10.0 ** decimals
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return round_half_up(scaled) / factor


def mul_safe(*args: numbers.Real) -> float:
    """Multiply numbers while limiting floating-point noise.

    This computes the ordinary product of `args`, then rounds it to the total
    number of decimal digits in the factors, so that, for example, ``0.1 * 3``
    gives ``0.3`` instead of ``0.30000000000000004``.

    Parameters
    ----------
    *args : real numbers
        The factors to multiply.

    Returns
    -------
    real number
        The (possibly rounded) product. This is ``1`` when `args` is empty.
    """
    result = 1
    decimals = 0
    for arg in args:
        decimals += get_fractional(arg)
        result *= arg
    return round_to(result, decimals) if decimals != 0 else result


def div_safe(num: numbers.Real, den: numbers.Real) -> float:
    """Divide two numbers while limiting floating-point noise.

    Parameters
    ----------
    num : real number
        The dividend.

    den : real number
        The divisor.

    Returns
    -------
    real number
        The quotient, computed as the product of `num` and the reciprocal of
        `den` via `mul_safe`.

    Raises
    ------
    DivideByZeroError
        `den` is zero.

    Notes
    -----
    The reciprocal of `den` is computed as ``f / (f * den)``, where ``f`` is
    the power of ten that makes `den` integral. This avoids representation
    error in the reciprocal of decimal fractions like ``0.1``.
    """
    if den == 0:
        raise errors.DivideByZeroError
    factor = 10.0 ** get_fractional(den)
    reciprocal = factor / (factor * den)
    return mul_safe(num, reciprocal)


def format_number(value: numbers.Real) -> str:
    """Convert a number to its shortest display string.

    Integral values print without a decimal point. All other values use
    Python's shortest round-trip representation.
    """
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)

