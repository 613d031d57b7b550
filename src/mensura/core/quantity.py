import collections.abc
import numbers
import typing

from mensura.core import algebra
from mensura.core import conversion
from mensura.core import definitions
from mensura.core import environment
from mensura.core import errors
from mensura.core import formatting
from mensura.core import iterables
from mensura.core import kinds
from mensura.core import numerical
from mensura.core import parsing
from mensura.core import signature
from mensura.core import temperature


Tokens = typing.Tuple[str, ...]


def _is_number(this) -> bool:
    """True if `this` is a real number but not a boolean."""
    return isinstance(this, numbers.Real) and not isinstance(this, bool)


def _is_source(this) -> bool:
    """True if `this` can stand in for a quantity in an operation."""
    return isinstance(this, (Quantity, str)) or _is_number(this)


def _normalize(tokens: typing.Optional[typing.Iterable[str]]) -> Tokens:
    """Convert tokens to a tuple without redundant unity tokens."""
    if tokens is None or isinstance(tokens, str):
        raise TypeError(f"Expected a sequence of unit tokens, got {tokens!r}")
    result = tuple(tokens)
    if len(result) > 1:
        result = tuple(t for t in result if t != definitions.UNITY)
    return result or definitions.UNITY_ARRAY


def _from_mapping(mapping: typing.Mapping) -> parsing.Parsed:
    """Interpret a mapping of scalar, numerator, and denominator."""
    scalar = mapping.get('scalar', 1)
    if not _is_number(scalar):
        raise TypeError(f"Scalar must be a number, got {scalar!r}")
    registry = definitions.REGISTRY
    parts = {}
    for key in ('numerator', 'denominator'):
        tokens = _normalize(mapping.get(key) or definitions.UNITY_ARRAY)
        for token in tokens:
            if token not in registry.units and not registry.is_prefix(token):
                raise errors.UnrecognizedUnitError(token)
        parts[key] = tokens
    return parsing.Parsed(float(scalar), **parts)


class Quantity(iterables.ReprStrMixin):
    """A real number with physical units.

    Instances are immutable. Every operation returns a new instance.

    Parameters
    ----------
    value : number, string, mapping, or `~quantity.Quantity`
        The value of the new quantity. A number creates a unitless quantity,
        unless the caller also passes `units`. A string must contain an
        optional number followed by optional units (e.g., ``'9.8 m/s^2'``). A
        mapping may have the keys ``'scalar'``, ``'numerator'``, and
        ``'denominator'``, where the latter two are sequences of unit tokens.
        Another quantity creates an equal copy.

    units : string, optional
        Units to attach to a numeric `value`.

    Raises
    ------
    ParseError
        `value` or `units` is a string that is not a valid quantity.

    InvalidTemperatureOperationError
        The units contain an absolute temperature combined with other units.

    SubAbsoluteTemperatureError
        The quantity is an absolute temperature below absolute zero.

    Examples
    --------
    >>> Quantity('5.5 ft').to('m')
    quantity.Quantity('1.6764 m')
    >>> Quantity(25, 'kg').to('lb').scalar
    55.11556554621939
    >>> str(Quantity('1 m') * Quantity('2 m'))
    '2 m2'
    """

    formatter: formatting.Formatter = staticmethod(
        formatting.default_formatter
    )
    """The function that `~Quantity.format` uses by default."""

    def __init__(
        self,
        value: typing.Union['Quantity', str, numbers.Real, typing.Mapping],
        units: str=None,
    ) -> None:
        if units is not None:
            if not _is_number(value):
                raise TypeError(
                    "Only a number may accompany explicit units"
                )
            parsed = parsing.parse(units)
            parts = parsing.Parsed(
                float(value), parsed.numerator, parsed.denominator
            )
        elif isinstance(value, Quantity):
            parts = parsing.Parsed(
                value.scalar, value.numerator, value.denominator
            )
        elif isinstance(value, str):
            parts = parsing.parse(value)
        elif isinstance(value, collections.abc.Mapping):
            parts = _from_mapping(value)
        elif _is_number(value):
            parts = parsing.Parsed(
                float(value),
                definitions.UNITY_ARRAY,
                definitions.UNITY_ARRAY,
            )
        else:
            raise TypeError(
                f"Can't create a quantity from {value!r}"
            ) from None
        self._scalar, self._numerator, self._denominator = parts
        temperature.check_arrays(self._numerator, self._denominator)
        self._base_scalar = None
        self._signature = None
        self._units = None
        self._is_base = None
        self._conversions = iterables.LockedCache()
        if self.is_temperature() and self.base_scalar < 0:
            raise errors.SubAbsoluteTemperatureError(
                self.scalar, self.units()
            )

    @classmethod
    def from_parts(
        cls,
        scalar: numbers.Real,
        numerator: typing.Iterable[str]=definitions.UNITY_ARRAY,
        denominator: typing.Iterable[str]=definitions.UNITY_ARRAY,
    ) -> 'Quantity':
        """Create a quantity from a scalar and unit tokens."""
        return cls(
            {
                'scalar': scalar,
                'numerator': numerator,
                'denominator': denominator,
            }
        )

    @classmethod
    def _coerce(cls, other: typing.Union['Quantity', str, numbers.Real]):
        """Convert `other` into a quantity, if necessary."""
        if isinstance(other, Quantity):
            return other
        if isinstance(other, str) or _is_number(other):
            return cls(other)
        raise TypeError(
            f"Can't use {other!r} of type {type(other)} as a quantity"
        ) from None

    @property
    def scalar(self) -> float:
        """The numerical value in the current units."""
        return self._scalar

    @property
    def numerator(self) -> Tokens:
        """The prefix and unit tokens in the numerator."""
        return self._numerator

    @property
    def denominator(self) -> Tokens:
        """The prefix and unit tokens in the denominator."""
        return self._denominator

    @property
    def base_scalar(self) -> float:
        """The numerical value in base units."""
        if self._base_scalar is None:
            if self.is_base():
                self._base_scalar = self.scalar
            else:
                self._base_scalar = self.to_base().scalar
        return self._base_scalar

    @property
    def signature(self) -> int:
        """The integer that encodes the dimensions of this quantity."""
        if self._signature is None:
            if self.is_base():
                self._signature = signature.compute(
                    self.numerator, self.denominator
                )
            else:
                self._signature = self.to_base().signature
        return self._signature

    def units(self) -> str:
        """The display string of the units of this quantity.

        This is the empty string for a unitless quantity.
        """
        if self._units is None:
            self._units = formatting.get_formatter().units(
                self.numerator, self.denominator
            )
        return self._units

    def kind(self) -> typing.Optional[str]:
        """The kind of physical quantity (e.g., ``'speed'``), if known."""
        return kinds.kind_of(self.signature)

    def is_unitless(self) -> bool:
        """True if this quantity has no units."""
        return (
            self.numerator == definitions.UNITY_ARRAY
            and self.denominator == definitions.UNITY_ARRAY
        )

    def is_base(self) -> bool:
        """True if this quantity is in base units."""
        if self._is_base is None:
            if (
                self.is_degrees()
                and self.numerator[0] in {'<kelvin>', '<temp-K>'}
            ):
                self._is_base = True
            else:
                self._is_base = all(
                    token == definitions.UNITY
                    or token in definitions.BASE_UNITS
                    for token in self.numerator + self.denominator
                )
        return self._is_base

    def is_degrees(self) -> bool:
        """True if the units are a single temperature or difference unit."""
        return temperature.is_degrees(self.numerator, self.denominator)

    def is_temperature(self) -> bool:
        """True if the units are a single absolute temperature unit."""
        return temperature.is_temperature(self.numerator, self.denominator)

    def is_compatible(self, other) -> bool:
        """True if `other` has the same dimensions as this quantity.

        A string argument must be a valid quantity string. Any other argument
        that is not a quantity is incompatible.
        """
        if isinstance(other, str):
            other = Quantity(other)
        if isinstance(other, Quantity):
            return self.signature == other.signature
        return False

    def is_inverse(self, other) -> bool:
        """True if `other` has the inverse dimensions of this quantity."""
        if isinstance(other, str):
            other = Quantity(other)
        if isinstance(other, Quantity):
            return self.signature == -other.signature
        return False

    def to(self, target: typing.Union['Quantity', str]=None) -> 'Quantity':
        """Convert this quantity to other units.

        Parameters
        ----------
        target : string or `~quantity.Quantity`, optional
            The target units. If `target` is a quantity, this method uses its
            units and ignores its scalar. If `target` is ``None``, this method
            returns this quantity.

        Raises
        ------
        IncompatibleUnitsError
            Neither this quantity nor its inverse is compatible with `target`.
        """
        if target is None:
            return self
        if isinstance(target, Quantity):
            key = target.units()
        elif isinstance(target, str):
            key = target
        else:
            raise TypeError(
                f"Can't convert to {target!r} of type {type(target)}"
            ) from None
        cached = self._conversions.get(key)
        if cached is not None:
            return cached
        units = Quantity(key) if key.strip() else Quantity(1)
        result = conversion.convert(self, units)
        return self._conversions.store(key, result)

    def to_base(self) -> 'Quantity':
        """Convert this quantity to base units."""
        return conversion.to_base(self)

    def to_float(self) -> float:
        """The scalar of a unitless quantity.

        Raises
        ------
        UnitMismatchError
            This quantity is not unitless.
        """
        if not self.is_unitless():
            raise errors.UnitMismatchError(
                self.units(), "only a unitless quantity converts to a number"
            )
        return self.scalar

    def to_prec(
        self,
        precision: typing.Union['Quantity', str, numbers.Real],
    ) -> 'Quantity':
        """Round to the nearest multiple of `precision`.

        A numeric `precision` is in the units of this quantity.

        Examples
        --------
        >>> Quantity('5.5 ft').to_prec('2 ft')
        quantity.Quantity('6 ft')
        >>> Quantity('6.3782 m').to_prec('cm')
        quantity.Quantity('6.38 m')
        """
        if _is_number(precision):
            precision = self.from_parts(
                precision, self.numerator, self.denominator
            )
        else:
            precision = self._coerce(precision)
        return conversion.to_precision(self, precision)

    def convert_single_unit(
        self,
        base: typing.Union['Quantity', str],
        target: typing.Union['Quantity', str],
    ) -> 'Quantity':
        """Convert only the `base` unit, wherever it occurs, to `target`."""
        base = Quantity(base) if isinstance(base, str) else base
        target = Quantity(target) if isinstance(target, str) else target
        return conversion.convert_single_unit(self, base, target)

    def add(self, other: typing.Union['Quantity', str, numbers.Real]):
        """Add a compatible quantity, keeping the units of this quantity."""
        other = self._coerce(other)
        if not self.is_compatible(other):
            raise errors.IncompatibleUnitsError(self.units(), other.units())
        if self.is_temperature() and other.is_temperature():
            raise errors.InvalidTemperatureOperationError(
                "Cannot add two temperatures"
            )
        if self.is_temperature():
            return temperature.add_difference(self, other)
        if other.is_temperature():
            return temperature.add_difference(other, self)
        return self.from_parts(
            self.scalar + other.to(self).scalar,
            self.numerator,
            self.denominator,
        )

    def sub(self, other: typing.Union['Quantity', str, numbers.Real]):
        """Subtract a compatible quantity, keeping the units of this one."""
        other = self._coerce(other)
        if not self.is_compatible(other):
            raise errors.IncompatibleUnitsError(self.units(), other.units())
        if self.is_temperature() and other.is_temperature():
            return temperature.subtract_temperatures(self, other)
        if self.is_temperature():
            return temperature.subtract_difference(self, other)
        if other.is_temperature():
            raise errors.InvalidTemperatureOperationError(
                "Cannot subtract a temperature from a differential degree unit"
            )
        return self.from_parts(
            self.scalar - other.to(self).scalar,
            self.numerator,
            self.denominator,
        )

    def mul(self, other: typing.Union['Quantity', str, numbers.Real]):
        """Multiply by a number or another quantity."""
        if _is_number(other):
            return self.from_parts(
                numerical.mul_safe(self.scalar, other),
                self.numerator,
                self.denominator,
            )
        other = self._coerce(other)
        if (
            (self.is_temperature() or other.is_temperature())
            and not (self.is_unitless() or other.is_unitless())
        ):
            raise errors.InvalidTemperatureOperationError(
                "Cannot multiply by temperatures"
            )
        if self.is_compatible(other) and self.signature != 400:
            other = other.to(self)
        numerator, denominator, scale = algebra.clean_terms(
            self.numerator,
            self.denominator,
            other.numerator,
            other.denominator,
        )
        return self.from_parts(
            numerical.mul_safe(self.scalar, other.scalar, scale),
            numerator,
            denominator,
        )

    def div(self, other: typing.Union['Quantity', str, numbers.Real]):
        """Divide by a number or another quantity.

        Raises
        ------
        DivideByZeroError
            The divisor is zero.
        """
        if _is_number(other):
            if other == 0:
                raise errors.DivideByZeroError
            return self.from_parts(
                self.scalar / other,
                self.numerator,
                self.denominator,
            )
        other = self._coerce(other)
        if other.scalar == 0:
            raise errors.DivideByZeroError
        if other.is_temperature() or (
            self.is_temperature() and not other.is_unitless()
        ):
            raise errors.InvalidTemperatureOperationError(
                "Cannot divide with temperatures"
            )
        if self.is_compatible(other) and self.signature != 400:
            other = other.to(self)
        numerator, denominator, scale = algebra.clean_terms(
            self.numerator,
            self.denominator,
            other.denominator,
            other.numerator,
        )
        return self.from_parts(
            numerical.mul_safe(self.scalar, scale) / other.scalar,
            numerator,
            denominator,
        )

    def inverse(self) -> 'Quantity':
        """The reciprocal of this quantity."""
        if self.is_temperature():
            raise errors.InvalidTemperatureOperationError(
                "Cannot divide with temperatures"
            )
        if self.scalar == 0:
            raise errors.DivideByZeroError
        return self.from_parts(
            1 / self.scalar,
            self.denominator,
            self.numerator,
        )

    def compare_to(self, other: typing.Union['Quantity', str, numbers.Real]):
        """Compare magnitudes with a compatible quantity.

        Returns
        -------
        int
            -1, 0, or 1 if this quantity is less than, equal to, or greater
            than `other`.

        Raises
        ------
        IncompatibleUnitsError
            The quantities have different dimensions.
        """
        other = self._coerce(other)
        if not self.is_compatible(other):
            raise errors.IncompatibleUnitsError(self.units(), other.units())
        if self.base_scalar < other.base_scalar:
            return -1
        if self.base_scalar > other.base_scalar:
            return 1
        return 0

    def eq(self, other) -> bool:
        """True if this quantity equals `other` after conversion."""
        return self.compare_to(other) == 0

    def lt(self, other) -> bool:
        """True if this quantity is less than `other` after conversion."""
        return self.compare_to(other) < 0

    def lte(self, other) -> bool:
        """True if this quantity is at most `other` after conversion."""
        return self.compare_to(other) <= 0

    def gt(self, other) -> bool:
        """True if this quantity is greater than `other` after conversion."""
        return self.compare_to(other) > 0

    def gte(self, other) -> bool:
        """True if this quantity is at least `other` after conversion."""
        return self.compare_to(other) >= 0

    def same(self, other: typing.Union['Quantity', str]) -> bool:
        """True if `other` has the same scalar and the same units."""
        other = self._coerce(other)
        return self.scalar == other.scalar and self.units() == other.units()

    def to_string(
        self,
        target: typing.Union['Quantity', str, int]=None,
        max_decimals: int=None,
    ) -> str:
        """Create a string that `Quantity` can parse.

        Parameters
        ----------
        target : string, int, or `~quantity.Quantity`, optional
            Units to convert to before creating the string. An integer is
            the same as passing `max_decimals`. A quantity is a precision to
            round to (see `~Quantity.to_prec`).

        max_decimals : int, optional
            The maximum number of digits after the decimal point. The default
            comes from the ``[display]`` section of the configuration file,
            where an empty value means full precision.
        """
        if _is_number(target):
            target, max_decimals = None, target
        if isinstance(target, Quantity):
            return self.to_prec(target).to_string(max_decimals=max_decimals)
        if max_decimals is None:
            max_decimals = environment.get('display').getint('max_decimals')
        result = self.to(target)
        scalar = result.scalar
        if max_decimals is not None:
            scalar = numerical.round_to(scalar, max_decimals)
        return formatting.default_formatter(scalar, result.units())

    def format(
        self,
        target: typing.Union[str, formatting.Formatter]=None,
        formatter: formatting.Formatter=None,
    ) -> str:
        """Convert to `target` units, then apply `formatter`.

        Parameters
        ----------
        target : string or callable, optional
            The target units. If this is callable, it is the formatter and
            the units stay the same.

        formatter : callable, optional
            A function that takes the scalar and the units string and returns
            a string. The default is `Quantity.formatter`.
        """
        if callable(target):
            target, formatter = None, target
        formatter = formatter or type(self).formatter
        result = self.to(target)
        return formatter(result.scalar, result.units())

    def _display_string(self) -> str:
        return self.to_string()

    def __float__(self) -> float:
        return self.to_float()

    def __hash__(self) -> int:
        return hash((self.base_scalar, self.signature))

    def __eq__(self, other) -> bool:
        """True if `other` is equal after conversion.

        Quantities with incompatible units are never equal.
        """
        if not _is_source(other):
            return NotImplemented
        try:
            return self.eq(other)
        except (errors.IncompatibleUnitsError, errors.ParseError):
            return False

    def __lt__(self, other) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other):
        if not _is_source(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).add(self)

    def __sub__(self, other):
        if not _is_source(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other):
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).sub(self)

    def __mul__(self, other):
        if not _is_source(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other):
        if _is_number(other):
            return self.mul(other)
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).mul(self)

    def __truediv__(self, other):
        if not _is_source(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other):
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).div(self)

    def __pow__(self, exponent: int):
        """Raise to an integral power by repeated multiplication."""
        if isinstance(exponent, bool) or not isinstance(
            exponent, numbers.Integral
        ):
            return NotImplemented
        if exponent == 0:
            return type(self)(1)
        result = self
        for _ in range(abs(exponent) - 1):
            result = result.mul(self)
        return result if exponent > 0 else result.inverse()

    def __neg__(self):
        return self.from_parts(-self.scalar, self.numerator, self.denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.from_parts(
            abs(self.scalar),
            self.numerator,
            self.denominator,
        )


_guarded = iterables.Guard(Quantity).catch(errors.QuantityError)


def parse(string: str) -> typing.Optional[Quantity]:
    """Create a quantity from `string`, or return ``None`` on failure.

    Raises
    ------
    TypeError
        `string` is not a string.
    """
    if not isinstance(string, str):
        raise TypeError(f"Argument should be a string, not {type(string)}")
    return _guarded.call(string)


def swift_converter(source: str, target: str) -> conversion.Converter:
    """Create a fast function that converts numbers between units.

    The function skips creating intermediate quantities except when
    converting temperatures.

    Examples
    --------
    >>> convert = swift_converter('m/h', 'ft/s')
    >>> round(convert(2500), 6)
    2.278361
    >>> [round(v, 6) for v in convert([2500, 5000])]
    [2.278361, 4.556722]
    """
    return conversion.build_converter(Quantity(source), Quantity(target))
