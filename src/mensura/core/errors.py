"""Exceptions raised while parsing, converting, or combining quantities."""


class QuantityError(Exception):
    """Base class for errors raised by this package."""


class ParseError(QuantityError, ValueError):
    """Error when attempting to parse a string into a quantity."""

    def __init__(self, string: str, reason: str=None) -> None:
        self.string = string
        self.reason = reason

    def __str__(self) -> str:
        base = f"Could not parse {self.string!r}"
        if self.reason:
            return f"{base}: {self.reason}"
        return base


class UnrecognizedUnitError(ParseError):
    """A unit name is not in the unit registry."""

    def __init__(self, unit: str, string: str=None) -> None:
        self.unit = unit
        super().__init__(string or unit, reason=None)

    def __str__(self) -> str:
        if self.string != self.unit:
            return f"Unit not recognized: {self.unit!r} in {self.string!r}"
        return f"Unit not recognized: {self.unit!r}"


class UnrecognizedKindError(QuantityError, ValueError):
    """A unit kind is not known to this package."""

    def __init__(self, kind: str) -> None:
        self.kind = kind

    def __str__(self) -> str:
        return f"Kind not recognized: {self.kind!r}"


class IncompatibleUnitsError(QuantityError, TypeError):
    """The units of two quantities have different signatures."""

    def __init__(self, this: str, that: str) -> None:
        self.this = this
        self.that = that

    def __str__(self) -> str:
        return f"Incompatible units: {self.this!r} and {self.that!r}"


class UnitMismatchError(QuantityError, TypeError):
    """An operation requires units that this quantity does not have."""

    def __init__(self, units: str, reason: str) -> None:
        self.units = units
        self.reason = reason

    def __str__(self) -> str:
        return f"Can't use {self.units!r}: {self.reason}"


class DivideByZeroError(QuantityError, ZeroDivisionError):
    """Attempted division by zero."""

    def __str__(self) -> str:
        return "Divide by zero"


class InvalidTemperatureOperationError(QuantityError, ValueError):
    """An arithmetic operation is undefined for absolute temperatures."""

    def __init__(self, message: str) -> None:
        self.message = message

    def __str__(self) -> str:
        return self.message


class SubAbsoluteTemperatureError(QuantityError, ValueError):
    """A temperature lies below absolute zero."""

    def __init__(self, scalar: float, units: str) -> None:
        self.scalar = scalar
        self.units = units

    def __str__(self) -> str:
        return (
            "Temperatures must not be less than absolute zero:"
            f" {self.scalar} {self.units}"
        )


class MalformedUnitDefinitionError(QuantityError, TypeError):
    """A unit definition is not usable."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.name}: Invalid unit definition. {self.reason}"

