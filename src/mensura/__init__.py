import logging

from mensura.core import environment
from mensura.core.environment import Environment
from mensura.core.errors import (
    QuantityError,
    ParseError,
    UnrecognizedUnitError,
    UnrecognizedKindError,
    IncompatibleUnitsError,
    UnitMismatchError,
    DivideByZeroError,
    InvalidTemperatureOperationError,
    SubAbsoluteTemperatureError,
    MalformedUnitDefinitionError,
)
from mensura.core.definitions import get_aliases, get_units
from mensura.core.kinds import get_kinds
from mensura.core.numerical import div_safe, mul_safe
from mensura.core.quantity import Quantity, parse, swift_converter


# read version from installed package
from importlib.metadata import version
__version__ = version("mensura")


_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(environment.get('logging').get('level', 'WARNING').upper())
