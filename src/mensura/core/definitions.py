"""The registry of named units and prefixes.

Every unit has a canonical token (for example, ``'<meter>'``), one or more
aliases that the parser recognizes, a scalar factor, and an equivalent
representation in terms of other units. Prefixes have a canonical token,
aliases, and a scalar factor.
"""

import logging
import numbers
import typing

from mensura.core import errors
from mensura.core import iterables
from mensura.core import kinds


LOGGER = logging.getLogger(__name__)


UNITY = '<1>'
"""The token that represents a dimensionless unit."""


UNITY_ARRAY = (UNITY,)
"""The token sequence of a dimensionless unit."""


BASE_UNITS = (
    '<meter>',
    '<kilogram>',
    '<second>',
    '<mole>',
    '<ampere>',
    '<radian>',
    '<kelvin>',
    '<temp-K>',
    '<byte>',
    '<dollar>',
    '<candela>',
    '<each>',
    '<steradian>',
    '<decibel>',
)
"""Units that do not reduce to any other units."""


_prefixes = {
    '<googol>': {'aliases': ('googol',), 'scalar': 1e+100},
    '<kibi>': {'aliases': ('Ki', 'Kibi', 'kibi'), 'scalar': 1024},
    '<mebi>': {'aliases': ('Mi', 'Mebi', 'mebi'), 'scalar': 1048576},
    '<gibi>': {'aliases': ('Gi', 'Gibi', 'gibi'), 'scalar': 1073741824},
    '<tebi>': {'aliases': ('Ti', 'Tebi', 'tebi'), 'scalar': 1099511627776},
    '<pebi>': {'aliases': ('Pi', 'Pebi', 'pebi'), 'scalar': 1125899906842624},
    '<exi>': {'aliases': ('Ei', 'Exi', 'exi'), 'scalar': 1152921504606847000},
    '<zebi>': {'aliases': ('Zi', 'Zebi', 'zebi'), 'scalar': 1.1805916207174113e+21},
    '<yebi>': {'aliases': ('Yi', 'Yebi', 'yebi'), 'scalar': 1.2089258196146292e+24},
    '<yotta>': {'aliases': ('Y', 'Yotta', 'yotta'), 'scalar': 1e+24},
    '<zetta>': {'aliases': ('Z', 'Zetta', 'zetta'), 'scalar': 1e+21},
    '<exa>': {'aliases': ('E', 'Exa', 'exa'), 'scalar': 1000000000000000000},
    '<peta>': {'aliases': ('P', 'Peta', 'peta'), 'scalar': 1000000000000000},
    '<tera>': {'aliases': ('T', 'Tera', 'tera'), 'scalar': 1000000000000},
    '<giga>': {'aliases': ('G', 'Giga', 'giga'), 'scalar': 1000000000},
    '<mega>': {'aliases': ('M', 'Mega', 'mega'), 'scalar': 1000000},
    '<kilo>': {'aliases': ('k', 'kilo'), 'scalar': 1000},
    '<hecto>': {'aliases': ('h', 'Hecto', 'hecto'), 'scalar': 100},
    '<deca>': {'aliases': ('da', 'Deca', 'deca', 'deka'), 'scalar': 10},
    '<deci>': {'aliases': ('d', 'Deci', 'deci'), 'scalar': 0.1},
    '<centi>': {'aliases': ('c', 'Centi', 'centi'), 'scalar': 0.01},
    '<milli>': {'aliases': ('m', 'Milli', 'milli'), 'scalar': 0.001},
    '<micro>': {'aliases': ('u', 'μ', 'µ', 'Micro', 'mc', 'micro'), 'scalar': 0.000001},
    '<nano>': {'aliases': ('n', 'Nano', 'nano'), 'scalar': 1e-9},
    '<pico>': {'aliases': ('p', 'Pico', 'pico'), 'scalar': 1e-12},
    '<femto>': {'aliases': ('f', 'Femto', 'femto'), 'scalar': 1e-15},
    '<atto>': {'aliases': ('a', 'Atto', 'atto'), 'scalar': 1e-18},
    '<zepto>': {'aliases': ('z', 'Zepto', 'zepto'), 'scalar': 1e-21},
    '<yocto>': {'aliases': ('y', 'Yocto', 'yocto'), 'scalar': 1e-24},
}


_units = {
    '<1>': {
        'aliases': ('1', '<1>'),
        'scalar': 1,
        'kind': '',
    },
    '<meter>': {
        'aliases': ('m', 'meter', 'meters', 'metre', 'metres'),
        'scalar': 1,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<inch>': {
        'aliases': ('in', 'inch', 'inches', '"'),
        'scalar': 0.0254,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<foot>': {
        'aliases': ('ft', 'foot', 'feet', "'"),
        'scalar': 0.3048,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<yard>': {
        'aliases': ('yd', 'yard', 'yards'),
        'scalar': 0.9144,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<mile>': {
        'aliases': ('mi', 'mile', 'miles'),
        'scalar': 1609.344,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<naut-mile>': {
        'aliases': ('nmi', 'naut-mile'),
        'scalar': 1852,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<league>': {
        'aliases': ('league', 'leagues'),
        'scalar': 4828,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<furlong>': {
        'aliases': ('furlong', 'furlongs'),
        'scalar': 201.2,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<rod>': {
        'aliases': ('rd', 'rod', 'rods'),
        'scalar': 5.029,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<mil>': {
        'aliases': ('mil', 'mils'),
        'scalar': 0.0000254,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<angstrom>': {
        'aliases': ('ang', 'angstrom', 'angstroms'),
        'scalar': 1e-10,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<fathom>': {
        'aliases': ('fathom', 'fathoms'),
        'scalar': 1.829,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<pica>': {
        'aliases': ('pica', 'picas'),
        'scalar': 0.00423333333,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<point>': {
        'aliases': ('pt', 'point', 'points'),
        'scalar': 0.000352777778,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<redshift>': {
        'aliases': ('z', 'red-shift', 'redshift'),
        'scalar': 1.302773e+26,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<AU>': {
        'aliases': ('AU', 'astronomical-unit'),
        'scalar': 149597900000,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<light-second>': {
        'aliases': ('ls', 'light-second'),
        'scalar': 299792500,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<light-minute>': {
        'aliases': ('lmin', 'light-minute'),
        'scalar': 17987550000,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<light-year>': {
        'aliases': ('ly', 'light-year'),
        'scalar': 9460528000000000,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<parsec>': {
        'aliases': ('pc', 'parsec', 'parsecs'),
        'scalar': 30856780000000000,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<datamile>': {
        'aliases': ('DM', 'datamile'),
        'scalar': 1828.8,
        'numerator': ('<meter>',),
        'kind': 'length',
    },
    '<kilogram>': {
        'aliases': ('kg', 'kilogram', 'kilograms'),
        'scalar': 1,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<AMU>': {
        'aliases': ('u', 'AMU', 'amu'),
        'scalar': 1.660538921e-27,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<dalton>': {
        'aliases': ('Da', 'Dalton', 'Daltons', 'dalton', 'daltons'),
        'scalar': 1.660538921e-27,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<slug>': {
        'aliases': ('slug', 'slugs'),
        'scalar': 14.5939029,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<short-ton>': {
        'aliases': ('tn', 'ton', 'short-ton'),
        'scalar': 907.18474,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<metric-ton>': {
        'aliases': ('tonne', 'metric-ton'),
        'scalar': 1000,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<carat>': {
        'aliases': ('ct', 'carat', 'carats'),
        'scalar': 0.0002,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<pound>': {
        'aliases': ('lbs', 'lb', 'pound', 'pounds', '#'),
        'scalar': 0.45359237,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<ounce>': {
        'aliases': ('oz', 'ounce', 'ounces'),
        'scalar': 0.0283495231,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<gram>': {
        'aliases': ('g', 'gram', 'grams', 'gramme', 'grammes'),
        'scalar': 0.001,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<grain>': {
        'aliases': ('grain', 'grains', 'gr'),
        'scalar': 0.00006479891,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<dram>': {
        'aliases': ('dram', 'drams', 'dr'),
        'scalar': 0.0017718452,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<stone>': {
        'aliases': ('stone', 'stones', 'st'),
        'scalar': 6.35029318,
        'numerator': ('<kilogram>',),
        'kind': 'mass',
    },
    '<hectare>': {
        'aliases': ('hectare',),
        'scalar': 10000,
        'numerator': ('<meter>', '<meter>'),
        'kind': 'area',
    },
    '<acre>': {
        'aliases': ('acre', 'acres'),
        'scalar': 4046.85642,
        'numerator': ('<meter>', '<meter>'),
        'kind': 'area',
    },
    '<sqft>': {
        'aliases': ('sqft',),
        'scalar': 1,
        'numerator': ('<foot>', '<foot>'),
        'kind': 'area',
    },
    '<liter>': {
        'aliases': ('l', 'L', 'liter', 'liters', 'litre', 'litres'),
        'scalar': 0.001,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<gallon>': {
        'aliases': ('gal', 'gallon', 'gallons'),
        'scalar': 0.0037854118,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<gallon-imp>': {
        'aliases': ('galimp', 'gallon-imp', 'gallons-imp'),
        'scalar': 0.00454609,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<quart>': {
        'aliases': ('qt', 'quart', 'quarts'),
        'scalar': 0.00094635295,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<pint>': {
        'aliases': ('pt', 'pint', 'pints'),
        'scalar': 0.000473176475,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<pint-imp>': {
        'aliases': ('ptimp', 'pint-imp', 'pints-imp'),
        'scalar': 0.00056826125,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<cup>': {
        'aliases': ('cu', 'cup', 'cups'),
        'scalar': 0.000236588238,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<fluid-ounce>': {
        'aliases': ('floz', 'fluid-ounce', 'fluid-ounces'),
        'scalar': 0.0000295735297,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<fluid-ounce-imp>': {
        'aliases': ('flozimp', 'floz-imp', 'fluid-ounce-imp', 'fluid-ounces-imp'),
        'scalar': 0.0000284130625,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<tablespoon>': {
        'aliases': ('tb', 'tbsp', 'tbs', 'tablespoon', 'tablespoons'),
        'scalar': 0.0000147867648,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<teaspoon>': {
        'aliases': ('tsp', 'teaspoon', 'teaspoons'),
        'scalar': 0.00000492892161,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<bushel>': {
        'aliases': ('bu', 'bsh', 'bushel', 'bushels'),
        'scalar': 0.035239072,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<oilbarrel>': {
        'aliases': ('bbl', 'oil-barrel', 'oil-barrels'),
        'scalar': 0.158987294928,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<beerbarrel>': {
        'aliases': ('bl', 'bl-us', 'beer-barrel', 'beer-barrels'),
        'scalar': 0.1173477658,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<beerbarrel-imp>': {
        'aliases': ('blimp', 'bl-imp', 'beer-barrel-imp', 'beer-barrels-imp'),
        'scalar': 0.16365924,
        'numerator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'volume',
    },
    '<kph>': {
        'aliases': ('kph',),
        'scalar': 0.277777778,
        'numerator': ('<meter>',),
        'denominator': ('<second>',),
        'kind': 'speed',
    },
    '<mph>': {
        'aliases': ('mph',),
        'scalar': 0.44704,
        'numerator': ('<meter>',),
        'denominator': ('<second>',),
        'kind': 'speed',
    },
    '<knot>': {
        'aliases': ('kt', 'kn', 'kts', 'knot', 'knots'),
        'scalar': 0.514444444,
        'numerator': ('<meter>',),
        'denominator': ('<second>',),
        'kind': 'speed',
    },
    '<fps>': {
        'aliases': ('fps',),
        'scalar': 0.3048,
        'numerator': ('<meter>',),
        'denominator': ('<second>',),
        'kind': 'speed',
    },
    '<gee>': {
        'aliases': ('gee',),
        'scalar': 9.80665,
        'numerator': ('<meter>',),
        'denominator': ('<second>', '<second>'),
        'kind': 'acceleration',
    },
    '<kelvin>': {
        'aliases': ('degK', 'kelvin'),
        'scalar': 1,
        'numerator': ('<kelvin>',),
        'kind': 'temperature',
    },
    '<celsius>': {
        'aliases': ('degC', 'celsius', 'celsius', 'centigrade'),
        'scalar': 1,
        'numerator': ('<kelvin>',),
        'kind': 'temperature',
    },
    '<fahrenheit>': {
        'aliases': ('degF', 'fahrenheit'),
        'scalar': 0.5555555555555556,
        'numerator': ('<kelvin>',),
        'kind': 'temperature',
    },
    '<rankine>': {
        'aliases': ('degR', 'rankine'),
        'scalar': 0.5555555555555556,
        'numerator': ('<kelvin>',),
        'kind': 'temperature',
    },
    '<temp-K>': {
        'aliases': ('tempK', 'temp-K'),
        'scalar': 1,
        'numerator': ('<temp-K>',),
        'kind': 'temperature',
    },
    '<temp-C>': {
        'aliases': ('tempC', 'temp-C'),
        'scalar': 1,
        'numerator': ('<temp-K>',),
        'kind': 'temperature',
    },
    '<temp-F>': {
        'aliases': ('tempF', 'temp-F'),
        'scalar': 0.5555555555555556,
        'numerator': ('<temp-K>',),
        'kind': 'temperature',
    },
    '<temp-R>': {
        'aliases': ('tempR', 'temp-R'),
        'scalar': 0.5555555555555556,
        'numerator': ('<temp-K>',),
        'kind': 'temperature',
    },
    '<second>': {
        'aliases': ('s', 'sec', 'secs', 'second', 'seconds'),
        'scalar': 1,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<minute>': {
        'aliases': ('min', 'mins', 'minute', 'minutes'),
        'scalar': 60,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<hour>': {
        'aliases': ('h', 'hr', 'hrs', 'hour', 'hours'),
        'scalar': 3600,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<day>': {
        'aliases': ('d', 'day', 'days'),
        'scalar': 86400,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<week>': {
        'aliases': ('wk', 'week', 'weeks'),
        'scalar': 604800,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<fortnight>': {
        'aliases': ('fortnight', 'fortnights'),
        'scalar': 1209600,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<year>': {
        'aliases': ('y', 'yr', 'year', 'years', 'annum'),
        'scalar': 31556926,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<decade>': {
        'aliases': ('decade', 'decades'),
        'scalar': 315569260,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<century>': {
        'aliases': ('century', 'centuries'),
        'scalar': 3155692600,
        'numerator': ('<second>',),
        'kind': 'time',
    },
    '<pascal>': {
        'aliases': ('Pa', 'pascal', 'Pascal'),
        'scalar': 1,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<bar>': {
        'aliases': ('bar', 'bars'),
        'scalar': 100000,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<mmHg>': {
        'aliases': ('mmHg',),
        'scalar': 133.322368,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<inHg>': {
        'aliases': ('inHg',),
        'scalar': 3386.3881472,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<torr>': {
        'aliases': ('torr',),
        'scalar': 133.322368,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<atm>': {
        'aliases': ('atm', 'ATM', 'atmosphere', 'atmospheres'),
        'scalar': 101325,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<psi>': {
        'aliases': ('psi',),
        'scalar': 6894.76,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<cmh2o>': {
        'aliases': ('cmH2O', 'cmh2o'),
        'scalar': 98.0638,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<inh2o>': {
        'aliases': ('inH2O', 'inh2o'),
        'scalar': 249.082052,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>', '<second>'),
        'kind': 'pressure',
    },
    '<poise>': {
        'aliases': ('P', 'poise'),
        'scalar': 0.1,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<second>'),
        'kind': 'viscosity',
    },
    '<stokes>': {
        'aliases': ('St', 'stokes'),
        'scalar': 0.0001,
        'numerator': ('<meter>', '<meter>'),
        'denominator': ('<second>',),
        'kind': 'viscosity',
    },
    '<mole>': {
        'aliases': ('mol', 'mole'),
        'scalar': 1,
        'numerator': ('<mole>',),
        'kind': 'substance',
    },
    '<molar>': {
        'aliases': ('M', 'molar'),
        'scalar': 1000,
        'numerator': ('<mole>',),
        'denominator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'concentration',
    },
    '<wtpercent>': {
        'aliases': ('wt%', 'wtpercent'),
        'scalar': 10,
        'numerator': ('<kilogram>',),
        'denominator': ('<meter>', '<meter>', '<meter>'),
        'kind': 'concentration',
    },
    '<katal>': {
        'aliases': ('kat', 'katal', 'Katal'),
        'scalar': 1,
        'numerator': ('<mole>',),
        'denominator': ('<second>',),
        'kind': 'activity',
    },
    '<unit>': {
        'aliases': ('U', 'enzUnit', 'unit'),
        'scalar': 1.6667e-15,
        'numerator': ('<mole>',),
        'denominator': ('<second>',),
        'kind': 'activity',
    },
    '<farad>': {
        'aliases': ('F', 'farad', 'Farad'),
        'scalar': 1,
        'numerator': ('<second>', '<second>', '<second>', '<second>', '<ampere>', '<ampere>'),
        'denominator': ('<meter>', '<meter>', '<kilogram>'),
        'kind': 'capacitance',
    },
    '<coulomb>': {
        'aliases': ('C', 'coulomb', 'Coulomb'),
        'scalar': 1,
        'numerator': ('<ampere>', '<second>'),
        'kind': 'charge',
    },
    '<Ah>': {
        'aliases': ('Ah',),
        'scalar': 3600,
        'numerator': ('<ampere>', '<second>'),
        'kind': 'charge',
    },
    '<ampere>': {
        'aliases': ('A', 'Ampere', 'ampere', 'amp', 'amps'),
        'scalar': 1,
        'numerator': ('<ampere>',),
        'kind': 'current',
    },
    '<siemens>': {
        'aliases': ('S', 'Siemens', 'siemens'),
        'scalar': 1,
        'numerator': ('<second>', '<second>', '<second>', '<ampere>', '<ampere>'),
        'denominator': ('<kilogram>', '<meter>', '<meter>'),
        'kind': 'conductance',
    },
    '<henry>': {
        'aliases': ('H', 'Henry', 'henry'),
        'scalar': 1,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>', '<ampere>', '<ampere>'),
        'kind': 'inductance',
    },
    '<volt>': {
        'aliases': ('V', 'Volt', 'volt', 'volts'),
        'scalar': 1,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>', '<second>', '<ampere>'),
        'kind': 'potential',
    },
    '<ohm>': {
        'aliases': ('Ohm', 'ohm', 'Ω', 'Ω'),
        'scalar': 1,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>', '<second>', '<ampere>', '<ampere>'),
        'kind': 'resistance',
    },
    '<weber>': {
        'aliases': ('Wb', 'weber', 'webers'),
        'scalar': 1,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>', '<ampere>'),
        'kind': 'magnetism',
    },
    '<tesla>': {
        'aliases': ('T', 'tesla', 'teslas'),
        'scalar': 1,
        'numerator': ('<kilogram>',),
        'denominator': ('<second>', '<second>', '<ampere>'),
        'kind': 'magnetism',
    },
    '<gauss>': {
        'aliases': ('G', 'gauss'),
        'scalar': 0.0001,
        'numerator': ('<kilogram>',),
        'denominator': ('<second>', '<second>', '<ampere>'),
        'kind': 'magnetism',
    },
    '<maxwell>': {
        'aliases': ('Mx', 'maxwell', 'maxwells'),
        'scalar': 1e-8,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>', '<ampere>'),
        'kind': 'magnetism',
    },
    '<oersted>': {
        'aliases': ('Oe', 'oersted', 'oersteds'),
        'scalar': 79.57747154594767,
        'numerator': ('<ampere>',),
        'denominator': ('<meter>',),
        'kind': 'magnetism',
    },
    '<joule>': {
        'aliases': ('J', 'joule', 'Joule', 'joules'),
        'scalar': 1,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'energy',
    },
    '<erg>': {
        'aliases': ('erg', 'ergs'),
        'scalar': 1e-7,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'energy',
    },
    '<btu>': {
        'aliases': ('BTU', 'btu', 'BTUs'),
        'scalar': 1055.056,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'energy',
    },
    '<calorie>': {
        'aliases': ('cal', 'calorie', 'calories'),
        'scalar': 4.184,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'energy',
    },
    '<Calorie>': {
        'aliases': ('Cal', 'Calorie', 'Calories'),
        'scalar': 4184,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'energy',
    },
    '<therm-US>': {
        'aliases': ('th', 'therm', 'therms', 'Therm', 'therm-US'),
        'scalar': 105480400,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'energy',
    },
    '<Wh>': {
        'aliases': ('Wh',),
        'scalar': 3600,
        'numerator': ('<meter>', '<meter>', '<kilogram>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'energy',
    },
    '<newton>': {
        'aliases': ('N', 'Newton', 'newton'),
        'scalar': 1,
        'numerator': ('<kilogram>', '<meter>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'force',
    },
    '<dyne>': {
        'aliases': ('dyn', 'dyne'),
        'scalar': 0.00001,
        'numerator': ('<kilogram>', '<meter>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'force',
    },
    '<pound-force>': {
        'aliases': ('lbf', 'pound-force'),
        'scalar': 4.448222,
        'numerator': ('<kilogram>', '<meter>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'force',
    },
    '<hertz>': {
        'aliases': ('Hz', 'hertz', 'Hertz'),
        'scalar': 1,
        'numerator': ('<1>',),
        'denominator': ('<second>',),
        'kind': 'frequency',
    },
    '<radian>': {
        'aliases': ('rad', 'radian', 'radians'),
        'scalar': 1,
        'numerator': ('<radian>',),
        'kind': 'angle',
    },
    '<degree>': {
        'aliases': ('deg', 'degree', 'degrees'),
        'scalar': 0.017453292519943295,
        'numerator': ('<radian>',),
        'kind': 'angle',
    },
    '<gradian>': {
        'aliases': ('gon', 'grad', 'gradian', 'grads'),
        'scalar': 0.015707963267948967,
        'numerator': ('<radian>',),
        'kind': 'angle',
    },
    '<steradian>': {
        'aliases': ('sr', 'steradian', 'steradians'),
        'scalar': 1,
        'numerator': ('<steradian>',),
        'kind': 'solid_angle',
    },
    '<rotation>': {
        'aliases': ('rotation',),
        'scalar': 6.283185307179586,
        'numerator': ('<radian>',),
        'kind': 'angle',
    },
    '<rpm>': {
        'aliases': ('rpm',),
        'scalar': 0.10471975511965977,
        'numerator': ('<radian>',),
        'denominator': ('<second>',),
        'kind': 'angular_velocity',
    },
    '<byte>': {
        'aliases': ('B', 'byte', 'bytes'),
        'scalar': 1,
        'numerator': ('<byte>',),
        'kind': 'information',
    },
    '<bit>': {
        'aliases': ('b', 'bit', 'bits'),
        'scalar': 0.125,
        'numerator': ('<byte>',),
        'kind': 'information',
    },
    '<Bps>': {
        'aliases': ('Bps',),
        'scalar': 1,
        'numerator': ('<byte>',),
        'denominator': ('<second>',),
        'kind': 'information_rate',
    },
    '<bps>': {
        'aliases': ('bps',),
        'scalar': 0.125,
        'numerator': ('<byte>',),
        'denominator': ('<second>',),
        'kind': 'information_rate',
    },
    '<dollar>': {
        'aliases': ('USD', 'dollar'),
        'scalar': 1,
        'numerator': ('<dollar>',),
        'kind': 'currency',
    },
    '<cents>': {
        'aliases': ('cents',),
        'scalar': 0.01,
        'numerator': ('<dollar>',),
        'kind': 'currency',
    },
    '<candela>': {
        'aliases': ('cd', 'candela'),
        'scalar': 1,
        'numerator': ('<candela>',),
        'kind': 'luminosity',
    },
    '<lumen>': {
        'aliases': ('lm', 'lumen'),
        'scalar': 1,
        'numerator': ('<candela>', '<steradian>'),
        'kind': 'luminous_power',
    },
    '<lux>': {
        'aliases': ('lux',),
        'scalar': 1,
        'numerator': ('<candela>', '<steradian>'),
        'denominator': ('<meter>', '<meter>'),
        'kind': 'illuminance',
    },
    '<watt>': {
        'aliases': ('W', 'watt', 'watts'),
        'scalar': 1,
        'numerator': ('<kilogram>', '<meter>', '<meter>'),
        'denominator': ('<second>', '<second>', '<second>'),
        'kind': 'power',
    },
    '<volt-ampere>': {
        'aliases': ('VA', 'volt-ampere'),
        'scalar': 1,
        'numerator': ('<kilogram>', '<meter>', '<meter>'),
        'denominator': ('<second>', '<second>', '<second>'),
        'kind': 'power',
    },
    '<volt-ampere-reactive>': {
        'aliases': ('var', 'Var', 'VAr', 'VAR', 'volt-ampere-reactive'),
        'scalar': 1,
        'numerator': ('<kilogram>', '<meter>', '<meter>'),
        'denominator': ('<second>', '<second>', '<second>'),
        'kind': 'power',
    },
    '<horsepower>': {
        'aliases': ('hp', 'horsepower'),
        'scalar': 745.699872,
        'numerator': ('<kilogram>', '<meter>', '<meter>'),
        'denominator': ('<second>', '<second>', '<second>'),
        'kind': 'power',
    },
    '<gray>': {
        'aliases': ('Gy', 'gray', 'grays'),
        'scalar': 1,
        'numerator': ('<meter>', '<meter>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'radiation',
    },
    '<roentgen>': {
        'aliases': ('R', 'roentgen'),
        'scalar': 0.00933,
        'numerator': ('<meter>', '<meter>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'radiation',
    },
    '<sievert>': {
        'aliases': ('Sv', 'sievert', 'sieverts'),
        'scalar': 1,
        'numerator': ('<meter>', '<meter>'),
        'denominator': ('<second>', '<second>'),
        'kind': 'radiation',
    },
    '<becquerel>': {
        'aliases': ('Bq', 'becquerel', 'becquerels'),
        'scalar': 1,
        'numerator': ('<1>',),
        'denominator': ('<second>',),
        'kind': 'radiation',
    },
    '<curie>': {
        'aliases': ('Ci', 'curie', 'curies'),
        'scalar': 37000000000,
        'numerator': ('<1>',),
        'denominator': ('<second>',),
        'kind': 'radiation',
    },
    '<cpm>': {
        'aliases': ('cpm',),
        'scalar': 0.016666666666666666,
        'numerator': ('<count>',),
        'denominator': ('<second>',),
        'kind': 'rate',
    },
    '<dpm>': {
        'aliases': ('dpm',),
        'scalar': 0.016666666666666666,
        'numerator': ('<count>',),
        'denominator': ('<second>',),
        'kind': 'rate',
    },
    '<bpm>': {
        'aliases': ('bpm',),
        'scalar': 0.016666666666666666,
        'numerator': ('<count>',),
        'denominator': ('<second>',),
        'kind': 'rate',
    },
    '<dot>': {
        'aliases': ('dot', 'dots'),
        'scalar': 1,
        'numerator': ('<each>',),
        'kind': 'resolution',
    },
    '<pixel>': {
        'aliases': ('pixel', 'px'),
        'scalar': 1,
        'numerator': ('<each>',),
        'kind': 'resolution',
    },
    '<ppi>': {
        'aliases': ('ppi',),
        'scalar': 1,
        'numerator': ('<pixel>',),
        'denominator': ('<inch>',),
        'kind': 'resolution',
    },
    '<dpi>': {
        'aliases': ('dpi',),
        'scalar': 1,
        'numerator': ('<dot>',),
        'denominator': ('<inch>',),
        'kind': 'typography',
    },
    '<cell>': {
        'aliases': ('cells', 'cell'),
        'scalar': 1,
        'numerator': ('<each>',),
        'kind': 'counting',
    },
    '<each>': {
        'aliases': ('each',),
        'scalar': 1,
        'numerator': ('<each>',),
        'kind': 'counting',
    },
    '<count>': {
        'aliases': ('count',),
        'scalar': 1,
        'numerator': ('<each>',),
        'kind': 'counting',
    },
    '<base-pair>': {
        'aliases': ('bp', 'base-pair'),
        'scalar': 1,
        'numerator': ('<each>',),
        'kind': 'counting',
    },
    '<nucleotide>': {
        'aliases': ('nt', 'nucleotide'),
        'scalar': 1,
        'numerator': ('<each>',),
        'kind': 'counting',
    },
    '<molecule>': {
        'aliases': ('molecule', 'molecules'),
        'scalar': 1,
        'numerator': ('<1>',),
        'kind': 'counting',
    },
    '<dozen>': {
        'aliases': ('doz', 'dz', 'dozen'),
        'scalar': 12,
        'numerator': ('<each>',),
        'kind': 'prefix_only',
    },
    '<percent>': {
        'aliases': ('%', 'percent'),
        'scalar': 0.01,
        'numerator': ('<1>',),
        'kind': 'prefix_only',
    },
    '<ppm>': {
        'aliases': ('ppm',),
        'scalar': 0.000001,
        'numerator': ('<1>',),
        'kind': 'prefix_only',
    },
    '<ppt>': {
        'aliases': ('ppt',),
        'scalar': 1e-9,
        'numerator': ('<1>',),
        'kind': 'prefix_only',
    },
    '<gross>': {
        'aliases': ('gr', 'gross'),
        'scalar': 144,
        'numerator': ('<each>',),
        'kind': 'prefix_only',
    },
    '<decibel>': {
        'aliases': ('dB', 'decibel', 'decibels'),
        'scalar': 1,
        'numerator': ('<decibel>',),
        'kind': 'logarithmic',
    },
}


class Prefix(typing.NamedTuple):
    """Metadata for an order-of-magnitude prefix."""

    name: str
    aliases: typing.Tuple[str, ...]
    factor: float


class UnitDefinition(typing.NamedTuple):
    """Metadata for a named unit."""

    name: str
    aliases: typing.Tuple[str, ...]
    scalar: float
    numerator: typing.Tuple[str, ...]
    denominator: typing.Tuple[str, ...]
    kind: str


class Reduction(typing.NamedTuple):
    """A unit expressed as a scalar multiple of base units."""

    scalar: float
    numerator: typing.Tuple[str, ...]
    denominator: typing.Tuple[str, ...]


Definitions = typing.Mapping[str, typing.Mapping[str, typing.Any]]


class Registry(iterables.ReprStrMixin):
    """Lookup tables built from prefix and unit definitions.

    Parameters
    ----------
    prefixes : mapping
        A mapping from prefix token to a mapping with keys ``'aliases'`` and
        ``'scalar'``.

    units : mapping
        A mapping from unit token to a mapping with keys ``'aliases'``,
        ``'scalar'``, ``'kind'``, and optionally ``'numerator'`` and
        ``'denominator'``, which default to the unity token sequence.

    base_units : iterable of strings, optional
        Tokens of units that reduce to themselves.

    Raises
    ------
    MalformedUnitDefinitionError
        A definition has a non-numeric scalar, refers to an unknown unit, or
        reduces to itself through other definitions.

    Notes
    -----
    When two definitions share an alias, the later definition wins.
    """

    def __init__(
        self,
        prefixes: Definitions,
        units: Definitions,
        base_units: typing.Iterable[str]=BASE_UNITS,
    ) -> None:
        self.base_units = tuple(base_units)
        self.prefixes: typing.Dict[str, Prefix] = {}
        self.units: typing.Dict[str, UnitDefinition] = {}
        self.prefix_map: typing.Dict[str, str] = {}
        """The prefix token for each prefix alias."""
        self.unit_map: typing.Dict[str, str] = {}
        """The unit token for each unit alias."""
        self.output_map: typing.Dict[str, str] = {}
        """The display name for each prefix or unit token."""
        for name, spec in prefixes.items():
            prefix = Prefix(
                name=name,
                aliases=_get_aliases(name, spec),
                factor=_get_scalar(name, spec),
            )
            self.prefixes[name] = prefix
            for alias in prefix.aliases:
                self._set_alias(self.prefix_map, alias, name)
            self.output_map[name] = prefix.aliases[0]
        for name, spec in units.items():
            self.units[name] = UnitDefinition(
                name=name,
                aliases=_get_aliases(name, spec),
                scalar=_get_scalar(name, spec),
                numerator=_get_terms(name, spec, 'numerator'),
                denominator=_get_terms(name, spec, 'denominator'),
                kind=spec.get('kind', ''),
            )
        for name, definition in self.units.items():
            self._validate(definition)
            for alias in definition.aliases:
                self._set_alias(self.unit_map, alias, name)
            self.output_map[name] = definition.aliases[0]
        self._reductions: typing.Dict[str, Reduction] = {}
        for name in self.units:
            self._reduce(name, ())
        LOGGER.debug(
            "Built unit registry with %d prefixes and %d units",
            len(self.prefixes), len(self.units),
        )

    def _set_alias(self, mapping: dict, alias: str, name: str) -> None:
        """Point `alias` at `name`, replacing any earlier target."""
        existing = mapping.get(alias)
        if existing is not None and existing != name:
            LOGGER.debug(
                "Alias %r refers to %s instead of %s", alias, name, existing,
            )
        mapping[alias] = name

    def _validate(self, definition: UnitDefinition) -> None:
        """Make sure every unit in `definition` is itself defined."""
        for attr in ('numerator', 'denominator'):
            for token in getattr(definition, attr):
                if token != UNITY and token not in self.units:
                    raise errors.MalformedUnitDefinitionError(
                        definition.name,
                        f"Unit {token} in {attr!r} is not recognized",
                    )

    def _reduce(self, name: str, chain: typing.Tuple[str, ...]) -> Reduction:
        """Compute and remember the base-unit form of a unit."""
        if name in self._reductions:
            return self._reductions[name]
        if name in chain:
            path = ' -> '.join(chain + (name,))
            raise errors.MalformedUnitDefinitionError(
                chain[0], f"Circular reference {path}"
            )
        if name in self.base_units:
            reduction = Reduction(1, (name,), ())
            self._reductions[name] = reduction
            return reduction
        definition = self.units[name]
        scalar = definition.scalar
        numerator = []
        denominator = []
        for token in definition.numerator:
            if token != UNITY:
                this = self._reduce(token, chain + (name,))
                scalar *= this.scalar
                numerator.extend(this.numerator)
                denominator.extend(this.denominator)
        for token in definition.denominator:
            if token != UNITY:
                this = self._reduce(token, chain + (name,))
                scalar /= this.scalar
                numerator.extend(this.denominator)
                denominator.extend(this.numerator)
        reduction = Reduction(scalar, tuple(numerator), tuple(denominator))
        self._reductions[name] = reduction
        return reduction

    def reduce(self, token: str) -> Reduction:
        """Express the unit `token` in base units.

        This follows unit definitions recursively, so a unit defined in terms
        of other derived units (e.g., square feet) reduces fully.
        """
        if token not in self._reductions:
            raise errors.UnrecognizedUnitError(token)
        return self._reductions[token]

    def is_prefix(self, token: str) -> bool:
        """True if `token` is a prefix token."""
        return token in self.prefixes

    def kind_of(self, token: str) -> typing.Optional[str]:
        """The kind of unit that `token` represents, if any."""
        definition = self.units.get(token)
        if definition is not None:
            return definition.kind

    def get_units(self, kind: str=None) -> typing.List[str]:
        """The names of all units, or of all units of a given kind.

        Names are unit tokens without their enclosing angle brackets, sorted
        case-insensitively.

        Raises
        ------
        UnrecognizedKindError
            `kind` is not one of the kinds from `~kinds.get_kinds`.
        """
        if kind is None:
            names = [
                name for name, definition in self.units.items()
                if definition.kind not in {'', 'prefix'}
            ]
        elif kind not in kinds.get_kinds():
            raise errors.UnrecognizedKindError(kind)
        else:
            names = [
                name for name, definition in self.units.items()
                if definition.kind == kind
            ]
        return sorted((name[1:-1] for name in names), key=str.lower)

    def get_aliases(self, name: str) -> typing.List[str]:
        """All aliases of the unit that has `name` as an alias."""
        if name not in self.unit_map:
            raise errors.UnrecognizedUnitError(name)
        return list(self.units[self.unit_map[name]].aliases)

    def _display_string(self) -> str:
        return f"{len(self.prefixes)} prefixes, {len(self.units)} units"


def _get_aliases(name: str, spec: typing.Mapping) -> typing.Tuple[str, ...]:
    """Extract and check the aliases in a raw definition."""
    aliases = spec.get('aliases')
    if (
        isinstance(aliases, str)
        or not isinstance(aliases, typing.Iterable)
        or not aliases
        or not all(isinstance(alias, str) for alias in aliases)
    ):
        raise errors.MalformedUnitDefinitionError(
            name, "'aliases' must be a non-empty sequence of strings"
        )
    return tuple(aliases)


def _get_scalar(name: str, spec: typing.Mapping) -> float:
    """Extract and check the scalar in a raw definition."""
    scalar = spec.get('scalar')
    if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
        raise errors.MalformedUnitDefinitionError(
            name, "'scalar' must be a number"
        )
    return float(scalar)


def _get_terms(
    name: str,
    spec: typing.Mapping,
    key: str,
) -> typing.Tuple[str, ...]:
    """Extract and check a numerator or denominator in a raw definition."""
    terms = spec.get(key, UNITY_ARRAY)
    if (
        isinstance(terms, str)
        or not isinstance(terms, typing.Iterable)
        or not all(isinstance(term, str) for term in terms)
    ):
        raise errors.MalformedUnitDefinitionError(
            name, f"{key!r} must be a sequence of unit tokens"
        )
    return tuple(terms) or UNITY_ARRAY


REGISTRY = Registry(_prefixes, _units)
"""The default registry of prefixes and units."""


TEMPERATURES = ('<temp-K>', '<temp-C>', '<temp-F>', '<temp-R>')
"""Tokens of units of absolute temperature."""


DEGREES = ('<kelvin>', '<celsius>', '<fahrenheit>', '<rankine>')
"""Tokens of units of temperature difference."""


def get_units(kind: str=None) -> typing.List[str]:
    """The names of all known units, or of all units of a given kind."""
    return REGISTRY.get_units(kind)


def get_aliases(name: str) -> typing.List[str]:
    """All aliases of the unit that has `name` as an alias."""
    return REGISTRY.get_aliases(name)


def is_prefix(token: str) -> bool:
    """True if `token` is a known prefix token."""
    return REGISTRY.is_prefix(token)
