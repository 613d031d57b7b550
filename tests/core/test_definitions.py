import logging

import pytest

from mensura.core import definitions
from mensura.core import errors
from mensura.core import kinds


REGISTRY = definitions.REGISTRY


def test_alias_maps():
    """Test the lookup tables of the default registry."""
    units = {
        'm': '<meter>',
        'meters': '<meter>',
        'ft': '<foot>',
        'pt': '<pint>',
        'gr': '<gross>',
        'Hz': '<hertz>',
        'tempC': '<temp-C>',
        'degC': '<celsius>',
        '%': '<percent>',
    }
    for alias, token in units.items():
        assert REGISTRY.unit_map[alias] == token
    prefixes = {
        'k': '<kilo>',
        'm': '<milli>',
        'u': '<micro>',
        'Ki': '<kibi>',
    }
    for alias, token in prefixes.items():
        assert REGISTRY.prefix_map[alias] == token


def test_output_map():
    """Each token should display as its first alias."""
    cases = {
        '<meter>': 'm',
        '<kilo>': 'k',
        '<kelvin>': 'degK',
        '<temp-K>': 'tempK',
        '<foot>': 'ft',
    }
    for token, name in cases.items():
        assert REGISTRY.output_map[token] == name


def test_prefixes():
    """Prefix definitions should carry their numerical factors."""
    assert REGISTRY.is_prefix('<kilo>')
    assert not REGISTRY.is_prefix('<meter>')
    assert REGISTRY.prefixes['<kilo>'].factor == 1e3
    assert REGISTRY.prefixes['<kibi>'].factor == 1024
    assert definitions.is_prefix('<micro>')


def test_reduce():
    """Units should reduce recursively to base units."""
    sqft = REGISTRY.reduce('<sqft>')
    assert sqft.scalar == pytest.approx(0.09290304)
    assert sqft.numerator == ('<meter>', '<meter>')
    assert sqft.denominator == ()
    newton = REGISTRY.reduce('<newton>')
    assert newton.scalar == 1
    assert sorted(newton.numerator) == ['<kilogram>', '<meter>']
    assert newton.denominator == ('<second>', '<second>')
    meter = REGISTRY.reduce('<meter>')
    assert meter == definitions.Reduction(1, ('<meter>',), ())
    with pytest.raises(errors.UnrecognizedUnitError):
        REGISTRY.reduce('<bogus>')


def test_reduce_gross():
    """A gross is 144 of anything."""
    gross = REGISTRY.reduce('<gross>')
    assert gross.scalar == 144
    assert gross.numerator == ('<each>',)


def test_get_units():
    """Test the function that lists units by kind."""
    names = definitions.get_units()
    assert 'meter' in names
    assert '1' not in names
    assert 'kilo' not in names
    assert names == sorted(names, key=str.lower)
    lengths = definitions.get_units('length')
    assert {'meter', 'foot', 'inch', 'AU'} <= set(lengths)
    assert 'second' not in lengths
    assert 'temp-C' in definitions.get_units('temperature')
    assert 'knot' in definitions.get_units('speed')
    assert definitions.get_units('unitless') == []


def test_get_units_unknown_kind():
    """Unknown kinds should raise an exception."""
    names = ('bogus', 'prefix', '', 'prefix_only', 'counting', 'rate')
    for kind in names:
        with pytest.raises(errors.UnrecognizedKindError):
            definitions.get_units(kind)


def test_get_aliases():
    """Any alias should give every alias of its unit."""
    aliases = definitions.get_aliases('m')
    assert aliases[0] == 'm'
    assert {'meter', 'meters', 'metre', 'metres'} <= set(aliases)
    assert definitions.get_aliases('meters') == aliases
    with pytest.raises(errors.UnrecognizedUnitError):
        definitions.get_aliases('bogus')


def test_get_kinds():
    """The collection of kinds should not contain repeats."""
    names = kinds.get_kinds()
    assert len(names) == len(set(names))
    assert {'length', 'speed', 'magnetism', 'unitless'} <= set(names)
    assert kinds.kind_of(-19) == 'speed'
    assert kinds.kind_of(12345) is None


def test_custom_registry(raw_definitions):
    """Test a registry built from user definitions."""
    registry = definitions.Registry(**raw_definitions)
    assert registry.unit_map['kt'] == '<knot>'
    assert registry.prefix_map['k'] == '<kilo>'
    knot = registry.reduce('<knot>')
    assert knot.scalar == pytest.approx(1852 / 3600)
    assert knot.numerator == ('<meter>',)
    assert knot.denominator == ('<second>',)
    names = ['hour', 'knot', 'meter', 'minute', 'second']
    assert registry.get_units() == names
    assert registry.get_units('time') == ['hour', 'minute', 'second']
    assert registry.kind_of('<knot>') == 'speed'
    assert registry.kind_of('<kilo>') is None


def test_malformed_definitions(raw_definitions):
    """A registry should reject malformed definitions."""
    cases = {
        'scalar': {'aliases': ('x',), 'scalar': 'big', 'kind': 'length'},
        'boolean': {'aliases': ('x',), 'scalar': True, 'kind': 'length'},
        'aliases': {'aliases': 'x', 'scalar': 1, 'kind': 'length'},
        'empty': {'aliases': (), 'scalar': 1, 'kind': 'length'},
        'terms': {
            'aliases': ('x',),
            'scalar': 1,
            'numerator': '<meter>',
            'kind': 'length',
        },
        'unknown': {
            'aliases': ('x',),
            'scalar': 1,
            'numerator': ('<furlong>',),
            'kind': 'length',
        },
    }
    for spec in cases.values():
        units = {**raw_definitions['units'], '<x>': spec}
        with pytest.raises(errors.MalformedUnitDefinitionError):
            definitions.Registry(raw_definitions['prefixes'], units)


def test_circular_definitions(raw_definitions):
    """A registry should reject units defined in terms of themselves."""
    units = {
        **raw_definitions['units'],
        '<a>': {
            'aliases': ('a',),
            'scalar': 2,
            'numerator': ('<b>',),
            'kind': 'length',
        },
        '<b>': {
            'aliases': ('b',),
            'scalar': 3,
            'numerator': ('<a>',),
            'kind': 'length',
        },
    }
    with pytest.raises(errors.MalformedUnitDefinitionError) as exc:
        definitions.Registry(raw_definitions['prefixes'], units)
    assert 'Circular' in str(exc.value)


def test_alias_collision(raw_definitions, caplog):
    """The later of two definitions with the same alias should win."""
    units = {
        **raw_definitions['units'],
        '<mile>': {
            'aliases': ('mi', 'min'),
            'scalar': 1609.344,
            'numerator': ('<meter>',),
            'kind': 'length',
        },
    }
    caplog.set_level(logging.DEBUG, logger='mensura.core.definitions')
    registry = definitions.Registry(raw_definitions['prefixes'], units)
    assert registry.unit_map['min'] == '<mile>'
    assert "'min'" in caplog.text
