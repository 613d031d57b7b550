import logging
import threading

import numpy
import pytest

from mensura.core import conversion
from mensura.core import definitions
from mensura.core import errors
from mensura.core.quantity import Quantity


UNITY = definitions.UNITY_ARRAY


def test_to_base_units():
    """Test reducing unit fractions to base units."""
    cases = {
        (('<kilo>', '<meter>'), UNITY): (1e3, ('<meter>',), UNITY),
        (('<sqft>',), UNITY): (0.09290304, ('<meter>', '<meter>'), UNITY),
        (('<meter>',), ('<hour>',)): (1 / 3600, ('<meter>',), ('<second>',)),
        (('<ppi>',), UNITY): (1 / 0.0254, ('<each>',), ('<meter>',)),
        (('<cpm>',), UNITY): (1 / 60, ('<each>',), ('<second>',)),
        (UNITY, UNITY): (1.0, UNITY, UNITY),
    }
    for (numerator, denominator), expected in cases.items():
        scalar, num, den = conversion.to_base_units(numerator, denominator)
        assert scalar == pytest.approx(expected[0])
        assert num == expected[1]
        assert den == expected[2]


def test_to_base_units_unknown():
    """An unknown token should raise an exception."""
    with pytest.raises(errors.UnrecognizedUnitError):
        conversion.to_base_units(('<furlongs>',), UNITY)


def test_base_unit_cache(cache: conversion.BaseUnitCache, caplog):
    """Base-unit reductions should be computed once per unit string."""
    caplog.set_level(logging.DEBUG, logger='mensura.core.conversion')
    result = conversion.to_base(Quantity('2 km'), cache)
    assert result.same(Quantity('2000 m'))
    assert list(cache) == ['km']
    assert cache['km'].scalar == 1e3
    assert caplog.text.count('Computing base units') == 1
    conversion.to_base(Quantity('5 km'), cache)
    assert caplog.text.count('Computing base units') == 1


def test_disabled_base_unit_cache():
    """A disabled cache should still produce correct results."""
    cache = conversion.BaseUnitCache(enabled=False)
    result = conversion.to_base(Quantity('3 ft'), cache)
    assert result.scalar == pytest.approx(0.9144)
    assert result.units() == 'm'
    assert len(cache) == 0


def test_base_unit_cache_threads(cache: conversion.BaseUnitCache):
    """Threads reducing the same units should agree on the result."""
    barrier = threading.Barrier(8)
    results = []
    conversions = []
    shared = Quantity('72 km/h')
    def work():
        barrier.wait()
        for _ in range(50):
            results.append(conversion.to_base(Quantity('72 km/h'), cache))
            conversions.append(shared.to('ft/s'))
    threads = [threading.Thread(target=work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    assert not any(thread.is_alive() for thread in threads)
    assert len(results) == len(conversions) == 8 * 50
    assert len({(r.scalar, r.units()) for r in results}) == 1
    assert results[0].scalar == pytest.approx(20)
    assert results[0].units() == 'm/s'
    assert len({(c.scalar, c.units()) for c in conversions}) == 1
    assert conversions[0].scalar == pytest.approx(20 / 0.3048)
    assert list(cache) == ['km/h']


def test_shared_cache():
    """The module should provide a single shared cache."""
    cache = conversion.get_base_unit_cache()
    assert isinstance(cache, conversion.BaseUnitCache)
    assert conversion.get_base_unit_cache() is cache


def test_to_precision():
    """Test rounding to a multiple of another quantity."""
    cases = [
        ('5.5 ft', '2 ft', 6, 'ft'),
        ('6.3782 m', 'cm', 6.38, 'm'),
        ('1.146 MPa', '0.1 bar', 1.15, 'MPa'),
        ('7', '5', 5, ''),
    ]
    for source, precision, scalar, units in cases:
        result = conversion.to_precision(Quantity(source), Quantity(precision))
        assert result.scalar == pytest.approx(scalar)
        assert result.units() == units


def test_to_precision_errors():
    """Rounding should reject zero or mismatched precisions."""
    with pytest.raises(errors.DivideByZeroError):
        conversion.to_precision(Quantity('5 m'), Quantity('0 m'))
    with pytest.raises(errors.IncompatibleUnitsError):
        conversion.to_precision(Quantity('5'), Quantity('1 m'))
    with pytest.raises(errors.IncompatibleUnitsError):
        conversion.to_precision(Quantity('5 m'), Quantity('1 s'))


def test_convert_single_unit():
    """Only the named unit should change."""
    result = Quantity('3 m*s').convert_single_unit('m', 'ft')
    assert result.units() == 'ft*s'
    assert result.scalar == pytest.approx(3 / 0.3048)
    result = Quantity('10 kg/m').convert_single_unit('m', 'cm')
    assert result.units() == 'kg/cm'
    assert result.scalar == pytest.approx(0.1)
    result = Quantity('2 m*m').convert_single_unit('m', 'ft')
    assert result.units() == 'ft2'
    assert result.scalar == pytest.approx(2 / 0.3048**2)


def test_convert_single_unit_prefixed():
    """A unit that follows a prefix should convert and keep the prefix."""
    result = Quantity('3 km*s').convert_single_unit('m', 'ft')
    assert result.numerator == ('<kilo>', '<foot>', '<second>')
    assert result.units() == 'kft*s'
    assert result.scalar == pytest.approx(3 / 0.3048)
    assert result.to('m*s').scalar == pytest.approx(3000)
    result = Quantity('2 N/km').convert_single_unit('m', 'ft')
    assert result.denominator == ('<kilo>', '<foot>')
    assert result.scalar == pytest.approx(2 * 0.3048)


def test_convert_single_unit_prefixed_target():
    """A prefixed target should replace the prefix of each occurrence."""
    result = Quantity('4 km*m').convert_single_unit('m', 'cm')
    assert result.numerator == ('<centi>', '<meter>', '<centi>', '<meter>')
    assert result.scalar == pytest.approx(4e7)
    result = Quantity('5 kg/km').convert_single_unit('m', 'cm')
    assert result.denominator == ('<centi>', '<meter>')
    assert result.scalar == pytest.approx(5e-5)


def test_convert_single_unit_errors():
    """Units with denominators cannot take part."""
    q = Quantity('3 m*s')
    with pytest.raises(errors.UnitMismatchError):
        q.convert_single_unit('m/s', 'ft')
    with pytest.raises(errors.UnitMismatchError):
        q.convert_single_unit('m', 'ft/s')


def test_build_converter():
    """Test the functions that convert bare numbers."""
    convert = conversion.build_converter(Quantity('m/h'), Quantity('ft/s'))
    expected = 2500 / 3600 / 0.3048
    assert convert(2500) == pytest.approx(expected)
    values = convert([2500, 5000])
    assert isinstance(values, list)
    assert values == pytest.approx([expected, 2 * expected])
    array = convert(numpy.array([[2500], [5000]]))
    assert isinstance(array, numpy.ndarray)
    assert array.shape == (2, 1)
    assert numpy.allclose(array, [[expected], [2 * expected]])


def test_identity_converter():
    """Equal units should not change values."""
    convert = conversion.build_converter(Quantity('m'), Quantity('100 cm'))
    assert convert(5) == 5
    assert convert([1, 2]) == [1, 2]
