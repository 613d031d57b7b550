import pytest

from mensura.core import algebra
from mensura.core import definitions


UNITY = definitions.UNITY_ARRAY


def test_combine_numerators():
    """Repeated units should collect in order of first appearance."""
    num, den, scale = algebra.clean_terms(
        ('<meter>',), UNITY, ('<meter>',), UNITY,
    )
    assert num == ('<meter>', '<meter>')
    assert den == UNITY
    assert scale == 1
    num, den, scale = algebra.clean_terms(
        ('<second>', '<meter>'), UNITY, ('<second>',), UNITY,
    )
    assert num == ('<second>', '<second>', '<meter>')


def test_cancel_units():
    """Units with a net exponent of zero should disappear."""
    cases = [
        (('<meter>',), UNITY, UNITY, ('<meter>',)),
        (('<meter>',), ('<second>',), ('<second>',), ('<meter>',)),
        (UNITY, UNITY, UNITY, UNITY),
    ]
    for args in cases:
        num, den, scale = algebra.clean_terms(*args)
        assert num == UNITY
        assert den == UNITY
        assert scale == 1


def test_mixed_prefixes():
    """The first prefix of a unit should win, with a compensating scale."""
    num, den, scale = algebra.clean_terms(
        ('<kilo>', '<meter>'), UNITY, ('<meter>',), UNITY,
    )
    assert num == ('<kilo>', '<meter>', '<kilo>', '<meter>')
    assert den == UNITY
    assert scale == pytest.approx(1e-3)
    num, den, scale = algebra.clean_terms(
        ('<kilogram>', '<meter>'), UNITY, UNITY, ('<kilo>', '<meter>'),
    )
    assert num == ('<kilogram>',)
    assert den == UNITY
    assert scale == pytest.approx(1e-3)


def test_same_prefixes():
    """Matching prefixes should not produce a scale factor."""
    num, den, scale = algebra.clean_terms(
        ('<kilo>', '<meter>'), UNITY, UNITY, ('<kilo>', '<meter>'),
    )
    assert num == UNITY
    assert den == UNITY
    assert scale == 1
