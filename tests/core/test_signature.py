from mensura.core import definitions
from mensura.core import signature


UNITY = definitions.UNITY_ARRAY


def test_compute():
    """Test the signature of base-unit fractions."""
    cases = {
        (('<meter>',), UNITY): 1,
        (('<meter>', '<meter>'), UNITY): 2,
        (('<meter>',), ('<second>',)): -19,
        (UNITY, ('<second>',)): -20,
        (('<temp-K>',), UNITY): 400,
        (('<kilogram>',), UNITY): 8000,
        (('<kilogram>', '<meter>'), ('<second>', '<second>')): 7961,
        (UNITY, UNITY): 0,
    }
    for (numerator, denominator), expected in cases.items():
        assert signature.compute(numerator, denominator) == expected


def test_inert_tokens():
    """Counting units and prefixes should not change the signature."""
    assert signature.compute(('<each>',), UNITY) == 0
    assert signature.compute(('<each>', '<meter>'), UNITY) == 1
    assert signature.compute(('<kilo>', '<meter>'), UNITY) == 1
    assert signature.compute(('<percent>',), UNITY) == 0


def test_vector():
    """Test the net exponent of each dimension."""
    exponents = signature.vector(('<meter>', '<meter>'), ('<second>',))
    assert len(exponents) == len(signature.DIMENSIONS)
    assert exponents[:3] == [2, -1, 0]
    assert not any(exponents[3:])


def test_decode():
    """Decoding should invert computing."""
    cases = {
        0: {},
        1: {'length': 1},
        -19: {'length': 1, 'time': -1},
        7961: {'length': 1, 'time': -2, 'mass': 1},
        -7997: {'length': 3, 'mass': -1},
        512000000000: {'angle': 1},
    }
    for value, expected in cases.items():
        assert signature.decode(value) == expected
