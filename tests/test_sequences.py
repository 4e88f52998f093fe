'''
Fibonacci and Pascal row sum tests
'''

import math

from rpncalc.util import InvalidSequenceArgument
from rpncalc.sequences import fibonacci, pascal

from pytest import mark, raises


def test_fibonacci_base_cases():
    assert fibonacci(0.0) == 0.0
    assert fibonacci(1.0) == 1.0


def test_fibonacci_recurrence():
    for n in range(2, 80):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_known_values():
    assert [fibonacci(n) for n in range(11)] == \
        [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]
    assert fibonacci(50) == 12586269025.0


def test_fibonacci_overflows_quietly():
    assert fibonacci(2000) == math.inf


def test_pascal_small_rows():
    assert [pascal(n) for n in range(6)] == [1, 2, 4, 8, 16, 32]


def test_pascal_is_power_of_two():
    for n in range(200):
        assert math.isclose(pascal(n), 2.0 ** n, rel_tol=1e-12)


@mark.parametrize('f', [fibonacci, pascal])
@mark.parametrize('n', [-1, -0.5, 2.5, math.inf, -math.inf, math.nan])
def test_bad_index(f, n):
    with raises(InvalidSequenceArgument, match='non-negative integer'):
        f(n)


def test_error_names_sequence():
    with raises(InvalidSequenceArgument, match='Fibonacci'):
        fibonacci(-1)
    with raises(InvalidSequenceArgument, match='Pascal'):
        pascal(-1)
