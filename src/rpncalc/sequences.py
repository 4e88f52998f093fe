'''
Integer sequences the machine knows how to compute.

Both take the index as a float, as it comes off the stack, and answer with a
float. Neither is exact past 2**53; that's floating point for you.
'''

import math

from .util import InvalidSequenceArgument


def _index(n, what):
    '''
    Return n as an int, if n is a non-negative whole number.
    '''
    if not math.isfinite(n) or n < 0 or n != int(n):
        raise InvalidSequenceArgument(
            '{} must be a non-negative integer, not {}'.format(what, n))
    return int(n)


def fibonacci(n):
    '''
    nth Fibonacci number: fib(0) = 0, fib(1) = 1, fib(k) = fib(k-1) + fib(k-2).
    '''
    n = _index(n, 'Fibonacci index')
    a, b = 0.0, 1.0
    for _ in range(n):
        a, b = b, a + b
    return a


def pascal(n):
    '''
    Sum of row n of Pascal's triangle, i.e. 2**n, the long way round.

    Walks the row with C(n, k+1) = C(n, k) * (n - k) / (k + 1), never building
    a coefficient bigger than it has to. Not 2.0 ** n: the result carries the
    rounding of the repeated multiply/divide.
    '''
    n = _index(n, 'Pascal row')
    total = 0.0
    value = 1.0
    for k in range(n + 1):
        total += value
        value = value * (n - k) / (k + 1)
    return total
