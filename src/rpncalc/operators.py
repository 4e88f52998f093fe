'''
The closed set of operators, and what they do to their operands.

Operands come in textual order: for ``5 2 -``, left is 5 and right is 2.
'''

from inspect import signature as getsignature, Parameter
import math
import operator

from .util import DivisionByZero, NegativeSquareRoot
from .sequences import fibonacci, pascal


def divide(left, right):
    '''
    True division, refusing a zero divisor.
    '''
    if right == 0:
        raise DivisionByZero('Division by zero: {} / {}'.format(left, right))
    return left / right


def sqrt(value):
    '''
    Non-negative square root.
    '''
    if value < 0:
        raise NegativeSquareRoot(
            'Cannot take the square root of negative {}'.format(value))
    return math.sqrt(value)


def _odd(n):
    return n.is_integer() and n % 2 == 1


def power(base, exponent):
    '''
    base ** exponent, with IEEE results where math.pow would raise.

    Zero to a negative power is infinite, signed like C pow for -0 and an odd
    exponent. A negative base to a fractional power is nan. Overflow is
    infinite, negative for a negative base and an odd exponent.
    '''
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0:
            if math.copysign(1.0, base) < 0 and _odd(exponent):
                return -math.inf
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _odd(exponent):
            return -math.inf
        return math.inf


OPERATORS = {
    # Arithmetic
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': divide,
    '^': power,
    'sqrt': sqrt,

    # Sequences
    'fib': fibonacci,
    'pascal': pascal,
}


def arity(f):
    '''
    Return number of non-default positional arguments.
    '''
    parameters = getsignature(f).parameters.values()
    positionals = [parameter
                   for parameter
                   in parameters
                   if parameter.kind in {Parameter.POSITIONAL_ONLY,
                                         Parameter.POSITIONAL_OR_KEYWORD} and
                      parameter.default is Parameter.empty]
    return len(positionals)


ARITY = {name: arity(f) for name, f in OPERATORS.items()}
