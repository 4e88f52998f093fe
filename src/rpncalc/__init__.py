'''
RPN calculator.

Plain old arithmetic, square roots, powers, and two integer sequences
(Fibonacci numbers and Pascal's triangle row sums), on a stack of floats.
Not intended to be Turing-complete!

    >>> Machine().evaluate('5 2 + 3 *')
    21.0

Comes with an interactive shell (clear, show, history, clearhist, debug on,
debug off, quit) and a batch mode that evaluates every expression in
isolation.
'''

from .util import (RPNError, InsufficientOperands, EmptyStack,
                   DivisionByZero, NegativeSquareRoot,
                   InvalidSequenceArgument, UnknownToken,
                   MalformedExpression)
from .lexer import Lexer
from .machine import Machine
from .history import History, HistoryEntry
from .batch import batch_evaluate, BatchOutcome
from .cli import CLI


__all__ = (
    'Machine', 'Lexer', 'CLI',
    'History', 'HistoryEntry',
    'batch_evaluate', 'BatchOutcome',
    'RPNError', 'InsufficientOperands', 'EmptyStack', 'DivisionByZero',
    'NegativeSquareRoot', 'InvalidSequenceArgument',
    'UnknownToken', 'MalformedExpression',
)
