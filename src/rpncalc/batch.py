'''
Evaluate many expressions, each on a stack of its own.
'''

from collections import namedtuple
import logging

from .util import RPNError


logger = logging.getLogger(__name__)


class BatchOutcome(namedtuple('BatchOutcome',
                              ['index', 'expression', 'result', 'error'])):
    '''
    What became of one expression in a batch. Exactly one of result and error
    is set; index counts from 1.
    '''
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    def __str__(self):
        if self.ok:
            return 'Expression {}: {} = {}'.format(self.index,
                                                  self.expression,
                                                  self.result)
        return 'Expression {}: {} -> Error: {}'.format(self.index,
                                                      self.expression,
                                                      self.error)


def batch_evaluate(machine, expressions, history=None):
    '''
    Evaluate expressions in order, each starting from an empty stack.

    The machine's stack is put back the way it was after every expression,
    failed or not. Failures are reported, not raised.

    :param history: If given, successful evaluations are appended to it.
    :return: BatchOutcome list, in input order.
    '''
    outcomes = []
    for index, expression in enumerate(expressions, start=1):
        saved = machine.snapshot()
        machine.clrstack()
        try:
            result = machine.evaluate(expression)
        except RPNError as e:
            logger.debug('expression %d failed: %s', index, e.args[0])
            outcomes.append(BatchOutcome(index, expression, None, e.args[0]))
        else:
            if history is not None:
                history.append(expression, result)
            outcomes.append(BatchOutcome(index, expression, result, None))
        finally:
            machine.restore(saved)
    return outcomes
