from collections import deque
import logging

from .util import EmptyStack, InsufficientOperands, MalformedExpression
from .operators import OPERATORS, ARITY
from .lexer import Lexer


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes whole expressions, or lexemes one at a time, and runs them against
    its operand stack. The stack outlives a single expression; clear it
    yourself if you don't want that.
    '''

    OPERATORS = OPERATORS

    def __init__(self, debug=False, sink=None, lexer=None):
        '''
        Create empty stack machine.

        :param debug: Trace every push and operator application.
        :param sink: Callable taking one trace line; logs at DEBUG by default.
        :param lexer: Lexer used to split and classify expressions.
        '''
        self.stack = deque()
        self.debug = debug
        self.sink = sink if sink is not None else logger.debug
        self.lexer = lexer if lexer is not None else Lexer()

    def evaluate(self, expression):
        '''
        Run a whole expression, and return the single value it leaves.

        Fails fast: on the first bad token or operator the stack is left as
        it was at that point, popped operands included.
        '''
        for lexeme in self.lexer.lex(expression):
            self.feed(lexeme)
        if len(self.stack) != 1:
            raise MalformedExpression(len(self.stack))
        return self.stack[-1]

    def feed(self, groups):
        '''
        Stack or run lexeme on machine.

        :param groups: Lexeme groups, as returned by Lexer.classify.
        '''
        if 'number' in groups:
            value = float(groups['number'])
            self._pshstack(value)
            self._trace('push {}', value)
        else:
            self._apply(groups['operator'])

    def arity(self, name):
        '''
        Return number of operands an operator pops.
        '''
        return ARITY[name]

    def _apply(self, name):
        '''
        Apply operator to stack, popping its operands and pushing its result.
        '''
        f = type(self).OPERATORS[name]
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = list(reversed(self._popstack(self.arity(name), name)))
        res = f(*args)
        self._pshstack(res)
        if len(args) == 2:
            self._trace('{} {} {} = {}', args[0], name, args[1], res)
        else:
            self._trace('{}({}) = {}', name, *args, res)

    def _trace(self, fmt, *args):
        if self.debug:
            self.sink(fmt.format(*args))

    def setdebug(self, enabled):
        '''
        Turn tracing on or off.
        '''
        self.debug = bool(enabled)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1, name=None):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            if not self.stack and n == 1:
                raise EmptyStack('Stack is empty, {} needs an operand'
                                 .format(repr(name)))
            raise InsufficientOperands(
                'Not enough operands, {} needs {} but stack has {}'
                .format(repr(name), n, len(self.stack)))
        return [self.stack.pop() for _ in range(n)]

    def peekstack(self):
        '''
        Return stack contents, top of the stack first.
        '''
        return tuple(reversed(self.stack))

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def snapshot(self):
        '''
        Return a copy of the stack, bottom first, for a later restore.
        '''
        return tuple(self.stack)

    def restore(self, snapshot):
        '''
        Replace the stack with a previous snapshot.
        '''
        self.stack = deque(snapshot)
