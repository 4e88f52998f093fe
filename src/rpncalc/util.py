class RPNError(Exception):
    '''
    Base of every user-facing evaluation failure.

    ``args[0]`` is always the human readable message.
    '''


class InsufficientOperands(RPNError):
    pass


class EmptyStack(RPNError):
    pass


class DivisionByZero(RPNError):
    pass


class NegativeSquareRoot(RPNError):
    pass


class InvalidSequenceArgument(RPNError):
    pass


class UnknownToken(RPNError):
    def __init__(self, token):
        super().__init__('Unknown token {}'.format(repr(token)))
        self.token = token


class MalformedExpression(RPNError):
    def __init__(self, depth):
        super().__init__('Incomplete expression or excess operands '
                         '({} element(s) left on stack)'.format(depth))
        self.depth = depth
