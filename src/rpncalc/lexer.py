from functools import reduce
import operator

import regex

from .util import UnknownToken
from .operators import OPERATORS


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    Tokens are whitespace separated; each token must be, in its entirety,
    either a number or an operator.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Integral part of a number
    INTEGRAL = r'''
                (?:
                    \d+
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  (?:
                      \d+
                  )
                  '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+-]?
              (?:
                  # 1, 12, 12. (notice trailing dot), 1.3
                  {INTEGRAL}
                  (?:
                      \.
                      {FRACTIONAL}?
                  )?
              |
                  # .2
                  \.
                  {FRACTIONAL}
              )
              (?:
                  # 1e3, 1E-3, but not 1e
                  [eE]
                  [+-]?
                  \d+
              )?
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)

    # Longest first, so sqrt is never mistaken for something shorter.
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape,
                                      sorted(OPERATORS,
                                             key=len,
                                             reverse=True))) + r')'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def tokenize(self, line):
        '''
        Split a line on runs of whitespace. No quoting, no escaping.
        '''
        return line.split()

    def classify(self, token):
        '''
        Return lexeme groups for a token, a number or an operator.

        Anything else is an unknown token.
        '''
        match = regex.fullmatch(type(self).LEXEME, token,
                                flags=type(self).FLAGS)
        if match is None:
            raise UnknownToken(token)
        return self.matchedgroups(match)

    def lex(self, line):
        '''
        Take a line and yield all lexemes, left to right.

        Classifies lazily: a bad token only raises once everything before it
        has been consumed.
        '''
        for token in self.tokenize(line):
            yield self.classify(token)

    def matchedgroups(self, match):
        '''
        Return the named groups that actually matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
