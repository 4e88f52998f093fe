from os import isatty
from sys import exit
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .util import RPNError, UnknownToken
from .machine import Machine
from .lexer import Lexer
from .history import History
from .batch import batch_evaluate


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Not persistent, on purpose. Lines only
                                    # live as long as the process.
                                    history=InMemoryHistory(),
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    SEPARATOR = '-' * 40
    # What --demo runs through batch mode.
    DEMO_EXPRESSIONS = (
        '3 4 + 5 *',
        '20 5 / 3 +',
        '9 sqrt 2 *',
        '5 fib 2 +',
    )
    QUIT = {'quit', 'exit'}

    def show(self):
        '''
        Print the stack, top first.
        '''
        stack = self.machine.peekstack()
        if not stack:
            print('Stack is empty')
        else:
            print('Stack (top to bottom):', *stack)

    def clear(self):
        self.machine.clrstack()
        print('Stack cleared')

    def showhistory(self):
        if not self.history:
            print('History is empty')
            return
        print('History:')
        print(self.SEPARATOR)
        for line in self.history.lines():
            print(line)
        print(self.SEPARATOR)

    def clearhistory(self):
        self.history.clear()
        print('History cleared')

    def debugon(self):
        self.machine.setdebug(True)
        print('Debug mode on')

    def debugoff(self):
        self.machine.setdebug(False)
        print('Debug mode off')

    def report(self, error):
        '''
        Tell the user an expression failed. Never fatal.
        '''
        print(error.args[0], file=sys.stderr)
        logger.debug('evaluation failed', exc_info=error)

    def evaluate(self, line):
        '''
        Evaluate one expression, print and record its result.
        '''
        try:
            result = self.machine.evaluate(line)
        except RPNError as e:
            self.report(e)
            return None
        self.history.append(line, result)
        print('Result:', result)
        return result

    def executor(self):
        '''
        Run machine (RPN calculator), one command or expression per line.
        '''
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            if line in self.QUIT:
                break
            command = self.commands.get(line)
            if command is not None:
                command()
            else:
                self.evaluate(line)

    def _batch(self, expressions):
        print('Evaluating {} expression(s):'.format(len(expressions)))
        print(self.SEPARATOR)
        outcomes = batch_evaluate(self.machine, expressions, self.history)
        for outcome in outcomes:
            print(outcome)
        print(self.SEPARATOR)
        return outcomes

    def batcher(self):
        '''
        Evaluate every line in isolation, reporting failures inline.
        '''
        return self._batch([line.strip()
                            for line
                            in self.args.expressions
                            if line.strip()])

    def demo(self):
        '''
        Walk through what the calculator can do.
        '''
        for title, expression in [('Basic arithmetic', '5 2 + 3 *'),
                                  ('Square root', '16 sqrt'),
                                  ('Fibonacci', '10 fib')]:
            print('{}:'.format(title))
            self.machine.clrstack()
            try:
                print(expression, '=', self.machine.evaluate(expression))
            except RPNError as e:
                self.report(e)
        self.machine.clrstack()
        print('Batch:')
        self._batch(list(self.DEMO_EXPRESSIONS))

    def dumper(self):
        '''
        Dump every token's kind, text, and arity.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(token)>\t<arity>')
        for line in self.args.expressions:
            for token in lexer.tokenize(line):
                try:
                    groups = lexer.classify(token)
                except UnknownToken:
                    print('unknown', repr(token), None, sep='\t')
                    continue
                arity = (self.machine.arity(token)
                         if 'operator' in groups
                         else None)
                print(*groups.keys(), repr(token), arity, sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.machine = Machine()
        self.history = History()
        self.commands = {
            'clear': self.clear,
            'show': self.show,
            'history': self.showhistory,
            'clearhist': self.clearhistory,
            'debug on': self.debugon,
            'debug off': self.debugoff,
        }
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks of errors')
        self.argument_parser.add_argument('-d', '--debug',
                                          action='store_true',
                                          help='start with debug mode on')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-b', '--batch', self.batcher),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        main_groups.add_argument('--demo',
                                 action='store_const',
                                 const=self.demo,
                                 dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def _configure_logging(self):
        logging.basicConfig(stream=sys.stderr,
                            format='%(message)s',
                            level=(logging.DEBUG
                                   if self.args.verbose
                                   else logging.INFO))

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        self._configure_logging()
        # Traces are what debug mode is for; don't hide them behind -v.
        self.machine.sink = logger.info
        self.machine.setdebug(self.args.debug)
        if self.args.expressions is sys.stdin and \
           self.args.action not in (self.demo, self.raw_grammar):
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
