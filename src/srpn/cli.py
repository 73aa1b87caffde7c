import sys
from argparse import ArgumentParser, OPTIONAL

from prompt_toolkit import PromptSession

from .machine import Machine
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Not persisted between runs, like the
                                    # stack itself.
                                    history=None,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to SRPN calculator.

    One session per run: every line, from -e or from input, goes to the
    same machine.
    '''

    DEFAULT_PROMPT = '> '

    def dump(self, lines):
        '''
        Dump every token: kind, text and value.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(text)>\t<value>')
        for line in lines:
            line, _ = lexer.echoes(line)
            for token in lexer.lex(line):
                value = token.value
                print(token.kind.value,
                      repr(token.text),
                      getattr(value, 'name', value),
                      sep='\t')

    def execute(self, lines):
        '''
        Run machine (SRPN calculator).
        '''
        machine = Machine(verbose=self.args.verbose)
        for line in lines:
            machine.execute(line)

    def grammar(self, lines):
        '''
        Print the lexer's grammar. Input is ignored.
        '''
        print(Lexer.grammar)

    MODES = {
        'execute': execute,
        'dump': dump,
        'grammar': grammar,
    }

    def lines(self):
        '''
        Where lines come from: -e first, else a prompt, else plain stdin.

        Prompting happens when asked for, or when both ends are a terminal.
        '''
        if self.args.expressions:
            return self.args.expressions
        if self.args.mode == 'grammar':
            return []
        if self.args.prompt or sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(self.args.prompt or self.DEFAULT_PROMPT)
        return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        parser = ArgumentParser(
            prog='srpn',
            description='Saturating 32-bit RPN calculator')
        parser.add_argument('-v', '--verbose', action='store_true',
                            help='also report each error, and its token, '
                                 'on stderr')
        source = parser.add_mutually_exclusive_group()
        source.add_argument('-e', '--expression', action='append',
                            dest='expressions', metavar='LINE',
                            help='evaluate LINE instead of reading input; '
                                 'repeatable')
        source.add_argument('-p', '--prompt', nargs=OPTIONAL,
                            const=self.DEFAULT_PROMPT,
                            help='prompt for input even when not on a '
                                 'terminal')
        modes = parser.add_mutually_exclusive_group()
        modes.add_argument('-D', '--dump', action='store_const',
                           dest='mode', const='dump',
                           help='print tokens instead of evaluating')
        modes.add_argument('-G', '--raw-grammar', action='store_const',
                           dest='mode', const='grammar',
                           help='print the lexer grammar')
        parser.set_defaults(mode='execute')
        self.argument_parser = parser

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's. Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        try:
            type(self).MODES[self.args.mode](self, self.lines())
        except KeyboardInterrupt:
            return 1
        return 0
