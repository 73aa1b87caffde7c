from collections import deque
import sys

from . import arithmetic
from .lexer import Lexer, Kind, Operator, Command
from .util import SRPNError, INT_MIN, wrap_user_errors


STACK_OVERFLOW = 'Stack overflow.'
STACK_UNDERFLOW = 'Stack underflow.'
STACK_EMPTY = 'Stack empty.'
DIVIDE_BY_ZERO = 'Divide by 0.'
NEGATIVE_POWER = 'Negative power.'
UNRECOGNISED = 'Unrecognised operator or operand "{}"'


class Machine:
    '''
    Saturating 32-bit stack machine (SRPN calculator).

    Takes tokens and runs them. State lasts for the whole session: nothing
    is reset between lines.
    '''

    CAPACITY = 23

    # What the reference calculator's r command gives, in order. It is the
    # same every run, so it's a table rather than a generator.
    RANDOM_SEQUENCE = (
        1804289383, 846930886, 1681692777, 1714636915, 1957747793,
        424238335, 719885386, 1649760492, 596516649, 1189641421,
        1025202362, 1350490027, 783368690, 1102520059, 2044897763,
        1967513926, 1365180540, 1540383426, 304089172, 1303455736,
        35005211, 521595368,
    )

    def __init__(self, output=None, verbose=None, lexer=None):
        '''
        Create empty stack machine.

        :param output: File to print results and diagnostics to. stdout if
                       None.
        :param verbose: Also report every error, and its token, on stderr.
        :param lexer: Lexer to tokenize lines with.
        '''
        self.stack = deque()
        self.cursor = 0
        self.output = output
        self.verbose = verbose
        self.lexer = lexer or Lexer()

    def execute(self, line):
        '''
        Run one line of input.

        Echoes from ^= come out before anything on the line is evaluated.
        User errors are printed, never raised; the rest of the line still
        runs.
        '''
        line, digits = self.lexer.echoes(line)
        for digit in digits:
            self.print(digit)
        for token in self.lexer.lex(line):
            try:
                self.feed(token)
            except SRPNError as e:
                self.print(e.args[0])
                if self.verbose:
                    print('{!r}: {}'.format(token.text, e.args[0]),
                          *e.args[1:], file=sys.stderr)

    def feed(self, token):
        '''
        Push or run a single token.

        :raises SRPNError: on any user error; the stack is left as it was.
        '''
        if token.kind is Kind.NUMBER:
            self._pshstack(token.value)
        elif token.kind is Kind.OPERATOR:
            self.operate(token.value)
        elif token.kind is Kind.COMMAND:
            type(self).FUNCTIONS[token.value](self)
        elif token.kind is Kind.UNKNOWN:
            raise SRPNError(UNRECOGNISED.format(token.text))
        else:
            raise ValueError('Bad token kind {!r}'.format(token.kind))

    def print(self, *args):
        '''
        Print args to machine output, one per line.
        '''
        print(*args, sep='\n', file=self.output)

    def isfull(self):
        return len(self.stack) >= type(self).CAPACITY

    def _pshstack(self, value):
        '''
        Push value onto the stack, unless full.
        '''
        if self.isfull():
            raise SRPNError(STACK_OVERFLOW)
        self.stack.append(value)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise SRPNError(STACK_UNDERFLOW)
        return [self.stack.pop() for _ in range(n)]

    def operate(self, op):
        '''
        Apply binary operator to the two topmost elements.

        Every check happens before anything is popped, so a refused
        operation leaves the stack untouched.
        '''
        if self.isfull():
            raise SRPNError(STACK_OVERFLOW)
        if len(self.stack) < 2:
            raise SRPNError(STACK_UNDERFLOW)
        a, b = self.stack[-2], self.stack[-1]
        if op is Operator.DIV and 0 in (a, b):
            # A zero dividend is refused too; the reference tool does.
            raise SRPNError(DIVIDE_BY_ZERO)
        if op is Operator.MOD and b == 0:
            raise SRPNError(DIVIDE_BY_ZERO)
        if op is Operator.POW and b < 0:
            raise SRPNError(NEGATIVE_POWER)
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        b, a = self._popstack(2)
        self._pshstack(arithmetic.apply(op, a, b))

    @wrap_user_errors(STACK_EMPTY)
    def printtop(self):
        '''
        Print the element on the top of the stack.
        '''
        self.print(self.stack[-1])

    def printstack(self):
        '''
        Print all elements on the stack, bottom of the stack first.

        An empty stack prints the smallest integer.
        '''
        if self.stack:
            self.print(*self.stack)
        else:
            self.print(INT_MIN)

    def random(self):
        '''
        Push the next "random" number, wrapping around the sequence.
        '''
        sequence = type(self).RANDOM_SEQUENCE
        self._pshstack(sequence[self.cursor])
        self.cursor = (self.cursor + 1) % len(sequence)

    # Language mapping to stack commands.
    FUNCTIONS = {
        Command.DUMP: printstack,
        Command.RANDOM: random,
        Command.PRINT: printtop,
    }
