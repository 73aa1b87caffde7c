'''
SRPN calculator.

Reverse Polish integer arithmetic that saturates at 32 bits instead of
wrapping, on a stack that holds at most 23 numbers. Reproduces the reference
SRPN tool exactly, quirks included: its diagnostics, its fixed "random"
numbers, and its habit of echoing the digit before ^=.
'''

from .cli import CLI
from .lexer import Lexer, Token, Kind, Operator, Command
from .machine import Machine
from .util import SRPNError


__all__ = ('Machine', 'Lexer', 'CLI', 'Token', 'Kind', 'Operator',
           'Command', 'SRPNError')
