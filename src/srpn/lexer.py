from collections import namedtuple
from enum import Enum
from functools import reduce
import operator

import regex

from .util import INT_MIN, INT_MAX, saturate


class Operator(Enum):
    '''
    Binary arithmetic operators.
    '''
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'
    POW = '^'


class Command(Enum):
    '''
    Stack commands that aren't arithmetic.
    '''
    DUMP = 'd'
    RANDOM = 'r'
    PRINT = '='


class Kind(Enum):
    NUMBER = 'number'
    OPERATOR = 'operator'
    COMMAND = 'command'
    UNKNOWN = 'unknown'


# value is an int for numbers, an Operator, a Command, or the raw text for
# unknown tokens.
Token = namedtuple('Token', ['kind', 'value', 'text'])


def number(text):
    '''
    Number token from a digit run, saturated to 32 bits.

    More than ten significant digits is out of range whatever they are, so
    don't convert; int() refuses very long strings anyway. Leading zeros
    don't count.
    '''
    negative = text.startswith('-')
    digits = text.lstrip('-').lstrip('0')
    if len(digits) > 10:
        return Token(Kind.NUMBER, INT_MIN if negative else INT_MAX, text)
    value = int(digits or '0')
    return Token(Kind.NUMBER, saturate(-value if negative else value), text)


class Lexer:
    '''
    Lexer for the SRPN *regular* grammar.

    Holds no internal state; one instance can be shared by any number of
    machines.
    '''
    # Everything between a pair of hashes, hashes included. Lazy, so that
    # "1 #a# 2 #b# +" keeps the 2.
    COMMENT = r'\#.*?\#'
    # A hash without a partner, after pairs are gone.
    STRAY = r'\#'

    # A digit, then at most one whitespace character, then ^=. Only the =
    # goes away; the digit is echoed and still pushed.
    POWER_ECHO = r'''
                 (?<digit>\d)
                 (?<gap>\s?)
                 \^=
                 '''

    # Digits directly after a minus belong to the number.
    NEGATIVE = r'-\d+'
    # +4 pushes 4, then adds. Only ever one digit: +45 is 4 + then 5.
    PLUS = r'\+\d'
    NUMBER = r'\d+'
    OPERATOR = r'(?:' + r'|'.join(regex.escape(o.value)
                                  for o in Operator) + r')'
    COMMAND = r'(?:' + r'|'.join(regex.escape(c.value)
                                 for c in Command) + r')'
    SPACE = r'\s+'
    # Anything else is a single bad character.
    UNKNOWN = r'.'

    # All possible lexemes. Alternation order matters: signed forms must be
    # tried before the bare operator.
    LEXEME = r'(?<negative>' + NEGATIVE + r')|' \
             r'(?<plus>' + PLUS + r')|' \
             r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<command>' + COMMAND + r')|' \
             r'(?<space>' + SPACE + r')|' \
             r'(?<unknown>' + UNKNOWN + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    grammar = LEXEME

    def echoes(self, line):
        '''
        Resolve the ^= idiom on a raw line.

        Return the line with each such = removed, and the digits to print
        straight away, left to right.
        '''
        digits = []

        def unprint(match):
            digits.append(match.group('digit'))
            return match.group('digit') + match.group('gap') + '^'

        line = regex.sub(type(self).POWER_ECHO, unprint, line,
                         flags=type(self).FLAGS)
        return line, digits

    def strip_comments(self, line):
        '''
        Replace #-delimited comments, then any unpaired #, with a space.

        A comment separates tokens: 5#a#3 is two numbers, not 53.
        '''
        line = regex.sub(type(self).COMMENT, ' ', line,
                         flags=type(self).FLAGS)
        return regex.sub(type(self).STRAY, ' ', line,
                         flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Take a line and yield all tokens, in order.

        Comments are stripped first; whitespace only separates. Never fails:
        characters outside the grammar come out as unknown tokens.
        '''
        line = self.strip_comments(line)
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            yield from self.tokens(match)
            line = line[len(match.group(0)):]

    def tokens(self, match):
        '''
        Yield the tokens a single lexeme stands for.
        '''
        groups = self.matchedgroups(match)
        if 'space' in groups:
            return
        elif 'negative' in groups or 'number' in groups:
            yield number(match.group(0))
        elif 'plus' in groups:
            yield number(groups['plus'][1:])
            yield Token(Kind.OPERATOR, Operator.ADD, Operator.ADD.value)
        elif 'operator' in groups:
            yield Token(Kind.OPERATOR, Operator(groups['operator']),
                        groups['operator'])
        elif 'command' in groups:
            yield Token(Kind.COMMAND, Command(groups['command']),
                        groups['command'])
        else:
            yield Token(Kind.UNKNOWN, groups['unknown'], groups['unknown'])

    def matchedgroups(self, match):
        '''
        Return lexeme groups that matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
