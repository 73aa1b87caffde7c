'''
Saturating signed 32-bit arithmetic.

Python integers never overflow, so every result is computed exactly and
then clamped. Guards (underflow, division by zero, negative powers) belong
to the machine; these functions assume their operands already passed them.
'''

from .lexer import Operator
from .util import INT_MIN, INT_MAX, saturate


def _truncdiv(a, b):
    # Toward zero, like C, not toward negative infinity like //.
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def add(a, b):
    return saturate(a + b)


def sub(a, b):
    return saturate(a - b)


def mul(a, b):
    return saturate(a * b)


def div(a, b):
    '''
    Truncating division. Only INT_MIN / -1 can leave the range.
    '''
    return saturate(_truncdiv(a, b))


def mod(a, b):
    '''
    Truncating remainder; the sign follows the dividend.

    An operand sitting on a bound yields that bound instead, the upper one
    first.
    '''
    if INT_MAX in (a, b):
        return INT_MAX
    elif INT_MIN in (a, b):
        return INT_MIN
    return a - b * _truncdiv(a, b)


def pow(a, b):
    '''
    Non-negative integral power.

    |a| >= 2 and b >= 32 is out of range whatever a is, so don't build the
    number.
    '''
    if abs(a) >= 2 and b >= 32:
        return INT_MIN if a < 0 and b % 2 else INT_MAX
    return saturate(a ** b)


OPERATIONS = {
    Operator.ADD: add,
    Operator.SUB: sub,
    Operator.MUL: mul,
    Operator.DIV: div,
    Operator.MOD: mod,
    Operator.POW: pow,
}


def apply(op, a, b):
    '''
    Compute a op b, saturated.
    '''
    return OPERATIONS[op](a, b)
