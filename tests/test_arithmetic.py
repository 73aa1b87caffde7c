'''
Saturating arithmetic tests
'''

from pytest import mark

from srpn import arithmetic
from srpn.lexer import Operator
from srpn.util import INT_MIN, INT_MAX


@mark.parametrize('op, a, b, expected', [
    (Operator.ADD, 2, 3, 5),
    (Operator.ADD, INT_MAX, 5, INT_MAX),
    (Operator.ADD, INT_MIN, -5, INT_MIN),
    (Operator.SUB, 2, 3, -1),
    (Operator.SUB, INT_MIN, 1, INT_MIN),
    (Operator.SUB, INT_MAX, -1, INT_MAX),
    (Operator.MUL, -6, 7, -42),
    (Operator.MUL, 100000, 100000, INT_MAX),
    (Operator.MUL, INT_MAX, -2, INT_MIN),
    (Operator.DIV, 7, 2, 3),
    (Operator.DIV, -7, 2, -3),
    (Operator.DIV, 7, -2, -3),
    (Operator.DIV, INT_MIN, -1, INT_MAX),
    (Operator.MOD, 7, 3, 1),
    (Operator.MOD, -7, 3, -1),
    (Operator.MOD, 7, -3, 1),
    (Operator.POW, 2, 10, 1024),
    (Operator.POW, 2, 31, INT_MAX),
    (Operator.POW, -2, 31, INT_MIN),
    (Operator.POW, 0, 0, 1),
])
def test_apply(op, a, b, expected):
    assert arithmetic.apply(op, a, b) == expected


def test_mod_on_bounds():
    assert arithmetic.mod(INT_MAX, 7) == INT_MAX
    assert arithmetic.mod(7, INT_MAX) == INT_MAX
    assert arithmetic.mod(INT_MIN, 7) == INT_MIN
    assert arithmetic.mod(INT_MAX, INT_MIN) == INT_MAX


def test_huge_exponents_saturate():
    assert arithmetic.pow(3, INT_MAX) == INT_MAX
    assert arithmetic.pow(-3, INT_MAX) == INT_MIN
    assert arithmetic.pow(-3, INT_MAX - 1) == INT_MAX


def test_trivial_bases_with_huge_exponents():
    assert arithmetic.pow(1, INT_MAX) == 1
    assert arithmetic.pow(0, INT_MAX) == 0
    assert arithmetic.pow(-1, INT_MAX) == -1
    assert arithmetic.pow(-1, INT_MAX - 1) == 1
