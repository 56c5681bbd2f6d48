from __future__ import annotations
from rpncalc.config import INT_MAX, in_range
from rpncalc.errors import DivisionByZeroError, IntegerOverflowError, NegativeExponentError
from rpncalc.frontend.parser import Expression, IntegerExpression
from rpncalc.frontend.utils import OperatorKind, symbol_map

def divide(x: int, y: int) -> int:
    if y == 0:
        raise DivisionByZeroError()
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient

def power(x: int, y: int) -> int:
    if y < 0:
        raise NegativeExponentError(y)
    # |x| >= 2 overflows 64 bits well before the exponent gets past the word size
    if abs(x) > 1 and y > INT_MAX.bit_length():
        raise IntegerOverflowError(f"Arithmetic overflow in {x} ^ {y}.")
    return x ** y

op_map = {
    OperatorKind.ADDITION: lambda x, y: x + y,
    OperatorKind.SUBTRACTION: lambda x, y: x - y,
    OperatorKind.MULTIPLICATION: lambda x, y: x * y,
    OperatorKind.DIVISION: divide,
    OperatorKind.POWER: power,
}

def combine(kind: OperatorKind, lhs: int, rhs: int) -> int:
    result = op_map[kind](lhs, rhs)
    if not in_range(result):
        raise IntegerOverflowError(f"Arithmetic overflow in {lhs} {symbol_map[kind]} {rhs}.")
    return result

def evaluate(tree: Expression) -> int:
    """
    Reduces a tree to its value with a post-order walk over an explicit
    stack, so depth is only bounded by memory. Left children are always
    reduced before right ones.
    """
    values = []
    pending = [(tree, False)]

    while pending:
        node, children_done = pending.pop()
        if isinstance(node, IntegerExpression):
            values.append(node.value)
        elif children_done:
            rhs = values.pop()
            lhs = values.pop()
            values.append(combine(node.operator, lhs, rhs))
        else:
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False)) # Popped first

    return values.pop()
