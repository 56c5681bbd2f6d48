from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List
from rpncalc.errors import EmptyExpressionError, MissingOperandError
from rpncalc.frontend.utils import OperatorKind, Token, TokenId, symbol_map

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class IntegerExpression:
    value: int

    def __str__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class ArithmeticExpression:
    operator: OperatorKind
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f'({self.left} {symbol_map[self.operator]} {self.right})'

Expression = IntegerExpression|ArithmeticExpression

def parse(tokens: List[Token]) -> Expression:
    """
    Builds an expression tree out of a postfix token sequence.

    Parentheses are already consumed by the reordering step, any left over
    are ignored. Operands left below the top of the stack are dropped.
    """
    stack = []

    for tok in tokens:
        if tok.token_id == TokenId.INTEGER:
            stack.append(IntegerExpression(tok.value))
        elif tok.token_id == TokenId.OPERATOR:
            if len(stack) < 2:
                raise MissingOperandError()
            right = stack.pop()
            left = stack.pop()
            stack.append(ArithmeticExpression(tok.value.kind, left, right))

    if not stack:
        raise EmptyExpressionError()
    if len(stack) > 1:
        logger.debug("Ignoring %d trailing operand(s) left on the stack", len(stack) - 1)

    return stack[-1]
