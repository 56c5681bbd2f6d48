from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto

class TokenId(Enum):
    INTEGER = auto()
    OPERATOR = auto()
    RBRACE_LEFT = auto()
    RBRACE_RIGHT = auto()

class OperatorKind(Enum):
    ADDITION = auto()
    SUBTRACTION = auto()
    MULTIPLICATION = auto()
    DIVISION = auto()
    POWER = auto()

@dataclass(frozen=True)
class Operator:
    kind: OperatorKind
    precedence: int
    left_associative: bool

# Precedence and associativity are fixed here, once, at tokenization time
operator_map = {
    '+': Operator(OperatorKind.ADDITION, 2, True),
    '-': Operator(OperatorKind.SUBTRACTION, 2, True),
    '*': Operator(OperatorKind.MULTIPLICATION, 3, True),
    '/': Operator(OperatorKind.DIVISION, 3, True),
    '^': Operator(OperatorKind.POWER, 4, False),
}

symbol_map = {op.kind: symbol for symbol, op in operator_map.items()}

@dataclass(frozen=True)
class Token:
    token_id: TokenId
    value: int|Operator|None = None

    def __repr__(self) -> str:
        return f'Token({self.token_id}, {self.value})'

    def __str__(self) -> str:
        if self.token_id == TokenId.INTEGER:
            return str(self.value)
        if self.token_id == TokenId.OPERATOR:
            return symbol_map[self.value.kind]
        return '(' if self.token_id == TokenId.RBRACE_LEFT else ')'

    def is_operator(self) -> bool:
        return self.token_id == TokenId.OPERATOR

    def precedence(self) -> int:
        return self.value.precedence if self.is_operator() else 0

    def is_left_associative(self) -> bool:
        return self.is_operator() and self.value.left_associative

def integer(value: int) -> Token:
    return Token(TokenId.INTEGER, value)

def operator(symbol: str) -> Token:
    return Token(TokenId.OPERATOR, operator_map[symbol])

LPAREN = Token(TokenId.RBRACE_LEFT)
RPAREN = Token(TokenId.RBRACE_RIGHT)
