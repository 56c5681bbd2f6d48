from __future__ import annotations
import logging
from typing import List, Tuple
from rpncalc.config import CALC_CONFIG, INT_MAX, in_range, validate_config
from rpncalc.errors import IntegerOverflowError, UnexpectedTokenError, UnmatchedParenError
from rpncalc.frontend.utils import Token, TokenId, LPAREN, RPAREN, integer, operator, operator_map

logger = logging.getLogger(__name__)

digits = '0123456789'

# Longest decimal run that can still fit in 64 bits, leading zeros aside
max_digits = len(str(INT_MAX))

def tokenize(text: str, skip_whitespace: bool|None = None) -> List[Token]:
    """
    Splits `text` into tokens and returns them in postfix order.

    Raises UnexpectedTokenError on any character that isn't a digit, an
    operator or a parenthesis, IntegerOverflowError on literals that don't
    fit in 64 bits, and UnmatchedParenError from the reordering step.
    """
    if skip_whitespace is None:
        validate_config()
        skip_whitespace = CALC_CONFIG["skip_whitespace"]

    tokens = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in digits:
            value, pos = parse_integer(text, pos)
            tokens.append(integer(value))
            continue
        if char in operator_map:
            tokens.append(operator(char))
        elif char == '(':
            tokens.append(LPAREN)
        elif char == ')':
            tokens.append(RPAREN)
        elif not (skip_whitespace and char.isspace()):
            raise UnexpectedTokenError(char)
        pos += 1

    postfix = shunting_yard(tokens)
    logger.debug("Postfix of %r: %s", text, ' '.join(str(tok) for tok in postfix))
    return postfix

def parse_integer(text: str, pos: int) -> Tuple[int, int]:
    """Greedily reads the digit run at `pos`, returns its value and the position after it."""
    end = pos
    while end < len(text) and text[end] in digits:
        end += 1
    literal = text[pos:end]

    # Checked on length first so giant literals never reach int()
    if len(literal.lstrip('0')) > max_digits or not in_range(int(literal)):
        raise IntegerOverflowError(f"Integer literal {literal} does not fit in a 64-bit signed integer.")
    return int(literal), end

def shunting_yard(tokens: List[Token]) -> List[Token]:
    output = []
    stack = []

    for tok in tokens:
        if tok.token_id == TokenId.INTEGER:
            output.append(tok)
        elif tok.token_id == TokenId.RBRACE_LEFT:
            stack.append(tok)
        elif tok.token_id == TokenId.RBRACE_RIGHT:
            while stack and stack[-1].token_id != TokenId.RBRACE_LEFT:
                output.append(stack.pop())
            if not stack:
                raise UnmatchedParenError("Missing left parenthesis in expression.")
            stack.pop() # Discard the matching '('
        else:
            while stack and stack[-1].is_operator():
                top = stack[-1]
                higher = top.precedence() > tok.precedence()
                same_left = top.precedence() == tok.precedence() and top.is_left_associative()
                if not (higher or same_left):
                    break
                output.append(stack.pop())
            stack.append(tok)

    while stack:
        tok = stack.pop()
        if tok.token_id == TokenId.RBRACE_LEFT:
            raise UnmatchedParenError("Missing right parenthesis in expression.")
        output.append(tok)

    return output
