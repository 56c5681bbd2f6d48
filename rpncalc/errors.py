"""Errors raised by the evaluation pipeline.

Every stage fails fast with a subclass of CalcError. The message of the
exception is the text handed back to the caller in EvaluationResult.error.
"""

class CalcError(Exception):
    pass

class IntegerOverflowError(CalcError):
    pass

class UnexpectedTokenError(CalcError):
    def __init__(self, character: str) -> None:
        super().__init__(f"Unexpected token '{character}'.")
        self.character = character

class UnmatchedParenError(CalcError):
    pass

class MissingOperandError(CalcError):
    def __init__(self) -> None:
        super().__init__("Expected operand on stack.")

class EmptyExpressionError(CalcError):
    def __init__(self) -> None:
        super().__init__("Expected expression on stack but found none.")

class DivisionByZeroError(CalcError):
    def __init__(self) -> None:
        super().__init__("Division by zero.")

class NegativeExponentError(CalcError):
    def __init__(self, exponent: int) -> None:
        super().__init__(f"Negative exponent {exponent} is not supported.")
        self.exponent = exponent
