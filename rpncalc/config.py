"""Evaluator settings"""

# 64-bit signed integer range for literals and arithmetic results
INT_MIN = -2**63
INT_MAX = 2**63 - 1

CALC_CONFIG = {
    # Whitespace between tokens is an unexpected token unless a host opts in
    "skip_whitespace": False,
}

def validate_config():
    assert isinstance(CALC_CONFIG["skip_whitespace"], bool), "skip_whitespace must be a bool"

def in_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX
