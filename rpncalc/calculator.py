from __future__ import annotations
import logging
import rpncalc.backend.evaluator as evaluator
import rpncalc.frontend.parser as parser
import rpncalc.frontend.tokenizer as tokenizer
from rpncalc.errors import CalcError
from rpncalc.result import EvaluationResult

logger = logging.getLogger(__name__)

def evaluate(text: str, skip_whitespace: bool|None = None) -> EvaluationResult:
    """
    Evaluates an arithmetic expression such as `2*(3+4)^2`.

    Never raises on bad input: failures of any stage come back as an
    unsuccessful EvaluationResult carrying the error message.
    """
    if not text:
        return EvaluationResult.from_result(0)

    try:
        tokens = tokenizer.tokenize(text, skip_whitespace)
        tree = parser.parse(tokens)
        value = evaluator.evaluate(tree)
    except CalcError as err:
        logger.debug("Evaluation of %r failed: %s", text, err)
        return EvaluationResult.from_error(str(err))

    return EvaluationResult.from_result(value)
