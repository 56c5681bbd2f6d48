from __future__ import annotations

class EvaluationResult:
    """
    Outcome of one evaluation, handed across to the host.

    Exactly one of `value` and `error` is meaningful, depending on `success`:
    a failed result carries value 0, a successful one an empty error.
    """
    def __init__(self, success: bool, value: int = 0, error: str = '') -> None:
        self.success = success
        self.value = value
        self._error = error

    @property
    def error(self) -> str:
        return self._error

    @staticmethod
    def from_result(value: int) -> EvaluationResult:
        return EvaluationResult(True, value)

    @staticmethod
    def from_error(error: str) -> EvaluationResult:
        return EvaluationResult(False, 0, error)

    def __eq__(self, other) -> bool:
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        return (self.success, self.value, self.error) == (other.success, other.value, other.error)

    def __repr__(self) -> str:
        if self.success:
            return f'EvaluationResult(success=True, value={self.value})'
        return f'EvaluationResult(success=False, error={self.error!r})'
