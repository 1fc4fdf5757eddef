"""Base exception class for all skill-eval-specific errors."""


class SkillEvalError(Exception):
    """Base class for all skill-eval errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
