"""Error types raised by suite infrastructure."""

from skill_eval.core.errors import SkillEvalError


class SuiteLoadError(SkillEvalError):
    """Raised when a suite or rules file cannot be read or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load suite: {reason}")
