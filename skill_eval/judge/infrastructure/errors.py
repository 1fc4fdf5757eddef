"""Error types raised by judge infrastructure."""

from skill_eval.core.errors import SkillEvalError


class UnknownJudgeProviderError(SkillEvalError):
    """Raised when a judge mode names a provider that is not configured."""

    def __init__(self, provider: str, known: list[str]) -> None:
        self.provider = provider
        known_list = ", ".join(sorted(known)) or "none"
        super().__init__(
            f"Failed to resolve judge provider '{provider}': "
            f"configured providers are {known_list}"
        )
