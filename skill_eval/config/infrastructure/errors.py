"""Error types raised by config infrastructure."""

from collections.abc import Mapping
from pathlib import Path

from skill_eval.core.errors import SkillEvalError


class MissingEnvVarsError(SkillEvalError):
    """Raised when one or more required environment variables are not set.

    ``references`` maps a variable to the config paths that use it, when known.
    """

    def __init__(
        self,
        missing_vars: list[str],
        references: Mapping[str, list[str]] | None = None,
    ) -> None:
        self.missing_vars = missing_vars
        self.references = dict(references or {})
        var_list = ", ".join(
            _describe(name, self.references.get(name, [])) for name in sorted(missing_vars)
        )
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(SkillEvalError):
    """Raised when the loaded config fails schema or semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(SkillEvalError):
    """Raised when the config file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")


def _describe(name: str, paths: list[str]) -> str:
    return f"{name} ({', '.join(paths)})" if paths else name
