"""Judge dispatch configuration models."""

from pydantic import BaseModel, Field

DEFAULT_MIN_SCORE = 4.0


class RetryConfig(BaseModel, frozen=True):
    """Retry policy for backend failures in single-provider mode.

    ``max_attempts`` counts the first call, so 2 means at most one retry.
    """

    max_attempts: int = Field(default=2, ge=1, le=2)
    initial_backoff_seconds: float = Field(default=1.0, ge=0.0)
    backoff_multiplier: float = Field(default=2.0, ge=1.0)


class JudgeConfig(BaseModel, frozen=True):
    min_score: float = Field(default=DEFAULT_MIN_SCORE, ge=0.0, le=5.0)
    deadline_seconds: float | None = Field(default=None, gt=0.0)
    retry: RetryConfig = Field(default_factory=RetryConfig)
