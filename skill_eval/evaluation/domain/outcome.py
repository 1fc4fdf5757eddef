"""EvaluationOutcome: the top-level result of one scenario run."""

from pydantic import BaseModel, Field

from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeParseFailure,
    JudgeVerdict,
)
from skill_eval.pattern.domain.result import AssertionResult
from skill_eval.validation.domain.report import (
    CrossValidationReport,
    InsufficientProviders,
)

type JudgeSignal = (
    JudgeVerdict
    | JudgeParseFailure
    | JudgeBackendFailure
    | CrossValidationReport
    | InsufficientProviders
)


class EvaluationOutcome(BaseModel, frozen=True):
    """Immutable record of everything a run concluded.

    ``judge_signal`` is None when no judge ran. ``reasons`` lists one
    human-readable line per failing contribution and is empty iff final_pass.
    """

    skill_id: str
    scenario: str
    judge_mode: str
    assertion_results: list[AssertionResult]
    judge_signal: (
        JudgeVerdict
        | JudgeParseFailure
        | JudgeBackendFailure
        | CrossValidationReport
        | InsufficientProviders
        | None
    ) = Field(default=None, discriminator="status")
    min_score: float
    final_pass: bool
    reasons: list[str] = Field(default_factory=list)

    @property
    def failed_assertions(self) -> list[AssertionResult]:
        return [result for result in self.assertion_results if not result.satisfied]
