"""CrossValidationReport and InsufficientProviders: results of a multi-judge call."""

from typing import Literal

from pydantic import BaseModel, Field

from skill_eval.judge.domain.verdict import JudgeFailure, JudgeVerdict

type ProviderId = str


class CrossValidationReport(BaseModel, frozen=True):
    """Agreement and mean score over every provider that returned a usable verdict.

    Providers that failed (backend or parse) sit in ``failures`` and contribute
    to neither ``agreement`` nor ``average_score``.
    """

    status: Literal["report"] = "report"
    per_provider: dict[ProviderId, JudgeVerdict] = Field(min_length=1)
    failures: dict[ProviderId, JudgeFailure] = Field(default_factory=dict)
    average_score: float
    agreement: bool

    @property
    def all_passed(self) -> bool:
        return all(verdict.passed for verdict in self.per_provider.values())

    @property
    def issues(self) -> list[str]:
        return [
            f"[{provider}] {issue}"
            for provider, verdict in self.per_provider.items()
            for issue in verdict.issues
        ]


class InsufficientProviders(BaseModel, frozen=True):
    """Fewer providers than required produced a usable verdict; nothing is agreed."""

    status: Literal["insufficient_providers"] = "insufficient_providers"
    required: int
    usable: int
    verdicts: dict[ProviderId, JudgeVerdict] = Field(default_factory=dict)
    failures: dict[ProviderId, JudgeFailure] = Field(default_factory=dict)


def build_report(
    verdicts: dict[ProviderId, JudgeVerdict],
    failures: dict[ProviderId, JudgeFailure],
    min_providers: int,
) -> CrossValidationReport | InsufficientProviders:
    """Compute agreement and the average score, or refuse with too few verdicts.

    ``min_providers`` counts parsed verdicts only. A provider that answered with
    an unparseable payload did respond, but it contributes no pass/fail or score,
    so it is excluded like a backend failure. Either way the run cannot pass.
    """
    if len(verdicts) < min_providers:
        return InsufficientProviders(
            required=min_providers,
            usable=len(verdicts),
            verdicts=verdicts,
            failures=failures,
        )

    passes = {verdict.passed for verdict in verdicts.values()}
    scores = [verdict.overall_score for verdict in verdicts.values()]
    return CrossValidationReport(
        per_provider=verdicts,
        failures=failures,
        average_score=sum(scores) / len(scores),
        agreement=len(passes) == 1,
    )
