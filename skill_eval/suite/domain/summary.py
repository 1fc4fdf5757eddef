"""SuiteSummary: the aggregate result of a completed suite run."""

from pydantic import BaseModel, Field

from skill_eval.evaluation.domain.outcome import EvaluationOutcome
from skill_eval.suite.domain.suite import Expectation


class CaseOutcome(BaseModel, frozen=True):
    case_name: str
    outcome: EvaluationOutcome
    expect: Expectation = "pass"

    @property
    def matched(self) -> bool:
        """True when the outcome is what the case expected."""
        return self.outcome.final_pass == (self.expect == "pass")


class SuiteSummary(BaseModel, frozen=True):
    """Immutable summary returned when a suite run completes.

    ``cases`` keeps the order in which cases were declared, regardless of the
    order in which they finished. A suite passes when every case matched its
    expectation, so an expected failure counts towards ``passed_count``.
    """

    run_id: str = Field(min_length=1)
    suite_name: str = Field(min_length=1)
    skill_id: str = Field(min_length=1)
    cases: list[CaseOutcome]

    @property
    def all_passed(self) -> bool:
        return all(case.matched for case in self.cases)

    @property
    def passed_count(self) -> int:
        return sum(1 for case in self.cases if case.matched)
