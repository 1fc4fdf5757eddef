"""Suite and EvaluationCase: a skill exercised through several scenarios."""

from typing import Literal

from pydantic import BaseModel, Field

from skill_eval.evaluation.domain.mode import JudgeMode, NoJudge
from skill_eval.pattern.domain.rule import PatternRule
from skill_eval.skill.domain.skill import Skill

type Expectation = Literal["pass", "fail"]


class EvaluationCase(BaseModel, frozen=True):
    """One scenario, the artifact produced for it, and how to check it.

    ``expect: fail`` marks a known-bad artifact the harness must reject.
    """

    name: str = Field(min_length=1)
    scenario: str = Field(min_length=1)
    artifact: str
    rules: list[PatternRule] = Field(default_factory=list)
    judge: JudgeMode = Field(default_factory=NoJudge)
    expect: Expectation = "pass"


class Suite(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    skill: Skill
    cases: list[EvaluationCase] = Field(min_length=1)
