"""AssertionResult: the outcome of evaluating one PatternRule against one artifact."""

from pydantic import BaseModel

from skill_eval.pattern.domain.rule import PatternRule


class AssertionResult(BaseModel, frozen=True):
    """Immutable record of a single rule check.

    ``error`` is set only when the rule itself is broken (e.g. its pattern does
    not compile); such a result is never satisfied.
    """

    rule: PatternRule
    matched: bool
    satisfied: bool
    message: str
    error: str | None = None
