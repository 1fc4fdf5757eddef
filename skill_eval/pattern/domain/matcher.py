"""PatternMatcher: pure presence/absence evaluation of PatternRules."""

import re

from skill_eval.pattern.domain.result import AssertionResult
from skill_eval.pattern.domain.rule import PatternRule, Polarity


class PatternMatcher:
    """Evaluates rules against an artifact without side effects.

    A rule whose pattern fails to compile fails closed instead of aborting the
    evaluation of the remaining rules.
    """

    def evaluate(self, artifact: str, rules: list[PatternRule]) -> list[AssertionResult]:
        return [self._evaluate_one(artifact=artifact, rule=rule) for rule in rules]

    def _evaluate_one(self, artifact: str, rule: PatternRule) -> AssertionResult:
        try:
            compiled = re.compile(rule.source, rule.regex_flags)
        except re.error as exc:
            return AssertionResult(
                rule=rule,
                matched=False,
                satisfied=False,
                message=f"Invalid pattern {rule.pattern!r}: {exc}",
                error=str(exc),
            )

        matched = compiled.search(artifact) is not None
        if rule.polarity is Polarity.PRESENT:
            satisfied = matched
        else:
            satisfied = not matched

        return AssertionResult(
            rule=rule,
            matched=matched,
            satisfied=satisfied,
            message=rule.message,
        )
