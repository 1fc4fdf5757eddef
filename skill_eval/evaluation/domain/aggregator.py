"""ResultAggregator: folds pattern results and the judge signal into one verdict."""

from skill_eval.evaluation.domain.outcome import EvaluationOutcome, JudgeSignal
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


class ResultAggregator:
    """Computes final_pass as the conjunction of every enabled signal.

    A failure to obtain a judgement (backend, parse, too few providers) is
    never treated as a pass.
    """

    def __init__(self, min_score: float) -> None:
        self._min_score = min_score

    def aggregate(
        self,
        skill_id: str,
        scenario: str,
        judge_mode: str,
        assertion_results: list[AssertionResult],
        judge_signal: JudgeSignal | None,
        errors: list[str] | None = None,
    ) -> EvaluationOutcome:
        reasons = [_assertion_reason(r) for r in assertion_results if not r.satisfied]
        if judge_signal is not None:
            reasons.extend(self._judge_reasons(judge_signal))
        reasons.extend(errors or [])

        return EvaluationOutcome(
            skill_id=skill_id,
            scenario=scenario,
            judge_mode=judge_mode,
            assertion_results=assertion_results,
            judge_signal=judge_signal,
            min_score=self._min_score,
            final_pass=not reasons,
            reasons=reasons,
        )

    def _judge_reasons(self, signal: JudgeSignal) -> list[str]:
        match signal:
            case JudgeVerdict():
                return self._verdict_reasons(signal)
            case JudgeParseFailure():
                return [
                    f"Judge '{signal.provider}' response could not be parsed: "
                    f"{signal.reason}"
                ]
            case JudgeBackendFailure():
                suffix = " (timed out)" if signal.timed_out else ""
                return [
                    f"Judge '{signal.provider}' backend failure{suffix}: {signal.reason}"
                ]
            case CrossValidationReport():
                return self._report_reasons(signal)
            case InsufficientProviders():
                reasons = [
                    f"Cross-validation needs {signal.required} usable verdicts, "
                    f"got {signal.usable}"
                ]
                reasons.extend(
                    f"  {provider}: {failure.reason}"
                    for provider, failure in signal.failures.items()
                )
                return reasons

    def _verdict_reasons(self, verdict: JudgeVerdict) -> list[str]:
        reasons: list[str] = []
        if not verdict.passed:
            reasons.append(f"Judge '{verdict.provider}' did not pass the artifact")
        if verdict.overall_score < self._min_score:
            reasons.append(
                f"Judge '{verdict.provider}' scored {verdict.overall_score:.2f}, "
                f"below minimum {self._min_score:.2f}"
            )
        return reasons

    def _report_reasons(self, report: CrossValidationReport) -> list[str]:
        reasons: list[str] = []
        if not report.agreement:
            votes = ", ".join(
                f"{provider}={'pass' if verdict.passed else 'fail'}"
                for provider, verdict in report.per_provider.items()
            )
            reasons.append(f"Judges disagree on pass/fail: {votes}")
        elif not report.all_passed:
            reasons.append("All judges failed the artifact")
        if report.average_score < self._min_score:
            reasons.append(
                f"Average judge score {report.average_score:.2f} is below "
                f"minimum {self._min_score:.2f}"
            )
        return reasons


def _assertion_reason(result: AssertionResult) -> str:
    if result.error is not None:
        return f"Invalid rule: {result.message}"
    return f"Rule failed ({result.rule.polarity}): {result.message}"
