"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_call_started(self, provider: str, skill_id: str, model: str) -> None:
        self._log.info(
            "judge.call_started",
            provider=provider,
            skill_id=skill_id,
            model=model,
        )

    def judge_call_completed(
        self, provider: str, skill_id: str, duration_ms: int, passed: bool, score: float
    ) -> None:
        self._log.info(
            "judge.call_completed",
            provider=provider,
            skill_id=skill_id,
            duration_ms=duration_ms,
            passed=passed,
            score=score,
        )

    def judge_call_failed(
        self, provider: str, skill_id: str, reason: str, timed_out: bool
    ) -> None:
        self._log.error(
            "judge.call_failed",
            provider=provider,
            skill_id=skill_id,
            reason=reason,
            timed_out=timed_out,
        )

    def judge_response_unparseable(
        self, provider: str, skill_id: str, reason: str
    ) -> None:
        self._log.error(
            "judge.response_unparseable",
            provider=provider,
            skill_id=skill_id,
            reason=reason,
        )

    def judge_high_temperature_warned(self, provider: str, temperature: float) -> None:
        self._log.warning(
            "judge.high_temperature_warned",
            provider=provider,
            temperature=temperature,
            message="Judge temperature > 0.0 may produce non-deterministic scoring",
        )
