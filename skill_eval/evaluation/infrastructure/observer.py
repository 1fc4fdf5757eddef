"""StructlogEvaluationObserver: production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scenario_started(
        self, run_id: str, skill_id: str, judge_mode: str, rule_count: int
    ) -> None:
        self._log.info(
            "evaluation.scenario.started",
            run_id=run_id,
            skill_id=skill_id,
            judge_mode=judge_mode,
            rule_count=rule_count,
        )

    def scenario_phase_entered(self, run_id: str, phase: str) -> None:
        self._log.debug("evaluation.scenario.phase_entered", run_id=run_id, phase=phase)

    def scenario_judge_mode_reduced(
        self, run_id: str, requested: str, effective: str, reason: str
    ) -> None:
        self._log.warning(
            "evaluation.scenario.judge_mode_reduced",
            run_id=run_id,
            requested=requested,
            effective=effective,
            reason=reason,
        )

    def scenario_judge_retry(
        self,
        run_id: str,
        provider: str,
        attempt: int,
        reason: str,
        backoff_seconds: float,
    ) -> None:
        self._log.warning(
            "evaluation.scenario.judge_retry",
            run_id=run_id,
            provider=provider,
            attempt=attempt,
            reason=reason,
            backoff_seconds=backoff_seconds,
        )

    def scenario_failed(self, run_id: str, skill_id: str, reason: str) -> None:
        self._log.error(
            "evaluation.scenario.failed",
            run_id=run_id,
            skill_id=skill_id,
            reason=reason,
        )

    def scenario_completed(
        self, run_id: str, skill_id: str, final_pass: bool, failed_rules: int
    ) -> None:
        self._log.info(
            "evaluation.scenario.completed",
            run_id=run_id,
            skill_id=skill_id,
            final_pass=final_pass,
            failed_rules=failed_rules,
        )
