"""Observer port for the evaluation domain: defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during a scenario run.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def scenario_started(
        self, run_id: str, skill_id: str, judge_mode: str, rule_count: int
    ) -> None: ...

    def scenario_phase_entered(self, run_id: str, phase: str) -> None: ...

    def scenario_judge_mode_reduced(
        self, run_id: str, requested: str, effective: str, reason: str
    ) -> None: ...

    def scenario_judge_retry(
        self,
        run_id: str,
        provider: str,
        attempt: int,
        reason: str,
        backoff_seconds: float,
    ) -> None: ...

    def scenario_failed(self, run_id: str, skill_id: str, reason: str) -> None: ...

    def scenario_completed(
        self, run_id: str, skill_id: str, final_pass: bool, failed_rules: int
    ) -> None: ...
