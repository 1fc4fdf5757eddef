"""FakeEvaluationObserver: records evaluation domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScenarioStartedEvent:
    run_id: str
    skill_id: str
    judge_mode: str
    rule_count: int


@dataclass(frozen=True)
class PhaseEnteredEvent:
    run_id: str
    phase: str


@dataclass(frozen=True)
class JudgeModeReducedEvent:
    run_id: str
    requested: str
    effective: str
    reason: str


@dataclass(frozen=True)
class JudgeRetryEvent:
    run_id: str
    provider: str
    attempt: int
    reason: str
    backoff_seconds: float


@dataclass(frozen=True)
class ScenarioFailedEvent:
    run_id: str
    skill_id: str
    reason: str


@dataclass(frozen=True)
class ScenarioCompletedEvent:
    run_id: str
    skill_id: str
    final_pass: bool
    failed_rules: int


class FakeEvaluationObserver:
    """Records all emitted evaluation events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.started: list[ScenarioStartedEvent] = []
        self.phases: list[PhaseEnteredEvent] = []
        self.reductions: list[JudgeModeReducedEvent] = []
        self.retries: list[JudgeRetryEvent] = []
        self.failed: list[ScenarioFailedEvent] = []
        self.completed: list[ScenarioCompletedEvent] = []

    def scenario_started(
        self, run_id: str, skill_id: str, judge_mode: str, rule_count: int
    ) -> None:
        self.started.append(
            ScenarioStartedEvent(
                run_id=run_id,
                skill_id=skill_id,
                judge_mode=judge_mode,
                rule_count=rule_count,
            )
        )

    def scenario_phase_entered(self, run_id: str, phase: str) -> None:
        self.phases.append(PhaseEnteredEvent(run_id=run_id, phase=phase))

    def scenario_judge_mode_reduced(
        self, run_id: str, requested: str, effective: str, reason: str
    ) -> None:
        self.reductions.append(
            JudgeModeReducedEvent(
                run_id=run_id, requested=requested, effective=effective, reason=reason
            )
        )

    def scenario_judge_retry(
        self,
        run_id: str,
        provider: str,
        attempt: int,
        reason: str,
        backoff_seconds: float,
    ) -> None:
        self.retries.append(
            JudgeRetryEvent(
                run_id=run_id,
                provider=provider,
                attempt=attempt,
                reason=reason,
                backoff_seconds=backoff_seconds,
            )
        )

    def scenario_failed(self, run_id: str, skill_id: str, reason: str) -> None:
        self.failed.append(
            ScenarioFailedEvent(run_id=run_id, skill_id=skill_id, reason=reason)
        )

    def scenario_completed(
        self, run_id: str, skill_id: str, final_pass: bool, failed_rules: int
    ) -> None:
        self.completed.append(
            ScenarioCompletedEvent(
                run_id=run_id,
                skill_id=skill_id,
                final_pass=final_pass,
                failed_rules=failed_rules,
            )
        )
