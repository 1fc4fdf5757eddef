"""FakeJudgeObserver: records judge domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallStartedEvent:
    provider: str
    skill_id: str
    model: str


@dataclass(frozen=True)
class CallCompletedEvent:
    provider: str
    skill_id: str
    duration_ms: int
    passed: bool
    score: float


@dataclass(frozen=True)
class CallFailedEvent:
    provider: str
    skill_id: str
    reason: str
    timed_out: bool


@dataclass(frozen=True)
class ResponseUnparseableEvent:
    provider: str
    skill_id: str
    reason: str


@dataclass(frozen=True)
class HighTemperatureWarnedEvent:
    provider: str
    temperature: float


class FakeJudgeObserver:
    """Records all emitted judge events as typed frozen dataclasses.

    Use in tests to assert which events were emitted and with what data,
    without mocking or patching.
    """

    def __init__(self) -> None:
        self.started: list[CallStartedEvent] = []
        self.completed: list[CallCompletedEvent] = []
        self.failed: list[CallFailedEvent] = []
        self.unparseable: list[ResponseUnparseableEvent] = []
        self.temperature_warnings: list[HighTemperatureWarnedEvent] = []

    def judge_call_started(self, provider: str, skill_id: str, model: str) -> None:
        self.started.append(
            CallStartedEvent(provider=provider, skill_id=skill_id, model=model)
        )

    def judge_call_completed(
        self, provider: str, skill_id: str, duration_ms: int, passed: bool, score: float
    ) -> None:
        self.completed.append(
            CallCompletedEvent(
                provider=provider,
                skill_id=skill_id,
                duration_ms=duration_ms,
                passed=passed,
                score=score,
            )
        )

    def judge_call_failed(
        self, provider: str, skill_id: str, reason: str, timed_out: bool
    ) -> None:
        self.failed.append(
            CallFailedEvent(
                provider=provider, skill_id=skill_id, reason=reason, timed_out=timed_out
            )
        )

    def judge_response_unparseable(
        self, provider: str, skill_id: str, reason: str
    ) -> None:
        self.unparseable.append(
            ResponseUnparseableEvent(provider=provider, skill_id=skill_id, reason=reason)
        )

    def judge_high_temperature_warned(self, provider: str, temperature: float) -> None:
        self.temperature_warnings.append(
            HighTemperatureWarnedEvent(provider=provider, temperature=temperature)
        )
