"""JudgeObserver port: domain events emitted during judge invocations."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_call_started(self, provider: str, skill_id: str, model: str) -> None: ...

    def judge_call_completed(
        self, provider: str, skill_id: str, duration_ms: int, passed: bool, score: float
    ) -> None: ...

    def judge_call_failed(
        self, provider: str, skill_id: str, reason: str, timed_out: bool
    ) -> None: ...

    def judge_response_unparseable(
        self, provider: str, skill_id: str, reason: str
    ) -> None: ...

    def judge_high_temperature_warned(self, provider: str, temperature: float) -> None: ...
