"""FakeJudgeClient: in-memory JudgeClient implementation for use in tests."""

import asyncio

from skill_eval.judge.domain.prompt import JudgePrompt
from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeParseFailure,
    JudgeVerdict,
)

type FakeOutcome = JudgeVerdict | JudgeParseFailure | JudgeBackendFailure


def make_verdict(
    provider: str, passed: bool = True, score: float = 4.5, issues: list[str] | None = None
) -> JudgeVerdict:
    return JudgeVerdict(
        provider=provider,
        passed=passed,
        overall_score=score,
        issues=issues or [],
        raw_response="{}",
    )


class FakeJudgeClient:
    """Satisfies the JudgeClient protocol. Returns canned outcomes in order.

    With a single outcome every call returns it; with several, each call takes
    the next one and the last is repeated. ``delay_seconds`` makes each call
    sleep first, to exercise deadlines.
    """

    def __init__(
        self,
        provider: str,
        outcomes: list[FakeOutcome] | None = None,
        delay_seconds: float = 0.0,
    ) -> None:
        self._provider = provider
        self._outcomes = outcomes or [make_verdict(provider)]
        self._delay_seconds = delay_seconds
        self.prompts: list[JudgePrompt] = []

    @property
    def provider(self) -> str:
        return self._provider

    async def judge(self, prompt: JudgePrompt) -> FakeOutcome:
        self.prompts.append(prompt)
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)
        index = min(len(self.prompts) - 1, len(self._outcomes) - 1)
        return self._outcomes[index]


class RaisingJudgeClient:
    """Satisfies the JudgeClient protocol but raises from every ``judge`` call."""

    def __init__(self, provider: str, error: Exception) -> None:
        self._provider = provider
        self._error = error
        self.calls = 0

    @property
    def provider(self) -> str:
        return self._provider

    async def judge(self, prompt: JudgePrompt) -> FakeOutcome:
        self.calls += 1
        raise self._error
