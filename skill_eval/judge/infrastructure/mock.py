"""MockJudgeClient: offline, deterministic judge backend."""

import asyncio
import json
import time

from skill_eval.config.domain.provider import MockProviderConfig
from skill_eval.judge.domain.observer import JudgeObserver
from skill_eval.judge.domain.prompt import JudgePrompt
from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeParseFailure,
    JudgeVerdict,
)
from skill_eval.judge.infrastructure.parsing import parse_judge_response

DEFAULT_MOCK_RESPONSE: dict[str, object] = {
    "pass": True,
    "overall_score": 4.5,
    "issues": [],
    "scores": {},
}


class MockJudgeClient:
    """Returns the same verdict for the same prompt, without network access.

    The canned payload is serialised and run through the same parser as live
    responses, so a mock configured with a malformed payload yields a
    JudgeParseFailure exactly as a live backend would.
    """

    def __init__(
        self,
        provider: str,
        config: MockProviderConfig,
        observer: JudgeObserver,
    ) -> None:
        self._provider = provider
        self._config = config
        self._observer = observer
        if config.raw_response is not None:
            self._raw = config.raw_response
        else:
            payload = config.response if config.response is not None else DEFAULT_MOCK_RESPONSE
            self._raw = json.dumps(payload, sort_keys=True)

    @property
    def provider(self) -> str:
        return self._provider

    async def judge(
        self, prompt: JudgePrompt
    ) -> JudgeVerdict | JudgeParseFailure | JudgeBackendFailure:
        self._observer.judge_call_started(
            provider=self._provider, skill_id=prompt.skill_id, model="mock"
        )
        start = time.monotonic()

        if self._config.delay_seconds > 0:
            try:
                async with asyncio.timeout(self._config.timeout_seconds):
                    await asyncio.sleep(self._config.delay_seconds)
            except TimeoutError:
                reason = f"no response within {self._config.timeout_seconds}s"
                self._observer.judge_call_failed(
                    provider=self._provider,
                    skill_id=prompt.skill_id,
                    reason=reason,
                    timed_out=True,
                )
                return JudgeBackendFailure(
                    provider=self._provider, reason=reason, timed_out=True
                )

        outcome = parse_judge_response(provider=self._provider, raw=self._raw)
        if isinstance(outcome, JudgeParseFailure):
            self._observer.judge_response_unparseable(
                provider=self._provider, skill_id=prompt.skill_id, reason=outcome.reason
            )
            return outcome

        self._observer.judge_call_completed(
            provider=self._provider,
            skill_id=prompt.skill_id,
            duration_ms=int((time.monotonic() - start) * 1000),
            passed=outcome.passed,
            score=outcome.overall_score,
        )
        return outcome
