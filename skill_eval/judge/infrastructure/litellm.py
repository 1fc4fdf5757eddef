"""LiteLLMJudgeClient: judge backend adapter using LiteLLM."""

import asyncio
import time
from typing import Any

import litellm

from skill_eval.config.domain.provider import LiteLLMProviderConfig
from skill_eval.judge.domain.observer import JudgeObserver
from skill_eval.judge.domain.prompt import JudgePrompt
from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeParseFailure,
    JudgeVerdict,
)
from skill_eval.judge.infrastructure.parsing import parse_judge_response


class LiteLLMJudgeClient:
    """Judge backend that delegates to any model LiteLLM can reach.

    One call per ``judge`` invocation, bounded by ``timeout_seconds``. Transport
    errors and timeouts come back as JudgeBackendFailure; retrying is the
    caller's decision.
    """

    def __init__(
        self,
        provider: str,
        config: LiteLLMProviderConfig,
        observer: JudgeObserver,
    ) -> None:
        self._provider = provider
        self._config = config
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                provider=provider,
                temperature=config.temperature,
            )

    @property
    def provider(self) -> str:
        return self._provider

    def _completion_kwargs(self, prompt: JudgePrompt) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "timeout": self._config.timeout_seconds,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": prompt.system},
                {"role": "user", "content": prompt.user},
            ],
        }
        if self._config.api_key is not None:
            kwargs["api_key"] = self._config.api_key
        if self._config.api_base is not None:
            kwargs["api_base"] = self._config.api_base
        return kwargs

    async def judge(
        self, prompt: JudgePrompt
    ) -> JudgeVerdict | JudgeParseFailure | JudgeBackendFailure:
        self._observer.judge_call_started(
            provider=self._provider,
            skill_id=prompt.skill_id,
            model=self._config.model,
        )

        start = time.monotonic()
        try:
            async with asyncio.timeout(self._config.timeout_seconds):
                response = await litellm.acompletion(**self._completion_kwargs(prompt))
        except TimeoutError:
            return self._backend_failure(
                prompt=prompt,
                reason=f"no response within {self._config.timeout_seconds}s",
                timed_out=True,
            )
        except Exception as exc:  # noqa: BLE001 - every provider error is a backend failure
            return self._backend_failure(
                prompt=prompt,
                reason=str(exc) or type(exc).__name__,
                timed_out=isinstance(exc, litellm.Timeout),
            )

        duration_ms = int((time.monotonic() - start) * 1000)

        raw_content = _message_content(response)
        outcome: JudgeVerdict | JudgeParseFailure
        if raw_content is None:
            outcome = JudgeParseFailure(
                provider=self._provider,
                reason="malformed completion response",
                raw_response=repr(response)[:500],
            )
        else:
            outcome = parse_judge_response(provider=self._provider, raw=raw_content)

        if isinstance(outcome, JudgeParseFailure):
            self._observer.judge_response_unparseable(
                provider=self._provider,
                skill_id=prompt.skill_id,
                reason=outcome.reason,
            )
            return outcome

        self._observer.judge_call_completed(
            provider=self._provider,
            skill_id=prompt.skill_id,
            duration_ms=duration_ms,
            passed=outcome.passed,
            score=outcome.overall_score,
        )
        return outcome

    def _backend_failure(
        self, prompt: JudgePrompt, reason: str, timed_out: bool
    ) -> JudgeBackendFailure:
        self._observer.judge_call_failed(
            provider=self._provider,
            skill_id=prompt.skill_id,
            reason=reason,
            timed_out=timed_out,
        )
        return JudgeBackendFailure(
            provider=self._provider, reason=reason, timed_out=timed_out
        )


def _message_content(response: Any) -> str | None:
    """Text of the first choice, or None when the response has an unexpected shape."""
    try:
        content = response.choices[0].message.content
    except (IndexError, AttributeError, TypeError):
        return None
    if content is None:
        return ""
    if not isinstance(content, str):
        return None
    return content
