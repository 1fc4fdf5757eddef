"""CrossValidator: consults several judges concurrently and measures agreement."""

import asyncio

from skill_eval.judge.domain.prompt import JudgePrompt
from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeFailure,
    JudgeParseFailure,
    JudgeVerdict,
)
from skill_eval.judge.infrastructure.registry import JudgeRegistry
from skill_eval.validation.domain.observer import ValidationObserver
from skill_eval.validation.domain.report import (
    CrossValidationReport,
    InsufficientProviders,
    ProviderId,
    build_report,
)

type ProviderOutcome = JudgeVerdict | JudgeParseFailure | JudgeBackendFailure


class CrossValidator:
    """Dispatches one judge call per provider and joins on all of them.

    There is no early exit on the first failure: every call is awaited until it
    returns, hits its own per-call timeout, or the optional overall deadline
    expires. Calls still pending at the deadline are cancelled and recorded as
    backend failures, never as disagreements. So are calls that raise.
    """

    def __init__(
        self,
        registry: JudgeRegistry,
        observer: ValidationObserver,
        deadline_seconds: float | None = None,
    ) -> None:
        self._registry = registry
        self._observer = observer
        self._deadline_seconds = deadline_seconds

    async def evaluate(
        self,
        prompt: JudgePrompt,
        providers: list[ProviderId],
        min_providers: int = 2,
    ) -> CrossValidationReport | InsufficientProviders:
        """Judge *prompt* with every provider and aggregate the usable verdicts.

        Raises:
            ValueError: if min_providers is below 2.
            UnknownJudgeProviderError: if any provider is not configured.
        """
        if min_providers < 2:
            raise ValueError(f"min_providers must be at least 2, got {min_providers}")

        unique = list(dict.fromkeys(providers))
        clients = {provider: self._registry.get(provider) for provider in unique}

        self._observer.validation_started(
            skill_id=prompt.skill_id,
            providers=unique,
            min_providers=min_providers,
        )

        # Each task gets its own prompt copy; no state is shared between calls.
        tasks: dict[ProviderId, asyncio.Task[ProviderOutcome]] = {
            provider: asyncio.create_task(client.judge(prompt.model_copy()))
            for provider, client in clients.items()
        }
        pending: set[asyncio.Task[ProviderOutcome]] = set()
        if tasks:
            _, pending = await asyncio.wait(
                tasks.values(), timeout=self._deadline_seconds
            )

        if pending:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            self._observer.validation_deadline_exceeded(
                skill_id=prompt.skill_id,
                pending_providers=[p for p, t in tasks.items() if t in pending],
                deadline_seconds=self._deadline_seconds or 0.0,
            )

        verdicts: dict[ProviderId, JudgeVerdict] = {}
        failures: dict[ProviderId, JudgeFailure] = {}
        for provider, task in tasks.items():
            if task in pending:
                failures[provider] = JudgeBackendFailure(
                    provider=provider, reason="deadline exceeded", timed_out=True
                )
                continue
            exc = task.exception()
            if exc is not None:
                # A client that raises instead of returning a failure value.
                reason = f"{type(exc).__name__}: {exc}"
                self._observer.validation_provider_errored(
                    skill_id=prompt.skill_id, provider=provider, reason=reason
                )
                failures[provider] = JudgeBackendFailure(
                    provider=provider, reason=reason, timed_out=False
                )
                continue
            outcome = task.result()
            if isinstance(outcome, JudgeVerdict):
                verdicts[provider] = outcome
            else:
                failures[provider] = outcome

        result = build_report(
            verdicts=verdicts, failures=failures, min_providers=min_providers
        )
        if isinstance(result, InsufficientProviders):
            self._observer.validation_insufficient_providers(
                skill_id=prompt.skill_id,
                required=result.required,
                usable=result.usable,
            )
        else:
            self._observer.validation_completed(
                skill_id=prompt.skill_id,
                agreement=result.agreement,
                average_score=result.average_score,
                usable=len(result.per_provider),
            )
        return result
