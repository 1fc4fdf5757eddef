"""ScenarioRunner: orchestrates pattern checks, judge dispatch and aggregation."""

import asyncio
import uuid
from typing import assert_never

from skill_eval.config.domain.config import HarnessConfig
from skill_eval.core.errors import SkillEvalError
from skill_eval.evaluation.domain.aggregator import ResultAggregator
from skill_eval.evaluation.domain.mode import CrossJudge, NoJudge, SingleJudge
from skill_eval.evaluation.domain.observer import EvaluationObserver
from skill_eval.evaluation.domain.outcome import EvaluationOutcome, JudgeSignal
from skill_eval.evaluation.domain.phase import RunPhase
from skill_eval.judge.domain.judge import JudgeClient
from skill_eval.judge.domain.prompt import JudgePrompt, JudgePromptBuilder
from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeParseFailure,
    JudgeVerdict,
)
from skill_eval.judge.infrastructure.registry import JudgeRegistry
from skill_eval.pattern.domain.matcher import PatternMatcher
from skill_eval.pattern.domain.rule import PatternRule
from skill_eval.skill.domain.skill import Artifact, Scenario, Skill
from skill_eval.validation.application.cross_validator import CrossValidator

type AnyJudgeMode = NoJudge | SingleJudge | CrossJudge


class ScenarioRunner:
    """Runs one (skill, scenario, artifact) evaluation through its phases.

    PATTERN_CHECK -> JUDGE_DISPATCH (skipped for NoJudge) -> AGGREGATE -> DONE.

    The runner receives the judge registry and cross-validator rather than
    building them, so fakes can be swapped in for tests. Harness errors raised
    while dispatching (e.g. an unknown provider) are folded into the outcome;
    ``run`` does not raise them.
    """

    def __init__(
        self,
        config: HarnessConfig,
        registry: JudgeRegistry,
        cross_validator: CrossValidator,
        observer: EvaluationObserver,
    ) -> None:
        self._config = config
        self._registry = registry
        self._cross_validator = cross_validator
        self._observer = observer
        self._matcher = PatternMatcher()
        self._prompt_builder = JudgePromptBuilder()
        self._aggregator = ResultAggregator(min_score=config.judge.min_score)

    async def run(
        self,
        skill: Skill,
        scenario: Scenario,
        artifact: Artifact,
        rules: list[PatternRule],
        judge_mode: AnyJudgeMode,
    ) -> EvaluationOutcome:
        """Evaluate *artifact* and return the aggregated EvaluationOutcome."""
        run_id = str(uuid.uuid4())
        self._observer.scenario_started(
            run_id=run_id,
            skill_id=skill.identifier,
            judge_mode=judge_mode.describe(),
            rule_count=len(rules),
        )

        self._enter(run_id=run_id, phase=RunPhase.PATTERN_CHECK)
        assertion_results = self._matcher.evaluate(artifact=artifact, rules=rules)

        mode = self._effective_mode(run_id=run_id, requested=judge_mode)
        signal: JudgeSignal | None = None
        errors: list[str] = []
        if not isinstance(mode, NoJudge):
            self._enter(run_id=run_id, phase=RunPhase.JUDGE_DISPATCH)
            prompt = self._prompt_builder.build(
                skill=skill, scenario=scenario, artifact=artifact
            )
            try:
                signal = await self._dispatch(run_id=run_id, prompt=prompt, mode=mode)
            except SkillEvalError as exc:
                self._observer.scenario_failed(
                    run_id=run_id, skill_id=skill.identifier, reason=str(exc)
                )
                errors.append(str(exc))

        self._enter(run_id=run_id, phase=RunPhase.AGGREGATE)
        outcome = self._aggregator.aggregate(
            skill_id=skill.identifier,
            scenario=scenario,
            judge_mode=mode.describe(),
            assertion_results=assertion_results,
            judge_signal=signal,
            errors=errors,
        )

        self._enter(run_id=run_id, phase=RunPhase.DONE)
        self._observer.scenario_completed(
            run_id=run_id,
            skill_id=skill.identifier,
            final_pass=outcome.final_pass,
            failed_rules=len(outcome.failed_assertions),
        )
        return outcome

    def _enter(self, run_id: str, phase: RunPhase) -> None:
        self._observer.scenario_phase_entered(run_id=run_id, phase=phase.value)

    def _effective_mode(self, run_id: str, requested: AnyJudgeMode) -> AnyJudgeMode:
        """Apply the integration and cross-validation toggles to *requested*."""
        toggles = self._config.toggles
        mode = requested

        if isinstance(mode, CrossJudge) and not toggles.cross_validate:
            mode = SingleJudge(provider=mode.providers[0])
            self._observer.scenario_judge_mode_reduced(
                run_id=run_id,
                requested=requested.describe(),
                effective=mode.describe(),
                reason="cross-validation disabled",
            )

        if not toggles.integration:
            live = [p for p in _providers_of(mode) if self._is_live(p)]
            if live:
                reduced = NoJudge()
                self._observer.scenario_judge_mode_reduced(
                    run_id=run_id,
                    requested=mode.describe(),
                    effective=reduced.describe(),
                    reason=f"integration disabled; live providers skipped: {', '.join(live)}",
                )
                mode = reduced

        return mode

    def _is_live(self, provider: str) -> bool:
        # Unknown providers are left in place so dispatch reports them.
        return provider in self._registry.providers and not self._registry.is_offline(
            provider
        )

    async def _dispatch(
        self, run_id: str, prompt: JudgePrompt, mode: AnyJudgeMode
    ) -> JudgeSignal | None:
        match mode:
            case NoJudge():
                return None
            case SingleJudge(provider=provider):
                return await self._judge_single(
                    run_id=run_id, prompt=prompt, provider=provider
                )
            case CrossJudge(providers=providers, min_providers=min_providers):
                return await self._cross_validator.evaluate(
                    prompt=prompt,
                    providers=providers,
                    min_providers=min_providers,
                )
            case _:
                assert_never(mode)

    async def _judge_single(
        self, run_id: str, prompt: JudgePrompt, provider: str
    ) -> JudgeVerdict | JudgeParseFailure | JudgeBackendFailure:
        """Call one provider, retrying backend failures only.

        Parse failures are returned immediately: a malformed answer points at a
        prompt or backend bug, which another attempt will not fix.
        """
        client = self._registry.get(provider)
        retry_cfg = self._config.judge.retry
        backoff = retry_cfg.initial_backoff_seconds

        attempt = 1
        outcome = await _call_judge(client=client, prompt=prompt)
        while isinstance(outcome, JudgeBackendFailure) and attempt < retry_cfg.max_attempts:
            self._observer.scenario_judge_retry(
                run_id=run_id,
                provider=provider,
                attempt=attempt,
                reason=outcome.reason,
                backoff_seconds=backoff,
            )
            await asyncio.sleep(backoff)
            backoff *= retry_cfg.backoff_multiplier
            attempt += 1
            outcome = await _call_judge(client=client, prompt=prompt)

        return outcome


async def _call_judge(
    client: JudgeClient, prompt: JudgePrompt
) -> JudgeVerdict | JudgeParseFailure | JudgeBackendFailure:
    try:
        return await client.judge(prompt)
    except Exception as exc:  # noqa: BLE001 - a raising client is a backend failure
        return JudgeBackendFailure(
            provider=client.provider,
            reason=f"{type(exc).__name__}: {exc}",
            timed_out=False,
        )


def _providers_of(mode: AnyJudgeMode) -> list[str]:
    match mode:
        case NoJudge():
            return []
        case SingleJudge(provider=provider):
            return [provider]
        case CrossJudge(providers=providers):
            return list(providers)
        case _:
            assert_never(mode)
