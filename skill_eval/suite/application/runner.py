"""SuiteRunner: runs every case of a suite through the ScenarioRunner."""

import asyncio
import time
import uuid

from skill_eval.evaluation.application.runner import ScenarioRunner
from skill_eval.suite.domain.observer import SuiteObserver
from skill_eval.suite.domain.suite import EvaluationCase, Suite
from skill_eval.suite.domain.summary import CaseOutcome, SuiteSummary


class SuiteRunner:
    """Runs all cases concurrently, bounded by max_concurrent.

    Cases are independent: a failing case never cancels its siblings, since
    ScenarioRunner folds every harness error into the case outcome.
    """

    def __init__(
        self,
        scenario_runner: ScenarioRunner,
        observer: SuiteObserver,
        max_concurrent: int,
    ) -> None:
        self._scenario_runner = scenario_runner
        self._observer = observer
        self._max_concurrent = max_concurrent

    async def run(self, suite: Suite) -> SuiteSummary:
        """Execute every case and return a SuiteSummary in declaration order."""
        run_id = str(uuid.uuid4())
        total = len(suite.cases)
        self._observer.suite_started(
            run_id=run_id,
            suite_name=suite.name,
            total_cases=total,
            max_concurrent=self._max_concurrent,
        )
        started_at = time.monotonic()

        sem = asyncio.Semaphore(self._max_concurrent)
        results: dict[int, CaseOutcome] = {}
        completed_count: list[int] = [0]
        progress_lock = asyncio.Lock()

        async with asyncio.TaskGroup() as tg:
            for index, case in enumerate(suite.cases):
                tg.create_task(
                    self._run_one_case(
                        sem=sem,
                        run_id=run_id,
                        suite=suite,
                        index=index,
                        case=case,
                        results=results,
                        total=total,
                        completed_count=completed_count,
                        progress_lock=progress_lock,
                    )
                )

        ordered = [results[index] for index in range(total)]
        summary = SuiteSummary(
            run_id=run_id,
            suite_name=suite.name,
            skill_id=suite.skill.identifier,
            cases=ordered,
        )
        self._observer.suite_completed(
            run_id=run_id,
            total_cases=total,
            passed=summary.passed_count,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return summary

    async def _run_one_case(
        self,
        sem: asyncio.Semaphore,
        run_id: str,
        suite: Suite,
        index: int,
        case: EvaluationCase,
        results: dict[int, CaseOutcome],
        total: int,
        completed_count: list[int],
        progress_lock: asyncio.Lock,
    ) -> None:
        async with sem:
            self._observer.suite_case_started(run_id=run_id, case_name=case.name)
            outcome = await self._scenario_runner.run(
                skill=suite.skill,
                scenario=case.scenario,
                artifact=case.artifact,
                rules=case.rules,
                judge_mode=case.judge,
            )

        result = CaseOutcome(case_name=case.name, expect=case.expect, outcome=outcome)
        results[index] = result
        async with progress_lock:
            completed_count[0] += 1
            self._observer.suite_case_completed(
                run_id=run_id,
                case_name=case.name,
                final_pass=outcome.final_pass,
                matched=result.matched,
                completed=completed_count[0],
                total=total,
            )
