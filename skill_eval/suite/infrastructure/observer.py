"""Structlog implementation of the SuiteObserver port."""

import structlog


class StructlogSuiteObserver:
    """Delegates suite domain events to structlog.

    Satisfies the SuiteObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def suite_loaded(self, path: str, suite_name: str, total_cases: int) -> None:
        self._log.info(
            "suite.loaded", path=path, suite_name=suite_name, total_cases=total_cases
        )

    def suite_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("suite.loading_failed", path=path, reason=reason)

    def suite_started(
        self, run_id: str, suite_name: str, total_cases: int, max_concurrent: int
    ) -> None:
        self._log.info(
            "suite.started",
            run_id=run_id,
            suite_name=suite_name,
            total_cases=total_cases,
            max_concurrent=max_concurrent,
        )

    def suite_case_started(self, run_id: str, case_name: str) -> None:
        self._log.info("suite.case.started", run_id=run_id, case_name=case_name)

    def suite_case_completed(
        self,
        run_id: str,
        case_name: str,
        final_pass: bool,
        matched: bool,
        completed: int,
        total: int,
    ) -> None:
        self._log.info(
            "suite.case.completed",
            run_id=run_id,
            case_name=case_name,
            final_pass=final_pass,
            matched=matched,
            completed=completed,
            total=total,
            percent=round(100.0 * completed / total, 1) if total else 0.0,
        )

    def suite_completed(
        self, run_id: str, total_cases: int, passed: int, elapsed_seconds: float
    ) -> None:
        self._log.info(
            "suite.completed",
            run_id=run_id,
            total_cases=total_cases,
            passed=passed,
            elapsed_seconds=round(elapsed_seconds, 2),
        )
