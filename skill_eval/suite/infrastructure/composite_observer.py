"""CompositeSuiteObserver: fans out all events to a list of observers."""

from skill_eval.suite.domain.observer import SuiteObserver


class CompositeSuiteObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from SuiteObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[SuiteObserver]) -> None:
        self._observers = observers

    def suite_loaded(self, path: str, suite_name: str, total_cases: int) -> None:
        for obs in self._observers:
            obs.suite_loaded(path=path, suite_name=suite_name, total_cases=total_cases)

    def suite_loading_failed(self, path: str, reason: str) -> None:
        for obs in self._observers:
            obs.suite_loading_failed(path=path, reason=reason)

    def suite_started(
        self, run_id: str, suite_name: str, total_cases: int, max_concurrent: int
    ) -> None:
        for obs in self._observers:
            obs.suite_started(
                run_id=run_id,
                suite_name=suite_name,
                total_cases=total_cases,
                max_concurrent=max_concurrent,
            )

    def suite_case_started(self, run_id: str, case_name: str) -> None:
        for obs in self._observers:
            obs.suite_case_started(run_id=run_id, case_name=case_name)

    def suite_case_completed(
        self,
        run_id: str,
        case_name: str,
        final_pass: bool,
        matched: bool,
        completed: int,
        total: int,
    ) -> None:
        for obs in self._observers:
            obs.suite_case_completed(
                run_id=run_id,
                case_name=case_name,
                final_pass=final_pass,
                matched=matched,
                completed=completed,
                total=total,
            )

    def suite_completed(
        self, run_id: str, total_cases: int, passed: int, elapsed_seconds: float
    ) -> None:
        for obs in self._observers:
            obs.suite_completed(
                run_id=run_id,
                total_cases=total_cases,
                passed=passed,
                elapsed_seconds=elapsed_seconds,
            )
