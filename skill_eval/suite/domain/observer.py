"""Observer port for the suite domain: defines events in domain language."""

from typing import Protocol


class SuiteObserver(Protocol):
    """Observer port emitting structured events while loading and running suites."""

    def suite_loaded(self, path: str, suite_name: str, total_cases: int) -> None: ...

    def suite_loading_failed(self, path: str, reason: str) -> None: ...

    def suite_started(
        self, run_id: str, suite_name: str, total_cases: int, max_concurrent: int
    ) -> None: ...

    def suite_case_started(self, run_id: str, case_name: str) -> None: ...

    def suite_case_completed(
        self,
        run_id: str,
        case_name: str,
        final_pass: bool,
        matched: bool,
        completed: int,
        total: int,
    ) -> None: ...

    def suite_completed(
        self, run_id: str, total_cases: int, passed: int, elapsed_seconds: float
    ) -> None: ...
