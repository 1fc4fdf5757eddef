"""ProgressSuiteObserver: renders a Rich progress bar for suite runs on stderr."""

from __future__ import annotations

from rich.console import Console, Group
from rich.live import Live
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text


class _ThreeSegmentBarColumn(ProgressColumn):
    """ProgressColumn that renders three segments: passed, failed, remaining."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        bar_width = self.bar_width or 40
        total = task.total or 0
        if total > 0:
            failed = int(task.fields.get("failed", 0))
            passed = int(task.completed) - failed
            passed_cells = int(passed / total * bar_width)
            # Failed fills from where passed ends; capped so both fit the bar.
            failed_cells = min(int(failed / total * bar_width), bar_width - passed_cells)
        else:
            passed_cells = 0
            failed_cells = 0
        remaining_cells = bar_width - passed_cells - failed_cells

        result = Text()
        result.append("█" * passed_cells, style="bright_green")
        result.append("█" * failed_cells, style="red")
        result.append("░" * remaining_cells, style="dim white")
        return result


class ProgressSuiteObserver:
    """Renders one progress row per suite run on stderr.

    Only suite_started, suite_case_completed, and suite_completed produce
    output; all other events are no-ops.

    A case counts as passed when its outcome matched the case expectation.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests).

    Does NOT inherit from SuiteObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._passed = 0
        self._failed = 0
        self._total = 0
        self._task_id: TaskID | None = None
        self._progress: Progress | None = None
        self._live: Live | None = None

    @property
    def passed(self) -> int:
        return self._passed

    @property
    def failed(self) -> int:
        return self._failed

    def suite_loaded(self, path: str, suite_name: str, total_cases: int) -> None:
        pass

    def suite_loading_failed(self, path: str, reason: str) -> None:
        pass

    def suite_started(
        self, run_id: str, suite_name: str, total_cases: int, max_concurrent: int
    ) -> None:
        # Reset state from any previous run.
        self._passed = 0
        self._failed = 0
        self._total = total_cases
        self._task_id = None
        self._progress = None
        self._live = None

        if self._disabled:
            return

        console = Console(stderr=True)
        legend = Text.assemble(
            "  Legend:  ",
            ("█", "bright_green"),
            " passed  ",
            ("█", "red"),
            " failed  ",
            ("░", "dim white"),
            " remaining",
        )
        self._progress = Progress(
            TextColumn("{task.description}"),
            _ThreeSegmentBarColumn(bar_width=40),
            TextColumn("{task.completed:.0f}/{task.total:.0f}"),
            TimeElapsedColumn(),
            console=console,
            refresh_per_second=10,
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description=suite_name, total=float(total_cases), failed=0
        )
        self._live = Live(
            Group(self._progress, Text(""), legend),
            console=console,
            refresh_per_second=10,
        )
        self._live.start()

    def suite_case_started(self, run_id: str, case_name: str) -> None:
        pass

    def suite_case_completed(
        self,
        run_id: str,
        case_name: str,
        final_pass: bool,
        matched: bool,
        completed: int,
        total: int,
    ) -> None:
        if matched:
            self._passed += 1
        else:
            self._failed += 1

        if self._progress is not None and self._task_id is not None:
            self._progress.update(
                self._task_id,
                completed=self._passed + self._failed,
                failed=self._failed,
            )

    def suite_completed(
        self, run_id: str, total_cases: int, passed: int, elapsed_seconds: float
    ) -> None:
        if self._live is not None:
            self._live.stop()
        self._task_id = None
        self._progress = None
        self._live = None
