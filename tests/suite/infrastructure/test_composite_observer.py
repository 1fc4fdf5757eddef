"""Tests for CompositeSuiteObserver."""

from skill_eval.suite.infrastructure.composite_observer import CompositeSuiteObserver
from tests.suite.fake_observer import FakeSuiteObserver


def _make_composite(*observers: FakeSuiteObserver) -> CompositeSuiteObserver:
    return CompositeSuiteObserver(observers=list(observers))


class TestCompositeSuiteObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_suite_started_forwarded_to_all(self) -> None:
        obs_a = FakeSuiteObserver()
        obs_b = FakeSuiteObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.suite_started(
            run_id="run-1", suite_name="smoke", total_cases=3, max_concurrent=2
        )

        assert obs_a.started[0].run_id == "run-1"
        assert obs_b.started[0].max_concurrent == 2

    def test_loading_events_forwarded(self) -> None:
        obs = FakeSuiteObserver()
        composite = _make_composite(obs)

        composite.suite_loaded(path="s.yaml", suite_name="smoke", total_cases=2)
        composite.suite_loading_failed(path="t.yaml", reason="boom")

        assert obs.loaded[0].total_cases == 2
        assert obs.loading_failed[0].reason == "boom"

    def test_case_events_preserve_all_fields(self) -> None:
        obs = FakeSuiteObserver()
        composite = _make_composite(obs)

        composite.suite_case_started(run_id="r", case_name="c")
        composite.suite_case_completed(
            run_id="r",
            case_name="c",
            final_pass=False,
            matched=True,
            completed=1,
            total=4,
        )
        composite.suite_completed(
            run_id="r", total_cases=4, passed=3, elapsed_seconds=1.5
        )

        assert obs.case_started[0].case_name == "c"
        event = obs.case_completed[0]
        assert (event.final_pass, event.matched) == (False, True)
        assert (event.completed, event.total) == (1, 4)
        assert obs.completed[0].passed == 3

    def test_empty_composite_is_a_no_op(self) -> None:
        composite = _make_composite()
        composite.suite_case_started(run_id="r", case_name="c")
