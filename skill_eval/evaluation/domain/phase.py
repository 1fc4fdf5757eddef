"""RunPhase: the states a single scenario run moves through."""

from enum import StrEnum


class RunPhase(StrEnum):
    PATTERN_CHECK = "pattern_check"
    JUDGE_DISPATCH = "judge_dispatch"
    AGGREGATE = "aggregate"
    DONE = "done"
