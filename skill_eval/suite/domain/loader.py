"""SuiteLoader Protocol: structural interface for loading suites and rule sets."""

from pathlib import Path
from typing import Protocol

from skill_eval.pattern.domain.rule import PatternRule
from skill_eval.suite.domain.suite import Suite


class SuiteLoader(Protocol):
    def load(self, path: Path) -> Suite: ...

    def load_rules(self, path: Path) -> list[PatternRule]: ...
