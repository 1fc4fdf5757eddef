"""YAML suite loader: parses suites and rule sets into validated domain objects."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from skill_eval.pattern.domain.rule import PatternRule
from skill_eval.suite.domain.observer import SuiteObserver
from skill_eval.suite.domain.suite import Suite
from skill_eval.suite.infrastructure.errors import SuiteLoadError

_RULES_ADAPTER = TypeAdapter(list[PatternRule])


class YamlSuiteLoader:
    """Loads Suite objects and standalone rule lists from YAML files.

    A case may carry its artifact inline (``artifact``) or reference a file
    (``artifact_path``, resolved relative to the suite file).
    """

    def __init__(self, observer: SuiteObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> Suite:
        """
        Load, resolve artifact files, validate, and return a Suite.

        Collects ALL unreadable artifact files before raising.

        Raises:
            SuiteLoadError: if the file is missing, not valid YAML, references
                unreadable artifact files, or violates the suite schema.
        """
        path_str = str(path)
        try:
            raw = self._parse(path=path)
            resolved = _resolve_artifacts(raw=raw, base_dir=path.parent)
            suite = _build_suite(resolved=resolved)
        except SuiteLoadError as exc:
            self._observer.suite_loading_failed(path=path_str, reason=str(exc))
            raise

        self._observer.suite_loaded(
            path=path_str, suite_name=suite.name, total_cases=len(suite.cases)
        )
        return suite

    def load_rules(self, path: Path) -> list[PatternRule]:
        """
        Load a rule list from a YAML file: either a top-level list or a mapping
        with a ``rules`` key.

        Raises:
            SuiteLoadError: if the file is missing, not valid YAML, or malformed.
        """
        raw = self._parse(path=path)
        if isinstance(raw, dict):
            raw = raw.get("rules", [])
        try:
            return _RULES_ADAPTER.validate_python(raw or [])
        except ValidationError as exc:
            raise SuiteLoadError(reason=f"{path}: {exc}") from exc

    def _parse(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as fh:
                return yaml.safe_load(fh)
        except FileNotFoundError as exc:
            raise SuiteLoadError(reason=f"file not found: {path}") from exc
        except yaml.YAMLError as exc:
            raise SuiteLoadError(reason=f"{path}: invalid YAML: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise SuiteLoadError(reason=f"{path}: not valid UTF-8: {exc}") from exc


def _resolve_artifacts(raw: Any, base_dir: Path) -> Any:
    """Replace each case's ``artifact_path`` with the file's contents."""
    if not isinstance(raw, dict):
        raise SuiteLoadError(reason="suite file must contain a mapping")

    cases_raw: list[Any] = raw.get("cases", []) or []
    errors: list[str] = []
    resolved_cases: list[Any] = []

    for index, case in enumerate(cases_raw):
        if not isinstance(case, dict) or "artifact_path" not in case:
            resolved_cases.append(case)
            continue
        artifact_path = base_dir / str(case["artifact_path"])
        try:
            artifact = artifact_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            errors.append(f"case {index}: cannot read artifact {artifact_path}: {exc}")
            continue
        resolved = {k: v for k, v in case.items() if k != "artifact_path"}
        resolved_cases.append({**resolved, "artifact": artifact})

    if errors:
        raise SuiteLoadError(reason="; ".join(errors))

    return {**raw, "cases": resolved_cases}


def _build_suite(resolved: Any) -> Suite:
    try:
        return Suite.model_validate(resolved)
    except ValidationError as exc:
        raise SuiteLoadError(reason=str(exc)) from exc
