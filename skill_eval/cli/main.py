"""CLI entrypoint for skill-eval: typer app with `run` and `suite` commands."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import structlog
import typer

from skill_eval.cli.output.report import (
    build_report,
    build_suite_report,
    render_summary,
    render_suite_summary,
)
from skill_eval.config.domain.config import HarnessConfig, default_config
from skill_eval.config.domain.toggles import ModeToggles
from skill_eval.config.infrastructure.observer import StructlogConfigObserver
from skill_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from skill_eval.core.errors import SkillEvalError
from skill_eval.evaluation.application.runner import ScenarioRunner
from skill_eval.evaluation.domain.mode import parse_judge_mode
from skill_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from skill_eval.judge.infrastructure.observer import StructlogJudgeObserver
from skill_eval.judge.infrastructure.registry import JudgeRegistry
from skill_eval.pattern.domain.rule import PatternRule
from skill_eval.skill.domain.skill import Skill
from skill_eval.suite.application.runner import SuiteRunner
from skill_eval.suite.domain.observer import SuiteObserver
from skill_eval.suite.infrastructure.composite_observer import CompositeSuiteObserver
from skill_eval.suite.infrastructure.observer import StructlogSuiteObserver
from skill_eval.suite.infrastructure.progress_observer import ProgressSuiteObserver
from skill_eval.suite.infrastructure.yaml_loader import YamlSuiteLoader
from skill_eval.validation.application.cross_validator import CrossValidator
from skill_eval.validation.infrastructure.observer import StructlogValidationObserver

app = typer.Typer(add_completion=False)

_FORMATS = ("text", "json")

# Shared options: typer re-reads these defaults for every command.
_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to harness config YAML (default: mock only)"
)
_FORMAT_OPTION = typer.Option("text", "--format", help="Report format: 'text' or 'json'")
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)
_INTEGRATION_OPTION = typer.Option(
    None,
    "--integration/--no-integration",
    envvar="INTEGRATION",
    help="Allow live (non-mock) judge backends; overrides the config file",
)
_CROSS_VALIDATE_OPTION = typer.Option(
    None,
    "--cross-validate/--no-cross-validate",
    envvar="CROSS_VALIDATE",
    help="Allow multi-provider judging; overrides the config file",
)


class _UsageError(SkillEvalError):
    """Raised for invalid command-line input."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to parse arguments: {reason}")


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        raise _UsageError(
            f"invalid log format {log_format!r}, must be 'console' or 'json'"
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _check_format(output_format: str) -> None:
    if output_format not in _FORMATS:
        raise _UsageError(
            f"invalid report format {output_format!r}, must be 'text' or 'json'"
        )


def _load_config(
    config_path: Path | None,
    integration: bool | None,
    cross_validate: bool | None,
) -> HarnessConfig:
    """Load the harness config and apply any toggle overrides from the CLI."""
    if config_path is None:
        config = default_config()
    else:
        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        config = loader.load(path=config_path)

    toggles = ModeToggles(
        integration=(
            config.toggles.integration if integration is None else integration
        ),
        cross_validate=(
            config.toggles.cross_validate if cross_validate is None else cross_validate
        ),
    )
    return config.with_toggles(toggles)


def _build_scenario_runner(config: HarnessConfig) -> ScenarioRunner:
    registry = JudgeRegistry.from_config(
        providers=config.providers, observer=StructlogJudgeObserver()
    )
    cross_validator = CrossValidator(
        registry=registry,
        observer=StructlogValidationObserver(),
        deadline_seconds=config.judge.deadline_seconds,
    )
    return ScenarioRunner(
        config=config,
        registry=registry,
        cross_validator=cross_validator,
        observer=StructlogEvaluationObserver(),
    )


def _emit_json(document: dict[str, Any]) -> None:
    typer.echo(json.dumps(document, indent=2))


def _read_artifact(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _UsageError(f"cannot read artifact {path}: {exc}") from exc


@app.command()
def run(
    skill_id: str = typer.Argument(..., help="Skill identifier, e.g. rails/turbo-streams"),
    scenario: str = typer.Option(..., "--scenario", "-s", help="Scenario text"),
    artifact_path: Path = typer.Option(
        ..., "--artifact", "-a", help="Path to the generated artifact"
    ),
    rules_path: Path | None = typer.Option(
        None, "--rules", "-r", help="Path to a YAML rule list"
    ),
    judge: str = typer.Option(
        "none", "--judge", "-j", help="'none', 'single:PROVIDER' or 'cross:P1,P2'"
    ),
    criteria: list[str] | None = typer.Option(
        None, "--criterion", help="Evaluation criterion for the judge (repeatable)"
    ),
    config_path: Path | None = _CONFIG_OPTION,
    output_format: str = _FORMAT_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    integration: bool | None = _INTEGRATION_OPTION,
    cross_validate: bool | None = _CROSS_VALIDATE_OPTION,
) -> None:
    """Evaluate one artifact produced for a skill and scenario."""
    final_pass = False
    try:
        _configure_structlog(log_format=log_format)
        _check_format(output_format=output_format)

        try:
            skill = Skill.parse(skill_id).model_copy(
                update={"criteria": list(criteria or [])}
            )
            judge_mode = parse_judge_mode(judge)
        except ValueError as exc:
            raise _UsageError(str(exc)) from exc

        config = _load_config(
            config_path=config_path,
            integration=integration,
            cross_validate=cross_validate,
        )
        artifact = _read_artifact(artifact_path)
        rules: list[PatternRule] = []
        if rules_path is not None:
            loader = YamlSuiteLoader(observer=StructlogSuiteObserver())
            rules = loader.load_rules(path=rules_path)

        runner = _build_scenario_runner(config)
        outcome = asyncio.run(
            runner.run(
                skill=skill,
                scenario=scenario,
                artifact=artifact,
                rules=rules,
                judge_mode=judge_mode,
            )
        )

        if output_format == "json":
            _emit_json(build_report(outcome))
        else:
            typer.echo(render_summary(outcome, color=sys.stdout.isatty()))
        final_pass = outcome.final_pass

    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.", err=True)
    except SkillEvalError as exc:
        typer.echo(str(exc), err=True)

    raise typer.Exit(code=0 if final_pass else 1)


@app.command()
def suite(
    suite_path: Path = typer.Argument(..., help="Path to a suite YAML file"),
    config_path: Path | None = _CONFIG_OPTION,
    output_format: str = _FORMAT_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    integration: bool | None = _INTEGRATION_OPTION,
    cross_validate: bool | None = _CROSS_VALIDATE_OPTION,
) -> None:
    """Evaluate every case of a suite file."""
    all_passed = False
    try:
        _configure_structlog(log_format=log_format)
        _check_format(output_format=output_format)

        config = _load_config(
            config_path=config_path,
            integration=integration,
            cross_validate=cross_validate,
        )
        observers: list[SuiteObserver] = [StructlogSuiteObserver()]
        if log_format != "json" and output_format != "json":
            observers.append(ProgressSuiteObserver())
        suite_observer = CompositeSuiteObserver(observers=observers)

        loaded = YamlSuiteLoader(observer=suite_observer).load(path=suite_path)
        suite_runner = SuiteRunner(
            scenario_runner=_build_scenario_runner(config),
            observer=suite_observer,
            max_concurrent=config.execution.max_concurrent,
        )
        summary = asyncio.run(suite_runner.run(loaded))

        if output_format == "json":
            _emit_json(build_suite_report(summary))
        else:
            typer.echo(render_suite_summary(summary, color=sys.stdout.isatty()))
        all_passed = summary.all_passed

    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.", err=True)
    except SkillEvalError as exc:
        typer.echo(str(exc), err=True)

    raise typer.Exit(code=0 if all_passed else 1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
