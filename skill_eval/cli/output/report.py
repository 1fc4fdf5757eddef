"""Report rendering for evaluation outcomes: JSON documents and colorized text."""

from typing import Any

from skill_eval.evaluation.domain.outcome import EvaluationOutcome
from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeParseFailure,
    JudgeVerdict,
)
from skill_eval.suite.domain.summary import SuiteSummary
from skill_eval.validation.domain.report import (
    CrossValidationReport,
    InsufficientProviders,
)

type JsonDict = dict[str, Any]

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_WHITE = "\033[97m"

_RULE_WIDTH = 72


class _Palette:
    """ANSI codes, or empty strings when color is off."""

    def __init__(self, color: bool) -> None:
        self.reset = _RESET if color else ""
        self.bold = _BOLD if color else ""
        self.dim = _DIM if color else ""
        self.cyan = _CYAN if color else ""
        self.yellow = _YELLOW if color else ""
        self.green = _GREEN if color else ""
        self.red = _RED if color else ""
        self.white = _WHITE if color else ""

    def score(self, score: float, min_score: float) -> str:
        if score >= min_score:
            return self.green
        if score >= min_score - 1.0:
            return self.yellow
        return self.red

    def verdict(self, passed: bool) -> str:
        return self.green if passed else self.red


def _rule(p: _Palette, color: str) -> str:
    return f"{color}{'─' * _RULE_WIDTH}{p.reset}"


def _pass_label(passed: bool) -> str:
    return "PASS" if passed else "FAIL"


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def build_report(outcome: EvaluationOutcome) -> JsonDict:
    return outcome.model_dump(mode="json")


def build_suite_report(summary: SuiteSummary) -> JsonDict:
    return {
        "run_id": summary.run_id,
        "suite_name": summary.suite_name,
        "skill_id": summary.skill_id,
        "all_passed": summary.all_passed,
        "passed": summary.passed_count,
        "total": len(summary.cases),
        "cases": [
            {
                "case_name": case.case_name,
                "expect": case.expect,
                "matched": case.matched,
                **build_report(case.outcome),
            }
            for case in summary.cases
        ],
    }


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def render_summary(outcome: EvaluationOutcome, color: bool = True) -> str:
    """Render one outcome as a multi-line, optionally colorized summary.

    Sections: header, pattern checks, judge result (score breakdown and issues),
    and the failure reasons when the run did not pass.
    """
    p = _Palette(color)
    lines: list[str] = [
        "",
        _rule(p, p.cyan),
        f"{p.cyan}{p.bold}  {outcome.skill_id}  ·  "
        f"{p.verdict(outcome.final_pass)}{_pass_label(outcome.final_pass)}{p.reset}",
        _rule(p, p.cyan),
    ]

    meta_rows: list[tuple[str, str]] = [
        ("Scenario", outcome.scenario),
        ("Judge mode", outcome.judge_mode),
        ("Min score", f"{outcome.min_score:.2f}"),
    ]
    label_w = max(len(label) for label, _ in meta_rows)
    for label, value in meta_rows:
        lines.append(f"  {p.dim}{label:<{label_w}}{p.reset}  {p.white}{value}{p.reset}")

    lines.extend(_render_assertions(outcome=outcome, p=p))
    lines.extend(_render_judge_signal(outcome=outcome, p=p))

    if outcome.reasons:
        lines.append("")
        lines.append(f"  {p.red}{p.bold}Reasons{p.reset}")
        lines.extend(f"  {p.red}-{p.reset} {reason}" for reason in outcome.reasons)

    lines.append("")
    lines.append(_rule(p, p.cyan))
    return "\n".join(lines)


def _render_assertions(outcome: EvaluationOutcome, p: _Palette) -> list[str]:
    total = len(outcome.assertion_results)
    failed = len(outcome.failed_assertions)
    lines = ["", f"  {p.bold}Pattern checks{p.reset}  {total - failed}/{total} satisfied"]
    for result in outcome.failed_assertions:
        lines.append(
            f"  {p.red}✗{p.reset} {p.dim}[{result.rule.polarity}]{p.reset} "
            f"{result.message}"
        )
    return lines


def _render_judge_signal(outcome: EvaluationOutcome, p: _Palette) -> list[str]:
    signal = outcome.judge_signal
    lines = ["", f"  {p.bold}Judge{p.reset}"]
    match signal:
        case None:
            lines.append(f"  {p.dim}not consulted{p.reset}")
        case JudgeVerdict():
            lines.extend(_render_verdict(signal, min_score=outcome.min_score, p=p))
        case JudgeParseFailure():
            lines.append(
                f"  {p.red}[{signal.provider}] unparseable response:{p.reset} "
                f"{signal.reason}"
            )
        case JudgeBackendFailure():
            suffix = " (timed out)" if signal.timed_out else ""
            lines.append(
                f"  {p.red}[{signal.provider}] backend failure{suffix}:{p.reset} "
                f"{signal.reason}"
            )
        case CrossValidationReport():
            color = p.score(signal.average_score, outcome.min_score)
            agreement = "agree" if signal.agreement else "disagree"
            lines.append(
                f"  average {color}{signal.average_score:.2f}{p.reset}  "
                f"judges {p.verdict(signal.agreement)}{agreement}{p.reset}"
            )
            for verdict in signal.per_provider.values():
                lines.extend(_render_verdict(verdict, min_score=outcome.min_score, p=p))
            for provider, failure in signal.failures.items():
                lines.append(
                    f"  {p.yellow}[{provider}] excluded:{p.reset} {failure.reason}"
                )
        case InsufficientProviders():
            lines.append(
                f"  {p.red}insufficient providers:{p.reset} "
                f"{signal.usable}/{signal.required} usable verdicts"
            )
            for provider, failure in signal.failures.items():
                lines.append(f"  {p.dim}[{provider}]{p.reset} {failure.reason}")
    return lines


def _render_verdict(verdict: JudgeVerdict, min_score: float, p: _Palette) -> list[str]:
    color = p.score(verdict.overall_score, min_score)
    lines = [
        f"  [{verdict.provider}] {p.verdict(verdict.passed)}"
        f"{_pass_label(verdict.passed)}{p.reset}  "
        f"score {color}{verdict.overall_score:.2f}{p.reset}"
    ]
    if verdict.scores:
        name_w = max(len(name) for name in verdict.scores)
        for name, score in verdict.scores.items():
            filled = min(5, max(0, round(score)))
            bar = f"{p.score(score, min_score)}{'█' * filled}{p.dim}{'░' * (5 - filled)}{p.reset}"
            lines.append(f"    {p.dim}{name:<{name_w}}{p.reset}  {score:>4.1f}  {bar}")
    for issue in verdict.issues:
        short = issue[:100] + ("…" if len(issue) > 100 else "")
        lines.append(f"    {p.yellow}•{p.reset} {short}")
    return lines


def render_suite_summary(summary: SuiteSummary, color: bool = True) -> str:
    """Render every case outcome followed by a one-line suite tally.

    Each case heading shows the expected and actual result; the tally counts
    cases whose result matched their expectation.
    """
    p = _Palette(color)
    blocks = []
    for case in summary.cases:
        expected = case.expect.upper()
        actual = _pass_label(case.outcome.final_pass)
        mark = "✓" if case.matched else "✗"
        blocks.append(
            f"\n{p.bold}{case.case_name}{p.reset}  "
            f"{p.dim}expected{p.reset} {expected}  {p.dim}got{p.reset} {actual}  "
            f"{p.verdict(case.matched)}{mark}{p.reset}"
        )
        blocks.append(render_summary(case.outcome, color=color))

    total = len(summary.cases)
    tally_color = p.verdict(summary.all_passed)
    blocks.append(
        f"\n  {p.bold}{summary.suite_name}{p.reset}  "
        f"{tally_color}{summary.passed_count}/{total} passed{p.reset}\n"
    )
    return "\n".join(blocks)
