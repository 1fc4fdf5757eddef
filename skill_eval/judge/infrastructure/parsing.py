"""Parsing of raw judge backend text into a JudgeVerdict or JudgeParseFailure."""

from pydantic import ValidationError

from skill_eval.judge.domain.verdict import JudgeParseFailure, JudgeResponse, JudgeVerdict


def _strip_code_fence(text: str) -> str:
    """Drop a surrounding ```json ... ``` fence some models add despite instructions."""
    if not text.startswith("```"):
        return text
    first_newline = text.find("\n")
    if first_newline == -1:
        return text
    body = text[first_newline + 1 :]
    if body.rstrip().endswith("```"):
        body = body.rstrip()[:-3]
    return body.strip()


def parse_judge_response(provider: str, raw: str) -> JudgeVerdict | JudgeParseFailure:
    """Parse *raw* strictly into a verdict.

    No field is ever defaulted from a broken payload: anything that does not
    validate as a JudgeResponse becomes a JudgeParseFailure carrying the raw text.
    """
    text = _strip_code_fence(raw.strip())
    if not text:
        return JudgeParseFailure(
            provider=provider,
            reason="empty response",
            raw_response=raw,
        )

    try:
        response = JudgeResponse.model_validate_json(text)
    except ValidationError as exc:
        return JudgeParseFailure(
            provider=provider,
            reason=f"Failed to parse judge response: {exc}",
            raw_response=raw,
        )

    return JudgeVerdict(
        provider=provider,
        passed=response.passed,
        overall_score=response.overall_score,
        issues=response.issues,
        scores=response.scores,
        raw_response=raw,
    )
