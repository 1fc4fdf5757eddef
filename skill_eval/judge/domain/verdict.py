"""Judge outcomes: a parsed verdict, or one of two distinct failure kinds.

A negative judgement (``passed=False``), a response we could not parse, and a
backend that never answered are three different things and stay three
different types.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class JudgeResponse(BaseModel):
    """The structured answer a judge backend is asked to return.

    Validated strictly: a missing ``pass`` key, a non-numeric score, or a score
    outside [0, 5] is a parse failure, never a defaulted value.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    passed: bool = Field(alias="pass")
    overall_score: float = Field(ge=0.0, le=5.0)
    issues: list[str] = Field(default_factory=list)
    scores: dict[str, float] = Field(default_factory=dict)


class JudgeVerdict(BaseModel, frozen=True):
    """A successfully parsed judgement from one provider."""

    status: Literal["ok"] = "ok"
    provider: str
    passed: bool
    overall_score: float = Field(ge=0.0, le=5.0)
    issues: list[str] = Field(default_factory=list)
    scores: dict[str, float] = Field(default_factory=dict)
    raw_response: str


class JudgeParseFailure(BaseModel, frozen=True):
    """The backend answered but the answer is not a valid verdict."""

    status: Literal["parse_failure"] = "parse_failure"
    provider: str
    reason: str
    raw_response: str


class JudgeBackendFailure(BaseModel, frozen=True):
    """The backend could not be reached, errored, or did not answer in time."""

    status: Literal["backend_failure"] = "backend_failure"
    provider: str
    reason: str
    timed_out: bool = False


type JudgeFailure = Annotated[
    JudgeParseFailure | JudgeBackendFailure,
    Field(discriminator="status"),
]

type JudgeOutcome = Annotated[
    JudgeVerdict | JudgeParseFailure | JudgeBackendFailure,
    Field(discriminator="status"),
]
