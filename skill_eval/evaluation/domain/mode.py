"""JudgeMode: tagged union selecting how (and whether) an artifact is judged."""

from typing import Annotated, Literal, Self

from pydantic import BaseModel, Field, model_validator


class NoJudge(BaseModel, frozen=True):
    """Only deterministic pattern checks run."""

    kind: Literal["none"] = "none"

    def describe(self) -> str:
        return "none"


class SingleJudge(BaseModel, frozen=True):
    """One provider judges the artifact."""

    kind: Literal["single"] = "single"
    provider: str = Field(min_length=1)

    def describe(self) -> str:
        return f"single:{self.provider}"


class CrossJudge(BaseModel, frozen=True):
    """Several providers judge the artifact concurrently and must agree."""

    kind: Literal["cross"] = "cross"
    providers: list[str] = Field(min_length=2)
    min_providers: int = Field(default=2, ge=2)

    @model_validator(mode="after")
    def _min_providers_reachable(self) -> Self:
        if self.min_providers > len(set(self.providers)):
            raise ValueError(
                f"min_providers ({self.min_providers}) exceeds the number of "
                f"distinct providers ({len(set(self.providers))})"
            )
        return self

    def describe(self) -> str:
        return f"cross:{','.join(self.providers)}"


type JudgeMode = Annotated[
    NoJudge | SingleJudge | CrossJudge,
    Field(discriminator="kind"),
]


def parse_judge_mode(text: str) -> NoJudge | SingleJudge | CrossJudge:
    """Parse the CLI form of a judge mode: ``none``, ``single:P`` or ``cross:P1,P2``.

    Raises:
        ValueError: if *text* is not one of the accepted forms.
    """
    kind, _, rest = text.strip().partition(":")
    if kind == "none" and not rest:
        return NoJudge()
    if kind == "single" and rest:
        return SingleJudge(provider=rest.strip())
    if kind == "cross" and rest:
        providers = [p.strip() for p in rest.split(",") if p.strip()]
        return CrossJudge(providers=providers)
    raise ValueError(
        f"judge mode must be 'none', 'single:PROVIDER' or 'cross:P1,P2', got {text!r}"
    )
