"""Judge provider configuration models: discriminated union on the `type` field."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

DEFAULT_TIMEOUT_SECONDS = 30.0


class LiteLLMProviderConfig(BaseModel, frozen=True):
    """A live judge backend reached through LiteLLM (OpenAI, Anthropic, Vertex, ...)."""

    type: Literal["litellm"]
    model: str = Field(min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    api_key: str | None = None
    api_base: str | None = None


class MockProviderConfig(BaseModel, frozen=True):
    """An offline, deterministic judge used for CI and local runs.

    ``response`` overrides the default passing payload; ``raw_response`` replaces
    the payload text verbatim (useful to exercise parse failures).
    """

    type: Literal["mock"]
    response: dict[str, Any] | None = None
    raw_response: str | None = None
    delay_seconds: float = Field(default=0.0, ge=0.0)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)


# Pydantic selects the correct subtype from the `type` field.
type ProviderConfig = Annotated[
    LiteLLMProviderConfig | MockProviderConfig,
    Field(discriminator="type"),
]
