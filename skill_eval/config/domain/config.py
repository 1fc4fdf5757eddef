"""Top-level HarnessConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from skill_eval.config.domain.execution import ExecutionConfig
from skill_eval.config.domain.judge import JudgeConfig
from skill_eval.config.domain.provider import MockProviderConfig, ProviderConfig
from skill_eval.config.domain.toggles import ModeToggles

type ProviderName = str


class HarnessConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a skill-eval harness."""

    name: str = Field(min_length=1)
    providers: dict[ProviderName, ProviderConfig] = Field(min_length=1)
    judge: JudgeConfig = Field(default_factory=JudgeConfig)
    toggles: ModeToggles = Field(default_factory=ModeToggles)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)

    def with_toggles(self, toggles: ModeToggles) -> "HarnessConfig":
        return self.model_copy(update={"toggles": toggles})


def default_config() -> HarnessConfig:
    """Config used when no file is given: a single offline `mock` provider."""
    return HarnessConfig(
        name="default",
        providers={"mock": MockProviderConfig(type="mock")},
    )
