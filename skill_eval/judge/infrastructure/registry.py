"""JudgeRegistry: maps provider names from HarnessConfig to JudgeClient instances."""

from collections.abc import Mapping

import litellm

from skill_eval.config.domain.provider import (
    LiteLLMProviderConfig,
    MockProviderConfig,
    ProviderConfig,
)
from skill_eval.judge.domain.judge import JudgeClient
from skill_eval.judge.domain.observer import JudgeObserver
from skill_eval.judge.infrastructure.errors import UnknownJudgeProviderError
from skill_eval.judge.infrastructure.litellm import LiteLLMJudgeClient
from skill_eval.judge.infrastructure.mock import MockJudgeClient


def create_judge_client(
    provider: str, config: ProviderConfig, observer: JudgeObserver
) -> JudgeClient:
    """Return the JudgeClient adapter for one provider config."""
    match config:
        case MockProviderConfig():
            return MockJudgeClient(provider=provider, config=config, observer=observer)
        case LiteLLMProviderConfig():
            return LiteLLMJudgeClient(provider=provider, config=config, observer=observer)


class JudgeRegistry:
    """Lookup of configured judge clients by provider name.

    Also knows which providers are offline (``mock``), so callers can honour the
    integration toggle without inspecting adapter types.
    """

    def __init__(self, clients: Mapping[str, JudgeClient], offline: set[str]) -> None:
        self._clients = dict(clients)
        self._offline = set(offline)

    @classmethod
    def from_config(
        cls, providers: Mapping[str, ProviderConfig], observer: JudgeObserver
    ) -> "JudgeRegistry":
        litellm.suppress_debug_info = True
        clients = {
            name: create_judge_client(provider=name, config=cfg, observer=observer)
            for name, cfg in providers.items()
        }
        offline = {
            name for name, cfg in providers.items() if isinstance(cfg, MockProviderConfig)
        }
        return cls(clients=clients, offline=offline)

    @property
    def providers(self) -> list[str]:
        return list(self._clients)

    def get(self, provider: str) -> JudgeClient:
        """Return the client for *provider*.

        Raises:
            UnknownJudgeProviderError: if *provider* is not configured.
        """
        try:
            return self._clients[provider]
        except KeyError:
            raise UnknownJudgeProviderError(
                provider=provider, known=list(self._clients)
            ) from None

    def is_offline(self, provider: str) -> bool:
        return provider in self._offline
