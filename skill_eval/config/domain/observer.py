"""Observer port for the config domain: defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, providers: list[str]) -> None: ...

    def config_live_providers_gated(self, providers: list[str]) -> None: ...
