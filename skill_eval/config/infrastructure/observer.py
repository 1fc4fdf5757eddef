"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, providers: list[str]) -> None:
        self._log.info("config.loaded", name=name, providers=providers)

    def config_live_providers_gated(self, providers: list[str]) -> None:
        self._log.warning(
            "config.live_providers_gated",
            providers=providers,
            message="Live judge providers are configured but integration is off",
        )
