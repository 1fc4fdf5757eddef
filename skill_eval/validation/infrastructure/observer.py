"""Structlog implementation of the ValidationObserver port."""

import structlog


class StructlogValidationObserver:
    """Delegates cross-validation events to structlog.

    Satisfies the ValidationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def validation_started(
        self, skill_id: str, providers: list[str], min_providers: int
    ) -> None:
        self._log.info(
            "validation.started",
            skill_id=skill_id,
            providers=providers,
            min_providers=min_providers,
        )

    def validation_deadline_exceeded(
        self, skill_id: str, pending_providers: list[str], deadline_seconds: float
    ) -> None:
        self._log.warning(
            "validation.deadline_exceeded",
            skill_id=skill_id,
            pending_providers=pending_providers,
            deadline_seconds=deadline_seconds,
        )

    def validation_provider_errored(
        self, skill_id: str, provider: str, reason: str
    ) -> None:
        self._log.error(
            "validation.provider_errored",
            skill_id=skill_id,
            provider=provider,
            reason=reason,
        )

    def validation_completed(
        self, skill_id: str, agreement: bool, average_score: float, usable: int
    ) -> None:
        self._log.info(
            "validation.completed",
            skill_id=skill_id,
            agreement=agreement,
            average_score=round(average_score, 2),
            usable=usable,
        )

    def validation_insufficient_providers(
        self, skill_id: str, required: int, usable: int
    ) -> None:
        self._log.error(
            "validation.insufficient_providers",
            skill_id=skill_id,
            required=required,
            usable=usable,
        )
