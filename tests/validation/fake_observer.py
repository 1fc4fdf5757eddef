"""FakeValidationObserver: records cross-validation events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationStartedEvent:
    skill_id: str
    providers: list[str]
    min_providers: int


@dataclass(frozen=True)
class DeadlineExceededEvent:
    skill_id: str
    pending_providers: list[str]
    deadline_seconds: float


@dataclass(frozen=True)
class ProviderErroredEvent:
    skill_id: str
    provider: str
    reason: str


@dataclass(frozen=True)
class ValidationCompletedEvent:
    skill_id: str
    agreement: bool
    average_score: float
    usable: int


@dataclass(frozen=True)
class InsufficientProvidersEvent:
    skill_id: str
    required: int
    usable: int


class FakeValidationObserver:
    def __init__(self) -> None:
        self.started: list[ValidationStartedEvent] = []
        self.deadlines: list[DeadlineExceededEvent] = []
        self.errored: list[ProviderErroredEvent] = []
        self.completed: list[ValidationCompletedEvent] = []
        self.insufficient: list[InsufficientProvidersEvent] = []

    def validation_started(
        self, skill_id: str, providers: list[str], min_providers: int
    ) -> None:
        self.started.append(
            ValidationStartedEvent(
                skill_id=skill_id, providers=providers, min_providers=min_providers
            )
        )

    def validation_deadline_exceeded(
        self, skill_id: str, pending_providers: list[str], deadline_seconds: float
    ) -> None:
        self.deadlines.append(
            DeadlineExceededEvent(
                skill_id=skill_id,
                pending_providers=pending_providers,
                deadline_seconds=deadline_seconds,
            )
        )

    def validation_provider_errored(
        self, skill_id: str, provider: str, reason: str
    ) -> None:
        self.errored.append(
            ProviderErroredEvent(skill_id=skill_id, provider=provider, reason=reason)
        )

    def validation_completed(
        self, skill_id: str, agreement: bool, average_score: float, usable: int
    ) -> None:
        self.completed.append(
            ValidationCompletedEvent(
                skill_id=skill_id,
                agreement=agreement,
                average_score=average_score,
                usable=usable,
            )
        )

    def validation_insufficient_providers(
        self, skill_id: str, required: int, usable: int
    ) -> None:
        self.insufficient.append(
            InsufficientProvidersEvent(skill_id=skill_id, required=required, usable=usable)
        )
