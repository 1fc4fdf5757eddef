"""Observer port for the cross-validation domain."""

from typing import Protocol


class ValidationObserver(Protocol):
    def validation_started(
        self, skill_id: str, providers: list[str], min_providers: int
    ) -> None: ...

    def validation_deadline_exceeded(
        self, skill_id: str, pending_providers: list[str], deadline_seconds: float
    ) -> None: ...

    def validation_provider_errored(
        self, skill_id: str, provider: str, reason: str
    ) -> None: ...

    def validation_completed(
        self, skill_id: str, agreement: bool, average_score: float, usable: int
    ) -> None: ...

    def validation_insufficient_providers(
        self, skill_id: str, required: int, usable: int
    ) -> None: ...
