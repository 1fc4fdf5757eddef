"""Mode toggles gating live judge backends and cross-validation."""

from pydantic import BaseModel


class ModeToggles(BaseModel, frozen=True):
    """Explicit switches threaded into the runner instead of process-wide flags.

    ``integration`` gates whether live (non-mock) judge backends are invoked at
    all; ``cross_validate`` gates whether more than one provider is consulted.
    """

    integration: bool = False
    cross_validate: bool = False
