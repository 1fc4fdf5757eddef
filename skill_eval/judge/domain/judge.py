"""JudgeClient Protocol: structural interface for all judge backends."""

from typing import Protocol

from skill_eval.judge.domain.prompt import JudgePrompt
from skill_eval.judge.domain.verdict import (
    JudgeBackendFailure,
    JudgeParseFailure,
    JudgeVerdict,
)


class JudgeClient(Protocol):
    """Structural interface satisfied by any judge backend adapter.

    ``judge`` never raises for backend or parse problems; it returns the
    matching failure outcome instead.
    """

    @property
    def provider(self) -> str: ...

    async def judge(
        self, prompt: JudgePrompt
    ) -> JudgeVerdict | JudgeParseFailure | JudgeBackendFailure: ...
