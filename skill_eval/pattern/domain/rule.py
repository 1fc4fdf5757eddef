"""PatternRule: one deterministic presence/absence check over an artifact."""

import re
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field

type RegexFlag = Literal["ignorecase", "multiline", "dotall"]

_FLAG_VALUES: dict[str, re.RegexFlag] = {
    "ignorecase": re.IGNORECASE,
    "multiline": re.MULTILINE,
    "dotall": re.DOTALL,
}


class Polarity(StrEnum):
    """Whether a rule's pattern must be found in, or kept out of, an artifact."""

    PRESENT = "present"
    ABSENT = "absent"


class PatternRule(BaseModel, frozen=True):
    """A reusable, stateless pattern check.

    ``pattern`` is a regular expression unless ``literal`` is set, in which case
    it is matched as a plain substring.
    """

    pattern: str = Field(min_length=1)
    polarity: Polarity
    message: str = Field(min_length=1)
    literal: bool = False
    flags: list[RegexFlag] = Field(default_factory=list)

    @property
    def regex_flags(self) -> int:
        value = 0
        for flag in self.flags:
            value |= _FLAG_VALUES[flag]
        return value

    @property
    def source(self) -> str:
        """The expression actually compiled for this rule."""
        return re.escape(self.pattern) if self.literal else self.pattern
