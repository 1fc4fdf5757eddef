"""Skill, Scenario and Artifact: the subjects of an evaluation."""

from pydantic import BaseModel, Field

type Scenario = str
type Artifact = str


class Skill(BaseModel, frozen=True):
    """A named behavioural contract an artifact is expected to satisfy.

    Opaque to the harness beyond its identifier and the free-text criteria that
    are handed to the judge.
    """

    domain: str = Field(min_length=1)
    name: str = Field(min_length=1)
    criteria: list[str] = Field(default_factory=list)

    @property
    def identifier(self) -> str:
        return f"{self.domain}/{self.name}"

    @classmethod
    def parse(cls, identifier: str) -> "Skill":
        """Build a Skill from a ``domain/name`` identifier.

        Raises:
            ValueError: if the identifier is not of the form ``domain/name``.
        """
        domain, sep, name = identifier.partition("/")
        if not sep or not domain or not name or "/" in name:
            raise ValueError(
                f"skill identifier must look like 'domain/name', got {identifier!r}"
            )
        return cls(domain=domain, name=name)
