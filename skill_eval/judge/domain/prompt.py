"""JudgePrompt and JudgePromptBuilder: deterministic judge prompt composition."""

from pydantic import BaseModel

from skill_eval.skill.domain.skill import Artifact, Scenario, Skill

_SYSTEM_PROMPT = """\
You are an expert code reviewer judging whether code produced by an AI agent \
follows a named skill: a behavioural contract describing the patterns the code \
must use and the antipatterns it must avoid. Judge only the code under \
evaluation, against the scenario it was written for and the skill criteria.

Score the code on a 0-5 scale:
0 - Does not address the scenario at all.
1 - Addresses the scenario but violates the skill throughout.
2 - Partially follows the skill; major antipatterns remain.
3 - Follows the skill with noticeable deviations.
4 - Follows the skill; only minor, non-impactful deviations.
5 - Exemplary use of the skill for this scenario.

Respond with a single JSON object and nothing else (no markdown fences):
- pass: boolean, true if the code is acceptable for the scenario under this skill
- overall_score: number between 0 and 5
- issues: list of strings, each a concrete problem found (empty list if none)
- scores: object mapping each criterion you assessed to a 0-5 number
"""


class JudgePrompt(BaseModel, frozen=True):
    """Fully composed prompt text sent to a judge backend."""

    skill_id: str
    system: str
    user: str


class JudgePromptBuilder:
    """Builds byte-identical prompts for identical (skill, scenario, artifact) inputs."""

    def build(self, skill: Skill, scenario: Scenario, artifact: Artifact) -> JudgePrompt:
        if skill.criteria:
            criteria = "\n".join(f"- {criterion}" for criterion in skill.criteria)
        else:
            criteria = "- Apply the conventions the skill is named for."

        user_message = (
            f"## Skill\n{skill.identifier}\n\n"
            f"## Evaluation Criteria\n{criteria}\n\n"
            f"## Scenario\n{scenario}\n\n"
            f"## Code to Evaluate\n<artifact>\n{artifact}\n</artifact>"
        )
        return JudgePrompt(
            skill_id=skill.identifier,
            system=_SYSTEM_PROMPT,
            user=user_message,
        )
