"""Tests for JudgePromptBuilder."""

from skill_eval.judge.domain.prompt import JudgePromptBuilder
from skill_eval.skill.domain.skill import Skill

_SKILL = Skill(
    domain="rails",
    name="turbo-streams",
    criteria=["Prefer morph refreshes", "Avoid per-record broadcasts"],
)
_SCENARIO = "Add live comment updates to a post page"
_ARTIFACT = "turbo_stream.replace(@comment, method: :morph)"


class TestJudgePromptBuilder:
    def test_identical_inputs_give_identical_prompts(self) -> None:
        builder = JudgePromptBuilder()
        first = builder.build(skill=_SKILL, scenario=_SCENARIO, artifact=_ARTIFACT)
        second = builder.build(skill=_SKILL, scenario=_SCENARIO, artifact=_ARTIFACT)

        assert first == second
        assert first.user == second.user
        assert first.system == second.system

    def test_user_message_contains_every_section(self) -> None:
        prompt = JudgePromptBuilder().build(
            skill=_SKILL, scenario=_SCENARIO, artifact=_ARTIFACT
        )

        assert "## Skill\nrails/turbo-streams" in prompt.user
        assert "- Prefer morph refreshes" in prompt.user
        assert "- Avoid per-record broadcasts" in prompt.user
        assert f"## Scenario\n{_SCENARIO}" in prompt.user
        assert f"<artifact>\n{_ARTIFACT}\n</artifact>" in prompt.user

    def test_skill_id_is_carried(self) -> None:
        prompt = JudgePromptBuilder().build(
            skill=_SKILL, scenario=_SCENARIO, artifact=_ARTIFACT
        )
        assert prompt.skill_id == "rails/turbo-streams"

    def test_default_criteria_when_skill_has_none(self) -> None:
        prompt = JudgePromptBuilder().build(
            skill=Skill.parse("rails/hotwire"), scenario=_SCENARIO, artifact=_ARTIFACT
        )
        assert "## Evaluation Criteria\n- " in prompt.user

    def test_system_prompt_requests_json_contract(self) -> None:
        prompt = JudgePromptBuilder().build(
            skill=_SKILL, scenario=_SCENARIO, artifact=_ARTIFACT
        )
        for key in ("pass", "overall_score", "issues", "scores"):
            assert key in prompt.system

    def test_different_artifacts_give_different_prompts(self) -> None:
        builder = JudgePromptBuilder()
        first = builder.build(skill=_SKILL, scenario=_SCENARIO, artifact="a")
        second = builder.build(skill=_SKILL, scenario=_SCENARIO, artifact="b")
        assert first != second
