"""Tests for PatternMatcher presence/absence evaluation."""

import pytest
from pydantic import ValidationError

from skill_eval.pattern.domain.matcher import PatternMatcher
from skill_eval.pattern.domain.rule import PatternRule, Polarity

_TURBO_STREAM_ARTIFACT = """\
class CommentsController < ApplicationController
  def create
    @comment = Comment.create!(comment_params)
    respond_to do |format|
      format.turbo_stream { render turbo_stream: turbo_stream.replace(@comment, method: :morph) }
    end
  end
end
"""


def _rule(
    pattern: str,
    polarity: Polarity = Polarity.PRESENT,
    message: str = "rule",
    **kwargs: object,
) -> PatternRule:
    return PatternRule(pattern=pattern, polarity=polarity, message=message, **kwargs)


class TestPresentRules:
    """A present rule is satisfied iff its pattern is found."""

    def test_morph_substring_is_satisfied(self) -> None:
        rule = _rule("method: :morph", literal=True, message="Use morph refreshes")
        [result] = PatternMatcher().evaluate(_TURBO_STREAM_ARTIFACT, [rule])

        assert result.matched is True
        assert result.satisfied is True
        assert result.message == "Use morph refreshes"

    @pytest.mark.parametrize("literal", [True, False])
    def test_quoted_refresh_method_attribute_is_satisfied(self, literal: bool) -> None:
        artifact = '<meta name="turbo-refresh" data-turbo-refresh-method="morph">'
        rule = _rule('data-turbo-refresh-method="morph"', literal=literal)
        [result] = PatternMatcher().evaluate(artifact, [rule])

        assert result.satisfied is True

    @pytest.mark.parametrize("literal", [True, False])
    def test_quoted_attribute_with_other_value_is_not_satisfied(self, literal: bool) -> None:
        artifact = '<meta data-turbo-refresh-method="replace">'
        rule = _rule('data-turbo-refresh-method="morph"', literal=literal)
        [result] = PatternMatcher().evaluate(artifact, [rule])

        assert result.satisfied is False

    def test_missing_pattern_is_not_satisfied(self) -> None:
        rule = _rule(r"broadcasts_refreshes")
        [result] = PatternMatcher().evaluate(_TURBO_STREAM_ARTIFACT, [rule])

        assert result.matched is False
        assert result.satisfied is False

    def test_empty_artifact_fails_present_rule(self) -> None:
        [result] = PatternMatcher().evaluate("", [_rule("anything")])
        assert result.satisfied is False


class TestAbsentRules:
    """An absent rule is satisfied iff its pattern is not found."""

    def test_forbidden_broadcast_append_to_is_violated(self) -> None:
        artifact = "after_create_commit { broadcast_append_to :comments }"
        rule = _rule(
            r"broadcast_append_to",
            polarity=Polarity.ABSENT,
            message="Prefer broadcasts_refreshes over broadcast_append_to",
        )
        [result] = PatternMatcher().evaluate(artifact, [rule])

        assert result.matched is True
        assert result.satisfied is False

    def test_absent_pattern_not_found_is_satisfied(self) -> None:
        rule = _rule(r"broadcast_append_to", polarity=Polarity.ABSENT)
        [result] = PatternMatcher().evaluate(_TURBO_STREAM_ARTIFACT, [rule])

        assert result.matched is False
        assert result.satisfied is True

    def test_empty_artifact_satisfies_absent_rule(self) -> None:
        [result] = PatternMatcher().evaluate("", [_rule("x", polarity=Polarity.ABSENT)])
        assert result.satisfied is True


class TestRuleSets:
    def test_empty_rule_set_yields_no_results(self) -> None:
        assert PatternMatcher().evaluate(_TURBO_STREAM_ARTIFACT, []) == []

    def test_results_follow_rule_order(self) -> None:
        rules = [_rule("a", message="first"), _rule("b", message="second")]
        results = PatternMatcher().evaluate("ab", rules)
        assert [r.message for r in results] == ["first", "second"]

    def test_same_inputs_give_same_results(self) -> None:
        rules = [_rule(r"turbo_stream\.replace"), _rule("morph", polarity=Polarity.ABSENT)]
        matcher = PatternMatcher()
        first = matcher.evaluate(_TURBO_STREAM_ARTIFACT, rules)
        second = matcher.evaluate(_TURBO_STREAM_ARTIFACT, rules)
        assert first == second


class TestPatternOptions:
    def test_literal_escapes_regex_metacharacters(self) -> None:
        rule = _rule("turbo_stream.replace(", literal=True)
        [result] = PatternMatcher().evaluate(_TURBO_STREAM_ARTIFACT, [rule])
        assert result.satisfied is True

    def test_ignorecase_flag(self) -> None:
        rule = _rule("COMMENTSCONTROLLER", flags=["ignorecase"])
        [result] = PatternMatcher().evaluate(_TURBO_STREAM_ARTIFACT, [rule])
        assert result.satisfied is True

    def test_multiline_flag_anchors_lines(self) -> None:
        rule = _rule(r"^end$", flags=["multiline"])
        [result] = PatternMatcher().evaluate(_TURBO_STREAM_ARTIFACT, [rule])
        assert result.satisfied is True

    def test_unknown_flag_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _rule("x", flags=["verbose"])

    def test_empty_pattern_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _rule("")


class TestInvalidPatterns:
    """A pattern that does not compile fails closed without stopping other rules."""

    def test_invalid_regex_is_unsatisfied_with_error(self) -> None:
        [result] = PatternMatcher().evaluate("anything", [_rule("(unclosed")])

        assert result.satisfied is False
        assert result.error is not None
        assert "Invalid pattern" in result.message

    def test_invalid_absent_regex_is_also_unsatisfied(self) -> None:
        rule = _rule("[", polarity=Polarity.ABSENT)
        [result] = PatternMatcher().evaluate("anything", [rule])
        assert result.satisfied is False

    def test_later_rules_still_evaluated(self) -> None:
        results = PatternMatcher().evaluate("abc", [_rule("("), _rule("abc")])
        assert [r.satisfied for r in results] == [False, True]
