"""Tests for EnvInterpolator."""

import pytest

from skill_eval.config.infrastructure.env_interpolation import EnvInterpolator


class TestUnresolved:
    def test_maps_each_missing_var_to_every_referencing_path(self) -> None:
        interpolator = EnvInterpolator(environ={})
        data = {
            "providers": {
                "openai": {"api_key": "${SE_KEY}", "api_base": "${SE_HOST}"},
                "azure": {"api_key": "${SE_KEY}"},
            },
            "judge": {"min_score": 4.0},
        }

        assert interpolator.unresolved(data) == {
            "SE_KEY": ["providers.openai.api_key", "providers.azure.api_key"],
            "SE_HOST": ["providers.openai.api_base"],
        }

    def test_list_items_are_indexed(self) -> None:
        interpolator = EnvInterpolator(environ={})
        assert interpolator.unresolved({"tags": ["ok", "${SE_TAG}"]}) == {
            "SE_TAG": ["tags[1]"]
        }

    def test_set_vars_and_fallbacks_are_not_missing(self) -> None:
        interpolator = EnvInterpolator(environ={"SE_KEY": "k"})
        data = {"api_key": "${SE_KEY}", "api_base": "${SE_HOST:-http://localhost}"}

        assert interpolator.unresolved(data) == {}

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SE_FROM_PROCESS", "1")
        assert EnvInterpolator().unresolved({"x": "${SE_FROM_PROCESS}"}) == {}


class TestResolve:
    def test_substitutes_inside_nested_strings(self) -> None:
        interpolator = EnvInterpolator(environ={"SE_HOST": "llm.internal"})
        data = {"api_base": "http://${SE_HOST}:4000", "hosts": ["${SE_HOST}"], "n": 1}

        assert interpolator.resolve(data) == {
            "api_base": "http://llm.internal:4000",
            "hosts": ["llm.internal"],
            "n": 1,
        }

    def test_fallback_used_only_when_unset(self) -> None:
        unset = EnvInterpolator(environ={})
        set_ = EnvInterpolator(environ={"SE_HOST": "llm.internal"})
        value = "http://${SE_HOST:-localhost}:4000"

        assert unset.resolve(value) == "http://localhost:4000"
        assert set_.resolve(value) == "http://llm.internal:4000"

    def test_empty_fallback_is_allowed(self) -> None:
        assert EnvInterpolator(environ={}).resolve("${SE_SUFFIX:-}") == ""

    def test_bare_unset_reference_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            EnvInterpolator(environ={}).resolve("${SE_MISSING}")

    def test_non_string_leaves_unchanged(self) -> None:
        data = {"flag": True, "limit": 3, "nothing": None}
        assert EnvInterpolator(environ={}).resolve(data) == data
