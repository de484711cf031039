"""
Unit tests for ScriptPlanner with a mocked LLM provider.
"""

import json
from unittest.mock import Mock, patch

import pytest

from composer.config.schema import ComposerConfig
from composer.errors import PlanningError
from composer.llm import LLMConfig, LLMResponse, ProviderError
from composer.planner import ScriptPlanner


def _response(content):
    return LLMResponse(content=content, model_used="gemini-2.0-flash", tokens_used=100, cost_usd=0.0)


@pytest.fixture
def provider(mock_plan):
    provider = Mock()
    provider.generate.return_value = _response(
        "Here is your video:\n```json\n" + json.dumps(mock_plan) + "\n```"
    )
    return provider


class TestPlan:
    def test_returns_parsed_video(self, provider):
        video = ScriptPlanner(provider).plan("Bitcoin fell 20% this week.")

        assert video.meta.id == "btc-crash"
        assert [s.id for s in video.scenes] == ["intro", "chart"]

    def test_request_carries_script_and_context(self, provider):
        ScriptPlanner(provider, fps=24, temperature=0.2, model="gemini-1.5-pro").plan("Rates rose.")

        request = provider.generate.call_args.args[0]
        assert "Rates rose." in request.prompt
        assert "24" in request.system_prompt + request.prompt
        assert "split_screen" in request.system_prompt + request.prompt
        assert request.temperature == 0.2
        assert request.model == "gemini-1.5-pro"
        assert request.json_output is True

    def test_details(self, provider, mock_plan):
        result = ScriptPlanner(provider).plan_with_details("Bitcoin fell.")
        assert result.raw == mock_plan
        assert result.response.tokens_used == 100

    def test_custom_prompt_file(self, provider, tmp_path):
        path = tmp_path / "terse.yaml"
        path.write_text("system: Be terse.\nuser_template: '{{ script }}'\n", encoding="utf-8")

        ScriptPlanner(provider, prompt_file=str(path)).plan("Short script")

        request = provider.generate.call_args.args[0]
        assert request.system_prompt == "Be terse."
        assert request.prompt == "Short script"


class TestPlanErrors:
    def test_empty_script(self, provider):
        with pytest.raises(PlanningError, match="empty"):
            ScriptPlanner(provider).plan("   ")
        provider.generate.assert_not_called()

    def test_provider_failure(self, provider):
        provider.generate.side_effect = ProviderError("Gemini API call failed: boom")
        with pytest.raises(PlanningError, match="LLM request failed") as exc_info:
            ScriptPlanner(provider).plan("script")
        assert exc_info.value.hint

    def test_no_json_in_response(self, provider):
        provider.generate.return_value = _response("I cannot help with that.")
        with pytest.raises(PlanningError, match="did not contain a JSON object") as exc_info:
            ScriptPlanner(provider).plan("script")
        assert exc_info.value.response_text == "I cannot help with that."

    def test_invalid_document(self, provider, mock_plan):
        mock_plan["scenes"][0]["type"] = "hologram"
        provider.generate.return_value = _response(json.dumps(mock_plan))
        with pytest.raises(PlanningError, match="not a valid VideoDefinition") as exc_info:
            ScriptPlanner(provider).plan("script")
        assert "scenes.0" in exc_info.value.hint


class TestFromConfig:
    def test_no_provider_configured(self):
        with pytest.raises(PlanningError, match="No LLM provider available") as exc_info:
            ScriptPlanner.from_config(ComposerConfig(), llm_config=LLMConfig())
        assert "GEMINI_API_KEY" in exc_info.value.hint

    def test_api_key_selects_gemini_for_auto(self):
        llm_config = LLMConfig()
        with patch("google.genai.Client"):
            planner = ScriptPlanner.from_config(ComposerConfig(), llm_config=llm_config, api_key="g-key")
        assert llm_config.gemini.api_key == "g-key"
        assert planner.provider.get_capabilities()["provider"] == "cloud-gemini"

    def test_api_key_for_named_provider(self):
        llm_config = LLMConfig()
        with patch("anthropic.Anthropic"):
            ScriptPlanner.from_config(
                ComposerConfig(), llm_config=llm_config, api_key="a-key", provider="claude"
            )
        assert llm_config.anthropic.api_key == "a-key"
        assert not llm_config.gemini.api_key

    def test_settings_flow_into_planner(self):
        config = ComposerConfig(fps=60)
        config.planner.temperature = 0.1
        config.planner.model = "gpt-4o-mini"
        with patch("openai.OpenAI"):
            planner = ScriptPlanner.from_config(
                config, llm_config=LLMConfig(), api_key="sk", provider="openai"
            )
        assert planner.fps == 60
        assert planner.temperature == 0.1
        assert planner.model == "gpt-4o-mini"
