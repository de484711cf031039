"""
CLI tests for the plan subcommand.

ScriptPlanner is patched on the cli.plan module; no LLM is called.
"""

import importlib
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cli import main
from composer.errors import PlanningError
from composer.schema import parse

plan_module = importlib.import_module("cli.plan")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def planner_cls(mock_plan):
    with patch.object(plan_module, "ScriptPlanner") as planner_cls:
        planner_cls.from_config.return_value.plan.return_value = parse(mock_plan)
        yield planner_cls


class TestPlan:
    def test_plan_inline_text(self, runner, planner_cls):
        result = runner.invoke(main, ["plan", "--text", "Bitcoin fell 20%."])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["meta"]["id"] == "btc-crash"
        planner_cls.from_config.return_value.plan.assert_called_once_with("Bitcoin fell 20%.")

    def test_plan_script_file_to_output(self, runner, planner_cls, tmp_path):
        script = tmp_path / "narration.txt"
        script.write_text("Bitcoin fell 20% this week.", encoding="utf-8")
        out = tmp_path / "plans" / "video.json"

        result = runner.invoke(main, ["plan", "-s", str(script), "-o", str(out)])

        assert result.exit_code == 0
        assert "✅ Planned 'btc-crash' (2 scenes)" in result.output
        assert parse(out.read_text(encoding="utf-8")).meta.id == "btc-crash"

    def test_overrides_reach_planner_settings(self, runner, planner_cls):
        result = runner.invoke(main, [
            "plan", "-t", "script", "--provider", "openai", "--model", "gpt-4o-mini", "--api-key", "sk-test",
        ])

        assert result.exit_code == 0
        settings = planner_cls.from_config.call_args.args[0]
        assert settings.planner.provider == "openai"
        assert settings.planner.model == "gpt-4o-mini"
        assert planner_cls.from_config.call_args.kwargs["api_key"] == "sk-test"

    def test_requires_exactly_one_source(self, runner, planner_cls, tmp_path):
        script = tmp_path / "s.txt"
        script.write_text("x")

        neither = runner.invoke(main, ["plan"])
        both = runner.invoke(main, ["plan", "-s", str(script), "-t", "x"])

        assert neither.exit_code == 1
        assert both.exit_code == 1
        assert "exactly one of --script or --text" in neither.output
        planner_cls.from_config.assert_not_called()

    def test_planning_error(self, runner, planner_cls):
        planner_cls.from_config.return_value.plan.side_effect = PlanningError(
            "LLM response did not contain a JSON object",
            hint="Retry, or lower the temperature.",
        )

        result = runner.invoke(main, ["plan", "-t", "script"])

        assert result.exit_code == 1
        assert "❌ Planning Error" in result.output
        assert "Hint: Retry" in result.output

    def test_unknown_provider_rejected(self, runner, planner_cls):
        result = runner.invoke(main, ["plan", "-t", "x", "--provider", "bedrock"])
        assert result.exit_code == 2
