"""
Script planning: natural-language script -> VideoDefinition via an LLM.
"""

from composer.planner.extract import extract_json
from composer.planner.planner import PlanResult, ScriptPlanner

__all__ = ["PlanResult", "ScriptPlanner", "extract_json"]
