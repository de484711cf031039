"""Plan endpoint: script -> VideoDefinition through an LLM."""

from fastapi import APIRouter, Depends

from api.auth import verify_api_key
from api.config import get_composer_config
from api.models import OperationResponse, PlanRequest
from composer.config import ComposerConfig
from composer.planner import ScriptPlanner
from composer.schema import to_dict

router = APIRouter()


@router.post("/plan", response_model=OperationResponse)
def plan(
    request: PlanRequest,
    settings: ComposerConfig = Depends(get_composer_config),
    _key=Depends(verify_api_key),
):
    """Plan a script. PlanningError propagates to the app handler (HTTP 502)."""
    if request.model:
        settings.planner.model = request.model
    planner = ScriptPlanner.from_config(settings, api_key=request.api_key, provider=request.provider)
    video = planner.plan(request.script)
    return OperationResponse(success=True, tool="plan", result=to_dict(video))
