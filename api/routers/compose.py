"""Compose endpoint."""

from fastapi import APIRouter, Depends

from api.auth import verify_api_key
from api.config import get_composer_config
from api.models import ComposeRequest, OperationResponse
from composer.composition import compose as compose_video
from composer.config import ComposerConfig

router = APIRouter()


@router.post("/compose", response_model=OperationResponse)
async def compose(
    request: ComposeRequest,
    settings: ComposerConfig = Depends(get_composer_config),
    _key=Depends(verify_api_key),
):
    """Resolve a document into its composition timeline.

    Schema errors propagate to the app-level handler (HTTP 422).
    """
    composition = compose_video(request.document, request.policy or settings.timing_policy)
    return OperationResponse(success=True, tool="compose", result=composition.to_dict())
