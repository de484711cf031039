"""Validate endpoint."""

from fastapi import APIRouter, Depends

from api.auth import verify_api_key
from api.config import get_composer_config
from api.models import OperationResponse, ValidateRequest
from composer.config import ComposerConfig
from composer.timing import TimingPolicy
from composer.validation import ValidationEngine

router = APIRouter()


@router.post("/validate", response_model=OperationResponse)
async def validate(
    request: ValidateRequest,
    settings: ComposerConfig = Depends(get_composer_config),
    _key=Depends(verify_api_key),
):
    """Validate a VideoDefinition without rendering it.

    Always answers 200: the report itself says whether the document is valid.
    """
    policy = TimingPolicy.from_value(request.policy or settings.timing_policy)
    report = ValidationEngine(strict=request.strict, policy=policy).validate_data(
        request.document, source="<request>"
    )
    return OperationResponse(
        success=report.is_valid,
        tool="validate",
        result=report.to_dict(),
        error=None if report.is_valid else f"{len(report.errors)} error(s) found",
    )
