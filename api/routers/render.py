"""Render endpoint: save, compose and render a document."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from api.auth import verify_api_key
from api.config import get_composer_config
from api.models import OperationResponse, RenderRequest
from composer.composition import compose
from composer.config import ComposerConfig
from composer.render import CommandRenderer, default_output_path, save_document, timestamp_slug
from composer.schema import parse

logger = logging.getLogger(__name__)

router = APIRouter()


def _inside_output_dir(requested: str, output_dir: str) -> Path:
    """Resolve a client-supplied output path under the output directory.

    Absolute paths and `..` segments that leave the directory get a 422.
    """
    base = Path(output_dir).resolve()
    target = (base / requested).resolve()
    if target == base or not target.is_relative_to(base):
        raise HTTPException(
            status_code=422,
            detail=f"output_path must be a file inside the output directory ({output_dir})",
        )
    return target


@router.post("/render", response_model=OperationResponse)
def render(
    request: RenderRequest,
    settings: ComposerConfig = Depends(get_composer_config),
    _key=Depends(verify_api_key),
):
    """Render a document to MP4.

    The document is parsed and saved under the data directory before
    rendering, so a failed render can be retried from the saved copy.
    """
    video = parse(request.document)
    composition = compose(video, request.policy or settings.timing_policy)

    stamp = timestamp_slug()
    output_path = (
        _inside_output_dir(request.output_path, settings.output_dir) if request.output_path
        else default_output_path(video.meta.id, settings.output_dir, stamp)
    )
    data_path = save_document(video, settings.data_dir, stamp)
    logger.info(f"Rendering '{video.meta.id}' from {data_path}")

    result = CommandRenderer(settings.render).render(composition, output_path)
    return OperationResponse(
        success=True,
        tool="render",
        result={
            "video_path": str(result.output_path),
            "data_path": str(data_path),
            "duration_s": round(result.duration_s, 3),
            "scenes": len(composition.entries),
            "skipped": [s.to_dict() for s in composition.skipped],
        },
    )
