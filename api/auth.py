"""API key authentication dependency."""

import logging
import secrets
from typing import Optional

from fastapi import Header, HTTPException

from api.config import APIConfig

logger = logging.getLogger(__name__)


async def verify_api_key(
    x_api_key: Optional[str] = Header(None),
) -> Optional[str]:
    """Check the X-API-Key header against API_KEY.

    When API_KEY is unset, authentication is disabled.
    """
    expected = APIConfig.load().api_key
    if not expected:
        return None
    if not x_api_key or not secrets.compare_digest(x_api_key, expected):
        logger.warning("Rejected request with invalid or missing API key")
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return x_api_key
