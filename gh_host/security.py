import logging
from typing import List

from fastapi import Depends, HTTPException
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_500_INTERNAL_SERVER_ERROR

from gh_host.schemas.dispatch import DispatchRequest
from gh_host.settings import Settings, settings

logger = logging.getLogger(__name__)

REQUIRED_SETTINGS = ("GH_HOST_SECRET", "GITHUB_TOKEN", "GITHUB_REPOSITORY")


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def missing_settings(current_settings: Settings) -> List[str]:
    return [name for name in REQUIRED_SETTINGS if not getattr(current_settings, name)]


def verify_secret(
    request: DispatchRequest,
    current_settings: Settings = Depends(get_settings),
) -> DispatchRequest:
    """Check the shared secret, then the GitHub settings the dispatch needs."""
    if not current_settings.GH_HOST_SECRET:
        _configuration_error("GH_HOST_SECRET")
    if request.secret != current_settings.GH_HOST_SECRET:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid secret")

    missing = missing_settings(current_settings)
    if missing:
        _configuration_error(missing[0])
    return request


def _configuration_error(name: str):
    logger.error(f"{name} environment variable not set.")
    raise HTTPException(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Server configuration error: {name} not set",
    )
