from typing import Annotated

from fastapi import APIRouter, Depends

from greenlight.applications.interfaces.dtos.healthcheck import HealthcheckResponse, SystemInfo
from greenlight.infrastructure.config.dependencies import get_settings
from greenlight.infrastructure.config.settings import APP_VERSION, Settings

router = APIRouter(prefix="/v1/healthcheck", tags=["healthcheck"])


@router.get("", response_model=HealthcheckResponse)
async def healthcheck(settings: Annotated[Settings, Depends(get_settings)]):
    return HealthcheckResponse(
        status="available",
        system_info=SystemInfo(environment=settings.ENV, version=APP_VERSION),
    )
