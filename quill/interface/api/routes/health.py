"""Liveness probe."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from quill.config import FeatureSettings, Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Service status and the switchable features in effect."""

    status: str
    environment: str
    features: FeatureSettings


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        features=settings.features,
    )
