from fastapi import APIRouter
from pydantic import BaseModel

from src.config.settings import settings

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    backend_url: str


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Report that the admin service is up and which backend it talks to."""
    return HealthCheckResponse(status="healthy", backend_url=settings.api_base_url)
