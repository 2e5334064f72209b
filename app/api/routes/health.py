from fastapi import APIRouter
from app.schemas.health import HealthCheckResponse
from app.core.storage import get_store

router = APIRouter()

@router.get("/health", response_model=HealthCheckResponse, tags=["health"])
async def health_check():
    """
    Health check endpoint
    """
    return HealthCheckResponse(
        status="ok",
        storage_backend=get_store().name
    )
