import time
from fastapi import APIRouter
from ..models.response import HealthResponse
from ..logger import get_logger

logger = get_logger()
router = APIRouter(tags=["health"])

# Track application start time
start_time = time.time()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check():
    """Liveness probe reporting process uptime"""
    response = HealthResponse(uptime=time.time() - start_time)
    logger.debug(f"Health check response: {response.model_dump()}")
    return response
