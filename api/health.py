from fastapi import APIRouter
from config import settings
from schemas.responses import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(message=f"{settings.PROJECT_NAME} is running")
