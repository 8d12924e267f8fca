"""Root and liveness endpoints"""
from fastapi import APIRouter

from app.models.base import iso_timestamp

router = APIRouter(tags=["Root"])


@router.get("/")
async def root():
    """API root endpoint"""
    return {"message": "Hello EdTech Platform!"}


@router.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Used by container orchestrators; never rate limited.
    """
    return {"status": "healthy", "timestamp": iso_timestamp()}
