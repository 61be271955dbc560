"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ... import __version__
from ...assist import TextAssist, get_text_assist
from ..models.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(assist: TextAssist = Depends(get_text_assist)) -> HealthResponse:
    """Check API health status."""
    return HealthResponse(
        status="ok",
        assist_available=assist.available,
        version=__version__,
    )
