"""Control API routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from ...app import IApplication


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def create_control_router(app: IApplication) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api", tags=["control"])

    @router.get("/health", response_model=StatusResponse)
    async def health() -> dict:
        """Liveness check."""
        return {"status": "ok"}

    @router.post("/control/reset", response_model=StatusResponse)
    async def reset_system() -> dict:
        """Clear all sessions and timelines."""
        await app.reset()
        return {"status": "ok"}

    return router
