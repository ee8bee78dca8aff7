"""Chat API routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ...app import IApplication
from ...channel import ChannelUnavailable
from ...logging_config import get_logger
from ...models import TimelineEntry

logger = get_logger(__name__)


class ChatRequest(BaseModel):
    """Request model for sending a message."""

    user_id: str = Field(min_length=1)
    message: str = ""


class EntryResponse(BaseModel):
    """A timeline entry as seen by the client."""

    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(alias="from")
    text: str


def _to_response(entry: TimelineEntry) -> dict:
    return entry.to_dict()


def create_chat_router(app: IApplication) -> APIRouter:
    """Create chat router."""
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post("/chat", response_model=EntryResponse)
    async def post_user_message(request: ChatRequest) -> dict:
        """Send a user message; returns the reply or handoff notice."""
        try:
            entry = await app.controller.handle_user_message(
                user_id=request.user_id, text=request.message
            )
        except ChannelUnavailable as e:
            logger.error(f"Forwarding failed for {request.user_id}: {e}")
            raise HTTPException(status_code=502, detail=str(e))
        return _to_response(entry)

    @router.get(
        "/messages/{user_id}",
        response_model=list[EntryResponse],
    )
    async def get_timeline(user_id: str) -> list[dict]:
        """Poll the user's timeline, merging in new agent replies first."""
        entries = await app.controller.get_timeline(user_id)
        return [_to_response(e) for e in entries]

    return router
