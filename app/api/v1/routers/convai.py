# app/api/v1/routers/convai.py
from fastapi import APIRouter, Depends

from app.api.v1.schemas.generation import ConvaiConfigOut, ErrorOut
from app.core.config import Settings, get_settings
from app.domain.errors import ConfigurationError

router = APIRouter(tags=["convai"])


@router.get("/convai-config", response_model=ConvaiConfigOut, responses={500: {"model": ErrorOut}})
async def convai_config(settings: Settings = Depends(get_settings)):
    """Public ElevenLabs agent id for the voice-assistant embed widget."""
    agent_id = (settings.NEXT_PUBLIC_ELEVENLABS_AGENT_ID or "").strip()
    if not agent_id:
        raise ConfigurationError("NEXT_PUBLIC_ELEVENLABS_AGENT_ID is not configured")
    return ConvaiConfigOut(agent_id=agent_id)
