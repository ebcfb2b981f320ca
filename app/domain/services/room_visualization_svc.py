from __future__ import annotations
import logging
from time import monotonic as _now

from app.domain.models.generation import EditedImage
from app.domain.services.constants import DESCRIPTION_FALLBACK
from app.domain.services.prompts import FURNITURE_DESCRIPTION_PROMPT, build_edit_prompt
from app.domain.services.view_generation_svc import first_image
from app.providers.base import ImageModelClient
from app.utils.images import ImagePayload

logger = logging.getLogger(__name__)


class RoomVisualizationService:
    """
    Places a furniture item into a room photo in two sequential calls:
    describe the item, then edit the room with that description.
    Only the room goes to the edit endpoint, so the output keeps the user's room.
    """

    def __init__(self, client: ImageModelClient):
        self.client = client

    async def describe_furniture(self, item: ImagePayload) -> str:
        description = await self.client.describe_image(item, FURNITURE_DESCRIPTION_PROMPT)
        if not description:
            logger.warning("Empty furniture description, using fallback")
            return DESCRIPTION_FALLBACK
        return description

    async def visualize(self, item: ImagePayload, room: ImagePayload) -> EditedImage:
        t0 = _now()
        description = await self.describe_furniture(item)
        logger.debug("Furniture description: %s", description[:300])

        results = await self.client.edit_image(room, build_edit_prompt(description))
        image = first_image(results)

        logger.info(
            "Room visualization done provider=%s inline=%s time_ms=%.1f",
            self.client.name, bool(image.b64_json), (_now() - t0) * 1000.0,
        )
        return image
