"""FastAPI application serving Twitch schedule data to the web front-end.

``GET /api/twitch-data`` returns the channel's schedule together with the
categories its segments reference, box art already sized for the UI.
"""

from __future__ import annotations

import logging
import os

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from server.api.auth import TwitchCredentials
from server.api.schedule import ScheduleService
from server.api.stubs import OfflineScheduleService
from server.api.twitch_client import TwitchClient


APP_TITLE = "Twitch Schedule Backend"
APP_DESCRIPTION = (
    "Backend HTTP API providing a broadcaster's Twitch schedule and "
    "category box art for the website."
)

CHANNEL_NAME = "killthatrobot"
BOX_ART_WIDTH = 432
BOX_ART_HEIGHT = 650

TWITCH_API_BASE_URL = os.getenv("TWITCH_API_BASE_URL", "https://api.twitch.tv/helix")
TWITCH_HTTP_TIMEOUT = float(os.getenv("TWITCH_HTTP_TIMEOUT", "10.0"))
USE_OFFLINE_STUBS = os.getenv("TWITCH_USE_STUBS", "0") != "0"
UNKNOWN_ERROR_MSG = "Unknown error occurred"

logger = logging.getLogger(__name__)

app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version="0.1.0",
)

twitch_client = TwitchClient(
    TwitchCredentials.from_env(),
    base_url=TWITCH_API_BASE_URL,
    timeout=TWITCH_HTTP_TIMEOUT,
)
schedule_service = ScheduleService(twitch_client)
offline_service = OfflineScheduleService()


def get_schedule_service() -> ScheduleService | OfflineScheduleService:
    return offline_service if USE_OFFLINE_STUBS else schedule_service


@app.get("/health")
def health():
    """Simple readiness probe used by orchestrators and CLI tooling."""
    return JSONResponse({"status": "ok", "message": "Backend ready."})


@app.get("/api/twitch-data")
async def twitch_data(
    service: ScheduleService | OfflineScheduleService = Depends(get_schedule_service),
):
    """Return the broadcaster ID, schedule and categories for the channel."""
    try:
        overview = await service.get_overview(
            CHANNEL_NAME,
            box_art_width=BOX_ART_WIDTH,
            box_art_height=BOX_ART_HEIGHT,
        )
    except Exception as exc:
        logger.error("Twitch data request failed: %s", exc, exc_info=True)
        return JSONResponse({"error": str(exc) or UNKNOWN_ERROR_MSG}, status_code=500)

    if overview is None:
        return JSONResponse({"error": "No broadcaster found"}, status_code=404)

    return JSONResponse(overview.to_dict())
