"""Offline stub data used when Twitch Helix is not reachable."""

from __future__ import annotations

from typing import Dict, List, Optional

from server.api.categories import Category
from server.api.schedule import (
    ScheduleCategory,
    ScheduleData,
    ScheduleOverview,
    Segment,
)

STUB_BROADCASTER_ID = "1001"
STUB_LOGIN = "killthatrobot"

STUB_CATEGORIES: Dict[str, Dict[str, str]] = {
    "509670": {
        "name": "Science & Technology",
        "box_art_url": "https://static-cdn.jtvnw.net/ttv-boxart/509670-{width}x{height}.jpg",
    },
    "1469308723": {
        "name": "Software and Game Development",
        "box_art_url": "https://static-cdn.jtvnw.net/ttv-boxart/1469308723-{width}x{height}.jpg",
    },
}

STUB_SEGMENTS: List[Segment] = [
    Segment(
        id="stub-segment-1",
        start_time="2025-01-06T19:00:00Z",
        end_time="2025-01-06T22:00:00Z",
        title="Robot Workshop: Servo Tuning",
        canceled_until=None,
        category=ScheduleCategory(id="509670", name="Science & Technology"),
        is_recurring=True,
    ),
    Segment(
        id="stub-segment-2",
        start_time="2025-01-08T19:00:00Z",
        end_time="2025-01-08T21:30:00Z",
        title="Gamedev Night",
        canceled_until=None,
        category=ScheduleCategory(id="1469308723", name="Software and Game Development"),
        is_recurring=True,
    ),
    Segment(
        id="stub-segment-3",
        start_time="2025-01-10T18:00:00Z",
        end_time="2025-01-10T20:00:00Z",
        title="Robot Workshop: Wiring Q&A",
        canceled_until=None,
        category=ScheduleCategory(id="509670", name="Science & Technology"),
        is_recurring=False,
    ),
]


class OfflineScheduleService:
    """Return deterministic schedule data for offline development."""

    async def get_overview(
        self,
        channel_name: str,
        *,
        box_art_width: int,
        box_art_height: int,
    ) -> Optional[ScheduleOverview]:
        if channel_name.lower() != STUB_LOGIN:
            return None
        schedule = ScheduleData(
            broadcaster_id=STUB_BROADCASTER_ID,
            broadcaster_name="KillThatRobot",
            broadcaster_login=STUB_LOGIN,
            segments=list(STUB_SEGMENTS),
        )
        categories = [
            Category.from_payload(
                {"id": category_id, **STUB_CATEGORIES[category_id]},
                width=box_art_width,
                height=box_art_height,
            )
            for category_id in schedule.category_ids()
        ]
        return ScheduleOverview(
            broadcaster_id=STUB_BROADCASTER_ID,
            schedule=schedule,
            categories=categories,
        )
