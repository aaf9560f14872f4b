"""Broadcaster schedule models and the schedule overview service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from server.api.categories import Category
from server.api.twitch_client import TwitchClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleCategory:
    id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Segment:
    """A single scheduled broadcast. Timestamps stay RFC 3339 strings."""

    id: str
    start_time: str
    end_time: Optional[str]
    title: str
    canceled_until: Optional[str]
    category: Optional[ScheduleCategory]
    is_recurring: bool

    @classmethod
    def from_payload(cls, entry: Dict[str, Any]) -> "Segment":
        category = entry.get("category")
        return cls(
            id=str(entry.get("id", "")),
            start_time=entry.get("start_time", ""),
            end_time=entry.get("end_time"),
            title=entry.get("title") or "",
            canceled_until=entry.get("canceled_until"),
            category=(
                ScheduleCategory(
                    id=str(category.get("id", "")),
                    name=category.get("name", ""),
                )
                if category
                else None
            ),
            is_recurring=bool(entry.get("is_recurring")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "title": self.title,
            "canceled_until": self.canceled_until,
            "category": self.category.to_dict() if self.category else None,
            "is_recurring": self.is_recurring,
        }


@dataclass(frozen=True)
class Vacation:
    start_time: str
    end_time: str

    def to_dict(self) -> Dict[str, Any]:
        return {"start_time": self.start_time, "end_time": self.end_time}


@dataclass(frozen=True)
class ScheduleData:
    broadcaster_id: str
    broadcaster_name: str
    broadcaster_login: str
    segments: List[Segment] = field(default_factory=list)
    vacation: Optional[Vacation] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ScheduleData":
        vacation = data.get("vacation")
        return cls(
            broadcaster_id=str(data.get("broadcaster_id", "")),
            broadcaster_name=data.get("broadcaster_name", ""),
            broadcaster_login=data.get("broadcaster_login", ""),
            segments=[Segment.from_payload(entry) for entry in data.get("segments") or []],
            vacation=(
                Vacation(
                    start_time=vacation.get("start_time", ""),
                    end_time=vacation.get("end_time", ""),
                )
                if vacation
                else None
            ),
        )

    def category_ids(self) -> List[str]:
        """Category IDs in segment order, first occurrence only."""
        seen: Dict[str, None] = {}
        for segment in self.segments:
            if segment.category and segment.category.id:
                seen.setdefault(segment.category.id, None)
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "broadcaster_id": self.broadcaster_id,
            "broadcaster_name": self.broadcaster_name,
            "broadcaster_login": self.broadcaster_login,
            "vacation": self.vacation.to_dict() if self.vacation else None,
        }


@dataclass(frozen=True)
class ScheduleOverview:
    """Broadcaster schedule plus the categories its segments reference.

    ``schedule`` and ``categories`` are both None when the schedule could not
    be loaded.
    """

    broadcaster_id: str
    schedule: Optional[ScheduleData] = None
    categories: Optional[List[Category]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "broadcasterId": self.broadcaster_id,
            "schedule": self.schedule.to_dict() if self.schedule else None,
            "categories": (
                [category.to_dict() for category in self.categories]
                if self.categories is not None
                else None
            ),
        }


class ScheduleService:
    """Combine a broadcaster's schedule with box art for its categories."""

    def __init__(self, twitch_client: TwitchClient) -> None:
        self._twitch = twitch_client

    async def get_overview(
        self,
        channel_name: str,
        *,
        box_art_width: int,
        box_art_height: int,
    ) -> Optional[ScheduleOverview]:
        """Return the overview for ``channel_name`` or None if it does not exist.

        Errors while resolving the broadcaster propagate. Errors while loading
        the schedule or its categories are logged and yield an overview with
        neither.
        """
        broadcaster_id = await self._twitch.get_broadcaster_id(channel_name)
        if not broadcaster_id:
            return None

        try:
            payload = await self._twitch.get_schedule(broadcaster_id)
            data = payload.get("data")
            if not data:
                return ScheduleOverview(broadcaster_id=broadcaster_id)
            schedule = ScheduleData.from_payload(data)
            categories = await self._twitch.get_categories(
                schedule.category_ids(),
                box_art_width,
                box_art_height,
            )
        except Exception:
            logger.exception(
                "Error fetching Twitch schedule or categories for %s", channel_name
            )
            return ScheduleOverview(broadcaster_id=broadcaster_id)

        return ScheduleOverview(
            broadcaster_id=broadcaster_id,
            schedule=schedule,
            categories=categories,
        )
