"""Category (game) records returned by Twitch Helix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from server.api.images import replace_image_size


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    box_art_url: Optional[str]

    @classmethod
    def from_payload(
        cls,
        entry: Dict[str, Any],
        *,
        width: int,
        height: int,
    ) -> "Category":
        box_art_template = entry.get("box_art_url")
        box_art_url = None
        if box_art_template:
            box_art_url = replace_image_size(box_art_template, width, height)
        return cls(
            id=str(entry.get("id", "")),
            name=entry.get("name", ""),
            box_art_url=box_art_url,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "box_art_url": self.box_art_url,
        }
