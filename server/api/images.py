"""Helpers for Twitch image URL templates."""

from __future__ import annotations


def replace_image_size(image_url: str, width: int, height: int) -> str:
    """Fill the ``{width}`` and ``{height}`` placeholders of a Twitch image URL.

    Only the first occurrence of each placeholder is replaced. A URL without
    placeholders is returned unchanged.
    """
    return image_url.replace("{width}", str(width), 1).replace(
        "{height}", str(height), 1
    )
