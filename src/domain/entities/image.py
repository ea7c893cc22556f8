from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageEntity:
    id: str
    width: int  # natural width in pixels
    height: int  # natural height in pixels
    author: str | None = None
    url: str | None = None  # source page for attribution
