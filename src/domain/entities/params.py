from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Params:
    width: int  # 0 = use the image's natural width
    height: int  # 0 = use the image's natural height
    blur: bool
    blur_amount: int  # only meaningful when blur is set
    grayscale: bool
    extension: str  # ".jpg" or ".webp"
