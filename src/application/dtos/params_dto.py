from __future__ import annotations

from pydantic import BaseModel, Field


class ImageMetadata(BaseModel):
    """Metadata of the source image a request resolves against."""
    id: str = Field(..., description="Unique identifier of the image", examples=["237"])
    width: int = Field(..., description="Natural width of the image in pixels", examples=[3500])
    height: int = Field(..., description="Natural height of the image in pixels", examples=[2095])
    author: str | None = Field(None, description="Author credited for the image", examples=["André Spieker"])
    url: str | None = Field(None, description="Source location of the image")


class ResolvedParamsResponse(BaseModel):
    """Validated render parameters for an image request."""
    image: ImageMetadata = Field(..., description="Metadata of the source image")
    width: int = Field(..., description="Final output width in pixels (natural width when 0 was requested)", examples=[300])
    height: int = Field(..., description="Final output height in pixels (natural height when 0 was requested)", examples=[200])
    extension: str = Field(..., description="Output file extension", examples=[".jpg"], pattern=r"^\.(jpg|webp)$")
    grayscale: bool = Field(False, description="Whether the output is converted to grayscale")
    blur: bool = Field(False, description="Whether a blur is applied")
    blur_amount: int | None = Field(None, description="Blur intensity (1-10), only set when blur is applied", examples=[5], ge=1, le=10)
