from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status

from src.application.dtos.common_dto import ErrorResponse
from src.application.dtos.params_dto import ImageMetadata, ResolvedParamsResponse
from src.application.use_cases.resolve_image_request import (
    ResolvedImageRequest,
    ResolveImageRequestUseCase,
)
from src.domain.errors import ImageNotFoundError, ParamsError
from src.domain.services.params_service import ParamsService
from src.infrastructure.api.dependencies import get_image_repo, get_params_service
from src.infrastructure.api.request_adapter import ImageRequest
from src.infrastructure.database.repositories.image_repository import ImageRepository

router = APIRouter(
    prefix="/params",
    tags=["Request Parameters"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid size, blur amount or file extension"},
        404: {"model": ErrorResponse, "description": "Not Found - Image does not exist"},
        422: {"description": "Validation Error - Dimension segment is not a plain number"},
    },
)

# dimension segments are unsigned digits; the last one may carry the file extension
_DIMENSION_PATTERN = r"^[0-9]+$"
_SUFFIXED_DIMENSION_PATTERN = r"^[0-9]+(\..*)?$"

_QUERY_DOC = """
    **Query parameters:**
    - `grayscale` - presence-only flag, the value is ignored
    - `blur` - presence-only flag with an optional intensity (`?blur=3`, 1-10, default 5)

    **Extension:** append `.jpg` or `.webp` (case-insensitive) to the last segment; defaults to `.jpg`.
    A dimension of `0` means the image's natural size.
"""


def _resolve(
    image_id: str,
    request: Request,
    images: ImageRepository,
    params_service: ParamsService,
) -> ResolvedParamsResponse:
    uc = ResolveImageRequestUseCase(image_repo=images, params_service=params_service)
    try:
        resolved = uc.execute(image_id, ImageRequest.from_starlette(request))
    except ParamsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ImageNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Image {exc.image_id} does not exist") from exc
    return _to_response(resolved)


def _to_response(resolved: ResolvedImageRequest) -> ResolvedParamsResponse:
    image, params = resolved.image, resolved.params
    return ResolvedParamsResponse(
        image=ImageMetadata(
            id=image.id,
            width=image.width,
            height=image.height,
            author=image.author,
            url=image.url,
        ),
        width=resolved.width,
        height=resolved.height,
        extension=params.extension,
        grayscale=params.grayscale,
        blur=params.blur,
        blur_amount=params.blur_amount if params.blur else None,
    )


@router.get(
    "/id/{image_id}/{size}",
    response_model=ResolvedParamsResponse,
    summary="Resolve Square Image Request",
    description=f"""
    Resolve and validate the parameters of a square image request (`/id/237/300.webp?blur=2`).
    {_QUERY_DOC}
    """,
    response_description="Validated render parameters and final output dimensions",
)
async def resolve_square(
    image_id: str,
    request: Request,
    size: str = Path(..., pattern=_SUFFIXED_DIMENSION_PATTERN, description="Width and height in pixels, optionally with an extension"),
    images: ImageRepository = Depends(get_image_repo),
    params_service: ParamsService = Depends(get_params_service),
):
    """Resolve a request that gives one size for both dimensions."""
    return _resolve(image_id, request, images, params_service)


@router.get(
    "/id/{image_id}/{width}/{height}",
    response_model=ResolvedParamsResponse,
    summary="Resolve Image Request",
    description=f"""
    Resolve and validate the parameters of an image request with separate width and height
    (`/id/237/300/200.jpg?grayscale`).
    {_QUERY_DOC}
    """,
    response_description="Validated render parameters and final output dimensions",
)
async def resolve_width_height(
    image_id: str,
    request: Request,
    width: str = Path(..., pattern=_DIMENSION_PATTERN, description="Width in pixels"),
    height: str = Path(..., pattern=_SUFFIXED_DIMENSION_PATTERN, description="Height in pixels, optionally with an extension"),
    images: ImageRepository = Depends(get_image_repo),
    params_service: ParamsService = Depends(get_params_service),
):
    """Resolve a request that gives width and height separately."""
    return _resolve(image_id, request, images, params_service)
