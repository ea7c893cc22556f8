from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from src.domain.entities.image import ImageEntity
from src.domain.entities.params import Params
from src.domain.errors import ImageNotFoundError, ParamsError
from src.domain.services.params_service import ParamsService, RequestLike
from src.infrastructure.database.repositories.image_repository import ImageRepository


@dataclass(frozen=True)
class ResolvedImageRequest:
    image: ImageEntity
    params: Params
    width: int  # final output width
    height: int  # final output height


@dataclass
class ResolveImageRequestUseCase:
    """
    Turn a raw image request into validated render parameters.

    Pipeline (no retries, no shared state between requests):
    1. Parse size, extension and query flags from the request
    2. Look up the source image metadata
    3. Validate the parameters against the image
    4. Compute the final output dimensions (0 = natural size)
    """

    image_repo: ImageRepository
    params_service: ParamsService

    def execute(self, image_id: str, request: RequestLike) -> ResolvedImageRequest:
        try:
            params = self.params_service.get_params(request)
        except ParamsError as exc:
            logger.warning(f"Rejected parameters for image {image_id}: {exc}")
            raise

        image = self.image_repo.get(image_id)
        if image is None:
            logger.warning(f"Image not found: {image_id}")
            raise ImageNotFoundError(image_id)

        try:
            self.params_service.validate(params, image)
        except ParamsError as exc:
            logger.warning(
                f"Rejected parameters for image {image_id} "
                f"({image.width}x{image.height}): {exc}"
            )
            raise

        width, height = self.params_service.dimensions(params, image)
        logger.info(
            f"Resolved image {image_id} to {width}x{height}{params.extension} "
            f"grayscale={params.grayscale} blur={params.blur_amount if params.blur else None}"
        )
        return ResolvedImageRequest(image=image, params=params, width=width, height=height)
