from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Protocol

from src.domain.entities.params import Params
from src.domain.errors import ParamsError, ParamsErrorKind

DEFAULT_BLUR_AMOUNT = 5
MIN_BLUR_AMOUNT = 1
MAX_BLUR_AMOUNT = 10
MAX_IMAGE_SIZE = 5000  # max width/height that can be requested, unless it is the natural size

DEFAULT_EXTENSION = ".jpg"
ALLOWED_EXTENSIONS = frozenset({".jpg", ".webp"})

_INT_RE = re.compile(r"([+-]?)0*([0-9]{1,19})")

# 64-bit signed range; anything outside does not parse
MIN_INT = -(2**63)
MAX_INT = 2**63 - 1


class RequestLike(Protocol):
    """Named path variables and query parameters of an inbound request."""

    @property
    def path_params(self) -> Mapping[str, str]: ...

    @property
    def query_params(self) -> Mapping[str, str]: ...


class ImageLike(Protocol):
    """Natural pixel dimensions of the source image."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


class ParamsService:
    """Resolves and validates the parameters of an image request.

    Every method is a pure function of its arguments. Errors are raised as
    ``ParamsError`` and never handled here.
    """

    @staticmethod
    def get_params(request: RequestLike) -> Params:
        width, height = ParamsService.get_size(request)
        extension = ParamsService.get_file_extension(request)
        grayscale, blur, blur_amount = ParamsService.get_query_params(request)
        return Params(
            width=width,
            height=height,
            blur=blur,
            blur_amount=blur_amount,
            grayscale=grayscale,
            extension=extension,
        )

    # Size: `size` wins when present and numeric, else both `width` and `height` are required
    @staticmethod
    def get_size(request: RequestLike) -> tuple[int, int]:
        size = ParamsService._int_param(request.path_params, "size")
        if size is not None:
            return size, size

        width = ParamsService._int_param(request.path_params, "width")
        if width is None:
            raise ParamsError(ParamsErrorKind.INVALID_SIZE)
        height = ParamsService._int_param(request.path_params, "height")
        if height is None:
            raise ParamsError(ParamsErrorKind.INVALID_SIZE)
        return width, height

    # Extension: optional, case-insensitive, defaults to .jpg
    @staticmethod
    def get_file_extension(request: RequestLike) -> str:
        extension = (request.path_params.get("extension") or "").lower()
        if not extension:
            extension = DEFAULT_EXTENSION
        if extension not in ALLOWED_EXTENSIONS:
            raise ParamsError(ParamsErrorKind.INVALID_FILE_EXTENSION)
        return extension

    # Query flags: presence-only grayscale, blur with an optional integer amount
    @staticmethod
    def get_query_params(request: RequestLike) -> tuple[bool, bool, int]:
        query = request.query_params
        grayscale = "grayscale" in query
        blur = "blur" in query
        blur_amount = 0
        if blur:
            blur_amount = DEFAULT_BLUR_AMOUNT
            value = ParamsService._parse_int(query.get("blur"))
            if value is not None:
                blur_amount = value
        return grayscale, blur, blur_amount

    @staticmethod
    def validate(params: Params, image: ImageLike) -> None:
        """Check size and blur limits for a request against its source image.

        A dimension above ``MAX_IMAGE_SIZE`` is still accepted when it is
        exactly the image's natural dimension.
        """
        if params.width > MAX_IMAGE_SIZE and params.width != image.width:
            raise ParamsError(ParamsErrorKind.INVALID_SIZE)
        if params.height > MAX_IMAGE_SIZE and params.height != image.height:
            raise ParamsError(ParamsErrorKind.INVALID_SIZE)
        if params.blur and params.blur_amount < MIN_BLUR_AMOUNT:
            raise ParamsError(ParamsErrorKind.INVALID_BLUR_AMOUNT)
        if params.blur and params.blur_amount > MAX_BLUR_AMOUNT:
            raise ParamsError(ParamsErrorKind.INVALID_BLUR_AMOUNT)

    # Output dimensions: 0 falls back to the natural dimension
    @staticmethod
    def dimensions(params: Params, image: ImageLike) -> tuple[int, int]:
        width = params.width or image.width
        height = params.height or image.height
        return width, height

    # --------- helpers ---------
    @staticmethod
    def _int_param(values: Mapping[str, str], name: str) -> int | None:
        return ParamsService._parse_int(values.get(name))

    @staticmethod
    def _parse_int(value: str | None) -> int | None:
        # plain decimal only: int() would also accept whitespace, underscores and non-ASCII digits
        match = _INT_RE.fullmatch(value) if value is not None else None
        if match is None:
            return None
        # leading zeros dropped so the digit count stays bounded
        parsed = int(match.group(1) + match.group(2))
        if not MIN_INT <= parsed <= MAX_INT:
            return None
        return parsed
