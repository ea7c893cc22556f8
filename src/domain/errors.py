from __future__ import annotations

from enum import Enum


class ParamsErrorKind(str, Enum):
    """Kinds of client-input errors raised while resolving request parameters."""

    INVALID_SIZE = "Invalid size"
    INVALID_BLUR_AMOUNT = "Invalid blur amount"
    INVALID_FILE_EXTENSION = "Invalid file extension"

    @property
    def message(self) -> str:
        return self.value


class ParamsError(ValueError):
    """Raised when request parameters are malformed or out of bounds.

    Callers discriminate on ``kind`` rather than on the instance:

        match exc.kind:
            case ParamsErrorKind.INVALID_SIZE: ...
    """

    def __init__(self, kind: ParamsErrorKind) -> None:
        # kind stays in args so copies and pickles rebuild the same error
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.message

    def __repr__(self) -> str:
        return f"ParamsError({self.kind.name})"


class ImageNotFoundError(LookupError):
    def __init__(self, image_id: str) -> None:
        super().__init__(image_id)
        self.image_id = image_id

    def __str__(self) -> str:
        return f"Image not found: {self.image_id}"
