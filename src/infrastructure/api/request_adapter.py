from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from starlette.requests import Request

# path variable that may carry the file extension suffix, in lookup order
_SUFFIXED_PARAMS = ("height", "size")


def split_extension(segment: str) -> tuple[str, str]:
    """Split ``"300.webp"`` into ``("300", ".webp")``. No dot means no extension."""
    stem, dot, rest = segment.partition(".")
    return stem, dot + rest


@dataclass(frozen=True)
class ImageRequest:
    """Framework-free view of an image request: path variables and query parameters."""

    path_params: Mapping[str, str] = field(default_factory=dict)
    query_params: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_starlette(cls, request: Request) -> ImageRequest:
        path_params = {k: str(v) for k, v in request.path_params.items()}
        for name in _SUFFIXED_PARAMS:
            if name in path_params:
                stem, extension = split_extension(path_params[name])
                path_params[name] = stem
                if extension:
                    path_params["extension"] = extension
                break
        # first value wins for repeated keys; `?blur` is kept as ""
        query_params = {key: request.query_params.getlist(key)[0] for key in request.query_params.keys()}
        return cls(path_params=path_params, query_params=query_params)
