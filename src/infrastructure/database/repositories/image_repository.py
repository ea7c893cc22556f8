from __future__ import annotations

import os
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from supabase import Client

from src.domain.entities.image import ImageEntity
from src.infrastructure.database.postgres_client import get_postgres_client
from src.infrastructure.database.supabase_client import supabase_disabled

# module-level in-memory store for disabled mode
_MEM_IMAGES: dict[str, ImageEntity] = {}


class ImageRepository:
    """Read access to source image metadata.

    Backends, in order: local PostgreSQL (USE_LOCAL_DB=1), local mode
    (SUPABASE_DISABLED=1 or no client) and Supabase.
    """

    def __init__(self, client: Client | None) -> None:
        self.client = client
        self.disabled = supabase_disabled()
        self.use_local_db = os.getenv("USE_LOCAL_DB", "0") == "1"
        self.pg_client = get_postgres_client() if self.use_local_db else None
        self.local_dir = Path(os.getenv("IMAGES_LOCAL_DIR", ".local_images"))

    def _row_to_entity(self, row: dict) -> ImageEntity:
        return ImageEntity(
            id=str(row["id"]),
            width=int(row["width"]),
            height=int(row["height"]),
            author=row.get("author"),
            url=row.get("url"),
        )

    def register(
        self,
        image_id: str,
        width: int,
        height: int,
        author: str | None = None,
        url: str | None = None,
    ) -> ImageEntity:
        """Add an image to the in-memory store used in local mode."""
        entity = ImageEntity(id=image_id, width=width, height=height, author=author, url=url)
        _MEM_IMAGES[image_id] = entity
        return entity

    def get(self, image_id: str) -> ImageEntity | None:
        # PostgreSQL mode
        if self.use_local_db and self.pg_client:
            query = "SELECT id, width, height, author, url FROM images WHERE id = %s"
            try:
                row = self.pg_client.execute_one(query, (image_id,))
            except Exception as exc:
                raise RuntimeError(f"PostgreSQL get image failed: {exc}") from exc
            return self._row_to_entity(row) if row else None

        # Local mode
        if self.disabled or self.client is None:
            entity = _MEM_IMAGES.get(image_id)
            if entity is None:
                entity = self._read_local_file(image_id)
            return entity

        # Supabase mode
        try:  # pragma: no cover - network
            res = (
                self.client.table("images")
                .select("id, width, height, author, url")
                .eq("id", image_id)
                .limit(1)
                .execute()
            )
            rows = res.data or []
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"DB get image failed: {exc}") from exc
        return self._row_to_entity(rows[0]) if rows else None

    def _read_local_file(self, image_id: str) -> ImageEntity | None:
        # file stem is the image id; only the header is read for the size
        if not self.local_dir.is_dir():
            return None
        for path in sorted(self.local_dir.iterdir()):
            if not path.is_file() or path.stem != image_id:
                continue
            try:
                with Image.open(path) as img:
                    width, height = img.size
            except UnidentifiedImageError:
                continue
            return ImageEntity(id=image_id, width=width, height=height, url=str(path))
        return None
