from __future__ import annotations

from src.domain.services.params_service import ParamsService
from src.infrastructure.database.repositories.image_repository import ImageRepository
from src.infrastructure.database.supabase_client import get_supabase_client


def get_image_repo() -> ImageRepository:
    return ImageRepository(get_supabase_client())


def get_params_service() -> ParamsService:
    return ParamsService()
