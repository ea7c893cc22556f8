import pytest
from PIL import Image

from src.infrastructure.database.repositories.image_repository import ImageRepository


@pytest.fixture
def local_repo(tmp_path, monkeypatch) -> ImageRepository:
    monkeypatch.setenv("SUPABASE_DISABLED", "1")
    monkeypatch.setenv("USE_LOCAL_DB", "0")
    monkeypatch.setenv("IMAGES_LOCAL_DIR", str(tmp_path))
    return ImageRepository(None)


def test_register_and_get(local_repo):
    local_repo.register("repo-registered", 1200, 900, author="Someone")
    entity = local_repo.get("repo-registered")
    assert entity is not None
    assert (entity.width, entity.height) == (1200, 900)
    assert entity.author == "Someone"


def test_reads_natural_size_from_file(local_repo, tmp_path):
    Image.new("RGB", (320, 240)).save(tmp_path / "repo-file.jpg", format="JPEG")
    entity = local_repo.get("repo-file")
    assert entity is not None
    assert (entity.width, entity.height) == (320, 240)


def test_skips_non_image_files(local_repo, tmp_path):
    (tmp_path / "repo-text.txt").write_text("not an image")
    assert local_repo.get("repo-text") is None


def test_unknown_image(local_repo):
    assert local_repo.get("repo-missing") is None


def test_missing_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("SUPABASE_DISABLED", "1")
    monkeypatch.setenv("IMAGES_LOCAL_DIR", str(tmp_path / "does-not-exist"))
    assert ImageRepository(None).get("anything") is None
