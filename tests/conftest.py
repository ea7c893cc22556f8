import os
import sys
from pathlib import Path
import pytest
from fastapi.testclient import TestClient
from PIL import Image

# Ensure project root is on sys.path so 'src' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("SUPABASE_DISABLED", "1")


@pytest.fixture(scope="session")
def local_images_dir(tmp_path_factory) -> Path:
    # a real image file so local mode reads its natural size from the header
    images_dir = tmp_path_factory.mktemp("local_images")
    Image.new("RGB", (640, 480), color=(128, 64, 32)).save(images_dir / "file-1.png", format="PNG")
    os.environ["IMAGES_LOCAL_DIR"] = str(images_dir)
    return images_dir


@pytest.fixture(scope="session")
def client(local_images_dir) -> TestClient:
    # lazy import after env configured
    from src.main import create_app

    app = create_app()
    return TestClient(app)


@pytest.fixture(scope="session")
def registered_images(client) -> dict[str, tuple[int, int]]:
    from src.infrastructure.database.repositories.image_repository import ImageRepository

    repo = ImageRepository(None)
    images = {"small": (800, 600), "huge": (6000, 4000)}
    for image_id, (width, height) in images.items():
        repo.register(image_id, width, height, author="Test Author")
    return images
