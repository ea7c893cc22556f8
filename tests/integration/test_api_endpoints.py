def test_root_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["service"] == "resizekit-backend"

    r2 = client.get("/health")
    assert r2.status_code == 200
    assert r2.json() == {"status": "healthy"}


def test_square_request_defaults(client, registered_images):
    r = client.get("/params/id/small/300")
    assert r.status_code == 200, r.text
    data = r.json()
    assert (data["width"], data["height"]) == (300, 300)
    assert data["extension"] == ".jpg"
    assert data["grayscale"] is False
    assert data["blur"] is False
    assert data["blur_amount"] is None
    assert data["image"]["id"] == "small"


def test_width_height_with_extension_and_flags(client, registered_images):
    r = client.get("/params/id/small/300/200.WEBP?grayscale&blur=3")
    assert r.status_code == 200, r.text
    data = r.json()
    assert (data["width"], data["height"]) == (300, 200)
    assert data["extension"] == ".webp"
    assert data["grayscale"] is True
    assert data["blur"] is True
    assert data["blur_amount"] == 3


def test_blur_without_value(client, registered_images):
    r = client.get("/params/id/small/100?blur")
    assert r.status_code == 200, r.text
    assert r.json()["blur_amount"] == 5


def test_zero_uses_natural_size(client, registered_images):
    r = client.get("/params/id/small/0/0")
    assert r.status_code == 200, r.text
    data = r.json()
    assert (data["width"], data["height"]) == (800, 600)


def test_natural_size_above_limit(client, registered_images):
    r = client.get("/params/id/huge/6000/4000.jpg")
    assert r.status_code == 200, r.text

    r2 = client.get("/params/id/small/6000/100")
    assert r2.status_code == 400
    assert r2.json()["detail"] == "Invalid size"


def test_invalid_parameters(client, registered_images):
    r = client.get("/params/id/small/" + "9" * 20)
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid size"

    r2 = client.get("/params/id/small/300.png")
    assert r2.status_code == 400
    assert r2.json()["detail"] == "Invalid file extension"

    r3 = client.get("/params/id/small/300?blur=11")
    assert r3.status_code == 400
    assert r3.json()["detail"] == "Invalid blur amount"


def test_unknown_image(client):
    r = client.get("/params/id/does-not-exist/300")
    assert r.status_code == 404
    assert "does-not-exist" in r.json()["detail"]


def test_image_read_from_local_file(client):
    r = client.get("/params/id/file-1/0")
    assert r.status_code == 200, r.text
    data = r.json()
    assert (data["width"], data["height"]) == (640, 480)


def test_dimension_segments_must_be_unsigned_digits(client, registered_images):
    for path in [
        "/params/id/small/-5",
        "/params/id/small/+5",
        "/params/id/small/abc",
        "/params/id/small/-300/200",
        "/params/id/small/300/-200.jpg",
        "/params/id/small/300.jpg/200",
    ]:
        r = client.get(path)
        assert r.status_code == 422, path


def test_oversized_blur_keeps_default(client, registered_images):
    r = client.get("/params/id/small/100?blur=" + "1" * 5000)
    assert r.status_code == 200, r.text
    assert r.json()["blur_amount"] == 5


def test_image_without_dimensions(client):
    from src.infrastructure.database.repositories.image_repository import ImageRepository

    ImageRepository(None).register("blank", 0, 0)
    r = client.get("/params/id/blank/100")
    assert r.status_code == 200, r.text
    assert r.json()["image"]["width"] == 0


def test_error_responses_documented(client):
    schema = client.get("/openapi.json").json()
    responses = schema["paths"]["/params/id/{image_id}/{size}"]["get"]["responses"]
    assert responses["400"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
    assert "404" in responses
