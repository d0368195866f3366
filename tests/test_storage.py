"""Tests for vehicle image upload validation and storage paths."""

import pytest

from dealership.db.storage import (
    MAX_FILE_SIZE,
    MAX_FILES,
    ImageUpload,
    StorageValidationError,
    get_storage_path,
    upload_vehicle_images,
    validate_file,
    validate_files,
)

from fakes import FakeSupabase


def _image(name="car.jpg", content_type="image/jpeg", size=1024):
    return ImageUpload(filename=name, content_type=content_type, content=b"\x00" * size)


class TestValidation:
    @pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/webp", "image/gif"])
    def test_allowed_types(self, content_type):
        validate_file(_image(content_type=content_type))

    def test_rejects_other_types(self):
        with pytest.raises(StorageValidationError, match="not allowed"):
            validate_file(_image(name="doc.pdf", content_type="application/pdf"))

    def test_size_limit_is_inclusive(self):
        validate_file(_image(size=MAX_FILE_SIZE))
        with pytest.raises(StorageValidationError, match="exceeds"):
            validate_file(_image(size=MAX_FILE_SIZE + 1))

    def test_requires_at_least_one_file(self):
        with pytest.raises(StorageValidationError):
            validate_files([])

    def test_file_count_limit(self):
        validate_files([_image() for _ in range(MAX_FILES)])
        with pytest.raises(StorageValidationError):
            validate_files([_image() for _ in range(MAX_FILES + 1)])


class TestStoragePath:
    def test_format(self):
        assert get_storage_path("vehicles", "front.jpg", now_ms=1700000000000) == (
            "vehicles/1700000000000_front.jpg"
        )

    def test_sanitizes_name(self):
        path = get_storage_path("vehicles", "my car (1).jpg", now_ms=1)
        assert path == "vehicles/1_my_car_1_.jpg"

    def test_unknown_folder(self):
        with pytest.raises(StorageValidationError):
            get_storage_path("secrets", "a.jpg")


class TestUpload:
    def test_returns_public_urls_in_order(self):
        db = FakeSupabase()
        files = [_image("a.jpg"), _image("b.png", "image/png")]
        urls = upload_vehicle_images(db, "vehicle-images", files)

        assert len(urls) == 2
        assert urls[0].startswith(
            "https://example.supabase.co/storage/v1/object/public/vehicle-images/vehicles/"
        )
        assert urls[0].endswith("_a.jpg")
        assert urls[1].endswith("_b.png")
        assert len(db.storage.objects) == 2

    def test_invalid_batch_uploads_nothing(self):
        db = FakeSupabase()
        with pytest.raises(StorageValidationError):
            upload_vehicle_images(
                db, "vehicle-images", [_image(), _image("x.exe", "application/x-msdownload")]
            )
        assert db.storage.objects == {}
