"""Vehicle image uploads to the Supabase storage bucket."""

import re
import time
from dataclasses import dataclass

from supabase import Client

from ..core.logging import log_db_query

ALLOWED_MIME_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
MAX_FILES = 10

STORAGE_FOLDERS = ("vehicles", "profiles", "temp")


class StorageValidationError(ValueError):
    """Raised when an upload is rejected before reaching the bucket."""


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content_type: str
    content: bytes


def validate_file(file: ImageUpload) -> None:
    """Reject files with a disallowed type or size."""
    if file.content_type not in ALLOWED_MIME_TYPES:
        raise StorageValidationError(
            f"File type {file.content_type} is not allowed. "
            f"Please use: {', '.join(ALLOWED_MIME_TYPES)}"
        )
    if len(file.content) > MAX_FILE_SIZE:
        size_mb = len(file.content) / 1024 / 1024
        raise StorageValidationError(
            f"File size {size_mb:.2f}MB exceeds maximum allowed size of "
            f"{MAX_FILE_SIZE / 1024 / 1024:.2f}MB"
        )


def validate_files(files: list[ImageUpload]) -> None:
    if not files:
        raise StorageValidationError("No files provided")
    if len(files) > MAX_FILES:
        raise StorageValidationError(f"At most {MAX_FILES} files can be uploaded at once")
    for file in files:
        validate_file(file)


def get_storage_path(folder: str, filename: str, now_ms: int | None = None) -> str:
    """Build ``<folder>/<epoch_ms>_<filename>`` with a filesystem-safe name."""
    if folder not in STORAGE_FOLDERS:
        raise StorageValidationError(f"Unknown storage folder: {folder}")
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    safe_name = re.sub(r"[^A-Za-z0-9._-]+", "_", filename).strip("_") or "upload"
    return f"{folder}/{stamp}_{safe_name}"


def upload_vehicle_images(client: Client, bucket: str, files: list[ImageUpload]) -> list[str]:
    """Validate and upload images, returning their public URLs in input order."""
    validate_files(files)

    urls: list[str] = []
    for file in files:
        path = get_storage_path("vehicles", file.filename)
        start = time.time()
        storage = client.storage.from_(bucket)
        storage.upload(path, file.content, {"content-type": file.content_type})
        log_db_query("upload", f"storage:{bucket}", (time.time() - start) * 1000)
        urls.append(storage.get_public_url(path))
    return urls
