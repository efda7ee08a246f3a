"""Validation and local-disk storage for uploaded media files."""

import logging
import random
import time
from pathlib import Path
from typing import BinaryIO, Optional

# Configure logging
logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 50 * 1024 * 1024
CHUNK_SIZE = 1024 * 1024

IMAGE_EXTENSIONS = {"jpeg", "jpg", "png", "gif", "webp", "svg", "tiff", "tif", "bmp", "ico"}
VIDEO_EXTENSIONS = {"mp4", "webm", "ogg", "mov", "avi", "wmv", "flv", "mkv"}
ALLOWED_EXTENSIONS = IMAGE_EXTENSIONS | VIDEO_EXTENSIONS

ALLOWED_IMAGE_MIME_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "image/tiff",
    "image/bmp",
    "image/x-icon",
    "image/vnd.microsoft.icon",
}

ALLOWED_VIDEO_MIME_TYPES = {
    "video/mp4",
    "video/webm",
    "video/ogg",
    "video/quicktime",
    "video/x-msvideo",
    "video/avi",
    "video/x-ms-wmv",
    "video/x-flv",
    "video/x-matroska",
}

ALLOWED_MIME_TYPES = ALLOWED_IMAGE_MIME_TYPES | ALLOWED_VIDEO_MIME_TYPES

SUPPORTED_FORMATS_MESSAGE = (
    "Unsupported file format. Supported formats: "
    "JPEG, PNG, GIF, WEBP, SVG, TIFF, BMP, ICO, MP4, WEBM, OGG, MOV, AVI, WMV, FLV, MKV"
)


class UploadRejected(Exception):
    """The upload failed validation; status_code is the HTTP status to report."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class MediaStorageError(Exception):
    pass


def get_file_extension(filename: Optional[str]) -> Optional[str]:
    """Lower-cased extension without the dot, or None."""
    if not filename or '.' not in filename:
        return None
    return filename.rsplit('.', 1)[1].lower()


def is_allowed(filename: Optional[str], mimetype: Optional[str]) -> bool:
    """Both the extension and the declared MIME type must be on the allow-list."""
    extension = get_file_extension(filename)
    mimetype = (mimetype or "").split(";")[0].strip().lower()
    return extension in ALLOWED_EXTENSIONS and mimetype in ALLOWED_MIME_TYPES


def media_kind(mimetype: Optional[str]) -> Optional[str]:
    """Classify a MIME type as "image", "video" or None."""
    if not mimetype:
        return None
    if mimetype.startswith("image/"):
        return "image"
    if mimetype.startswith("video/"):
        return "video"
    return None


def generate_filename(original_name: str) -> str:
    """<epoch millis>-<random suffix><original extension>"""
    extension = get_file_extension(original_name)
    suffix = f".{extension}" if extension else ""
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{suffix}"


def save_upload(stream: BinaryIO, original_name: str, uploads_dir: Path) -> tuple:
    """
    Copy an upload stream into uploads_dir under a generated name.

    Args:
        stream: Readable binary file object
        original_name: Client-side filename, used for its extension only
        uploads_dir: Target directory

    Returns:
        tuple: (stored filename, size in bytes)

    Raises:
        UploadRejected: If the stream exceeds MAX_UPLOAD_BYTES
        MediaStorageError: If the file cannot be written
    """
    filename = generate_filename(original_name)
    target = Path(uploads_dir) / filename
    size = 0

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as out:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > MAX_UPLOAD_BYTES:
                    break
                out.write(chunk)
    except OSError as e:
        logger.error(f"Failed to write upload {filename}: {e}")
        target.unlink(missing_ok=True)
        raise MediaStorageError("Failed to upload file") from e

    if size > MAX_UPLOAD_BYTES:
        logger.warning(f"Upload {original_name} exceeds {MAX_UPLOAD_BYTES} bytes")
        target.unlink(missing_ok=True)
        raise UploadRejected("File too large. Maximum size is 50MB", status_code=413)

    logger.info(f"Stored upload {original_name} as {filename} ({size} bytes)")
    return filename, size


def delete_media_file(uploads_dir: Path, filename: str) -> bool:
    """
    Remove a stored media file; a missing file is not an error.

    Returns:
        bool: True if a file was removed
    """
    file_path = Path(uploads_dir) / filename
    if not file_path.exists():
        logger.warning(f"Media file already absent: {file_path}")
        return False
    file_path.unlink()
    logger.info(f"Deleted media file: {file_path}")
    return True
