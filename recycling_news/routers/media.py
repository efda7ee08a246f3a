"""Media router for uploading and managing images and videos."""

import logging
import uuid
from pathlib import Path
from typing import List, Optional
from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recycling_news.database import get_db
from recycling_news.models import Media
from recycling_news.schemas import MediaOut, MediaUpdate, Message
from recycling_news.uploads import (
    SUPPORTED_FORMATS_MESSAGE,
    MediaStorageError,
    UploadRejected,
    delete_media_file,
    is_allowed,
    save_upload,
)

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/media", tags=["Media"])


def get_uploads_dir(request: Request) -> Path:
    return request.app.state.uploads_dir


@router.post("/upload", response_model=MediaOut)
def upload_media(
    file: Optional[UploadFile] = File(None),
    uploads_dir: Path = Depends(get_uploads_dir),
    db: Session = Depends(get_db)
):
    """
    Upload a single image or video.

    Args:
        file: Multipart file in the "file" field
        uploads_dir: Directory the file is written to
        db: Database session

    Returns:
        MediaOut: The stored media record

    Raises:
        HTTPException: 400 for a missing or unsupported file, 413 if too
            large, 500 if the file or record cannot be stored
    """
    if file is None or not file.filename:
        logger.warning("Upload request without a file")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    logger.info(f"Upload request: {file.filename} ({file.content_type})")

    if not is_allowed(file.filename, file.content_type):
        logger.warning(f"Rejected upload {file.filename} with type {file.content_type}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=SUPPORTED_FORMATS_MESSAGE
        )

    try:
        filename, size = save_upload(file.file, file.filename, uploads_dir)
    except UploadRejected as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except MediaStorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    media = Media(
        id=uuid.uuid4().hex,
        filename=filename,
        original_name=file.filename,
        mimetype=file.content_type,
        size=size,
        url=f"/uploads/{filename}",
    )

    try:
        db.add(media)
        db.commit()
        db.refresh(media)
    except SQLAlchemyError as e:
        logger.error(f"Failed to record upload {filename}: {e}")
        db.rollback()
        delete_media_file(uploads_dir, filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload file"
        )

    logger.info(f"Media {media.id} stored at {media.url}")
    return media


@router.get("", response_model=List[MediaOut])
def list_media(db: Session = Depends(get_db)):
    """List all media, most recent upload first."""
    logger.info("Fetching all media")
    try:
        return db.query(Media).order_by(Media.uploaded_at.desc()).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch media: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch media"
        )


@router.get("/{media_id}", response_model=MediaOut)
def get_media(media_id: str, db: Session = Depends(get_db)):
    """
    Get one media record.

    Raises:
        HTTPException: If media not found
    """
    logger.info(f"Fetching media {media_id}")

    try:
        media = db.query(Media).filter(Media.id == media_id).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch media {media_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch media"
        )

    if not media:
        logger.warning(f"Media not found: {media_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Media not found"
        )
    return media


@router.put("/{media_id}")
def update_media(
    media_id: str,
    update_data: MediaUpdate,
    db: Session = Depends(get_db)
):
    """
    Overwrite original_name, alt_text and description.

    A missing original_name keeps the stored one; the reply lists only the
    fields actually written.
    """
    logger.info(f"Updating media {media_id}")

    values = update_data.model_dump()
    if values["original_name"] is None:
        # original_name is NOT NULL; keep the stored one
        values.pop("original_name")

    try:
        db.query(Media).filter(Media.id == media_id).update(values, synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to update media {media_id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update media"
        )

    return {"id": media_id, **values}


@router.delete("/{media_id}", response_model=Message)
def delete_media(
    media_id: str,
    uploads_dir: Path = Depends(get_uploads_dir),
    db: Session = Depends(get_db)
):
    """
    Delete a media file from disk, then its record.

    The two steps are not atomic: if the record removal fails after the
    file is gone, the record is left behind.
    """
    logger.info(f"Deleting media {media_id}")

    media = db.query(Media).filter(Media.id == media_id).first()
    if not media:
        logger.warning(f"Media not found: {media_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Media not found"
        )

    try:
        delete_media_file(uploads_dir, media.filename)
        db.delete(media)
        db.commit()
    except (OSError, SQLAlchemyError) as e:
        logger.error(f"Failed to delete media {media_id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete media"
        )

    return {"message": "Media deleted"}
