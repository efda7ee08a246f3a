"""Comments router: listing and posting per article, deletion by id."""

import logging
import uuid
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recycling_news.database import get_db
from recycling_news.models import Article, Comment
from recycling_news.schemas import CommentCreate, CommentOut, Message

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Comments"])


@router.get("/articles/{article_id}/comments", response_model=List[CommentOut])
def list_comments(article_id: str, db: Session = Depends(get_db)):
    """List the comments of an article, oldest first."""
    logger.info(f"Fetching comments for article {article_id}")
    try:
        return (
            db.query(Comment)
            .filter(Comment.article_id == article_id)
            .order_by(Comment.created_at.asc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch comments for article {article_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments"
        )


@router.post("/articles/{article_id}/comments", response_model=CommentOut)
def create_comment(
    article_id: str,
    comment_data: CommentCreate,
    db: Session = Depends(get_db)
):
    """
    Add a comment to an article.

    Raises:
        HTTPException: 404 if the article does not exist
    """
    logger.info(f"Adding comment to article {article_id} by {comment_data.username}")

    if not db.query(Article.id).filter(Article.id == article_id).first():
        logger.warning(f"Comment on missing article: {article_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found"
        )

    comment = Comment(
        id=uuid.uuid4().hex,
        article_id=article_id,
        user_id=comment_data.user_id or None,
        username=comment_data.username,
        content=comment_data.content,
    )

    try:
        db.add(comment)
        db.commit()
        db.refresh(comment)
    except SQLAlchemyError as e:
        logger.error(f"Failed to add comment to article {article_id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add comment"
        )

    return comment


@router.delete("/comments/{comment_id}", response_model=Message)
def delete_comment(comment_id: str, db: Session = Depends(get_db)):
    """Delete a comment by id, regardless of which article it belongs to."""
    logger.info(f"Deleting comment {comment_id}")

    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        logger.warning(f"Comment not found: {comment_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found"
        )

    try:
        db.delete(comment)
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete comment {comment_id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment"
        )

    return {"message": "Comment deleted"}
