"""Articles router for managing news articles."""

import logging
from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recycling_news.database import get_db
from recycling_news.models import Article
from recycling_news.schemas import ArticleCreate, ArticleOut, ArticleUpdate, Message

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/articles", tags=["Articles"])


@router.get("", response_model=List[ArticleOut])
def list_articles(db: Session = Depends(get_db)):
    """
    List all articles, newest publish date first.

    Each article embeds its category, or null when category_id is unset
    or does not resolve.
    """
    logger.info("Fetching all articles")
    try:
        articles = db.query(Article).order_by(Article.published_date.desc()).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch articles: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch articles"
        )
    logger.info(f"Found {len(articles)} articles")
    return articles


@router.get("/{article_id}", response_model=ArticleOut)
def get_article(article_id: str, db: Session = Depends(get_db)):
    """
    Get one article with its category.

    Raises:
        HTTPException: If article not found
    """
    logger.info(f"Fetching article {article_id}")

    try:
        article = db.query(Article).filter(Article.id == article_id).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch article {article_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch article"
        )

    if not article:
        logger.warning(f"Article not found: {article_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found"
        )

    return article


@router.post("")
def create_article(article_data: ArticleCreate, db: Session = Depends(get_db)):
    """
    Create an article with the caller-supplied id.

    Args:
        article_data: Full article fields including id
        db: Database session

    Returns:
        dict: The submitted article fields

    Raises:
        HTTPException: If the insert fails (e.g. duplicate id or slug)
    """
    logger.info(f"Creating article: {article_data.title}")

    try:
        db.add(Article(**article_data.model_dump()))
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to create article {article_data.id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create article"
        )

    logger.info(f"Article created: {article_data.id}")
    return jsonable_encoder(article_data)


@router.put("/{article_id}")
def update_article(
    article_id: str,
    update_data: ArticleUpdate,
    db: Session = Depends(get_db)
):
    """
    Overwrite the fields included in the request and refresh updated_at.

    Runs as a single UPDATE statement; an unknown id updates nothing and
    still echoes the request.
    """
    logger.info(f"Updating article {article_id}")

    values = update_data.model_dump(exclude_unset=True)
    values["updated_at"] = datetime.utcnow()

    try:
        updated = (
            db.query(Article)
            .filter(Article.id == article_id)
            .update(values, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to update article {article_id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update article"
        )

    logger.info(f"Article {article_id} updated ({updated} row(s))")
    return jsonable_encoder({"id": article_id, **update_data.model_dump(exclude_unset=True)})


@router.delete("/{article_id}", response_model=Message)
def delete_article(article_id: str, db: Session = Depends(get_db)):
    """
    Delete an article and its comments.

    Reports success whether or not the article existed.
    """
    logger.info(f"Deleting article {article_id}")

    try:
        article = db.query(Article).filter(Article.id == article_id).first()
        if article:
            db.delete(article)
            db.commit()
        else:
            logger.debug(f"Article {article_id} did not exist")
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete article {article_id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete article"
        )

    return {"message": "Article deleted"}
