"""Categories router."""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recycling_news.database import get_db
from recycling_news.models import Category
from recycling_news.schemas import CategoryCreate, CategoryOut

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    """List all categories ordered by name."""
    logger.info("Fetching all categories")
    try:
        categories = db.query(Category).order_by(Category.name).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch categories: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch categories"
        )
    logger.info(f"Found {len(categories)} categories")
    return categories


@router.post("")
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """
    Create a category with the caller-supplied id.

    Returns:
        dict: The id, name and slug as submitted
    """
    logger.info(f"Creating category: {category_data.slug}")

    try:
        db.add(Category(**category_data.model_dump()))
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to create category {category_data.id}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create category"
        )

    logger.info(f"Category created: {category_data.id}")
    return category_data.model_dump()
