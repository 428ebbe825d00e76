from typing import List, Optional, Tuple
import logging
from sqlmodel import Session, select
from ..models import User, Show, Genre, utc_now
from ..schemas.show import ShowCreate

logger = logging.getLogger(__name__)


def show_conditions(**fields) -> list:
    """Turn the supplied show fields into equality conditions, skipping unset ones."""
    return [
        getattr(Show, name) == value
        for name, value in fields.items()
        if value is not None
    ]

def find_shows(db: Session, **fields) -> List[Show]:
    """Return every show matching all of the given field values."""
    query = select(Show)
    for condition in show_conditions(**fields):
        query = query.where(condition)
    return db.exec(query).all()

def find_user_show(db: Session, user: User, title: str, genre: Genre) -> Optional[Show]:
    """Find the user's show with the given (title, genre) natural key."""
    return db.exec(
        select(Show)
        .where(Show.user_id == user.id)
        .where(Show.title == title)
        .where(Show.genre == genre)
    ).first()

def upsert_user_show(db: Session, user: User, show: ShowCreate) -> Tuple[Show, bool]:
    """
    Update the user's show matching (title, genre), or create it under the user.

    Returns the stored show and whether it was newly created.
    """
    existing_show = find_user_show(db, user, show.title, show.genre)

    if existing_show:
        # Update existing show
        existing_show.rating = show.rating
        existing_show.status = show.status
        existing_show.updated_at = utc_now()
        db.add(existing_show)
        db.commit()
        db.refresh(existing_show)
        logger.info(f"Updated show {existing_show.id} for user {user.id}")
        return existing_show, False

    # Create new show if none exists
    db_show = Show(**show.model_dump(), user_id=user.id)
    db.add(db_show)
    db.commit()
    db.refresh(db_show)
    logger.info(f"Created show {db_show.id} for user {user.id}")
    return db_show, True
