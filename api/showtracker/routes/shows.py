from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session, select
from typing import List, Optional
import logging
from ..models import Show, Genre, MAX_ROW_ID
from ..database import get_session
from ..schemas.show import ShowLookup, ShowRead
from ..services.shows import find_shows

logger = logging.getLogger(__name__)

router = APIRouter()

GENRES = [genre.value for genre in Genre]


@router.get("", response_model=List[ShowRead])
def get_shows(
    skip: int = Query(default=0, ge=0),
    limit: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_session)
):
    query = select(Show).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return db.exec(query).all()

@router.get("/show", response_model=ShowRead)
def get_show(lookup: ShowLookup, db: Session = Depends(get_session)):
    """Look up a single show by id, or by its title and genre."""
    if lookup.id is not None and abs(lookup.id) > MAX_ROW_ID:
        shows = []
    else:
        shows = find_shows(
            db,
            id=lookup.id,
            title=lookup.title if lookup.genre else None,
            genre=lookup.genre if lookup.title else None,
        )
    if not shows:
        logger.info(f"No show found for {lookup.model_dump(exclude_none=True)}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No show exists for {lookup.model_dump(mode='json', exclude_none=True)}"
        )
    return shows[0]

@router.get("/{genre}", response_model=List[ShowRead])
def get_shows_by_genre(
    genre: str,
    title: Optional[str] = None,
    rating: Optional[float] = None,
    show_status: Optional[str] = Query(default=None, alias="status"),
    db: Session = Depends(get_session)
):
    """All shows of a genre, optionally narrowed by title, rating and status."""
    try:
        selected_genre = Genre(genre)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Genre must be one of the following: {', '.join(GENRES)}"
        )

    shows = find_shows(
        db,
        genre=selected_genre,
        title=title,
        rating=rating,
        status=show_status,
    )
    if not shows:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No {selected_genre.value} shows found"
        )
    return shows
