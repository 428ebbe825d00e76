from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session, select
from typing import List, Optional
import logging
from ..models import User, MAX_ROW_ID
from ..database import get_session
from ..schemas.user import UserRead, UserLookup, UserShowsLookup, UserShowUpsert
from ..schemas.show import ShowRead
from ..services.shows import upsert_user_show

logger = logging.getLogger(__name__)

router = APIRouter()


def get_user_or_404(db: Session, user_id: int) -> User:
    # Ids beyond the integer column range cannot belong to any user
    user = db.get(User, user_id) if abs(user_id) <= MAX_ROW_ID else None
    if not user:
        logger.info(f"User {user_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No user exists with id {user_id}"
        )
    return user

@router.get("", response_model=List[UserRead])
def get_users(
    skip: int = Query(default=0, ge=0),
    limit: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_session)
):
    query = select(User).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return db.exec(query).all()

@router.get("/user", response_model=UserRead)
def get_user(credentials: UserLookup, db: Session = Depends(get_session)):
    user = db.exec(
        select(User)
        .where(User.username == credentials.username)
        .where(User.password == credentials.password)
    ).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No user has username {credentials.username} and the given password"
        )
    return user

@router.get("/user/shows", response_model=List[ShowRead])
def get_user_shows(lookup: UserShowsLookup, db: Session = Depends(get_session)):
    user = get_user_or_404(db, lookup.id)
    if not user.shows:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user.id} has no shows"
        )
    return user.shows

@router.put("/user/shows", response_model=ShowRead, status_code=status.HTTP_201_CREATED)
def put_user_show(upsert: UserShowUpsert, db: Session = Depends(get_session)):
    """
    Attach a show to a user.

    The user's show with the same title and genre is updated in place;
    otherwise a new show is created for the user.
    """
    user = get_user_or_404(db, upsert.id)
    show, _ = upsert_user_show(db, user, upsert.show)
    return show
