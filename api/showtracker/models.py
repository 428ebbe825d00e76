from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime, timezone
from typing import Optional, List
from enum import Enum


"""
This file contains the models for the database tables.

We have 2 tables:
    - User
    - Show (a tracked TV show, owned by a user)
"""

# Largest primary key a 64-bit integer column can hold
MAX_ROW_ID = 2**63 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Genre(str, Enum):
    COMEDY = "Comedy"
    DRAMA = "Drama"
    HORROR = "Horror"
    SITCOM = "Sitcom"

    @classmethod
    def _missing_(cls, value):
        # Genres are matched case-insensitively
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None

class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True)
    password: str
    created_at: datetime = Field(default_factory=utc_now)

    # Relationships
    shows: List["Show"] = Relationship(back_populates="user")

class Show(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    genre: Genre = Field(index=True)
    rating: float
    status: str
    user_id: Optional[int] = Field(default=None, foreign_key="user.id", nullable=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Relationships
    user: Optional[User] = Relationship(back_populates="shows")
