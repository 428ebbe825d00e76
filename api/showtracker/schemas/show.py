from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import datetime
from ..models import Genre


def _parse_genre(value):
    if isinstance(value, str):
        return Genre(value)
    return value

class ShowBase(BaseModel):
    title: str = Field(min_length=1)
    genre: Genre
    rating: float
    status: str = Field(min_length=1)

    @field_validator("genre", mode="before")
    @classmethod
    def parse_genre(cls, value):
        return _parse_genre(value)

class ShowCreate(ShowBase):

    class Config:
        extra = "forbid"

class ShowRead(ShowBase):
    id: int
    user_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class ShowLookup(BaseModel):
    """Body of a single-show lookup: an id, or a title and genre pair."""
    id: Optional[int] = None
    title: Optional[str] = None
    genre: Optional[Genre] = None

    @field_validator("genre", mode="before")
    @classmethod
    def parse_genre(cls, value):
        return _parse_genre(value)

    @model_validator(mode="after")
    def require_id_or_natural_key(self):
        if self.id is None and not (self.title and self.genre):
            raise ValueError("Body must contain an id, or both a title and a genre")
        return self
