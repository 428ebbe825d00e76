from pydantic import BaseModel, Field
from datetime import datetime
from .show import ShowCreate

ALPHANUMERIC = r"^[A-Za-z0-9]+$"

class UserBase(BaseModel):
    username: str

class UserRead(UserBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True

class UserLookup(BaseModel):
    username: str = Field(pattern=ALPHANUMERIC)
    password: str = Field(pattern=ALPHANUMERIC)

class UserShowsLookup(BaseModel):
    id: int

class UserShowUpsert(BaseModel):
    id: int
    show: ShowCreate
