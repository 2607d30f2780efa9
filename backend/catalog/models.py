from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ContentKind(str, Enum):
    documentary = "documentary"
    music = "music"


class CatalogItemCreate(BaseModel):
    title: str = Field(..., min_length=1)
    type: ContentKind
    genre: str = Field(..., min_length=1)
    year: int
    rating: int = Field(..., ge=0, le=100, description="Scaled by 10, e.g. 85 means 8.5")
    duration: str
    description: str
    image: str
    director: str | None = None
    artist: str | None = None
    imdb_id: str | None = None


class CatalogItem(CatalogItemCreate):
    id: int


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1)


class UserAccount(BaseModel):
    id: int
    username: str
    email: str
    password_hash: str
    favorites: list[int] = Field(default_factory=list)


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    favorites: list[int]

    @classmethod
    def from_account(cls, account: UserAccount) -> UserOut:
        return cls(
            id=account.id,
            username=account.username,
            email=account.email,
            favorites=list(account.favorites),
        )


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class FavoritesRequest(BaseModel):
    favorites: list[int]
