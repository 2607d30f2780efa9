from __future__ import annotations

from pydantic import BaseModel, Field

from ..catalog.models import CatalogItem


class ScoredItem(BaseModel):
    item: CatalogItem
    score: int


class RecommendationResponse(BaseModel):
    recommendations: list[ScoredItem]
    favorite_genres: list[str] = Field(default_factory=list)
