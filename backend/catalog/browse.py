from __future__ import annotations

from enum import Enum
from typing import Iterable

from .models import CatalogItem, ContentKind


class SortOrder(str, Enum):
    title = "title"
    year = "year"
    rating = "rating"


def filter_catalog(
    items: Iterable[CatalogItem],
    kind: ContentKind | None = None,
    genre: str | None = None,
    year: int | None = None,
    min_rating: int | None = None,
    favorite_ids: Iterable[int] | None = None,
) -> list[CatalogItem]:
    """Apply the browse filters. Every filter is optional and they combine with AND."""
    favorites = set(favorite_ids) if favorite_ids is not None else None

    result: list[CatalogItem] = []
    for item in items:
        if favorites is not None and item.id not in favorites:
            continue
        if kind is not None and item.type != kind:
            continue
        if genre and item.genre != genre:
            continue
        if year is not None and item.year != year:
            continue
        if min_rating is not None and item.rating < min_rating:
            continue
        result.append(item)
    return result


def sort_catalog(items: Iterable[CatalogItem], order: SortOrder = SortOrder.title) -> list[CatalogItem]:
    # Title ascending; year and rating newest / highest first
    if order == SortOrder.year:
        return sorted(items, key=lambda item: item.year, reverse=True)
    if order == SortOrder.rating:
        return sorted(items, key=lambda item: item.rating, reverse=True)
    return sorted(items, key=lambda item: item.title.lower())


def catalog_facets(items: Iterable[CatalogItem]) -> dict:
    items = list(items)
    return {
        "types": sorted({item.type.value for item in items}),
        "genres": sorted({item.genre for item in items}),
        "years": sorted({item.year for item in items}, reverse=True),
    }
