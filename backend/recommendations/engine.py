from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from ..catalog.models import CatalogItem
from .models import ScoredItem

MAX_RECOMMENDATIONS = 8

GENRE_WEIGHT = 10
HIGH_RATING = 80
HIGH_RATING_BONUS = 15
GOOD_RATING = 70
GOOD_RATING_BONUS = 10
RECENT_YEARS = 2
RECENCY_BONUS = 5


def genre_ranking(favorite_items: Iterable[CatalogItem]) -> list[str]:
    """
    Rank the genres of ``favorite_items`` by how often they occur.

    Genres with equal counts keep the order in which they were first seen.
    """
    counts = Counter(item.genre for item in favorite_items)
    # Counter keeps first-seen order and sorted() is stable
    return sorted(counts, key=lambda genre: counts[genre], reverse=True)


def score_item(item: CatalogItem, ranked_genres: Sequence[str], current_year: int) -> int:
    """Genre affinity + rating tier + recency bonus for a single candidate."""
    score = 0

    if item.genre in ranked_genres:
        position = ranked_genres.index(item.genre)
        score += (len(ranked_genres) - position) * GENRE_WEIGHT

    if item.rating >= HIGH_RATING:
        score += HIGH_RATING_BONUS
    elif item.rating >= GOOD_RATING:
        score += GOOD_RATING_BONUS

    if item.year >= current_year - RECENT_YEARS:
        score += RECENCY_BONUS

    return score


def recommend(
    all_items: Sequence[CatalogItem],
    favorite_items: Sequence[CatalogItem],
    current_year: int,
    limit: int = MAX_RECOMMENDATIONS,
) -> list[ScoredItem]:
    """
    Rank unfavorited catalog items by predicted relevance.

    Only items with a positive score are returned, highest first; equal
    scores keep their ``all_items`` order. ``current_year`` drives the
    recency bonus and is passed in rather than read from the clock.
    """
    if not favorite_items:
        return []

    ranked_genres = genre_ranking(favorite_items)
    favorite_ids = {item.id for item in favorite_items}

    scored: list[ScoredItem] = []
    for item in all_items:
        if item.id in favorite_ids:
            continue
        score = score_item(item, ranked_genres, current_year)
        if score > 0:
            scored.append(ScoredItem(item=item, score=score))

    scored.sort(key=lambda s: s.score, reverse=True)
    return scored[:limit]


def recommend_by_rating(
    all_items: Sequence[CatalogItem],
    favorite_ids: Iterable[int],
    limit: int = MAX_RECOMMENDATIONS,
) -> list[CatalogItem]:
    """
    Simpler variant used when only the user's favorite ids are at hand.

    Keeps unfavorited items that share a favorite genre or are rated
    ``HIGH_RATING`` or better, ordered by rating alone. This ordering
    intentionally differs from :func:`recommend`.
    """
    wanted = set(favorite_ids)
    favorites = [item for item in all_items if item.id in wanted]
    if not favorites:
        return []

    favorite_genres = {item.genre for item in favorites}
    candidates = [
        item
        for item in all_items
        if item.id not in wanted
        and (item.genre in favorite_genres or item.rating >= HIGH_RATING)
    ]
    candidates.sort(key=lambda item: item.rating, reverse=True)
    return candidates[:limit]
