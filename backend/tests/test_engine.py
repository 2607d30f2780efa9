from __future__ import annotations

from backend.catalog.models import CatalogItem, ContentKind
from backend.recommendations.engine import (
    MAX_RECOMMENDATIONS,
    genre_ranking,
    recommend,
    recommend_by_rating,
    score_item,
)

YEAR = 2025


def _item(item_id: int, genre: str, rating: int = 50, year: int = 2000) -> CatalogItem:
    return CatalogItem(
        id=item_id,
        title=f"Item {item_id}",
        type=ContentKind.documentary,
        genre=genre,
        year=year,
        rating=rating,
        duration="90 min",
        description="",
        image="",
    )


# ── Genre ranking ────────────────────────────────────────────────────────


def test_genre_ranking_orders_by_count():
    favorites = [_item(1, "Jazz"), _item(2, "History"), _item(3, "History")]
    assert genre_ranking(favorites) == ["History", "Jazz"]


def test_genre_ranking_ties_keep_first_seen_order():
    favorites = [_item(1, "Nature"), _item(2, "Jazz"), _item(3, "Crime")]
    assert genre_ranking(favorites) == ["Nature", "Jazz", "Crime"]


def test_genre_ranking_empty():
    assert genre_ranking([]) == []


# ── Scoring ──────────────────────────────────────────────────────────────


class TestScoreItem:
    def test_genre_bonus_depends_on_rank(self):
        ranked = ["History", "Jazz", "Crime"]
        assert score_item(_item(1, "History"), ranked, YEAR) == 30
        assert score_item(_item(1, "Jazz"), ranked, YEAR) == 20
        assert score_item(_item(1, "Crime"), ranked, YEAR) == 10
        assert score_item(_item(1, "Art"), ranked, YEAR) == 0

    def test_rating_tiers_are_exclusive(self):
        assert score_item(_item(1, "Art", rating=80), [], YEAR) == 15
        assert score_item(_item(1, "Art", rating=79), [], YEAR) == 10
        assert score_item(_item(1, "Art", rating=70), [], YEAR) == 10
        assert score_item(_item(1, "Art", rating=69), [], YEAR) == 0

    def test_recency_window(self):
        assert score_item(_item(1, "Art", year=YEAR - 2), [], YEAR) == 5
        assert score_item(_item(1, "Art", year=YEAR - 3), [], YEAR) == 0

    def test_bonuses_add_up(self):
        item = _item(1, "Jazz", rating=90, year=YEAR)
        assert score_item(item, ["Jazz"], YEAR) == 10 + 15 + 5


# ── recommend ────────────────────────────────────────────────────────────


def test_recommend_empty_favorites_returns_empty():
    catalog = [_item(1, "Jazz", rating=95, year=YEAR)]
    assert recommend(catalog, [], YEAR) == []


def test_recommend_worked_example():
    favorite = _item(1, "Jazz")
    jazz = _item(2, "Jazz", rating=60, year=YEAR)
    history = _item(3, "History", rating=95, year=YEAR)

    result = recommend([favorite, jazz, history], [favorite], YEAR)

    assert [(r.item.id, r.score) for r in result] == [(3, 20), (2, 15)]


def test_recommend_excludes_favorites_and_zero_scores():
    favorites = [_item(1, "Jazz", rating=95, year=YEAR)]
    catalog = favorites + [_item(2, "Art", rating=40, year=1990), _item(3, "Jazz")]

    result = recommend(catalog, favorites, YEAR)

    assert [r.item.id for r in result] == [3]
    assert all(r.score > 0 for r in result)


def test_recommend_ties_keep_catalog_order():
    favorites = [_item(1, "Jazz")]
    catalog = [_item(i, "Art", rating=85) for i in range(2, 7)]

    result = recommend(catalog, favorites, YEAR)

    assert [r.item.id for r in result] == [2, 3, 4, 5, 6]
    assert {r.score for r in result} == {15}


def test_recommend_sorted_descending_and_truncated():
    favorites = [_item(1, "Jazz"), _item(2, "Jazz"), _item(3, "History")]
    catalog = favorites + [
        _item(10 + i, genre, rating=rating, year=year)
        for i, (genre, rating, year) in enumerate(
            [
                ("Art", 75, 2000),
                ("Jazz", 50, 2000),
                ("History", 90, YEAR),
                ("Jazz", 90, YEAR),
                ("Art", 85, YEAR),
                ("History", 40, 1980),
                ("Nature", 72, YEAR - 1),
                ("Jazz", 71, 2001),
                ("Crime", 81, 1999),
                ("Art", 10, 1970),
                ("History", 70, YEAR),
            ]
        )
    ]

    result = recommend(catalog, favorites, YEAR)
    scores = [r.score for r in result]

    assert len(result) == MAX_RECOMMENDATIONS
    assert scores == sorted(scores, reverse=True)
    assert result[0].item.genre == "Jazz" and result[0].score == 20 + 15 + 5
    assert not {r.item.id for r in result} & {1, 2, 3}


def test_recommend_genre_ranking_ignores_catalog_contents():
    favorites = [_item(1, "Jazz")]
    catalog_a = [_item(2, "Jazz")]
    catalog_b = [_item(2, "Jazz"), _item(3, "History"), _item(4, "History")]

    score_a = recommend(catalog_a, favorites, YEAR)[0].score
    score_b = next(r for r in recommend(catalog_b, favorites, YEAR) if r.item.id == 2).score

    assert score_a == score_b == 10


def test_recommend_does_not_mutate_inputs():
    favorites = [_item(1, "Jazz")]
    catalog = [_item(3, "Jazz", rating=60), _item(2, "Jazz", rating=90)]
    snapshot = list(catalog)

    recommend(catalog, favorites, YEAR)

    assert catalog == snapshot


# ── recommend_by_rating ──────────────────────────────────────────────────


def test_recommend_by_rating_no_favorites():
    catalog = [_item(1, "Jazz", rating=95)]
    assert recommend_by_rating(catalog, []) == []
    assert recommend_by_rating(catalog, [404]) == []


def test_recommend_by_rating_orders_by_rating_only():
    catalog = [
        _item(1, "Jazz"),
        _item(2, "Jazz", rating=60, year=YEAR),
        _item(3, "History", rating=95),
        _item(4, "Art", rating=79),
        _item(5, "Jazz", rating=88),
    ]

    result = recommend_by_rating(catalog, [1])

    assert [item.id for item in result] == [3, 5, 2]


def test_recommend_by_rating_limit():
    catalog = [_item(1, "Jazz")] + [_item(i, "Jazz", rating=i) for i in range(2, 20)]
    result = recommend_by_rating(catalog, [1])
    assert len(result) == MAX_RECOMMENDATIONS
    assert result[0].id == 19


def test_variants_order_differently():
    favorite = _item(1, "Jazz")
    jazz = _item(2, "Jazz", rating=60, year=YEAR)
    classical = _item(3, "Classical", rating=81, year=1990)
    catalog = [favorite, jazz, classical]

    scored = [r.item.id for r in recommend(catalog, [favorite], YEAR)]
    by_rating = [item.id for item in recommend_by_rating(catalog, [1])]

    assert scored == [2, 3]
    assert by_rating == [3, 2]
