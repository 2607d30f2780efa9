from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from ..catalog.models import CatalogItem, CatalogItemCreate, ContentKind
from ..catalog.store import CatalogStore
from .config import DEFAULT_IMDB_CONFIG, IMDbConfig

logger = logging.getLogger(__name__)

DEFAULT_GENRE = "Documentary"
DEFAULT_YEAR = 2020
DEFAULT_RATING = 70
DEFAULT_RUNTIME_MINS = 90
DEFAULT_DESCRIPTION = "An engaging documentary exploring important themes and stories."
DEFAULT_IMAGE = (
    "https://images.unsplash.com/photo-1489599363582-b8c104a3e1be"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600"
)
DEFAULT_DIRECTOR = "Unknown Director"

FALLBACK_DOCUMENTARIES: list[CatalogItemCreate] = [
    CatalogItemCreate(
        title="Free Solo",
        type=ContentKind.documentary,
        genre="Sports",
        year=2018,
        rating=82,
        duration="100 min",
        description=(
            "Follow rock climber Alex Honnold as he prepares to achieve his lifelong dream: "
            "climbing the face of the world's most famous rock formation, El Capitan in "
            "Yosemite National Park, without a rope."
        ),
        image="https://images.unsplash.com/photo-1551698618-1dfe5d97d256?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600",
        director="Jimmy Chin, Elizabeth Chai Vasarhelyi",
    ),
    CatalogItemCreate(
        title="Won't You Be My Neighbor?",
        type=ContentKind.documentary,
        genre="Biography",
        year=2018,
        rating=84,
        duration="94 min",
        description=(
            "An exploration of the life, lessons, and legacy of iconic children's "
            "television host Fred Rogers."
        ),
        image="https://images.unsplash.com/photo-1607706189992-eae578626c86?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600",
        director="Morgan Neville",
    ),
]


class MetadataUnavailable(Exception):
    """The documentary metadata source could not be used."""


@dataclass
class DocumentaryLoad:
    content: list[CatalogItem] = field(default_factory=list)
    degraded: bool = False
    message: str | None = None


def fetch_documentaries(config: IMDbConfig = DEFAULT_IMDB_CONFIG) -> list[dict[str, Any]]:
    """
    Query the IMDb advanced search for well-rated documentaries.

    Returns the raw ``results`` records. Raises ``MetadataUnavailable`` when
    the client is disabled or unconfigured, or on any transport, HTTP or API
    error. There is no retry.
    """
    if not config.enabled:
        raise MetadataUnavailable("IMDB client is disabled")
    if not config.api_key:
        raise MetadataUnavailable(
            "IMDB API key not configured. Please add IMDB_API_KEY to environment variables."
        )

    url = f"{config.base_url}/{config.api_key}"
    params = {
        "title_type": "documentary",
        "num_votes": "1000,",
        "sort": "user_rating,desc",
        "count": config.count,
    }
    try:
        response = requests.get(
            url,
            params=params,
            headers={"Accept": "application/json"},
            timeout=config.timeout,
        )
    except requests.RequestException as exc:
        raise MetadataUnavailable(f"IMDB API request failed: {exc}") from exc

    if not response.ok:
        raise MetadataUnavailable(f"IMDB API error: {response.status_code}")

    try:
        payload = response.json()
    except ValueError as exc:
        raise MetadataUnavailable("IMDB API returned invalid JSON") from exc

    if payload.get("errorMessage"):
        raise MetadataUnavailable(payload["errorMessage"])

    return payload.get("results") or []


def _parse_int(value: Any) -> int | None:
    try:
        return int(str(value).strip()[:4])
    except (TypeError, ValueError):
        return None


def _parse_rating(value: Any) -> int | None:
    try:
        rating = int(float(value) * 10 + 0.5)
    except (TypeError, ValueError, OverflowError):
        return None
    return max(0, min(100, rating)) or None


def to_catalog_item(raw: dict[str, Any]) -> CatalogItemCreate:
    """Map one IMDb search record onto the catalog item shape."""
    genres = raw.get("genres")
    genre = DEFAULT_GENRE
    if isinstance(genres, str):
        genre = genres.split(",")[0].strip() or DEFAULT_GENRE

    return CatalogItemCreate(
        title=raw["title"],
        type=ContentKind.documentary,
        genre=genre,
        year=_parse_int(raw.get("year")) or DEFAULT_YEAR,
        rating=_parse_rating(raw.get("imDbRating")) or DEFAULT_RATING,
        duration=f"{raw.get('runtimeMins') or DEFAULT_RUNTIME_MINS} min",
        description=raw.get("plot") or DEFAULT_DESCRIPTION,
        image=raw.get("image") or DEFAULT_IMAGE,
        director=raw.get("directors") or DEFAULT_DIRECTOR,
        imdb_id=raw.get("id"),
    )


def _store_all(store: CatalogStore, entries: list[CatalogItemCreate]) -> list[CatalogItem]:
    return [store.create_item(entry) for entry in entries]


def load_documentaries(
    store: CatalogStore,
    config: IMDbConfig = DEFAULT_IMDB_CONFIG,
) -> DocumentaryLoad:
    """
    Return the store's documentaries, importing them from IMDb on first use.

    When IMDb is unavailable the fallback list is stored instead and the
    result is flagged as degraded. Concurrent first calls import only once.
    """
    with store.import_lock:
        return _import_documentaries(store, config)


def _import_documentaries(store: CatalogStore, config: IMDbConfig) -> DocumentaryLoad:
    existing = store.list_by_type(ContentKind.documentary)
    if existing:
        return DocumentaryLoad(content=existing)

    try:
        records = fetch_documentaries(config)
    except MetadataUnavailable as exc:
        logger.warning("IMDB fetch failed, serving fallback documentaries", exc_info=True)
        return DocumentaryLoad(
            content=_store_all(store, FALLBACK_DOCUMENTARIES),
            degraded=True,
            message=str(exc),
        )

    entries: list[CatalogItemCreate] = []
    for raw in records:
        try:
            entries.append(to_catalog_item(raw))
        except (KeyError, ValueError, TypeError, AttributeError):
            logger.error("Skipping malformed IMDB record %r", raw, exc_info=True)

    return DocumentaryLoad(content=_store_all(store, entries))
