from __future__ import annotations

import logging

from .models import CatalogItemCreate, ContentKind
from .store import CatalogStore

logger = logging.getLogger(__name__)

MUSIC_CATALOG: list[CatalogItemCreate] = [
    CatalogItemCreate(
        title="Beethoven's Symphony Collection",
        type=ContentKind.music,
        genre="Classical",
        year=2021,
        rating=92,
        duration="180 min",
        description="Complete collection of Beethoven's symphonies performed by the Vienna Philharmonic Orchestra.",
        image="https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600",
        artist="Ludwig van Beethoven",
    ),
    CatalogItemCreate(
        title="Jazz at Lincoln Center",
        type=ContentKind.music,
        genre="Jazz",
        year=2022,
        rating=87,
        duration="120 min",
        description="Live jazz performances featuring contemporary artists and classic compositions.",
        image="https://images.unsplash.com/photo-1511192336575-5a79af67a629?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600",
        artist="Various Artists",
    ),
    CatalogItemCreate(
        title="Miles Davis: Kind of Blue Sessions",
        type=ContentKind.music,
        genre="Jazz",
        year=2020,
        rating=95,
        duration="75 min",
        description="Rare recordings and outtakes from the legendary Kind of Blue sessions.",
        image="https://images.unsplash.com/photo-1516280440614-37939bbacd81?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600",
        artist="Miles Davis",
    ),
    CatalogItemCreate(
        title="World Music Anthology",
        type=ContentKind.music,
        genre="World",
        year=2023,
        rating=83,
        duration="240 min",
        description="A journey through traditional and contemporary music from around the globe.",
        image="https://images.unsplash.com/photo-1471478331149-c72f17e33c73?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=600",
        artist="Various Artists",
    ),
]


def seed_catalog(store: CatalogStore) -> None:
    """Load the built-in music catalog into ``store``."""
    for entry in MUSIC_CATALOG:
        store.create_item(entry)
    logger.info("Seeded catalog with %d music items", len(MUSIC_CATALOG))
