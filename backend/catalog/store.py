from __future__ import annotations

import logging
import threading

from .models import CatalogItem, CatalogItemCreate, ContentKind, UserAccount

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    In-memory holder of catalog items and user accounts.

    Lookups return ``None`` for unknown ids instead of raising, so callers
    decide how to surface "not found". Ids come from per-entity counters
    starting at 1 and are never reused.
    """

    def __init__(self) -> None:
        self._items: dict[int, CatalogItem] = {}
        self._users: dict[int, UserAccount] = {}
        self._next_item_id = 1
        self._next_user_id = 1
        self._lock = threading.Lock()
        # Held by importers so a check-then-import runs once
        self.import_lock = threading.Lock()

    # ── Catalog items ────────────────────────────────────────────────────

    def create_item(self, data: CatalogItemCreate) -> CatalogItem:
        with self._lock:
            item = CatalogItem(id=self._next_item_id, **data.model_dump())
            self._items[item.id] = item
            self._next_item_id += 1
        return item

    def get_item(self, item_id: int) -> CatalogItem | None:
        return self._items.get(item_id)

    def all_items(self) -> list[CatalogItem]:
        with self._lock:
            return list(self._items.values())

    def list_by_type(self, kind: ContentKind | str) -> list[CatalogItem]:
        kind = ContentKind(kind)
        return [item for item in self.all_items() if item.type == kind]

    def search(self, query: str) -> list[CatalogItem]:
        """Case-insensitive substring match on title, description and genre."""
        needle = query.lower()
        return [
            item
            for item in self.all_items()
            if needle in item.title.lower()
            or needle in item.description.lower()
            or needle in item.genre.lower()
        ]

    # ── Users ────────────────────────────────────────────────────────────

    def create_user(
        self, username: str, email: str, password_hash: str
    ) -> UserAccount | None:
        """Insert a new account, or return ``None`` if the email or username is taken."""
        with self._lock:
            for existing in self._users.values():
                if existing.email == email or existing.username == username:
                    logger.info("Rejected duplicate registration for %s", email)
                    return None
            user = UserAccount(
                id=self._next_user_id,
                username=username,
                email=email,
                password_hash=password_hash,
                favorites=[],
            )
            self._users[user.id] = user
            self._next_user_id += 1
        return user

    def get_user(self, user_id: int) -> UserAccount | None:
        return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> UserAccount | None:
        with self._lock:
            users = list(self._users.values())
        for user in users:
            if user.email == email:
                return user
        return None

    def set_favorites(self, user_id: int, item_ids: list[int]) -> UserAccount | None:
        """Replace a user's favorites wholesale. Ids are not checked against the catalog."""
        favorites = list(dict.fromkeys(item_ids))
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.favorites = favorites
        return user

    def favorite_items(self, user: UserAccount) -> list[CatalogItem]:
        """Favorites that still resolve to stored items, in catalog order."""
        wanted = set(user.favorites)
        return [item for item in self.all_items() if item.id in wanted]
