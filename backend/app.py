from __future__ import annotations

import datetime
import os
from typing import Literal

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from pydantic import BaseModel
from starlette.middleware.sessions import SessionMiddleware

from .auth.dependencies import get_current_user, get_store, require_user
from .auth.users import authenticate, register_user
from .catalog.browse import SortOrder, catalog_facets, filter_catalog, sort_catalog
from .catalog.models import (
    CatalogItem,
    CatalogItemCreate,
    ContentKind,
    FavoritesRequest,
    LoginRequest,
    UserAccount,
    UserCreate,
    UserOut,
)
from .catalog.seed import seed_catalog
from .catalog.store import CatalogStore
from .metadata.config import DEFAULT_IMDB_CONFIG, IMDbConfig
from .metadata.imdb_client import load_documentaries
from .recommendations.engine import genre_ranking, recommend, recommend_by_rating
from .recommendations.models import RecommendationResponse


class DocumentariesResponse(BaseModel):
    content: list[CatalogItem]
    degraded: bool = False
    message: str | None = None


def create_app(
    store: CatalogStore | None = None,
    imdb_config: IMDbConfig = DEFAULT_IMDB_CONFIG,
) -> FastAPI:
    """Build the API around ``store``; a fresh seeded store is created when omitted."""
    if store is None:
        store = CatalogStore()
        seed_catalog(store)

    app = FastAPI(title="Content Catalog API", version="1.0.0")
    app.add_middleware(
        SessionMiddleware,
        secret_key=os.environ.get("SESSION_SECRET", "docustream-secret-change-in-production"),
    )
    app.state.store = store
    app.state.imdb_config = imdb_config

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metadata")
    def metadata(store: CatalogStore = Depends(get_store)) -> dict:
        return catalog_facets(store.all_items())

    # ── Auth endpoints ───────────────────────────────────────────────────

    @app.post("/auth/register", response_model=UserOut, status_code=201)
    def register(
        body: UserCreate,
        request: Request,
        store: CatalogStore = Depends(get_store),
    ) -> UserOut:
        user = register_user(store, body)
        if user is None:
            raise HTTPException(status_code=409, detail="User already exists")
        request.session["user_id"] = user.id
        return UserOut.from_account(user)

    @app.post("/auth/login")
    def login(
        body: LoginRequest,
        request: Request,
        store: CatalogStore = Depends(get_store),
    ) -> dict:
        user = authenticate(store, body.email, body.password)
        if user is None:
            raise HTTPException(status_code=401, detail="Invalid credentials")
        request.session["user_id"] = user.id
        return {"status": "ok", "user": UserOut.from_account(user)}

    @app.post("/auth/logout")
    def logout(request: Request) -> dict:
        request.session.clear()
        return {"status": "logged_out"}

    @app.get("/auth/me", response_model=UserOut)
    def auth_me(user: UserAccount = Depends(require_user)) -> UserOut:
        return UserOut.from_account(user)

    # ── User endpoints ───────────────────────────────────────────────────

    @app.put("/users/{user_id}/favorites", response_model=UserOut)
    def update_favorites(
        user_id: int,
        body: FavoritesRequest,
        user: UserAccount = Depends(require_user),
        store: CatalogStore = Depends(get_store),
    ) -> UserOut:
        if user.id != user_id:
            raise HTTPException(status_code=403, detail="Cannot modify another user's favorites")
        updated = store.set_favorites(user_id, body.favorites)
        if updated is None:
            raise HTTPException(status_code=404, detail="User not found")
        return UserOut.from_account(updated)

    # ── Content endpoints ────────────────────────────────────────────────

    @app.get("/content", response_model=list[CatalogItem])
    def list_content(
        kind: Literal["all", "documentary", "music"] = Query(default="all", alias="type"),
        search: str | None = None,
        genre: str | None = None,
        year: int | None = None,
        min_rating: int | None = Query(default=None, ge=0, le=100),
        sort: SortOrder = SortOrder.title,
        favorites_only: bool = False,
        user: UserAccount | None = Depends(get_current_user),
        store: CatalogStore = Depends(get_store),
    ) -> list[CatalogItem]:
        content_kind = ContentKind(kind) if kind != "all" else None

        if search:
            items = store.search(search)
        elif content_kind:
            items = store.list_by_type(content_kind)
        else:
            items = store.all_items()

        favorite_ids = None
        if favorites_only:
            if user is None:
                raise HTTPException(status_code=401, detail="Not authenticated")
            favorite_ids = user.favorites

        items = filter_catalog(
            items,
            kind=content_kind,
            genre=genre,
            year=year,
            min_rating=min_rating,
            favorite_ids=favorite_ids,
        )
        return sort_catalog(items, sort)

    @app.get("/content/{item_id}", response_model=CatalogItem)
    def get_content(item_id: int, store: CatalogStore = Depends(get_store)) -> CatalogItem:
        item = store.get_item(item_id)
        if item is None:
            raise HTTPException(status_code=404, detail="Content not found")
        return item

    @app.post("/content", response_model=CatalogItem, status_code=201)
    def create_content(
        body: CatalogItemCreate,
        user: UserAccount = Depends(require_user),
        store: CatalogStore = Depends(get_store),
    ) -> CatalogItem:
        return store.create_item(body)

    @app.get("/documentaries", response_model=DocumentariesResponse)
    def documentaries(
        request: Request,
        store: CatalogStore = Depends(get_store),
    ) -> DocumentariesResponse:
        result = load_documentaries(store, request.app.state.imdb_config)
        return DocumentariesResponse(
            content=result.content,
            degraded=result.degraded,
            message=result.message,
        )

    # ── Recommendation endpoints ─────────────────────────────────────────

    def _load_user(user_id: int, store: CatalogStore) -> UserAccount:
        user = store.get_user(user_id)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        return user

    @app.get("/recommendations/{user_id}", response_model=list[CatalogItem])
    def recommendations(
        user_id: int, store: CatalogStore = Depends(get_store)
    ) -> list[CatalogItem]:
        user = _load_user(user_id, store)
        return recommend_by_rating(store.all_items(), user.favorites)

    @app.get("/recommendations/{user_id}/personalized", response_model=RecommendationResponse)
    def personalized_recommendations(
        user_id: int, store: CatalogStore = Depends(get_store)
    ) -> RecommendationResponse:
        user = _load_user(user_id, store)
        favorites = store.favorite_items(user)
        return RecommendationResponse(
            recommendations=recommend(
                store.all_items(),
                favorites,
                current_year=datetime.date.today().year,
            ),
            favorite_genres=genre_ranking(favorites),
        )

    return app


app = create_app()
