from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from ..catalog.models import UserAccount
from ..catalog.store import CatalogStore


def get_store(request: Request) -> CatalogStore:
    """Return the store owned by the running app."""
    return request.app.state.store


def get_current_user(
    request: Request, store: CatalogStore = Depends(get_store)
) -> UserAccount | None:
    """Return the logged-in account from the session, or ``None``."""
    user_id = request.session.get("user_id")
    if user_id is None:
        return None
    return store.get_user(user_id)


def require_user(user: UserAccount | None = Depends(get_current_user)) -> UserAccount:
    """Raise 401 if no user is logged in."""
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user
