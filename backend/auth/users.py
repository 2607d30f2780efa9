from __future__ import annotations

import logging

import bcrypt

from ..catalog.models import UserAccount, UserCreate
from ..catalog.store import CatalogStore

logger = logging.getLogger(__name__)


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def register_user(store: CatalogStore, data: UserCreate) -> UserAccount | None:
    """Create an account with a hashed password. ``None`` if email or username is taken."""
    user = store.create_user(
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
    )
    if user is not None:
        logger.info("Registered user %d (%s)", user.id, user.username)
    return user


def authenticate(store: CatalogStore, email: str, password: str) -> UserAccount | None:
    """Verify credentials. Returns the account or ``None``."""
    user = store.get_user_by_email(email)
    if user is not None and verify_password(password, user.password_hash):
        return user
    return None
