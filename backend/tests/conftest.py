from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from backend.catalog.seed import seed_catalog
from backend.catalog.store import CatalogStore
from backend.metadata.config import IMDbConfig


@pytest.fixture
def store() -> CatalogStore:
    s = CatalogStore()
    seed_catalog(s)
    return s


@pytest.fixture
def client(store: CatalogStore) -> TestClient:
    app = create_app(store=store, imdb_config=IMDbConfig(api_key=""))
    return TestClient(app)
