from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class IMDbConfig:
    api_key: str = os.getenv("IMDB_API_KEY") or os.getenv("VITE_IMDB_API_KEY", "")
    base_url: str = "https://imdb-api.com/en/API/AdvancedSearch"
    timeout: float = 10.0
    count: int = 20
    enabled: bool = True


DEFAULT_IMDB_CONFIG = IMDbConfig()
