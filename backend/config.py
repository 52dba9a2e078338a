"""Centralized configuration: all env vars in one place."""

import os
from pathlib import Path

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Draw data
        self.data_dir: Path = Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))

        # Cache sizing and TTLs (seconds)
        self.cache_max_size: int = int(os.getenv("CACHE_MAX_SIZE", "1000"))
        self.cache_default_ttl: int = int(os.getenv("CACHE_DEFAULT_TTL", "300"))
        self.dataset_ttl: int = int(os.getenv("DATASET_TTL", "900"))
        self.draws_ttl: int = int(os.getenv("DRAWS_TTL", "300"))
        self.latest_ttl: int = int(os.getenv("LATEST_TTL", "120"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return a list of configuration problems (empty when all is well)."""
        problems = []
        if not (self.data_dir / "ee-draws.json").is_file():
            problems.append(f"English draw data missing: {self.data_dir / 'ee-draws.json'}")
        if self.cache_max_size < 1:
            problems.append(f"CACHE_MAX_SIZE must be >= 1, got {self.cache_max_size}")
        return problems


settings = Settings()
