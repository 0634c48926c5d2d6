"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Absolute expiration for cached reads, 30 minutes by default
        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "1800"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return a list of configuration problems (empty when all is well)."""
        problems = []
        if self.cache_ttl_seconds <= 0:
            problems.append(f"CACHE_TTL_SECONDS must be positive, got {self.cache_ttl_seconds:g}")
        return problems


settings = Settings()
