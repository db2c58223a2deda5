"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Third-party API keys (all optional; features degrade to sample data)
        self.congress_api_key: str | None = os.getenv("CONGRESS_API_KEY")
        self.fec_api_key: str | None = os.getenv("FEC_API_KEY")
        self.google_civic_api_key: str | None = os.getenv("GOOGLE_CIVIC_API_KEY")

        self.cache_ttl_seconds: int = int(os.getenv("CACHE_TTL_SECONDS", "3600"))
        self.http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

        # Fallback state for ZIP prefixes missing from the lookup table
        self.default_state: str = os.getenv("DEFAULT_STATE", "CA").upper()
        self.congress_number: int = int(os.getenv("CONGRESS_NUMBER", "118"))
        self.fec_cycle: int = int(os.getenv("FEC_CYCLE", "2024"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing env vars for the optional data sources."""
        optional = ["CONGRESS_API_KEY", "FEC_API_KEY", "GOOGLE_CIVIC_API_KEY"]
        return [var for var in optional if not getattr(self, _attr_for(var))]

    def api_status(self) -> dict[str, str]:
        """Configured/not-configured flag per external API."""
        return {
            "congress": "Configured" if self.congress_api_key else "Not configured",
            "fec": "Configured" if self.fec_api_key else "Not configured",
            "google_civic": "Configured" if self.google_civic_api_key else "Not configured",
        }


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "CONGRESS_API_KEY": "congress_api_key",
        "FEC_API_KEY": "fec_api_key",
        "GOOGLE_CIVIC_API_KEY": "google_civic_api_key",
    }
    return mapping.get(env_var, env_var.lower())
