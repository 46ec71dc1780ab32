from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


ALLOWED_RATE_PROVIDERS = {"static", "external-http"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, DATA_DIR,
    RATE_PROVIDER, RATES_FEED_URL, RATES_CACHE_TTL_SECONDS).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Wiremit"
    debug: bool = True
    version: str = "0.1.0"

    # Data & persistence
    data_dir: Path = Path("data")
    db_filename: str = "wiremit.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided
    users_record_key: str = "wiremit_users"

    # Exchange rates
    # Allowed: 'static' (fallback quote only), 'external-http' (rates feed)
    rate_provider: str = "static"
    rates_feed_url: str = "http://localhost:8080/rates"
    http_timeout_seconds: float = 5.0
    rates_cache_ttl_seconds: int = 3600

    # Dashboard widgets
    transactions_count: int = 15
    transactions_per_page: int = 5
    transactions_seed: Optional[int] = None  # fixed seed gives a stable history
    ad_rotation_seconds: int = 4

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        if self.rate_provider not in ALLOWED_RATE_PROVIDERS:
            raise ValueError(
                f"Unsupported rate_provider '{self.rate_provider}'. Allowed: {ALLOWED_RATE_PROVIDERS}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
