"""
Configuration loaded from environment variables
Values may also come from a local .env file
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
from typing import Optional


# Find .env file - could be in current dir, parent (project root), or set via env
def _find_env_file() -> str:
    """Find .env file in current or parent directory"""
    if Path(".env").exists():
        return ".env"
    parent_env = Path(__file__).parent.parent / ".env"
    if parent_env.exists():
        return str(parent_env)
    return ".env"


class Settings(BaseSettings):
    """Search settings from environment"""

    # Key material
    ENTROPY_BITS: int = 256
    SEED_PASSPHRASE: str = ""
    MNEMONIC_LANGUAGE: str = "english"

    # Concurrency policy
    SINGLE_SIDED_WORKERS: int = 4
    COMBINED_WORKERS: int = 32
    MAX_WORKERS: int = 256

    # Bounds (0 disables)
    SEARCH_TIMEOUT_SECONDS: float = 600.0
    MAX_ITERATIONS: int = 0

    # Application
    LOG_LEVEL: str = "INFO"

    @property
    def search_timeout(self) -> Optional[float]:
        if self.SEARCH_TIMEOUT_SECONDS <= 0:
            return None
        return self.SEARCH_TIMEOUT_SECONDS

    @property
    def iteration_cap(self) -> Optional[int]:
        if self.MAX_ITERATIONS <= 0:
            return None
        return self.MAX_ITERATIONS

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


ALLOWED_ENTROPY_BITS = (128, 160, 192, 224, 256)
ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_search_settings(active_settings: Settings) -> None:
    """Validate search settings before any worker is started."""
    errors = []

    if active_settings.ENTROPY_BITS not in ALLOWED_ENTROPY_BITS:
        allowed = ", ".join(str(bits) for bits in ALLOWED_ENTROPY_BITS)
        errors.append(f"ENTROPY_BITS must be one of: {allowed}")

    for field_name in ("SINGLE_SIDED_WORKERS", "COMBINED_WORKERS", "MAX_WORKERS"):
        if getattr(active_settings, field_name) < 1:
            errors.append(f"{field_name} must be >= 1")

    if active_settings.MAX_WORKERS < max(
        active_settings.SINGLE_SIDED_WORKERS, active_settings.COMBINED_WORKERS
    ):
        errors.append("MAX_WORKERS must be >= SINGLE_SIDED_WORKERS and COMBINED_WORKERS")

    if active_settings.SEARCH_TIMEOUT_SECONDS < 0:
        errors.append("SEARCH_TIMEOUT_SECONDS must be >= 0 (0 disables the deadline)")

    if active_settings.MAX_ITERATIONS < 0:
        errors.append("MAX_ITERATIONS must be >= 0 (0 disables the cap)")

    if active_settings.search_timeout is None and active_settings.iteration_cap is None:
        errors.append("At least one of SEARCH_TIMEOUT_SECONDS or MAX_ITERATIONS must bound the search")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if errors:
        raise ValueError("Invalid search configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()
