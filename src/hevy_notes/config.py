"""Configuration settings for hevy-notes."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .metrics.units import WeightUnit


DEFAULT_FOLDER = "HevyWorkouts"
DEFAULT_API_BASE_URL = "https://api.hevyapp.com/v1"


class Settings(BaseSettings):
    """Settings loaded from HEVY_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HEVY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hevy API
    api_key: str = ""
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 30.0

    # Sync
    default_limit: int = Field(default=10, ge=1)
    weight_unit: WeightUnit = WeightUnit.KG

    # Vault layout
    vault_path: Path = Path(".")
    folder_path: str = DEFAULT_FOLDER

    @field_validator("folder_path")
    @classmethod
    def _strip_folder(cls, value: str) -> str:
        return value.strip().strip("/")

    @property
    def base_folder(self) -> str:
        """Folder holding workout notes; a blank setting falls back to the default."""
        return self.folder_path or DEFAULT_FOLDER

    @property
    def weekly_reports_folder(self) -> str:
        return f"{self.base_folder}/WeeklyReports"

    @property
    def monthly_reports_folder(self) -> str:
        return f"{self.base_folder}/MonthlyReports"

    @property
    def exercise_stats_folder(self) -> str:
        return f"{self.base_folder}/ExerciseStats"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
