"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    # Database directory (biomarker.db, fitness.db)
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

    @property
    def biomarker_db_path(self) -> str:
        return os.path.join(self.data_path, "biomarker.db")

    @property
    def fitness_db_path(self) -> str:
        return os.path.join(self.data_path, "fitness.db")

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8082

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Metrics
    activity_window_days: int = Field(default=30, ge=1)
    goal_limit: int = Field(default=7, ge=0)
    top_marker_limit: int = Field(default=5, ge=0)

    # Patient profile
    patient_age: Optional[float] = Field(default=None, ge=0)
    patient_sex: Optional[Literal["male", "female"]] = None


@lru_cache
def get_settings() -> Settings:
    return Settings()
