from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

from features.charts.models.scene_types import Theme

class Settings(BaseSettings):
    """Application settings."""

    title: str = "Surf Forecast"
    region_name: str = "San Diego"

    # Feed settings. A plain path or file:// URL is read from disk.
    feed_url: str = "http://localhost:5173/surf/today.csv"
    feed_timezone: str = "America/Los_Angeles"

    # Fixed columns shown next to the charts
    display_slots: List[str] = ["6pm", "7pm", "8pm"]

    # Chart settings
    default_theme: Theme = Theme.LIGHT
    chart_width: float = 156
    chart_height: float = 50

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="surf_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
