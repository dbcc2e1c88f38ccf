from typing import Optional

from features.forecast.models.rating_categories import PLACEHOLDER

class DisplayFormat:
    """Centralized text formatting for dashboard cells."""

    @staticmethod
    def wave(wave_surf: str, height_ft: Optional[float]) -> str:
        """Show the raw range ("2-3") when it parsed, otherwise a placeholder."""
        if height_ft is None or not wave_surf:
            return PLACEHOLDER
        return wave_surf

    @staticmethod
    def tide(height_ft: Optional[float], trend: str = "") -> str:
        if height_ft is None:
            return PLACEHOLDER
        text = f"{height_ft:.1f}ft"
        return f"{text} {trend}" if trend else text

    @staticmethod
    def swell_period(period_sec: Optional[float]) -> str:
        if period_sec is None:
            return PLACEHOLDER
        return f"{period_sec:g}s"

    @staticmethod
    def temperature(temperature_f: Optional[float]) -> str:
        if temperature_f is None:
            return PLACEHOLDER
        return f"{temperature_f:g}°"

    @staticmethod
    def text(value: Optional[str]) -> str:
        """Feed enums like PARTLY_CLOUDY become "partly cloudy"."""
        if not value:
            return PLACEHOLDER
        return value.replace('_', ' ').lower()
