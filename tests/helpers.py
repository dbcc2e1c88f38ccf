from features.forecast.models.forecast_types import NormalizedObservation


class StaticFeedClient:
    """Feed client stand-in that returns fixed CSV text."""

    def __init__(self, text: str):
        self.text = text
        self.calls = 0

    async def fetch(self) -> str:
        self.calls += 1
        return self.text


def make_observation(spot="Blacks", timestamp="6pm", hour=18.0, wave=3.0, tide=2.0, index=0, **kwargs):
    return NormalizedObservation(
        spot=spot,
        timestamp=timestamp,
        hour_of_day=hour,
        wave_surf=f"{wave}" if wave is not None else "",
        wave_height_ft=wave,
        tide_height_ft=tide,
        feed_index=index,
        **kwargs,
    )
