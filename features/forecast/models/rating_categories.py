import re
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel

UNKNOWN_RATING_COLOR = "#9ca3af"
PLACEHOLDER = "—"

class RatingKey(Enum):
    POOR = ("#D14D41", "poor")
    POOR_TO_FAIR = ("#DA702C", "poor-to-fair")
    FAIR = ("#3AA99F", "fair")
    FAIR_TO_GOOD = ("#3AA99F", "fair-to-good")
    GOOD = ("#CE5D97", "good")
    GREAT = ("#CE5D97", "great")

    def __init__(self, color: str, label: str):
        self.color = color
        self.label = label

    @classmethod
    def from_text(cls, text: Optional[str]) -> Optional['RatingKey']:
        """Match free-text ratings like "good", "Poor to fair" or "FAIR-TO-GOOD"."""
        if not text:
            return None
        key = str(text).strip().upper()
        if key in cls.__members__:
            return cls[key]
        cleaned = re.sub(r"[\s-]+", "_", key)
        if cleaned in cls.__members__:
            return cls[cleaned]
        return None

class RatingDisplay(BaseModel):
    """Color and label shown for a rating."""
    key: Optional[str] = None
    color: str
    label: str

def normalize_rating_key(text: Optional[str]) -> Optional[RatingKey]:
    return RatingKey.from_text(text)

def classify_rating(rating: Union[RatingKey, str, None]) -> RatingDisplay:
    """Map a rating to its display color and label. Unknown ratings render gray."""
    key = rating if isinstance(rating, RatingKey) else RatingKey.from_text(rating)
    if key is None:
        return RatingDisplay(color=UNKNOWN_RATING_COLOR, label=PLACEHOLDER)
    return RatingDisplay(key=key.name, color=key.color, label=key.label)
