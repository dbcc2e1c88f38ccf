from typing import Dict, Sequence, Tuple

class BandScale:
    """Evenly spaced bands over a range, with the same inner and outer padding."""

    def __init__(self, domain: Sequence[str], width: float, padding: float = 0.0):
        keys = list(dict.fromkeys(domain))
        n = len(keys)
        self.step = width / max(1, n + padding) if n else 0.0
        self.bandwidth = self.step * (1 - padding)
        start = (width - self.step * (n - padding)) / 2 if n else 0.0
        self._positions: Dict[str, float] = {}
        for i, key in enumerate(keys):
            self._positions[key] = start + self.step * i

    def __call__(self, key: str) -> float:
        return self._positions[key]

class PointScale:
    """Points spread over a range with outer padding in step units."""

    def __init__(self, domain: Sequence[str], width: float, padding: float = 0.0):
        keys = list(dict.fromkeys(domain))
        n = len(keys)
        self.step = width / max(1, n - 1 + 2 * padding) if n else 0.0
        start = (width - self.step * (n - 1)) / 2 if n else 0.0
        self._positions: Dict[str, float] = {}
        for i, key in enumerate(keys):
            self._positions[key] = start + self.step * i

    def __call__(self, key: str) -> float:
        return self._positions[key]

class LinearScale:
    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.d0, self.d1 = domain
        self.r0, self.r1 = range_

    def __call__(self, value: float) -> float:
        if self.d1 == self.d0:
            return (self.r0 + self.r1) / 2
        return self.r0 + (value - self.d0) / (self.d1 - self.d0) * (self.r1 - self.r0)
