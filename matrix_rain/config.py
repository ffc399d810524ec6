# matrix_rain/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SPEED = 5
DEFAULT_DENSITY = 80

SPEED_MIN, SPEED_MAX = 1, 10
DENSITY_MIN, DENSITY_MAX = 1, 100

# Rainbow gradient: sine frequency per row and number of entries before it repeats
RAINBOW_FREQ = 0.1
RAINBOW_CYCLE = 63

MIN_TERM_WIDTH = 20
MIN_TERM_HEIGHT = 10
FALLBACK_WIDTH = 80
FALLBACK_HEIGHT = 24

ENV_SEED = "MATRIX_RAIN_SEED"
ENV_DURATION = "MATRIX_RAIN_DURATION"


class ConfigError(ValueError):
    """Raised when animation settings are out of range."""


@dataclass(frozen=True)
class RainConfig:
    speed: int = DEFAULT_SPEED
    density: int = DEFAULT_DENSITY
    seed: Optional[int] = None
    duration: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.speed, int) or not SPEED_MIN <= self.speed <= SPEED_MAX:
            raise ConfigError(
                f"speed must be an integer between {SPEED_MIN} and {SPEED_MAX}"
            )
        if not isinstance(self.density, int) or not DENSITY_MIN <= self.density <= DENSITY_MAX:
            raise ConfigError(
                f"density must be an integer between {DENSITY_MIN} and {DENSITY_MAX}"
            )
        if self.duration is not None and self.duration <= 0:
            raise ConfigError("duration must be a positive number of seconds")
