"""Terminal digital rain with a cycling rainbow gradient."""
from .config import RainConfig
from .ui.renderer import RainRenderer, play

__all__ = ["RainConfig", "RainRenderer", "play"]
