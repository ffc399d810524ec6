# matrix_rain/ui/theme.py
from __future__ import annotations

from typing import Tuple

RGB = Tuple[int, int, int]

CSI = "\x1b["

# Half-width katakana from the film's rain, repeated "ﾘ" included.
MATRIX_CHARS = (
    "ｱｲｳｴｵｶｷｸｹｺ"
    "ｻｼｽｾｿﾀﾁﾂﾃﾄ"
    "ﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎ"
    "ﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘ"
    "ﾘﾜﾞﾟ"
)

# SGR intensity codes
BOLD = 1
DIM = 2

RESET = f"{CSI}0m"
WHITE: RGB = (255, 255, 255)


def move_to(row: int, col: int) -> str:
    """Cursor position sequence; both coordinates are 1-based."""
    return f"{CSI}{row};{col}H"


def truecolor(rgb: RGB, intensity: int) -> str:
    """24-bit foreground colour combined with bold or dim intensity."""
    r, g, b = rgb
    return f"{CSI}{intensity};38;2;{r};{g};{b}m"
