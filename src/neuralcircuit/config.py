from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]

@dataclass(frozen=True)
class GameConfig:
    # Board
    cols: int = 8
    rows: int = 6

    # Viewport sizing (pixels)
    tile_size: int = 80      # base size, rescaled by the viewport
    max_tile_size: int = 100
    min_tile_size: int = 10  # keeps pipe radii positive on tiny windows
    margin_x: int = 40
    margin_y: int = 100

    # Palette
    bg_color: RGB = (8, 8, 8)
    pipe_inactive: RGB = (74, 44, 32)   # dim copper
    pipe_active: RGB = (255, 87, 34)    # glowing orange

    # Presentation timing
    anim_speed: float = 0.2  # rotation lerp factor per frame, 0..1
    win_delay_ms: int = 500

    # Generation
    max_generation_attempts: int = 32

# Global config (can be swapped by launcher)
CONFIG = GameConfig()
