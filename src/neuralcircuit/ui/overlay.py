from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..config import CONFIG, GameConfig

@dataclass
class WinOverlay:
    """
    Shows the "circuit complete" panel a short delay after the win callback.
    Times are in milliseconds from whatever clock the caller uses.
    """
    delay_ms: int = CONFIG.win_delay_ms
    armed_at: Optional[int] = None

    def arm(self, now_ms: int) -> None:
        # Only the first win of a level counts.
        if self.armed_at is None:
            self.armed_at = now_ms

    def reset(self) -> None:
        self.armed_at = None

    def visible(self, now_ms: int) -> bool:
        return self.armed_at is not None and now_ms - self.armed_at >= self.delay_ms

def button_rect(screen_w: int, screen_h: int, w: int = 180, h: int = 44) -> Tuple[int, int, int, int]:
    """Restart button box (x, y, w, h), centered a little below mid-screen."""
    return ((screen_w - w) // 2, screen_h // 2 + 20, w, h)

def hit(rect: Tuple[int, int, int, int], x: int, y: int) -> bool:
    rx, ry, rw, rh = rect
    return rx <= x < rx + rw and ry <= y < ry + rh

def draw_win_overlay(
    screen,
    get_font: Callable[[int], "pygame.font.Font"],
    config: GameConfig = CONFIG,
) -> Tuple[int, int, int, int]:
    """
    Dim the board and draw the banner plus restart button.
    Returns the button rect so the caller can hit-test clicks.
    """
    import pygame  # local import to avoid hard dep when not used
    w, h = screen.get_size()
    shade = pygame.Surface((w, h), pygame.SRCALPHA)
    shade.fill((0, 0, 0, 190))
    screen.blit(shade, (0, 0))

    title = get_font(max(18, w // 16)).render("CIRCUIT COMPLETE", True, config.pipe_active)
    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 30)))

    rect = button_rect(w, h)
    pygame.draw.rect(screen, config.pipe_active, pygame.Rect(*rect), border_radius=6)
    label = get_font(20).render("RESTART", True, (0, 0, 0))
    screen.blit(label, label.get_rect(center=(rect[0] + rect[2] // 2, rect[1] + rect[3] // 2)))
    return rect
