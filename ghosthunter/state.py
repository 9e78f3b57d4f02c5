"""Game rules: ghost position, animation frame, levels and hit detection."""

import random
from dataclasses import dataclass, field

FRAME_SIZE = 42
SHEET_HEIGHT = 341
STEP_INTERVAL = 0.15
MAX_LEVEL = 20
BASE_SPEED = 10.0
SPEED_PER_LEVEL = 10.0
KILLS_PER_LEVEL = 10
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

TEXTURE_LEVEL1 = "addons/ghost.png"
TEXTURE_LEVEL2 = "addons/fantasmabluelvl2.png"
TEXTURE_LEVEL3 = "addons/fantasmanegrolvl3.png"


def texture_for_level(level: int) -> str:
    """Return the ghost texture path used at ``level``."""
    if level <= 10:
        return TEXTURE_LEVEL1
    if level <= 20:
        return TEXTURE_LEVEL2
    return TEXTURE_LEVEL3


@dataclass
class Position:
    """Ghost position and the number of ghosts killed."""

    x: int = 0
    y: int = 0
    count: int = 0


@dataclass
class FrameRect:
    """The animation frame cut out of the ghost sprite sheet."""

    left: int = 0
    top: int = 0
    width: int = FRAME_SIZE
    height: int = FRAME_SIZE

    def advance(self) -> None:
        """Move to the next frame, wrapping at the bottom of the sheet."""
        self.top += FRAME_SIZE
        if self.top >= SHEET_HEIGHT - FRAME_SIZE:
            self.top = 0


@dataclass
class GameState:
    """Everything the game logic needs, independent of any rendering."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    pos: Position = field(default_factory=Position)
    rect: FrameRect = field(default_factory=FrameRect)
    level: int = 1
    speed: float = BASE_SPEED
    texture: str = TEXTURE_LEVEL1
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _since_step: float = field(default=0.0, repr=False)

    def _random_row(self) -> int:
        return self.rng.randrange(self.height - FRAME_SIZE)

    def update_level(self) -> bool:
        """Raise the level from the kill count; return True if it changed."""
        new_level = self.pos.count // KILLS_PER_LEVEL + 1
        if new_level == self.level or new_level > MAX_LEVEL:
            return False
        self.level = new_level
        self.texture = texture_for_level(new_level)
        self.speed = BASE_SPEED + (new_level - 1) * SPEED_PER_LEVEL
        return True

    def check_bounds(self) -> bool:
        """Send the ghost back to the left edge once it leaves the window."""
        if self.pos.x < self.width:
            return False
        self.pos.x = 0
        self.pos.y = self._random_row()
        return True

    def advance(self, elapsed: float) -> bool:
        """Add ``elapsed`` seconds; step the ghost once the interval has passed."""
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        self._since_step += elapsed
        if self._since_step <= STEP_INTERVAL:
            return False
        self._since_step = 0.0
        self.rect.advance()
        self.pos.x = int(self.pos.x + self.speed)
        return True

    def hit(self, x: float, y: float) -> bool:
        """Handle a click at (x, y); a hit respawns the ghost and scores."""
        inside = (
            self.pos.x <= x < self.pos.x + self.rect.width
            and self.pos.y <= y < self.pos.y + self.rect.height
        )
        if not inside:
            return False
        self.pos.y = self._random_row()
        self.pos.x = 0
        self.pos.count += 1
        return True