"""The playable game: window, assets, event handling and the main loop."""

import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO, Union

import pygame

from ghosthunter.numfmt import nbr_to_str
from ghosthunter.printf import mini_printf
from ghosthunter.state import GameState

TITLE = "Ghost Hunter"
FRAME_RATE = 60
SCORE_SIZE = 50
CLOSE_BUTTON_OFFSET = 40
CLOSE_BUTTON_TOP = 10
DEATH_VOLUME = 0.5
MUSIC_VOLUME = 0.3

CLOSE_BUTTON_IMAGE = "addons/closegood.png"
BACKGROUND_IMAGE = "addons/hauntedhouse.jpg"
DEATH_SOUND = "addons/yoshiwo.mp3"
MUSIC = "addons/music_ghost.ogg"
SCORE_FONT = "addons/Montserrat-Black.ttf"

EXIT_FAILURE = 84


class GhostHunter:
    """Ties the game rules to pygame input, drawing and sound."""

    def __init__(
        self,
        state: Optional[GameState] = None,
        assets: Union[str, Path] = ".",
        surface: Optional[pygame.Surface] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.state = state if state is not None else GameState()
        self.assets = Path(assets)
        self.surface = surface
        self.running = True
        self.close_button_pos = (
            self.state.width - CLOSE_BUTTON_OFFSET,
            CLOSE_BUTTON_TOP,
        )
        self._clock = clock if clock is not None else time.monotonic
        self._last = self._clock()
        self._images: Dict[str, Optional[pygame.Surface]] = {}
        self._font: Optional[pygame.font.Font] = None
        self._death_sound: Optional[pygame.mixer.Sound] = None

    def _image(self, name: str) -> Optional[pygame.Surface]:
        if name not in self._images:
            try:
                self._images[name] = pygame.image.load(str(self.assets / name))
            except (pygame.error, OSError):
                self._images[name] = None
        return self._images[name]

    def _load_sounds(self) -> None:
        if not pygame.mixer.get_init():
            return
        try:
            sound = pygame.mixer.Sound(str(self.assets / DEATH_SOUND))
        except (pygame.error, OSError):
            return
        sound.set_volume(DEATH_VOLUME)
        self._death_sound = sound

    @property
    def close_button_rect(self) -> Optional[pygame.Rect]:
        """Screen area of the close button, or None when it has no image."""
        image = self._image(CLOSE_BUTTON_IMAGE)
        if image is None:
            return None
        return pygame.Rect(self.close_button_pos, image.get_size())

    def _score_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font_path = self.assets / SCORE_FONT
            try:
                self._font = pygame.font.Font(str(font_path), SCORE_SIZE)
            except (pygame.error, OSError):
                self._font = pygame.font.Font(None, SCORE_SIZE)
        return self._font

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event: shoot, quit, or press the close button."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            if self.state.hit(x, y) and self._death_sound is not None:
                self._death_sound.play()
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        if event.type == pygame.QUIT:
            self.running = False
        if event.type == pygame.MOUSEBUTTONDOWN:
            button = self.close_button_rect
            if button is not None and button.collidepoint(event.pos):
                self.running = False

    def update(self) -> None:
        """Advance the ghost by the time elapsed since the previous update."""
        now = self._clock()
        elapsed = max(0.0, now - self._last)
        self._last = now
        self.state.advance(elapsed)
        self.state.check_bounds()
        self.state.update_level()

    def render(self) -> None:
        """Draw background, ghost, score and close button onto the surface."""
        if self.surface is None:
            raise RuntimeError("no surface to draw on")
        surface = self.surface
        surface.fill((0, 0, 0))
        background = self._image(BACKGROUND_IMAGE)
        if background is not None:
            surface.blit(
                pygame.transform.scale(background, surface.get_size()), (0, 0)
            )
        ghost = self._image(self.state.texture)
        if ghost is not None:
            rect = self.state.rect
            area = pygame.Rect(rect.left, rect.top, rect.width, rect.height)
            surface.blit(ghost, (self.state.pos.x, self.state.pos.y), area)
        score = self._score_font().render(
            nbr_to_str(self.state.pos.count), True, (255, 255, 255)
        )
        surface.blit(score, (0, 0))
        button = self._image(CLOSE_BUTTON_IMAGE)
        if button is not None:
            surface.blit(button, self.close_button_pos)

    def run(self) -> None:
        """Run the game loop until the player quits."""
        if self.surface is None:
            raise RuntimeError("no surface to draw on")
        ticker = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.update()
            self.render()
            pygame.display.flip()
            ticker.tick(FRAME_RATE)


def _start_music(assets: Path) -> None:
    if not pygame.mixer.get_init():
        return
    try:
        pygame.mixer.music.load(str(assets / MUSIC))
    except (pygame.error, OSError):
        return
    pygame.mixer.music.set_volume(MUSIC_VOLUME)
    pygame.mixer.music.play()


def print_help(stream: Optional[TextIO] = None) -> None:
    """Write the short usage text."""
    out = sys.stdout if stream is None else stream
    mini_printf("Ghost Hunter\n", stream=out)
    mini_printf("Try to kill the ghosts with left mouse click ", stream=out)
    mini_printf("and get the highest score.\n", stream=out)


def main(argv: Optional[List[str]] = None) -> int:
    """Start the game, or print help when given a single '?h' argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1 and args[0][1:2] == "h":
        print_help()
        return 0
    pygame.init()
    try:
        assets = Path(".")
        _start_music(assets)
        state = GameState()
        surface = pygame.display.set_mode(
            (state.width, state.height), pygame.RESIZABLE
        )
        pygame.display.set_caption(TITLE)
        hunter = GhostHunter(state=state, assets=assets, surface=surface)
        if hunter._image(state.texture) is None:
            return EXIT_FAILURE
        hunter._load_sounds()
        hunter.run()
    except pygame.error:
        return EXIT_FAILURE
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())