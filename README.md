# Ghost Hunter

Ghosts drift across a haunted house from left to right. Click them with the
left mouse button before they reach the far edge, and push your score as high
as you can.

## Installing

```
pip install .
```

This brings in pygame, which draws the window and plays the sound.

## Playing

```
ghosthunter
```

The game opens a resizable 800×600 window titled "Ghost Hunter" and runs at
up to 60 frames per second.

- **Left click** on a ghost to kill it. The ghost reappears at the left edge
  at a random height and your score goes up by one.
- The ghost moves forward once every 0.15 seconds and steps through the
  frames of its sprite sheet as it goes.
- Every ten kills raises the level, up to level 20. Each level adds 10 pixels
  to the ghost's step, and the ghost changes its look after level 10.
- A ghost that crosses the right edge comes back from the left at a new
  height.
- Press **Escape**, click the close button in the top-right corner, or close
  the window to quit.

The score is drawn in the top-left corner.

To print a short description and exit without opening a window:

```
ghosthunter -h
```

## Assets

The game loads its images, sounds and font from an `addons/` directory in the
current working directory:

- `ghost.png`, `fantasmabluelvl2.png`, `fantasmanegrolvl3.png`: ghost sprite
  sheets, one 42×42 frame under another. `ghost.png` is required; without it
  the command exits with status 84.
- `hauntedhouse.jpg`: the background, stretched to fill the window
- `closegood.png`: the close button, drawn 40 pixels from the right edge
- `yoshiwo.mp3`: the sound a ghost makes when it is hit
- `music_ghost.ogg`: background music
- `Montserrat-Black.ttf`: the font for the score; pygame's default font is
  used when it is missing

Apart from `ghost.png`, a missing file is skipped: the game runs without that
picture or sound. Start the game from the directory that holds `addons/`.

## Using it from Python

The game rules live in `ghosthunter.state` and do not draw anything:

```python
import random
from ghosthunter.state import GameState

state = GameState(rng=random.Random(1))
state.hit(5, 5)         # True: the ghost starts at (0, 0) and is 42×42
state.advance(0.2)      # True: more than 0.15 s passed, the ghost steps forward
state.check_bounds()    # True once the ghost has left the window
state.update_level()    # True when the kill count reaches a new level
print(state.pos.count, state.level, state.speed, state.texture)
```

`GhostHunter` in `ghosthunter.game` wraps a `GameState` with pygame event
handling (`handle_event`), timing (`update`), drawing onto a surface
(`render`) and the main loop (`run`).

`ghosthunter.numfmt.nbr_to_str` turns an integer into its decimal text, and
`ghosthunter.printf.mini_printf` is a small formatter that understands `%d`,
`%i`, `%c`, `%s` and `%%`. It writes to standard output or to the `stream`
given, drops unknown conversions, and returns the number of literal
characters it wrote.