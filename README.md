# cubgrid

A small top-down map viewer. A maze of walls is drawn as a grid of 32-pixel
cells, and a player dot walks through the open cells without passing through
walls. It is the groundwork for a raycasting game.

## Installing

    pip install .

This pulls in `pygame`, which opens the window.

## Playing

    cubgrid

The window opens at 1024 × 512 with the built-in map. The player starts in the
middle of the map. Grid lines are white, floor cells grey, wall cells gold and
the player a 2 × 2 black square.

| Key   | Action      |
|-------|-------------|
| W     | move up     |
| S     | move down   |
| A     | move left   |
| D     | move right  |
| Esc   | quit        |

Each key press moves the player two pixels, and only when the cell it would
enter is open floor (`0`). Closing the window quits as well. The command takes
no options other than `--help`.

## Using it as a library

The map and movement rules work without any window:

```python
from cubgrid.maps import default_map, split
from cubgrid.world import Key, World

world = World.from_rows(default_map())
world.move(Key.W)          # True if the player moved
print(world.cell_at(world.px, world.py))

rows = split("111 101 111", " ")
small = World.from_rows(rows)
```

- `cubgrid.maps.split(s, sep)` splits a string on one character and drops
  empty pieces; `default_map()` returns the rows of the built-in map.
- `World.from_rows(rows)` places the player at the centre of the map and
  raises `ValueError` for an empty map.
- `World.cell_at(x, y)` gives the map character under a pixel, or `None`
  off the map.
- `World.move(key)` steps the player for W, A, S or D and reports whether it
  moved.
- `World.pixels()` yields `(x, y, colour)` for every map pixel, and
  `World.player_pixels()` returns the player's four pixels.
- `cubgrid.app.render(world, surface)` draws both onto a pygame surface,
  `cubgrid.app.run(world)` runs the game loop, and
  `cubgrid.app.key_from_pygame(key)` maps pygame key constants to `Key`.

`cubgrid.libstr` holds C-style string, byte and character helpers
(`atoi`, `itoa`, `strtrim`, `substr`, `strnstr`, `strchr`, `strrchr`,
`strncmp`, `strlcpy`, `strlcat`, `memchr`, `memcmp`, `is_alnum`, `is_alpha`,
`is_ascii`, `is_digit`, `is_print`, `write_number`) that keep the edge cases
of their classic counterparts. Searches return an index or `None`, and
`strlcpy`/`strlcat` return the resulting string together with the length
they report.

## What it does not do

- There is no first-person, raycast view: only the top-down map is drawn.
- The arrow keys are recognised but do not move or turn the player.
- Maps cannot be loaded from files; the command always shows the built-in
  map. Other maps can be used only through `World.from_rows` in code.

## Tests

    pip install .[test]
    pytest