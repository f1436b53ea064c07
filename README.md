# cubcaster

`cubcaster` is a small raycasting engine in the style of early first-person
shooters. It reads a `.cub` scene file, checks it, and opens a pygame window
in which you walk through a textured maze. The maze has doors that open and
close, a minimap in the top-left corner and an animated gun.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
cubcaster path/to/scene.cub
```

Give the command exactly one argument. Any other number of arguments prints
`Invalid count of arguments` and the command exits with status 1. The path
must end in `.cub`. If the scene or one of its textures is invalid, the
program prints the error message and exits with status 1.

Texture paths are resolved from the **current working directory**. This
applies to the wall textures named in the scene and to the fixed door and gun
images. Run the command from the directory that holds them.

### Controls

| Key            | Action                          |
|----------------|---------------------------------|
| W / S          | move forward / back             |
| A / D          | strafe left / right             |
| Left / Right   | turn                            |
| mouse motion   | turn                            |
| E              | open or close the door in front |
| Space          | fire (plays the gun animation)  |
| Esc            | quit                            |

Closing the window also quits. Walls block movement, but doors do not.

## Scene files

A `.cub` file begins with six type identifiers. They may come in any order,
and blank lines may appear between them. Each one is a key followed by exactly
one value:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

* `NO`, `SO`, `WE` and `EA` name the wall textures. Each value must end in
  `.xpm`, and each image must be 64×64 pixels.
* `F` and `C` set the floor and ceiling colours as `R,G,B`. Each part is plain
  decimal digits from 0 to 255.

Giving an identifier twice is an error, and so is leaving one out.

The map comes after the identifiers. It may use these characters:

* `1`: wall
* `0`: empty floor
* `C` / `O`: a closed or open door. It must sit between two walls, either
  above and below or left and right.
* `N`, `S`, `E`, `W`: the player's start position and facing. There must be
  exactly one of these.
* whitespace: outside the map

The map must be closed. No walkable cell (floor, door or start) may touch
whitespace or the edge of the map. No blank line may appear inside the map.
Tabs are expanded to four spaces.

Besides the wall textures, these images are loaded from `textures/` under the
working directory:

* `CloseDoor.xpm` and `OpenDoor.xpm`, which must be 64×64;
* `1.xpm` to `5.xpm`, the gun animation frames, which may be any size.

### XPM support

The XPM reader handles `#RRGGBB` colours, the colour `None` (treated as
transparent) and a small built-in set of common colour names such as `black`,
`white`, `red` and `gray`. A colour name it does not know is read as black.
C comments outside quoted strings are ignored.

## Using the library

The pieces are also available as modules:

* `cubcaster.mapgrid`: `load_scene` reads and validates a `.cub` file and
  returns a `Scene` with its `types` and its `grid` (a `Grid`). This module
  also holds `read_lines`, `tabs_to_spaces`, `check_borders` and
  `check_doors`.
* `cubcaster.identifiers`: `parse_identifiers`, `parse_color`,
  `check_valid_chars`, and the `SceneTypes` and `Color` classes.
* `cubcaster.player`: `Player` (with `from_grid`, `move_forward`,
  `move_back`, `move_left`, `move_right`, `rotate_left`, `rotate_right` and
  `toggle_door`) and `MouseLook`.
* `cubcaster.xpm`: `load_xpm` and `parse_xpm` decode images into an
  `XpmImage`. Both raise `XpmError` on bad data.
* `cubcaster.raycast`: `cast_ray` and `texture_slice` do the DDA ray march.
* `cubcaster.render`: `render_frame` draws one frame into a `Frame`, a
  buffer of 32-bit `0x00RRGGBB` pixels.
* `cubcaster.textures`: `load_textures(types, base_dir)` loads a `TextureSet`.
* `cubcaster.game`: `Game` ties everything together. `Game.redraw()` renders
  without opening a window, and `Game.run()` opens the pygame window.

```python
from cubcaster.game import Game
from cubcaster.mapgrid import load_scene
from cubcaster.textures import load_textures

scene = load_scene("maps/level.cub")
textures = load_textures(scene.types, "maps")
game = Game(scene, textures, width=320, height=200)
game.handle_key("w")
frame = game.redraw()
print(hex(frame.get_pixel(160, 100)))
```

Scene and texture problems raise `cubcaster.errors.CubError`, through its
subclasses `MapError` and `TextureError`.

## What it does not do

There is no sound. There are no enemies, no sprites other than the gun, and
no saving of game state. Firing only plays the gun animation.