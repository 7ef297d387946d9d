# brickout

The building blocks of a brick-breaking arcade game, in plain Python with
no third-party dependencies.

## What is inside

- `brickout.colors`: `Color`, a packed 32-bit XRGB value (`dword`) with the
  `x`/`a`, `r`, `g`, `b` properties, `with_*` copies and `darker()`; the
  constructors `Color.from_rgb()` and `Color.from_argb()`; `make_rgb()`; and
  named colours such as `MAGENTA`, `WHITE` and `LIGHT_GREEN`.
- `brickout.vec2`: `Vec2`, an immutable 2D vector with `+`, `-`, `*`, `/`,
  `length()`, `length_sq()`, `normalized()`, `rounded()`, `to_int()` and
  `to_float()`. Integer vectors keep integer arithmetic: division truncates
  toward zero.
- `brickout.rect`: `Rect` (`left`, `right`, `top`, `bottom`) with
  `overlaps()`, `is_contained_by()`, `contains()`, `expanded()`,
  `expanded_sides()`, `expanded_width()`, `rounded()`, and constructors
  `from_corners()`, `from_size()` and `from_center()`.
- `brickout.gamemath`: `PI`, `GRAVITATION`, `rtod()` and `deg360()`.
- `brickout.frametimer`: `FrameTimer` with `mark()` and `peek()`; the clock
  can be passed in.
- `brickout.errors`: `EngineError` and `SoundFileError`, each with
  `location()`, `full_message()` and `exception_type()`.
- `brickout.surface`: `Surface` (alias `Sprite`), a pixel grid with
  `put_pixel()`, `get_pixel()`, `fill()`, `copy()` and `rect`, loadable from
  an uncompressed 24- or 32-bit BMP file with `Surface.from_bitmap()`.
- `brickout.sprite_effect`: the pixel effects `Chroma`, `Substitution`,
  `Copy` and `Ghost`, called with a source colour, a destination position and
  any target that has `put_pixel()`/`get_pixel()`.
- `brickout.records`: a `place;name;score` high-score file with `Record`,
  `parse_line()`, `format_line()`, `update_records()` and `get_records()`.
- `brickout.wave`: `load_wav()` reads a RIFF WAVE file in the mixer's format
  (16-bit stereo PCM at 44100 Hz) into `SoundData`, with loop points chosen
  by `LoopType` (none, embedded cue points, whole sound, seconds or frames).
- `brickout.sound_system`: `SoundSystem`, a software mixer with a fixed pool
  of channels (64 by default) whose `render()` returns mixed 16-bit PCM
  bytes; `Sound` (`from_file()`, `play()`, `stop_one()`, `stop_all()`); and
  `SoundEffect`, which plays a random one of several sounds at a randomly
  shifted pitch.
- `brickout.interface_object`: `MouseEvent`, `MouseEventType` and
  `InterfaceObject`, a styled box of text that tracks hover and clicks.
- `brickout.button`: `Button`, `MenuButton` (carries an `option`) and
  `StateButton` (toggles between two values, labels and colours).
- `brickout.textbox`: `TextBox`, a focusable single-line input with an
  optional length limit.
- `brickout.selection_menu`: `GameState` and `SelectionMenu`, a column of
  Solo, Duo (disabled), Editor and Ranking buttons.
- `brickout.message_box`: `MessageBox` with Yes/No or Ok buttons
  (`MessageButtons`, `ValueButton`).

## Installing

```
pip install .
```

## Examples

Geometry:

```python
from brickout.rect import Rect
from brickout.vec2 import Vec2

paddle = Rect.from_size(Vec2(100, 500), 80, 12)
ball = Rect.from_center(Vec2(130, 495), 7, 7)
print(paddle.overlaps(ball))   # True
```

A high-score table:

```python
from brickout.records import update_records, get_records

update_records("scores.txt", "alice", 1200)
update_records("scores.txt", "bob", 900)
for record in get_records("scores.txt", 10):
    print(record.place, record.name, record.score)
```

A player's entry is only replaced when the new score beats the old one;
names are cut to ten characters and the table is kept sorted by score.

Mixing sound:

```python
from brickout.sound_system import SoundSystem, Sound

system = SoundSystem(channels=8)
boop = Sound.from_file("boop.wav", system=system)
boop.play(freq_mod=1.0, volume=0.5)
pcm = system.render(1024)   # 1024 frames of 16-bit stereo PCM
```

## What it does not do

- It opens no window and draws nothing to a screen. Widgets draw through any
  object with `draw_rect()` and `draw_disabled()`, and text through any font
  object with `char_width`, `char_height` and `draw_text()` (and, for
  `MessageBox`, `number_of_lines()` and `longest_line_size()`); the package
  supplies neither.
- It does not play audio on a device. `SoundSystem.render()` hands back PCM
  bytes for the caller to send on. Only `.wav` files in the mixer's format
  are loaded.
- It has no game loop, ball, paddle, bricks or levels; it holds the pieces
  such a game is built from.

## Running the tests

```
pip install .[test]
pytest
```