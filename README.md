# heistkit

Building blocks for 2D games that need no graphics or audio backend. The
package is a plain-Python library and has no dependencies.

## Modules

- `heistkit.color`: `Color` is a frozen RGBA dataclass with channels 0..255.
  `+` and `-` saturate at the limits. `*` takes a `Color` or an int and scales
  each channel by `x * y // 255`. `|`, `&`, `^` and `~` work channel by channel.
  Named shades are available as classmethods: `red`, `green`, `blue`, `yellow`,
  `cyan`, `magenta`, the `dark_*` and `light_*` variants, `white`,
  `light_gray`, `dark_gray` and `black`. `Color.any_but(c1[, c2])` returns
  black, white or dark gray, whichever differs from the colours given, which
  makes it useful as a colour key. `Color.hsb(hue, saturation, brightness)`
  builds a colour from HSB values.
- `heistkit.filemgr`: `FileManager(path, loader, deleter=None, base_dir=None)`
  takes a search path of prefixes separated by semicolons, in which every `%`
  stands for `base_dir`. When `base_dir` is not given it is the directory of
  the running program. `find_path(name)` returns the first prefix+name that
  exists. A name that already has a directory or drive is returned unchanged.
  `load(name)` calls the loader once per distinct name and caches the result.
  `close()`, which also runs when the manager is used in a `with` block,
  passes every cached object to the deleter.
- `heistkit.events`: `EventType`, `EventMask`, `AppState`, `EventAction` and
  `EventState`. It has frozen event records (`KeyboardEvent`,
  `MouseMotionEvent`, `MouseButtonEvent`, the joystick events, `ResizeEvent`,
  `ExposeEvent`, `QuitEvent`, `ActiveEvent`, `UserEvent`) and `event_mask()`.
  `EventQueue(capacity=128)` provides `push`, `poll`, `peep` (add, peek or get
  by mask), `set_filter`, `event_state` (query, ignore or enable a type) and
  `quit_requested()`. Pushing onto a full queue raises `EventQueueFull`.
- `heistkit.version`: `Version` (with `number()`), `version_num`,
  `compiled_version()` and `version_at_least()`.
- `heistkit.game`: `Game` keeps the playfield size, the running and paused
  flags, the mode and the level. Calls to `change_mode`, `start_game`,
  `game_over`, `new_game`, `set_level` and `new_level` only record a request
  in `requested_mode` or `requested_level`. It also tracks frame timing
  through `time`, `delta_time`, `reset_time`, `set_time` and
  `catch_delta_time`. `GameMode` lists the modes. `GameClock` is a
  millisecond clock that starts at zero and has `suspend`, `resume`, `reset`
  and `is_running`. It reads its time from an injectable time source.
- `heistkit.textcursor`: `TextCursor` places a text insertion point by row and
  column inside a surface with margins. Rows count from the top, the bottom or
  the centre, and columns are aligned with `Align`. Line steps go down or up.
  `FontMetrics` holds the font measurements it works from. `timetext(ms)`
  formats a time as `MM:SS.cc`.
- `heistkit.font`: `Font(renderer)` keeps a face, a point size and a colour,
  and draws text, numbers and single characters through any object that has
  a `draw_text(x, y, face, size, color, text)` method.

## Example

```python
from heistkit.color import Color
from heistkit.game import Game, GameMode
from heistkit.textcursor import timetext

key = Color.any_but(Color.black(), Color.white())   # dark gray
yellow = Color.red() | Color.green()

game = Game(1024, 768)
game.start_game()            # recorded as a request only
assert game.requested_mode is GameMode.GAME
assert game.mode is GameMode.MENU

print(timetext(83456))       # "01:23.45"
```

## What it does not do

heistkit does not open windows, render graphics, play sound or read input
devices. It also has no main loop: an application applies the requested
modes and levels itself and fills the `EventQueue` from its own input
backend. There is no game and no command to run. The package is a library
only.

## Tests

```
pip install heistkit[test]
pytest
```