"""Game state: mode, level, timing, and a pausable game clock."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

_UINT32 = 0xFFFFFFFF


class GameMode(Enum):
    """The modes a game can be in; NONE means no change is requested."""

    MENU = 0
    GAME = 1
    GAMEOVER = 2
    NONE = 3


class Game:
    """Playfield size, mode and level requests, and per-frame timing.

    Mode and level changes are requests: they are stored and take effect
    when the main loop applies them on its next iteration.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.running = True
        self.paused = False
        self.mode = GameMode.MENU
        self.requested_mode = GameMode.NONE
        self.level = 0
        self.requested_level = 0
        self._time = 0
        self._time_prev = 0
        self.time_game_over = 0

    # Geometry
    @property
    def size(self) -> tuple[int, int]:
        """The playfield size as (width, height)."""
        return (self.width, self.height)

    # Timing
    @property
    def time(self) -> int:
        """Game time in milliseconds, as last set by the main loop."""
        return self._time

    @property
    def delta_time(self) -> int:
        """Milliseconds elapsed since the previous update."""
        return (self._time - self._time_prev) & _UINT32

    def reset_time(self, t: int = 0) -> None:
        """Set both the current and the previous update time to t."""
        self._time = self._time_prev = t

    def set_time(self, t: int) -> None:
        """Set the current time, keeping the previous update time."""
        self._time = t

    def catch_delta_time(self) -> None:
        """Mark the current time as the time of the previous update."""
        self._time_prev = self._time

    # Mode
    @property
    def is_menu_mode(self) -> bool:
        return self.mode is GameMode.MENU

    @property
    def is_game_mode(self) -> bool:
        return self.mode is GameMode.GAME

    @property
    def is_game_over(self) -> bool:
        return self.mode is GameMode.GAMEOVER

    @property
    def is_mode_changing(self) -> bool:
        """True while a mode change is pending."""
        return self.requested_mode is not GameMode.NONE

    def change_mode(self, mode: GameMode) -> None:
        """Request a mode change, applied on the next loop iteration."""
        if not isinstance(mode, GameMode):
            raise TypeError(f"mode must be a GameMode, got {mode!r}")
        self.requested_mode = mode

    def start_game(self) -> None:
        self.change_mode(GameMode.GAME)

    def game_over(self) -> None:
        self.change_mode(GameMode.GAMEOVER)

    def new_game(self) -> None:
        self.change_mode(GameMode.MENU)

    def stop_game(self) -> None:
        """Stop the main loop."""
        self.running = False

    def pause_game(self, paused: Optional[bool] = None) -> None:
        """Set the paused flag, or toggle it when no value is given."""
        self.paused = (not self.paused) if paused is None else bool(paused)

    # Level
    def set_level(self, level: int) -> None:
        """Request a level, applied on the next loop iteration."""
        self.requested_level = level

    def new_level(self) -> None:
        """Request the level after the current one."""
        self.set_level(self.level + 1)


def _system_ms() -> int:
    return int(time.monotonic() * 1000) & _UINT32


class GameClock:
    """A millisecond game clock that starts at zero and can be suspended."""

    def __init__(self, system_time: Optional[Callable[[], int]] = None) -> None:
        self._source = system_time if system_time is not None else _system_ms
        self._started = self._source()
        self._paused_at = 0
        self._running = True

    def system_time(self) -> int:
        """The current system time in milliseconds."""
        return self._source()

    def game_time(self) -> int:
        """Game time in milliseconds; it does not progress while suspended."""
        if not self._running:
            return self._paused_at
        return (self._paused_at + self._source() - self._started) & _UINT32

    def reset(self) -> None:
        """Restart the clock from zero."""
        self._started = self._source()
        self._paused_at = 0

    def suspend(self) -> None:
        """Stop the clock; game time stays where it is."""
        if self._running:
            self._paused_at = self.game_time()
            self._running = False

    def resume(self) -> None:
        """Restart a suspended clock from where it stopped."""
        if not self._running:
            self._started = self._source()
            self._running = True

    def is_running(self) -> bool:
        """True when the clock is not suspended."""
        return self._running