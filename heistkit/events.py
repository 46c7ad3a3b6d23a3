"""Input and window events, their masks and a bounded event queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional, Union

RELEASED = 0
PRESSED = 1


class EventType(IntEnum):
    """Kinds of event; values past USEREVENT are free for application use."""

    NOEVENT = 0
    ACTIVEEVENT = 1
    KEYDOWN = 2
    KEYUP = 3
    MOUSEMOTION = 4
    MOUSEBUTTONDOWN = 5
    MOUSEBUTTONUP = 6
    JOYAXISMOTION = 7
    JOYBALLMOTION = 8
    JOYHATMOTION = 9
    JOYBUTTONDOWN = 10
    JOYBUTTONUP = 11
    QUIT = 12
    SYSWMEVENT = 13
    EVENT_RESERVEDA = 14
    EVENT_RESERVEDB = 15
    VIDEORESIZE = 16
    VIDEOEXPOSE = 17
    EVENT_RESERVED2 = 18
    EVENT_RESERVED3 = 19
    EVENT_RESERVED4 = 20
    EVENT_RESERVED5 = 21
    EVENT_RESERVED6 = 22
    EVENT_RESERVED7 = 23
    USEREVENT = 24
    NUMEVENTS = 32


def event_mask(event_type: int) -> int:
    """Return the single-bit mask selecting one event type."""
    event_type = int(event_type)
    if not 0 <= event_type < EventType.NUMEVENTS:
        raise ValueError(f"event type out of range: {event_type}")
    return 1 << event_type


class EventMask(IntFlag):
    """Predefined masks selecting groups of event types."""

    ACTIVEEVENT = 1 << EventType.ACTIVEEVENT
    KEYDOWN = 1 << EventType.KEYDOWN
    KEYUP = 1 << EventType.KEYUP
    KEYEVENT = (1 << EventType.KEYDOWN) | (1 << EventType.KEYUP)
    MOUSEMOTION = 1 << EventType.MOUSEMOTION
    MOUSEBUTTONDOWN = 1 << EventType.MOUSEBUTTONDOWN
    MOUSEBUTTONUP = 1 << EventType.MOUSEBUTTONUP
    MOUSEEVENT = (
        (1 << EventType.MOUSEMOTION)
        | (1 << EventType.MOUSEBUTTONDOWN)
        | (1 << EventType.MOUSEBUTTONUP)
    )
    JOYAXISMOTION = 1 << EventType.JOYAXISMOTION
    JOYBALLMOTION = 1 << EventType.JOYBALLMOTION
    JOYHATMOTION = 1 << EventType.JOYHATMOTION
    JOYBUTTONDOWN = 1 << EventType.JOYBUTTONDOWN
    JOYBUTTONUP = 1 << EventType.JOYBUTTONUP
    JOYEVENT = (
        (1 << EventType.JOYAXISMOTION)
        | (1 << EventType.JOYBALLMOTION)
        | (1 << EventType.JOYHATMOTION)
        | (1 << EventType.JOYBUTTONDOWN)
        | (1 << EventType.JOYBUTTONUP)
    )
    VIDEORESIZE = 1 << EventType.VIDEORESIZE
    VIDEOEXPOSE = 1 << EventType.VIDEOEXPOSE
    QUIT = 1 << EventType.QUIT
    SYSWMEVENT = 1 << EventType.SYSWMEVENT
    ALL = 0xFFFFFFFF


class AppState(IntFlag):
    """Application focus states."""

    MOUSEFOCUS = 0x01
    INPUTFOCUS = 0x02
    ACTIVE = 0x04


class EventAction(Enum):
    """What EventQueue.peep does with the queue."""

    ADD = "add"
    PEEK = "peek"
    GET = "get"


class EventState(IntEnum):
    """Processing state of an event type."""

    QUERY = -1
    IGNORE = 0
    DISABLE = 0
    ENABLE = 1


def _check_type(event_type: EventType, allowed: Iterable[EventType]) -> EventType:
    allowed = tuple(allowed)
    if event_type not in allowed:
        names = ", ".join(t.name for t in allowed)
        raise ValueError(f"event type must be one of {names}, got {event_type!r}")
    return EventType(event_type)


@dataclass(frozen=True)
class ActiveEvent:
    """Application gained or lost visibility or focus."""

    gain: int
    state: AppState
    type: EventType = field(default=EventType.ACTIVEEVENT, init=False)


@dataclass(frozen=True)
class KeyboardEvent:
    """A key was pressed or released."""

    type: EventType
    which: int
    state: int
    keysym: Any

    def __post_init__(self) -> None:
        _check_type(self.type, (EventType.KEYDOWN, EventType.KEYUP))


@dataclass(frozen=True)
class MouseMotionEvent:
    """The mouse moved."""

    which: int
    state: int
    x: int
    y: int
    xrel: int
    yrel: int
    type: EventType = field(default=EventType.MOUSEMOTION, init=False)


@dataclass(frozen=True)
class MouseButtonEvent:
    """A mouse button was pressed or released."""

    type: EventType
    which: int
    button: int
    state: int
    x: int
    y: int

    def __post_init__(self) -> None:
        _check_type(self.type, (EventType.MOUSEBUTTONDOWN, EventType.MOUSEBUTTONUP))


@dataclass(frozen=True)
class JoyAxisEvent:
    """A joystick axis moved; value ranges from -32768 to 32767."""

    which: int
    axis: int
    value: int
    type: EventType = field(default=EventType.JOYAXISMOTION, init=False)

    def __post_init__(self) -> None:
        if not -32768 <= self.value <= 32767:
            raise ValueError(f"axis value out of range: {self.value}")


@dataclass(frozen=True)
class JoyBallEvent:
    """A joystick trackball moved."""

    which: int
    ball: int
    xrel: int
    yrel: int
    type: EventType = field(default=EventType.JOYBALLMOTION, init=False)


@dataclass(frozen=True)
class JoyHatEvent:
    """A joystick hat changed position; zero means centred."""

    which: int
    hat: int
    value: int
    type: EventType = field(default=EventType.JOYHATMOTION, init=False)


@dataclass(frozen=True)
class JoyButtonEvent:
    """A joystick button was pressed or released."""

    type: EventType
    which: int
    button: int
    state: int

    def __post_init__(self) -> None:
        _check_type(self.type, (EventType.JOYBUTTONDOWN, EventType.JOYBUTTONUP))


@dataclass(frozen=True)
class ResizeEvent:
    """The window was resized to w by h."""

    w: int
    h: int
    type: EventType = field(default=EventType.VIDEORESIZE, init=False)


@dataclass(frozen=True)
class ExposeEvent:
    """The screen needs to be redrawn."""

    type: EventType = field(default=EventType.VIDEOEXPOSE, init=False)


@dataclass(frozen=True)
class QuitEvent:
    """The user asked to quit."""

    type: EventType = field(default=EventType.QUIT, init=False)


@dataclass(frozen=True)
class UserEvent:
    """An application-defined event with a code and two data slots."""

    code: int
    data1: Any = None
    data2: Any = None
    type: int = EventType.USEREVENT

    def __post_init__(self) -> None:
        if not EventType.USEREVENT <= self.type < EventType.NUMEVENTS:
            raise ValueError(f"user event type must be in 24..31, got {self.type}")


Event = Union[
    ActiveEvent,
    KeyboardEvent,
    MouseMotionEvent,
    MouseButtonEvent,
    JoyAxisEvent,
    JoyBallEvent,
    JoyHatEvent,
    JoyButtonEvent,
    ResizeEvent,
    ExposeEvent,
    QuitEvent,
    UserEvent,
]

EventFilter = Callable[[Any], bool]


class EventQueueFull(Exception):
    """Raised when an event is pushed onto a full queue."""


class EventQueue:
    """A bounded FIFO of events with a filter and per-type processing state."""

    def __init__(self, capacity: int = 128) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._events: Deque[Any] = deque()
        self._filter: Optional[EventFilter] = None
        self._ignored: Dict[int, bool] = {}

    def __len__(self) -> int:
        return len(self._events)

    @property
    def filter(self) -> Optional[EventFilter]:
        """The current event filter, or None."""
        return self._filter

    def push(self, event: Any) -> bool:
        """Queue an event; return False if it was ignored or filtered out.

        Raises EventQueueFull when the queue is at capacity.
        """
        if self._ignored.get(int(event.type), False):
            return False
        if self._filter is not None and not self._filter(event):
            return False
        if len(self._events) >= self.capacity:
            raise EventQueueFull(f"event queue full ({self.capacity} events)")
        self._events.append(event)
        return True

    def poll(self) -> Optional[Any]:
        """Remove and return the next event, or None if there is none."""
        return self._events.popleft() if self._events else None

    def peep(
        self,
        count: int,
        action: EventAction,
        mask: int = EventMask.ALL,
        events: Optional[Iterable[Any]] = None,
    ) -> List[Any]:
        """Add, peek at or take up to ``count`` events.

        ADD appends events from ``events`` until the count or the capacity is
        reached and returns those stored.  PEEK and GET return up to ``count``
        events from the front that match ``mask``; GET also removes them.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if action is EventAction.ADD:
            stored: List[Any] = []
            for event in events or ():
                if len(stored) >= count or len(self._events) >= self.capacity:
                    break
                self._events.append(event)
                stored.append(event)
            return stored

        matched = [e for e in self._events if event_mask(e.type) & mask][:count]
        if action is EventAction.GET:
            taken = {id(e) for e in matched}
            self._events = deque(e for e in self._events if id(e) not in taken)
        return matched

    def set_filter(self, event_filter: Optional[EventFilter]) -> Optional[EventFilter]:
        """Install a filter deciding which events get queued; return the old one."""
        previous, self._filter = self._filter, event_filter
        return previous

    def event_state(self, event_type: int, state: EventState) -> EventState:
        """Query or change whether an event type is processed.

        Returns the state in effect before the call.  Ignoring a type also
        drops any events of that type already queued.
        """
        key = int(event_type)
        current = EventState.IGNORE if self._ignored.get(key, False) else EventState.ENABLE
        if state == EventState.QUERY:
            return current
        if state == EventState.IGNORE:
            self._ignored[key] = True
            self._events = deque(e for e in self._events if int(e.type) != key)
        elif state == EventState.ENABLE:
            self._ignored[key] = False
        else:
            raise ValueError(f"unknown event state: {state!r}")
        return current

    def quit_requested(self) -> bool:
        """Return True if a quit event is waiting in the queue."""
        return bool(self.peep(1, EventAction.PEEK, EventMask.QUIT))