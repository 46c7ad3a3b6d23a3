"""Game building blocks: colours, cached file loading, events, versions, game state, text layout and fonts."""

__version__ = "0.1.0"
__all__ = ["color", "filemgr", "events", "version", "game", "textcursor", "font"]