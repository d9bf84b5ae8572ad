"""sidplayer: configuration layer of a console SID player."""

__version__ = "0.1.0"
