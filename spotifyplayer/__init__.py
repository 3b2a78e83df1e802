"""Keys, key bindings, commands, colour themes and application settings for a terminal music player."""

__version__ = "0.1.0"