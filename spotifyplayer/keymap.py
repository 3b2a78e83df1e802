"""Key bindings: which key sequence runs which command."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from spotifyplayer.command import Command, parse_command
from spotifyplayer.key import KeySequence, parse_key_sequence

KEYMAP_CONFIG_FILE = "keymap.toml"

_log = logging.getLogger(__name__)

_DEFAULT_BINDINGS: tuple[tuple[str, Command], ...] = (
    ("n", Command.NEXT_TRACK),
    ("p", Command.PREVIOUS_TRACK),
    (".", Command.PLAY_RANDOM),
    ("space", Command.RESUME_PAUSE),
    ("C-r", Command.REPEAT),
    ("C-s", Command.SHUFFLE),
    ("+", Command.VOLUME_UP),
    ("-", Command.VOLUME_DOWN),
    ("_", Command.MUTE),
    (">", Command.SEEK_FORWARD),
    ("<", Command.SEEK_BACKWARD),
    ("enter", Command.CHOOSE_SELECTED),
    ("r", Command.REFRESH_PLAYBACK),
    ("/", Command.SEARCH),
    ("z", Command.QUEUE),
    ("C-z", Command.ADD_SELECTED_ITEM_TO_QUEUE),
    ("Z", Command.ADD_SELECTED_ITEM_TO_QUEUE),
    ("C-space", Command.SHOW_ACTIONS_ON_SELECTED_ITEM),
    ("g a", Command.SHOW_ACTIONS_ON_SELECTED_ITEM),
    ("a", Command.SHOW_ACTIONS_ON_CURRENT_TRACK),
    ("R", Command.RESTART_INTEGRATED_CLIENT),
    ("tab", Command.FOCUS_NEXT_WINDOW),
    ("backtab", Command.FOCUS_PREVIOUS_WINDOW),
    ("T", Command.SWITCH_THEME),
    ("D", Command.SWITCH_DEVICE),
    ("u p", Command.BROWSE_USER_PLAYLISTS),
    ("u a", Command.BROWSE_USER_FOLLOWED_ARTISTS),
    ("u A", Command.BROWSE_USER_SAVED_ALBUMS),
    ("g space", Command.CURRENTLY_PLAYING_CONTEXT_PAGE),
    ("g t", Command.TOP_TRACK_PAGE),
    ("g r", Command.RECENTLY_PLAYED_TRACK_PAGE),
    ("g y", Command.LIKED_TRACK_PAGE),
    ("g L", Command.LYRIC_PAGE),
    ("l", Command.LYRIC_PAGE),
    ("g l", Command.LIBRARY_PAGE),
    ("g s", Command.SEARCH_PAGE),
    ("g b", Command.BROWSE_PAGE),
    ("backspace", Command.PREVIOUS_PAGE),
    ("C-q", Command.PREVIOUS_PAGE),
    ("O", Command.OPEN_SPOTIFY_LINK_FROM_CLIPBOARD),
    ("?", Command.OPEN_COMMAND_HELP),
    ("C-h", Command.OPEN_COMMAND_HELP),
    ("q", Command.QUIT),
    ("C-c", Command.QUIT),
    ("esc", Command.CLOSE_POPUP),
    ("j", Command.SELECT_NEXT_OR_SCROLL_DOWN),
    ("C-n", Command.SELECT_NEXT_OR_SCROLL_DOWN),
    ("down", Command.SELECT_NEXT_OR_SCROLL_DOWN),
    ("k", Command.SELECT_PREVIOUS_OR_SCROLL_UP),
    ("C-p", Command.SELECT_PREVIOUS_OR_SCROLL_UP),
    ("up", Command.SELECT_PREVIOUS_OR_SCROLL_UP),
    ("page_up", Command.PAGE_SELECT_PREVIOUS_OR_SCROLL_UP),
    ("C-b", Command.PAGE_SELECT_PREVIOUS_OR_SCROLL_UP),
    ("page_down", Command.PAGE_SELECT_NEXT_OR_SCROLL_DOWN),
    ("C-f", Command.PAGE_SELECT_NEXT_OR_SCROLL_DOWN),
    ("g g", Command.SELECT_FIRST_OR_SCROLL_TO_TOP),
    ("home", Command.SELECT_FIRST_OR_SCROLL_TO_TOP),
    ("G", Command.SELECT_LAST_OR_SCROLL_TO_BOTTOM),
    ("end", Command.SELECT_LAST_OR_SCROLL_TO_BOTTOM),
    ("s t", Command.SORT_TRACK_BY_TITLE),
    ("s a", Command.SORT_TRACK_BY_ARTISTS),
    ("s A", Command.SORT_TRACK_BY_ALBUM),
    ("s d", Command.SORT_TRACK_BY_DURATION),
    ("s D", Command.SORT_TRACK_BY_ADDED_DATE),
    ("s r", Command.REVERSE_TRACK_ORDER),
    ("C-k", Command.MOVE_PLAYLIST_ITEM_UP),
    ("C-j", Command.MOVE_PLAYLIST_ITEM_DOWN),
)


@dataclass(frozen=True)
class Keymap:
    """A binding of a key sequence to a command."""

    key_sequence: KeySequence
    command: Command

    def include_in_help_screen(self) -> bool:
        """Return True if the binding should be listed in the help popup."""
        return self.command is not Command.NONE


def default_keymaps() -> list[Keymap]:
    """Return the application's built-in key bindings."""
    return [Keymap(parse_key_sequence(text), command) for text, command in _DEFAULT_BINDINGS]


@dataclass
class KeymapConfig:
    """The application's key bindings."""

    keymaps: list[Keymap] = field(default_factory=default_keymaps)

    def merge(self, keymaps: Iterable[Keymap]) -> None:
        """Put ``keymaps`` in front, keeping current bindings whose sequence they do not bind."""
        merged = list(keymaps)
        bound = {keymap.key_sequence for keymap in merged}
        for keymap in self.keymaps:
            if keymap.key_sequence not in bound:
                merged.append(keymap)
                bound.add(keymap.key_sequence)
        self.keymaps = merged

    def find_matched_prefix_keymaps(self, prefix: KeySequence) -> list[Keymap]:
        """Return the bindings whose key sequence starts with ``prefix``."""
        return [keymap for keymap in self.keymaps if prefix.is_prefix(keymap.key_sequence)]

    def find_command_from_key_sequence(self, key_sequence: KeySequence) -> Command | None:
        """Return the command bound to ``key_sequence``, or None."""
        return next(
            (keymap.command for keymap in self.keymaps if keymap.key_sequence == key_sequence),
            None,
        )


def parse_keymaps(document: Mapping[str, Any]) -> list[Keymap]:
    """Read the ``keymaps`` array of a parsed keymap configuration document."""
    entries = document.get("keymaps", [])
    if not isinstance(entries, list):
        raise ValueError("keymaps: expected an array of tables")
    keymaps = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise ValueError("keymaps: expected an array of tables")
        try:
            sequence_text = entry["key_sequence"]
            command_name = entry["command"]
        except KeyError as err:
            raise ValueError(f"keymap is missing field {err.args[0]}") from None
        if not isinstance(sequence_text, str) or not isinstance(command_name, str):
            raise ValueError("keymap fields key_sequence and command must be strings")
        keymaps.append(Keymap(parse_key_sequence(sequence_text), parse_command(command_name)))
    return keymaps


def load_keymap_config(path: str | Path) -> KeymapConfig:
    """Load key bindings from the keymap file in the ``path`` folder over the defaults."""
    config = KeymapConfig()
    file_path = Path(path) / KEYMAP_CONFIG_FILE
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as err:
        _log.warning(
            "Failed to open the keymap config file (path=%s): %s. "
            "Use the default configurations instead",
            file_path,
            err,
        )
        return config
    config.merge(parse_keymaps(tomllib.loads(content)))
    return config