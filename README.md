# spotifyplayer

The configuration layer of a terminal music player: keys and key
sequences, the commands they are bound to, the actions offered on tracks,
albums, artists and playlists, colour themes, and the application settings
file.

## Installation

```
pip install .
```

The package needs Python 3.11 or later. It reads TOML with the standard
library's `tomllib` and writes it with `tomli-w`.

## Keys and key sequences (`spotifyplayer.key`)

Keys are written as `a`, `space`, `enter`, `tab`, `backtab`, `backspace`,
`esc`, `left`, `right`, `up`, `down`, `insert`, `delete`, `home`, `end`,
`page_up`, `page_down`, `f1` to `f12`, or any other single character.
Prefix a key with `C-` for Ctrl or `M-` for Alt, as in `C-r` or `M-enter`.
A key sequence is keys separated by single spaces, such as `g a`.

```python
from spotifyplayer.key import parse_key, parse_key_sequence

seq = parse_key_sequence("g a")
print(seq)                                     # g a
print(parse_key_sequence("g").is_prefix(seq))  # True
print(parse_key("C-space"))                    # C-space
```

`parse_key`, `parse_key_sequence` and `parse_key_code` raise `ValueError`
on text they cannot read. `key_from_event(code, modifiers)` turns a
`KeyCode` and `KeyModifiers` flags into a `Key`. It ignores SHIFT and gives
a key of kind `KeyKind.UNKNOWN` for any other combination of modifiers.

## Commands and actions (`spotifyplayer.command`)

`Command` lists every command a key sequence can be bound to. Its values
are the names used in configuration files, such as `"NextTrack"`, and
`Command.desc()` returns a one-line description. `parse_command(name)`
looks a command up by that name.

`construct_track_actions`, `construct_album_actions`,
`construct_artist_actions` and `construct_playlist_actions` return the
actions a popup offers on an item. Each takes the item's id and the ids
already in the user's library. The last action offered is either the one
that adds the item (like, save, follow) or the one that removes it.

```python
from spotifyplayer.command import construct_artist_actions

construct_artist_actions("artist-1", followed_artist_ids=["artist-1"])
# [ArtistAction.GO_TO_ARTIST_RADIO, ArtistAction.COPY_ARTIST_LINK, ArtistAction.UNFOLLOW]
```

## Keymaps (`spotifyplayer.keymap`)

```python
from spotifyplayer.config import get_config_folder_path
from spotifyplayer.key import parse_key_sequence
from spotifyplayer.keymap import load_keymap_config

keymaps = load_keymap_config(get_config_folder_path())
command = keymaps.find_command_from_key_sequence(parse_key_sequence("n"))
print(command.value, "-", command.desc())     # NextTrack - next track
```

`load_keymap_config(folder)` starts from `default_keymaps()` and reads
`keymap.toml` from the folder. If the file cannot be opened, it logs a
warning and keeps the defaults. Entries in the file replace the defaults
bound to the same key sequence, and the remaining defaults stay in place:

```toml
[[keymaps]]
command = "NextTrack"
key_sequence = "C-n"
```

`KeymapConfig.find_matched_prefix_keymaps(prefix)` returns every binding
whose sequence starts with `prefix`. `Keymap.include_in_help_screen()` is
false only for bindings to `Command.NONE`.

## Application settings (`spotifyplayer.config`)

`load_app_config(folder)` reads `app.toml` from the folder into an
`AppConfig`. Keys missing from the file keep their defaults, and keys the
package does not know are ignored. If the file does not exist, the defaults
are written there. A value of the wrong type or out of range raises
`ConfigError`. `enable_streaming` takes `"Always"`, `"DaemonOnly"` or
`"Never"`, and also accepts `true` and `false`.

`AppConfig.to_dict()` and `AppConfig.write_config_file(folder)` give the
settings back as TOML and leave out options that are unset.
`AppConfig.proxy_url()` returns the parsed proxy URL, or `None` when it is
unset or malformed. The default `copy_command` is `pbcopy` on macOS, `clip`
on Windows and `xclip -sel c` elsewhere.

`get_config_folder_path()` and `get_cache_folder_path()` return
`~/.config/spotify-player` and `~/.cache/spotify-player`.

## Themes (`spotifyplayer.theme`)

`load_theme_config(folder)` reads `theme.toml` and adds its themes to the
built-in `default` theme. A theme whose name is already known is skipped.
`ThemeConfig.find_theme(name)` returns a theme, or `None`.

```toml
[[themes]]
name = "mine"
[themes.palette]
background = "#1e1e2e"
blue = "LightBlue"
[themes.component_style]
block_title = { fg = "BrightBlue", modifiers = ["Bold"] }
```

Palette colours are named terminal colours, `#rrggbb` values or indexes
from 0 to 255. Component styles refer to palette entries by name
(`"Black"` to `"BrightYellow"`) or use `#rrggbb`. The style methods of a
`Theme` return a `ResolvedStyle` with concrete colours and `Modifier`
flags. These methods are `app_style()`, `selection_style(is_active)`,
`block_title()`, `border()`, `playback_track()`, `playback_artists()`,
`playback_album()`, `playback_metadata()`, `playback_progress_bar()`,
`current_playing()`, `page_desc()` and `table_header()`. A component with
no style in the theme gets a built-in one.

## What this package does not do

It has no terminal interface, no command-line program, no audio playback
and no client for a streaming service. It parses, stores and resolves
configuration, key bindings and themes, and it builds action lists. It
does not draw anything or run the commands it describes.

## Running the tests

```
pip install .[test]
pytest
```