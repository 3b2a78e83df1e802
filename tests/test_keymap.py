import tomllib

import pytest

from spotifyplayer.command import Command
from spotifyplayer.key import parse_key_sequence
from spotifyplayer.keymap import (
    Keymap,
    KeymapConfig,
    default_keymaps,
    load_keymap_config,
    parse_keymaps,
)


def seq(text):
    return parse_key_sequence(text)


@pytest.mark.parametrize(
    "text, command",
    [
        ("n", Command.NEXT_TRACK),
        ("space", Command.RESUME_PAUSE),
        ("C-r", Command.REPEAT),
        ("g g", Command.SELECT_FIRST_OR_SCROLL_TO_TOP),
        ("u A", Command.BROWSE_USER_SAVED_ALBUMS),
        ("C-j", Command.MOVE_PLAYLIST_ITEM_DOWN),
        ("esc", Command.CLOSE_POPUP),
    ],
)
def test_default_bindings(text, command):
    assert KeymapConfig().find_command_from_key_sequence(seq(text)) == command


def test_unbound_sequence_has_no_command():
    assert KeymapConfig().find_command_from_key_sequence(seq("x y")) is None


def test_default_sequences_are_unique():
    sequences = [keymap.key_sequence for keymap in default_keymaps()]
    assert len(sequences) == len(set(sequences))


def test_prefix_matches():
    config = KeymapConfig()
    matched = config.find_matched_prefix_keymaps(seq("g"))
    assert matched
    assert all(str(keymap.key_sequence).startswith("g ") for keymap in matched)
    commands = {keymap.command for keymap in matched}
    assert Command.LIBRARY_PAGE in commands
    assert Command.SHOW_ACTIONS_ON_SELECTED_ITEM in commands
    assert Command.NEXT_TRACK not in commands


def test_full_sequence_is_its_own_prefix():
    matched = KeymapConfig().find_matched_prefix_keymaps(seq("g t"))
    assert [keymap.command for keymap in matched] == [Command.TOP_TRACK_PAGE]


def test_include_in_help_screen():
    assert not Keymap(seq("x"), Command.NONE).include_in_help_screen()
    assert Keymap(seq("x"), Command.QUIT).include_in_help_screen()


def test_merge_overrides_existing_sequence():
    config = KeymapConfig()
    before = len(config.keymaps)
    config.merge([Keymap(seq("n"), Command.QUIT)])
    assert config.find_command_from_key_sequence(seq("n")) == Command.QUIT
    assert len(config.keymaps) == before
    assert config.keymaps[0] == Keymap(seq("n"), Command.QUIT)


def test_merge_adds_new_sequence():
    config = KeymapConfig()
    before = len(config.keymaps)
    config.merge([Keymap(seq("x"), Command.NONE)])
    assert len(config.keymaps) == before + 1
    assert config.find_command_from_key_sequence(seq("x")) == Command.NONE
    assert config.find_command_from_key_sequence(seq("q")) == Command.QUIT


def test_parse_keymaps():
    document = tomllib.loads(
        '[[keymaps]]\ncommand = "NextTrack"\nkey_sequence = "g n"\n'
        '[[keymaps]]\ncommand = "None"\nkey_sequence = "q"\n'
    )
    assert parse_keymaps(document) == [
        Keymap(seq("g n"), Command.NEXT_TRACK),
        Keymap(seq("q"), Command.NONE),
    ]


def test_parse_empty_document():
    assert parse_keymaps({}) == []


@pytest.mark.parametrize(
    "entry",
    [
        {"command": "NextTrack"},
        {"key_sequence": "n"},
        {"command": "Bogus", "key_sequence": "n"},
        {"command": "NextTrack", "key_sequence": "X-n"},
    ],
)
def test_parse_invalid_entries(entry):
    with pytest.raises(ValueError):
        parse_keymaps({"keymaps": [entry]})


def test_load_without_file_gives_defaults(tmp_path):
    assert load_keymap_config(tmp_path).keymaps == default_keymaps()


def test_load_merges_user_file(tmp_path):
    (tmp_path / "keymap.toml").write_text(
        '[[keymaps]]\ncommand = "None"\nkey_sequence = "q"\n', encoding="utf-8"
    )
    config = load_keymap_config(tmp_path)
    assert config.find_command_from_key_sequence(seq("q")) == Command.NONE
    assert len(config.keymaps) == len(default_keymaps())


def test_load_invalid_toml_raises(tmp_path):
    (tmp_path / "keymap.toml").write_text("keymaps = [", encoding="utf-8")
    with pytest.raises(tomllib.TOMLDecodeError):
        load_keymap_config(tmp_path)