import pytest

from spotifyplayer.key import (
    Key,
    KeyCode,
    KeyKind,
    KeyModifiers,
    KeySequence,
    key_code_to_string,
    key_from_event,
    parse_key,
    parse_key_code,
    parse_key_sequence,
)

NAMED = [
    "enter", "space", "tab", "backtab", "backspace", "esc", "left", "right",
    "up", "down", "insert", "delete", "home", "end", "page_up", "page_down",
    "f1", "f5", "f12",
]


@pytest.mark.parametrize("text", NAMED + ["a", "Z", "-", "?", "."])
def test_key_round_trip(text):
    assert str(parse_key(text)) == text
    assert str(parse_key(f"C-{text}")) == f"C-{text}"
    assert str(parse_key(f"M-{text}")) == f"M-{text}"


def test_parse_ctrl_key():
    assert parse_key("C-r") == Key(KeyKind.CTRL, KeyCode("char", char="r"))


def test_parse_alt_key():
    assert parse_key("M-enter") == Key(KeyKind.ALT, KeyCode("enter"))


def test_space_is_char():
    assert parse_key_code("space") == KeyCode("char", char=" ")
    assert key_code_to_string(KeyCode("char", char=" ")) == "space"


def test_function_key():
    assert parse_key_code("f12") == KeyCode("f", number=12)


@pytest.mark.parametrize("text", ["", " ", "X-a", "C-", "C- a", "ab", "f13", "C-xy"])
def test_invalid_keys(text):
    with pytest.raises(ValueError):
        parse_key(text)


def test_unknown_key_code_to_string():
    with pytest.raises(ValueError):
        key_code_to_string(KeyCode("f", number=13))
    with pytest.raises(ValueError):
        key_code_to_string(KeyCode("caps_lock"))


def test_unknown_key_display():
    assert str(Key(KeyKind.UNKNOWN)) == "unknown key"


def test_sequence_round_trip():
    seq = parse_key_sequence("g space C-a")
    assert len(seq.keys) == 3
    assert str(seq) == "g space C-a"


@pytest.mark.parametrize("text", ["", "g  a", "g X-a", " g"])
def test_invalid_sequences(text):
    with pytest.raises(ValueError):
        parse_key_sequence(text)


def test_is_prefix():
    g = parse_key_sequence("g")
    ga = parse_key_sequence("g a")
    ua = parse_key_sequence("u a")
    assert g.is_prefix(ga)
    assert ga.is_prefix(ga)
    assert not ga.is_prefix(g)
    assert not g.is_prefix(ua)
    assert KeySequence().is_prefix(ua)


def test_key_from_event_removes_shift():
    code = KeyCode("char", char="A")
    assert key_from_event(code, KeyModifiers.SHIFT) == Key(KeyKind.NONE, code)
    assert key_from_event(code, KeyModifiers.SHIFT | KeyModifiers.CONTROL) == Key(
        KeyKind.CTRL, code
    )


def test_key_from_event_kinds():
    code = KeyCode("enter")
    assert key_from_event(code, KeyModifiers.NONE) == Key(KeyKind.NONE, code)
    assert key_from_event(code, KeyModifiers.ALT) == Key(KeyKind.ALT, code)
    assert key_from_event(code, KeyModifiers.CONTROL | KeyModifiers.ALT).kind is KeyKind.UNKNOWN