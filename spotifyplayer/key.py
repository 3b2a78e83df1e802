"""Keyboard keys, key sequences and their text forms."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_NAMED_CODES = (
    "enter",
    "tab",
    "backtab",
    "backspace",
    "esc",
    "left",
    "right",
    "up",
    "down",
    "insert",
    "delete",
    "home",
    "end",
    "page_up",
    "page_down",
)
_FUNCTION_KEYS = range(1, 13)


@dataclass(frozen=True)
class KeyCode:
    """A key code as reported by the terminal.

    ``name`` is ``"char"`` for printable characters (stored in ``char``),
    ``"f"`` for function keys (numbered by ``number``), or the name of a
    special key such as ``"enter"`` or ``"page_up"``.
    """

    name: str
    char: str | None = None
    number: int | None = None

    def __post_init__(self) -> None:
        if self.name == "char" and (self.char is None or len(self.char) != 1):
            raise ValueError("a character key code needs exactly one character")
        if self.name == "f" and self.number is None:
            raise ValueError("a function key code needs a number")


class KeyModifiers(enum.Flag):
    """Modifier keys held down while a key is pressed."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


class KeyKind(enum.Enum):
    """How a key was modified."""

    UNKNOWN = "unknown"
    NONE = "none"
    CTRL = "ctrl"
    ALT = "alt"


@dataclass(frozen=True)
class Key:
    """A key received from the user's input."""

    kind: KeyKind
    code: KeyCode | None = None

    def __str__(self) -> str:
        if self.kind is KeyKind.UNKNOWN or self.code is None:
            return "unknown key"
        text = key_code_to_string(self.code)
        if self.kind is KeyKind.CTRL:
            return f"C-{text}"
        if self.kind is KeyKind.ALT:
            return f"M-{text}"
        return text


@dataclass(frozen=True)
class KeySequence:
    """A combination of keys pressed one after another."""

    keys: tuple[Key, ...] = ()

    def __str__(self) -> str:
        return " ".join(str(key) for key in self.keys)

    def is_prefix(self, other: KeySequence) -> bool:
        """Return True if this sequence is a prefix of ``other``."""
        if len(self.keys) > len(other.keys):
            return False
        return all(a == b for a, b in zip(self.keys, other.keys))


def parse_key_code(text: str) -> KeyCode:
    """Parse the text form of a key code, raising ValueError if invalid."""
    if text == "space":
        return KeyCode("char", char=" ")
    if text in _NAMED_CODES:
        return KeyCode(text)
    if text.startswith("f") and text[1:].isdigit():
        number = int(text[1:])
        if number in _FUNCTION_KEYS and text == f"f{number}":
            return KeyCode("f", number=number)
    if len(text) == 1 and text != " ":
        return KeyCode("char", char=text)
    raise ValueError(f"unknown key code: {text}")


def _parse_key_or_none(text: str) -> Key | None:
    try:
        if len(text) > 2 and text[1] == "-" and text[2] != " ":
            prefix, rest = text[0], text[2:]
            if prefix == "C":
                return Key(KeyKind.CTRL, parse_key_code(rest))
            if prefix == "M":
                return Key(KeyKind.ALT, parse_key_code(rest))
            return None
        return Key(KeyKind.NONE, parse_key_code(text))
    except ValueError:
        return None


def parse_key(text: str) -> Key:
    """Parse a key such as ``"a"``, ``"C-r"`` or ``"M-enter"``."""
    key = _parse_key_or_none(text)
    if key is None:
        raise ValueError(f"failed to parse key: unknown key {text}")
    return key


def parse_key_sequence(text: str) -> KeySequence:
    """Parse space separated keys such as ``"g a"``."""
    keys = [_parse_key_or_none(part) for part in text.split(" ")]
    if not keys or any(key is None for key in keys):
        raise ValueError(f"failed to parse key sequence: invalid key sequence {text}")
    return KeySequence(tuple(keys))


def key_from_event(code: KeyCode, modifiers: KeyModifiers) -> Key:
    """Build a key from a terminal key event, ignoring SHIFT."""
    modifiers &= ~KeyModifiers.SHIFT
    if modifiers == KeyModifiers.NONE:
        return Key(KeyKind.NONE, code)
    if modifiers == KeyModifiers.ALT:
        return Key(KeyKind.ALT, code)
    if modifiers == KeyModifiers.CONTROL:
        return Key(KeyKind.CTRL, code)
    return Key(KeyKind.UNKNOWN)


def key_code_to_string(code: KeyCode) -> str:
    """Return the text form of a key code, raising ValueError if it has none."""
    if code.name == "char":
        return "space" if code.char == " " else code.char
    if code.name == "f" and code.number in _FUNCTION_KEYS:
        return f"f{code.number}"
    if code.name in _NAMED_CODES:
        return code.name
    raise ValueError(f"unknown key: {code!r}")