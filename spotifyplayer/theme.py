"""Colour themes: palettes, component styles and the theme configuration file."""

from __future__ import annotations

import dataclasses
import enum
import logging
import re
import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

THEME_CONFIG_FILE = "theme.toml"

_log = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")
_INDEX = re.compile(r"\+?[0-9]+")

_TERMINAL_COLOR_NAMES = (
    "Reset",
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "Gray",
    "DarkGray",
    "LightRed",
    "LightGreen",
    "LightYellow",
    "LightBlue",
    "LightMagenta",
    "LightCyan",
    "White",
)
_COLOR_BY_LOWER_NAME = {name.lower(): name for name in _TERMINAL_COLOR_NAMES}


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named ANSI colour, an RGB triple or a palette index."""

    name: str
    rgb: tuple[int, int, int] | None = None
    index: int | None = None

    def __post_init__(self) -> None:
        if self.name == "Rgb":
            if self.rgb is None or len(self.rgb) != 3 or not all(0 <= c <= 255 for c in self.rgb):
                raise ValueError("an RGB colour needs three components in 0..255")
        elif self.name == "Indexed":
            if self.index is None or not 0 <= self.index <= 255:
                raise ValueError("an indexed colour needs an index in 0..255")
        elif self.name not in _TERMINAL_COLOR_NAMES:
            raise ValueError(f"unknown colour name: {self.name}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls("Rgb", rgb=(r, g, b))

    @classmethod
    def indexed(cls, index: int) -> Color:
        return cls("Indexed", index=index)


def parse_color(text: str) -> Color:
    """Parse a colour name, ``#rrggbb`` hex value or palette index."""
    if not isinstance(text, str):
        raise ValueError(f"invalid color {text!r}: expected a string")
    normalized = text.lower()
    for ch in " -_":
        normalized = normalized.replace(ch, "")
    for old, new in (
        ("bright", "light"),
        ("grey", "gray"),
        ("silver", "gray"),
        ("lightblack", "darkgray"),
        ("lightwhite", "white"),
        ("lightgray", "white"),
    ):
        normalized = normalized.replace(old, new)
    name = _COLOR_BY_LOWER_NAME.get(normalized)
    if name is not None:
        return Color(name)
    if _INDEX.fullmatch(text) and int(text) <= 255:
        return Color.indexed(int(text))
    match = _HEX_COLOR.fullmatch(text)
    if match:
        return Color.from_rgb(*(int(part, 16) for part in match.groups()))
    raise ValueError(f"invalid color {text}: failed to parse color")


class Modifier(enum.Flag):
    """Text attributes applied by a style."""

    NONE = 0
    BOLD = 1
    ITALIC = 2
    REVERSED = 4


@dataclass(frozen=True)
class ResolvedStyle:
    """A style with concrete colours, ready to draw with."""

    fg: Color | None = None
    bg: Color | None = None
    modifiers: Modifier = Modifier.NONE


class StyleModifier(enum.Enum):
    """A text attribute as named in the theme file."""

    BOLD = "Bold"
    ITALIC = "Italic"
    REVERSED = "Reversed"

    @property
    def modifier(self) -> Modifier:
        return Modifier[self.name]


_PALETTE_COLOR_NAMES = {
    "Black": "black",
    "Blue": "blue",
    "Cyan": "cyan",
    "Green": "green",
    "Magenta": "magenta",
    "Red": "red",
    "White": "white",
    "Yellow": "yellow",
    "BrightBlack": "bright_black",
    "BrightWhite": "bright_white",
    "BrightRed": "bright_red",
    "BrightMagenta": "bright_magenta",
    "BrightGreen": "bright_green",
    "BrightCyan": "bright_cyan",
    "BrightBlue": "bright_blue",
    "BrightYellow": "bright_yellow",
}


@dataclass(frozen=True)
class StyleColor:
    """A colour in a component style: a palette entry or an RGB triple."""

    name: str
    rgb: tuple[int, int, int] | None = None

    def __post_init__(self) -> None:
        if self.name == "Rgb":
            if self.rgb is None or len(self.rgb) != 3 or not all(0 <= c <= 255 for c in self.rgb):
                raise ValueError("an RGB style colour needs three components in 0..255")
        elif self.name not in _PALETTE_COLOR_NAMES:
            raise ValueError(f"unknown style colour: {self.name}")

    def color(self, palette: Palette) -> Color:
        """Return the concrete colour this style colour stands for in ``palette``."""
        if self.name == "Rgb":
            return Color.from_rgb(*self.rgb)
        return getattr(palette, _PALETTE_COLOR_NAMES[self.name])


def parse_style_color(text: str) -> StyleColor:
    """Parse a palette colour name such as ``"BrightBlue"`` or a ``#rrggbb`` value."""
    if not isinstance(text, str):
        raise ValueError(f"invalid hex color: {text!r}")
    if text in _PALETTE_COLOR_NAMES:
        return StyleColor(text)
    match = _HEX_COLOR.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid hex color: {text}")
    return StyleColor("Rgb", tuple(int(part, 16) for part in match.groups()))


@dataclass(frozen=True)
class Style:
    """A component style in palette terms."""

    fg: StyleColor | None = None
    bg: StyleColor | None = None
    modifiers: tuple[StyleModifier, ...] = ()

    def resolve(self, palette: Palette) -> ResolvedStyle:
        """Turn the style into concrete colours using ``palette``."""
        modifiers = Modifier.NONE
        for modifier in self.modifiers:
            modifiers |= modifier.modifier
        return ResolvedStyle(
            fg=self.fg.color(palette) if self.fg is not None else None,
            bg=self.bg.color(palette) if self.bg is not None else None,
            modifiers=modifiers,
        )


def _table(what: str, data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a table, got {data!r}")
    return data


def parse_style(data: Mapping[str, Any]) -> Style:
    """Read a style table with optional ``fg``, ``bg`` and ``modifiers``."""
    table = _table("style", data)
    fg = table.get("fg")
    bg = table.get("bg")
    modifier_names = table.get("modifiers", [])
    if not isinstance(modifier_names, list):
        raise ValueError("style modifiers: expected an array")
    modifiers = []
    for name in modifier_names:
        try:
            modifiers.append(StyleModifier(name))
        except ValueError:
            raise ValueError(f"unknown style modifier: {name!r}") from None
    return Style(
        fg=parse_style_color(fg) if fg is not None else None,
        bg=parse_style_color(bg) if bg is not None else None,
        modifiers=tuple(modifiers),
    )


@dataclass(frozen=True)
class Palette:
    """The colours a theme is drawn with; defaults follow the terminal's ANSI colours."""

    background: Color | None = None
    foreground: Color | None = None
    black: Color = Color("Black")
    blue: Color = Color("Blue")
    cyan: Color = Color("Cyan")
    green: Color = Color("Green")
    magenta: Color = Color("Magenta")
    red: Color = Color("Red")
    white: Color = Color("Gray")
    yellow: Color = Color("Yellow")
    bright_black: Color = Color("DarkGray")
    bright_white: Color = Color("White")
    bright_red: Color = Color("LightRed")
    bright_magenta: Color = Color("LightMagenta")
    bright_green: Color = Color("LightGreen")
    bright_cyan: Color = Color("LightCyan")
    bright_blue: Color = Color("LightBlue")
    bright_yellow: Color = Color("LightYellow")


_PALETTE_FIELDS = tuple(f.name for f in dataclasses.fields(Palette))


def parse_palette(data: Mapping[str, Any]) -> Palette:
    """Read a palette table; missing colours keep their defaults."""
    table = _table("palette", data)
    values = {key: parse_color(table[key]) for key in _PALETTE_FIELDS if key in table}
    return Palette(**values)


@dataclass(frozen=True)
class ComponentStyle:
    """Per-component style overrides of a theme."""

    block_title: Style | None = None
    border: Style | None = None
    playback_track: Style | None = None
    playback_artists: Style | None = None
    playback_album: Style | None = None
    playback_metadata: Style | None = None
    playback_progress_bar: Style | None = None
    current_playing: Style | None = None
    page_desc: Style | None = None
    table_header: Style | None = None
    selection: Style | None = None


_COMPONENT_FIELDS = tuple(f.name for f in dataclasses.fields(ComponentStyle))

_BOLD = (StyleModifier.BOLD,)


@dataclass(frozen=True)
class Theme:
    """A named palette with component styles."""

    name: str
    palette: Palette = field(default_factory=Palette)
    component_style: ComponentStyle = field(default_factory=ComponentStyle)

    def _component(self, name: str, default: Style) -> ResolvedStyle:
        style = getattr(self.component_style, name)
        return (style if style is not None else default).resolve(self.palette)

    def app_style(self) -> ResolvedStyle:
        """Return the base style of the application window."""
        return ResolvedStyle(fg=self.palette.foreground, bg=self.palette.background)

    def selection_style(self, is_active: bool) -> ResolvedStyle:
        """Return the style of a selected row; plain when the window is not active."""
        if not is_active:
            return ResolvedStyle()
        if self.component_style.selection is None:
            return ResolvedStyle(modifiers=Modifier.REVERSED | Modifier.BOLD)
        return self.component_style.selection.resolve(self.palette)

    def block_title(self) -> ResolvedStyle:
        return self._component("block_title", Style(fg=StyleColor("Magenta")))

    def border(self) -> ResolvedStyle:
        return self._component("border", Style())

    def playback_track(self) -> ResolvedStyle:
        return self._component("playback_track", Style(fg=StyleColor("Cyan"), modifiers=_BOLD))

    def playback_artists(self) -> ResolvedStyle:
        return self._component("playback_artists", Style(fg=StyleColor("Cyan"), modifiers=_BOLD))

    def playback_album(self) -> ResolvedStyle:
        return self._component("playback_album", Style(fg=StyleColor("Yellow")))

    def playback_metadata(self) -> ResolvedStyle:
        return self._component("playback_metadata", Style(fg=StyleColor("BrightBlack")))

    def playback_progress_bar(self) -> ResolvedStyle:
        return self._component(
            "playback_progress_bar",
            Style(fg=StyleColor("Green"), bg=StyleColor("BrightBlack")),
        )

    def current_playing(self) -> ResolvedStyle:
        return self._component("current_playing", Style(fg=StyleColor("Green"), modifiers=_BOLD))

    def page_desc(self) -> ResolvedStyle:
        return self._component("page_desc", Style(fg=StyleColor("Cyan"), modifiers=_BOLD))

    def table_header(self) -> ResolvedStyle:
        return self._component("table_header", Style(fg=StyleColor("Blue")))


def parse_theme(data: Mapping[str, Any]) -> Theme:
    """Read a theme table; ``name`` is required."""
    table = _table("theme", data)
    name = table.get("name")
    if name is None:
        raise ValueError("theme is missing field name")
    if not isinstance(name, str):
        raise ValueError(f"theme name: expected a string, got {name!r}")
    palette = parse_palette(table["palette"]) if "palette" in table else Palette()
    components = _table("component_style", table.get("component_style", {}))
    component_style = ComponentStyle(
        **{key: parse_style(components[key]) for key in _COMPONENT_FIELDS if key in components}
    )
    return Theme(name=name, palette=palette, component_style=component_style)


def _default_themes() -> list[Theme]:
    return [Theme("default")]


@dataclass
class ThemeConfig:
    """The themes the application can switch between."""

    themes: list[Theme] = field(default_factory=_default_themes)

    def find_theme(self, name: str) -> Theme | None:
        """Return the theme called ``name``, or None."""
        return next((theme for theme in self.themes if theme.name == name), None)

    def merge(self, themes: Iterable[Theme]) -> None:
        """Add themes whose names are not taken yet."""
        for theme in themes:
            if self.find_theme(theme.name) is None:
                self.themes.append(theme)


def load_theme_config(path: str | Path) -> ThemeConfig:
    """Load themes from the theme file in the ``path`` folder on top of the defaults."""
    config = ThemeConfig()
    file_path = Path(path) / THEME_CONFIG_FILE
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as err:
        _log.warning(
            "Failed to open the theme config file (path=%s): %s. "
            "Use the default configurations instead",
            file_path,
            err,
        )
        return config
    document = tomllib.loads(content)
    entries = document.get("themes", [])
    if not isinstance(entries, list):
        raise ValueError("themes: expected an array of tables")
    config.merge(parse_theme(entry) for entry in entries)
    return config