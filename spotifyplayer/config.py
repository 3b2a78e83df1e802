"""Application configuration: defaults, loading and saving."""

from __future__ import annotations

import dataclasses
import enum
import logging
import sys
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar
from urllib.parse import SplitResult, urlsplit

import tomli_w

DEFAULT_CONFIG_FOLDER = ".config/spotify-player"
DEFAULT_CACHE_FOLDER = ".cache/spotify-player"
APP_CONFIG_FILE = "app.toml"
THEME_CONFIG_FILE = "theme.toml"
KEYMAP_CONFIG_FILE = "keymap.toml"

_log = logging.getLogger(__name__)


class ConfigError(ValueError):
    """A configuration value is missing or has the wrong form."""


class Position(enum.Enum):
    TOP = "Top"
    BOTTOM = "Bottom"


class BorderType(enum.Enum):
    HIDDEN = "Hidden"
    PLAIN = "Plain"
    ROUNDED = "Rounded"
    DOUBLE = "Double"
    THICK = "Thick"


class ProgressBarType(enum.Enum):
    LINE = "Line"
    RECTANGLE = "Rectangle"


class StreamingType(enum.Enum):
    ALWAYS = "Always"
    DAEMON_ONLY = "DaemonOnly"
    NEVER = "Never"


def parse_streaming_type(value: Any) -> StreamingType:
    """Read a streaming mode; booleans are accepted for older configurations."""
    if isinstance(value, bool):
        return StreamingType.ALWAYS if value else StreamingType.NEVER
    if isinstance(value, str):
        try:
            return StreamingType(value)
        except ValueError:
            pass
    raise ConfigError(f"invalid streaming type: {value!r}")


# value converters: each takes the dotted field name and the raw value

def _string(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{name}: expected a string, got {value!r}")
    return value


def _boolean(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name}: expected a boolean, got {value!r}")
    return value


def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name}: expected a number, got {value!r}")
    return float(value)


def _unsigned(bits: int) -> Callable[[str, Any], int]:
    limit = 2**bits - 1

    def convert(name: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{name}: expected an integer, got {value!r}")
        if not 0 <= value <= limit:
            raise ConfigError(f"{name}: {value} is out of range 0..{limit}")
        return value

    return convert


def _string_list(name: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        raise ConfigError(f"{name}: expected an array of strings, got {value!r}")
    return [_string(name, item) for item in value]


def _enum(cls: type[enum.Enum]) -> Callable[[str, Any], enum.Enum]:
    def convert(name: str, value: Any) -> enum.Enum:
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(f"{name}: invalid value {value!r}") from None

    return convert


def _streaming(name: str, value: Any) -> StreamingType:
    try:
        return parse_streaming_type(value)
    except ConfigError as err:
        raise ConfigError(f"{name}: {err}") from None


def _table(name: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{name}: expected a table, got {value!r}")
    return value


def _apply(target: Any, data: Any, prefix: str) -> None:
    """Update fields of a configuration object from a table, ignoring unknown keys."""
    for key, value in _table(prefix or "config", data).items():
        name = f"{prefix}.{key}" if prefix else key
        kind = target._KINDS.get(key)
        if kind is None:
            _log.debug("ignoring unknown configuration key %s", name)
            continue
        if isinstance(kind, type) and dataclasses.is_dataclass(kind):
            current = getattr(target, key)
            if current is None:
                setattr(target, key, _build(kind, value, name))
            else:
                _apply(current, value, name)
        else:
            setattr(target, key, kind(name, value))


def _build(cls: type, data: Any, prefix: str) -> Any:
    """Create a configuration object from a table that sets every field."""
    table = _table(prefix, data)
    missing = [key for key in cls._KINDS if key not in table]
    if missing:
        raise ConfigError(f"{prefix}: missing field {missing[0]}")
    values = {}
    for key, kind in cls._KINDS.items():
        name = f"{prefix}.{key}"
        if isinstance(kind, type) and dataclasses.is_dataclass(kind):
            values[key] = _build(kind, table[key], name)
        else:
            values[key] = kind(name, table[key])
    return cls(**values)


def _to_toml_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if dataclasses.is_dataclass(value):
        return {
            f.name: _to_toml_value(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, list):
        return [_to_toml_value(item) for item in value]
    return value


@dataclass
class ExternalCommand:
    """An external program with its arguments."""

    command: str
    args: list[str] = field(default_factory=list)

    _KINDS: ClassVar[dict[str, Any]] = {"command": _string, "args": _string_list}


@dataclass
class DeviceConfig:
    """Settings of the integrated playback device."""

    name: str = "spotify-player"
    device_type: str = "speaker"
    volume: int = 70
    bitrate: int = 320
    audio_cache: bool = False
    normalization: bool = False

    _KINDS: ClassVar[dict[str, Any]] = {
        "name": _string,
        "device_type": _string,
        "volume": _unsigned(8),
        "bitrate": _unsigned(16),
        "audio_cache": _boolean,
        "normalization": _boolean,
    }


@dataclass
class NotifyFormat:
    """Templates of the desktop notification."""

    summary: str = "{track} • {artists}"
    body: str = "{album}"

    _KINDS: ClassVar[dict[str, Any]] = {"summary": _string, "body": _string}


def _default_copy_command() -> ExternalCommand:
    if sys.platform == "darwin":
        return ExternalCommand("pbcopy", [])
    if sys.platform == "win32":
        return ExternalCommand("clip", [])
    return ExternalCommand("xclip", ["-sel", "c"])


def _default_media_control() -> bool:
    return sys.platform not in ("darwin", "win32")


@dataclass
class AppConfig:
    """The application's settings."""

    theme: str = "dracula"
    client_id: str = "65b708073fc0480ea92a077233ca87bd"
    client_port: int = 8080
    copy_command: ExternalCommand = field(default_factory=_default_copy_command)
    player_event_hook_command: ExternalCommand | None = None
    playback_format: str = "{track} • {artists}\n{album}\n{metadata}"
    notify_format: NotifyFormat = field(default_factory=NotifyFormat)
    tracks_playback_limit: int = 50
    proxy: str | None = None
    ap_port: int | None = None
    app_refresh_duration_in_ms: int = 32
    playback_refresh_duration_in_ms: int = 0
    page_size_in_rows: int = 20
    play_icon: str = "▶"
    pause_icon: str = "▌▌"
    liked_icon: str = "♥"
    border_type: BorderType = BorderType.PLAIN
    progress_bar_type: ProgressBarType = ProgressBarType.RECTANGLE
    playback_window_position: Position = Position.TOP
    cover_img_length: int = 9
    cover_img_width: int = 5
    cover_img_scale: float = 1.0
    playback_window_width: int = 6
    enable_media_control: bool = field(default_factory=_default_media_control)
    enable_streaming: StreamingType = StreamingType.ALWAYS
    enable_notify: bool = True
    enable_cover_image_cache: bool = True
    default_device: str = "spotify-player"
    device: DeviceConfig = field(default_factory=DeviceConfig)
    notify_streaming_only: bool = False

    _KINDS: ClassVar[dict[str, Any]] = {
        "theme": _string,
        "client_id": _string,
        "client_port": _unsigned(16),
        "copy_command": ExternalCommand,
        "player_event_hook_command": ExternalCommand,
        "playback_format": _string,
        "notify_format": NotifyFormat,
        "tracks_playback_limit": _unsigned(64),
        "proxy": _string,
        "ap_port": _unsigned(16),
        "app_refresh_duration_in_ms": _unsigned(64),
        "playback_refresh_duration_in_ms": _unsigned(64),
        "page_size_in_rows": _unsigned(64),
        "play_icon": _string,
        "pause_icon": _string,
        "liked_icon": _string,
        "border_type": _enum(BorderType),
        "progress_bar_type": _enum(ProgressBarType),
        "playback_window_position": _enum(Position),
        "cover_img_length": _unsigned(64),
        "cover_img_width": _unsigned(64),
        "cover_img_scale": _number,
        "playback_window_width": _unsigned(64),
        "enable_media_control": _boolean,
        "enable_streaming": _streaming,
        "enable_notify": _boolean,
        "enable_cover_image_cache": _boolean,
        "default_device": _string,
        "device": DeviceConfig,
        "notify_streaming_only": _boolean,
    }

    def update_from_dict(self, data: Mapping[str, Any]) -> None:
        """Overwrite the settings present in ``data``; unknown keys are ignored."""
        _apply(self, data, "")

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a TOML-ready table, leaving out unset options."""
        return _to_toml_value(self)

    def write_config_file(self, path: str | Path) -> None:
        """Write the settings to the application config file in the ``path`` folder."""
        (Path(path) / APP_CONFIG_FILE).write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")

    def proxy_url(self) -> SplitResult | None:
        """Return the parsed proxy URL, or None if unset or invalid."""
        if self.proxy is None:
            return None
        try:
            url = urlsplit(self.proxy)
            url.port  # raises ValueError on a malformed port
        except ValueError as err:
            _log.warning("failed to parse proxy url %s: %s", self.proxy, err)
            return None
        if not url.scheme or not url.netloc:
            _log.warning("failed to parse proxy url %s: not an absolute URL", self.proxy)
            return None
        return url


def load_app_config(path: str | Path) -> AppConfig:
    """Load settings from the ``path`` folder, writing the defaults there if no file exists."""
    config = AppConfig()
    file_path = Path(path) / APP_CONFIG_FILE
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        config.write_config_file(path)
        return config
    try:
        document = tomllib.loads(content)
    except tomllib.TOMLDecodeError as err:
        raise ConfigError(f"{file_path}: {err}") from err
    config.update_from_dict(document)
    return config


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError:
        raise ConfigError("cannot find the $HOME folder") from None


def get_config_folder_path() -> Path:
    """Return the application's configuration folder."""
    return _home() / DEFAULT_CONFIG_FOLDER


def get_cache_folder_path() -> Path:
    """Return the application's cache folder."""
    return _home() / DEFAULT_CACHE_FOLDER