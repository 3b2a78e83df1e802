import tomllib

import pytest

from spotifyplayer.config import (
    AppConfig,
    BorderType,
    ConfigError,
    DeviceConfig,
    ExternalCommand,
    StreamingType,
    get_cache_folder_path,
    get_config_folder_path,
    load_app_config,
    parse_streaming_type,
)


def test_defaults():
    config = AppConfig()
    assert config.theme == "dracula"
    assert config.client_id == "65b708073fc0480ea92a077233ca87bd"
    assert config.client_port == 8080
    assert config.default_device == "spotify-player"
    assert config.device == DeviceConfig("spotify-player", "speaker", 70, 320, False, False)
    assert config.border_type is BorderType.PLAIN
    assert config.proxy is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, StreamingType.ALWAYS),
        (False, StreamingType.NEVER),
        ("Always", StreamingType.ALWAYS),
        ("DaemonOnly", StreamingType.DAEMON_ONLY),
        ("Never", StreamingType.NEVER),
    ],
)
def test_parse_streaming_type(value, expected):
    assert parse_streaming_type(value) is expected


@pytest.mark.parametrize("value", ["always", 3, None])
def test_parse_streaming_type_rejects(value):
    with pytest.raises(ConfigError):
        parse_streaming_type(value)


def test_partial_nested_update_keeps_other_fields():
    config = AppConfig()
    config.update_from_dict({"device": {"volume": 50}, "enable_streaming": False})
    assert config.device.volume == 50
    assert config.device.name == "spotify-player"
    assert config.enable_streaming is StreamingType.NEVER


def test_enum_update():
    config = AppConfig()
    config.update_from_dict({"border_type": "Rounded"})
    assert config.border_type is BorderType.ROUNDED


def test_unknown_keys_are_ignored():
    config = AppConfig()
    config.update_from_dict({"no_such_option": 1, "theme": "default"})
    assert config.theme == "default"


@pytest.mark.parametrize(
    "data",
    [
        {"client_port": "x"},
        {"client_port": 70000},
        {"client_port": True},
        {"device": {"volume": 300}},
        {"device": "speaker"},
        {"border_type": "Curly"},
        {"enable_notify": "yes"},
        {"copy_command": {"args": ["-a", 1]}},
    ],
)
def test_invalid_values(data):
    with pytest.raises(ConfigError):
        AppConfig().update_from_dict(data)


def test_hook_command_built_from_full_table():
    config = AppConfig()
    config.update_from_dict(
        {"player_event_hook_command": {"command": "hook.sh", "args": ["--flag"]}}
    )
    assert config.player_event_hook_command == ExternalCommand("hook.sh", ["--flag"])


def test_hook_command_needs_every_field():
    with pytest.raises(ConfigError):
        AppConfig().update_from_dict({"player_event_hook_command": {"command": "hook.sh"}})


def test_copy_command_partial_update():
    config = AppConfig()
    original_args = list(config.copy_command.args)
    config.update_from_dict({"copy_command": {"command": "wl-copy"}})
    assert config.copy_command.command == "wl-copy"
    assert config.copy_command.args == original_args


def test_to_dict_round_trip():
    config = AppConfig()
    config.update_from_dict(
        {
            "theme": "default",
            "proxy": "http://localhost:3128",
            "player_event_hook_command": {"command": "hook.sh", "args": []},
            "enable_streaming": "DaemonOnly",
        }
    )
    restored = AppConfig()
    restored.update_from_dict(config.to_dict())
    assert restored == config


def test_to_dict_omits_unset_options():
    data = AppConfig().to_dict()
    assert "proxy" not in data
    assert "player_event_hook_command" not in data
    assert data["enable_streaming"] == "Always"
    assert data["device"]["bitrate"] == 320


def test_load_writes_defaults_when_missing(tmp_path):
    config = load_app_config(tmp_path)
    assert config == AppConfig()
    written = tomllib.loads((tmp_path / "app.toml").read_text(encoding="utf-8"))
    assert written["theme"] == "dracula"
    assert load_app_config(tmp_path) == config


def test_load_reads_existing_file(tmp_path):
    (tmp_path / "app.toml").write_text(
        'theme = "default"\n[device]\nvolume = 10\n', encoding="utf-8"
    )
    config = load_app_config(tmp_path)
    assert config.theme == "default"
    assert config.device.volume == 10
    assert config.client_port == 8080


def test_load_invalid_toml(tmp_path):
    (tmp_path / "app.toml").write_text("theme = ", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_app_config(tmp_path)


def test_proxy_url():
    config = AppConfig(proxy="http://localhost:3128")
    url = config.proxy_url()
    assert url.hostname == "localhost"
    assert url.port == 3128


@pytest.mark.parametrize("proxy", [None, "not a url", "http://localhost:notaport"])
def test_proxy_url_invalid(proxy):
    assert AppConfig(proxy=proxy).proxy_url() is None


def test_folder_paths(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert get_config_folder_path() == tmp_path / ".config/spotify-player"
    assert get_cache_folder_path() == tmp_path / ".cache/spotify-player"