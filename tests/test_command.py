import pytest

from spotifyplayer.command import (
    AlbumAction,
    ArtistAction,
    Command,
    PlaylistAction,
    TrackAction,
    construct_album_actions,
    construct_artist_actions,
    construct_playlist_actions,
    construct_track_actions,
    parse_command,
)


def test_desc_values():
    assert Command.NEXT_TRACK.desc() == "next track"
    assert Command.QUIT.desc() == "quit the application"
    assert Command.SEEK_FORWARD.desc() == "seek forward by 5s"


@pytest.mark.parametrize("command", list(Command))
def test_every_command_has_description(command):
    parsed = parse_command(command.value)
    assert parsed.desc().strip() != ""
    assert parsed.desc() == command.desc()


@pytest.mark.parametrize("command", list(Command))
def test_parse_command_round_trip(command):
    assert parse_command(command.value) is command


def test_parse_unknown_command():
    with pytest.raises(ValueError):
        parse_command("NotACommand")


def test_command_ordering_follows_declaration():
    none = parse_command(Command.NONE.value)
    next_track = parse_command(Command.NEXT_TRACK.value)
    move_up = parse_command(Command.MOVE_PLAYLIST_ITEM_UP.value)
    move_down = parse_command(Command.MOVE_PLAYLIST_ITEM_DOWN.value)
    assert none < next_track
    assert move_down > move_up
    parsed = [parse_command(command.value) for command in reversed(list(Command))]
    assert sorted(parsed) == list(Command)


def test_track_actions_not_liked():
    actions = construct_track_actions("t1", ["t2"])
    assert actions[-1] is TrackAction.ADD_TO_LIKED_TRACKS
    assert TrackAction.DELETE_FROM_LIKED_TRACKS not in actions
    assert actions[0] is TrackAction.GO_TO_ARTIST


def test_track_actions_liked():
    actions = construct_track_actions("t1", ["t1", "t2"])
    assert actions[-1] is TrackAction.DELETE_FROM_LIKED_TRACKS
    assert len(actions) == len(construct_track_actions("t1", []))


def test_album_actions():
    assert construct_album_actions("a", ["a"])[-1] is AlbumAction.DELETE_FROM_LIBRARY
    assert construct_album_actions("a", [])[-1] is AlbumAction.ADD_TO_LIBRARY


def test_artist_actions():
    assert construct_artist_actions("x", ["x"]) == [
        ArtistAction.GO_TO_ARTIST_RADIO,
        ArtistAction.COPY_ARTIST_LINK,
        ArtistAction.UNFOLLOW,
    ]
    assert construct_artist_actions("x", ["y"])[-1] is ArtistAction.FOLLOW


def test_playlist_actions():
    assert construct_playlist_actions("p", ["p"])[-1] is PlaylistAction.DELETE_FROM_LIBRARY
    assert construct_playlist_actions("p", iter(["q"]))[-1] is PlaylistAction.ADD_TO_LIBRARY