"""Application commands and the actions offered on items."""

from __future__ import annotations

import enum
import functools
from collections.abc import Iterable


@functools.total_ordering
class Command(enum.Enum):
    """A command that a key sequence can be bound to."""

    NONE = "None"

    NEXT_TRACK = "NextTrack"
    PREVIOUS_TRACK = "PreviousTrack"
    RESUME_PAUSE = "ResumePause"
    PLAY_RANDOM = "PlayRandom"
    REPEAT = "Repeat"
    SHUFFLE = "Shuffle"
    VOLUME_UP = "VolumeUp"
    VOLUME_DOWN = "VolumeDown"
    MUTE = "Mute"
    SEEK_FORWARD = "SeekForward"
    SEEK_BACKWARD = "SeekBackward"

    QUIT = "Quit"
    OPEN_COMMAND_HELP = "OpenCommandHelp"
    CLOSE_POPUP = "ClosePopup"

    SELECT_NEXT_OR_SCROLL_DOWN = "SelectNextOrScrollDown"
    SELECT_PREVIOUS_OR_SCROLL_UP = "SelectPreviousOrScrollUp"
    PAGE_SELECT_NEXT_OR_SCROLL_DOWN = "PageSelectNextOrScrollDown"
    PAGE_SELECT_PREVIOUS_OR_SCROLL_UP = "PageSelectPreviousOrScrollUp"
    SELECT_FIRST_OR_SCROLL_TO_TOP = "SelectFirstOrScrollToTop"
    SELECT_LAST_OR_SCROLL_TO_BOTTOM = "SelectLastOrScrollToBottom"

    CHOOSE_SELECTED = "ChooseSelected"

    REFRESH_PLAYBACK = "RefreshPlayback"

    RESTART_INTEGRATED_CLIENT = "RestartIntegratedClient"

    FOCUS_NEXT_WINDOW = "FocusNextWindow"
    FOCUS_PREVIOUS_WINDOW = "FocusPreviousWindow"

    SWITCH_THEME = "SwitchTheme"
    SWITCH_DEVICE = "SwitchDevice"
    SEARCH = "Search"
    QUEUE = "Queue"

    SHOW_ACTIONS_ON_SELECTED_ITEM = "ShowActionsOnSelectedItem"
    SHOW_ACTIONS_ON_CURRENT_TRACK = "ShowActionsOnCurrentTrack"
    ADD_SELECTED_ITEM_TO_QUEUE = "AddSelectedItemToQueue"

    BROWSE_USER_PLAYLISTS = "BrowseUserPlaylists"
    BROWSE_USER_FOLLOWED_ARTISTS = "BrowseUserFollowedArtists"
    BROWSE_USER_SAVED_ALBUMS = "BrowseUserSavedAlbums"

    CURRENTLY_PLAYING_CONTEXT_PAGE = "CurrentlyPlayingContextPage"
    TOP_TRACK_PAGE = "TopTrackPage"
    RECENTLY_PLAYED_TRACK_PAGE = "RecentlyPlayedTrackPage"
    LIKED_TRACK_PAGE = "LikedTrackPage"
    LYRIC_PAGE = "LyricPage"
    LIBRARY_PAGE = "LibraryPage"
    SEARCH_PAGE = "SearchPage"
    BROWSE_PAGE = "BrowsePage"
    PREVIOUS_PAGE = "PreviousPage"
    OPEN_SPOTIFY_LINK_FROM_CLIPBOARD = "OpenSpotifyLinkFromClipboard"

    SORT_TRACK_BY_TITLE = "SortTrackByTitle"
    SORT_TRACK_BY_ARTISTS = "SortTrackByArtists"
    SORT_TRACK_BY_ALBUM = "SortTrackByAlbum"
    SORT_TRACK_BY_DURATION = "SortTrackByDuration"
    SORT_TRACK_BY_ADDED_DATE = "SortTrackByAddedDate"
    REVERSE_TRACK_ORDER = "ReverseTrackOrder"

    MOVE_PLAYLIST_ITEM_UP = "MovePlaylistItemUp"
    MOVE_PLAYLIST_ITEM_DOWN = "MovePlaylistItemDown"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        members = list(Command)
        return members.index(self) < members.index(other)

    def desc(self) -> str:
        """Return a short description of the command."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Command.NONE: "do nothing",
    Command.NEXT_TRACK: "next track",
    Command.PREVIOUS_TRACK: "previous track",
    Command.RESUME_PAUSE: "resume/pause based on the current playback",
    Command.PLAY_RANDOM: "play a random track in the current context",
    Command.REPEAT: "cycle the repeat mode",
    Command.SHUFFLE: "toggle the shuffle mode",
    Command.VOLUME_UP: "increase playback volume by 5%",
    Command.VOLUME_DOWN: "decrease playback volume by 5%",
    Command.MUTE: "toggle playback volume between 0% and previous level",
    Command.SEEK_FORWARD: "seek forward by 5s",
    Command.SEEK_BACKWARD: "seek backward by 5s",
    Command.QUIT: "quit the application",
    Command.OPEN_COMMAND_HELP: "open a command help popup",
    Command.CLOSE_POPUP: "close a popup",
    Command.RESTART_INTEGRATED_CLIENT: "restart the integrated librespot client",
    Command.SELECT_NEXT_OR_SCROLL_DOWN: "select the next item in a list/table or scroll down",
    Command.SELECT_PREVIOUS_OR_SCROLL_UP: "select the previous item in a list/table or scroll up",
    Command.PAGE_SELECT_NEXT_OR_SCROLL_DOWN: (
        "select the next page item in a list/table or scroll a page down"
    ),
    Command.PAGE_SELECT_PREVIOUS_OR_SCROLL_UP: (
        "select the previous page item in a list/table or scroll a page up"
    ),
    Command.SELECT_FIRST_OR_SCROLL_TO_TOP: (
        "select the first item in a list/table or scroll to the top"
    ),
    Command.SELECT_LAST_OR_SCROLL_TO_BOTTOM: (
        "select the last item in a list/table or scroll to the bottom"
    ),
    Command.CHOOSE_SELECTED: "choose the selected item and act on it",
    Command.REFRESH_PLAYBACK: "manually refresh the current playback",
    Command.SHOW_ACTIONS_ON_SELECTED_ITEM: "open a popup showing actions on a selected item",
    Command.SHOW_ACTIONS_ON_CURRENT_TRACK: "open a popup showing actions on the current track",
    Command.ADD_SELECTED_ITEM_TO_QUEUE: "add the selected item to queue",
    Command.FOCUS_NEXT_WINDOW: "focus the next focusable window (if any)",
    Command.FOCUS_PREVIOUS_WINDOW: "focus the previous focusable window (if any)",
    Command.SWITCH_THEME: "open a popup for switching theme",
    Command.SWITCH_DEVICE: "open a popup for switching device",
    Command.SEARCH: "open a popup for searching in the current page",
    Command.QUEUE: "open a popup for showing the current queue",
    Command.BROWSE_USER_PLAYLISTS: "open a popup for browsing user's playlists",
    Command.BROWSE_USER_FOLLOWED_ARTISTS: "open a popup for browsing user's followed artists",
    Command.BROWSE_USER_SAVED_ALBUMS: "open a popup for browsing user's saved albums",
    Command.CURRENTLY_PLAYING_CONTEXT_PAGE: "go to the currently playing context page",
    Command.TOP_TRACK_PAGE: "go to the user top track page",
    Command.RECENTLY_PLAYED_TRACK_PAGE: "go to the user recently played track page",
    Command.LIKED_TRACK_PAGE: "go to the user liked track page",
    Command.LYRIC_PAGE: "go to the lyric page of the current track",
    Command.LIBRARY_PAGE: "go to the user library page",
    Command.SEARCH_PAGE: "go to the search page",
    Command.BROWSE_PAGE: "go to the browse page",
    Command.PREVIOUS_PAGE: "go to the previous page",
    Command.OPEN_SPOTIFY_LINK_FROM_CLIPBOARD: "open a Spotify link from clipboard",
    Command.SORT_TRACK_BY_TITLE: "sort the track table (if any) by track's title",
    Command.SORT_TRACK_BY_ARTISTS: "sort the track table (if any) by track's artists",
    Command.SORT_TRACK_BY_ALBUM: "sort the track table (if any) by track's album",
    Command.SORT_TRACK_BY_DURATION: "sort the track table (if any) by track's duration",
    Command.SORT_TRACK_BY_ADDED_DATE: "sort the track table (if any) by track's added date",
    Command.REVERSE_TRACK_ORDER: "reverse the order of the track table (if any)",
    Command.MOVE_PLAYLIST_ITEM_UP: "move playlist item up one position",
    Command.MOVE_PLAYLIST_ITEM_DOWN: "move playlist item down one position",
}


class TrackAction(enum.Enum):
    GO_TO_ARTIST = "GoToArtist"
    GO_TO_ALBUM = "GoToAlbum"
    GO_TO_TRACK_RADIO = "GoToTrackRadio"
    SHOW_ACTIONS_ON_ALBUM = "ShowActionsOnAlbum"
    SHOW_ACTIONS_ON_ARTIST = "ShowActionsOnArtist"
    ADD_TO_QUEUE = "AddToQueue"
    ADD_TO_PLAYLIST = "AddToPlaylist"
    DELETE_FROM_CURRENT_PLAYLIST = "DeleteFromCurrentPlaylist"
    ADD_TO_LIKED_TRACKS = "AddToLikedTracks"
    DELETE_FROM_LIKED_TRACKS = "DeleteFromLikedTracks"
    COPY_TRACK_LINK = "CopyTrackLink"


class AlbumAction(enum.Enum):
    GO_TO_ARTIST = "GoToArtist"
    GO_TO_ALBUM_RADIO = "GoToAlbumRadio"
    SHOW_ACTIONS_ON_ARTIST = "ShowActionsOnArtist"
    ADD_TO_LIBRARY = "AddToLibrary"
    DELETE_FROM_LIBRARY = "DeleteFromLibrary"
    COPY_ALBUM_LINK = "CopyAlbumLink"


class ArtistAction(enum.Enum):
    GO_TO_ARTIST_RADIO = "GoToArtistRadio"
    FOLLOW = "Follow"
    UNFOLLOW = "Unfollow"
    COPY_ARTIST_LINK = "CopyArtistLink"


class PlaylistAction(enum.Enum):
    GO_TO_PLAYLIST_RADIO = "GoToPlaylistRadio"
    ADD_TO_LIBRARY = "AddToLibrary"
    DELETE_FROM_LIBRARY = "DeleteFromLibrary"
    COPY_PLAYLIST_LINK = "CopyPlaylistLink"


def parse_command(name: str) -> Command:
    """Return the command with the given configuration name."""
    try:
        return Command(name)
    except ValueError:
        raise ValueError(f"unknown command: {name}") from None


def construct_track_actions(track_id: str, liked_track_ids: Iterable[str]) -> list[TrackAction]:
    """List the actions available on a track."""
    actions = [
        TrackAction.GO_TO_ARTIST,
        TrackAction.GO_TO_ALBUM,
        TrackAction.GO_TO_TRACK_RADIO,
        TrackAction.SHOW_ACTIONS_ON_ALBUM,
        TrackAction.SHOW_ACTIONS_ON_ARTIST,
        TrackAction.COPY_TRACK_LINK,
        TrackAction.ADD_TO_PLAYLIST,
        TrackAction.ADD_TO_QUEUE,
    ]
    if track_id in set(liked_track_ids):
        actions.append(TrackAction.DELETE_FROM_LIKED_TRACKS)
    else:
        actions.append(TrackAction.ADD_TO_LIKED_TRACKS)
    return actions


def construct_album_actions(album_id: str, saved_album_ids: Iterable[str]) -> list[AlbumAction]:
    """List the actions available on an album."""
    actions = [
        AlbumAction.GO_TO_ARTIST,
        AlbumAction.GO_TO_ALBUM_RADIO,
        AlbumAction.SHOW_ACTIONS_ON_ARTIST,
        AlbumAction.COPY_ALBUM_LINK,
    ]
    if album_id in set(saved_album_ids):
        actions.append(AlbumAction.DELETE_FROM_LIBRARY)
    else:
        actions.append(AlbumAction.ADD_TO_LIBRARY)
    return actions


def construct_artist_actions(
    artist_id: str, followed_artist_ids: Iterable[str]
) -> list[ArtistAction]:
    """List the actions available on an artist."""
    actions = [ArtistAction.GO_TO_ARTIST_RADIO, ArtistAction.COPY_ARTIST_LINK]
    if artist_id in set(followed_artist_ids):
        actions.append(ArtistAction.UNFOLLOW)
    else:
        actions.append(ArtistAction.FOLLOW)
    return actions


def construct_playlist_actions(
    playlist_id: str, library_playlist_ids: Iterable[str]
) -> list[PlaylistAction]:
    """List the actions available on a playlist."""
    actions = [PlaylistAction.GO_TO_PLAYLIST_RADIO, PlaylistAction.COPY_PLAYLIST_LINK]
    if playlist_id in set(library_playlist_ids):
        actions.append(PlaylistAction.DELETE_FROM_LIBRARY)
    else:
        actions.append(PlaylistAction.ADD_TO_LIBRARY)
    return actions