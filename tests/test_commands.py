"""Tests for video_player.commands: the line-oriented command shell."""

from video_player.commands import GOODBYE, INVALID, WELCOME, CommandShell


def run_lines(player, make_view, lines, answers=()):
    view, out = make_view(answers)
    shell = CommandShell(player, view)
    for line in lines:
        if not shell.execute(line):
            break
    return out.getvalue().splitlines()


class TestExecute:
    """Test single commands and argument checks."""

    def test_number_of_videos(self, player, make_view):
        assert run_lines(player, make_view, ['NUMBER_OF_VIDEOS']) == ['5 videos in the library']

    def test_command_word_ignores_case(self, player, make_view):
        assert run_lines(player, make_view, ['play funny_dogs_video_id']) == [
            'Playing video: Funny Dogs'
        ]

    def test_blank_line_ignored(self, player, make_view):
        assert run_lines(player, make_view, ['', '   ']) == []

    def test_unknown_command(self, player, make_view):
        assert run_lines(player, make_view, ['DANCE']) == [INVALID]

    def test_missing_argument(self, player, make_view):
        assert run_lines(player, make_view, ['PLAY']) == [
            'Please enter PLAY command followed by video_id.'
        ]

    def test_extra_argument(self, player, make_view):
        assert run_lines(player, make_view, ['STOP now']) == ['STOP command takes no arguments.']

    def test_exit_returns_false(self, player, make_view):
        view, _ = make_view()
        shell = CommandShell(player, view)
        assert shell.execute('EXIT') is False
        assert shell.execute('exit') is False
        assert shell.execute('HELP') is True

    def test_help_lists_commands(self, player, make_view):
        lines = run_lines(player, make_view, ['HELP'])
        assert lines[0] == 'Available commands:'
        assert any('SEARCH_VIDEOS_WITH_TAG' in line for line in lines)

    def test_flag_reason_words_joined(self, player, make_view):
        lines = run_lines(player, make_view, ['FLAG_VIDEO funny_dogs_video_id too loud'])
        assert lines == ['Successfully flagged video: Funny Dogs (reason: too loud)']

    def test_flag_without_reason(self, player, make_view):
        lines = run_lines(player, make_view, ['FLAG_VIDEO funny_dogs_video_id'])
        assert lines == ['Successfully flagged video: Funny Dogs (reason: Not supplied)']

    def test_apostrophe_kept(self, player, make_view):
        lines = run_lines(player, make_view, ["CREATE_PLAYLIST dog's"])
        assert lines == ["Successfully created new playlist: dog's"]

    def test_backslash_kept(self, player, make_view):
        lines = run_lines(player, make_view, [r"CREATE_PLAYLIST a\b"])
        assert lines == [r"Successfully created new playlist: a\b"]
        assert player.playlists.find(r"a\b") is not None
        assert player.playlists.find("ab") is None

    def test_quotes_kept(self, player, make_view):
        lines = run_lines(player, make_view, ['CREATE_PLAYLIST "my"'])
        assert lines == ['Successfully created new playlist: "my"']
        assert player.playlists.find('"my"').name == '"my"'
        assert player.playlists.find("my") is None

    def test_quoted_words_are_separate_arguments(self, player, make_view):
        lines = run_lines(player, make_view, ['CREATE_PLAYLIST "my list"'])
        assert lines == ["Please enter CREATE_PLAYLIST command followed by playlist_name."]

    def test_flag_reason_quotes_kept(self, player, make_view):
        lines = run_lines(player, make_view, ['FLAG_VIDEO funny_dogs_video_id "too loud"'])
        assert lines == ['Successfully flagged video: Funny Dogs (reason: "too loud")']


class TestSessions:
    """Test multi-command sessions."""

    def test_playback_session(self, player, make_view):
        lines = run_lines(player, make_view, [
            'PLAY amazing_cats_video_id',
            'PAUSE',
            'PAUSE',
            'SHOW_PLAYING',
            'CONTINUE',
            'STOP',
            'STOP',
        ])
        assert lines == [
            'Playing video: Amazing Cats',
            'Pausing video: Amazing Cats',
            'Video already paused: Amazing Cats',
            'Currently playing: Amazing Cats (amazing_cats_video_id) [#cat #animal] - PAUSED',
            'Continuing video: Amazing Cats',
            'Stopping video: Amazing Cats',
            'Cannot stop video: No video is currently playing',
        ]

    def test_playlist_session(self, player, make_view):
        lines = run_lines(player, make_view, [
            'CREATE_PLAYLIST my_PLAYlist',
            'CREATE_PLAYLIST MY_playlist',
            'ADD_TO_PLAYLIST my_playlist amazing_cats_video_id',
            'SHOW_ALL_PLAYLISTS',
            'SHOW_PLAYLIST MY_PLAYLIST',
            'REMOVE_FROM_PLAYLIST my_playlist missing-id',
            'DELETE_PLAYLIST my_playlist',
            'SHOW_ALL_PLAYLISTS',
        ])
        assert lines == [
            'Successfully created new playlist: my_PLAYlist',
            'Cannot create playlist: A playlist with the same name already exists',
            'Added video to my_playlist: Amazing Cats',
            'Showing all playlists:',
            ' my_PLAYlist',
            'Showing playlist: MY_PLAYLIST',
            ' Amazing Cats (amazing_cats_video_id) [#cat #animal]',
            'Cannot remove video from my_playlist: Video does not exist',
            'Deleted playlist: my_playlist',
            'No playlists exist yet',
        ]

    def test_search_and_play(self, player, make_view):
        lines = run_lines(player, make_view, ['SEARCH_VIDEOS_WITH_TAG #cat'], answers=['2'])
        assert lines[0] == 'Here are the results for #cat:'
        assert lines[1] == ' 1) Amazing Cats (amazing_cats_video_id) [#cat #animal]'
        assert lines[2] == ' 2) Another Cat Video (another_cat_video_id) [#cat #animal]'
        assert lines[-1] == 'Playing video: Another Cat Video'

    def test_search_invalid_answer_plays_nothing(self, player, make_view):
        lines = run_lines(player, make_view, ['SEARCH_VIDEOS cat'], answers=['no'])
        assert not any(line.startswith('Playing video') for line in lines)
        assert player.current() is None

    def test_search_end_of_input(self, player, make_view):
        run_lines(player, make_view, ['SEARCH_VIDEOS cat'])
        assert player.current() is None

    def test_search_no_results_does_not_read(self, player, make_view):
        lines = run_lines(player, make_view, ['SEARCH_VIDEOS blah', 'NUMBER_OF_VIDEOS'], answers=['1'])
        assert lines == ['No search results for blah', '5 videos in the library']
        assert player.current() is None

    def test_show_all_videos_hides_flagged(self, player, make_view):
        lines = run_lines(player, make_view, [
            'FLAG_VIDEO amazing_cats_video_id',
            'SHOW_ALL_VIDEOS',
        ])
        assert not any('amazing_cats_video_id' in line for line in lines[2:])
        assert len(lines) == 1 + 1 + 4


class TestRun:
    """Test the read-eval loop."""

    def test_run_until_exit(self, player, make_view):
        view, out = make_view(['PLAY nothing_video_id', 'EXIT', 'STOP'])
        CommandShell(player, view).run()
        text = out.getvalue()
        assert text.startswith(WELCOME[0])
        assert 'Playing video: Video about nothing' in text
        assert 'Stopping video' not in text
        assert text.rstrip().endswith(GOODBYE)

    def test_run_until_end_of_input(self, player, make_view):
        view, out = make_view(['PLAY_RANDOM'])
        CommandShell(player, view).run()
        assert 'Playing video: ' in out.getvalue()
        assert out.getvalue().rstrip().endswith(GOODBYE)
