"""
Unit Tests for Channels
=======================

Tests for the console session loop and the greeting audio player.
Audio decoding and playback are mocked; console I/O goes through
scripted input and an in-memory stream.
"""

import io
import random
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

import awarebot
from awarebot.channels import ConsoleChannel, VoiceGreeting
from awarebot.channels.console import EMPTY_INPUT_REMINDER, FAREWELL
from awarebot.channels.voice import ASSET_DIR
from awarebot.chatbot import ResponseRouter
from awarebot.config import ConsoleConfig
from awarebot.error_handling import AssetError


def scripted_input(lines):
    """Build an input function that replays lines, then signals EOF."""
    remaining = list(lines)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError()
        return remaining.pop(0)

    _input.prompts = prompts
    return _input


@pytest.fixture
def console_config():
    return ConsoleConfig(typing_delay=0, banner_delay=0, use_color=False)


@pytest.fixture
def router():
    return ResponseRouter(rng=random.Random(0))


def make_channel(router, config, lines, greeting=None):
    output = io.StringIO()
    channel = ConsoleChannel(
        router, config, greeting=greeting,
        input_func=scripted_input(lines), output=output, sleep=Mock()
    )
    return channel, output


class TestConsoleChannel:
    """Test the interactive console session."""

    def test_exit_ends_session_without_routing(self, console_config):
        router = Mock(spec=ResponseRouter)
        channel, output = make_channel(router, console_config, ["Sam", "  EXIT  "])

        assert channel.run() == 0
        router.route.assert_not_called()
        assert output.getvalue().rstrip().endswith(FAREWELL)
        assert not channel.is_running

    def test_name_reprompt(self, router, console_config):
        channel, output = make_channel(router, console_config, ["", "   ", "Sam", "exit"])
        channel.run()

        assert channel.user_name == "Sam"
        assert channel.input_func.prompts[1] == "Please enter a valid name: "
        assert "Welcome, Sam!" in output.getvalue()

    def test_empty_line_reminder(self, router, console_config):
        channel, output = make_channel(router, console_config, ["Sam", "", "exit"])
        channel.run()

        assert EMPTY_INPUT_REMINDER in output.getvalue()

    def test_replies_and_memory(self, router, console_config):
        lines = ["Sam", "I'm interested in privacy", "suggest something", "gibberish", "exit"]
        channel, output = make_channel(router, console_config, lines)
        channel.run()

        text = output.getvalue()
        assert "Great! I'll remember you're interested in privacy." in text
        assert "As someone interested in privacy, you might also explore secure backups." in text
        assert "Sorry Sam, I didn’t understand that. Could you rephrase?" in text
        assert channel.memory.get_interest() == "privacy"

    def test_eof_says_goodbye(self, router, console_config):
        channel, output = make_channel(router, console_config, ["Sam", "password"])

        assert channel.run() == 0
        assert output.getvalue().rstrip().endswith(FAREWELL)
        assert channel.memory.get_last_topic() == "password"

    def test_ctrl_c_says_goodbye(self, router, console_config):
        answers = iter(["Sam", "password"])

        def interrupting_input(prompt):
            try:
                return next(answers)
            except StopIteration:
                raise KeyboardInterrupt() from None

        output = io.StringIO()
        channel = ConsoleChannel(router, console_config, input_func=interrupting_input,
                                 output=output, sleep=Mock())

        assert channel.run() == 0
        assert output.getvalue().rstrip().endswith(FAREWELL)
        assert not channel.is_running

    def test_ctrl_c_during_name_prompt(self, console_config):
        router = Mock(spec=ResponseRouter)
        channel = ConsoleChannel(router, console_config, input_func=Mock(side_effect=KeyboardInterrupt),
                                 output=io.StringIO(), sleep=Mock())

        assert channel.run() == 0
        assert channel.user_name == ""
        router.route.assert_not_called()

    def test_typing_delay_per_character(self, router):
        config = ConsoleConfig(typing_delay=0.01, banner_delay=0, use_color=False)
        channel, output = make_channel(router, config, [])
        channel.type_write("abc")

        assert output.getvalue() == "abc\n"
        assert channel.sleep.call_count == 3

    def test_greeting_notice_shown(self, router, console_config):
        greeting = Mock(spec=VoiceGreeting)
        greeting.play.return_value = "(Audio skipped [Welcome.wav]: Greeting audio not found)"
        channel, output = make_channel(router, console_config, ["Sam", "exit"], greeting=greeting)
        channel.run()

        greeting.play.assert_called_once()
        assert output.getvalue().startswith("(Audio skipped [Welcome.wav]")

    def test_color_codes_only_when_enabled(self, router):
        config = ConsoleConfig(typing_delay=0, banner_delay=0, use_color=True)
        channel, output = make_channel(router, config, ["Sam", "exit"])
        channel.run()

        assert "\x1b[" in output.getvalue()


class TestVoiceGreeting:
    """Test best-effort greeting playback."""

    def test_missing_file(self, tmp_path):
        greeting = VoiceGreeting(str(tmp_path / "missing.wav"))

        with pytest.raises(AssetError):
            greeting.load()

        notice = greeting.play()
        assert notice.startswith("(Audio skipped [")
        assert "missing.wav" in notice

    def test_relative_path_resolved_in_package_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        greeting = VoiceGreeting("Welcome.wav")

        assert greeting.path == ASSET_DIR / "Welcome.wav"
        assert greeting.path.is_absolute()
        assert ASSET_DIR == Path(awarebot.__file__).resolve().parent

    def test_absolute_path_kept(self, tmp_path):
        assert VoiceGreeting(str(tmp_path / "hello.wav")).path == tmp_path / "hello.wav"

    def test_disabled(self, tmp_path):
        assert VoiceGreeting(str(tmp_path / "missing.wav"), enabled=False).play() is None

    def test_plays_audio(self, tmp_path):
        wav = tmp_path / "Welcome.wav"
        wav.write_bytes(b"RIFF")
        audio = MagicMock()
        audio.__len__.return_value = 1500

        with patch("awarebot.channels.voice.AudioSegment") as segment, \
                patch("awarebot.channels.voice.play") as play:
            segment.from_wav.return_value = audio
            assert VoiceGreeting(str(wav)).play() is None

        segment.from_wav.assert_called_once_with(str(wav))
        play.assert_called_once_with(audio)

    def test_playback_failure_is_not_fatal(self, tmp_path):
        wav = tmp_path / "Welcome.wav"
        wav.write_bytes(b"RIFF")

        with patch("awarebot.channels.voice.AudioSegment"), \
                patch("awarebot.channels.voice.play", side_effect=OSError("no audio device")):
            notice = VoiceGreeting(str(wav)).play()

        assert "no audio device" in notice
