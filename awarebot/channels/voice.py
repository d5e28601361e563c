"""
Voice Greeting
==============

Plays the optional WAV greeting at session start. The greeting is
best-effort: a missing file or audio backend never stops the session.
"""

import logging
from pathlib import Path
from typing import Optional

from pydub import AudioSegment
from pydub.playback import play

from ..error_handling import AssetError

logger = logging.getLogger(__name__)

# Relative greeting paths are looked up in the package directory
ASSET_DIR = Path(__file__).resolve().parent.parent


class VoiceGreeting:
    """Loads and plays the greeting audio."""

    def __init__(self, path: str, enabled: bool = True):
        self.path = Path(path)
        if not self.path.is_absolute():
            self.path = ASSET_DIR / self.path
        self.enabled = enabled

    def load(self) -> AudioSegment:
        """
        Load the greeting audio.

        Raises:
            AssetError: If the file is missing or not a readable WAV
        """
        if not self.path.is_file():
            raise AssetError("Greeting audio not found", path=str(self.path))
        try:
            return AudioSegment.from_wav(str(self.path))
        except Exception as e:
            raise AssetError(f"Cannot decode greeting audio: {e}", path=str(self.path), original_error=e) from e

    def play(self) -> Optional[str]:
        """
        Play the greeting, blocking until it finishes.

        Returns:
            None on success or when disabled, otherwise a notice to show the user
        """
        if not self.enabled:
            logger.debug("Voice greeting disabled")
            return None

        try:
            audio = self.load()
            play(audio)
            logger.info(f"Played greeting audio ({len(audio) / 1000.0:.1f}s)")
            return None
        except AssetError as e:
            logger.info(f"Greeting audio skipped [{e.path}]: {e}")
            return f"(Audio skipped [{e.path}]: {e})"
        except Exception as e:
            logger.warning(f"Greeting playback failed [{self.path}]: {e}")
            return f"(Audio skipped [{self.path}]: {e})"
