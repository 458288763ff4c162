# voice_notifier.py
"""
Speech throttling for alerts and object announcements.

- Same text is repeated only after the cooldown (default: 3s)
- New text is spoken right away and cuts off whatever is playing
- Info announcements can be muted; alerts never are
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from dangerzone.config import SPEAK_COOLDOWN_S


class SpeechKind(str, Enum):
    ALERT = "alert"
    INFO = "info"


class Speaker(Protocol):
    def say(self, text: str) -> None: ...

    def cancel(self) -> None: ...


class VoiceNotifier:
    def __init__(
        self,
        speaker: Speaker,
        cooldown_seconds: float = SPEAK_COOLDOWN_S,
        info_enabled: bool = True,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._speaker = speaker
        self._cooldown = cooldown_seconds
        self._info_enabled = info_enabled
        self.last_spoken_text = ""
        self.last_speech_ts = 0.0

    @property
    def info_enabled(self) -> bool:
        return self._info_enabled

    def set_info_enabled(self, enabled: bool) -> None:
        self._info_enabled = enabled
        if not enabled:
            self._speaker.cancel()
            self._logger.warning("Object voice disabled. Danger alerts will still sound.")
        else:
            self._logger.info("Object voice enabled.")

    def toggle_info(self) -> bool:
        self.set_info_enabled(not self._info_enabled)
        return self._info_enabled

    def notify(self, text: str, kind: SpeechKind, now: float) -> bool:
        """Speak ``text`` unless it repeats the last utterance within the cooldown.

        Returns True when the text was handed to the speaker.
        """
        if kind is SpeechKind.INFO and not self._info_enabled:
            return False
        text = (text or "").strip()
        if not text:
            return False
        if text == self.last_spoken_text and (now - self.last_speech_ts) <= self._cooldown:
            return False

        # at most one utterance at a time: newest wins, nothing queues
        self._speaker.cancel()
        self._speaker.say(text)
        self.last_spoken_text = text
        self.last_speech_ts = now
        self._logger.debug("Speaking (%s): %s", kind.value, text)
        return True
