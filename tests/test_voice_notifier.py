"""Tests for speech throttling."""

from __future__ import annotations

from typing import List, Tuple

from dangerzone.voice.voice_notifier import SpeechKind, VoiceNotifier


class _FakeSpeaker:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, ...]] = []

    def say(self, text: str) -> None:
        self.calls.append(("say", text))

    def cancel(self) -> None:
        self.calls.append(("cancel",))

    @property
    def said(self) -> List[str]:
        return [call[1] for call in self.calls if call[0] == "say"]


def test_same_text_within_cooldown_speaks_once() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker)
    assert notifier.notify("X", SpeechKind.INFO, 10.0) is True
    assert notifier.notify("X", SpeechKind.INFO, 12.0) is False
    assert speaker.said == ["X"]


def test_same_text_repeats_only_after_cooldown() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker, cooldown_seconds=3.0)
    notifier.notify("X", SpeechKind.INFO, 10.0)
    assert notifier.notify("X", SpeechKind.INFO, 13.0) is False
    assert notifier.notify("X", SpeechKind.INFO, 13.01) is True
    assert speaker.said == ["X", "X"]
    assert notifier.last_speech_ts == 13.01


def test_different_text_always_speaks() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker)
    for idx, text in enumerate(["persona", "taza", "persona", "taza"]):
        assert notifier.notify(text, SpeechKind.INFO, 10.0 + idx * 0.1) is True
    assert speaker.said == ["persona", "taza", "persona", "taza"]


def test_new_utterance_cancels_the_previous_one() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker)
    notifier.notify("a", SpeechKind.INFO, 1.0)
    assert speaker.calls == [("cancel",), ("say", "a")]


def test_disabled_info_voice_never_speaks() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker, info_enabled=False)
    for idx, text in enumerate(["a", "b", "a", "a"]):
        assert notifier.notify(text, SpeechKind.INFO, idx * 10.0) is False
    assert speaker.calls == []
    assert notifier.last_spoken_text == ""
    assert notifier.last_speech_ts == 0.0


def test_alerts_speak_while_info_voice_is_disabled() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker, info_enabled=False)
    assert notifier.notify("Alert!", SpeechKind.ALERT, 5.0) is True
    assert notifier.notify("Alert!", SpeechKind.ALERT, 6.0) is False
    assert speaker.said == ["Alert!"]


def test_alert_and_info_share_suppression_state() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker)
    notifier.notify("Alert!", SpeechKind.ALERT, 1.0)
    assert notifier.notify("Alert!", SpeechKind.INFO, 2.0) is False


def test_disabling_info_cancels_current_speech() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker)
    assert notifier.toggle_info() is False
    assert speaker.calls == [("cancel",)]
    assert notifier.toggle_info() is True


def test_empty_text_is_ignored() -> None:
    speaker = _FakeSpeaker()
    notifier = VoiceNotifier(speaker)
    assert notifier.notify("  ", SpeechKind.ALERT, 1.0) is False
    assert speaker.calls == []
