# speech_module.py
"""
Offline TTS backend with a single pending slot.

Design goals:
- Offline only (pyttsx3)
- No overlapping speech (single worker thread)
- Newest utterance wins: say() replaces pending text and stops playback
- Never block the frame loop
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional

from dangerzone.config import LANGUAGE, SPEECH_RATE


@dataclass(frozen=True)
class SpeechConfig:
    language: str = LANGUAGE
    rate: Optional[int] = SPEECH_RATE  # None = keep default
    volume: Optional[float] = None     # 0.0..1.0; None = keep default


class SpeechEngine:
    """
    Public interface expected by VoiceNotifier:

    class SpeechEngine:
        def say(self, text: str) -> None
        def cancel(self) -> None
    """

    def __init__(self, config: SpeechConfig | None = None, engine: Any = None) -> None:
        self._logger = logging.getLogger(__name__)
        self.config = config or SpeechConfig()

        self._pending: Optional[str] = None
        self._pending_lock = threading.Lock()
        self._wake = threading.Event()
        self._shutdown = threading.Event()
        self._engine_lock = threading.Lock()

        self._engine = engine if engine is not None else self._init_engine()
        if self._engine is None:
            self._logger.warning("TTS unavailable: speech calls will be ignored.")
            return
        self._apply_config()

        self._worker = threading.Thread(target=self._run_worker, name="SpeechWorker", daemon=True)
        self._worker.start()

    @property
    def available(self) -> bool:
        return self._engine is not None and not self._shutdown.is_set()

    # ---------------------------
    # Public API
    # ---------------------------

    def say(self, text: str) -> None:
        """Replace any pending utterance with ``text``. Non-blocking."""
        text = (text or "").strip()
        if not text or not self.available:
            return
        with self._pending_lock:
            self._pending = text
        self._wake.set()

    def cancel(self) -> None:
        """Drop pending text and stop the current utterance if possible."""
        with self._pending_lock:
            self._pending = None
        if not self.available:
            return
        try:
            self._engine.stop()
        except Exception as exc:
            self._logger.debug("TTS stop failed: %s", exc)

    def shutdown(self) -> None:
        """Stop worker and release resources."""
        if self._engine is None or self._shutdown.is_set():
            return
        self.cancel()
        self._shutdown.set()
        self._wake.set()
        self._worker.join(timeout=1.0)

    # ---------------------------
    # Internal helpers
    # ---------------------------

    def _init_engine(self) -> Any:
        try:
            import pyttsx3

            return pyttsx3.init()
        except Exception as exc:
            self._logger.error("pyttsx3 init failed: %s", exc)
            return None

    def _apply_config(self) -> None:
        with self._engine_lock:
            if self.config.rate is not None:
                try:
                    self._engine.setProperty("rate", int(self.config.rate))
                except Exception as exc:
                    self._logger.error("Failed to set speech rate: %s", exc)

            if self.config.volume is not None:
                try:
                    volume = max(0.0, min(1.0, float(self.config.volume)))
                    self._engine.setProperty("volume", volume)
                except Exception as exc:
                    self._logger.error("Failed to set speech volume: %s", exc)

            self._select_voice(self.config.language)

    def _select_voice(self, language: str) -> None:
        try:
            voices = self._engine.getProperty("voices") or []
        except Exception as exc:
            self._logger.error("Failed to list voices: %s", exc)
            return
        for voice in voices:
            if self._matches_language(voice, language):
                try:
                    self._engine.setProperty("voice", voice.id)
                    self._logger.info("Using voice: %s", voice.id)
                except Exception as exc:
                    self._logger.error("Failed to set voice: %s", exc)
                return
        self._logger.warning("No '%s' voice found; using default voice.", language)

    @staticmethod
    def _matches_language(voice: Any, language: str) -> bool:
        fields = [getattr(voice, "id", "") or "", getattr(voice, "name", "") or ""]
        for lang in getattr(voice, "languages", []) or []:
            if isinstance(lang, bytes):
                fields.append(lang.decode("utf-8", errors="ignore"))
            else:
                fields.append(str(lang))
        haystack = " ".join(fields).lower().replace("-", "_")
        want = language.lower()
        return f"{want}_" in haystack or haystack.startswith(want) or f"/{want}" in haystack

    def _take_pending(self) -> Optional[str]:
        with self._pending_lock:
            text, self._pending = self._pending, None
            self._wake.clear()
            return text

    def _run_worker(self) -> None:
        while not self._shutdown.is_set():
            if not self._wake.wait(timeout=0.2):
                continue
            text = self._take_pending()
            if not text or self._shutdown.is_set():
                continue
            try:
                with self._engine_lock:
                    self._engine.say(text)
                    self._engine.runAndWait()
            except Exception as exc:
                # a failed utterance must not kill the worker
                self._logger.error("pyttsx3 speak failed: %s", exc)
