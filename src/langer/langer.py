"""
Runtime language state: which language is speaking and what it says.

:class:`Langer` owns a translation dictionary and keeps the active language
key and its payload in lock-step. The chosen language is persisted through a
recorder and, when nothing is remembered, derived from a preset.

Mutating operations are coroutines because recorders and preset resolvers
may suspend. There is no internal lock: overlapping calls on one instance
interleave at those suspension points and the last writer wins.
"""

from __future__ import annotations

__all__ = ["Langer", "Options", "Preset", "Preferences", "default_options"]

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from pathlib import Path
from typing import Any, Generic, Self, TypedDict, TypeVar

from langer.errors import (
    AlreadyDisposedError,
    AlreadyInitializedError,
    EmptyDictionaryError,
    LanguageUnavailableError,
    NotReadyError,
    PresetUnavailableError,
)
from langer.preset import preset_language, system_locale_preferences
from langer.recorder import Recorder, StateFileRecorder, call_maybe_async

logger = logging.getLogger(__name__)

T = TypeVar("T")

Preset = str | Callable[[list[str], list[str]], str | Awaitable[str]]
Preferences = Sequence[str] | Callable[[], Sequence[str]]
Listener = Callable[["Langer[Any]"], None]


class Options(TypedDict, total=False):
    recorder: Recorder
    preset: Preset
    preferences: Preferences


def default_options() -> Options:
    """Return the options used for anything not passed to :class:`Langer`."""
    return {
        "recorder": StateFileRecorder(),
        "preset": preset_language,
        "preferences": system_locale_preferences,
    }


class Langer(Generic[T]):
    """Language state machine.

    Lifecycle: uninitialized -> initialized -> disposed. A failed
    :meth:`initialize` leaves the instance uninitialized, and a disposed
    instance rejects every operation.

    Args:
        options: Optional ``recorder``, ``preset`` and ``preferences``.
            Missing entries fall back to :func:`default_options`.
    """

    def __init__(self, options: Options | None = None) -> None:
        opts: dict[str, Any] = dict(default_options())
        opts.update({k: v for k, v in (options or {}).items() if v is not None})

        self._recorder: Recorder | None = opts["recorder"]
        self._preset: Preset | None = opts["preset"]
        self._preferences: Preferences | None = opts["preferences"]

        self._data: Mapping[str, T] | None = None
        self._available_languages: list[str] | None = None
        self._curr_language: str | None = None
        self._says: T | None = None

        self._initialized = False
        self._disposed = False
        self._listeners: list[Listener] = []

    @classmethod
    def from_config(cls, path: str | Path | None = None) -> Self:
        """Create an instance configured by a TOML settings file.

        See :func:`langer.config.load_settings` for the file lookup.
        """
        from langer.config import load_settings, options_from_config

        return cls(options_from_config(load_settings(path)))

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def available_languages(self) -> list[str]:
        """Language keys of the current dictionary, in dictionary order.

        Raises:
            NotReadyError: If not initialized or already disposed.
        """
        self._ensure_ready()
        return list(self._available_languages or ())

    @property
    def speaking(self) -> str:
        """The active language key.

        Raises:
            NotReadyError: If not initialized or already disposed.
        """
        self._ensure_ready()
        return self._curr_language  # type: ignore[return-value]

    @property
    def says(self) -> T:
        """The translation payload of the active language.

        Raises:
            NotReadyError: If not initialized or already disposed.
        """
        self._ensure_ready()
        return self._says  # type: ignore[return-value]

    async def initialize(self, data: Mapping[str, T], reset: bool = False) -> Self:
        """Load ``data`` and choose the starting language.

        Unless ``reset`` is set, the recorder's remembered language is
        restored when it is available. Otherwise the preset decides.

        Args:
            data: Mapping of language key to translation payload.
            reset: Ignore the remembered language and use the preset.

        Returns:
            Self: This instance, for chaining.

        Raises:
            AlreadyInitializedError: If already initialized.
            NotReadyError: If disposed.
            EmptyDictionaryError: If ``data`` has no language keys.
            PresetUnavailableError: If the preset picks an unknown language.
            NoMatchError: If the default resolver finds no match.
        """
        if self._disposed:
            raise NotReadyError()
        if self._initialized:
            raise AlreadyInitializedError()

        recorder = self._recorder
        langs, lang = await self._choose(data, reset)
        if self._disposed:
            raise NotReadyError()
        self._assign(data, langs, lang)
        try:
            await self._record(recorder, lang)
        except Exception:
            self._clear()
            raise
        if self._disposed:
            raise NotReadyError()

        self._initialized = True
        logger.debug("Initialized with %s, speaking %r", langs, lang)
        self._notify()
        return self

    async def update(self, data: Mapping[str, T], reset: bool = False) -> Self:
        """Replace the dictionary while keeping the lifecycle.

        The active language is kept if ``data`` still provides it and
        ``reset`` is not set; otherwise the preset picks a new one.

        Raises:
            NotReadyError: If not initialized or already disposed.
            EmptyDictionaryError: If ``data`` has no language keys.
            PresetUnavailableError: If the preset picks an unknown language.
        """
        self._ensure_ready()

        recorder = self._recorder
        langs, lang = await self._choose(data, reset)
        self._ensure_ready()
        self._assign(data, langs, lang)
        try:
            await self._record(recorder, lang)
        finally:
            self._notify()
        self._ensure_ready()
        return self

    async def speak(self, language: str) -> None:
        """Switch to ``language`` and record it.

        The in-memory switch is not undone if recording fails.

        Raises:
            NotReadyError: If not initialized or already disposed.
            LanguageUnavailableError: If ``language`` is not available.
        """
        self._ensure_ready()
        langs = self._available_languages or []
        if language not in langs:
            raise LanguageUnavailableError(language, langs)
        await self._change_says(language)

    async def reset_language(self) -> str:
        """Switch to the preset language and record it.

        Returns:
            str: The language now speaking.

        Raises:
            NotReadyError: If not initialized or already disposed.
            PresetUnavailableError: If the preset picks an unknown language.
        """
        self._ensure_ready()
        lang = await self._resolve_preset(list(self._available_languages or ()))
        await self._change_says(lang)
        return lang

    async def dispose(self) -> None:
        """Release the dictionary, state and collaborators.

        Raises:
            AlreadyDisposedError: If already disposed.
        """
        if self._disposed:
            raise AlreadyDisposedError()

        self._recorder = None
        self._preset = None
        self._preferences = None
        self._clear()
        self._disposed = True
        logger.debug("Disposed")

        self._notify()
        self._listeners.clear()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(self)`` once after every state change.

        Each mutating call notifies at most once, after all of its fields
        have been assigned.

        Returns:
            Callable[[], None]: A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _ensure_ready(self) -> None:
        if not self._initialized or self._disposed:
            raise NotReadyError()

    async def _choose(self, data: Mapping[str, T], reset: bool) -> tuple[list[str], str]:
        """Pick the language for ``data`` without touching any state."""
        langs = list(data.keys())
        if not langs:
            raise EmptyDictionaryError()

        if not reset:
            if self._curr_language is not None:
                if self._curr_language in langs:
                    return langs, self._curr_language
                logger.debug(
                    "Language %r dropped by update, resolving preset",
                    self._curr_language,
                )
            elif self._recorder is not None:
                remembered = await call_maybe_async(self._recorder.get)
                if remembered and remembered in langs:
                    return langs, remembered
                if remembered:
                    logger.debug(
                        "Remembered language %r is not in %s, resolving preset",
                        remembered,
                        langs,
                    )

        return langs, await self._resolve_preset(langs)

    async def _resolve_preset(self, langs: list[str]) -> str:
        preset = self._preset
        if isinstance(preset, str):
            lang = preset
        elif preset is None:
            raise NotReadyError()
        else:
            lang = await call_maybe_async(preset, list(langs), self._get_preferences())

        if lang not in langs:
            raise PresetUnavailableError(lang, langs)
        logger.debug("Preset resolved %r from %s", lang, langs)
        return lang

    def _get_preferences(self) -> list[str]:
        prefs = self._preferences
        if prefs is None:
            return []
        if callable(prefs):
            prefs = prefs()
        return list(prefs)

    async def _change_says(self, language: str) -> None:
        # the preset resolver may have suspended across a dispose
        self._ensure_ready()
        recorder = self._recorder
        self._curr_language = language
        self._says = self._data[language]  # type: ignore[index]
        try:
            await self._record(recorder, language)
        finally:
            self._notify()

    async def _record(self, recorder: Recorder | None, language: str) -> None:
        if recorder is None:
            return
        try:
            await call_maybe_async(recorder.set, language)
        except Exception as e:
            logger.error("Failed to record language %r: %s", language, e)
            raise

    def _assign(self, data: Mapping[str, T], langs: list[str], lang: str) -> None:
        self._data = data
        self._available_languages = langs
        self._curr_language = lang
        self._says = data[lang]

    def _clear(self) -> None:
        self._data = None
        self._available_languages = None
        self._curr_language = None
        self._says = None

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Listener %r failed", listener)
