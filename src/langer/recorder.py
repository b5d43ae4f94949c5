"""
Recorders remember the last chosen language between sessions.

A recorder is any object with ``get`` and ``set`` methods. Either may be a
plain function or a coroutine function.
"""

from __future__ import annotations

__all__ = ["Recorder", "MemoryRecorder", "StateFileRecorder", "call_maybe_async"]

import inspect
import json
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Protocol, TypeVar, runtime_checkable

from langer.paths import STATE_PATH

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class Recorder(Protocol):
    """Persistence collaborator for the current language key."""

    def get(self) -> str | None | Awaitable[str | None]:
        """Return the most recently recorded language, or ``None``."""
        ...

    def set(self, lang: str) -> None | Awaitable[None]:
        """Record ``lang`` as the chosen language."""
        ...


async def call_maybe_async(func: Callable[..., T | Awaitable[T]], *args: Any) -> T:
    """Call ``func`` and await the result when it is awaitable."""
    result = func(*args)
    if inspect.isawaitable(result):
        return await result
    return result


class MemoryRecorder:
    """Keeps the language in process memory only."""

    def __init__(self, lang: str | None = None) -> None:
        self._lang = lang

    def get(self) -> str | None:
        return self._lang

    def set(self, lang: str) -> None:
        self._lang = lang


class StateFileRecorder:
    """Records the chosen language in a small JSON state file.

    The file lives under the user config directory by default and may hold
    other keys, which are preserved on write.
    """

    KEY = "lang"

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize the recorder.

        Args:
            path: Path to the JSON file used for storing state. Defaults to
                ``state.json`` under the user config directory.
        """
        self._path = Path(path or STATE_PATH).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> str | None:
        """Return the recorded language.

        Returns:
            str | None: The stored language key, or ``None`` if the file is
            missing, unreadable, or has no usable value.
        """
        value = self._load().get(self.KEY)
        return value if isinstance(value, str) and value else None

    def set(self, lang: str) -> None:
        """Persist ``lang``, creating parent directories as needed.

        Args:
            lang: Language key to store.
        """
        data = self._load()
        if data.get(self.KEY) == lang and self._path.exists():
            return
        data[self.KEY] = lang
        self._path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(data, ensure_ascii=False, indent=2)
        self._path.write_text(content, encoding="utf-8")
        logger.info("Language %r recorded to %s", lang, self._path)

    def _load(self) -> dict[str, Any]:
        """Load state data from disk.

        Returns:
            dict[str, Any]: Parsed state data. Returns an empty dict if the
            state file does not exist or contains invalid JSON.
        """
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
            data = json.loads(text)
        except (OSError, ValueError) as e:
            logger.debug("Ignoring unreadable state file %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}
