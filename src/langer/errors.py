"""
Exceptions raised by the language state machine and the preset resolver.
"""

from collections.abc import Sequence

_NOT_READY = "Not initialized yet, failed to initialize or disposed."


class LangerError(Exception):
    """Base class for all langer failures."""


class AlreadyInitializedError(LangerError):
    """``initialize`` was called on an instance that is already initialized."""

    def __init__(self) -> None:
        super().__init__("[langer] Invalid operation. This has been initialized.")


class AlreadyDisposedError(LangerError):
    """``dispose`` was called twice."""

    def __init__(self) -> None:
        super().__init__("[langer] Invalid operation. This has been disposed.")


class NotReadyError(LangerError):
    """The instance is uninitialized, failed to initialize or was disposed."""

    def __init__(self) -> None:
        super().__init__(f"[langer] {_NOT_READY}")


class EmptyDictionaryError(LangerError):
    """The dictionary does not contain any language key."""

    def __init__(self) -> None:
        super().__init__(
            "[langer] Initialization failed. "
            "Unable to get the list of available languages."
        )


class LanguageUnavailableError(LangerError):
    """A language that is not in the available languages was requested."""

    def __init__(self, language: str, available: Sequence[str]) -> None:
        self.language = language
        self.available = list(available)
        super().__init__(
            f'[langer] Cannot speak the "{language}" language that are not '
            f"on the available languages({','.join(self.available)})."
        )


class PresetUnavailableError(LangerError):
    """The preset resolved to a language that is not available."""

    def __init__(self, language: str, available: Sequence[str]) -> None:
        self.language = language
        self.available = list(available)
        super().__init__(
            f'[langer] The preset language "{language}" is not on the '
            f"available languages({','.join(self.available)})."
        )


class NoMatchError(LangerError):
    """No locale preference matched any available language."""

    def __init__(self) -> None:
        super().__init__(
            "[langer] The preset_language function cannot preset "
            "the current language."
        )
