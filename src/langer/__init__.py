from .version import __version__ as __version__

__title__ = "langer"
__description__ = "Runtime language selection with replaceable recorders and presets."
__url__ = "https://github.com/Youmenomi/langer"
__author__ = "Dean Yao"
__email__ = "youmenomi@gmail.com"
__license__ = "MIT"

__all__ = [
    "Langer",
    "LangerConfig",
    "load_settings",
    "Options",
    "Preset",
    "Recorder",
    "MemoryRecorder",
    "StateFileRecorder",
    "default_options",
    "preset_language",
    "system_locale_preferences",
    "LangerError",
    "AlreadyInitializedError",
    "AlreadyDisposedError",
    "EmptyDictionaryError",
    "LanguageUnavailableError",
    "NoMatchError",
    "NotReadyError",
    "PresetUnavailableError",
]

from .config import LangerConfig, load_settings
from .errors import (
    AlreadyDisposedError,
    AlreadyInitializedError,
    EmptyDictionaryError,
    LangerError,
    LanguageUnavailableError,
    NoMatchError,
    NotReadyError,
    PresetUnavailableError,
)
from .langer import Langer, Options, Preset, default_options
from .preset import preset_language, system_locale_preferences
from .recorder import MemoryRecorder, Recorder, StateFileRecorder
