import pytest


FETCHED = {
    "en": {
        "confirm": "Confirm",
        "cancel": "Cancel",
        "setting": {"language": "Language"},
    },
    "zh": {
        "confirm": "確認",
        "cancel": "取消",
        "setting": {"language": "語言"},
    },
}

UPDATED = {
    "en": {
        "confirm": "Confirm",
        "cancel": "Cancel",
        "enter": "Enter",
        "setting": {"language": "Language", "volume": "Volume", "quality": "Quality"},
    },
    "zh": {
        "confirm": "確認",
        "cancel": "取消",
        "enter": "進入",
        "setting": {"language": "語言", "volume": "音量", "quality": "畫質"},
    },
    "ja": {
        "confirm": "確認",
        "cancel": "キャンセル",
        "enter": "入力",
        "setting": {"language": "言語", "volume": "ボリューム", "quality": "画質"},
    },
}

PRIORITIES = ["en-US", "en", "zh-TW", "zh"]


@pytest.fixture
def fetched():
    return FETCHED


@pytest.fixture
def updated():
    return UPDATED


@pytest.fixture
def priorities():
    """Locale preferences matching the ``LANGUAGE`` set by ``isolated_host``."""
    return list(PRIORITIES)


@pytest.fixture(autouse=True)
def isolated_host(tmp_path, monkeypatch):
    """Point the default recorder and settings at temp files and fix the system locales."""
    state_file = tmp_path / "state.json"
    monkeypatch.setattr("langer.recorder.STATE_PATH", state_file)
    monkeypatch.setattr("langer.config.SETTING_PATH", tmp_path / "settings.toml")

    for name in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LANGUAGE", "en_US:en:zh_TW:zh")
    return state_file
