from platformdirs import user_config_path

PACKAGE_NAME = "langer"  # Python package name

# -----------------------------------------------------------------------------
# User-writable directories & files
# -----------------------------------------------------------------------------

# Base config directory (e.g. ~/.config/langer/)
USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)

STATE_PATH = USER_CONFIG_DIR / "state.json"
SETTING_PATH = USER_CONFIG_DIR / "settings.toml"
