# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, TypedDict, get_args

import platformdirs

from habitual.model.streak import StreakVariant
from habitual.service.habit import HISTORY_DAYS_BACK

APP_NAME = "habitual"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DEFAULT_LOG_PATH: Path = DATA_PATH / "habits.yaml"


class Configuration(TypedDict):
    show_header: bool
    log_path: Optional[str]  # None = DEFAULT_LOG_PATH
    history_days: int
    streak_variant: StreakVariant


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "log_path": None,
        "history_days": HISTORY_DAYS_BACK,
        "streak_variant": "standard",
    }


def is_valid_setting(key: str, value: Any) -> bool:
    if key == "show_header":
        return isinstance(value, bool)
    if key == "log_path":
        return value is None or isinstance(value, str)
    if key == "history_days":
        return not isinstance(value, bool) and isinstance(value, int) and value >= 1
    if key == "streak_variant":
        return value in get_args(StreakVariant)
    return True


def resolve_log_path(config: Configuration) -> Path:
    if config["log_path"] is not None:
        return Path(config["log_path"]).expanduser()
    return DEFAULT_LOG_PATH
