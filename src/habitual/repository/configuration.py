# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from habitual import configuration
from habitual.model.streak import StreakVariant


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
            )
        if not isinstance(self._config, dict):
            self._config = configuration.get_default_configuration()
            return

        # Back-fill settings added after the config file was written, and
        # replace values that are not valid for their setting
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config or not configuration.is_valid_setting(
                key, self._config[key]  # type: ignore[literal-required]
            ):
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        log_path: Optional[str] = None,
        remove_log_path: bool = False,
        history_days: Optional[int] = None,
        streak_variant: Optional[StreakVariant] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if log_path is not None:
            self.config["log_path"] = log_path
        if remove_log_path:
            self.config["log_path"] = None
        if history_days is not None:
            self.config["history_days"] = history_days
        if streak_variant is not None:
            self.config["streak_variant"] = streak_variant


CONFIGURATION_REPO = ConfigurationRepository()
