# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from purenotes import configuration


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Empty file, or a top level that is not a mapping
        if not isinstance(self._config, dict):
            self._config = configuration.get_default_configuration()
            return

        # Fill in keys added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        notes_path: Optional[str] = None,
        remove_notes_path: bool = False,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        timezone: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if notes_path is not None:
            self.config["notes_path"] = notes_path
        if remove_notes_path:
            self.config["notes_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if log_format is not None:
            self.config["log_format"] = log_format.lower()
        if timezone is not None:
            self.config["timezone"] = timezone


CONFIGURATION_REPO = ConfigurationRepository()
