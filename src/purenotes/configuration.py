# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "purenotes"

NOTES_PATH_ENV_VAR = "PURENOTES_NOTES_PATH"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Set dynamically by load_data_path_configuration()
DATA_NOTES_PATH: Path = platformdirs.user_documents_path() / "PureNotes.json"


class Configuration(TypedDict):
    notes_path: Optional[str]
    show_header: bool
    log_level: str
    log_format: str
    timezone: str


def get_default_configuration() -> Configuration:
    return {
        "notes_path": None,
        "show_header": True,
        "log_level": "WARNING",
        "log_format": "console",
        "timezone": "local",
    }


def set_notes_path(notes_path: Path) -> None:
    global DATA_NOTES_PATH

    DATA_NOTES_PATH = notes_path.expanduser()


def load_data_path_configuration() -> None:
    """
    Resolve DATA_NOTES_PATH from the environment and the config file.

    The environment variable wins over the config file. Must be called
    before the note repository reads anything.
    """
    env_notes_path = os.environ.get(NOTES_PATH_ENV_VAR)
    if env_notes_path:
        set_notes_path(Path(env_notes_path))
        return

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if not isinstance(config, dict):
        return

    notes_path_setting = config.get("notes_path")
    if notes_path_setting is not None:
        set_notes_path(Path(notes_path_setting))
