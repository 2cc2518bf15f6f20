# SPDX-License-Identifier: MIT

import platform

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from purenotes import configuration
from purenotes.log import configure_logging, get_logger
from purenotes.repository.configuration import CONFIGURATION_REPO
from purenotes.view import state as view_state

logger = get_logger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"], config["log_format"])
    view_state.set_show_header(config["show_header"])
    view_state.set_timezone(config["timezone"])

    logger.info(
        "startup",
        platform=platform.system(),
        notes_path=str(configuration.DATA_NOTES_PATH),
    )


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
