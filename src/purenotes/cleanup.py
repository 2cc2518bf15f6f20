# SPDX-License-Identifier: MIT

import atexit

from purenotes.repository.configuration import CONFIGURATION_REPO
from purenotes.repository.note import NOTE_REPO


def flush_and_shutdown() -> None:
    CONFIGURATION_REPO.flush()
    NOTE_REPO.shutdown()


def register_cleanup() -> None:
    atexit.register(flush_and_shutdown)
