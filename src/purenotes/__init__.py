# SPDX-License-Identifier: MIT

from purenotes.cleanup import register_cleanup
from purenotes.initialize import initialize
from purenotes.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
