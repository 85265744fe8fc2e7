# SPDX-License-Identifier: MIT

from habitual.cleanup import register_cleanup
from habitual.initialize import initialize
from habitual.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
