# SPDX-License-Identifier: MIT

from mensual.cleanup import register_cleanup
from mensual.initialize import initialize
from mensual.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
