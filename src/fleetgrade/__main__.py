"""Entry point for python -m fleetgrade."""

import sys


def main():
    from fleetgrade.cli import main as cli_main

    sys.exit(cli_main())


if __name__ == "__main__":
    main()
