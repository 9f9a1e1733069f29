"""Entry point for `python -m duskicons`."""

import sys


def main():
    from duskicons.cli import main as run_cli
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
