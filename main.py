"""Run the sky chart window; any arguments are passed to the skyterm CLI."""

import sys

from skyterm.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:] or ["window"]))
