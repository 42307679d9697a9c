"""Module entry point for running with python -m tocinline."""

import sys

from tocinline.cli import main

if __name__ == "__main__":
    sys.exit(main())
