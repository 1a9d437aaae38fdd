"""Allow running the command line tool with ``python -m hume_voice``."""

import sys

from hume_voice.cli import main

if __name__ == "__main__":
    sys.exit(main())
