"""Allow running the CLI with ``python -m bitconnect``."""

import sys

from bitconnect.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
