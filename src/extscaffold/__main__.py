"""Allow ``python -m extscaffold``."""

import sys

from extscaffold.cli import main

if __name__ == "__main__":
    sys.exit(main())
