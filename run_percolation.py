"""Launch random site percolation trials."""

import sys

from site_percolation.cli import main


if __name__ == "__main__":
    sys.exit(main())
