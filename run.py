"""Entry point for the Quran vault tooling."""

import sys

from quran_vault.cli import main

if __name__ == "__main__":
    sys.exit(main())
