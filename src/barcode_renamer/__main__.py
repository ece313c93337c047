"""Allow ``python -m barcode_renamer``."""

import sys

from barcode_renamer.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
