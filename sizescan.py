#!/usr/bin/env python3
"""
SizeScan launcher for running straight from a source checkout.

    python3 sizescan.py ~/Downloads

asks for a file format (blank for every file), a size sort order
(1 descending, 2 ascending), prints each size group, then asks
"Check for duplicates" (yes/no). Options such as --format, --sort and
--duplicates answer the prompts up front; see --help.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    from sizescan.cli.main import main
    sys.exit(main())
