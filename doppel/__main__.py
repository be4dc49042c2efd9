#!/usr/bin/env python3
"""
Module: doppel.__main__

Allows doppel to be executed as a module:
    python -m doppel
"""

import sys

from doppel.main import main

if __name__ == "__main__":
    sys.exit(main())
