#!/usr/bin/env python3
"""Entry point for argcfg when packaged as zipapp."""

import sys

from argcfg.application import main

if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
