#!/usr/bin/env python3
"""Demonstration entry point for argcfg."""

import logging
import sys
from typing import Optional

from .argument_processor import ArgumentProcessor
from .environment_helper import debug_log
from .exceptions import ArgcfgError
from .types import ArgsList, ExitCode


class Application:
    """Parses an argument vector and prints the result."""

    def __init__(self, processor: Optional[ArgumentProcessor] = None):
        self.processor = processor or ArgumentProcessor()

    def run(self, argv: ArgsList) -> ExitCode:
        """Run the application with the full argument vector, argv[0] included."""
        debug_log(f"run: argv={argv}")
        config = self.processor.parse(argv)
        print(config.describe())
        return 0


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv)
    except ArgcfgError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
