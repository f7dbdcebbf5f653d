"""Process environment access for argcfg."""

import os
import sys

from .types import ArgsList

DEBUG_ENV_VAR = "ARGCFG_DEBUG"


def debug_log(message: str) -> None:
    """Log debug message when ARGCFG_DEBUG=1 is set."""
    if EnvironmentHelper.debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for reading process state."""

    @staticmethod
    def debug_enabled() -> bool:
        """Check if debug output is switched on."""
        return os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes", "on")

    @staticmethod
    def process_argv() -> ArgsList:
        """Return a copy of the live process argument vector."""
        return list(sys.argv)
