"""Argument classification for argcfg."""

from typing import Iterable, Optional

from .argument_config import ArgumentConfig
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import InvalidTokenError
from .types import ArgsList, FlagList

PATH_DIVIDER = "--"
LONG_PREFIX = "--"
SHORT_PREFIX = "-"


class ArgumentProcessor:
    """Sorts raw command-line tokens into an ArgumentConfig."""

    @staticmethod
    def parse(args: Iterable[str]) -> ArgumentConfig:
        """
        Classify ``args`` into executable, commands, flags and paths.

        The first token is always the executable.  Every later token lands in
        exactly one bucket, checked in this order:

        * the first ``--`` is consumed as the path divider;
        * anything after the divider is a path, verbatim;
        * ``--name`` is the long flag ``name``;
        * ``-abc`` expands to the short flags ``a``, ``b``, ``c``;
        * everything else is a command.

        Never fails for string input; an empty sequence yields an empty config.
        """
        tokens = ArgumentProcessor._clean(args)
        if not tokens:
            debug_log("parse: no tokens, returning empty config")
            return ArgumentConfig()

        executable = tokens[0]
        commands: ArgsList = []
        flags: FlagList = []
        paths: ArgsList = []

        # Set once, never unset: a later "--" is an ordinary path
        path_divider = False

        for arg in tokens[1:]:
            if arg == PATH_DIVIDER and not path_divider:
                debug_log("parse: path divider found")
                path_divider = True
                continue

            if path_divider:
                paths.append(arg)
                continue

            if arg.startswith(LONG_PREFIX):
                flags.append(arg[len(LONG_PREFIX) :])
                continue

            if arg.startswith(SHORT_PREFIX):
                flags.extend(ArgumentProcessor.expand_short_flags(arg))
                continue

            commands.append(arg)

        config = ArgumentConfig(executable, commands, flags, paths)
        debug_log(f"parse: {config!r}")
        return config

    @staticmethod
    def expand_short_flags(token: str) -> FlagList:
        """
        Expand a single-dash token into its flag names.

        ``-fx`` gives ``['f', 'x']``, ``-v`` gives ``['v']`` and a bare ``-``
        gives ``['']``.
        """
        body = token[len(SHORT_PREFIX) :]
        if len(token) > 2:
            return list(body)
        return [body]

    @staticmethod
    def from_process() -> ArgumentConfig:
        """Parse the arguments the current process was started with."""
        return ArgumentProcessor.parse(EnvironmentHelper.process_argv())

    @staticmethod
    def _clean(args: Iterable[str]) -> ArgsList:
        """Copy the input into a list, rejecting non-string elements."""
        tokens = list(args)
        for index, token in enumerate(tokens):
            if not isinstance(token, str):
                raise InvalidTokenError(token, index)
        return tokens


def parse_args(args: Optional[Iterable[str]] = None) -> ArgumentConfig:
    """Parse ``args``, or the process argument vector when omitted."""
    if args is None:
        return ArgumentProcessor.from_process()
    return ArgumentProcessor.parse(args)
