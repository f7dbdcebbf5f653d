"""Parsed argument container for argcfg."""

from dataclasses import asdict, dataclass

from .types import ConfigDict, TokenTuple


@dataclass(frozen=True)
class ArgumentConfig:
    """
    Arguments passed to an executable, sorted into four buckets.

    * `executable` – first token, verbatim (the invoked program).
    * `commands` – tokens that are neither flags nor paths.
    * `flags` – flag names with the leading dashes removed.
    * `paths` – tokens after the first ``--`` divider.

    A call such as ``./bin -fx --verbose foo bar -- from to`` becomes::

        ArgumentConfig(
            executable="./bin",
            commands=("foo", "bar"),
            flags=("f", "x", "verbose"),
            paths=("from", "to"),
        )
    """

    executable: str = ""
    commands: TokenTuple = ()
    flags: TokenTuple = ()
    paths: TokenTuple = ()

    def __post_init__(self):
        # Accept any iterable but always store tuples
        for name in ("commands", "flags", "paths"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def is_empty(self) -> bool:
        """Check if nothing at all was parsed."""
        return not (self.executable or self.commands or self.flags or self.paths)

    def to_dict(self) -> ConfigDict:
        """Return a plain dictionary with list-valued token fields."""
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in asdict(self).items()
        }

    def describe(self) -> str:
        """Human-readable multi-line summary for diagnostics."""
        lines = [f"executable: {self.executable!r}"]
        for name in ("commands", "flags", "paths"):
            values = getattr(self, name)
            rendered = ", ".join(repr(v) for v in values) if values else "-"
            lines.append(f"{name}: {rendered}")
        return "\n".join(lines)
