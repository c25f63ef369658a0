"""Scanner configuration for iniscan.

A ScanConfig is created once and handed to each Parser. There is no
process-wide or context-wide configuration: every Parser carries its own
config and is independent of every other instance.

Usage:
    from iniscan import Parser
    from iniscan.config import ScanConfig

    config = ScanConfig(comment_char="#")
    for item in Parser("# hello\nkey=value", config=config):
        ...

    # From an external source (e.g. a tool's settings table)
    config = ScanConfig.from_dict({"comment_char": "#", "unrelated": 1})

"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from iniscan.errors import ConfigError

DEFAULT_COMMENT_CHAR = ";"

# Characters that can never start a comment: they terminate the line.
_LINE_TERMINATORS = frozenset("\r\n")


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scanner configuration.

    Attributes:
        comment_char: Character that marks a line as a comment when it is
            the first character of the line. Defaults to ``;``.

    Raises:
        ConfigError: comment_char is not a single character, or is a line
            terminator.

    """

    comment_char: str = DEFAULT_COMMENT_CHAR

    def __post_init__(self) -> None:
        chr_ = self.comment_char
        if not isinstance(chr_, str) or len(chr_) != 1:
            raise ConfigError(f"comment_char must be a single character, got {chr_!r}")
        if chr_ in _LINE_TERMINATORS:
            raise ConfigError(f"comment_char cannot be a line terminator, got {chr_!r}")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only keys that are ScanConfig fields are used; unknown keys are
        silently ignored.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New ScanConfig instance.

        Example:
            >>> ScanConfig.from_dict({"comment_char": "#", "other": 1}).comment_char
            '#'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


DEFAULT_CONFIG: ScanConfig = ScanConfig()


__all__ = [
    "DEFAULT_COMMENT_CHAR",
    "DEFAULT_CONFIG",
    "ScanConfig",
]
