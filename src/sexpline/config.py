"""Parse configuration for sexpline.

A ParseConfig is passed explicitly to the Parser and threaded through every
grammar production. There is no global or contextual configuration: two
parsers with different configs can run side by side in one thread.

Usage:
    from sexpline import parse
    from sexpline.config import PERMISSIVE, ParseConfig

    parse("(abc\\n)", PERMISSIVE)
    parse("(abc\\n)", "permissive")
    parse("(abc\\n)", ParseConfig(disallow_newlines=False))

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from sexpline.errors import ConfigError

ParseMode = Literal["strict", "permissive"]


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is intentionally excluded. It is per-call state,
    not configuration, and lives on the cursor.

    Attributes:
        disallow_newlines: Reject CR/LF anywhere in the input (strict mode).
            When False, CR/LF are discarded like other whitespace.

    """

    disallow_newlines: bool = True

    @property
    def mode(self) -> ParseMode:
        """Name of the newline policy: "strict" or "permissive"."""
        return "strict" if self.disallow_newlines else "permissive"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Useful for framework integration where config may come from external
        sources (YAML files, CLI options, etc.).

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. A ``mode`` key naming a preset is also
        accepted and overrides ``disallow_newlines``.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Raises:
            ConfigError: ``mode`` names an unknown preset.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "disallow_newlines": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.mode
            'permissive'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "mode" in config_dict:
            filtered["disallow_newlines"] = resolve_config(config_dict["mode"]).disallow_newlines
        return cls(**filtered)


STRICT: ParseConfig = ParseConfig(disallow_newlines=True)
PERMISSIVE: ParseConfig = ParseConfig(disallow_newlines=False)

_PRESETS: dict[str, ParseConfig] = {
    "strict": STRICT,
    "permissive": PERMISSIVE,
}


def resolve_config(config: ParseConfig | str | None) -> ParseConfig:
    """Normalize the config argument accepted by the parse functions.

    Args:
        config: None (strict), a ParseConfig, or a preset name

    Returns:
        The ParseConfig to use.

    Raises:
        ConfigError: Unknown preset name or unsupported type.
    """
    if config is None:
        return STRICT
    if isinstance(config, ParseConfig):
        return config
    if isinstance(config, str):
        try:
            return _PRESETS[config.lower()]
        except KeyError:
            msg = f"Unknown parse mode {config!r}; expected one of {sorted(_PRESETS)}"
            raise ConfigError(msg) from None
    msg = f"Expected ParseConfig or mode name, got {type(config).__name__}"
    raise ConfigError(msg)


__all__ = [
    "PERMISSIVE",
    "STRICT",
    "ParseConfig",
    "ParseMode",
    "resolve_config",
]
