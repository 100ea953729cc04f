from __future__ import annotations

import logging
import os
from typing import Tuple

# Index with int(bit) to get the rendered character.
CONVENTIONAL_BIT_CHARS: Tuple[str, str] = ('0', '1')
INVERTED_BIT_CHARS: Tuple[str, str] = ('1', '0')

_BIT_RENDERINGS = {'conventional': CONVENTIONAL_BIT_CHARS, 'inverted': INVERTED_BIT_CHARS}

DEFAULT_HEX_SEPARATOR: str = '-'
LOG_LEVEL_ENV_VAR: str = 'BIGNUMBER_LOG_LEVEL'


class Options:
    """Internal class to create singleton module options instance."""

    __slots__ = ('_bit_rendering', '_hex_separator', '_log_level')

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restore every option to its default value."""
        self._bit_rendering = 'conventional'
        self._hex_separator = DEFAULT_HEX_SEPARATOR
        env_level = os.getenv(LOG_LEVEL_ENV_VAR)
        try:
            self._log_level = _level_from_env(env_level)
        except ValueError:
            logging.getLogger("bignumber").warning(
                f"Ignoring unknown log level {env_level!r} in {LOG_LEVEL_ENV_VAR}, using WARNING.")
            self._log_level = logging.WARNING

    @property
    def bit_rendering(self) -> str:
        """How bits are drawn by Float128.to_string(2).

        'conventional' renders a 1-bit as '1'. 'inverted' reproduces the legacy
        mapping where a 1-bit is drawn as '0' and a 0-bit as '1'.
        """
        return self._bit_rendering

    @bit_rendering.setter
    def bit_rendering(self, value: str) -> None:
        if value not in _BIT_RENDERINGS:
            raise ValueError(f"bit_rendering must be one of {sorted(_BIT_RENDERINGS)}, not {value!r}.")
        self._bit_rendering = value

    @property
    def bit_chars(self) -> Tuple[str, str]:
        return _BIT_RENDERINGS[self._bit_rendering]

    @property
    def hex_separator(self) -> str:
        """Delimiter placed between two-digit hex groups by Float128.to_string(16)."""
        return self._hex_separator

    @hex_separator.setter
    def hex_separator(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"hex_separator must be a str, not {type(value).__name__}.")
        self._hex_separator = value

    @property
    def log_level(self) -> int:
        return self._log_level

    @log_level.setter
    def log_level(self, value) -> None:
        self._log_level = _level_from_env(value) if isinstance(value, str) else int(value)
        from bignumber.utils.logging import get_logger
        get_logger().set_level(self._log_level)

    def __repr__(self) -> str:
        attributes = {'bit_rendering': self.bit_rendering,
                      'hex_separator': self.hex_separator,
                      'log_level': logging.getLevelName(self.log_level)}
        return '\n'.join(f"    {attribute}: {value!r}" for attribute, value in attributes.items())


def _level_from_env(value) -> int:
    if not value:
        return logging.WARNING
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {value!r}.")
    return level


options = Options()
