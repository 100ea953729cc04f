import logging

import pytest

from bignumber.options import (
    CONVENTIONAL_BIT_CHARS,
    INVERTED_BIT_CHARS,
    LOG_LEVEL_ENV_VAR,
    Options,
    options,
)
from bignumber.utils.logging import get_logger


class TestBitRendering:

    def test_default(self) -> None:
        assert options.bit_rendering == 'conventional'
        assert options.bit_chars == CONVENTIONAL_BIT_CHARS == ('0', '1')

    def test_inverted(self) -> None:
        options.bit_rendering = 'inverted'
        assert options.bit_chars == INVERTED_BIT_CHARS == ('1', '0')

    def test_unknown_rejected(self) -> None:
        with pytest.raises(ValueError, match="bit_rendering must be one of"):
            options.bit_rendering = 'upside-down'
        assert options.bit_rendering == 'conventional'


class TestHexSeparator:

    def test_default(self) -> None:
        assert options.hex_separator == '-'

    def test_must_be_str(self) -> None:
        with pytest.raises(TypeError):
            options.hex_separator = None


class TestLogLevel:

    def test_default_from_empty_env(self, monkeypatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        assert Options().log_level == logging.WARNING

    def test_read_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, 'debug')
        assert Options().log_level == logging.DEBUG

    def test_bad_env_value_falls_back_to_warning(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, 'chatty')
        with caplog.at_level(logging.WARNING, logger='bignumber'):
            assert Options().log_level == logging.WARNING
        assert any("Ignoring unknown log level 'chatty'" in r.getMessage() for r in caplog.records)

    def test_bad_explicit_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            options.log_level = 'chatty'

    def test_setting_updates_logger(self) -> None:
        options.log_level = 'info'
        assert options.log_level == logging.INFO
        assert get_logger().logger.level == logging.INFO
        options.log_level = logging.ERROR
        assert get_logger().logger.level == logging.ERROR

    def test_repr_lists_options(self) -> None:
        text = repr(options)
        assert 'bit_rendering' in text
        assert 'hex_separator' in text
