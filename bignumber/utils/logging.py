import logging
import sys
from typing import Optional


class BigNumberLogger:
    def __init__(self, name: str = "bignumber", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def parse_outcome(self, text: str, base: int, outcome: str, **kwargs) -> None:
        msg = f"parse base={base} | input={text!r} | {outcome}"
        for k, v in kwargs.items():
            msg += f" | {k}: {v}"
        self.debug(msg)


_logger: Optional[BigNumberLogger] = None

def get_logger() -> BigNumberLogger:
    global _logger
    if _logger is None:
        from bignumber.options import options
        _logger = BigNumberLogger(level=options.log_level)
    return _logger
