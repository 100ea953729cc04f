from bignumber.utils.logging import get_logger, BigNumberLogger

__all__ = [
    "get_logger",
    "BigNumberLogger",
]
