"""Utility helpers shared across the codec modules."""

from __future__ import annotations

import logging
from typing import Union

from web3 import Web3

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def get_logger(name: str = "govcalldata") -> logging.Logger:
    """Return a configured logger that prints to stderr."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Apply ``level`` to every logger created through :func:`get_logger`."""
    if isinstance(level, str):
        level = level.upper()
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and (name == "govcalldata" or name.startswith("govcalldata.")):
            logger.setLevel(level)


def hex_to_bytes(data: str) -> bytes:
    """Convert a hex string (with or without ``0x``) to bytes.

    Raises ``ValueError`` for odd-length strings or non-hex characters.
    """
    data = data.strip()
    data = data[2:] if data[:2] in ("0x", "0X") else data
    if not set(data) <= _HEX_DIGITS:
        raise ValueError("contains non-hex characters")
    return bytes.fromhex(data)


def bytes_to_hex(data: bytes) -> str:
    """Render bytes as a ``0x``-prefixed lowercase hex string."""
    return "0x" + bytes(data).hex()


def function_selector(signature: str) -> bytes:
    """Return the 4-byte selector for a canonical function signature."""
    return bytes(Web3.keccak(text=signature)[:4])


__all__ = [
    "bytes_to_hex",
    "function_selector",
    "get_logger",
    "hex_to_bytes",
    "set_log_level",
]
