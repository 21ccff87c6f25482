"""Polynomial rolling hashes with a rotated starting point."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import Any

HASH_BASE = 31
HASH_MODULUS = 1_000_000_009


def _truncated_mod(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend, as in truncating division."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _code(value: Any) -> int:
    if isinstance(value, str):
        return ord(value)
    return int(value)


def hash_sequence(values: Iterable[Any]) -> int:
    """Hash a sequence of numbers or single characters.

    Elements are visited starting from the middle and wrapping around.
    Floats are truncated towards zero; characters contribute their code.
    """
    items = list(values)
    shift = len(items) // 2
    result = 0
    for value in chain(items[shift:], items[:shift]):
        result = _truncated_mod(result * HASH_BASE + _code(value), HASH_MODULUS)
    return result


def hash_string(text: str | bytes) -> int:
    """Hash a string over its UTF-8 bytes, read as signed 8-bit codes.

    The last half of the bytes is moved to the front before hashing, and each
    step adds the reduced polynomial term to the running value.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    length = len(data)
    shift = length // 2
    rotated = data[length - shift:] + data[:length - shift]
    result = 0
    for byte in rotated:
        code = byte - 256 if byte >= 128 else byte
        result += _truncated_mod(result * HASH_BASE + code, HASH_MODULUS)
    return result