"""Exponentiation by repeated squaring."""

from __future__ import annotations


def power(a: int, n: int) -> int:
    """Return ``a`` raised to the non-negative integer power ``n``.

    The exponent is halved on every step, so only O(log n) multiplications
    are made. ``power(a, 0)`` is 1 for any ``a``.
    """
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if n == 0:
        return 1
    half = power(a, n // 2)
    if n % 2 == 0:
        return half * half
    return a * half * half