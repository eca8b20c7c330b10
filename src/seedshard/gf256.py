"""Arithmetic in GF(2^8) with the AES reduction polynomial x^8 + x^4 + x^3 + x + 1.

Elements are plain ints in ``range(256)``. Multiplication and inversion go
through exp/log tables generated once at import from the generator 3.
"""
from __future__ import annotations

POLYNOMIAL = 0x11B
GENERATOR = 3


def _mul_slow(a: int, b: int) -> int:
    """Shift-and-add multiplication, used to build the tables."""

    product = 0
    for _ in range(8):
        if b & 1:
            product ^= a
        carry = a & 0x80
        a = (a << 1) & 0xFF
        if carry:
            a ^= POLYNOMIAL & 0xFF
        b >>= 1
    return product


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = [0] * 510
    log = [0] * 256
    x = 1
    for power in range(255):
        exp[power] = x
        log[x] = power
        x = _mul_slow(x, GENERATOR)
    # doubled so exp[log[a] + log[b]] never needs a modulo
    for power in range(255, 510):
        exp[power] = exp[power - 255]
    return tuple(exp), tuple(log)


_EXP, _LOG = _build_tables()


def add(a: int, b: int) -> int:
    return a ^ b


sub = add


def mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return _EXP[_LOG[a] + _LOG[b]]


def inverse(a: int) -> int:
    if a == 0:
        raise ZeroDivisionError("0 has no inverse in GF(256)")
    return _EXP[255 - _LOG[a]]


def div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero in GF(256)")
    if a == 0:
        return 0
    return _EXP[_LOG[a] + 255 - _LOG[b]]


__all__ = ["POLYNOMIAL", "add", "sub", "mul", "inverse", "div"]
