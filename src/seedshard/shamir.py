"""Shamir's Secret Sharing over GF(256), one polynomial per secret byte.

``split_byte``
    Evaluate a random polynomial whose constant term is the secret byte at
    each requested shard index.

``reconstruct_byte``
    Lagrange-interpolate a set of ``(x, y)`` points at x=0.

``split_secret`` / ``combine_shards`` apply the two byte-level operations to
every position of a byte string. Coefficients must come from a
cryptographically secure source; the default draws from :mod:`secrets`.
Supplying fewer shards than the original threshold still yields a byte
string, it is just the wrong one.
"""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from seedshard import gf256
from seedshard.errors import (
    DuplicateShareIndex,
    InsufficientShares,
    InvalidShardIndex,
    MalformedShardLine,
)

MAX_SHARDS = 255

RandomByte = Callable[[], int]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Shard:
    """One share: the evaluation point ``index`` and the per-byte values."""

    index: int
    value: bytes


def _random_byte() -> int:
    return secrets.randbelow(256)


def _check_indices(indices: Iterable[int]) -> list[int]:
    seen: set[int] = set()
    checked: list[int] = []
    for x in indices:
        if not 1 <= x <= MAX_SHARDS:
            raise InvalidShardIndex(x)
        if x in seen:
            raise DuplicateShareIndex(x)
        seen.add(x)
        checked.append(x)
    return checked


def evaluate(coefficients: Sequence[int], x: int) -> int:
    """Horner evaluation; ``coefficients[0]`` is the constant term."""

    y = 0
    for c in reversed(coefficients):
        y = gf256.add(gf256.mul(y, x), c)
    return y


def split_byte(
    secret: int,
    threshold: int,
    indices: Iterable[int],
    random_byte: RandomByte | None = None,
) -> dict[int, int]:
    """Return ``{x: f(x)}`` for a fresh polynomial with ``f(0) == secret``."""

    if not 0 <= secret <= 0xFF:
        raise ValueError("Secret byte out of range")
    if threshold < 1:
        raise ValueError("Threshold must be at least 1")
    draw = random_byte or _random_byte
    xs = _check_indices(indices)
    coefficients = [secret] + [draw() for _ in range(threshold - 1)]
    return {x: evaluate(coefficients, x) for x in xs}


def reconstruct_byte(points: Iterable[tuple[int, int]]) -> int:
    """Interpolate the polynomial through *points* at x=0."""

    points = list(points)
    if not points:
        raise InsufficientShares()
    xs = _check_indices(x for x, _ in points)

    secret = 0
    for i, (xi, yi) in enumerate(points):
        num = 1
        den = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            # 0 - xj == xj in characteristic 2
            num = gf256.mul(num, xj)
            den = gf256.mul(den, gf256.sub(xi, xj))
        secret = gf256.add(secret, gf256.mul(yi, gf256.div(num, den)))
    return secret


def split_secret(
    secret: bytes,
    threshold: int,
    count: int,
    *,
    random_byte: RandomByte | None = None,
) -> list[Shard]:
    """Split ``secret`` into ``count`` shards with threshold ``threshold``."""

    if not secret:
        raise ValueError("Secret must not be empty")
    if not (0 < threshold <= count <= MAX_SHARDS):
        raise ValueError(f"Invalid shard parameters: need 1 <= threshold ({threshold}) <= count ({count}) <= {MAX_SHARDS}")

    indices = range(1, count + 1)
    # every byte position gets its own independent polynomial
    columns = [split_byte(byte, threshold, indices, random_byte) for byte in secret]
    _logger.debug("Split %d-byte secret into %d shards (threshold %d)", len(secret), count, threshold)
    return [Shard(index=x, value=bytes(column[x] for column in columns)) for x in indices]


def combine_shards(shards: Sequence[Shard]) -> bytes:
    """Reconstruct the secret from *shards* by interpolating every byte position."""

    if not shards:
        raise InsufficientShares()
    _check_indices(shard.index for shard in shards)
    size = len(shards[0].value)
    for shard in shards:
        if len(shard.value) != size:
            raise MalformedShardLine(
                f"shard {shard.index}",
                f"holds {len(shard.value)} bytes, expected {size}",
            )

    _logger.debug("Combining %d shards of %d bytes", len(shards), size)
    return bytes(
        reconstruct_byte((shard.index, shard.value[position]) for shard in shards)
        for position in range(size)
    )


__all__ = [
    "MAX_SHARDS",
    "Shard",
    "evaluate",
    "split_byte",
    "reconstruct_byte",
    "split_secret",
    "combine_shards",
]
