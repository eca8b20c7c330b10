"""Text form of a shard: ``<index> <mnemonic words>``."""
from __future__ import annotations

import re

from seedshard import phrase
from seedshard.errors import InvalidShardIndex, MalformedShardLine
from seedshard.shamir import MAX_SHARDS, Shard

_LEADING = re.compile(r"(\S+)\s+(.*)", re.DOTALL)


def encode_shard(shard: Shard) -> str:
    if not 1 <= shard.index <= MAX_SHARDS:
        raise InvalidShardIndex(shard.index)
    return f"{shard.index} {phrase.to_phrase(shard.value)}"


def parse_index(token: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise InvalidShardIndex(token)
    index = int(token)
    if not 1 <= index <= MAX_SHARDS:
        raise InvalidShardIndex(token)
    return index


def decode_shard(line: str) -> Shard:
    """Parse one shard line; mnemonic errors from :mod:`seedshard.phrase` propagate."""

    match = _LEADING.fullmatch(line.strip())
    if match is None:
        raise MalformedShardLine(line)
    token, words = match.groups()
    return Shard(index=parse_index(token), value=phrase.decode(words))


__all__ = ["encode_shard", "decode_shard", "parse_index"]
