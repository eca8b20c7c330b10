"""Split BIP39 seed phrases into Shamir shards encoded as mnemonics."""

from __future__ import annotations

from seedshard.errors import (
    ChecksumMismatch,
    DuplicateShareIndex,
    InsufficientShares,
    InvalidEntropyLength,
    InvalidShardIndex,
    InvalidWordCount,
    MalformedShardLine,
    SeedShardError,
    UnknownWord,
)
from seedshard.shamir import Shard, combine_shards, split_secret
from seedshard.workflow import generate_phrase, parse_shard_lines, recover_phrase, split_phrase

__version__ = "0.1.0"

__all__ = [
    "Shard",
    "split_secret",
    "combine_shards",
    "generate_phrase",
    "split_phrase",
    "parse_shard_lines",
    "recover_phrase",
    "SeedShardError",
    "InvalidEntropyLength",
    "InvalidWordCount",
    "UnknownWord",
    "ChecksumMismatch",
    "InvalidShardIndex",
    "DuplicateShareIndex",
    "InsufficientShares",
    "MalformedShardLine",
]
