"""Validation errors raised by the seed sharing core."""
from __future__ import annotations

from typing import Optional


class SeedShardError(ValueError):
    """Base class for deterministic validation failures."""

    #: offending input line, filled in when parsing a batch of shard lines
    line: Optional[str] = None


class InvalidEntropyLength(SeedShardError):
    def __init__(self, length: int) -> None:
        super().__init__(f"Invalid entropy length: {length} bytes (expected 16, 20, 24, 28 or 32)")
        self.length = length


class InvalidWordCount(SeedShardError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Invalid word count: {count} (expected 12, 15, 18, 21 or 24)")
        self.count = count


class UnknownWord(SeedShardError):
    def __init__(self, word: str) -> None:
        super().__init__(f"Unknown word: {word!r}")
        self.word = word


class ChecksumMismatch(SeedShardError):
    def __init__(self, message: str = "Mnemonic checksum does not match") -> None:
        super().__init__(message)


class InvalidShardIndex(SeedShardError):
    def __init__(self, token: object) -> None:
        super().__init__(f"Invalid shard index: {token!r} (expected an integer from 1 to 255)")
        self.token = token


class DuplicateShareIndex(SeedShardError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Shard index {index} supplied more than once")
        self.index = index


class InsufficientShares(SeedShardError):
    def __init__(self, message: str = "At least one shard is required") -> None:
        super().__init__(message)


class MalformedShardLine(SeedShardError):
    def __init__(self, line: str, reason: str = "expected '<index> <mnemonic>'") -> None:
        super().__init__(f"Malformed shard line {line!r}: {reason}")
        self.line = line
        self.reason = reason


__all__ = [
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
