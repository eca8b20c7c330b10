"""High level operations behind the command line: generate, split, recover."""
from __future__ import annotations

import logging
import re
import secrets
from typing import Callable, Iterable, List, Optional

from seedshard import phrase
from seedshard.errors import (
    ChecksumMismatch,
    DuplicateShareIndex,
    InvalidWordCount,
    MalformedShardLine,
    SeedShardError,
)
from seedshard.shamir import Shard, combine_shards, split_secret
from seedshard.shard import decode_shard, encode_shard

# "Shard 3: " as printed in front of each line by earlier releases
_LABEL = re.compile(r"^shard\s+\d+\s*:\s*", re.IGNORECASE)

_logger = logging.getLogger(__name__)


def generate_phrase(words: int = 24, *, token_bytes: Optional[Callable[[int], bytes]] = None) -> str:
    """Return a fresh mnemonic of *words* words drawn from the OS CSPRNG."""

    if words not in phrase.WORD_COUNTS:
        raise InvalidWordCount(words)
    draw = token_bytes or secrets.token_bytes
    return phrase.to_phrase(draw(phrase.WORD_COUNTS[words]))


def split_phrase(seed_phrase: str, threshold: int, count: int) -> List[str]:
    """Split *seed_phrase* into ``count`` shard lines, any ``threshold`` of which recover it."""

    if threshold > count:
        raise ValueError("Threshold cannot be greater than the number of shards")
    entropy = phrase.decode(seed_phrase)
    shards = split_secret(entropy, threshold, count)
    _logger.info("Split %d-word phrase into %d shards, threshold %d", len(phrase.split_words(seed_phrase)), count, threshold)
    return [encode_shard(shard) for shard in shards]


def parse_shard_lines(lines: Iterable[str]) -> List[Shard]:
    """Decode shard lines, skipping blank lines and ``#`` comments.

    The first failing line stops parsing; the raised error carries it as
    ``exc.line``.
    """

    shards: List[Shard] = []
    seen: set[int] = set()
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            shard = decode_shard(_LABEL.sub("", line, count=1))
            if shard.index in seen:
                raise DuplicateShareIndex(shard.index)
            if shards and len(shard.value) != len(shards[0].value):
                raise MalformedShardLine(line, "word count differs from the first shard")
        except MalformedShardLine as exc:
            raise MalformedShardLine(line, exc.reason) from None
        except SeedShardError as exc:
            exc.line = line
            raise
        seen.add(shard.index)
        shards.append(shard)
    return shards


def recover_phrase(lines: Iterable[str]) -> str:
    """Rebuild the original mnemonic from shard lines.

    The rebuilt phrase is run back through checksum verification; a failure
    there is reported as insufficient or incorrect shards.
    """

    shards = parse_shard_lines(lines)
    entropy = combine_shards(shards)
    recovered = phrase.to_phrase(entropy)
    # to_phrase always writes a valid checksum; this only trips on a codec regression
    try:
        phrase.decode(recovered)
    except ChecksumMismatch:
        raise ChecksumMismatch("Insufficient or incorrect shares") from None
    _logger.info("Recovered phrase from %d shards", len(shards))
    return recovered


__all__ = ["generate_phrase", "split_phrase", "parse_shard_lines", "recover_phrase"]
