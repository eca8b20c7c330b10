"""BIP39 mnemonic codec.

Entropy is concatenated with the leading ``len(entropy) * 8 / 32`` bits of its
SHA-256 digest and the combined bit string is read as 11-bit word indices.
Decoding reverses the process and always re-verifies the checksum.
"""
from __future__ import annotations

import hashlib
from typing import Sequence

from seedshard.errors import ChecksumMismatch, InvalidEntropyLength, InvalidWordCount, SeedShardError
from seedshard.wordlist import WORD_BITS, index_of, word_at

# entropy bytes -> word count
LENGTHS: dict[int, int] = {16: 12, 20: 15, 24: 18, 28: 21, 32: 24}
WORD_COUNTS: dict[int, int] = {words: size for size, words in LENGTHS.items()}

_WORD_MASK = (1 << WORD_BITS) - 1


def checksum_bits(entropy: bytes) -> tuple[int, int]:
    """Return ``(value, length)`` of the checksum for *entropy*."""

    length = len(entropy) * 8 // 32
    digest = hashlib.sha256(entropy).digest()
    return digest[0] >> (8 - length), length


def encode(entropy: bytes) -> list[str]:
    if len(entropy) not in LENGTHS:
        raise InvalidEntropyLength(len(entropy))
    checksum, cs_len = checksum_bits(entropy)
    value = (int.from_bytes(entropy, "big") << cs_len) | checksum
    count = LENGTHS[len(entropy)]
    return [
        word_at((value >> (WORD_BITS * (count - 1 - position))) & _WORD_MASK)
        for position in range(count)
    ]


def split_words(phrase: str | Sequence[str]) -> list[str]:
    if isinstance(phrase, str):
        return phrase.split()
    return list(phrase)


def decode(phrase: str | Sequence[str]) -> bytes:
    """Return the entropy behind *phrase*.

    Raises :class:`InvalidWordCount`, :class:`UnknownWord` naming the first
    offending word, or :class:`ChecksumMismatch`.
    """

    words = split_words(phrase)
    if len(words) not in WORD_COUNTS:
        raise InvalidWordCount(len(words))

    value = 0
    for word in words:
        value = (value << WORD_BITS) | index_of(word)

    size = WORD_COUNTS[len(words)]
    cs_len = size * 8 // 32
    entropy = (value >> cs_len).to_bytes(size, "big")
    expected, _ = checksum_bits(entropy)
    if value & ((1 << cs_len) - 1) != expected:
        raise ChecksumMismatch()
    return entropy


def to_phrase(entropy: bytes) -> str:
    return " ".join(encode(entropy))


def is_valid(phrase: str | Sequence[str]) -> bool:
    try:
        decode(phrase)
    except SeedShardError:
        return False
    return True


__all__ = [
    "LENGTHS",
    "WORD_COUNTS",
    "checksum_bits",
    "encode",
    "decode",
    "split_words",
    "to_phrase",
    "is_valid",
]
