"""BIP39 English wordlist as a bidirectional lookup table.

The words come from the ``mnemonic`` distribution, the reference
implementation of BIP39. Both directions are built once at import and never
mutated afterwards.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from mnemonic import Mnemonic

from seedshard.errors import UnknownWord

WORD_BITS = 11
WORD_COUNT = 1 << WORD_BITS

WORDS: tuple[str, ...] = tuple(Mnemonic("english").wordlist)
if len(WORDS) != WORD_COUNT:  # pragma: no cover - broken installation
    raise RuntimeError(f"BIP39 wordlist has {len(WORDS)} entries, expected {WORD_COUNT}")

_INDEX: Mapping[str, int] = MappingProxyType({word: idx for idx, word in enumerate(WORDS)})


def normalize(word: str) -> str:
    return word.strip().lower()


def index_of(word: str) -> int:
    """Return the 11-bit index of *word* or raise :class:`UnknownWord`."""

    try:
        return _INDEX[normalize(word)]
    except KeyError:
        raise UnknownWord(word) from None


def word_at(index: int) -> str:
    if not 0 <= index < WORD_COUNT:
        raise IndexError(f"word index {index} out of range")
    return WORDS[index]


__all__ = ["WORDS", "WORD_BITS", "WORD_COUNT", "index_of", "word_at", "normalize"]
