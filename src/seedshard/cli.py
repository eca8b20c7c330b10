"""Command line interface: ``seedshard generate | split | recover``."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

import click

from seedshard import audit, phrase
from seedshard import policy as _policy_module
from seedshard.errors import SeedShardError
from seedshard.shamir import MAX_SHARDS
from seedshard.workflow import generate_phrase, recover_phrase, split_phrase

_logger = logging.getLogger(__name__)


def _audit(event: str, details: Dict[str, Any]) -> None:
    try:
        audit.record_event(event, details=details)
    except OSError as exc:
        _logger.warning("Could not write audit entry %s: %s", event, exc)


def _fail(exc: SeedShardError) -> click.ClickException:
    message = str(exc)
    if exc.line is not None and exc.line not in message:
        message = f"{message}\n  in line: {exc.line}"
    return click.ClickException(message)


def _stdin_lines() -> Iterable[str]:
    with click.open_file("-") as stream:
        return stream.read().splitlines()


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def main(verbose: bool) -> None:
    """Split a BIP39 seed phrase into Shamir shards and recover it."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, _policy_module.policy.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option(
    "-w",
    "--words",
    type=click.Choice([str(count) for count in sorted(phrase.WORD_COUNTS)]),
    default=None,
    help="Number of words in the new phrase (default: SEEDSHARD_DEFAULT_WORDS or 24).",
)
def generate(words: Optional[str]) -> None:
    """Print a fresh random seed phrase."""

    if words is None:
        words = str(_policy_module.policy.default_words)
    click.echo(generate_phrase(int(words)))
    _audit("phrase.generated", {"words": int(words)})


@main.command()
@click.argument("seed_phrase", required=False)
@click.option(
    "-n",
    "--shards",
    type=click.IntRange(1, MAX_SHARDS),
    required=True,
    help="Number of shards to create.",
)
@click.option(
    "-t",
    "--threshold",
    type=click.IntRange(1, MAX_SHARDS),
    required=True,
    help="Number of shards required to recover the phrase.",
)
def split(seed_phrase: Optional[str], shards: int, threshold: int) -> None:
    """Split SEED_PHRASE (or a phrase read from stdin) into shard lines."""

    if threshold > shards:
        raise click.BadParameter("Threshold cannot be greater than the number of shards", param_hint="'-t'")
    if seed_phrase is None:
        seed_phrase = " ".join(_stdin_lines())
    try:
        lines = split_phrase(seed_phrase, threshold, shards)
    except SeedShardError as exc:
        raise _fail(exc) from None
    for line in lines:
        click.echo(line)
    _audit(
        "phrase.split",
        {"words": len(phrase.split_words(seed_phrase)), "shards": shards, "threshold": threshold},
    )


@main.command()
@click.argument("shard_lines", nargs=-1)
def recover(shard_lines: Tuple[str, ...]) -> None:
    """Recover the phrase from SHARD_LINES (or one shard per stdin line)."""

    lines = list(shard_lines) if shard_lines else _stdin_lines()
    try:
        recovered = recover_phrase(lines)
    except SeedShardError as exc:
        _audit("phrase.recover_failed", {"error": type(exc).__name__})
        raise _fail(exc) from None
    click.echo(recovered)
    _audit("phrase.recovered", {"words": len(recovered.split())})


if __name__ == "__main__":
    main()
