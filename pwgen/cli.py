"""
Command-line interface and high-level generator function.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import math
import sys
from dataclasses import dataclass
from typing import Sequence

from .charsets import CharacterClass, combined_alphabet, normalize_selection
from .config import DEFAULT_CONFIG, PasswordConfig, RANDOM_SOURCES
from .generator import PasswordGeneratorError, RandomSource, generate
from .sources import get_random_source
from .strength import StrengthTier, score

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    password: str
    length: int
    selection: tuple[CharacterClass, ...]
    source: str

    # Strength / pool metadata
    tier: StrengthTier
    pool_size: int
    entropy_bits: float


def generate_password_with_meta(
    config: PasswordConfig | None = None,
    rng: RandomSource | None = None,
) -> GenerationMeta:
    """
    High-level generation pipeline with metadata:

    - Pick the configured random source (unless ``rng`` is given).
    - Generate with the configured length and selection.
    - Score the result and estimate its theoretical entropy.
    """
    cfg = config or DEFAULT_CONFIG
    source = rng if rng is not None else get_random_source(config=cfg)

    password = generate(cfg.password_length, cfg.selection, rng=source)

    pool_size = len(combined_alphabet(cfg.selection))
    entropy_bits = len(password) * math.log2(pool_size) if pool_size else 0.0

    return GenerationMeta(
        password=password,
        length=len(password),
        selection=normalize_selection(cfg.selection),
        source=cfg.random_source,
        tier=score(password),
        pool_size=pool_size,
        entropy_bits=entropy_bits,
    )


def generate_password(config: PasswordConfig | None = None) -> str:
    return generate_password_with_meta(config).password


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwgen",
        description="Generate random passwords from selected character classes.",
    )
    parser.add_argument(
        "-l", "--length", type=int, default=DEFAULT_CONFIG.password_length,
        help=f"password length (default {DEFAULT_CONFIG.password_length})",
    )
    parser.add_argument("--no-uppercase", action="store_true", help="exclude A-Z")
    parser.add_argument("--no-lowercase", action="store_true", help="exclude a-z")
    parser.add_argument("--no-digits", action="store_true", help="exclude 0-9")
    parser.add_argument("--no-symbols", action="store_true", help="exclude symbols")
    parser.add_argument(
        "-n", "--count", type=int, default=1, help="number of passwords to print",
    )
    parser.add_argument(
        "--source", choices=RANDOM_SOURCES, default=DEFAULT_CONFIG.random_source,
        help="random source (default %(default)s)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="print passwords only",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> PasswordConfig:
    excluded = {
        CharacterClass.UPPERCASE: args.no_uppercase,
        CharacterClass.LOWERCASE: args.no_lowercase,
        CharacterClass.DIGIT: args.no_digits,
        CharacterClass.SYMBOL: args.no_symbols,
    }
    selection = tuple(cls for cls in DEFAULT_CONFIG.selection if not excluded[cls])

    # The CLI is not bound to the slider range, only to what generate() accepts.
    return dataclasses.replace(
        DEFAULT_CONFIG,
        password_length=args.length,
        selection=selection,
        random_source=args.source,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m pwgen.cli` or `run_pwgen.py cli`.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.count < 1:
        print("Error: --count must be at least 1.", file=sys.stderr)
        return 2

    cfg = config_from_args(args)
    rng = get_random_source(config=cfg)

    try:
        for _ in range(args.count):
            meta = generate_password_with_meta(cfg, rng=rng)
            print(meta.password)
            if not args.quiet:
                print(f"Strength: {meta.tier.label} (~{meta.entropy_bits:.1f} bits)")
    except PasswordGeneratorError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
