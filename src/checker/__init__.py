"""Tile checking for tile-checker."""

from .check import check, load_result
from .models import (
    Tile,
    TileToken,
    CharPosition,
    MatchResult,
    Limits,
    Leftover,
    RowOverflow,
    Unsatisfiable,
    Satisfied,
    InputTooLarge,
    CheckResult,
    CheckerConfig,
)
from .parsing import parse_tiles, parse_tokens, expand_tokens, split_token_count, unescape_token, parse_count
from .wrapping import wrap_phrase, char_positions
from .matching import match_tiles
from .aggregate import missing_by_char, needed_by_label, leftover_tiles

__all__ = [
    # Main check
    "check",
    "load_result",
    # Models
    "Tile",
    "TileToken",
    "CharPosition",
    "MatchResult",
    "Limits",
    "Leftover",
    "RowOverflow",
    "Unsatisfiable",
    "Satisfied",
    "InputTooLarge",
    "CheckResult",
    "CheckerConfig",
    # Parsing
    "parse_tiles",
    "parse_tokens",
    "expand_tokens",
    "split_token_count",
    "unescape_token",
    "parse_count",
    # Wrapping
    "wrap_phrase",
    "char_positions",
    # Matching
    "match_tiles",
    # Summaries
    "missing_by_char",
    "needed_by_label",
    "leftover_tiles",
]
