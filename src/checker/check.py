"""
Tile check: can an inventory of tiles spell a phrase laid out in rows?

Pipeline:
1. Parse the inventory text into tokens and expand them into tiles
2. Wrap the phrase into rows of the configured width
3. Reject phrases that need more rows than are available
4. Match non-blank characters to tiles (maximum bipartite matching)
5. Summarise missing characters, or consumed and leftover tiles
"""

from typing import Optional

from pydantic import TypeAdapter

from .models import (
    CheckResult,
    InputTooLarge,
    Limits,
    RowOverflow,
    Satisfied,
    Unsatisfiable,
)
from .parsing import parse_tokens, expand_tokens, total_tiles
from .wrapping import wrap_phrase
from .matching import match_tiles
from .aggregate import missing_by_char, needed_by_label, leftover_tiles, build_layout


_RESULT_ADAPTER = TypeAdapter(CheckResult)


def _require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def check(
    inventory_spec: str,
    phrase: str,
    row_width: int,
    row_budget: int,
    include_leftover: bool = False,
    limits: Optional[Limits] = None,
) -> CheckResult:
    """
    Check whether the inventory can spell `phrase` within `row_budget` rows of `row_width`.

    Returns one of:
    - RowOverflow: the wrapped phrase needs more rows than available (no matching is run)
    - Unsatisfiable: some characters have no tile, with counts per character
    - Satisfied: tiles needed per label, and leftover tiles if `include_leftover`
    - InputTooLarge: an input exceeded `limits`

    Raises:
        ValueError: If row_width or row_budget is not a positive integer
    """
    _require_positive("row_width", row_width)
    _require_positive("row_budget", row_budget)
    limits = limits or Limits()
    phrase = phrase or ""

    if len(phrase) > limits.max_phrase_length:
        return InputTooLarge(what="phrase", size=len(phrase), limit=limits.max_phrase_length)

    tokens = parse_tokens(inventory_spec)
    tile_count = total_tiles(tokens)
    if tile_count > limits.max_tiles:
        return InputTooLarge(what="tiles", size=tile_count, limit=limits.max_tiles)

    rows = wrap_phrase(phrase, row_width)
    if len(rows) > limits.max_rows:
        return InputTooLarge(what="rows", size=len(rows), limit=limits.max_rows)

    if len(rows) > row_budget:
        return RowOverflow(
            required_rows=len(rows),
            available_rows=row_budget,
            wrapped_rows=rows,
        )

    tiles = expand_tokens(tokens)
    match = match_tiles(rows, tiles)

    if not match.satisfied:
        return Unsatisfiable(wrapped_rows=rows, missing_by_char=missing_by_char(match))

    return Satisfied(
        wrapped_rows=rows,
        needed_by_label=needed_by_label(match, tiles),
        leftover=leftover_tiles(match, tiles) if include_leftover else None,
        layout=build_layout(rows, match, tiles),
    )


def load_result(data) -> CheckResult:
    """Rebuild a result from its `model_dump()` form (or JSON text)."""
    if isinstance(data, (str, bytes)):
        return _RESULT_ADAPTER.validate_json(data)
    return _RESULT_ADAPTER.validate_python(data)
