"""Tile inventory parsing.

An inventory is whitespace-separated tokens, each a tile value with an
optional ``:count`` suffix (``A:3 .:1 X``). The separator is the last colon
not escaped by a backslash, so ``\\::5`` is five ``:`` tiles and ``a\\:b``
is one ``a:b`` tile.
"""

import re
from typing import List, Optional, Tuple

from .models import Tile, TileToken


_COUNT_PATTERN = re.compile(r'^\s*([+-]?)([0-9]+)')

# Counts with more significant digits than this are clamped here; the real
# bound on tile totals is Limits.max_tiles.
_MAX_COUNT_DIGITS = 18
_COUNT_CEILING = 10 ** _MAX_COUNT_DIGITS


def unescape_token(text: str) -> str:
    """Replace every backslash-escaped character with the character itself."""
    out = []
    i = 0
    while i < len(text):
        if text[i] == '\\' and i + 1 < len(text):
            out.append(text[i + 1])
            i += 2
        else:
            out.append(text[i])
            i += 1
    return ''.join(out)


def split_token_count(token: str) -> Tuple[str, Optional[str]]:
    """
    Split a token into its unescaped value and raw count text.

    The separator is the last colon preceded by an even number of
    backslashes. Without one, the count part is None.
    """
    last = -1
    for i, ch in enumerate(token):
        if ch != ':':
            continue
        backslashes = 0
        j = i - 1
        while j >= 0 and token[j] == '\\':
            backslashes += 1
            j -= 1
        if backslashes % 2 == 0:
            last = i

    if last == -1:
        return unescape_token(token), None
    return unescape_token(token[:last]), unescape_token(token[last + 1:])


def parse_count(text: Optional[str]) -> int:
    """
    Parse a repeat count, falling back to 1.

    Leading digits are used and trailing junk ignored ("3x" is 3). Missing,
    non-numeric, zero and negative counts all become 1 so a typo never
    removes tiles. Only ASCII digits count, and absurdly long digit runs are
    clamped instead of converted.
    """
    if not text:
        return 1
    match = _COUNT_PATTERN.match(text)
    if not match:
        return 1
    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if sign == "-" or not digits:
        return 1
    if len(digits) > _MAX_COUNT_DIGITS:
        return _COUNT_CEILING
    return int(digits)


def parse_tokens(spec: str) -> List[TileToken]:
    """Parse an inventory string into tokens, skipping ones with an empty value."""
    tokens: List[TileToken] = []
    for part in (spec or '').split():
        value, count_text = split_token_count(part)
        if not value:
            continue
        tokens.append(TileToken(value=value, count=parse_count(count_text)))
    return tokens


def expand_tokens(tokens: List[TileToken]) -> List[Tile]:
    """Expand tokens into tiles with ids unique across the whole list."""
    tiles: List[Tile] = []
    for token in tokens:
        for _ in range(token.count):
            tiles.append(Tile(value=token.value, id=f"{token.value}#{len(tiles)}"))
    return tiles


def parse_tiles(spec: str) -> List[Tile]:
    """Parse an inventory string straight into tiles. Never raises on bad input."""
    return expand_tokens(parse_tokens(spec))


def total_tiles(tokens: List[TileToken]) -> int:
    """Number of tiles the tokens expand to."""
    return sum(token.count for token in tokens)
