"""Summaries derived from a matching. All groupings keep first-occurrence order."""

from typing import Dict, Iterable, List, Optional

from .models import Leftover, MatchResult, Tile


def count_labels(labels: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    return counts


def missing_by_char(match: MatchResult) -> Dict[str, int]:
    """Unmatched characters as displayed (case-sensitive) with their counts."""
    return count_labels(match.positions[i].char for i in match.unmatched)


def needed_by_label(match: MatchResult, tiles: List[Tile]) -> Dict[str, int]:
    """Consumed tiles grouped by value, in phrase order."""
    return count_labels(
        tiles[t].value for t in match.tile_for_position if t is not None
    )


def leftover_tiles(match: MatchResult, tiles: List[Tile]) -> Leftover:
    """Tiles the matching did not use, grouped by value in inventory order."""
    used = {t for t in match.tile_for_position if t is not None}
    remaining = [tile.value for i, tile in enumerate(tiles) if i not in used]
    return Leftover(total=len(remaining), by_label=count_labels(remaining))


def build_layout(
    rows: List[str],
    match: MatchResult,
    tiles: List[Tile],
) -> List[List[Optional[str]]]:
    """Tile id placed at every cell of the wrapped rows (None for blanks and unmatched cells)."""
    layout: List[List[Optional[str]]] = [[None] * len(row) for row in rows]
    for position, tile in zip(match.positions, match.tile_for_position):
        if tile is not None:
            layout[position.row][position.col] = tiles[tile].id
    return layout
