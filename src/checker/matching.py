"""
Assignment of tiles to phrase characters.

Positions (non-blank characters) and tiles form a bipartite graph with an
edge wherever the tile value equals the character, ignoring case. Kuhn's
augmenting-path algorithm finds a maximum matching: each position in scan
order gets one depth-first search with its own visited set.
"""

from typing import Dict, List, Optional, Set

from .models import CharPosition, MatchResult, Tile
from .wrapping import char_positions


def group_tiles(tiles: List[Tile]) -> Dict[str, List[int]]:
    """Index tile positions in the inventory by lower-cased value."""
    groups: Dict[str, List[int]] = {}
    for index, tile in enumerate(tiles):
        groups.setdefault(tile.value.lower(), []).append(index)
    return groups


def build_adjacency(positions: List[CharPosition], tiles: List[Tile]) -> List[List[int]]:
    """Candidate tile indices for each position, in inventory order."""
    groups = group_tiles(tiles)
    return [groups.get(pos.char.lower(), []) for pos in positions]


def _augment(
    root: int,
    adjacency: List[List[int]],
    owner: List[Optional[int]],
    visited: Set[int],
) -> bool:
    """
    Look for an augmenting path starting at `root` and apply it.

    Explicit-stack version of the usual recursive search. `path[i]` is the
    tile through which `stack[i + 1]` was reached from `stack[i]`; on success
    every position on the stack takes over that tile.
    """
    visited.add(root)
    stack = [(root, iter(adjacency[root]))]
    path: List[int] = []

    while stack:
        position, candidates = stack[-1]
        descended = False
        for tile in candidates:
            holder = owner[tile]
            if holder is None:
                owner[tile] = position
                for (previous, _), via in zip(stack, path):
                    owner[via] = previous
                return True
            if holder not in visited:
                visited.add(holder)
                path.append(tile)
                stack.append((holder, iter(adjacency[holder])))
                descended = True
                break
        if not descended:
            stack.pop()
            if path:
                path.pop()

    return False


def match_tiles(rows: List[str], tiles: List[Tile]) -> MatchResult:
    """Compute a maximum matching between the non-blank characters of `rows` and `tiles`."""
    positions = char_positions(rows)
    adjacency = build_adjacency(positions, tiles)

    owner: List[Optional[int]] = [None] * len(tiles)  # position index holding each tile
    exhausted: Set[str] = set()
    matched = 0
    for position, pos in enumerate(positions):
        key = pos.char.lower()
        # A failed search leaves the matching unchanged, and positions with the
        # same character have the same candidates, so they would fail too.
        if key in exhausted:
            continue
        if _augment(position, adjacency, owner, set()):
            matched += 1
        else:
            exhausted.add(key)

    tile_for_position: List[Optional[int]] = [None] * len(positions)
    for tile, position in enumerate(owner):
        if position is not None:
            tile_for_position[position] = tile

    unmatched = [i for i, tile in enumerate(tile_for_position) if tile is None]

    return MatchResult(
        positions=positions,
        tile_for_position=tile_for_position,
        unmatched=unmatched,
        matched=matched,
    )
