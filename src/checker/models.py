"""Data models for the tile checker."""

from pathlib import Path
from typing import Annotated, Dict, List, Literal, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Tile(BaseModel):
    """One physical tile. Two tiles with the same value are still distinct."""
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1)
    id: str


class TileToken(BaseModel):
    """A parsed inventory token before it is expanded into tiles."""
    value: str = Field(..., min_length=1)
    count: int = Field(1, ge=1)


class CharPosition(NamedTuple):
    """A non-blank character in the wrapped rows."""
    row: int
    col: int
    char: str


class MatchResult(BaseModel):
    """Raw output of the assignment engine."""
    positions: List[CharPosition] = Field(default_factory=list)
    tile_for_position: List[Optional[int]] = Field(default_factory=list)  # tile index or None
    unmatched: List[int] = Field(default_factory=list)
    matched: int = 0

    @property
    def satisfied(self) -> bool:
        """True when every position was given a tile."""
        return self.matched == len(self.positions)


class Limits(BaseModel):
    """Upper bounds on input size, checked before any real work is done."""
    max_phrase_length: int = Field(500, ge=1)
    max_tiles: int = Field(10_000, ge=1)
    max_rows: int = Field(100, ge=1)


class Leftover(BaseModel):
    """Tiles not consumed by the phrase."""
    total: int = 0
    by_label: Dict[str, int] = Field(default_factory=dict)


class RowOverflow(BaseModel):
    """The phrase wraps to more rows than are available."""
    kind: Literal["row_overflow"] = "row_overflow"
    required_rows: int
    available_rows: int
    wrapped_rows: List[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False


class Unsatisfiable(BaseModel):
    """The tiles cannot cover every character of the phrase."""
    kind: Literal["unsatisfiable"] = "unsatisfiable"
    wrapped_rows: List[str] = Field(default_factory=list)
    missing_by_char: Dict[str, int] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False


class Satisfied(BaseModel):
    """The phrase can be laid out with the tiles."""
    kind: Literal["satisfied"] = "satisfied"
    wrapped_rows: List[str] = Field(default_factory=list)
    needed_by_label: Dict[str, int] = Field(default_factory=dict)
    leftover: Optional[Leftover] = None
    layout: List[List[Optional[str]]] = Field(default_factory=list)  # tile id per cell, None for blanks

    @property
    def ok(self) -> bool:
        return True


class InputTooLarge(BaseModel):
    """An input exceeded one of the configured limits."""
    kind: Literal["input_too_large"] = "input_too_large"
    what: Literal["phrase", "tiles", "rows"]
    size: int
    limit: int

    @property
    def ok(self) -> bool:
        return False


CheckResult = Annotated[
    Union[RowOverflow, Unsatisfiable, Satisfied, InputTooLarge],
    Field(discriminator="kind"),
]


class CheckerConfig(BaseModel):
    """Configuration for a command-line check."""
    rows: int = Field(1, ge=1)
    row_length: int = Field(16, ge=1)
    show_leftover: bool = False
    tiles: Optional[str] = None
    phrase: Optional[str] = None
    persist: bool = True
    store_path: Optional[Path] = None
    limits: Limits = Field(default_factory=Limits)
