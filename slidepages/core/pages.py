"""Page value types shared by the navigator and the pages matrix.

A page is described by both its logical index in the grid and the physical
offset of its top-left corner. Offsets follow the scroll translate
convention: the first page sits at (0, 0) and later pages are negative.
"""

from dataclasses import dataclass


def between(value: int, low: int, high: int) -> int:
    """Clamp value into [low, high] (saturating, never wrapping)."""
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True)
class PageIndex:
    """Logical cell of the page grid (zero-based column, row)."""

    page_x: int
    page_y: int


@dataclass(frozen=True)
class Position:
    """Physical offset of a page anchor."""

    x: float
    y: float


@dataclass(frozen=True)
class PageStats:
    """Geometry of one matrix cell.

    Attributes:
        x: Anchor offset along X (clamped to the maximum scroll).
        y: Anchor offset along Y (clamped to the maximum scroll).
        width: Cell width, the wrapper width.
        height: Cell height, the wrapper height.
        cx: Snap threshold along X; offsets at or past it belong to this column.
        cy: Snap threshold along Y; offsets at or past it belong to this row.
    """

    x: float
    y: float
    width: float
    height: float
    cx: float
    cy: float


@dataclass(frozen=True)
class Page:
    """A page index together with its physical anchor."""

    page_x: int
    page_y: int
    x: float
    y: float

    @classmethod
    def origin(cls) -> "Page":
        return cls(page_x=0, page_y=0, x=0, y=0)

    @classmethod
    def from_stats(cls, page_x: int, page_y: int, stats: PageStats) -> "Page":
        return cls(page_x=page_x, page_y=page_y, x=stats.x, y=stats.y)

    @property
    def index(self) -> PageIndex:
        return PageIndex(page_x=self.page_x, page_y=self.page_y)

    @property
    def position(self) -> Position:
        return Position(x=self.x, y=self.y)
