"""Port for the pages matrix consumed by the navigator.

The matrix owns the discovered page geometry. Axis lengths already include
the two synthetic pages of a looped axis; the navigator never recomputes
padding and never mutates the matrix.
"""

from typing import Protocol

from slidepages.core.pages import PageIndex, PageStats


class PagesMatrixPort(Protocol):
    """Read-only query interface over a grid of pages."""

    @property
    def page_length_of_x(self) -> int:
        """Number of columns, loop padding included."""
        ...

    @property
    def page_length_of_y(self) -> int:
        """Number of rows, loop padding included."""
        ...

    def has_pages(self) -> bool:
        """Return True if at least one page was discovered."""
        ...

    def get_page_stats(self, page_x: int, page_y: int) -> PageStats:
        """Return the geometry of a cell.

        Raises:
            PageOutOfRangeError: If the index is outside the grid.
        """
        ...

    def get_nearest_page_index(self, x: float, y: float) -> PageIndex | None:
        """Return the page nearest to a raw offset, or None without pages."""
        ...
