"""Geometry-driven pages matrix.

Pages are cut out of the scroll content in steps of the wrapper size. The
grid is stored column-major (``pages[page_x][page_y]``) and offsets follow
the translate convention, so page anchors are zero or negative and the last
page of each axis is pinned to the maximum scroll offset.
"""

import math
from dataclasses import dataclass

from slidepages.core.errors import PageOutOfRangeError
from slidepages.core.logging import get_logger
from slidepages.core.pages import PageIndex, PageStats

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScrollGeometry:
    """Measured sizes of a slide.

    Attributes:
        wrapper_width: Visible viewport width; the page step along X.
        wrapper_height: Visible viewport height; the page step along Y.
        content_width: Total scrollable content width.
        content_height: Total scrollable content height.
        max_scroll_x: Most negative reachable X offset.
        max_scroll_y: Most negative reachable Y offset.
    """

    wrapper_width: float
    wrapper_height: float
    content_width: float
    content_height: float
    max_scroll_x: float
    max_scroll_y: float

    @classmethod
    def for_content(
        cls,
        wrapper_width: float,
        wrapper_height: float,
        content_width: float,
        content_height: float,
    ) -> "ScrollGeometry":
        """Derive the maximum scroll offsets from wrapper and content sizes."""
        return cls(
            wrapper_width=wrapper_width,
            wrapper_height=wrapper_height,
            content_width=content_width,
            content_height=content_height,
            max_scroll_x=min(0, wrapper_width - content_width),
            max_scroll_y=min(0, wrapper_height - content_height),
        )

    @property
    def is_degenerate(self) -> bool:
        return (
            self.wrapper_width <= 0
            or self.wrapper_height <= 0
            or self.content_width <= 0
            or self.content_height <= 0
        )


def _half_step(step: float) -> int:
    # Half-up; round() sends 186.5 to 186.
    return math.floor(step / 2 + 0.5)


def build_pages(geometry: ScrollGeometry) -> list[list[PageStats]]:
    """Cut the content into a column-major grid of page stats."""
    if geometry.is_degenerate:
        return []

    step_x = geometry.wrapper_width
    step_y = geometry.wrapper_height
    half_x = _half_step(step_x)
    half_y = _half_step(step_y)

    pages: list[list[PageStats]] = []
    x: float = 0
    while x > -geometry.content_width:
        column: list[PageStats] = []
        y: float = 0
        while y > -geometry.content_height:
            column.append(
                PageStats(
                    x=max(x, geometry.max_scroll_x),
                    y=max(y, geometry.max_scroll_y),
                    width=step_x,
                    height=step_y,
                    cx=x - half_x,
                    cy=y - half_y,
                )
            )
            y -= step_y
        pages.append(column)
        x -= step_x
    return pages


class PagesMatrix:
    """Pages matrix built from a ScrollGeometry.

    Implements the PagesMatrixPort protocol. Call ``refresh`` after the
    content is resized, then re-initialize the navigator so it re-derives
    its capability flags.
    """

    def __init__(self, geometry: ScrollGeometry) -> None:
        self.geometry = geometry
        self.pages: list[list[PageStats]] = []
        self.refresh(geometry)

    @classmethod
    def from_grid(
        cls,
        page_width: float,
        page_height: float,
        columns: int,
        rows: int = 1,
        loop: bool = False,
    ) -> "PagesMatrix":
        """Build a matrix for a grid of equally sized pages.

        With ``loop`` set, the sliding axis gets the two synthetic clone
        pages (a copy of the last page in front, a copy of the first page at
        the end), so its length becomes ``count + 2``. Columns slide when
        there is more than one; rows only otherwise, as in the navigator.
        """
        if loop and columns > 1:
            columns += 2
        elif loop and rows > 1:
            rows += 2
        geometry = ScrollGeometry.for_content(
            wrapper_width=page_width,
            wrapper_height=page_height,
            content_width=page_width * columns,
            content_height=page_height * rows,
        )
        return cls(geometry)

    def refresh(self, geometry: ScrollGeometry) -> None:
        """Rebuild the grid for new measurements."""
        self.geometry = geometry
        self.pages = build_pages(geometry)
        logger.debug(
            "pages_matrix_built",
            page_length_of_x=self.page_length_of_x,
            page_length_of_y=self.page_length_of_y,
        )

    @property
    def page_length_of_x(self) -> int:
        return len(self.pages)

    @property
    def page_length_of_y(self) -> int:
        return len(self.pages[0]) if self.pages else 0

    def has_pages(self) -> bool:
        return bool(self.pages)

    def get_page_stats(self, page_x: int, page_y: int) -> PageStats:
        """Return the stats of a cell.

        Raises:
            PageOutOfRangeError: If the index is outside the grid. Negative
                indices are rejected rather than counted from the end.
        """
        if not 0 <= page_x < self.page_length_of_x:
            raise PageOutOfRangeError(page_x, page_y)
        column = self.pages[page_x]
        if not 0 <= page_y < len(column):
            raise PageOutOfRangeError(page_x, page_y)
        return column[page_y]

    def get_nearest_page_index(self, x: float, y: float) -> PageIndex | None:
        """Return the first column and row whose snap threshold x/y has passed."""
        if not self.pages:
            return None

        page_x = 0
        last_x = len(self.pages) - 1
        while page_x < last_x:
            if x >= self.pages[page_x][0].cx:
                break
            page_x += 1

        page_y = 0
        last_y = len(self.pages[page_x]) - 1
        while page_y < last_y:
            if y >= self.pages[0][page_y].cy:
                break
            page_y += 1

        return PageIndex(page_x=page_x, page_y=page_y)
