"""Page navigation over a pages matrix.

The navigator owns the current page and every index-space transformation a
slide needs: bounding, stepping, nearest-page snapping, exposed-index
translation and loop rewinding. All queries are pure; ``set_current_page``
is the only mutation.

Looping is an index transform. A looped axis of ``L`` real pages is laid out
by the matrix as ``L + 2`` cells: a clone of the last page at index 0, the
real pages at ``1..L`` and a clone of the first page at ``L + 1``. The clones
are transit cells for the wrap-around animation and never resting targets.
"""

from dataclasses import dataclass, replace
from enum import Enum

from slidepages.core.config import SlideConfig
from slidepages.core.errors import (
    NotInitializedError,
    PageOutOfRangeError,
    PagePositionMismatchError,
)
from slidepages.core.logging import get_logger
from slidepages.core.pages import Page, PageIndex, PageStats, between
from slidepages.ports.matrix import PagesMatrixPort

logger = get_logger(__name__)


class Direction(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass
class NavigatorState:
    """Mutable navigation state, written only by its PageNavigator.

    Attributes:
        current_page: Where the slide rests now; None until initialized.
        placeholder: current_page is the origin stand-in used while the
            matrix has no pages, not a committed page.
        need_loop: Looping was requested in the options.
        loop_x: Looping is active along X.
        loop_y: Looping is active along Y.
        slide_x: The grid holds more than one column.
        slide_y: The grid holds more than one row (and X does not slide).
    """

    current_page: Page | None = None
    placeholder: bool = False
    need_loop: bool = False
    loop_x: bool = False
    loop_y: bool = False
    slide_x: bool = False
    slide_y: bool = False


def exposed_index(index: int, real_length: int) -> int:
    """Map a padded index onto ``[0, real_length)``.

    Equivalent to looking ``index`` up in ``[L-1, 0, 1, ..., L-1, 0]``;
    indices beyond the padding keep wrapping.
    """
    if real_length < 1:
        return index
    return (index - 1) % real_length


class PageNavigator:
    """Resolves page targets for a slide behavior."""

    def __init__(
        self,
        config: SlideConfig | None = None,
        state: NavigatorState | None = None,
    ) -> None:
        """Create a navigator.

        Args:
            config: Slide options. Defaults to a non-looping slide.
            state: State cell to navigate with. A fresh one is created when
                omitted; pass an existing cell to keep the current page
                across navigator instances.
        """
        self._config = config or SlideConfig()
        self._state = state if state is not None else NavigatorState()
        self._matrix: PagesMatrixPort | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self, matrix: PagesMatrixPort) -> None:
        """Attach the matrix and derive the slide and loop flags.

        Call again after the matrix geometry changes. An existing current
        page is kept, re-clamped to the resting pages of the new grid;
        otherwise the configured start page becomes current. While the
        matrix has no pages the origin stands in and the start page is
        resolved again on the next initialize.
        """
        self._matrix = matrix
        self._check_slide_loop(matrix)

        state = self._state
        current = state.current_page
        if current is None or state.placeholder:
            current = self._start_page(matrix)
            state.placeholder = not matrix.has_pages()
        elif matrix.has_pages():
            current = self._rest_page(matrix, current.page_x, current.page_y)
        state.current_page = current

        logger.debug(
            "navigator_initialized",
            page_length_of_x=matrix.page_length_of_x,
            page_length_of_y=matrix.page_length_of_y,
            slide_x=self._state.slide_x,
            slide_y=self._state.slide_y,
            loop_x=self._state.loop_x,
            loop_y=self._state.loop_y,
            page_x=current.page_x,
            page_y=current.page_y,
        )

    def _check_slide_loop(self, matrix: PagesMatrixPort) -> None:
        state = self._state
        state.need_loop = self._config.loop
        state.slide_x = matrix.page_length_of_x > 1
        state.slide_y = matrix.has_pages() and matrix.page_length_of_y > 1

        if state.slide_x and state.slide_y:
            logger.warning(
                "two_axis_slide_unsupported",
                page_length_of_x=matrix.page_length_of_x,
                page_length_of_y=matrix.page_length_of_y,
                precedence="x",
            )
            state.slide_y = False

        state.loop_x = state.need_loop and state.slide_x
        state.loop_y = state.need_loop and state.slide_y

    def _start_page(self, matrix: PagesMatrixPort) -> Page:
        index = self.resolve_valid_index(
            self._config.start_page_x, self._config.start_page_y
        )
        if index is None:
            return Page.origin()
        stats = matrix.get_page_stats(index.page_x, index.page_y)
        return Page.from_stats(index.page_x, index.page_y, stats)

    def _resting_bounds(self, matrix: PagesMatrixPort) -> tuple[int, int, int, int]:
        """Return (first_x, last_x, first_y, last_y), clones excluded."""
        first_x, last_x = 0, matrix.page_length_of_x - 1
        first_y, last_y = 0, matrix.page_length_of_y - 1
        if self._state.loop_x:
            first_x, last_x = first_x + 1, last_x - 1
        if self._state.loop_y:
            first_y, last_y = first_y + 1, last_y - 1
        return first_x, last_x, first_y, last_y

    def _rest_page(self, matrix: PagesMatrixPort, page_x: int, page_y: int) -> Page:
        first_x, last_x, first_y, last_y = self._resting_bounds(matrix)
        page_x = between(page_x, first_x, last_x)
        page_y = between(page_y, first_y, last_y)
        return Page.from_stats(page_x, page_y, matrix.get_page_stats(page_x, page_y))

    def _require_matrix(self, operation: str) -> PagesMatrixPort:
        if self._matrix is None:
            raise NotInitializedError(operation)
        return self._matrix

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_page(self) -> Page:
        if self._state.current_page is None:
            raise NotInitializedError("current_page")
        return self._state.current_page

    @property
    def loop_x(self) -> bool:
        return self._state.loop_x

    @property
    def loop_y(self) -> bool:
        return self._state.loop_y

    @property
    def slide_x(self) -> bool:
        return self._state.slide_x

    @property
    def slide_y(self) -> bool:
        return self._state.slide_y

    def set_current_page(self, page: Page) -> None:
        """Commit a new current page.

        Pages returned by the resolve_* methods always pass.

        Raises:
            PageOutOfRangeError: If the matrix has pages and ``page`` is not
                one of them.
            PagePositionMismatchError: If the position of ``page`` is not the
                matrix anchor for its index.
        """
        matrix = self._require_matrix("set_current_page")
        if matrix.has_pages():
            if not (
                0 <= page.page_x < matrix.page_length_of_x
                and 0 <= page.page_y < matrix.page_length_of_y
            ):
                raise PageOutOfRangeError(page.page_x, page.page_y)
            stats = matrix.get_page_stats(page.page_x, page.page_y)
            if (page.x, page.y) != (stats.x, stats.y):
                raise PagePositionMismatchError(page, stats.x, stats.y)
        self._state.current_page = page
        self._state.placeholder = False
        logger.debug("current_page_committed", page_x=page.page_x, page_y=page.page_y)

    def current_page_stats(self) -> PageStats:
        """Return the matrix stats of the current page."""
        matrix = self._require_matrix("current_page_stats")
        current = self.current_page
        return matrix.get_page_stats(current.page_x, current.page_y)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def resolve_page_by_index(self, page_x: int, page_y: int) -> Page | None:
        """Clamp an internal index into the grid and attach its position.

        Returns None when the matrix has no pages.
        """
        matrix = self._require_matrix("resolve_page_by_index")
        if not matrix.has_pages():
            return None
        page_x = between(page_x, 0, matrix.page_length_of_x - 1)
        page_y = between(page_y, 0, matrix.page_length_of_y - 1)
        return Page.from_stats(page_x, page_y, matrix.get_page_stats(page_x, page_y))

    def resolve_initial_page(self) -> Page:
        """Return the page to present on first paint.

        A zero index on a looped axis points at the clone cell, so it is
        replaced by the first real page.
        """
        matrix = self._require_matrix("resolve_initial_page")
        if not matrix.has_pages():
            return Page.origin()
        current = self.current_page
        page_x = current.page_x or (1 if self._state.loop_x else 0)
        page_y = current.page_y or (1 if self._state.loop_y else 0)
        return Page.from_stats(page_x, page_y, matrix.get_page_stats(page_x, page_y))

    def resolve_exposed_page(self, page: Page | None = None) -> Page:
        """Translate an internal page (default: current) into exposed indices."""
        exposed = page if page is not None else self.current_page
        if not (self._state.loop_x or self._state.loop_y):
            return replace(exposed)

        matrix = self._require_matrix("resolve_exposed_page")
        page_x = exposed.page_x
        page_y = exposed.page_y
        if self._state.loop_x:
            page_x = exposed_index(page_x, matrix.page_length_of_x - 2)
        if self._state.loop_y:
            page_y = exposed_index(page_y, matrix.page_length_of_y - 2)
        return replace(exposed, page_x=page_x, page_y=page_y)

    def next_page_index(self) -> PageIndex:
        """Step forward on the sliding axis. The result is not clamped."""
        return self._page_index_by_direction(Direction.POSITIVE)

    def prev_page_index(self) -> PageIndex:
        """Step backward on the sliding axis. The result is not clamped."""
        return self._page_index_by_direction(Direction.NEGATIVE)

    def _page_index_by_direction(self, direction: Direction) -> PageIndex:
        step = -1 if direction is Direction.NEGATIVE else 1
        current = self.current_page
        page_x = current.page_x
        page_y = current.page_y
        if self._state.slide_x:
            page_x += step
        if self._state.slide_y:
            page_y += step
        return PageIndex(page_x=page_x, page_y=page_y)

    def resolve_valid_index(self, x: int, y: int) -> PageIndex | None:
        """Bound an exposed index, shifting it past the clone cell when looped.

        Looped axes clamp into ``[1, length - 2]`` so a clone is never the
        result. Returns None when the matrix has no pages.
        """
        matrix = self._require_matrix("resolve_valid_index")
        if not matrix.has_pages():
            return None

        first_x, last_x, first_y, last_y = self._resting_bounds(matrix)
        if self._state.loop_x:
            x += 1
        if self._state.loop_y:
            y += 1
        return PageIndex(
            page_x=between(x, first_x, last_x),
            page_y=between(y, first_y, last_y),
        )

    def resolve_nearest_page(
        self, x: float, y: float, direction_x: int, direction_y: int
    ) -> Page:
        """Pick the page a gesture ending at (x, y) should snap to.

        When the offset has not left the current column, the snap moves one
        column in ``direction_x``. Rows do not get that nudge: the nearest
        row is kept as is. Positions are read along each axis separately,
        X from row 0 and Y from column 0.
        """
        matrix = self._require_matrix("resolve_nearest_page")
        index = matrix.get_nearest_page_index(x, y)
        if index is None:
            return Page.origin()

        current = self.current_page
        page_x = index.page_x
        page_y = index.page_y
        if page_x == current.page_x:
            page_x = between(page_x + direction_x, 0, matrix.page_length_of_x - 1)
        if page_y == current.page_y:
            # The row is never nudged by direction_y.
            page_y = between(index.page_y, 0, matrix.page_length_of_y - 1)

        return Page(
            page_x=page_x,
            page_y=page_y,
            x=matrix.get_page_stats(page_x, 0).x,
            y=matrix.get_page_stats(0, page_y).y,
        )

    def resolve_loop_rewind(self) -> PageIndex | None:
        """Return the real page equivalent to a clone the slide landed on.

        X is checked first; Y only when X needs no rewind. Returns None when
        the current page is not a clone.
        """
        matrix = self._require_matrix("resolve_loop_rewind")
        current = self.current_page
        target: PageIndex | None = None

        if self._state.loop_x:
            if current.page_x == 0:
                target = PageIndex(matrix.page_length_of_x - 2, current.page_y)
            elif current.page_x == matrix.page_length_of_x - 1:
                target = PageIndex(1, current.page_y)
        if target is None and self._state.loop_y:
            if current.page_y == 0:
                target = PageIndex(current.page_x, matrix.page_length_of_y - 2)
            elif current.page_y == matrix.page_length_of_y - 1:
                target = PageIndex(current.page_x, 1)

        if target is not None:
            logger.debug(
                "loop_rewind_resolved",
                from_page_x=current.page_x,
                from_page_y=current.page_y,
                page_x=target.page_x,
                page_y=target.page_y,
            )
        return target
