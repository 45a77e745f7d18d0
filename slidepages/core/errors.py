"""Error types for the slide pagination engine.

Index math never raises: out-of-range candidates are clamped and an empty
matrix is reported as an absent (None) result. The exceptions here cover
programmer errors only.

Example:
    from slidepages.core.errors import NotInitializedError, SlideError

    try:
        page = navigator.resolve_initial_page()
    except NotInitializedError:
        navigator.initialize(matrix)
"""

from enum import Enum, auto

from slidepages.core.pages import Page


class ErrorCategory(Enum):
    """Classification of slide errors for handling decisions."""

    NOT_INITIALIZED = auto()  # Navigator queried before initialize()
    OUT_OF_RANGE = auto()  # Matrix cell requested outside the grid
    POSITION_MISMATCH = auto()  # Page position disagrees with the matrix
    CONFIGURATION = auto()  # Invalid slide configuration


class SlideError(Exception):
    """Base class for slide pagination errors.

    Attributes:
        category: The kind of failure.
    """

    category: ErrorCategory

    def __init__(self, message: str, category: ErrorCategory) -> None:
        super().__init__(message)
        self.category = category


class NotInitializedError(SlideError):
    """Raised when a navigator query needs the matrix before initialize()."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"{operation} requires an initialized navigator",
            ErrorCategory.NOT_INITIALIZED,
        )
        self.operation = operation


class PageOutOfRangeError(SlideError):
    """Raised when page stats are requested for a cell outside the grid.

    Attributes:
        page_x: Requested column.
        page_y: Requested row.
    """

    def __init__(self, page_x: int, page_y: int) -> None:
        super().__init__(
            f"No page at index ({page_x}, {page_y})",
            ErrorCategory.OUT_OF_RANGE,
        )
        self.page_x = page_x
        self.page_y = page_y


class PagePositionMismatchError(SlideError):
    """Raised when a committed page carries a position the matrix disagrees with.

    Attributes:
        page: The rejected page.
        expected_x: Matrix anchor along X for the page index.
        expected_y: Matrix anchor along Y for the page index.
    """

    def __init__(self, page: Page, expected_x: float, expected_y: float) -> None:
        super().__init__(
            f"Page ({page.page_x}, {page.page_y}) is at ({page.x}, {page.y}),"
            f" expected ({expected_x}, {expected_y})",
            ErrorCategory.POSITION_MISMATCH,
        )
        self.page = page
        self.expected_x = expected_x
        self.expected_y = expected_y


class SlideConfigError(SlideError):
    """Raised when slide options fail validation.

    Attributes:
        original_error: The underlying validation error, if any.
    """

    def __init__(
        self, message: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message, ErrorCategory.CONFIGURATION)
        self.original_error = original_error

    @classmethod
    def from_exception(cls, ex: Exception) -> "SlideConfigError":
        """Create a SlideConfigError from an existing exception."""
        return cls(message=str(ex), original_error=ex)
