"""Core navigation logic and value types.

Everything here is platform agnostic: page geometry arrives through the
PagesMatrixPort protocol and nothing depends on a DOM or a renderer.
"""

from slidepages.core.config import SlideConfig, load_slide_config
from slidepages.core.errors import (
    ErrorCategory,
    NotInitializedError,
    PageOutOfRangeError,
    PagePositionMismatchError,
    SlideConfigError,
    SlideError,
)
from slidepages.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from slidepages.core.navigator import (
    Direction,
    NavigatorState,
    PageNavigator,
    exposed_index,
)
from slidepages.core.pages import Page, PageIndex, PageStats, Position, between

__all__ = [
    # Configuration
    "SlideConfig",
    "load_slide_config",
    # Error handling
    "ErrorCategory",
    "NotInitializedError",
    "PageOutOfRangeError",
    "PagePositionMismatchError",
    "SlideConfigError",
    "SlideError",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
    # Navigation
    "Direction",
    "NavigatorState",
    "PageNavigator",
    "exposed_index",
    # Value types
    "Page",
    "PageIndex",
    "PageStats",
    "Position",
    "between",
]
