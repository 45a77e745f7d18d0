"""Pagination-index engine for two-axis slide (carousel) behaviors."""

from slidepages.adapters.pages_matrix import PagesMatrix, ScrollGeometry
from slidepages.core.config import SlideConfig
from slidepages.core.navigator import NavigatorState, PageNavigator
from slidepages.core.pages import Page, PageIndex, Position

__all__ = [
    "NavigatorState",
    "Page",
    "PageIndex",
    "PageNavigator",
    "PagesMatrix",
    "Position",
    "ScrollGeometry",
    "SlideConfig",
]
