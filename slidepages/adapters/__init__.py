"""Adapters implementing the port protocols."""

from slidepages.adapters.pages_matrix import PagesMatrix, ScrollGeometry, build_pages

__all__ = [
    "PagesMatrix",
    "ScrollGeometry",
    "build_pages",
]
