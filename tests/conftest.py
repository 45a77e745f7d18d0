"""Shared pytest fixtures for slidepages tests."""

import pytest

from slidepages.adapters.pages_matrix import PagesMatrix
from slidepages.core.config import SlideConfig
from slidepages.core.navigator import PageNavigator
from tests.mocks.matrix import FakePagesMatrix


@pytest.fixture
def flat_matrix() -> PagesMatrix:
    """Four 300x200 pages in a row, no loop padding.

    Anchors: x = 0, -300, -600, -900.
    """
    return PagesMatrix.from_grid(300, 200, columns=4)


@pytest.fixture
def looped_matrix() -> PagesMatrix:
    """Four 300x200 pages in a row with loop padding (six columns).

    Layout: [clone(3), 0, 1, 2, 3, clone(0)], anchors x = 0 .. -1500.
    """
    return PagesMatrix.from_grid(300, 200, columns=4, loop=True)


@pytest.fixture
def empty_matrix() -> FakePagesMatrix:
    """A matrix that discovered no pages."""
    return FakePagesMatrix(columns=0, rows=0)


@pytest.fixture
def flat_navigator(flat_matrix: PagesMatrix) -> PageNavigator:
    """Initialized navigator over the flat matrix."""
    navigator = PageNavigator(SlideConfig())
    navigator.initialize(flat_matrix)
    return navigator


@pytest.fixture
def looped_navigator(looped_matrix: PagesMatrix) -> PageNavigator:
    """Initialized looping navigator over the padded matrix."""
    navigator = PageNavigator(SlideConfig(loop=True))
    navigator.initialize(looped_matrix)
    return navigator
