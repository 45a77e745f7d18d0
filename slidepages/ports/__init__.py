"""Ports (interfaces) for the application.

Protocol definitions for the collaborators the navigator consumes.
"""

from slidepages.ports.matrix import PagesMatrixPort

__all__ = ["PagesMatrixPort"]
