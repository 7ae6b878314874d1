"""Interface abstractions for the Game of Life core.

- IEngine: engine contract consumed by the GUI backend
"""

from gameoflife.interfaces.engine import IEngine

__all__ = ["IEngine"]
