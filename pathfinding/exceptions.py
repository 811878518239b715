"""
Exceptions raised by the pathfinding package.

A destination that cannot be reached is not an error: searches return
None for that case. These exceptions cover malformed input handed to the
graph helpers and internal inconsistencies.
"""


class PathfindingError(Exception):
    """Base class for all pathfinding errors."""


class InvalidGraphError(PathfindingError, ValueError):
    """Raised when an adjacency mapping or path does not describe a valid graph."""


class InconsistentOriginError(PathfindingError):
    """
    Raised when a completed search leaves an origin map that does not lead
    back to the source.
    """

    def __init__(self, source, destination):
        super().__init__(
            f"origin map does not lead from {destination!r} back to {source!r}"
        )
        self.source = source
        self.destination = destination
