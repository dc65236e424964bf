# pathsandbox/core/errors.py
"""
Grid errors.

Construction problems (InvalidDimensions, InvalidMarker) leave no grid to work
with. OutOfBounds and InvalidMutation reject a single request and leave the
grid unchanged. An unreachable goal is not an error: search returns [].
"""


class GridError(ValueError):
    """Base class for every rejected grid operation."""


class InvalidDimensions(GridError):
    pass


class InvalidMarker(GridError):
    pass


class OutOfBounds(GridError):
    def __init__(self, coord, shape):
        self.coord = coord
        self.shape = shape
        super().__init__(f"{coord!r} is outside a {shape[0]}x{shape[1]} grid")


class InvalidMutation(GridError):
    pass
