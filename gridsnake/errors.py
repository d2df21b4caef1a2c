"""
errors.py — Exceptions raised while building the game model.

Both are configuration errors: they are raised at construction time only,
never by a running engine.
"""


class GridSnakeError(Exception):
    pass


class InvalidDimension(GridSnakeError, ValueError):
    """A grid dimension (cell size, rows or cols) is not a positive integer."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


class InvalidSnakeLength(GridSnakeError, ValueError):
    """The initial snake length is outside [2, cols]."""

    def __init__(self, length, cols: int):
        self.length = length
        self.cols = cols
        super().__init__(
            f"Snake length must be between 2 and the number of columns ({cols}), got {length!r}"
        )
