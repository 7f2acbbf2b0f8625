"""Surface grid for the Martian Robots simulation."""

import logging
from typing import Dict

import numpy as np

from .errors import InvalidDimension
from .validation import MAX_COORDINATE, RawToken, normalize_token, parse_int

logger = logging.getLogger(__name__)


class Surface:
    """
    Bounded rectangular grid with two per-cell flag layers.

    Coordinates are zero-based and inclusive, so a surface of size
    (width, height) holds (width + 1) x (height + 1) cells.

    Coordinate convention: (x, y) for API, [y, x] for array indexing.
    Flags only ever go from False to True.
    """

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height

        # True = a robot has stood on this cell
        self.walked = np.zeros((height + 1, width + 1), dtype=bool)

        # True = a robot was lost stepping off from this cell
        self.scent = np.zeros((height + 1, width + 1), dtype=bool)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @classmethod
    def create(cls, raw_width: RawToken, raw_height: RawToken) -> "Surface":
        """
        Validate raw size tokens and build a cleared surface.

        Checks run in order and the first failure is raised as
        InvalidDimension: non-empty, integer, not both zero, not negative,
        not above MAX_COORDINATE.
        """
        tokens = (('width', raw_width), ('height', raw_height))

        for name, raw in tokens:
            if normalize_token(raw) is None:
                raise InvalidDimension(name, raw, "cannot be empty")

        values: Dict[str, int] = {}
        for name, raw in tokens:
            value = parse_int(normalize_token(raw))
            if value is None:
                raise InvalidDimension(name, raw, "cannot be parsed into an integer")
            values[name] = value

        width, height = values['width'], values['height']

        if width == 0 and height == 0:
            raise InvalidDimension(
                'size', f"{width} {height}",
                "width and height cannot both be zero")

        for name in ('width', 'height'):
            if values[name] < 0:
                raise InvalidDimension(name, values[name], "cannot be less than zero")

        for name in ('width', 'height'):
            if values[name] > MAX_COORDINATE:
                raise InvalidDimension(
                    name, values[name],
                    f"is above the allowed maximum ({MAX_COORDINATE})")

        logger.debug("Created %dx%d surface", width, height)
        return cls(width, height)

    @property
    def total_cells(self) -> int:
        return (self._width + 1) * (self._height + 1)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) lies on the surface."""
        return 0 <= x <= self._width and 0 <= y <= self._height

    def mark_walked(self, x: int, y: int) -> None:
        self.walked[y, x] = True

    def mark_scented(self, x: int, y: int) -> None:
        self.scent[y, x] = True

    def is_walked(self, x: int, y: int) -> bool:
        return bool(self.walked[y, x])

    def is_scented(self, x: int, y: int) -> bool:
        return bool(self.scent[y, x])

    def walked_count(self) -> int:
        return int(np.count_nonzero(self.walked))

    def scented_count(self) -> int:
        return int(np.count_nonzero(self.scent))

    def __repr__(self) -> str:
        return f"Surface(width={self._width}, height={self._height})"
