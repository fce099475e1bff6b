"""Grey-level, binary and colour images, and integer or real matrices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from numbers import Real

Grid = list[list]


class ImageType(IntEnum):
    """Kinds of image."""

    BITMAP = 0
    GRAY_LEVEL = 1
    COLOR = 2

    @property
    def max_value(self) -> int:
        """Largest value a pixel of this kind may take."""
        return 1 if self is ImageType.BITMAP else 255

    @property
    def plane_count(self) -> int:
        """Number of planes an image of this kind holds."""
        return 3 if self is ImageType.COLOR else 1


class MatrixType(IntEnum):
    """Kinds of matrix element."""

    INT = 3
    DOUBLE = 4


def _check_dimensions(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError(f"dimensions must be positive, got {rows}x{cols}")


def _shape(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    if rows == 0:
        raise ValueError("a grid needs at least one row")
    cols = len(grid[0])
    if cols == 0:
        raise ValueError("a grid needs at least one column")
    if any(len(row) != cols for row in grid):
        raise ValueError("all rows must have the same length")
    return rows, cols


@dataclass
class Image:
    """An image made of one plane (bitmap, grey level) or three (colour)."""

    kind: ImageType
    planes: tuple[Grid, ...]

    def __post_init__(self) -> None:
        self.kind = ImageType(self.kind)
        self.planes = tuple([list(row) for row in plane] for plane in self.planes)
        if len(self.planes) != self.kind.plane_count:
            raise ValueError(
                f"{self.kind.name} image needs {self.kind.plane_count} plane(s), "
                f"got {len(self.planes)}"
            )
        shapes = {_shape(plane) for plane in self.planes}
        if len(shapes) != 1:
            raise ValueError("all planes must have the same dimensions")
        top = self.kind.max_value
        for plane in self.planes:
            for row in plane:
                for value in row:
                    if not isinstance(value, int) or not 0 <= value <= top:
                        raise ValueError(
                            f"pixel value {value!r} outside [0, {top}] "
                            f"for a {self.kind.name} image"
                        )

    @property
    def rows(self) -> int:
        return len(self.planes[0])

    @property
    def cols(self) -> int:
        return len(self.planes[0][0])

    def _plane(self, index: int, colour: bool) -> Grid:
        if (self.kind is ImageType.COLOR) != colour:
            wanted = "a colour" if colour else "a bitmap or grey-level"
            raise TypeError(f"this plane exists only in {wanted} image")
        return self.planes[index]

    @property
    def gray(self) -> Grid:
        """Pixel values of a bitmap or grey-level image."""
        return self._plane(0, colour=False)

    @property
    def red(self) -> Grid:
        return self._plane(0, colour=True)

    @property
    def green(self) -> Grid:
        return self._plane(1, colour=True)

    @property
    def blue(self) -> Grid:
        return self._plane(2, colour=True)

    def copy(self) -> Image:
        """Return an independent copy of the image."""
        return Image(self.kind, self.planes)


@dataclass
class Matrix:
    """A rectangular matrix of integers or reals."""

    kind: MatrixType
    values: Grid

    def __post_init__(self) -> None:
        self.kind = MatrixType(self.kind)
        _shape(self.values)
        if self.kind is MatrixType.INT:
            for row in self.values:
                for value in row:
                    if not isinstance(value, int):
                        raise TypeError(f"integer matrix cannot hold {value!r}")
            self.values = [list(row) for row in self.values]
        else:
            converted = []
            for row in self.values:
                new_row = []
                for value in row:
                    if not isinstance(value, Real):
                        raise TypeError(f"real matrix cannot hold {value!r}")
                    new_row.append(float(value))
                converted.append(new_row)
            self.values = converted

    @property
    def rows(self) -> int:
        return len(self.values)

    @property
    def cols(self) -> int:
        return len(self.values[0])

    def copy(self) -> Matrix:
        """Return an independent copy of the matrix."""
        return Matrix(self.kind, self.values)


def blank_image(kind: ImageType, rows: int, cols: int) -> Image:
    """Create an image of the given kind with every pixel at 0."""
    _check_dimensions(rows, cols)
    kind = ImageType(kind)
    planes = tuple([[0] * cols for _ in range(rows)] for _ in range(kind.plane_count))
    return Image(kind, planes)


def blank_matrix(kind: MatrixType, rows: int, cols: int) -> Matrix:
    """Create a matrix of the given kind with every element at 0."""
    _check_dimensions(rows, cols)
    kind = MatrixType(kind)
    zero = 0 if kind is MatrixType.INT else 0.0
    return Matrix(kind, [[zero] * cols for _ in range(rows)])