"""Point operations, histograms, Otsu thresholding and binary erosion."""

from __future__ import annotations

import math
from enum import IntEnum
from itertools import accumulate

from limagetools.image import Image, ImageType, Matrix, MatrixType

HIST_SIZE = 256
SCALE_ROWS = 25


class SEProblem(IntEnum):
    """Reasons a matrix is not a valid structuring element."""

    NOT_ODD = 1
    NOT_INT = 2
    NOT_BIN = 3
    NOT_TERN = 4


class InvalidStructuringElement(ValueError):
    """Raised when a structuring element fails validation."""

    def __init__(self, problem: SEProblem) -> None:
        self.problem = problem
        messages = {
            SEProblem.NOT_ODD: "the structuring element needs an odd number of rows and columns",
            SEProblem.NOT_INT: "the structuring element must hold integers only",
            SEProblem.NOT_BIN: "the structuring element must hold only 0 and 1",
            SEProblem.NOT_TERN: "the structuring element must hold only 0, 1 and 2",
        }
        super().__init__(messages[problem])


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _require_int(matrix: Matrix, what: str) -> None:
    if matrix.kind is not MatrixType.INT:
        raise TypeError(f"{what} must be an integer matrix")


def _require_row_histogram(matrix: Matrix, what: str) -> list[int]:
    _require_int(matrix, what)
    if matrix.rows != 1 or matrix.cols != HIST_SIZE:
        raise ValueError(f"{what} must be a 1x{HIST_SIZE} matrix")
    return matrix.values[0]


def rgb_to_gray(image: Image) -> Image:
    """Convert a colour image to grey levels (0.299 R + 0.587 G + 0.114 B)."""
    planes = zip(image.red, image.green, image.blue)
    gray = [
        [_round_half_up(0.299 * r + 0.587 * g + 0.114 * b) for r, g, b in zip(*rows)]
        for rows in planes
    ]
    return Image(ImageType.GRAY_LEVEL, (gray,))


def binarize(image: Image, threshold: int) -> Image:
    """Global thresholding: pixels below the threshold become 0, others 1."""
    if not 0 <= threshold <= 255:
        raise ValueError(f"threshold {threshold} outside [0, 255]")
    bits = [[0 if value < threshold else 1 for value in row] for row in image.gray]
    return Image(ImageType.BITMAP, (bits,))


def invert(image: Image) -> Image:
    """Return the negative of a bitmap, grey-level or colour image."""
    top = image.kind.max_value
    planes = tuple([[top - value for value in row] for row in plane] for plane in image.planes)
    return Image(image.kind, planes)


def histogram(image: Image) -> Matrix:
    """Count the pixels of each grey level, as a 1x256 integer matrix."""
    counts = [0] * HIST_SIZE
    for row in image.gray:
        for value in row:
            counts[value] += 1
    return Matrix(MatrixType.INT, [counts])


def histogram_image(hist: Matrix, rows: int) -> Image:
    """Draw a histogram as bars of the given height above a 25-row grey scale."""
    _require_int(hist, "the histogram")
    if hist.rows != 1 or hist.cols != HIST_SIZE:
        raise ValueError(f"the histogram must be a 1x{HIST_SIZE} matrix")
    if rows < 1:
        raise ValueError("the number of rows must be strictly positive")
    counts = hist.values[0]
    peak = max(0, *counts)
    if peak == 0:
        raise ValueError("the histogram has no positive count")
    pixels = [[0] * HIST_SIZE for _ in range(rows + SCALE_ROWS)]
    for column, count in enumerate(counts):
        lowest = max(0, rows - _trunc_div(rows * count, peak))
        for line in pixels[lowest:rows]:
            line[column] = 255
    for line in pixels[rows + 1:]:
        line[:] = range(HIST_SIZE)
    return Image(ImageType.GRAY_LEVEL, (pixels,))


def _within_class_cost(counts: list[int], split: int) -> float:
    total = 0.0
    for levels in (range(0, split), range(split, HIST_SIZE)):
        weight = float(sum(counts[k] for k in levels))
        moment = float(sum(k * counts[k] for k in levels))
        mean = moment / (weight if weight != 0 else math.inf)
        total += sum(counts[k] * (k - mean) ** 2 for k in levels)
    return total


def otsu_threshold(hist: Matrix) -> int:
    """Threshold in [1, 254] that minimises the within-class variance."""
    _require_int(hist, "the histogram")
    if (hist.rows, hist.cols) == (1, HIST_SIZE):
        counts = hist.values[0]
    elif (hist.rows, hist.cols) == (HIST_SIZE, 1):
        counts = [row[0] for row in hist.values]
    else:
        raise ValueError(f"the histogram must be 1x{HIST_SIZE} or {HIST_SIZE}x1")
    best, best_cost = 1, _within_class_cost(counts, 1)
    for split in range(2, 255):
        cost = _within_class_cost(counts, split)
        if cost < best_cost:
            best, best_cost = split, cost
    return best


def cumulative_histogram(hist: Matrix) -> Matrix:
    """Running sums along each row; only the first row starts from its first value."""
    _require_int(hist, "the histogram")
    result = [
        list(accumulate(row[1:], initial=row[0] if index == 0 else 0))
        for index, row in enumerate(hist.values)
    ]
    return Matrix(MatrixType.INT, result)


def apply_lut(image: Image, lut: Matrix) -> Image:
    """Map every pixel through a 1x256 look-up table."""
    table = _require_row_histogram(lut, "the look-up table")
    mapped = [[table[value] % 256 for value in row] for row in image.gray]
    return Image(image.kind, (mapped,))


def specify_histogram(cum_hist: Matrix, desired_cum_hist: Matrix) -> Matrix:
    """Look-up table sending each level to the level whose desired count is nearest."""
    _require_int(cum_hist, "the cumulative histogram")
    _require_int(desired_cum_hist, "the desired cumulative histogram")
    if (cum_hist.rows, cum_hist.cols) != (desired_cum_hist.rows, desired_cum_hist.cols):
        raise ValueError("both cumulative histograms must have the same dimensions")
    result = []
    for current, desired in zip(cum_hist.values, desired_cum_hist.values):
        levels = range(len(desired))
        result.append(
            [min(levels, key=lambda k, c=count: abs(c - desired[k])) for count in current]
        )
    return Matrix(MatrixType.INT, result)


def _check_se(se: Matrix, allowed: set[int], problem: SEProblem) -> None:
    if se.kind is not MatrixType.INT:
        raise InvalidStructuringElement(SEProblem.NOT_INT)
    if se.rows % 2 != 1 or se.cols % 2 != 1:
        raise InvalidStructuringElement(SEProblem.NOT_ODD)
    if any(value not in allowed for row in se.values for value in row):
        raise InvalidStructuringElement(problem)


def check_binary_se(se: Matrix) -> None:
    """Raise InvalidStructuringElement unless se is an odd-sized 0/1 integer matrix."""
    _check_se(se, {0, 1}, SEProblem.NOT_BIN)


def check_ternary_se(se: Matrix) -> None:
    """Raise InvalidStructuringElement unless se is an odd-sized 0/1/2 integer matrix."""
    _check_se(se, {0, 1, 2}, SEProblem.NOT_TERN)


def erosion(image: Image, se: Matrix) -> Image:
    """Binary erosion; pixels outside the image count as 0."""
    check_binary_se(se)
    pixels = image.gray
    rows, cols = image.rows, image.cols
    centre_row, centre_col = se.rows // 2, se.cols // 2
    offsets = [
        (dr - centre_row, dc - centre_col)
        for dr, line in enumerate(se.values)
        for dc, value in enumerate(line)
        if value
    ]

    def fits(i: int, j: int) -> bool:
        return all(
            0 <= i + di < rows and 0 <= j + dj < cols and pixels[i + di][j + dj]
            for di, dj in offsets
        )

    result = [[int(fits(i, j)) for j in range(cols)] for i in range(rows)]
    return Image(image.kind, (result,))