# limagetools

Small image processing routines with no dependencies. They work on bitmap,
grey-level and RGB images held in memory, and on the integer matrices that
serve as histograms, look-up tables and structuring elements.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data model (`limagetools.image`)

- `ImageType` has three members:
  - `BITMAP`, with pixels 0 or 1.
  - `GRAY_LEVEL`, with pixels from 0 to 255.
  - `COLOR`, three planes with values from 0 to 255.

  Each member has two properties, `max_value` and `plane_count`.
- `MatrixType` has two members: `INT` and `DOUBLE`.
- `Image(kind, planes)` holds `planes`, a tuple of row lists.
  - It checks the plane count, that the grid is rectangular, and the pixel ranges. A failed check raises `ValueError`.
  - It exposes `rows` and `cols`.
  - It exposes `gray` for bitmap and grey-level images, and `red`, `green` and `blue` for colour images. Asking for a plane that the image kind does not have raises `TypeError`.
  - `copy()` returns an independent copy.
- `Matrix(kind, values)` holds a rectangular grid.
  - An `INT` matrix accepts only `int` values.
  - A `DOUBLE` matrix converts real numbers to `float`.
  - It exposes `rows`, `cols` and `copy()`.
- `blank_image(kind, rows, cols)` and `blank_matrix(kind, rows, cols)` build images and matrices filled with zeros. Dimensions that are not positive raise `ValueError`.

## Processing (`limagetools.processing`)

| Function | What it does |
| --- | --- |
| `rgb_to_gray(image)` | Converts a colour image to grey level using 0.299 R + 0.587 G + 0.114 B, rounded half up. |
| `binarize(image, threshold)` | Turns a pixel below `threshold` into 0 and every other pixel into 1. The threshold must be in 0..255. |
| `invert(image)` | Returns the negative of the image: `1 - v` for a bitmap, `255 - v` otherwise. |
| `histogram(image)` | Returns the 1×256 `INT` histogram of a grey-level image. |
| `histogram_image(hist, rows)` | Draws the bars of a 1×256 histogram `rows` high, scaled to the largest count. Below them it adds one black row and a 24-row grey ramp, so the image has `rows + 25` rows. A histogram with no positive count raises `ValueError`. |
| `otsu_threshold(hist)` | Returns the threshold in 1..254 that minimises the within-class variance. It accepts a 1×256 or a 256×1 histogram. |
| `cumulative_histogram(hist)` | Returns running sums along each row. |
| `apply_lut(image, lut)` | Maps each pixel through a 1×256 look-up table. The table values are taken modulo 256. |
| `specify_histogram(cum_hist, desired_cum_hist)` | Maps each level to the level whose desired cumulative count is nearest. When two levels are equally near, the lowest one wins. |
| `check_binary_se(se)`, `check_ternary_se(se)` | Raise `InvalidStructuringElement` unless `se` is an `INT` matrix of odd size that holds only 0/1 (binary) or only 0/1/2 (ternary). The exception's `problem` attribute is an `SEProblem`: `NOT_ODD`, `NOT_INT`, `NOT_BIN` or `NOT_TERN`. |
| `erosion(image, se)` | Erodes a binary image by a binary structuring element centred on its middle element. Pixels outside the image count as 0. |

Thresholding with Otsu's method:

```python
from limagetools.image import Image, ImageType
from limagetools.processing import histogram, otsu_threshold, binarize

gray_image = Image(ImageType.GRAY_LEVEL, ([[10, 20, 200], [30, 220, 240]],))
threshold = otsu_threshold(histogram(gray_image))
binary = binarize(gray_image, threshold)
```

## Messages (`limagetools.messages`)

These functions return the text of usage, return-code and error messages. None of them prints anything.

- `program_name(argv0)` returns the part of `argv0` after the last `/`.
- `usage_text(program, syntax)` returns a `SYNTAXE` block with one tab-indented line per non-empty syntax line.
- `code_line(status, description)` returns the line describing one return code.
- `error_line(program, message)` returns `[program] message`.

## What this package does not do

- It does not read or write image files (PBM, PGM, PPM).
- It does not read or write matrix files.
- It installs no command-line tools.

Images and matrices are built from Python lists and returned as Python objects. Loading and saving them is up to the caller.