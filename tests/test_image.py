import pytest

from limagetools.image import (
    Image,
    ImageType,
    Matrix,
    MatrixType,
    blank_image,
    blank_matrix,
)


def test_blank_gray_image_is_zeroed_with_right_shape():
    image = blank_image(ImageType.GRAY_LEVEL, 3, 4)
    assert image.rows == 3
    assert image.cols == 4
    assert all(value == 0 for row in image.gray for value in row)
    assert len(image.planes) == 1


def test_blank_color_image_has_three_planes():
    image = blank_image(ImageType.COLOR, 2, 5)
    assert len(image.planes) == 3
    for plane in (image.red, image.green, image.blue):
        assert len(plane) == 2
        assert all(len(row) == 5 for row in plane)


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_blank_image_rejects_bad_dimensions(rows, cols):
    with pytest.raises(ValueError):
        blank_image(ImageType.BITMAP, rows, cols)


def test_copy_is_equal_and_independent():
    image = Image(ImageType.GRAY_LEVEL, ([[10, 20], [30, 40]],))
    duplicate = image.copy()
    assert duplicate == image
    duplicate.gray[0][0] = 99
    assert image.gray[0][0] == 10


def test_constructor_copies_input_grid():
    grid = [[1, 0], [0, 1]]
    image = Image(ImageType.BITMAP, (grid,))
    grid[0][0] = 0
    assert image.gray[0][0] == 1


def test_bitmap_rejects_values_above_one():
    with pytest.raises(ValueError):
        Image(ImageType.BITMAP, ([[0, 2]],))


def test_gray_rejects_out_of_range_value():
    with pytest.raises(ValueError):
        Image(ImageType.GRAY_LEVEL, ([[256]],))


def test_ragged_grid_is_rejected():
    with pytest.raises(ValueError):
        Image(ImageType.GRAY_LEVEL, ([[1, 2], [3]],))


def test_wrong_plane_count_is_rejected():
    with pytest.raises(ValueError):
        Image(ImageType.COLOR, ([[1]],))


def test_planes_of_different_sizes_are_rejected():
    with pytest.raises(ValueError):
        Image(ImageType.COLOR, ([[1]], [[1, 2]], [[1]]))


def test_gray_plane_unavailable_on_color_image():
    image = blank_image(ImageType.COLOR, 1, 1)
    assert image.red[0][0] == 0
    assert image.kind is ImageType.COLOR
    with pytest.raises(TypeError):
        image.gray


def test_red_plane_unavailable_on_gray_image():
    image = blank_image(ImageType.GRAY_LEVEL, 1, 1)
    assert image.gray[0][0] == 0
    assert image.kind is ImageType.GRAY_LEVEL
    with pytest.raises(TypeError):
        image.red


def test_kind_given_as_number_becomes_enum():
    image = Image(1, ([[5]],))
    assert image.kind is ImageType.GRAY_LEVEL


def test_blank_int_matrix():
    matrix = blank_matrix(MatrixType.INT, 1, 256)
    assert (matrix.rows, matrix.cols) == (1, 256)
    assert all(isinstance(v, int) and v == 0 for v in matrix.values[0])


def test_blank_double_matrix_holds_floats():
    matrix = blank_matrix(MatrixType.DOUBLE, 2, 2)
    assert matrix.values == [[0.0, 0.0], [0.0, 0.0]]
    assert all(isinstance(v, float) for row in matrix.values for v in row)


def test_double_matrix_converts_ints():
    matrix = Matrix(MatrixType.DOUBLE, [[1, 2]])
    assert matrix.values == [[1.0, 2.0]]
    assert isinstance(matrix.values[0][0], float)


def test_int_matrix_rejects_floats():
    with pytest.raises(TypeError):
        Matrix(MatrixType.INT, [[1, 2.5]])


def test_double_matrix_rejects_text():
    with pytest.raises(TypeError):
        Matrix(MatrixType.DOUBLE, [["x"]])


def test_matrix_copy_is_independent():
    matrix = Matrix(MatrixType.INT, [[1, 2], [3, 4]])
    duplicate = matrix.copy()
    assert duplicate == matrix
    duplicate.values[1][1] = 0
    assert matrix.values[1][1] == 4


def test_blank_matrix_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        blank_matrix(MatrixType.INT, 0, 1)