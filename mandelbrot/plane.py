import numpy as np


def pixel_to_point(bounds, pixel, upper_left, lower_right):
    """
    Map a pixel position in an image of size `bounds` (width, height) to a point in the complex plane.

    `upper_left` and `lower_right` are the complex points at the image corners. Column 0 lands on the
    left edge and row 0 on the top edge (greatest imaginary part).
    """
    width, height = bounds
    col, row = pixel
    plane_width = lower_right.real - upper_left.real
    plane_height = upper_left.imag - lower_right.imag
    # IEEE division: degenerate bounds give inf or nan instead of raising
    with np.errstate(divide="ignore", invalid="ignore"):
        re = upper_left.real + col * plane_width / np.float64(width)
        im = upper_left.imag - row * plane_height / np.float64(height)
    return complex(re, im)


def sample_plane(bounds, upper_left, lower_right):
    """
    Sample every pixel of an image of size `bounds` at once.

    Returns a complex128 array of shape (height, width) whose element [row, col] equals
    pixel_to_point(bounds, (col, row), upper_left, lower_right).
    """
    width, height = bounds
    plane_width = lower_right.real - upper_left.real
    plane_height = upper_left.imag - lower_right.imag

    # Same operation order as pixel_to_point, so both agree exactly
    cols = np.arange(width, dtype=np.float64)
    rows = np.arange(height, dtype=np.float64)
    re = upper_left.real + cols * plane_width / width
    im = upper_left.imag - rows * plane_height / height

    points = np.empty((height, width), dtype=np.complex128)
    points.real = re[np.newaxis, :]
    points.imag = im[:, np.newaxis]
    return points
