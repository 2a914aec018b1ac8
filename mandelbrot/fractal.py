import numpy as np
from numba import njit, prange

ESCAPE_NORM_SQR = 4.0  # |z| > 2 without the square root
NO_ESCAPE = -1  # escape count of points that stayed bounded


@njit
def escape_count(c, limit):
    """Iteration at which z = z^2 + c first leaves |z| <= 2, or NO_ESCAPE."""
    z = 0j
    for i in range(limit):
        if z.real * z.real + z.imag * z.imag > ESCAPE_NORM_SQR:
            return i
        z = z * z + c
    return NO_ESCAPE


def escape_time(c, limit):
    """
    Determine whether `c` escapes to infinity within `limit` iterations of z = z^2 + c, starting at z = 0.

    Returns the iteration at which |z| first exceeded 2, or None if it never did. The magnitude is
    tested before each update, so a point with |c| > 2 escapes at iteration 1.
    """
    count = escape_count(complex(c), limit)
    if count == NO_ESCAPE:
        return None
    return int(count)


@njit(parallel=True)
def compute_escape_counts(points, limit):
    """
    Compute the escape time of every point in a 2D complex grid, rows in parallel.
    """
    height, width = points.shape
    escape_counts = np.empty((height, width), dtype=np.int64)

    for row in prange(height):  # parallelized
        for col in range(width):
            escape_counts[row, col] = escape_count(points[row, col], limit)

    return escape_counts
