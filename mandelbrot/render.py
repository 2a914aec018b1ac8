import logging
from time import time

import numpy as np
from matplotlib import colormaps
from PIL import Image

from mandelbrot.fractal import compute_escape_counts, NO_ESCAPE
from mandelbrot.plane import sample_plane


def render(settings):
    """Compute the escape counts of every pixel described by `settings`."""
    logging.info(f"Starting fractal computation at {settings.bounds[0]}x{settings.bounds[1]}...")
    start_time = time()
    sampled_points = sample_plane(settings.bounds, settings.upper_left, settings.lower_right)
    sample_time = time()
    escape_counts = compute_escape_counts(sampled_points, settings.limit)
    end_time = time()
    logging.info(
        f"Fractal computation completed in {end_time - start_time:.2f} seconds. "
        f"{sample_time - start_time:.2f} seconds for sampling."
    )
    return escape_counts


def colorize(escape_counts, limit, colormap="inferno"):
    """
    Convert escape counts to an RGB image with a matplotlib colormap.

    Points that never escaped are painted black; the others are colored by count / limit.
    """
    cmap = colormaps[colormap]
    escaped = escape_counts != NO_ESCAPE
    normalized = np.zeros(escape_counts.shape, dtype=np.float64)
    if limit > 0:
        normalized[escaped] = escape_counts[escaped] / limit

    colored = (cmap(normalized)[:, :, :3] * 255).astype(np.uint8)
    colored[~escaped] = 0
    return colored


def save_image(pixels, file_path):
    """Write an RGB pixel array to `file_path`, format taken from the extension."""
    image = Image.fromarray(pixels)
    image.save(file_path)
    logging.info(f"Fractal successfully exported to {file_path}.")


def render_to_file(settings, file_path):
    """Render the fractal described by `settings` and save it to a file using Pillow."""
    logging.info(f"Exporting fractal to {file_path}...")
    escape_counts = render(settings)
    pixels = colorize(escape_counts, settings.limit, settings.colormap)
    save_image(pixels, file_path)
    return escape_counts
