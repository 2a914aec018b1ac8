import logging

import yaml
from matplotlib import colormaps

from mandelbrot.datatypes import RenderSettings


default_settings = RenderSettings(
    bounds=(1000, 750),
    upper_left=complex(-1.20, 0.35),
    lower_right=complex(-1.0, 0.20),
    limit=255,
    colormap="inferno",
)


def settings_to_dict(settings):
    """Convert RenderSettings to a dictionary for YAML serialization."""
    width, height = settings.bounds
    return {
        "image": {
            "width": width,
            "height": height,
        },
        "plane": {
            "upper_left": {
                "re": settings.upper_left.real,
                "im": settings.upper_left.imag,
            },
            "lower_right": {
                "re": settings.lower_right.real,
                "im": settings.lower_right.imag,
            },
        },
        "computation": {
            "limit": settings.limit,
        },
        "presentation": {
            "colormap": settings.colormap,
        },
    }


def dict_to_settings(settings_dict, defaults=default_settings):
    """Convert a dictionary to a RenderSettings object. Missing sections fall back to `defaults`."""
    image = settings_dict.get("image", {})
    plane = settings_dict.get("plane", {})
    computation = settings_dict.get("computation", {})
    presentation = settings_dict.get("presentation", {})

    settings = RenderSettings(
        bounds=(
            int(image.get("width", defaults.bounds[0])),
            int(image.get("height", defaults.bounds[1])),
        ),
        upper_left=_dict_to_point(plane.get("upper_left"), defaults.upper_left),
        lower_right=_dict_to_point(plane.get("lower_right"), defaults.lower_right),
        limit=int(computation.get("limit", defaults.limit)),
        colormap=presentation.get("colormap", defaults.colormap),
    )
    validate_settings(settings)
    return settings


def _dict_to_point(point_dict, default):
    if point_dict is None:
        return default
    return complex(float(point_dict.get("re", default.real)), float(point_dict.get("im", default.imag)))


def validate_settings(settings):
    """Raise ValueError for settings that cannot be rendered."""
    width, height = settings.bounds
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if settings.limit < 0:
        raise ValueError(f"Iteration limit must be non-negative, got {settings.limit}")
    if settings.colormap not in colormaps:
        raise ValueError(f"Unknown colormap: {settings.colormap}")


def load_settings(path):
    """Load RenderSettings from a YAML file."""
    with open(path, "r") as file:
        settings_dict = yaml.safe_load(file) or {}
    logging.info(f"Loaded settings from {path}")
    return dict_to_settings(settings_dict)


def save_settings(settings, path):
    """Save RenderSettings to a YAML file."""
    with open(path, "w") as file:
        yaml.safe_dump(settings_to_dict(settings), file, sort_keys=False)
    logging.info(f"Saved settings to {path}")
