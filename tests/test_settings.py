from dataclasses import FrozenInstanceError, replace

import pytest

from mandelbrot.datatypes import RenderSettings
from mandelbrot.settings import (
    default_settings, settings_to_dict, dict_to_settings, load_settings, save_settings
)


def test_settings_dict_layout():
    settings_dict = settings_to_dict(default_settings)
    assert settings_dict["image"] == {"width": 1000, "height": 750}
    assert settings_dict["plane"]["upper_left"] == {"re": -1.20, "im": 0.35}
    assert settings_dict["computation"]["limit"] == 255
    assert settings_dict["presentation"]["colormap"] == "inferno"


def test_yaml_round_trip(tmp_path):
    settings = RenderSettings(
        bounds=(64, 48),
        upper_left=complex(-2.0, 1.5),
        lower_right=complex(1.0, -1.5),
        limit=80,
        colormap="magma",
    )
    path = tmp_path / "settings.yaml"
    save_settings(settings, path)
    assert load_settings(path) == settings


def test_missing_sections_use_defaults():
    settings = dict_to_settings({"computation": {"limit": 12}})
    assert settings.limit == 12
    assert settings.bounds == default_settings.bounds
    assert settings.upper_left == default_settings.upper_left


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_settings(path) == default_settings


@pytest.mark.parametrize(
    "settings_dict",
    [
        {"image": {"width": 0, "height": 10}},
        {"computation": {"limit": -1}},
        {"presentation": {"colormap": "no-such-colormap"}},
    ],
)
def test_invalid_settings(settings_dict):
    with pytest.raises(ValueError):
        dict_to_settings(settings_dict)


def test_settings_are_frozen():
    with pytest.raises(FrozenInstanceError):
        default_settings.limit = 1
    assert replace(default_settings, limit=1).limit == 1
    assert default_settings.limit == 255
