from dataclasses import dataclass


@dataclass(frozen=True)
class RenderSettings:
    bounds: tuple  # (width, height) in pixels
    upper_left: complex
    lower_right: complex
    limit: int
    colormap: str
