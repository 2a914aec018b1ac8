import argparse
from dataclasses import replace

from matplotlib import colormaps

from mandelbrot.parsing import parse_bounds, parse_complex


def _pair_argument(parse, what):
    def convert(text):
        value = parse(text)
        if value is None:
            raise argparse.ArgumentTypeError(f"error parsing {what}: {text!r}")
        return value

    return convert


def _limit_argument(text):
    try:
        limit = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"error parsing iteration limit: {text!r}")
    if limit < 0:
        raise argparse.ArgumentTypeError(f"iteration limit must be non-negative, got {limit}")
    return limit


def _colormap_argument(name):
    if name not in colormaps:
        raise argparse.ArgumentTypeError(f"unknown colormap: {name!r}")
    return name


def build_parser():
    parser = argparse.ArgumentParser(
        description="Mandelbrot set renderer",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        epilog="Negative coordinates need the '=' form, e.g. --upper-left=-1.20,0.35",
    )
    parser.add_argument("file", metavar="FILE", help="Output image path (PNG, JPEG, ...).")
    parser.add_argument("--load", type=str, metavar="PATH", help="Path to a YAML settings file.", default=None)
    parser.add_argument("--save", type=str, metavar="PATH", help="Save the effective settings to a YAML file.")
    parser.add_argument(
        "--pixels", type=_pair_argument(parse_bounds, "image dimensions"), metavar="WxH", help="Image size."
    )
    parser.add_argument(
        "--upper-left",
        type=_pair_argument(parse_complex, "upper left corner point"),
        metavar="RE,IM",
        help="Complex point at the upper left image corner.",
    )
    parser.add_argument(
        "--lower-right",
        type=_pair_argument(parse_complex, "lower right corner point"),
        metavar="RE,IM",
        help="Complex point at the lower right image corner.",
    )
    parser.add_argument("--limit", type=_limit_argument, metavar="N", help="Iteration limit.")
    parser.add_argument("--colormap", type=_colormap_argument, metavar="NAME", help="Matplotlib colormap.")
    parser.add_argument("--log-file", type=str, metavar="PATH", help="Also write the log to this file.")
    parser.add_argument("--verbose", action="store_true", help="Log debug messages.")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.pixels is not None and (args.pixels[0] <= 0 or args.pixels[1] <= 0):
        parser.error(f"image dimensions must be positive, got {args.pixels[0]}x{args.pixels[1]}")
    return args


def apply_overrides(settings, args):
    """Return a copy of `settings` with the values given on the command line."""
    overrides = {
        "bounds": args.pixels,
        "upper_left": args.upper_left,
        "lower_right": args.lower_right,
        "limit": args.limit,
        "colormap": args.colormap,
    }
    return replace(settings, **{field: value for field, value in overrides.items() if value is not None})
