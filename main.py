import sys
import logging

from mandelbrot.cli import parse_args, apply_overrides
from mandelbrot.render import render_to_file
from mandelbrot.settings import default_settings, load_settings, save_settings, validate_settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level=logging.INFO, log_file=None):
    """Configure the root logger with a console handler and an optional file handler."""
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    settings = load_settings(args.load) if args.load else default_settings
    settings = apply_overrides(settings, args)
    validate_settings(settings)
    logging.debug(f"Effective settings: {settings}")

    if args.save:
        save_settings(settings, args.save)

    render_to_file(settings, args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
