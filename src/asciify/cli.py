import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from asciify import config
from asciify.charsets import RAMPS
from asciify.config import PipelineConfig
from asciify.converter import render
from asciify.errors import AsciifyError
from asciify.exporter import render_png
from asciify.logging_utils import add_logging_args, configure_logging
from asciify.params import RenderParameters
from asciify.terminal import get_terminal_width

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciify", description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        "-w",
        "--width",
        type=int,
        default=config.DEFAULT_WIDTH,
        help=f"Output width in columns (default: {config.DEFAULT_WIDTH})",
    )
    size.add_argument("--fit", action="store_true", help="Use the terminal width instead of --width")
    parser.add_argument("--contrast", type=float, default=config.DEFAULT_CONTRAST, help="Contrast, roughly -1..1")
    parser.add_argument("--gamma", type=float, default=config.DEFAULT_GAMMA, help="Gamma, must be above 0")
    parser.add_argument(
        "--brightness", type=float, default=config.DEFAULT_BRIGHTNESS, help="Additive brightness, roughly -1..1"
    )
    parser.add_argument("--invert", action="store_true", help="Dense glyphs for light pixels (light text on dark)")
    parser.add_argument("-r", "--ramp", choices=sorted(RAMPS), default=None, help="Character ramp (default: detailed)")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write text to this file instead of stdout")
    parser.add_argument("--png", type=Path, default=None, help="Also write a PNG rendering to this file")
    add_logging_args(parser)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet, base=logging.WARNING)

    try:
        cfg = PipelineConfig.from_env()
        if args.ramp is not None:
            cfg = dataclasses.replace(cfg, ramp=RAMPS[args.ramp])
        width = min(get_terminal_width(), cfg.max_width) if args.fit else args.width
        params = RenderParameters(
            width=width,
            contrast=args.contrast,
            gamma=args.gamma,
            brightness=args.brightness,
            invert=args.invert,
        )
        grid = render(Path(args.image), params, cfg)
    except (AsciifyError, ValueError) as e:
        if isinstance(e, AsciifyError) and e.status_code >= 500:
            logger.debug("Render failed", exc_info=True)
        print(f"asciify: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output is not None:
        args.output.write_text(grid.text, encoding="utf-8")
        logger.info("Wrote %dx%d grid to %s", grid.width, grid.height, args.output)
    else:
        sys.stdout.write(grid.text)

    if args.png is not None:
        args.png.write_bytes(render_png(grid.text))
        logger.info("Wrote PNG to %s", args.png)


if __name__ == "__main__":
    main()
