#!/usr/bin/env python3
"""
Generate Hilbert Curve Script.

Trace a Hilbert curve over the canvas, optionally add offset curves, and
save the result as a timestamped SVG.

Usage:
    python -m hilbert_plot.scripts.generate
    python -m hilbert_plot.scripts.generate -i 6 --pattern double
    python -m hilbert_plot.scripts.generate -i 4 --pattern wonky -d 4.0
    python -m hilbert_plot.scripts.generate --pattern ribbon --dry-run > out.svg

Available patterns:
    plain, double, wonky, precise, ribbon
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from hilbert_plot.configs.loader import (
    ConfigError,
    PlotConfig,
    load_config,
    validate_config,
)
from hilbert_plot.drawing.document import Drawing, StrokeStyle, build_drawing
from hilbert_plot.drawing.svg import RenderError, render_svg, save_svg
from hilbert_plot.geometry.hilbert import hilbert_curve_for_canvas
from hilbert_plot.geometry.offset import DegenerateGeometryError
from hilbert_plot.patterns import PATTERN_MAP, get_pattern
from hilbert_plot.utils import fs
from hilbert_plot.utils.logging_config import (
    install_excepthook,
    push_context,
    setup_logging,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Hilbert curve line art as SVG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Available patterns: {', '.join(PATTERN_MAP.keys())}",
    )
    parser.add_argument(
        "--iterations",
        "-i",
        type=int,
        help="Amount of iterations on the Hilbert curve (default from config: 5)",
    )
    parser.add_argument(
        "--pattern",
        "-p",
        type=str,
        choices=list(PATTERN_MAP.keys()),
        help="Pattern variant to draw",
    )
    parser.add_argument(
        "--distance",
        "-d",
        type=float,
        help="Offset distance override for the chosen pattern",
    )
    parser.add_argument("--width", type=float, help="Canvas width")
    parser.add_argument("--height", type=float, help="Canvas height")
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Configuration file path",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=str,
        help="Directory for generated SVG files",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit log lines as JSON",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Write the SVG to stdout instead of a file",
    )
    return parser


def apply_overrides(config: PlotConfig, args: argparse.Namespace) -> PlotConfig:
    """Fold CLI flags into *config* and re-validate."""
    canvas = config.canvas
    if args.width is not None:
        canvas = replace(canvas, width=args.width)
    if args.height is not None:
        canvas = replace(canvas, height=args.height)

    curve = config.curve
    if args.iterations is not None:
        curve = replace(curve, iterations=args.iterations)
    if args.pattern is not None:
        curve = replace(curve, pattern=args.pattern)

    offsets = config.offsets
    if args.distance is not None and hasattr(offsets, curve.pattern):
        offsets = replace(offsets, **{curve.pattern: args.distance})

    output = config.output
    if args.output_dir is not None:
        output = replace(output, directory=args.output_dir)

    log_cfg = config.logging
    if args.log_level is not None:
        log_cfg = replace(log_cfg, level=args.log_level)
    if args.json_logs:
        log_cfg = replace(log_cfg, json=True)

    updated = replace(
        config,
        canvas=canvas,
        curve=curve,
        offsets=offsets,
        output=output,
        logging=log_cfg,
    )
    validate_config(updated)
    return updated


def build(config: PlotConfig) -> Drawing:
    """Trace the curve, apply the pattern and compose the drawing."""
    curve = hilbert_curve_for_canvas(
        config.canvas.width, config.canvas.height, config.curve.iterations,
    )
    distance = config.offsets.distance_for(config.curve.pattern)
    curves = get_pattern(config.curve.pattern)(curve, distance)
    logger.info(
        "Traced %d point(s); pattern %s produced %d curve(s), distance=%g",
        len(curve), config.curve.pattern, len(curves), distance,
    )

    style = StrokeStyle(color=config.style.stroke, width=config.style.stroke_width)
    return build_drawing(
        config.canvas.width, config.canvas.height, curves, style,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (ConfigError, FileNotFoundError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(
        config.logging.level,
        json=config.logging.json,
        context={"app": "hilbert-plot"},
    )
    install_excepthook()
    push_context(pattern=config.curve.pattern, depth=config.curve.iterations)

    try:
        drawing = build(config)
    except DegenerateGeometryError as e:
        logger.error("Geometry failed: %s", e)
        return 1

    if args.dry_run:
        sys.stdout.write(render_svg(drawing))
        return 0

    try:
        output_dir = fs.ensure_dir(config.output.directory)
    except OSError as e:
        logger.error(
            "Could not create output directory `%s`: %s",
            config.output.directory, e,
        )
        return 1

    output_file = fs.timestamped_path(
        output_dir,
        config.output.prefix,
        ".svg",
        config.output.timestamp_format,
    )
    try:
        save_svg(drawing, output_file)
    except RenderError as e:
        logger.error("%s", e)
        return 1

    print(output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
