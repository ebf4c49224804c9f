"""Main entry point for the canvas viewer (thin wrapper)."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from canvas_viewer import CanvasViewer
from core.config import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_ZOOM,
    DEFAULT_MIN_ZOOM,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    DEFAULT_ZOOM_STEP,
    TARGET_RENDERING_FPS,
)
from core.viewport import ViewportConfig
from utils.logging_setup import configure_logging, parse_level

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    width: int
    height: int
    fps: int
    min_zoom: float
    max_zoom: float
    zoom_step: float
    zoom: float | None
    enable_zoom: bool
    enable_pan: bool
    grid_size: float
    log_level: int
    log_to_file: bool

    def viewport_config(self) -> ViewportConfig:
        return ViewportConfig(
            enable_zoom=self.enable_zoom,
            enable_pan=self.enable_pan,
            min_zoom=self.min_zoom,
            max_zoom=self.max_zoom,
            zoom_step=self.zoom_step,
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pan/zoom canvas viewer")
    parser.add_argument("--width", type=int, default=DEFAULT_SCREEN_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_SCREEN_HEIGHT, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=TARGET_RENDERING_FPS, help="Target frame rate")
    parser.add_argument("--min-zoom", type=float, default=DEFAULT_MIN_ZOOM, help="Lowest wheel zoom")
    parser.add_argument("--max-zoom", type=float, default=DEFAULT_MAX_ZOOM, help="Highest wheel zoom")
    parser.add_argument("--zoom-step", type=float, default=DEFAULT_ZOOM_STEP, help="Zoom change per wheel notch")
    parser.add_argument("--zoom", type=float, default=None, help="Initial target zoom")
    parser.add_argument("--no-zoom", action="store_true", help="Disable wheel zoom")
    parser.add_argument("--no-pan", action="store_true", help="Disable drag panning")
    parser.add_argument("--grid-size", type=float, default=DEFAULT_GRID_SIZE, help="Grid spacing in world units")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", action="store_true", help="Also write logs under logs/")
    return parser


def _parse_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> RunConfig:
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.grid_size <= 0:
        parser.error("--grid-size must be positive")
    try:
        log_level = parse_level(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    return RunConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        min_zoom=args.min_zoom,
        max_zoom=args.max_zoom,
        zoom_step=args.zoom_step,
        zoom=args.zoom,
        enable_zoom=not args.no_zoom,
        enable_pan=not args.no_pan,
        grid_size=args.grid_size,
        log_level=log_level,
        log_to_file=args.log_file,
    )


def _announce_config(config: RunConfig) -> None:
    print(f"Window: {config.width}x{config.height} @ {config.fps} FPS")
    print(f"Wheel zoom range: [{config.min_zoom}, {config.max_zoom}] step {config.zoom_step}")
    if config.zoom is not None:
        print(f"Initial zoom: {config.zoom}")
    if not config.enable_zoom:
        print("Wheel zoom: disabled")
    if not config.enable_pan:
        print("Drag pan: disabled")


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = _parse_args(parser, args)

    log_path = configure_logging(config.log_level, log_to_file=config.log_to_file)
    _announce_config(config)
    if log_path:
        print(f"Logging to {log_path}")

    viewer = CanvasViewer(
        width=config.width,
        height=config.height,
        config=config.viewport_config(),
        grid_size=config.grid_size,
        fps=config.fps,
        initial_zoom=config.zoom,
    )
    try:
        viewer.run()
    finally:
        viewer.close()
        logger.info("Canvas viewer closed")


if __name__ == "__main__":
    main()
