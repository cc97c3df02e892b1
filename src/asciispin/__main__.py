"""Command-line interface: spin an image in the terminal."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from asciispin.config import WIDTH, HEIGHT, FRAME_INTERVAL, ROTATION_SPEED, DEFAULT_SPEED
from asciispin.controller.render_loop import RenderLoop
from asciispin.logging_config import setup_logging
from asciispin.model.clock import AdvancePolicy, ElapsedTimePolicy, FixedStepPolicy
from asciispin.model.errors import ImageLoadError
from asciispin.model.io import load_grid
from asciispin.model.rotation import RasterMethod
from asciispin.model.state import Axis, RotationMode
from asciispin.view.terminal import TerminalDisplay

logger = logging.getLogger("asciispin.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciispin",
        description="Render an image as a rotating ASCII-art silhouette in the terminal.",
    )
    parser.add_argument("image", nargs="?", help="Path to the image (prompted for if omitted).")
    parser.add_argument("--mode", choices=[m.value for m in RotationMode], default=RotationMode.PLANAR.value,
                        help="planar: spin in the screen plane; 3d: combined three-axis rotation.")
    parser.add_argument("--axis", default=Axis.Z.value,
                        help="Axis advanced in 3d mode (x, y or z).")
    parser.add_argument("--policy", choices=["fixed", "elapsed"], default="fixed",
                        help="fixed: constant step per frame; elapsed: step scaled by real time.")
    parser.add_argument("--step", type=float, default=ROTATION_SPEED,
                        help="Radians per frame for the fixed policy.")
    parser.add_argument("--speed", type=float, default=DEFAULT_SPEED,
                        help="Speed multiplier for the elapsed policy.")
    parser.add_argument("--interval", type=float, default=FRAME_INTERVAL, help="Seconds between frames.")
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames.")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--fill-holes", action="store_true",
                        help="Use inverse mapping so the rotated image has no gaps.")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log-file", default=None)
    return parser


def make_policy(name: str, step: float) -> AdvancePolicy:
    if name == "elapsed":
        return ElapsedTimePolicy()
    return FixedStepPolicy(step)


def prompt_for_path() -> str:
    return input("Enter the path to the image: ").strip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO,
                  log_file=args.log_file, stream=sys.stderr)

    path = args.image or prompt_for_path()
    try:
        grid = load_grid(path, args.width, args.height)
    except ImageLoadError as e:
        logger.error(str(e))
        return 1

    mode = RotationMode(args.mode)
    loop = RenderLoop(
        grid,
        policy=make_policy(args.policy, args.step),
        mode=mode,
        # planar mode always turns in the screen plane
        axis=args.axis if mode is RotationMode.THREE_AXIS else Axis.Z,
        speed=args.speed,
        method=RasterMethod.INVERSE if args.fill_holes else RasterMethod.FORWARD,
    )

    try:
        with TerminalDisplay() as display:
            loop.run(display, interval=args.interval, max_frames=args.frames)
    except KeyboardInterrupt:
        logger.info(f"Interrupted after {loop.frame_count} frames.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
