from __future__ import annotations

import argparse
import sys

from .config import RENDERERS, ConfigError, make_config
from .game import run


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="wrapsnake", description="Snake on a wrap-around grid.")
    parser.add_argument("--width", type=int, help="World width in cells (default 16).")
    parser.add_argument("--height", type=int, help="World height in cells (default 12).")
    parser.add_argument("--cell-size", type=int, help="Cell size in pixels (default 40).")
    parser.add_argument(
        "--step-ms",
        type=int,
        help="Move automatically every MS milliseconds. Without it the snake only moves on key presses.",
    )
    parser.add_argument("--fps", type=int, help="Frame rate cap (default 60).")
    parser.add_argument(
        "--renderer",
        choices=RENDERERS,
        help="Drawing backend (surface=pygame.draw, buffer=numpy software buffer).",
    )
    ns = parser.parse_args(argv)

    try:
        cfg = make_config(
            world_width=ns.width,
            world_height=ns.height,
            cell_size=ns.cell_size,
            auto_step_ms=ns.step_ms,
            fps=ns.fps,
            renderer=ns.renderer,
        )
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    run(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
