"""
Diagnostic command line for the strip.

    blinkt-strip demo
    blinkt-strip set FF8000 --brightness 0.3 --hold 5
    blinkt-strip flash 3 FF0000 --times 5 --interval 0.2
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from .colors import BLUE, GREEN, OFF, RED, WHITE
from .config import ConfigManager
from .driver import Blinkt
from .errors import BlinktError
from .gpio import BACKENDS

logger = logging.getLogger(__name__)

DEMO_COLORS = [("red", RED), ("green", GREEN), ("blue", BLUE), ("white", WHITE)]


def _cmd_demo(strip: Blinkt, args) -> None:
    for name, color in DEMO_COLORS:
        logger.info("All lamps %s", name)
        strip.set_all(color, args.brightness)
        strip.show()
        time.sleep(args.hold)
    strip.set_all(OFF, 0)
    strip.show()


def _cmd_set(strip: Blinkt, args) -> None:
    if args.led is None:
        strip.set_all(args.color, args.brightness)
    else:
        strip.set(args.led, args.color, args.brightness)
    strip.show()
    time.sleep(args.hold)


def _cmd_flash(strip: Blinkt, args) -> None:
    strip.flash(args.led, args.color, args.brightness, args.times, args.interval)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="blinkt-strip", description="Drive the 8-lamp strip")
    p.add_argument("--config", type=Path, default=None, help="YAML/JSON config file")
    p.add_argument("--backend", choices=BACKENDS, default=None, help="override pin backend")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("demo", help="cycle the predefined colors")
    d.add_argument("--brightness", type=float, default=0.2)
    d.add_argument("--hold", type=float, default=1.0)
    d.set_defaults(func=_cmd_demo)

    s = sub.add_parser("set", help="light one lamp or all of them")
    s.add_argument("color")
    s.add_argument("--brightness", type=float, default=0.2)
    s.add_argument("--led", type=int, default=None)
    s.add_argument("--hold", type=float, default=3.0)
    s.set_defaults(func=_cmd_set)

    f = sub.add_parser("flash", help="blink one lamp")
    f.add_argument("led", type=int)
    f.add_argument("color")
    f.add_argument("--brightness", type=float, default=0.2)
    f.add_argument("--times", type=int, default=3)
    f.add_argument("--interval", type=float, default=0.25)
    f.set_defaults(func=_cmd_flash)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(message)s",
        stream=sys.stderr,
    )

    config = ConfigManager(args.config).load()
    if args.backend:
        config.pins.backend = args.backend

    try:
        with Blinkt(config=config) as strip:
            args.func(strip, args)
    except BlinktError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
