"""
Preview tool for safezone addon arguments.

Runs the same initialize/edit path the host would, then prints the data blob
the host would store and the summary shown by the display command.

usage:
    python -m monument_safezones [--edit FILE] [--config FILE] [--log-level LEVEL] \
            [--log-file FILE] [--draw] <option> <value> ...

example:
    python -m monument_safezones offset 0,5,0 radius 10
    python -m monument_safezones --edit zone.json size 30,30,30
"""

import argparse
import json
import sys
from typing import Any, List, Optional
from uuid import uuid4

from .addon import SafeZonesAddon
from .config import load_config
from .exceptions import ConfigError
from .log import LogComponent, configure_logging, get_logger
from .types import Quaternion, Vector3

logger = get_logger(LogComponent.CLI)

PREVIEW_DURATION = 30.0


class ConsolePlayer:
    """Player stand-in that prints replies and logs draw commands."""

    user_id = "console"

    def __init__(self, show_draw: bool = False) -> None:
        self.show_draw = show_draw

    def reply(self, message: str) -> None:
        print(message, file=sys.stderr)

    def send_console_command(self, command: str, *args: Any) -> None:
        if self.show_draw:
            print(command + " " + " ".join(str(a) for a in args))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the preview CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m monument_safezones",
        description="preview safezone addon arguments",
    )
    parser.add_argument("--edit", help="JSON data blob of an existing zone to edit",
            default=None, dest="edit_file")
    parser.add_argument("--config", help="JSON config file", default=None)
    parser.add_argument("--log-level", help="log level (default: from config)",
            default=None, dest="log_level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], type=str.upper)
    parser.add_argument("--log-file", help="also write log records to this file (default: from config)",
            default=None, dest="log_file")
    parser.add_argument("--draw", help="print the ddraw commands the display would send",
            action="store_true", default=False)
    parser.add_argument("addon_args", nargs=argparse.REMAINDER,
            help="option/value pairs: offset <x>,<y>,<z> size <x>,<y>,<z> radius <number>")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"[safezone:cli] {e}", file=sys.stderr)
        return 1

    configure_logging(
        args.log_level or config.log_level,
        log_file=args.log_file or config.log_file,
    )

    addon = SafeZonesAddon(config=config)
    player = ConsolePlayer(show_draw=args.draw)

    if args.edit_file:
        try:
            with open(args.edit_file, "r", encoding="utf-8") as f:
                existing = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot read zone data from {args.edit_file}: {e}")
            return 1
        if existing is not None and not isinstance(existing, dict):
            logger.error(f"Zone data in {args.edit_file} must be a JSON object")
            return 1
        ok, data = addon.edit(player, args.addon_args, None, existing)
    else:
        ok, data = addon.initialize(player, args.addon_args)

    if not ok:
        logger.debug("Arguments rejected")
        return 1

    print(json.dumps(data, indent=2))

    component = addon.spawn(uuid4(), None, Vector3.zero(), Quaternion.identity(), data)
    lines: List[str] = []
    addon.display(component, data, player, lines, PREVIEW_DURATION)
    addon.kill(component)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
