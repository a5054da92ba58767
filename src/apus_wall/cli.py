"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
from datetime import datetime

from .config import Config, load_config, save_config
from .i18n import load_translator
from .logging_utils import setup_logging
from .models import Session
from .room_view import RoomView
from .session_io import load_card


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="apus-wall")
    sub = parser.add_subparsers(dest="command")

    render_cmd = sub.add_parser("render")
    render_cmd.add_argument("path", help="Path to a session or room JSON file.")
    render_cmd.add_argument("--config", default="apus_wall_config.yml", help="Config.")
    render_cmd.add_argument("--timezone", help="Override the configured time zone.")
    render_cmd.add_argument("--locale", help="Override the configured locale.")
    render_cmd.add_argument("--now", help="ISO timestamp to use instead of the clock.")
    render_cmd.add_argument("--out", help="Write HTML to this file.")
    render_cmd.add_argument(
        "--show-style",
        action="store_true",
        help="Print the computed room style.",
    )

    config_cmd = sub.add_parser("config")
    config_cmd.add_argument("--config", default="apus_wall_config.yml", help="Config.")

    args = parser.parse_args(argv)
    if args.command == "render":
        cfg = load_config(args.config) if os.path.exists(args.config) else Config()
        logger, _ = setup_logging(
            log_dir=cfg.log_dir,
            level=getattr(logging, cfg.log_level, logging.INFO),
            log_file=cfg.log_file,
        )
        if not os.path.exists(args.path):
            print(f"File not found: {args.path}")
            return 1

        card = load_card(args.path, flags_path=cfg.flags_path)
        timezone = args.timezone or cfg.timezone
        translator = load_translator(args.locale or cfg.locale, cfg.translations_dir)
        now = datetime.fromisoformat(args.now) if args.now else None
        if isinstance(card, Session):
            view = RoomView.for_session(timezone, card, translator=translator, now=now)
        else:
            view = RoomView.for_room(timezone, card, translator=translator, now=now)
        logger.info("Rendered %s as %s", args.path, view.room_style.name)

        html = view.render()
        if args.out:
            with open(args.out, "w", encoding="utf-8") as handle:
                handle.write(html + "\n")
            print(f"Wrote {args.out}")
        else:
            print(html)
        if args.show_style:
            print(f"Style: {view.room_style.name}")
        return 0

    if args.command == "config":
        save_config(args.config, Config())
        print(f"Wrote {args.config}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
