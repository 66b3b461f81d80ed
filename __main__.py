import argparse
import sys

from cli.commands import (
    run_bookmarks,
    run_import,
    run_play,
    run_sessions,
    run_summary,
    run_view,
)
from player.config import Config, configure_logging


def _add_source_args(p):
    p.add_argument("input", nargs="?", help="Input session JSON file")
    p.add_argument(
        "--source",
        choices=["json", "db"],
        default="json",
        help="Session source (default: json)",
    )
    p.add_argument("--session", help="Session id in the review database")


def main():
    parser = argparse.ArgumentParser(
        prog="proctor-replay",
        description="Proctoring violation video review",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")

    sub = parser.add_subparsers(dest="command", required=True)

    bookmarks = sub.add_parser("bookmarks", help="List violation bookmarks")
    _add_source_args(bookmarks)

    summary = sub.add_parser("summary", help="Violation counts per category")
    _add_source_args(summary)

    view = sub.add_parser("view", help="Render model at a playback position")
    _add_source_args(view)
    view.add_argument("--at", type=float, default=0.0, help="Position in seconds")
    view.add_argument("--duration", type=float, help="Override video duration")

    play = sub.add_parser("play", help="Run a scripted playback")
    _add_source_args(play)
    play.add_argument(
        "--steps",
        default="",
        help='Steps separated by ";", e.g. "play; tick 30; bookmark 0"',
    )
    play.add_argument("--script", help="File with one step per line")
    play.add_argument("--duration", type=float, help="Override video duration")

    imp = sub.add_parser("import", help="Store a session JSON in the review db")
    imp.add_argument("input", help="Input session JSON file")
    imp.add_argument("--id", dest="session_id", help="Override session id")

    sub.add_parser("sessions", help="List stored sessions")

    args = parser.parse_args()

    try:
        Config.validate_config()
        configure_logging(args.log_level)

        if args.command == "bookmarks":
            run_bookmarks(args.source, args.input, args.session)
        elif args.command == "summary":
            run_summary(args.source, args.input, args.session)
        elif args.command == "view":
            run_view(args.source, args.input, args.session, args.at, args.duration)
        elif args.command == "play":
            script = args.steps
            if args.script:
                with open(args.script, "r", encoding="utf-8") as f:
                    script = f.read()
            run_play(args.source, args.input, args.session, script, args.duration)
        elif args.command == "import":
            run_import(args.input, args.session_id)
        elif args.command == "sessions":
            run_sessions()
    except (ValueError, RuntimeError, LookupError, OSError) as err:
        print(f"[ERROR] {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
