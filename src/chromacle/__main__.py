"""Entry point for `python -m chromacle` or the `chromacle` console script."""

import argparse
import datetime
import logging
from pathlib import Path

from chromacle.config import DEFAULT_DB_PATH
from chromacle.daily import today


def main() -> None:
    parser = argparse.ArgumentParser(description="Chromacle — guess the daily color")
    parser.add_argument("--db-path", type=Path, default=DEFAULT_DB_PATH, help="Where progress is stored")
    parser.add_argument(
        "--date", type=datetime.date.fromisoformat, default=None,
        help="Play a specific day (YYYY-MM-DD) instead of today",
    )
    parser.add_argument("--share", action="store_true", help="Print today's share text and exit")
    parser.add_argument("--stats", action="store_true", help="Print statistics and exit")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    day = args.date or today()

    if args.share or args.stats:
        _print_headless(args.db_path, day, share=args.share, stats=args.stats)
        return

    from chromacle.app import App

    app = App(day=day, db_path=args.db_path)
    app.run()


def _print_headless(db_path: Path, day: datetime.date, share: bool, stats: bool) -> None:
    from chromacle.game import Game
    from chromacle.share import format_share
    from chromacle.storage import SqliteStore

    store = SqliteStore(db_path)
    try:
        game = Game.load(store, day)
        if share:
            if game.guesses:
                print(format_share(game.session, day))
            else:
                print("No guesses yet today.")
        if stats:
            s = game.stats
            print(f"Played: {s.played}  Win %: {s.win_pct}  Streak: {s.streak}  Max streak: {s.max_streak}")
    finally:
        store.close()


if __name__ == "__main__":
    main()
