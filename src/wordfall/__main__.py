"""Entry point for `python -m wordfall` or the `wordfall` console script."""

import argparse
import logging
from pathlib import Path

from wordfall.config import DEFAULT_SETTINGS_PATH, ConfigError, load_config, parse_policy
from wordfall.word_bank import load_words


def main() -> None:
    parser = argparse.ArgumentParser(description="Wordfall — type the falling words")
    parser.add_argument("--words-file", default="", help="Plain-text word list, one word per line")
    parser.add_argument(
        "--policy", choices=["strict", "lenient"], default=None,
        help="What happens when a word hits the floor (default: strict, game over)",
    )
    parser.add_argument("--settings", default=str(DEFAULT_SETTINGS_PATH), help="JSON settings file")
    parser.add_argument("--no-save", action="store_true", help="Do not read or write the best score")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(Path(args.settings))
        if args.words_file:
            config.words = load_words(args.words_file)
        if args.policy:
            config.policy = parse_policy(args.policy)
        config.validate()
    except ConfigError as exc:
        parser.error(str(exc))

    from wordfall.app import App

    app = App(config=config, persist=not args.no_save)
    app.run()


if __name__ == "__main__":
    main()
