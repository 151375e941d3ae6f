"""
Command line interface for wakachi.

Usage:
    python -m wakachi "今日は天気がいい"
    python -m wakachi -i "今日は天気がいい"   # with per-word info
    python -m wakachi -f "今日は天気がいい"   # full JSON
    python -m wakachi -d my_dict.json "..."  # custom dictionary
"""

import argparse
import logging
import sys
import traceback
from typing import Optional

from wakachi import __version__
from wakachi.context import get_context
from wakachi.errors import WakachiError
from wakachi.loading.dictionary import load_dictionary
from wakachi.output import format_word_info_text, words_to_json, words_to_text
from wakachi.settings import DEBUG, LOG_LEVEL


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Command line interface for Wakachi (dictionary-driven word segmenter)',
        prog='wakachi',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Text to segment',
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '-i', '--with-info',
        action='store_true',
        help='Print PoS and probability info for each word',
    )
    mode.add_argument(
        '-f', '--full',
        action='store_true',
        help='Full segmentation as JSON',
    )

    parser.add_argument(
        '-d', '--dictionary',
        type=str,
        default=None,
        metavar='PATH',
        help='Path to dictionary JSON file (default: $WAKACHI_DICT_PATH or bundled sample)',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        default=DEBUG,
        help='Enable debug logging',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'wakachi {__version__}')
        return 0

    text = ' '.join(parsed.text) if parsed.text else ''
    if not text:
        parser.print_help()
        return 1

    configure_logging(parsed.debug)

    try:
        if parsed.dictionary:
            ctx = load_dictionary(parsed.dictionary)
        else:
            ctx = get_context()
    except WakachiError as e:
        print(f'Error loading dictionary: {e}', file=sys.stderr)
        return 1

    try:
        words = ctx.segment(text)

        if parsed.full:
            print(words_to_json(text, words))
        elif parsed.with_info:
            print(format_word_info_text(words))
        else:
            print(words_to_text(words))

        return 0

    except Exception as e:
        print(f'Error processing text: {e}', file=sys.stderr)
        if parsed.debug:
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
