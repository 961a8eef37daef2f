#!/usr/bin/env python3
"""
stemwords - stem a list of words from the command line.

The input file holds one word per line. Output is one stem per line, or
'word -> stem' with -p, or two columns with -p2.

Examples:
    stemwords -l english -i words.txt
    stemwords -l de -x brands.txt < words.txt > stems.txt
    stemwords --list-languages
"""

import argparse
import logging
import os
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from src.logging_config import setup_logging

from .errors import StemmingError
from .factory import load_nostem_words
from .nostem import NoStemListStemmer
from .stemmer import Stemmer

logger = logging.getLogger(__name__)

COLUMN_WIDTH = 30


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stemwords",
        description="Stem words (one per line) with a language-specific algorithm.",
        epilog=f"Languages: {Stemmer.available_languages()}",
    )
    parser.add_argument("-l", "--language", default=None,
                        help="Language identifier (default: $STEM_LANGUAGE or 'english')")
    parser.add_argument("-i", "--input", default=None, help="Input file (default: stdin)")
    parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    parser.add_argument("-c", "--encoding", default="utf-8",
                        help="Character encoding of the -i, -o and -x files (stdin/stdout keep the locale encoding)")
    parser.add_argument("-x", "--nostem-file", default=None,
                        help="File of words (one per line) to leave unstemmed")
    pretty = parser.add_mutually_exclusive_group()
    pretty.add_argument("-p", dest="pretty", action="store_const", const=1, default=0,
                        help="Print 'word -> stem'")
    pretty.add_argument("-p2", dest="pretty", action="store_const", const=2,
                        help="Print words and stems in two columns")
    parser.add_argument("--list-languages", action="store_true", help="Print supported languages and exit")
    parser.add_argument("--log-file", default=None, help="Write detailed logs to this file")
    return parser


def format_line(word: str, stem: str, pretty: int) -> str:
    """Format one output line (without newline)."""
    if pretty == 1:
        return f"{word} -> {stem}"
    if pretty == 2:
        if len(word) < COLUMN_WIDTH:
            return word + " " * (COLUMN_WIDTH - len(word)) + stem
        return word + "\n" + " " * COLUMN_WIDTH + stem
    return stem


def stem_stream(stemmer, infile: TextIO, outfile: TextIO, pretty: int = 0) -> int:
    """
    Stem every line of infile into outfile.

    Returns:
        Number of words processed
    """
    count = 0
    for line in infile:
        word = line.strip()
        outfile.write(format_line(word, stemmer.stem(word), pretty))
        outfile.write("\n")
        count += 1
    return count


def _load_env():
    # .env.local (local dev) wins over .env
    project_root = Path(__file__).parent.parent.parent
    for env_path in (project_root / ".env.local", project_root / ".env"):
        if env_path.exists():
            load_dotenv(env_path, override=False)
            return


def main(argv: Optional[List[str]] = None) -> int:
    _load_env()
    args = build_parser().parse_args(argv)

    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    setup_logging(log_file=args.log_file, console_level=getattr(logging, log_level, logging.WARNING))

    if args.list_languages:
        print(Stemmer.available_languages())
        return 0

    language = args.language or os.getenv("STEM_LANGUAGE") or "english"
    try:
        stemmer = Stemmer(language)
        if args.nostem_file:
            stemmer = NoStemListStemmer(stemmer, load_nostem_words(args.nostem_file, encoding=args.encoding))
    except (StemmingError, OSError) as e:
        print(f"stemwords: {e}", file=sys.stderr)
        return 1

    logger.info(f"Stemming with {stemmer.describe()}")

    with ExitStack() as stack:
        try:
            infile = stack.enter_context(open(args.input, "r", encoding=args.encoding)) if args.input else sys.stdin
            outfile = stack.enter_context(open(args.output, "w", encoding=args.encoding)) if args.output else sys.stdout
        except OSError as e:
            print(f"stemwords: {e}", file=sys.stderr)
            return 1
        count = stem_stream(stemmer, infile, outfile, args.pretty)

    logger.info(f"Stemmed {count} words")
    return 0


if __name__ == "__main__":
    sys.exit(main())
