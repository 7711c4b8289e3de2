"""
CLI interface for tango-split.

Usage:
    tango-split "わたしはがくせいです"
    tango-split --vocab unit1.json --romaji "わたしはがくせいです"
    tango-split --vocab unit1.json --json "わたしはがくせいです"
    tango-split --kana "konnnichiha"
"""

import argparse
import json
import logging
import sys
from typing import List

from tango_split import (
    Romanizer,
    Token,
    Tokenizer,
    VocabularyError,
    __version__,
    build_romanizer,
    build_tokenizer,
    load_vocabularies,
    romanize_tokens,
    to_kana,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(tokens: List[Token]) -> str:
    """
    Default output: token surfaces only.

    Just shows: surface1 | surface2 | surface3
    """
    return " | ".join(t.surface for t in tokens)


def format_romaji(tokens: List[Token], romanizer: Romanizer) -> str:
    """Surfaces on the first line, their romaji on the second."""
    return "\n".join([
        format_default(tokens),
        romanize_tokens(tokens, romanizer, separator=" | "),
    ])


def format_json(tokens: List[Token], romanizer: Romanizer) -> str:
    """Format tokens as JSON with kinds, offsets and romaji."""
    data = []
    for t in tokens:
        data.append({
            "surface": t.surface,
            "kind": t.kind,
            "start": t.start,
            "end": t.end,
            "romaji": romanizer(t),
        })

    return json.dumps(data, ensure_ascii=False, indent=2)


def format_simple(tokens: List[Token], romanizer: Romanizer) -> str:
    """Simple tab-separated output format."""
    lines = []
    for t in tokens:
        lines.append(f"{t.surface}\t{t.kind}\t{t.start}\t{t.end}\t{romanizer(t)}")
    return "\n".join(lines)


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tango-split",
        description="Vocabulary-driven Japanese tokenizer and romanizer",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Japanese sentence to tokenize (read from stdin if omitted)",
    )
    parser.add_argument(
        "--vocab", "-V",
        action="append",
        default=[],
        metavar="FILE",
        help="Vocabulary JSON file (repeatable)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--romaji", "-r",
        action="store_true",
        help="Show the romaji line under the tokens",
    )
    output.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    output.add_argument(
        "--simple", "-s",
        action="store_true",
        help="Simple output format (surface, kind, start, end, romaji)",
    )
    parser.add_argument(
        "--kana", "-k",
        metavar="ROMAJI",
        help="Convert typed romaji to kana and exit",
    )
    parser.add_argument(
        "--katakana",
        action="store_true",
        help="Use katakana for --kana",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"tango-split {__version__}",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    if args.kana is not None:
        mode = "katakana" if args.katakana else "hiragana"
        print(to_kana(args.kana, mode))
        return

    if args.text is None:
        # Read from stdin
        text = sys.stdin.read().strip()
    else:
        text = args.text

    if not text.strip():
        parser.print_help(sys.stderr)
        sys.exit(1)

    try:
        vocabulary = load_vocabularies(args.vocab)
    except VocabularyError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug(f"Loaded {len(vocabulary)} entries from {len(args.vocab)} file(s)")

    tokenizer: Tokenizer = build_tokenizer(vocabulary)
    romanizer: Romanizer = build_romanizer(vocabulary)
    tokens = tokenizer(text)

    if args.json:
        print(format_json(tokens, romanizer))
    elif args.simple:
        print(format_simple(tokens, romanizer))
    elif args.romaji:
        print(format_romaji(tokens, romanizer))
    else:
        # Default: simple splitting output
        print(format_default(tokens))


if __name__ == "__main__":
    main()
