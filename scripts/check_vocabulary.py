#!/usr/bin/env python3
"""
Vocabulary proofreading report for tango-split.

Loads unit files and lists entries whose reading is empty after removing
alternatives, and entries whose reading romanizes differently from the
authored romaji. The romanizer prefers authored romaji, so these
differences never reach the games, but they usually point at typos.

Usage:
    python scripts/check_vocabulary.py data/unit1.json data/unit2.json
    python scripts/check_vocabulary.py data/*.json --export report.json
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tango_split import (  # noqa: E402
    VocabularyEntry,
    VocabularyError,
    load_vocabulary,
    romanize_kana,
)
from tango_split.dictionary import COMMON_ENDING_ROMAJI  # noqa: E402

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class RomajiMismatch:
    """An entry whose computed romaji differs from the authored one."""
    hiragana: str
    authored: str
    computed: str
    english: str = ""


@dataclass
class FileReport:
    """Findings for one unit file."""
    path: str
    entries: int = 0
    empty_readings: List[str] = field(default_factory=list)
    mismatches: List[RomajiMismatch] = field(default_factory=list)


# =============================================================================
# Checks
# =============================================================================

def _normalize_romaji(text: str) -> str:
    return text.replace(" ", "").replace("-", "").lower()


def check_entries(path: str, entries: List[VocabularyEntry]) -> FileReport:
    report = FileReport(path=path, entries=len(entries))

    for entry in entries:
        reading = entry.canonical_hiragana
        if not reading:
            report.empty_readings.append(entry.japanese or entry.english)
            continue

        authored = entry.canonical_romaji
        if not authored or reading in COMMON_ENDING_ROMAJI:
            continue

        computed = romanize_kana(reading)
        if _normalize_romaji(computed) != _normalize_romaji(authored):
            report.mismatches.append(RomajiMismatch(
                hiragana=reading,
                authored=authored,
                computed=computed,
                english=entry.english,
            ))

    return report


def print_report(report: FileReport):
    print(f"{report.path}: {report.entries} entries")
    for text in report.empty_readings:
        print(f"  empty reading: {text}")
    for m in report.mismatches:
        print(f"  {m.hiragana}: authored {m.authored!r}, computed {m.computed!r}")


# =============================================================================
# Main
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Proofread tango-split vocabulary files"
    )
    parser.add_argument(
        'files',
        nargs='+',
        type=Path,
        help="Vocabulary JSON files",
    )
    parser.add_argument(
        '--export', '-e',
        type=Path,
        help="Write the report as JSON to this path",
    )

    args = parser.parse_args()

    reports = []
    failed = False
    for path in args.files:
        try:
            entries = load_vocabulary(path)
        except VocabularyError as e:
            logger.error(str(e))
            failed = True
            continue
        report = check_entries(str(path), entries)
        reports.append(report)
        print_report(report)

    total = sum(len(r.mismatches) for r in reports)
    logger.info(f"Checked {len(reports)} file(s), {total} romaji mismatch(es)")

    if args.export:
        with open(args.export, 'w', encoding='utf-8') as f:
            json.dump([asdict(r) for r in reports], f, ensure_ascii=False, indent=2)
        logger.info(f"Report written to {args.export}")

    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
