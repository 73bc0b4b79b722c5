"""
Command line interface for lkchecker.

Usage:
    python -m lkchecker.cli -d lexicon.txt kunisapa      # check words
    python -m lkchecker.cli -d lexicon.txt -n . sápa     # with ablaut context
    python -m lkchecker.cli -j -d lexicon.txt kola       # JSON output
    python -m lkchecker.cli scan story.txt               # list words of a text
    python -m lkchecker.cli check -d lexicon.txt story.txt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from lkchecker import __version__, settings
from lkchecker.characters import count_vowels
from lkchecker.dict_load import load_dictionary
from lkchecker.errors import LkError
from lkchecker.lookup import check_text, suggest
from lkchecker.models import SuggestionResult, SuggestionStatus
from lkchecker.scanner import iter_words

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    level = logging.DEBUG if settings.DEBUG else logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def format_result(result: SuggestionResult) -> str:
    """Format a check result as one line of text."""
    if result.status == SuggestionStatus.CORRECT:
        return 'correct'
    if result.status == SuggestionStatus.NOT_FOUND:
        return 'not found'
    if result.status == SuggestionStatus.ERROR:
        return f'error ({result.error.name})'
    return ' '.join(result.suggestions)


def _read_text(path: str) -> Optional[str]:
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        print(f'Error reading {path}: {e}', file=sys.stderr)
        return None


def _load(path: Optional[str]):
    try:
        return load_dictionary(path)
    except LkError as e:
        print(f'Error loading dictionary: {e}', file=sys.stderr)
        return None


# ============================================================================
# Subcommands
# ============================================================================

def main_scan(args: list) -> int:
    """CLI entry point for scan subcommand."""
    parser = argparse.ArgumentParser(
        description='Print every word of a text file, lowercased',
        prog='lkchecker scan',
    )

    parser.add_argument(
        'file',
        metavar='FILE',
        help='Text file to scan',
    )

    parsed = parser.parse_args(args)

    text = _read_text(parsed.file)
    if text is None:
        return 1

    for start, length in iter_words(text):
        word = text[start:start + length].lower()
        if count_vowels(word) == 0:
            logger.warning(f"Skipping {word!r} at {start}: no vowels")
            continue
        print(word)
    return 0


def main_check(args: list) -> int:
    """CLI entry point for check subcommand."""
    parser = argparse.ArgumentParser(
        description='Report misspelled words in a text file',
        prog='lkchecker check',
    )

    parser.add_argument(
        'file',
        metavar='FILE',
        help='Text file to check',
    )

    parser.add_argument(
        '-d', '--dictionary',
        type=str,
        default=None,
        metavar='PATH',
        help='Lexicon file (default: $LK_DICTIONARY)',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print one JSON object per finding',
    )

    parsed = parser.parse_args(args)

    text = _read_text(parsed.file)
    if text is None:
        return 1
    dictionary = _load(parsed.dictionary)
    if dictionary is None:
        return 1

    for finding in check_text(dictionary, text):
        if parsed.json:
            print(finding.model_dump_json())
        else:
            print(f"{finding.start}: {finding.word}: {format_result(finding.result)}")
    return 0


# ============================================================================
# Main
# ============================================================================

def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    _setup_logging()

    # Check for subcommands
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'scan':
        return main_scan(args_list[1:])
    if args_list and args_list[0] == 'check':
        return main_check(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Spell checker for Lakota',
        prog='lkchecker',
        epilog='Subcommands:\n  lkchecker scan FILE     Print the words of a text file\n  lkchecker check FILE    Report misspelled words in a text file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'words',
        nargs='*',
        help='Words to check',
    )

    parser.add_argument(
        '-d', '--dictionary',
        type=str,
        default=None,
        metavar='PATH',
        help='Lexicon file (default: $LK_DICTIONARY)',
    )

    parser.add_argument(
        '-n', '--next',
        type=str,
        default=None,
        metavar='NEXT',
        help='Word following the checked words, "." for the end of a sentence',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print results as JSON',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args_list)

    if parsed.version:
        print(f'lkchecker {__version__}')
        return 0

    if not parsed.words:
        parser.print_help()
        return 1

    dictionary = _load(parsed.dictionary)
    if dictionary is None:
        return 1

    for word in parsed.words:
        result = suggest(dictionary, word, parsed.next)
        if parsed.json:
            output = {'word': word, **result.model_dump(mode='json')}
            print(json.dumps(output, ensure_ascii=False))
        else:
            print(f'{word}: {format_result(result)}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
