"""
Word boundary scanner for running text.

Finds the spans of words inside free text, either walking forward from a
position (next_word) or backward to the start of the word that contains
or precedes a position (word_start).

A quote mark (apostrophe, backtick or glottal stop) belongs to a word only
when it sits between two letters. Leading and trailing quotes are ordinary
punctuation. Offsets are str indices into the scanned text; nothing is
copied.
"""

from enum import Enum
from typing import Iterator, Optional, Tuple

from lkchecker.characters import is_glottal_stop, is_letter

Span = Tuple[int, int]


class ScanState(Enum):
    SKIPPING = "skipping"
    INSIDE_WORD = "inside_word"
    AFTER_QUOTE = "after_quote"
    DONE = "done"


def next_word(text: str, start: int = 0) -> Optional[Span]:
    """
    Find the next word at or after a position.

    Args:
        text: Text to scan.
        start: Index to start scanning from.

    Returns:
        (start, length) of the word, or None if only non-letters remain.

    Example:
        >>> next_word("'some' ex'ample")
        (1, 4)
    """
    if text is None or start < 0:
        return None

    state = ScanState.SKIPPING
    word_begin = None
    quote_at = None
    idx = start

    while idx < len(text):
        char = text[idx]

        if is_letter(char):
            if state == ScanState.SKIPPING:
                word_begin = idx
                state = ScanState.INSIDE_WORD
            elif state == ScanState.AFTER_QUOTE:
                state = ScanState.INSIDE_WORD
        elif is_glottal_stop(char):
            if state == ScanState.INSIDE_WORD:
                state = ScanState.AFTER_QUOTE
                quote_at = idx
            elif state == ScanState.AFTER_QUOTE:
                # two quotes in a row end the word before the first one
                idx = quote_at
                state = ScanState.DONE
        else:
            if state == ScanState.INSIDE_WORD:
                state = ScanState.DONE
            elif state == ScanState.AFTER_QUOTE:
                idx = quote_at
                state = ScanState.DONE

        if state == ScanState.DONE:
            break
        idx += 1

    if word_begin is None:
        return None
    if state == ScanState.AFTER_QUOTE:
        # trailing quote at the end of the text
        idx = quote_at
    return word_begin, idx - word_begin


def word_start(text: str, pos: int) -> Optional[int]:
    """
    Find the first character of the word containing pos, or of the word
    that precedes pos when pos is not inside a word.

    Returns:
        Index of the word start, or None if pos is out of range or there is
        no letter between the start of the text and pos.

    Examples:
        >>> word_start("some example string", 4)
        0
        >>> word_start("some example string", 5)
        5
    """
    if text is None or pos < 0 or pos >= len(text):
        return None

    state = ScanState.SKIPPING
    begin = None
    idx = pos

    while idx >= 0:
        char = text[idx]

        if is_letter(char):
            state = ScanState.INSIDE_WORD
            begin = idx
        elif is_glottal_stop(char) and state == ScanState.INSIDE_WORD:
            # keep the quote only if another letter precedes it
            if idx > 0 and is_letter(text[idx - 1]):
                state = ScanState.AFTER_QUOTE
            else:
                state = ScanState.DONE
        elif state != ScanState.SKIPPING:
            state = ScanState.DONE

        if state == ScanState.DONE:
            break
        idx -= 1

    return begin


def word_at(text: str, pos: int) -> Optional[Span]:
    """Get the full span of the word containing or preceding pos."""
    begin = word_start(text, pos)
    if begin is None:
        return None
    return next_word(text, begin)


def iter_words(text: str) -> Iterator[Span]:
    """Yield (start, length) for every word in the text, left to right."""
    pos = 0
    while True:
        span = next_word(text, pos)
        if span is None:
            return
        yield span
        pos = span[0] + span[1]
