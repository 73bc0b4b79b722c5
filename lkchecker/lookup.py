"""
Spell check and suggestion engine.

suggest() answers one query against a loaded Dictionary:

    1. Exact lookup of the case-folded word.
    2. If nothing matches and the word carries a stress mark, retry
       destressed and continue with the destressed spelling.
    3. If the next word is given, work out which ablaut grade it demands.
    4. Collect the matched entries' spellings, then, after a "-"
       separator, the grade-corrected form of each entry's root when the
       root is written with the ablaut marker.

Failures are reported in the returned SuggestionResult, never raised.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from lkchecker import scanner
from lkchecker.characters import (
    ablaut_form, count_stressed_vowels, count_vowels, destress,
    has_ablaut_marker, is_letter, satisfies_ablaut,
)
from lkchecker.constants import Ablaut, ErrorKind
from lkchecker.dict import Dictionary, WordEntry
from lkchecker.errors import LkError
from lkchecker.models import SuggestionResult, WordCheck
from lkchecker.settings import SENTENCE_FINAL, SUGGESTION_SEPARATOR

logger = logging.getLogger(__name__)


# ============================================================================
# Ablaut Demand
# ============================================================================

def demanded_ablaut(dictionary: Dictionary, next_word: Optional[str]) -> Optional[Ablaut]:
    """
    Get the ablaut grade the following word demands.

    The end of a sentence demands the e-grade. Otherwise every entry
    matching next_word must have the same recorded grade; a disagreement
    or an entry without a grade means nothing is demanded.
    """
    if next_word is None:
        return None
    if next_word == '' or next_word[0] in SENTENCE_FINAL:
        return Ablaut.E

    try:
        owners = dictionary.find(next_word)
    except LkError as e:
        # an unsearchable neighbour demands nothing
        logger.debug(f"Next word {next_word!r} not searchable: {e}")
        return None
    if not owners:
        return None

    grades = {dictionary.ablaut_of(entry) for entry in owners}
    if len(grades) != 1:
        return None
    return grades.pop()


# ============================================================================
# Suggestions
# ============================================================================

def _append_unique(out: List[str], spelling: str) -> None:
    if spelling not in out:
        out.append(spelling)


def _collect(word: str, matches: Sequence[WordEntry],
             grade: Optional[Ablaut]) -> Tuple[List[str], List[str]]:
    """Split suggestions into plain spellings and ablaut corrections."""
    plain: List[str] = []
    for entry in matches:
        # citation forms are not offered to users
        if has_ablaut_marker(entry.text):
            continue
        _append_unique(plain, entry.text)

    corrected: List[str] = []
    if grade is not None and not satisfies_ablaut(word, grade):
        for entry in matches:
            root = entry.root
            if not has_ablaut_marker(root.text):
                continue
            form = ablaut_form(root.text, grade)
            if form not in plain:
                _append_unique(corrected, form)

    return plain, corrected


def _suggest(dictionary: Dictionary, word: str, next_word: Optional[str]) -> SuggestionResult:
    grade = demanded_ablaut(dictionary, next_word)

    matches = dictionary.find(word)
    if matches is None:
        if count_stressed_vowels(word) == 0:
            return SuggestionResult.not_found()
        # a misplaced stress is just another surface mismatch
        word = destress(word)
        matches = dictionary.find(word)
        if matches is None:
            return SuggestionResult.not_found()

    exact = any(entry.text == word for entry in matches)
    plain, corrected = _collect(word, matches, grade)

    if exact and not corrected:
        return SuggestionResult.correct()
    if corrected:
        return SuggestionResult.of(plain + [SUGGESTION_SEPARATOR] + corrected)
    if plain:
        return SuggestionResult.of(plain)
    # only citation forms matched, e.g. a verb's contraction
    return SuggestionResult.correct()


def suggest(dictionary: Dictionary, word: str, next_word: Optional[str] = None) -> SuggestionResult:
    """
    Check a word and suggest replacements.

    Args:
        dictionary: Loaded dictionary.
        word: Word to check, as typed.
        next_word: The word that follows in the text, "" at the end of the
            text, or None to skip the ablaut check. A next word starting
            with sentence-final punctuation ends the sentence.

    Returns:
        SuggestionResult: correct, not_found, error (with the error kind)
        or suggestions.

    Examples:
        >>> suggest(d, "kunisapa").suggestions
        ['kunísapa']
        >>> suggest(d, "sápa", ".").suggestions
        ['sápa', '-', 'sápe']
    """
    if dictionary is None or word is None:
        return SuggestionResult.failure(ErrorKind.INVALID_ARG)
    try:
        return _suggest(dictionary, word, next_word)
    except LkError as e:
        logger.debug(f"Lookup of {word!r} failed: {e}")
        return SuggestionResult.failure(e.kind)


# ============================================================================
# Running Text
# ============================================================================

def _context_after(text: str, end: int) -> str:
    """Next word after end, the sentence-final mark before it, or ''."""
    for idx in range(end, len(text)):
        char = text[idx]
        if char in SENTENCE_FINAL:
            return char
        if is_letter(char):
            start, length = scanner.next_word(text, idx)
            return text[start:start + length]
    return ''


def check_text(dictionary: Dictionary, text: str) -> Iterator[WordCheck]:
    """
    Spell check running text.

    Yields:
        WordCheck for every word that is not spelled correctly. Words
        without any vowel are skipped.
    """
    for start, length in scanner.iter_words(text):
        word = text[start:start + length]
        if count_vowels(word.lower()) == 0:
            logger.debug(f"Skipping {word!r} at {start}: no vowels")
            continue

        context = _context_after(text, start + length)
        result = suggest(dictionary, word, context)
        if result.is_correct:
            continue
        yield WordCheck(word=word, start=start, length=length,
                        next_word=context, result=result)
