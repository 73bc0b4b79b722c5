"""
Consolidated constants for lkchecker.

This module provides a single source of truth for:
- The letters of the alphabet and their diacritic-free counterparts
- Word type tags used in the lexicon source
- Ablaut grades and their endings
- Error kinds shared by every module
"""

from enum import Enum, IntEnum
from typing import Dict, FrozenSet, Optional


# ============================================================================
# Letters
# ============================================================================

# Canonical glottal stop (MODIFIER LETTER APOSTROPHE)
GLOTTAL_STOP = "ʼ"

# ASCII spellings of the glottal stop found in plain text
ASCII_QUOTES = "'`"

GLOTTAL_CHARS: FrozenSet[str] = frozenset(GLOTTAL_STOP + ASCII_QUOTES)

UNSTRESSED_VOWELS = "aeiou"
STRESSED_VOWELS = "áéíóú"

# Unstressed vowel -> stressed vowel
STRESS_MAP: Dict[str, str] = dict(zip(UNSTRESSED_VOWELS, STRESSED_VOWELS))

# Stressed vowel -> unstressed vowel
DESTRESS_MAP: Dict[str, str] = dict(zip(STRESSED_VOWELS, UNSTRESSED_VOWELS))

# Lowercase letters with diacritics -> ASCII letter. Vowels go first.
#   ŋ - eng, č - c caron, ž - z caron, ȟ - h caron, ǧ - g caron, š - s caron
DIACRITIC_LOW = "áóéíúŋčžȟǧš"
DIACRITIC_UP = "ÁÓÉÍÚŊČŽȞǦŠ"
DIACRITIC_ASCII = "aoeiunczhgs"

ASCII_MAP: Dict[str, str] = dict(zip(DIACRITIC_LOW, DIACRITIC_ASCII))

# Letters that may appear in a word of running text
LETTERS: FrozenSet[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    + DIACRITIC_LOW
    + DIACRITIC_UP
)

# Letters allowed in a lowercase dictionary word
VALID_WORD_CHARS: FrozenSet[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyz-" + DIACRITIC_LOW + GLOTTAL_STOP
)


class CharClass(Enum):
    """Classification of a single codepoint."""
    UNSTRESSED_VOWEL = "unstressed_vowel"
    STRESSED_VOWEL = "stressed_vowel"
    GLOTTAL_STOP = "glottal_stop"
    LETTER = "letter"
    OTHER = "other"


# ============================================================================
# Word Types
# ============================================================================

class WordType(Enum):
    """Type tag selected by the first character of a lexicon article."""
    STATIC_VERB = "S"
    TRANSITIVE_VERB = "T"
    INTRANSITIVE_VERB = "I"
    NOUN = "N"
    PARTICLE = "-"
    ADVERB = "A"

    @property
    def is_verb(self) -> bool:
        return self in (WordType.STATIC_VERB, WordType.TRANSITIVE_VERB,
                        WordType.INTRANSITIVE_VERB)

    @classmethod
    def from_char(cls, char: str) -> Optional["WordType"]:
        """Case-insensitive lookup; None for an unknown character."""
        try:
            return cls(char.upper())
        except ValueError:
            return None


# ============================================================================
# Ablaut
# ============================================================================

class Ablaut(Enum):
    """Ablaut grade of a word's final vowel."""
    A = "a"
    E = "e"
    N = "n"

    @classmethod
    def from_char(cls, char: str) -> Optional["Ablaut"]:
        try:
            return cls(char.lower())
        except ValueError:
            return None


# Trailing spellings that mark a citation form as ablauting
ABLAUT_MARKERS = ("A", "Aŋ", "Iŋ", "Á", "Áŋ", "Íŋ")
STRESSED_ABLAUT_MARKERS = ("Á", "Áŋ", "Íŋ")

# Grade -> (unstressed ending, stressed ending)
ABLAUT_ENDINGS: Dict[Ablaut, tuple] = {
    Ablaut.A: ("a", "á"),
    Ablaut.E: ("e", "é"),
    Ablaut.N: ("iŋ", "íŋ"),
}


# ============================================================================
# Error Kinds
# ============================================================================

class ErrorKind(IntEnum):
    """Result codes. Numbering follows the lexicon tool chain."""
    OK = 0
    READ_ERROR = 1
    EOF = 2
    INVALID_FILE = 3
    BUFFER_SMALL = 4
    INVALID_STRING = 5
    INVALID_ARG = 6
    OUT_OF_MEMORY = 7
    WORD_NOT_FOUND = 8
    EXACT_MATCH = 9
    INVALID_CONJ = 10
    COMMENT = 11
    INCOMPLETE_VERB = 12
    LINE_TOO_LONG = 13
