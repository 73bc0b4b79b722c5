"""
Character handling for lkchecker.

Provides codepoint classification, case folding with glottal stop
canonicalization, diacritic stripping, stress removal and insertion,
and the ablaut marker helpers used by the form generator.

All transforms return a new string. They raise BufferTooSmall instead of
truncating when the result would reach MAX_WORD_LENGTH bytes, and
InvalidString instead of substituting a replacement character.
"""

from typing import Iterable, Optional, Union

from lkchecker.constants import (
    ABLAUT_ENDINGS, ABLAUT_MARKERS, ASCII_MAP, ASCII_QUOTES, DESTRESS_MAP,
    GLOTTAL_CHARS, GLOTTAL_STOP, LETTERS, STRESS_MAP, STRESSED_ABLAUT_MARKERS,
    STRESSED_VOWELS, UNSTRESSED_VOWELS, VALID_WORD_CHARS,
    Ablaut, CharClass,
)
from lkchecker.errors import BufferTooSmall, InvalidArgument, InvalidString
from lkchecker.settings import MAX_WORD_LENGTH, STRESS_DEFAULT

Word = Union[str, bytes]


# ============================================================================
# Classification
# ============================================================================

def classify(char: str) -> CharClass:
    """
    Get the class of a single character.

    Only lowercase vowels count as vowels: an uppercase A or I in a
    citation form is the ablaut marker, not a vowel.
    """
    if char in UNSTRESSED_VOWELS:
        return CharClass.UNSTRESSED_VOWEL
    if char in STRESSED_VOWELS:
        return CharClass.STRESSED_VOWEL
    if char in GLOTTAL_CHARS:
        return CharClass.GLOTTAL_STOP
    if char in LETTERS:
        return CharClass.LETTER
    return CharClass.OTHER


def is_vowel(char: str) -> bool:
    return classify(char) in (CharClass.UNSTRESSED_VOWEL, CharClass.STRESSED_VOWEL)


def is_stressed_vowel(char: str) -> bool:
    return char in STRESSED_VOWELS


def is_glottal_stop(char: str) -> bool:
    return char in GLOTTAL_CHARS


def is_letter(char: str) -> bool:
    """True for any letter of the alphabet, either case, with or without diacritics."""
    return char in LETTERS


# ============================================================================
# Validation helpers
# ============================================================================

def ensure_text(word: Optional[Word]) -> str:
    """
    Validate a word and return it as str.

    Args:
        word: A str, or UTF-8 encoded bytes.

    Returns:
        The decoded string.

    Raises:
        InvalidArgument: If word is None.
        InvalidString: If word is not valid UTF-8 (bad bytes or lone surrogates).
    """
    if word is None:
        raise InvalidArgument("word is required")
    if isinstance(word, bytes):
        try:
            return word.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidString(f"not a UTF-8 string: {word!r}") from e
    try:
        word.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidString(f"not a UTF-8 string: {word!r}") from e
    return word


def _fit(result: str, limit: int) -> str:
    # limit counts the terminating byte the way the word buffers do
    if len(result.encode("utf-8")) >= limit:
        raise BufferTooSmall(f"{len(result.encode('utf-8'))} bytes do not fit in {limit}")
    return result


# ============================================================================
# Transforms
# ============================================================================

def fold_case(word: Word, limit: int = MAX_WORD_LENGTH) -> str:
    """
    Lowercase a word and replace ASCII apostrophes and backticks with the
    glottal stop.

    Examples:
        >>> fold_case("tESt`a'b")
        'testʼaʼb'
    """
    text = ensure_text(word)
    for quote in ASCII_QUOTES:
        text = text.replace(quote, GLOTTAL_STOP)
    return _fit(text.lower(), limit)


def to_ascii(word: Word, limit: int = MAX_WORD_LENGTH) -> str:
    """
    Strip diacritics from lowercase letters and write every glottal stop
    as an ASCII apostrophe. Uppercase letters are left alone.
    """
    text = ensure_text(word)
    out = []
    for char in text:
        if char == GLOTTAL_STOP or char == "`":
            out.append("'")
        else:
            out.append(ASCII_MAP.get(char, char))
    return _fit("".join(out), limit)


def destress(word: Word, limit: int = MAX_WORD_LENGTH) -> str:
    """Replace each stressed vowel with its plain counterpart. Consonants keep their marks."""
    text = ensure_text(word)
    return _fit("".join(DESTRESS_MAP.get(char, char) for char in text), limit)


def put_stress(word: Word, position: Optional[int] = None,
               limit: int = MAX_WORD_LENGTH) -> str:
    """
    Put the stress mark on a vowel.

    Args:
        word: The word to stress.
        position: 0-based index of the vowel to stress. None or a negative
            value selects STRESS_DEFAULT. A position past the last vowel
            stresses the last vowel.
        limit: Maximum result size in bytes.

    Returns:
        The stressed word.

    Raises:
        InvalidArgument: If the word has no vowels.
    """
    text = ensure_text(word)
    vowels = count_vowels(text)
    if vowels == 0:
        raise InvalidArgument(f"no vowel to stress in {text!r}")

    if position is None or position < 0:
        position = STRESS_DEFAULT
    if position >= vowels:
        position = vowels - 1

    out = []
    for char in text:
        if is_vowel(char):
            if position == 0:
                char = STRESS_MAP.get(char, char)
            position -= 1
        out.append(char)
    return _fit("".join(out), limit)


def remove_glottal_stop(word: Word, limit: int = MAX_WORD_LENGTH) -> str:
    """Drop every glottal stop, whichever way it is written."""
    text = ensure_text(word)
    return _fit("".join(char for char in text if char not in GLOTTAL_CHARS), limit)


# ============================================================================
# Predicates and counters
# ============================================================================

def has_glottal_stop(word: Optional[str]) -> bool:
    if not word:
        return False
    return any(char in GLOTTAL_CHARS for char in word)


def count_vowels(word: Optional[str]) -> int:
    if not word:
        return 0
    return sum(1 for char in word if is_vowel(char))


def count_stressed_vowels(word: Optional[str]) -> int:
    if not word:
        return 0
    return sum(1 for char in word if char in STRESSED_VOWELS)


def first_stressed_vowel(word: Optional[str]) -> int:
    """
    Get the 1-based position of the first stressed vowel among all vowels.

    Returns:
        0 if the word has no stressed vowel.
    """
    if not word:
        return 0
    seen = 0
    for char in word:
        if char in UNSTRESSED_VOWELS:
            seen += 1
        elif char in STRESSED_VOWELS:
            return seen + 1
    return 0


def is_ascii(word: Optional[str]) -> bool:
    if not word:
        return False
    return all(ord(char) < 128 for char in word)


def is_valid_word(word: Optional[str]) -> bool:
    """True if the word only uses lowercase letters of the alphabet, '-' and the glottal stop."""
    if word is None:
        return False
    return all(char in VALID_WORD_CHARS for char in word)


def ends_with_any(word: Optional[str], suffixes: Iterable[str]) -> bool:
    if word is None:
        return False
    return any(word.endswith(suffix) for suffix in suffixes)


# ============================================================================
# Ablaut
# ============================================================================

def has_ablaut_marker(word: Optional[str]) -> bool:
    """True for a citation form ending in A, Aŋ, Iŋ or their stressed spellings."""
    return ends_with_any(word, ABLAUT_MARKERS)


def is_ablaut_marker_stressed(word: Optional[str]) -> bool:
    return ends_with_any(word, STRESSED_ABLAUT_MARKERS)


def ablaut_stem(word: str) -> str:
    """
    Cut the ablaut marker off a citation form.

    Examples:
        >>> ablaut_stem("kárAŋ")
        'kár'
    """
    for marker in sorted(ABLAUT_MARKERS, key=len, reverse=True):
        if word.endswith(marker):
            return word[:-len(marker)]
    return word


def ablaut_form(word: Word, grade: Ablaut, limit: int = MAX_WORD_LENGTH) -> str:
    """
    Rewrite a citation form to the given ablaut grade.

    The grade ending is stressed when the marker itself was stressed.

    Examples:
        >>> ablaut_form("sápA", Ablaut.E)
        'sápe'
        >>> ablaut_form("ditÍŋ", Ablaut.N)
        'ditíŋ'
    """
    text = ensure_text(word)
    if not has_ablaut_marker(text):
        raise InvalidArgument(f"{text!r} has no ablaut marker")
    plain, stressed = ABLAUT_ENDINGS[grade]
    ending = stressed if is_ablaut_marker_stressed(text) else plain
    return _fit(ablaut_stem(text) + ending, limit)


def satisfies_ablaut(word: str, grade: Ablaut) -> bool:
    """True if the word already ends with the given grade."""
    return ends_with_any(word, ABLAUT_ENDINGS[grade])
