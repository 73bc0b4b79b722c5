"""
Dictionary loading module for lkchecker.

Parses lexicon articles and expands each one into dictionary entries and
all of their indexed spellings.

Lexicon format, one article per line:

    <type>[:<grade-or-contraction>] <base-form> [<extra-form> ...]

    S lapa milapa nilapa        static verb with two listed forms
    S:sab sapA                  verb with contraction "sab", ablauting base
    -:n ktA                     particle demanding n-grade of the previous word
    t uya wa% %pi ~e            shorthand: ~ base, @ restressed base, % previous form
    # comment

An extra form may contain one placeholder:
    ~  the base form verbatim
    @  the base form destressed, with the whole result restressed on the
       default vowel
    %  the previous form of the article
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from lkchecker.characters import (
    ablaut_form, count_stressed_vowels, destress, fold_case, has_ablaut_marker,
    has_glottal_stop, is_ascii, put_stress, remove_glottal_stop, to_ascii,
)
from lkchecker.constants import Ablaut, ErrorKind, WordType
from lkchecker.dict import Dictionary, WordEntry
from lkchecker.errors import (
    BufferTooSmall, IncompleteVerb, InvalidArgument, InvalidConjugation,
    InvalidString, LineTooLong, LkError, ReadError,
)
from lkchecker.reader import LineReader, ReadStatus
from lkchecker.settings import MAX_WORD_LENGTH, STRESS_DEFAULT

logger = logging.getLogger(__name__)

# Placeholders in extra forms, in the order they are looked for
PLACEHOLDERS = "~@%"


# ============================================================================
# Spelling Index
# ============================================================================

def spelling_variants(text: str) -> List[str]:
    """
    List every spelling under which a surface form is indexed.

    In order, each only when it differs from what is already listed:
        1. the text as written
        2. case-folded (quotes become the glottal stop)
        3. (2) without glottal stops
        4. (2) destressed, and that without glottal stops
        5. (4) in ASCII, that without glottal stops, and the ASCII letters
           with the glottal stop written canonically again
        6. (5) with apostrophes written as backticks

    Raises:
        BufferTooSmall, InvalidString: From the character transforms.
    """
    spellings: List[str] = []

    def add(spelling: str) -> None:
        if spelling and spelling not in spellings:
            spellings.append(spelling)

    glottal = has_glottal_stop(text)

    add(text)
    folded = fold_case(text)
    add(folded)
    if glottal:
        add(remove_glottal_stop(folded))

    plain = folded
    if count_stressed_vowels(folded) > 0:
        plain = destress(folded)
        add(plain)
        if glottal:
            add(remove_glottal_stop(plain))

    if is_ascii(plain):
        return spellings

    ascii_form = to_ascii(plain)
    add(ascii_form)
    if glottal:
        add(remove_glottal_stop(ascii_form))
        add(fold_case(ascii_form))
    if "'" in ascii_form:
        add(ascii_form.replace("'", "`"))

    return spellings


def index_spelling(dictionary: Dictionary, text: str, owner: WordEntry) -> None:
    """Insert every spelling variant of text into the trie for owner."""
    for spelling in spelling_variants(text):
        dictionary.trie.insert(spelling, owner)


def index_entry(dictionary: Dictionary, entry: WordEntry) -> List[WordEntry]:
    """
    Index an entry and synthesize its ablaut variants.

    The entry's text and its contraction are indexed for the entry. Each
    of the two that carries the ablaut marker also yields one variant
    entry per grade, indexed in turn. Variants are not expanded again.

    Returns:
        The synthesized variant entries.
    """
    variants: List[WordEntry] = []

    for text in (entry.text, entry.contracted):
        if not text:
            continue
        index_spelling(dictionary, text, entry)
        if entry.is_variant or not has_ablaut_marker(text):
            continue
        for grade in Ablaut:
            variant = dictionary.add_entry(
                ablaut_form(text, grade),
                entry.word_type,
                base=entry,
                is_variant=True,
            )
            index_spelling(dictionary, variant.text, variant)
            variants.append(variant)

    return variants


def _add_form(dictionary: Dictionary, entry: WordEntry, grade: Optional[Ablaut]) -> None:
    if grade is not None:
        dictionary.add_ablaut(entry, grade)
    index_entry(dictionary, entry)


# ============================================================================
# Article Parsing
# ============================================================================

def expand_form(token: str, base: WordEntry, previous: WordEntry) -> str:
    """
    Resolve the placeholder in an extra form.

    Only the first placeholder found (looking for ~, then @, then %) is
    replaced.

    Examples:
        With base "zédún", "wa@pi" expands to "wazédunpi" and "@s" to
        "zedúns".
    """
    for placeholder in PLACEHOLDERS:
        idx = token.find(placeholder)
        if idx >= 0:
            break
    else:
        return token

    prefix, suffix = token[:idx], token[idx + 1:]
    if placeholder == '~':
        form = prefix + base.text + suffix
    elif placeholder == '@':
        form = prefix + destress(base.text) + suffix
    else:
        form = prefix + previous.text + suffix

    if len(form.encode('utf-8')) >= MAX_WORD_LENGTH:
        raise BufferTooSmall(f"form {token!r} expands past {MAX_WORD_LENGTH} bytes")

    if placeholder == '@':
        form = put_stress(form, STRESS_DEFAULT)
    return form


def _split_header(line: str):
    """Split '<type>[:<x>] rest' into (word_type, grade, contracted, rest)."""
    word_type = WordType.from_char(line[0])
    if word_type is None:
        raise InvalidString(f"unknown word type {line[0]!r} in {line!r}")

    rest = line[1:]
    grade: Optional[Ablaut] = None
    contracted: Optional[str] = None

    if rest.startswith(':'):
        rest = rest[1:]
        if word_type.is_verb:
            # contraction runs up to the next space
            space = rest.find(' ')
            if space < 0:
                raise IncompleteVerb(f"no base form after contraction in {line!r}")
            contracted = rest[:space] or None
            rest = rest[space:]
        elif rest:
            grade = Ablaut.from_char(rest[0])
            if grade is None:
                raise InvalidConjugation(f"unknown ablaut grade {rest[0]!r} in {line!r}")
            rest = rest[1:]

    return word_type, grade, contracted, rest


def parse_article(dictionary: Dictionary, line: str) -> ErrorKind:
    """
    Parse one lexicon article and add its entries to the dictionary.

    Args:
        dictionary: Dictionary to extend.
        line: One line of the lexicon, without line terminators.

    Returns:
        ErrorKind.OK, or ErrorKind.COMMENT for a comment or blank line.

    Raises:
        InvalidArgument: If dictionary or line is None.
        InvalidString: If the line is malformed.
        InvalidConjugation: If the ablaut grade letter is unknown.
        IncompleteVerb: If a verb has a contraction but no base form.
        BufferTooSmall: If a form does not fit in MAX_WORD_LENGTH.
        OutOfMemory: If the trie cannot grow.

    Entries created before an error stay in the dictionary.
    """
    if dictionary is None or line is None:
        raise InvalidArgument("dictionary and line are required")
    if line.startswith('#') or not line.strip():
        return ErrorKind.COMMENT

    word_type, grade, contracted, rest = _split_header(line)

    tokens = rest.split()
    if not tokens:
        raise InvalidString(f"no base form in {line!r}")

    base_text, extra = tokens[0], tokens[1:]
    if len(base_text.encode('utf-8')) >= MAX_WORD_LENGTH:
        raise BufferTooSmall(f"base form of {line!r} is too long")

    base = dictionary.add_entry(base_text, word_type, contracted=contracted)
    _add_form(dictionary, base, grade)

    previous = base
    for token in extra:
        form = dictionary.add_entry(expand_form(token, base, previous), word_type, base=base)
        _add_form(dictionary, form, grade)
        previous = form

    return ErrorKind.OK


# ============================================================================
# File Loading
# ============================================================================

def read_dictionary(dictionary: Dictionary, path: Optional[Union[str, Path]] = None) -> int:
    """
    Read a lexicon file into an existing dictionary.

    Stops at the first failing article; entries read before it are kept.

    Args:
        dictionary: Dictionary to extend.
        path: Lexicon file. Falls back to LK_DICTIONARY.

    Returns:
        Number of articles parsed (comments not counted).

    Raises:
        InvalidFile: If the file cannot be opened.
        ReadError, LineTooLong: On reader failures.
        LkError: Any parse error, with the line number in the message.
    """
    articles = 0
    with LineReader(path) as reader:
        logger.info(f"Loading lexicon from {reader.path}...")
        while True:
            status, line = reader.read_line()
            if status == ReadStatus.EOF:
                break
            if status == ReadStatus.READ_ERROR:
                raise ReadError(f"{reader.path}: read failed after line {reader.line_number}")
            if status == ReadStatus.LINE_TOO_LONG:
                raise LineTooLong(f"{reader.path}:{reader.line_number}: line too long")

            try:
                result = parse_article(dictionary, line)
            except LkError as e:
                logger.error(f"{reader.path}:{reader.line_number}: {e}")
                raise type(e)(f"{reader.path}:{reader.line_number}: {e}") from e

            if result == ErrorKind.OK:
                articles += 1

    logger.info(f"Loaded {articles} articles, {dictionary.word_count} entries, "
                f"{len(dictionary.trie)} spellings")
    return articles


def load_dictionary(path: Optional[Union[str, Path]] = None) -> Dictionary:
    """Create a dictionary from a lexicon file."""
    dictionary = Dictionary()
    read_dictionary(dictionary, path)
    return dictionary


def load_articles(lines) -> Dictionary:
    """Create a dictionary from an iterable of article lines."""
    dictionary = Dictionary()
    for line in lines:
        parse_article(dictionary, line)
    return dictionary
