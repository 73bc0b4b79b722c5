"""
lkchecker: Lakota spell checker.

Loads a Lakota lexicon into a spelling index and checks words against it,
suggesting correct spellings and ablaut forms.
"""

from typing import Optional

__version__ = "0.1.0"


def load(path: Optional[str] = None):
    """
    Load a lexicon file.

    Args:
        path: Lexicon file. Falls back to the LK_DICTIONARY environment
            variable.

    Returns:
        Dictionary ready for suggest().

    Example:
        >>> import lkchecker
        >>> d = lkchecker.load("lakota.txt")
        >>> lkchecker.suggest(d, "kunisapa").suggestions
        ['kunísapa']
    """
    from lkchecker.dict_load import load_dictionary
    return load_dictionary(path)


def suggest(dictionary, word: str, next_word: Optional[str] = None):
    """Check a word; see lkchecker.lookup.suggest."""
    from lkchecker.lookup import suggest as _suggest
    return _suggest(dictionary, word, next_word)
