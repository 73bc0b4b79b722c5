"""
Shared fixtures for lkchecker tests.
"""

import pytest

from lkchecker.dict_load import load_articles


SEARCH_ARTICLES = [
    "S lapa milapa nilapa",
    "-:n ktA",
    "t zédún wa@pi @s",
    "t uya wa% %pi ~e",
    "S sápA ma~ sapápi kuni@",
    "-:a he",
]

LOOKUP_ARTICLES = [
    "-:n ktA",
    "S lapa milapa nilapa",
    "- kiŋ",
    "t zédún wa@pi @s",
    "t uya wa% %pi ~e",
    "S sápA ma~ sapápi kuni@",
    "-:a he",
    "s číkʼalA ma~",
    "s kóla makolÁ",
    "s kolá mákʼólA",
]


@pytest.fixture
def search_dict():
    """Dictionary used for membership and ablaut registry tests."""
    return load_articles(SEARCH_ARTICLES)


@pytest.fixture
def lookup_dict():
    """Dictionary used for suggestion tests."""
    return load_articles(LOOKUP_ARTICLES)


@pytest.fixture
def lexicon_file(tmp_path):
    """The lookup lexicon written to disk with a comment and blank lines."""
    path = tmp_path / "lexicon.txt"
    text = "# test lexicon\n\n" + "\n".join(LOOKUP_ARTICLES) + "\n"
    path.write_text(text, encoding="utf-8")
    return path
