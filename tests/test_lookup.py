"""
Tests for lookup.py - Suggestions and running text checks.
"""

import pytest

from lkchecker.constants import Ablaut, ErrorKind
from lkchecker.dict_load import load_articles
from lkchecker.lookup import check_text, demanded_ablaut, suggest
from lkchecker.models import SuggestionStatus


class TestSuggestBasics:
    """Tests for exact matches and misses."""

    def test_not_found(self, lookup_dict):
        result = suggest(lookup_dict, "kiŋg")
        assert result.status == SuggestionStatus.NOT_FOUND
        assert result.count == -ErrorKind.WORD_NOT_FOUND

    def test_correct(self, lookup_dict):
        assert suggest(lookup_dict, "kiŋ").is_correct
        assert suggest(lookup_dict, "kiŋ").count == 0

    def test_ablaut_variant_is_correct(self, lookup_dict):
        assert suggest(lookup_dict, "kte").is_correct

    def test_contraction_is_correct(self):
        d = load_articles(["S:sab sapA"])
        assert d.find("sab") is not None
        result = suggest(d, "sab")
        assert result.is_correct
        assert result.count == 0

    def test_missing_arguments(self, lookup_dict):
        result = suggest(lookup_dict, None)
        assert result.status == SuggestionStatus.ERROR
        assert result.error == ErrorKind.INVALID_ARG
        assert suggest(None, "kiŋ").count == -ErrorKind.INVALID_ARG

    def test_invalid_string(self, lookup_dict):
        result = suggest(lookup_dict, "ki\ud800")
        assert result.status == SuggestionStatus.ERROR
        assert result.count == -ErrorKind.INVALID_STRING


class TestSuggestSpelling:
    """Tests for spelling corrections without context."""

    def test_ascii_eng(self, lookup_dict):
        assert suggest(lookup_dict, "ktin").suggestions == ["ktiŋ"]

    def test_missing_stress(self, lookup_dict):
        assert suggest(lookup_dict, "kunisape").suggestions == ["kunísape"]
        assert suggest(lookup_dict, "kunisapa").suggestions == ["kunísapa"]
        assert suggest(lookup_dict, "zedun").suggestions == ["zédún"]

    def test_misplaced_stress(self, lookup_dict):
        assert suggest(lookup_dict, "sapá").suggestions == ["sápa"]
        assert suggest(lookup_dict, "zédun").suggestions == ["zédún"]

    def test_count_is_list_length(self, lookup_dict):
        result = suggest(lookup_dict, "zedun")
        assert result.count == len(result.suggestions) == 1

    def test_several_words(self, lookup_dict):
        assert set(suggest(lookup_dict, "kola").suggestions) == {"kóla", "kolá"}
        assert set(suggest(lookup_dict, "makolin").suggestions) == {"makolíŋ", "mákʼóliŋ"}


class TestSuggestGlottalStop:
    """Tests for glottal stop spellings."""

    def test_canonical(self, lookup_dict):
        assert suggest(lookup_dict, "mačíkʼala").is_correct

    @pytest.mark.parametrize("word", [
        "mačík'ala", "mačík`ala", "mačíkala", "macikala", "macik'ala",
    ])
    def test_variants(self, lookup_dict, word):
        assert suggest(lookup_dict, word).suggestions == ["mačíkʼala"]


class TestSuggestAblaut:
    """Tests for grade corrections demanded by the next word."""

    def test_sentence_end(self, lookup_dict):
        assert suggest(lookup_dict, "sápa", ".").suggestions == ["sápa", "-", "sápe"]
        assert suggest(lookup_dict, "sapá", ".").suggestions == ["sápa", "-", "sápe"]

    def test_end_of_text(self, lookup_dict):
        assert suggest(lookup_dict, "sápa", "").suggestions == ["sápa", "-", "sápe"]

    def test_grade_already_right(self, lookup_dict):
        assert suggest(lookup_dict, "sápe", ".").is_correct

    def test_next_word_demands_grade(self, lookup_dict):
        result = suggest(lookup_dict, "sápa", "kte")
        assert result.suggestions == ["sápa", "-", "sápiŋ"]
        assert suggest(lookup_dict, "sápiŋ", "kte").is_correct

    def test_next_word_without_grade(self, lookup_dict):
        assert suggest(lookup_dict, "sápa", "lapa").is_correct

    def test_contracted_citation_form(self):
        d = load_articles(["S:sab sapA"])
        assert suggest(d, "sápa", ".").suggestions == ["sapa", "-", "sape"]

    def test_separator_counted(self, lookup_dict):
        result = suggest(lookup_dict, "sápa", ".")
        assert result.count == 3

    def test_correction_comes_from_article_root(self):
        """A listed form's marker does not make its unmarked root ablaut."""
        d = load_articles(["s kóla makolÁ"])
        assert suggest(d, "makola", ".").suggestions == ["makolá"]
        assert suggest(d, "makolá", ".").is_correct

    def test_variant_of_listed_form_corrects_root(self, lookup_dict):
        assert suggest(lookup_dict, "kunisapa", ".").suggestions == ["kunísapa", "-", "sápe"]

    def test_unsearchable_next_word_demands_nothing(self, lookup_dict):
        assert suggest(lookup_dict, "kiŋ", "x" * 300).is_correct
        assert suggest(lookup_dict, "kiŋ", "ab\ud800").is_correct
        assert demanded_ablaut(lookup_dict, "x" * 300) is None


class TestDemandedAblaut:
    """Tests for reading the grade off the next word."""

    def test_no_context(self, lookup_dict):
        assert demanded_ablaut(lookup_dict, None) is None

    def test_sentence_end(self, lookup_dict):
        assert demanded_ablaut(lookup_dict, "") == Ablaut.E
        for mark in ".!?;":
            assert demanded_ablaut(lookup_dict, mark) == Ablaut.E

    def test_recorded(self, lookup_dict):
        assert demanded_ablaut(lookup_dict, "kta") == Ablaut.N
        assert demanded_ablaut(lookup_dict, "he") == Ablaut.A

    def test_unknown_or_plain(self, lookup_dict):
        assert demanded_ablaut(lookup_dict, "xyz") is None
        assert demanded_ablaut(lookup_dict, "lapa") is None

    def test_disagreement(self):
        d = load_articles(["-:n ki", "-:a ki"])
        assert demanded_ablaut(d, "ki") is None


class TestCheckText:
    """Tests for checking running text."""

    def test_findings(self, lookup_dict):
        text = "lapa kiŋg sápa."
        findings = list(check_text(lookup_dict, text))
        assert [f.word for f in findings] == ["kiŋg", "sápa"]
        assert findings[0].start == 5
        assert findings[0].result.status == SuggestionStatus.NOT_FOUND
        assert findings[1].next_word == "."
        assert findings[1].result.suggestions == ["sápa", "-", "sápe"]

    def test_next_word_context(self, lookup_dict):
        findings = list(check_text(lookup_dict, "sápa kte"))
        assert len(findings) == 1
        assert findings[0].next_word == "kte"
        assert findings[0].result.suggestions == ["sápa", "-", "sápiŋ"]

    def test_vowelless_skipped(self, lookup_dict):
        assert list(check_text(lookup_dict, "ktn lapa")) == []

    def test_all_correct(self, lookup_dict):
        assert list(check_text(lookup_dict, "lapa kiŋ he")) == []

    def test_long_neighbour_does_not_fail_word(self, lookup_dict):
        text = "kiŋ " + "a" * 300
        findings = list(check_text(lookup_dict, text))
        assert [f.word for f in findings] == ["a" * 300]
        assert findings[0].result.status == SuggestionStatus.ERROR

    def test_capitalized_word_is_not_exact(self, lookup_dict):
        findings = list(check_text(lookup_dict, "Lapa kiŋ"))
        assert findings[0].result.suggestions == ["lapa"]
