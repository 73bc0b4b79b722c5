"""
Tests for dict.py and dict_load.py - Article parsing, form generation and
the dictionary store.
"""

import pytest

from lkchecker.characters import destress, fold_case, to_ascii
from lkchecker.constants import Ablaut, ErrorKind, WordType
from lkchecker.dict import Dictionary
from lkchecker.dict_load import (
    expand_form, load_articles, load_dictionary, parse_article,
    read_dictionary, spelling_variants,
)
from lkchecker.errors import (
    BufferTooSmall, IncompleteVerb, InvalidArgument, InvalidConjugation,
    InvalidFile, InvalidString,
)


class TestParseArticle:
    """Tests for parsing articles into entries."""

    def test_cumulative_entry_counts(self):
        """Each article adds its forms and their ablaut variants."""
        d = Dictionary()
        steps = [
            ("S lapa milapa nilapa", ErrorKind.OK, 3),
            ("#S kin", ErrorKind.COMMENT, 3),
            ("- aga", ErrorKind.OK, 4),
            ("-:n kin", ErrorKind.OK, 5),
            ("S:sab sapA", ErrorKind.OK, 9),
            ("S ditÍŋ", ErrorKind.OK, 13),
            ("S kárAŋ mikárAŋ", ErrorKind.OK, 21),
            ("t zeden wa~ ~pi", ErrorKind.OK, 24),
            ("t zédún wa@pi @s", ErrorKind.OK, 27),
            ("t uya wa% %pi ~e", ErrorKind.OK, 31),
        ]
        for line, status, count in steps:
            assert parse_article(d, line) == status, line
            assert d.word_count == count, line

    def test_blank_line_is_comment(self):
        d = Dictionary()
        assert parse_article(d, "   ") == ErrorKind.COMMENT
        assert d.word_count == 0

    def test_word_type_and_grade(self):
        d = Dictionary()
        parse_article(d, "-:n kin")
        entry = d.entries[0]
        assert entry.word_type == WordType.PARTICLE
        assert d.ablaut_of(entry) == Ablaut.N

    def test_verb_contraction(self):
        d = Dictionary()
        parse_article(d, "S:sab sapA")
        base = d.entries[0]
        assert base.text == "sapA"
        assert base.contracted == "sab"
        assert d.find("sab") == (base,)

    def test_variants_derive_from_citation_form(self):
        d = Dictionary()
        parse_article(d, "S ditÍŋ")
        base, *variants = d.entries
        assert [v.text for v in variants] == ["ditá", "dité", "ditíŋ"]
        assert all(v.is_variant and v.base is base for v in variants)

    def test_listed_forms_point_at_base(self):
        d = Dictionary()
        parse_article(d, "t uya wa% %pi ~e")
        base = d.entries[0]
        assert [e.text for e in d.entries] == ["uya", "wauya", "wauyapi", "uyae"]
        assert all(e.base is base for e in d.entries[1:])

    def test_missing_arguments(self):
        with pytest.raises(InvalidArgument):
            parse_article(None, "S lapa")
        with pytest.raises(InvalidArgument):
            parse_article(Dictionary(), None)

    def test_unknown_type(self):
        with pytest.raises(InvalidString):
            parse_article(Dictionary(), "Q lapa")

    def test_unknown_grade(self):
        with pytest.raises(InvalidConjugation):
            parse_article(Dictionary(), "-:x he")

    def test_contraction_without_base(self):
        with pytest.raises(IncompleteVerb):
            parse_article(Dictionary(), "S:sab")

    def test_no_base_form(self):
        with pytest.raises(InvalidString):
            parse_article(Dictionary(), "S")

    def test_base_too_long(self):
        with pytest.raises(BufferTooSmall):
            parse_article(Dictionary(), "S " + "a" * 300)

    def test_partial_article_kept(self):
        """Entries created before a failing form stay in the dictionary."""
        d = Dictionary()
        with pytest.raises(BufferTooSmall):
            parse_article(d, "S lapa " + "x" * 254 + "~")
        assert d.word_count == 1
        assert d.find("lapa") is not None


class TestExpandForm:
    """Tests for placeholder expansion."""

    @pytest.fixture
    def base(self):
        return Dictionary().add_entry("zédún", WordType.TRANSITIVE_VERB)

    def test_literal(self, base):
        assert expand_form("milapa", base, base) == "milapa"

    def test_base(self, base):
        assert expand_form("wa~", base, base) == "wazédún"

    def test_restressed_base(self, base):
        assert expand_form("wa@pi", base, base) == "wazédunpi"
        assert expand_form("@s", base, base) == "zedúns"

    def test_previous(self, base):
        previous = Dictionary().add_entry("wauya", WordType.TRANSITIVE_VERB)
        assert expand_form("%pi", base, previous) == "wauyapi"

    def test_only_first_placeholder(self, base):
        assert expand_form("~%", base, base) == "zédún%"


class TestSpellingVariants:
    """Tests for the indexing pipeline."""

    def test_stressed(self):
        assert spelling_variants("zédún") == ["zédún", "zedun"]

    def test_diacritic_consonant(self):
        assert spelling_variants("čaŋ") == ["čaŋ", "can"]

    def test_glottal_stop(self):
        spellings = spelling_variants("mačíkʼalA")
        for expected in ("mačíkʼalA", "mačíkʼala", "mačíkala", "mačikala",
                         "macik'ala", "macikala", "macikʼala", "macik`ala"):
            assert expected in spellings
        assert len(spellings) == len(set(spellings))


class TestDictionarySearch:
    """Tests for searching a loaded dictionary."""

    @pytest.mark.parametrize("word", [
        "lapa", "nilapa", "kta", "ktiŋ", "kte", "zédún", "wazédunpi",
        "zedúns", "uya", "wauya", "wauyapi", "uyae", "sápa", "masápa",
        "sapápi", "kunísapa", "he",
    ])
    def test_found(self, search_dict, word):
        assert search_dict.find(word) is not None

    def test_not_found(self, search_dict):
        assert search_dict.find("kto") is None
        assert search_dict.find("lap") is None

    def test_check_ablaut(self, search_dict):
        assert search_dict.check_ablaut("milapa") is None
        assert search_dict.check_ablaut("uya") is None
        assert search_dict.check_ablaut("kto") is None
        assert search_dict.check_ablaut("kta") == Ablaut.N
        assert search_dict.check_ablaut("kte") == Ablaut.N
        assert search_dict.check_ablaut("ktiŋ") == Ablaut.N
        assert search_dict.check_ablaut("he") == Ablaut.A

    def test_every_entry_finds_itself(self, lookup_dict):
        for entry in lookup_dict.entries:
            assert entry in lookup_dict.find(entry.text), entry.text

    def test_base_chain_is_short(self, lookup_dict):
        for entry in lookup_dict.entries:
            if entry.is_variant:
                assert not entry.base.is_variant
            assert len(list(entry.lineage())) <= 3

    def test_is_valid(self, lookup_dict):
        assert lookup_dict.is_valid()
        assert len(lookup_dict) == lookup_dict.word_count


class TestReadDictionary:
    """Tests for loading lexicon files."""

    def test_load_file(self, lexicon_file, lookup_dict):
        d = load_dictionary(lexicon_file)
        assert d.word_count == lookup_dict.word_count
        assert d.find("kunísape") is not None

    def test_article_count(self, lexicon_file):
        d = Dictionary()
        assert read_dictionary(d, lexicon_file) == 10

    def test_error_reports_line(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("S lapa\n# comment\nQ broken\nS uya\n", encoding="utf-8")
        d = Dictionary()
        with pytest.raises(InvalidString, match=":3:"):
            read_dictionary(d, path)
        assert d.find("lapa") is not None
        assert d.find("uya") is None

    def test_error_line_counts_blank_lines(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"S lapa\r\n\r\n\r\n# comment\n\nQ broken\n")
        with pytest.raises(InvalidString, match=":6:"):
            read_dictionary(Dictionary(), path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidFile):
            load_dictionary(tmp_path / "missing.txt")

    def test_load_articles(self):
        d = load_articles(["S lapa", "# comment", ""])
        assert d.word_count == 1


class TestIndexProperties:
    """Tests for properties that hold for the whole index."""

    def test_normalized_spelling_resolves(self, lookup_dict):
        """Folding, destressing and stripping any spelling finds its entry or base."""
        for entry in lookup_dict.entries:
            for spelling in spelling_variants(entry.text):
                key = to_ascii(destress(fold_case(spelling)))
                owners = lookup_dict.trie.search(key)
                assert owners is not None, (entry.text, spelling, key)
                assert entry in owners or entry.base in owners, (entry.text, key)
