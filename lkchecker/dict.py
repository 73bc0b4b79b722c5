"""
Dictionary store for lkchecker.

Owns every WordEntry produced from the lexicon, the ablaut registry and
the trie that indexes all spellings. Entries are appended while articles
are parsed and never changed or removed afterwards.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from lkchecker.characters import fold_case
from lkchecker.constants import Ablaut, WordType
from lkchecker.errors import InvalidArgument
from lkchecker.trie import Trie


@dataclass(eq=False)
class WordEntry:
    """
    One concrete surface form.

    Entries compare and hash by identity: two entries with the same text
    coming from different articles are different words.

    Attributes:
        text: The surface form as written in the lexicon (or generated).
        word_type: Type tag of the article the entry came from.
        contracted: Contracted form, verbs only.
        base: Entry this one was derived from (None for an article's base form).
        order: Insertion order in the dictionary.
        is_variant: True for a synthesized ablaut variant.
    """
    text: str
    word_type: WordType
    contracted: Optional[str] = None
    base: Optional['WordEntry'] = field(default=None, repr=False)
    order: int = 0
    is_variant: bool = False

    @property
    def root(self) -> 'WordEntry':
        """Follow base references to the article's base entry."""
        entry = self
        while entry.base is not None:
            entry = entry.base
        return entry

    def lineage(self) -> Iterator['WordEntry']:
        """Yield this entry and then each entry up the base chain."""
        entry: Optional[WordEntry] = self
        while entry is not None:
            yield entry
            entry = entry.base


@dataclass(frozen=True)
class AblautRecord:
    """An entry's recorded ablaut grade."""
    entry: WordEntry
    grade: Ablaut


class Dictionary:
    """All entries, the ablaut registry and the spelling trie."""

    def __init__(self):
        self.entries: List[WordEntry] = []
        self.ablauts: List[AblautRecord] = []
        self.trie: Trie[WordEntry] = Trie()
        self._grades: Dict[WordEntry, Ablaut] = {}

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_entry(
        self,
        text: str,
        word_type: WordType,
        base: Optional[WordEntry] = None,
        contracted: Optional[str] = None,
        is_variant: bool = False,
    ) -> WordEntry:
        """
        Create an entry and append it to the dictionary.

        The entry is not indexed; see dict_load.index_entry.

        Raises:
            InvalidArgument: If text is empty, or base is itself an ablaut
                variant (variants are never expanded again).
        """
        if not text:
            raise InvalidArgument("entry text is required")
        if base is not None and base.is_variant:
            raise InvalidArgument(f"{text!r} cannot derive from ablaut variant {base.text!r}")

        entry = WordEntry(
            text=text,
            word_type=word_type,
            contracted=contracted,
            base=base,
            order=len(self.entries),
            is_variant=is_variant,
        )
        self.entries.append(entry)
        return entry

    def add_ablaut(self, entry: WordEntry, grade: Ablaut) -> AblautRecord:
        """Record the ablaut grade an entry demands of the preceding word."""
        if entry is None:
            raise InvalidArgument("entry is required")
        record = AblautRecord(entry, grade)
        self.ablauts.append(record)
        self._grades.setdefault(entry, grade)
        return record

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def word_count(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def is_valid(self) -> bool:
        """Entry list, registry and trie must all be present."""
        return self.entries is not None and self.ablauts is not None and self.trie is not None

    def find(self, word: str) -> Optional[Tuple[WordEntry, ...]]:
        """
        Case-fold a word and search the trie.

        Returns:
            Entries indexed under the folded spelling, or None.

        Raises:
            InvalidArgument, InvalidString, BufferTooSmall: From fold_case.
        """
        return self.trie.search(fold_case(word))

    def ablaut_of(self, entry: WordEntry) -> Optional[Ablaut]:
        """
        Get the grade recorded for an entry.

        Ablaut variants are not recorded themselves; they report the grade
        of the entry they were generated from.
        """
        for item in entry.lineage():
            grade = self._grades.get(item)
            if grade is not None:
                return grade
            if not item.is_variant:
                break
        return None

    def check_ablaut(self, text: str) -> Optional[Ablaut]:
        """Get the grade recorded for the first entry spelled exactly as text."""
        if text is None:
            return None
        for entry in self.entries:
            if entry.text == text:
                grade = self.ablaut_of(entry)
                if grade is not None:
                    return grade
        return None
