"""
Pydantic models for lkchecker results.

These models are what the lookup engine returns and what the CLI prints
with --json:
- Type-safe result schemas
- Automatic JSON serialization

Usage:
    from lkchecker.models import SuggestionResult

    result = suggest(dictionary, "kunisapa")
    if result.status == SuggestionStatus.SUGGESTIONS:
        print(result.suggestions)
    print(result.model_dump_json())
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from lkchecker.constants import ErrorKind


class SuggestionStatus(str, Enum):
    CORRECT = "correct"
    NOT_FOUND = "not_found"
    ERROR = "error"
    SUGGESTIONS = "suggestions"


class SuggestionResult(BaseModel):
    """
    Outcome of a spell check.

    The suggestion list belongs to the caller. When ablaut corrections are
    present they follow a single "-" separator entry.
    """
    status: SuggestionStatus = Field(..., description="What the check found")
    error: Optional[ErrorKind] = Field(None, description="Error kind when status is 'error'")
    suggestions: List[str] = Field(default_factory=list, description="Replacement spellings")

    @property
    def count(self) -> int:
        """0 for a correct word, the negated error kind on failure, else the list length."""
        if self.status == SuggestionStatus.CORRECT:
            return 0
        if self.status == SuggestionStatus.NOT_FOUND:
            return -int(ErrorKind.WORD_NOT_FOUND)
        if self.status == SuggestionStatus.ERROR:
            return -int(self.error if self.error is not None else ErrorKind.INVALID_ARG)
        return len(self.suggestions)

    @property
    def is_correct(self) -> bool:
        return self.status == SuggestionStatus.CORRECT

    @classmethod
    def correct(cls) -> "SuggestionResult":
        return cls(status=SuggestionStatus.CORRECT)

    @classmethod
    def not_found(cls) -> "SuggestionResult":
        return cls(status=SuggestionStatus.NOT_FOUND, error=ErrorKind.WORD_NOT_FOUND)

    @classmethod
    def failure(cls, kind: ErrorKind) -> "SuggestionResult":
        return cls(status=SuggestionStatus.ERROR, error=kind)

    @classmethod
    def of(cls, suggestions: List[str]) -> "SuggestionResult":
        return cls(status=SuggestionStatus.SUGGESTIONS, suggestions=list(suggestions))


class WordCheck(BaseModel):
    """A word of running text that is not spelled correctly."""
    word: str = Field(..., description="Word as it appears in the text")
    start: int = Field(..., description="Start index in the text")
    length: int = Field(..., description="Length of the word")
    next_word: str = Field("", description="Context used for the ablaut check")
    result: SuggestionResult = Field(..., description="Outcome of the check")
