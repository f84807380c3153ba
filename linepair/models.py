from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, NamedTuple, Optional

from .tokenizer import words


@dataclass
class DiffLine:
    """
    A single removed or added line of a diff.

    Attributes:
        number (int): The 1-based line number in its file version.
        text (str): The raw line text without the trailing newline.
    """
    number: int
    text: str


@dataclass
class Hunk:
    """
    A contiguous block of removed lines followed by added lines.

    Attributes:
        removed (List[DiffLine]): Lines present only in the old version.
        added (List[DiffLine]): Lines present only in the new version.
        header (str): The hunk header it was read from, if any.
    """
    removed: List[DiffLine] = field(default_factory=list)
    added: List[DiffLine] = field(default_factory=list)
    header: str = ""


@dataclass(frozen=True)
class LineData:
    """Derived data of one line, built once per matching call."""
    line: Any
    full: str
    trimmed: str
    words: FrozenSet[str]
    words_total_length: int

    @classmethod
    def from_text(cls, line: Any, text: str) -> "LineData":
        trimmed = text.strip()
        unique_words = frozenset(word for word, _ in words(trimmed))
        return cls(
            line=line,
            full=text,
            trimmed=trimmed,
            words=unique_words,
            words_total_length=sum(len(w) for w in unique_words)
        )


class Anchor(NamedTuple):
    """The common token used to align two paired lines."""
    word: Optional[str]
    removed_start: int
    added_start: int


NO_ANCHOR = Anchor(None, 0, 0)
