"""
Data models for line classification.

LineKind is the role of a single newline-delimited line of model
output.  ClassifiedLine pairs the line text with its kind and the
bookkeeping state the classifier carried when it saw the line.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class LineKind(Enum):
    """Role of a single line of generated text."""

    HEADER = auto()  # **Section**:
    LIST_ITEM = auto()  # * item (indentation ignored)
    OTHER = auto()  # prose and blank lines
    TERMINATOR = auto()  # **Remember:** and other bold labels


class TerminatorPolicy(Enum):
    """
    What a terminator line does to the rest of the input.

    SKIP_LINE drops only the terminator line itself and keeps scanning,
    which is how the extractor has always behaved in production.
    STOP ends processing at the first terminator.
    """

    SKIP_LINE = auto()
    STOP = auto()


# Kinds that end up in the extracted text
RETAINED_KINDS = frozenset({LineKind.HEADER, LineKind.LIST_ITEM})


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A single line of input together with its classification.

    ``in_list`` is the list state *after* this line was consumed and
    ``header`` is the most recent header line seen so far (including
    this one, if it is a header).
    """

    text: str
    kind: LineKind
    index: int
    in_list: bool = False
    header: Optional[str] = None

    @property
    def retained(self) -> bool:
        return self.kind in RETAINED_KINDS

    def __repr__(self) -> str:
        preview = self.text[:60]
        return f"ClassifiedLine({self.kind.name}, #{self.index}, '{preview}')"
