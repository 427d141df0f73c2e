"""Token kinds and token representation for unified diff text."""

from dataclasses import dataclass
from enum import Enum, auto


class UnifiedDiffTokenKind(Enum):
    """Kinds of line a unified diff is made of."""
    PREAMBLE = auto()
    BEFORE_PATH = auto()
    AFTER_PATH = auto()
    CHUNK_HEADER = auto()
    CHUNK_LINE = auto()


@dataclass(frozen=True)
class UnifiedDiffToken:
    """
    One classified line of input.

    Attributes:
        kind: The kind of line
        text: The line without its trailing newline (chunk lines keep their marker)
        line_number: 1-based line number in the input
    """
    kind: UnifiedDiffTokenKind
    text: str
    line_number: int

    def __repr__(self) -> str:
        return f"UnifiedDiffToken({self.kind.name}, {self.text!r}, line={self.line_number})"
