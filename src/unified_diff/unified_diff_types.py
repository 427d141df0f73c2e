"""Shared dataclasses for parsed unified diffs."""

from dataclasses import dataclass
import re
from typing import Iterator, List, Optional, Tuple

from unified_diff.unified_diff_exceptions import ChunkHeaderFormatError, UnifiedDiffValidationError


_TIMESTAMP_RE_STR = r'\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}(?:\.\d{9})? [-+]\d{4}'
_ALT_TIMESTAMP_RE_STR = r'[A-Z][a-z]{2} [A-Z][a-z]{2} [ \d]\d \d{2}:\d{2}:\d{2} \d{4} [-+]\d{4}'

_PATH_LINE_RE = re.compile(
    rf'^(?:---|\+\+\+)\s+(?:"([^"]+)"|(\S+))(?:\s+({_TIMESTAMP_RE_STR}|{_ALT_TIMESTAMP_RE_STR}))?.*$'
)

_CHUNK_HEADER_RE = re.compile(r'^@@\s+-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s+@@\s*(.*?)\s*$')


@dataclass(frozen=True)
class DiffFilePath:
    """File path and optional timestamp taken from a `---` or `+++` line."""

    path: str
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class ChunkRange:
    """Line ranges stated by a chunk header."""

    before_start: int  # Starting line number in the before file (1-indexed)
    before_length: int  # Number of lines in the before file
    after_start: int  # Starting line number in the after file (1-indexed)
    after_length: int  # Number of lines in the after file
    section: str = ""  # Optional text following the closing @@

    def __str__(self) -> str:
        before = str(self.before_start) if self.before_length == 1 else f"{self.before_start},{self.before_length}"
        after = str(self.after_start) if self.after_length == 1 else f"{self.after_start},{self.after_length}"
        header = f"@@ -{before} +{after} @@"
        if self.section:
            header += f" {self.section}"

        return header


def _parse_file_path(line: str) -> DiffFilePath | None:
    match = _PATH_LINE_RE.match(line)
    if not match:
        return None

    path = match.group(1) if match.group(1) is not None else match.group(2)
    return DiffFilePath(path, match.group(3))


@dataclass(frozen=True)
class UnifiedDiff:
    """
    One file's change record from a unified diff.

    All four parts keep the exact line text from the input (minus the
    newline), so `chunk_lines` entries start with their ' ', '-' or '+'
    marker.
    """

    before_path: str
    after_path: str
    chunk_header: str
    chunk_lines: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.chunk_lines, tuple):
            object.__setattr__(self, 'chunk_lines', tuple(self.chunk_lines))

        if not self.chunk_lines:
            raise UnifiedDiffValidationError(
                "Diff must contain at least one chunk line",
                {'chunk_header': self.chunk_header}
            )

    def lines(self) -> List[str]:
        """Get the diff's lines in input order."""
        return [self.before_path, self.after_path, self.chunk_header, *self.chunk_lines]

    def to_text(self) -> str:
        """Serialize the diff back to unified diff text."""
        return '\n'.join(self.lines()) + '\n'

    def before_file(self) -> DiffFilePath | None:
        """
        Extract the path and timestamp from the before path line.

        Returns:
            The file path details, or None if the line names no path
        """
        return _parse_file_path(self.before_path)

    def after_file(self) -> DiffFilePath | None:
        """
        Extract the path and timestamp from the after path line.

        Returns:
            The file path details, or None if the line names no path
        """
        return _parse_file_path(self.after_path)

    def chunk_range(self) -> ChunkRange:
        """
        Parse the line ranges out of the chunk header.

        The ranges are not checked against the chunk lines.

        Returns:
            The parsed ranges

        Raises:
            ChunkHeaderFormatError: If the header has no numeric ranges
        """
        match = _CHUNK_HEADER_RE.match(self.chunk_header)
        if not match:
            raise ChunkHeaderFormatError(self.chunk_header)

        return ChunkRange(
            before_start=int(match.group(1)),
            before_length=int(match.group(2)) if match.group(2) else 1,
            after_start=int(match.group(3)),
            after_length=int(match.group(4)) if match.group(4) else 1,
            section=match.group(5)
        )

    @property
    def additions(self) -> int:
        """Number of added lines."""
        return sum(1 for line in self.chunk_lines if line.startswith('+'))

    @property
    def deletions(self) -> int:
        """Number of removed lines."""
        return sum(1 for line in self.chunk_lines if line.startswith('-'))


@dataclass(frozen=True)
class UnifiedDiffSpecification:
    """
    The result of parsing a whole unified diff input.

    `preamble` holds any free text found before the first diff, verbatim and
    uninterpreted, or None if there was none.
    """

    preamble: Optional[str]
    diffs: Tuple[UnifiedDiff, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.diffs, tuple):
            object.__setattr__(self, 'diffs', tuple(self.diffs))

        if not self.diffs:
            raise UnifiedDiffValidationError("Specification must contain at least one diff")

    def __len__(self) -> int:
        return len(self.diffs)

    def __iter__(self) -> Iterator[UnifiedDiff]:
        return iter(self.diffs)

    def to_text(self) -> str:
        """Serialize the preamble and all diffs back to unified diff text."""
        parts = [] if self.preamble is None else [self.preamble + '\n']
        parts.extend(diff.to_text() for diff in self.diffs)
        return ''.join(parts)
