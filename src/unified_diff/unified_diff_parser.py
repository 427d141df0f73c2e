"""Unified diff parsing."""

from enum import Enum, auto
import logging
from typing import List

from unified_diff.unified_diff_exceptions import (
    EmptyChunkError,
    EndOfInputExpectingPathError,
    UnexpectedEndOfInputError,
    UnexpectedTokenKindError,
)
from unified_diff.unified_diff_lexer import UnifiedDiffLexer
from unified_diff.unified_diff_token import UnifiedDiffToken, UnifiedDiffTokenKind
from unified_diff.unified_diff_types import UnifiedDiff, UnifiedDiffSpecification


class ParserState(Enum):
    """Position within the diff grammar."""
    EXPECT_BEFORE_PATH = auto()
    EXPECT_AFTER_PATH = auto()
    EXPECT_CHUNK_HEADER = auto()
    EXPECT_FIRST_CHUNK_LINE = auto()
    EXPECT_CHUNK_LINE = auto()


class UnifiedDiffParser:
    """
    Parser for unified diff text.

    Implements the grammar:

        Specification ::= Preamble DiffList
        DiffList      ::= Diff | DiffList Diff
        Diff          ::= BeforePath AfterPath ChunkHeader ChunkLines
        ChunkLines    ::= ChunkLine | ChunkLines ChunkLine

    The grammar is LL(1) over the token kinds, so each token decides the next
    state on its own and no backtracking is needed.
    """

    _logger = logging.getLogger("UnifiedDiffParser")

    def __init__(self, allow_preamble: bool = True) -> None:
        """
        Initialize the parser.

        Args:
            allow_preamble: If True, free text before the first diff is
                collected as the preamble; otherwise it is a lexing error
        """
        self._lexer = UnifiedDiffLexer(allow_preamble=allow_preamble)

    def parse(self, diff_text: str) -> UnifiedDiffSpecification:
        """
        Parse unified diff text into a specification.

        Args:
            diff_text: Unified diff format text

        Returns:
            The parsed specification, with diffs in input order

        Raises:
            UnrecognizedLineError: If a line matches no token pattern
            EndOfInputExpectingPathError: If input ends where a path line is expected
            UnexpectedEndOfInputError: If input ends where a chunk header is expected
            UnexpectedTokenKindError: If a token of the wrong kind is found
            EmptyChunkError: If a chunk header is not followed by a chunk line
        """
        tokens = self._lexer.lex(diff_text)

        index = 0
        preamble_lines: List[str] = []
        while index < len(tokens) and tokens[index].kind == UnifiedDiffTokenKind.PREAMBLE:
            preamble_lines.append(tokens[index].text)
            index += 1

        diffs = self._parse_diff_list(tokens[index:])

        self._logger.debug("parsed %d diffs", len(diffs))
        return UnifiedDiffSpecification(
            preamble='\n'.join(preamble_lines) if preamble_lines else None,
            diffs=tuple(diffs)
        )

    def _parse_diff_list(self, tokens: List[UnifiedDiffToken]) -> List[UnifiedDiff]:
        """
        Run the state machine over the tokens that follow the preamble.

        Args:
            tokens: Tokens with no PREAMBLE entries

        Returns:
            The diffs found, in order
        """
        diffs: List[UnifiedDiff] = []
        state = ParserState.EXPECT_BEFORE_PATH

        before_path = ""
        after_path = ""
        header: UnifiedDiffToken | None = None
        chunk_lines: List[str] = []

        for token in tokens:
            if state == ParserState.EXPECT_BEFORE_PATH:
                self._expect(token, UnifiedDiffTokenKind.BEFORE_PATH)
                before_path = token.text
                state = ParserState.EXPECT_AFTER_PATH

            elif state == ParserState.EXPECT_AFTER_PATH:
                self._expect(token, UnifiedDiffTokenKind.AFTER_PATH)
                after_path = token.text
                state = ParserState.EXPECT_CHUNK_HEADER

            elif state == ParserState.EXPECT_CHUNK_HEADER:
                self._expect(token, UnifiedDiffTokenKind.CHUNK_HEADER)
                header = token
                chunk_lines = []
                state = ParserState.EXPECT_FIRST_CHUNK_LINE

            elif state == ParserState.EXPECT_FIRST_CHUNK_LINE:
                if token.kind != UnifiedDiffTokenKind.CHUNK_LINE:
                    raise EmptyChunkError(token.line_number)

                chunk_lines.append(token.text)
                state = ParserState.EXPECT_CHUNK_LINE

            else:
                if token.kind == UnifiedDiffTokenKind.CHUNK_LINE:
                    chunk_lines.append(token.text)
                    continue

                self._expect(token, UnifiedDiffTokenKind.CHUNK_LINE, UnifiedDiffTokenKind.BEFORE_PATH)

                assert header is not None, "Chunk header must be set before chunk lines"
                diffs.append(self._close_diff(before_path, after_path, header, chunk_lines))
                before_path = token.text
                state = ParserState.EXPECT_AFTER_PATH

        if state in (ParserState.EXPECT_BEFORE_PATH, ParserState.EXPECT_AFTER_PATH):
            expected = (
                UnifiedDiffTokenKind.BEFORE_PATH if state == ParserState.EXPECT_BEFORE_PATH
                else UnifiedDiffTokenKind.AFTER_PATH
            )
            raise EndOfInputExpectingPathError(expected)

        if state == ParserState.EXPECT_CHUNK_HEADER:
            raise UnexpectedEndOfInputError(UnifiedDiffTokenKind.CHUNK_HEADER)

        assert header is not None, "Chunk header must be set before chunk lines"
        if state == ParserState.EXPECT_FIRST_CHUNK_LINE:
            raise EmptyChunkError(header.line_number)

        diffs.append(self._close_diff(before_path, after_path, header, chunk_lines))
        return diffs

    def _expect(self, token: UnifiedDiffToken, expected: UnifiedDiffTokenKind, *also: UnifiedDiffTokenKind) -> None:
        """
        Check a token's kind.

        Args:
            token: Token to check
            expected: Kind reported in the error if the check fails
            also: Other kinds that are acceptable

        Raises:
            UnexpectedTokenKindError: If the token is of none of the given kinds
        """
        if token.kind == expected or token.kind in also:
            return

        raise UnexpectedTokenKindError(token.line_number, expected, token.kind)

    def _close_diff(
        self,
        before_path: str,
        after_path: str,
        header: UnifiedDiffToken,
        chunk_lines: List[str]
    ) -> UnifiedDiff:
        """
        Build the diff record for a completed grammar Diff.

        Args:
            before_path: Text of the before path line
            after_path: Text of the after path line
            header: The chunk header token
            chunk_lines: Texts of the chunk lines, in order

        Returns:
            The immutable diff record
        """
        self._logger.debug("closing diff at line %d with %d chunk lines", header.line_number, len(chunk_lines))
        return UnifiedDiff(before_path, after_path, header.text, tuple(chunk_lines))


def parse_unified_diff(diff_text: str, allow_preamble: bool = True) -> UnifiedDiffSpecification:
    """
    Parse unified diff text with a freshly created parser.

    Args:
        diff_text: Unified diff format text
        allow_preamble: Whether free text before the first diff is accepted

    Returns:
        The parsed specification
    """
    return UnifiedDiffParser(allow_preamble=allow_preamble).parse(diff_text)
