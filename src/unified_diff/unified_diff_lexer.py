"""
Unified diff lexer.

Unified diffs are line-oriented, so each line is classified on its own by
matching its leading characters against a fixed, ordered list of patterns.
"""

import logging
import re
from typing import ClassVar, List, Tuple

from unified_diff.unified_diff_exceptions import UnrecognizedLineError
from unified_diff.unified_diff_token import UnifiedDiffToken, UnifiedDiffTokenKind


class UnifiedDiffLexer:
    """
    Lexer for unified diff text.

    Patterns are tried in order and the first match wins.  The path markers
    must be tested before the chunk line pattern because a `---` or `+++`
    line would otherwise be taken for a removed or added line.
    """

    _logger = logging.getLogger("UnifiedDiffLexer")

    _TOKEN_PATTERNS: ClassVar[List[Tuple[UnifiedDiffTokenKind, re.Pattern[str]]]] = [
        (UnifiedDiffTokenKind.BEFORE_PATH, re.compile(r'---.*')),
        (UnifiedDiffTokenKind.AFTER_PATH, re.compile(r'\+\+\+.*')),
        (UnifiedDiffTokenKind.CHUNK_HEADER, re.compile(r'@@.*@@.*')),
        (UnifiedDiffTokenKind.CHUNK_LINE, re.compile(r'[ \-+].*')),
    ]

    def __init__(self, allow_preamble: bool = True) -> None:
        """
        Initialize the lexer.

        Args:
            allow_preamble: If True, unrecognized lines before the first
                recognized line are returned as PREAMBLE tokens instead of
                raising an error
        """
        self._allow_preamble = allow_preamble

    @property
    def allow_preamble(self) -> bool:
        """Whether leading unrecognized lines are accepted as preamble."""
        return self._allow_preamble

    def classify(self, line: str, line_number: int) -> UnifiedDiffToken:
        """
        Classify a single line.

        Args:
            line: The line text, with or without its trailing newline
            line_number: 1-based line number, used for diagnostics

        Returns:
            The token for the line; its text never includes the newline

        Raises:
            UnrecognizedLineError: If the line matches no token pattern
        """
        if line.endswith('\n'):
            line = line[:-1]

        for kind, pattern in self._TOKEN_PATTERNS:
            if pattern.fullmatch(line):
                return UnifiedDiffToken(kind, line, line_number)

        raise UnrecognizedLineError(line_number, line)

    def lex(self, text: str) -> List[UnifiedDiffToken]:
        """
        Lex all the lines in the input.

        Args:
            text: Unified diff text

        Returns:
            Tokens in input order

        Raises:
            UnrecognizedLineError: On the first line that matches no pattern
                (and is not part of an allowed preamble)
        """
        tokens: List[UnifiedDiffToken] = []
        in_preamble = self._allow_preamble

        for line_number, line in enumerate(self.split_lines(text), start=1):
            try:
                token = self.classify(line, line_number)

            except UnrecognizedLineError:
                if not in_preamble:
                    raise

                tokens.append(UnifiedDiffToken(UnifiedDiffTokenKind.PREAMBLE, line, line_number))
                continue

            in_preamble = False
            tokens.append(token)

        self._logger.debug("lexed %d tokens", len(tokens))
        return tokens

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """
        Split text into lines on newline characters only.

        A trailing newline does not produce an extra empty line, and carriage
        returns are left in place.

        Args:
            text: Text to split

        Returns:
            The lines without their newline terminators
        """
        if not text:
            return []

        lines = text.split('\n')
        if lines[-1] == '':
            lines.pop()

        return lines
