"""Custom exceptions for unified diff lexing and parsing."""

from typing import Any

from unified_diff.unified_diff_token import UnifiedDiffTokenKind


class UnifiedDiffError(Exception):
    """Base exception for unified diff operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class UnifiedDiffLexError(UnifiedDiffError):
    """Raised when a line cannot be classified."""


class UnifiedDiffParseError(UnifiedDiffError):
    """Raised when the token stream does not follow the diff grammar."""


class UnifiedDiffValidationError(UnifiedDiffError):
    """Raised when a diff structure is built with invalid contents."""


class UnrecognizedLineError(UnifiedDiffLexError):
    """Raised when a line matches none of the token patterns."""

    def __init__(self, line_number: int, text: str):
        """
        Initialize the exception.

        Args:
            line_number: 1-based line number of the offending line
            text: Content of the offending line
        """
        super().__init__(
            f"Unrecognized line {line_number}: {text!r}",
            {
                'line_number': line_number,
                'text': text,
            }
        )
        self.line_number = line_number
        self.text = text


class EndOfInputExpectingPathError(UnifiedDiffParseError):
    """Raised when input ends while a before or after path line is expected."""

    def __init__(self, expected: UnifiedDiffTokenKind):
        """
        Initialize the exception.

        Args:
            expected: Token kind the parser was waiting for
        """
        super().__init__(
            f"Unexpected end of input: expected {expected.name}",
            {'expected': expected.name}
        )
        self.expected = expected


class UnexpectedEndOfInputError(UnifiedDiffParseError):
    """Raised when input ends while a chunk header is expected."""

    def __init__(self, expected: UnifiedDiffTokenKind):
        """
        Initialize the exception.

        Args:
            expected: Token kind the parser was waiting for
        """
        super().__init__(
            f"Unexpected end of input: expected {expected.name}",
            {'expected': expected.name}
        )
        self.expected = expected


class UnexpectedTokenKindError(UnifiedDiffParseError):
    """Raised when a token of the wrong kind appears for the current parser state."""

    def __init__(self, line_number: int, expected: UnifiedDiffTokenKind, actual: UnifiedDiffTokenKind):
        """
        Initialize the exception.

        Args:
            line_number: 1-based line number of the offending token
            expected: Token kind the parser was waiting for
            actual: Token kind that was found
        """
        super().__init__(
            f"Line {line_number}: expected {expected.name}, found {actual.name}",
            {
                'line_number': line_number,
                'expected': expected.name,
                'actual': actual.name,
            }
        )
        self.line_number = line_number
        self.expected = expected
        self.actual = actual


class EmptyChunkError(UnifiedDiffParseError):
    """Raised when a chunk header is not followed by at least one chunk line."""

    def __init__(self, line_number: int):
        """
        Initialize the exception.

        Args:
            line_number: 1-based line number of the token after the chunk header,
                or of the header itself when input ends there
        """
        super().__init__(
            f"Line {line_number}: chunk has no lines",
            {'line_number': line_number}
        )
        self.line_number = line_number


class ChunkHeaderFormatError(UnifiedDiffParseError):
    """Raised when a chunk header does not carry numeric line ranges."""

    def __init__(self, header: str):
        """
        Initialize the exception.

        Args:
            header: The chunk header text that could not be parsed
        """
        super().__init__(
            f"Invalid chunk header format: {header}",
            {
                'header': header,
                'expected_format': '@@ -start[,length] +start[,length] @@',
            }
        )
        self.header = header
