"""
Unified diff lexing and parsing.

This package turns unified diff text into a validated, immutable structure:
a specification holding an optional preamble and one or more per-file diffs.
"""

from unified_diff.unified_diff_exceptions import (
    ChunkHeaderFormatError,
    EmptyChunkError,
    EndOfInputExpectingPathError,
    UnexpectedEndOfInputError,
    UnexpectedTokenKindError,
    UnifiedDiffError,
    UnifiedDiffLexError,
    UnifiedDiffParseError,
    UnifiedDiffValidationError,
    UnrecognizedLineError,
)
from unified_diff.unified_diff_lexer import UnifiedDiffLexer
from unified_diff.unified_diff_parser import ParserState, UnifiedDiffParser, parse_unified_diff
from unified_diff.unified_diff_token import UnifiedDiffToken, UnifiedDiffTokenKind
from unified_diff.unified_diff_types import (
    ChunkRange,
    DiffFilePath,
    UnifiedDiff,
    UnifiedDiffSpecification,
)

__all__ = [
    # Exceptions
    'UnifiedDiffError',
    'UnifiedDiffLexError',
    'UnifiedDiffParseError',
    'UnifiedDiffValidationError',
    'UnrecognizedLineError',
    'EndOfInputExpectingPathError',
    'UnexpectedEndOfInputError',
    'UnexpectedTokenKindError',
    'EmptyChunkError',
    'ChunkHeaderFormatError',
    # Tokens
    'UnifiedDiffTokenKind',
    'UnifiedDiffToken',
    # Types
    'DiffFilePath',
    'ChunkRange',
    'UnifiedDiff',
    'UnifiedDiffSpecification',
    # Core classes
    'UnifiedDiffLexer',
    'UnifiedDiffParser',
    'ParserState',
    'parse_unified_diff',
]
