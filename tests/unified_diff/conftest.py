"""Shared fixtures and utilities for unified diff tests."""

import pytest
from typing import List

from unified_diff.unified_diff_lexer import UnifiedDiffLexer
from unified_diff.unified_diff_parser import UnifiedDiffParser


SINGLE_DIFF = """--- a.txt
+++ b.txt
@@ -1,2 +1,2 @@
-old line
+new line
"""

TWO_DIFFS = """--- a/first.py
+++ b/first.py
@@ -1,3 +1,3 @@
 import os
-import sys
+import re
--- a/second.py
+++ b/second.py
@@ -10,2 +10,3 @@
 def main():
+    setup()
     run()
"""

GIT_DIFF = """diff --git a/src/app.py b/src/app.py
index 3b18e51..a9c2f1d 100644
--- a/src/app.py
+++ b/src/app.py
@@ -5,3 +5,4 @@ class App:
     def start(self):
-        self.run()
+        self.prepare()
+        self.run()
         return True
"""


@pytest.fixture
def single_diff_text():
    """Text of a diff with one file."""
    return SINGLE_DIFF


@pytest.fixture
def two_diffs_text():
    """Text of a diff with two files."""
    return TWO_DIFFS


@pytest.fixture
def git_diff_text():
    """Text of a git diff, whose extended headers form a preamble."""
    return GIT_DIFF


@pytest.fixture
def lexer():
    """Create a lexer that accepts a preamble."""
    return UnifiedDiffLexer()


@pytest.fixture
def strict_lexer():
    """Create a lexer that rejects a preamble."""
    return UnifiedDiffLexer(allow_preamble=False)


@pytest.fixture
def parser():
    """Create a parser that accepts a preamble."""
    return UnifiedDiffParser()


@pytest.fixture
def strict_parser():
    """Create a parser that rejects a preamble."""
    return UnifiedDiffParser(allow_preamble=False)


class DiffTextBuilder:
    """Helper utilities for building diff text in tests."""

    @staticmethod
    def file_diff(name: str, chunk_lines: List[str], header: str = "@@ -1,1 +1,1 @@") -> str:
        """Build the text of one file diff."""
        lines = [f"--- a/{name}", f"+++ b/{name}", header, *chunk_lines]
        return '\n'.join(lines) + '\n'

    @staticmethod
    def many_diffs(count: int) -> str:
        """Build the text of `count` consecutive file diffs."""
        return ''.join(
            DiffTextBuilder.file_diff(f"file{i}.txt", [f"-old {i}", f"+new {i}"])
            for i in range(count)
        )


@pytest.fixture
def builder():
    """Provide diff text building utilities."""
    return DiffTextBuilder
