"""
Sources of puzzle input.

The runner only ever calls load(), so anything with that method can stand in
for stdin (e.g. FixedReader in tests).
"""

import logging
import sys

from esb_fireplace.errors import InputFailure

logger = logging.getLogger(__name__)

class InputReader:
    """Produces the whole input text for a single run."""

    def load(self) -> str:
        """Returns the input text; raises InputFailure if it can't be read."""
        raise NotImplementedError

class StdinReader(InputReader):
    """Reads everything from a text stream (stdin unless told otherwise)."""

    def __init__(self, stream=None):
        self._stream = stream

    def load(self) -> str:
        stream = self._stream if self._stream is not None else sys.stdin
        try:
            data = stream.read()
        # ValueError covers reading from a closed stream
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            raise InputFailure(str(exc)) from exc
        logger.debug("read %d characters of input", len(data))
        return data

class FixedReader(InputReader):
    """Always returns the same text."""

    def __init__(self, text: str):
        self._text = text

    def load(self) -> str:
        return self._text
