"""
Source File Reader
==================

Character-level access to source files for the lexer.

The lexer itself is still a stub: lex_file() walks every character of a
source file but does not classify tokens yet.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileReader:
    """
    Reads a source file one character at a time.

    Can be used as a context manager and as an iterator:

        with FileReader("main.sia") as reader:
            for c in reader:
                ...
    """

    def __init__(self, filename: Optional[PathLike] = None):
        self._file: Optional[TextIO] = None
        if filename is not None:
            self.load_file(filename)

    def load_file(self, filename: PathLike) -> None:
        """
        Open ``filename`` for reading, closing any previously loaded file.

        Raises:
            FileNotFoundError: if the file does not exist
        """
        self.close()
        self._file = open(filename, "r", encoding="utf-8")

    def next_char(self) -> Optional[str]:
        """Return the next character, or None at end of file."""
        if self._file is None:
            return None
        c = self._file.read(1)
        return c if c else None

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __iter__(self) -> Iterator[str]:
        while (c := self.next_char()) is not None:
            yield c

    def __enter__(self) -> "FileReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def lex_file(filename: PathLike) -> int:
    """
    Run the lexer over one source file.

    Returns:
        Number of characters read
    """
    logger.info(f"lexing {filename} ...")
    count = 0
    with FileReader(filename) as reader:
        for _ in reader:
            count += 1
    logger.info(f"lexing {filename} ... done")
    return count
