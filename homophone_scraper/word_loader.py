"""
Word list ingestion.
Reads one or more plain text word lists into a sorted, duplicate-free vocabulary.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .exceptions import FileAccessError, LineDecodeError

PathLike = Union[str, Path]


def sort_unique(words: Iterable[str]) -> List[str]:
    """Sort lexicographically, then drop consecutive duplicates."""
    result = []
    for word in sorted(words):
        if not result or result[-1] != word:
            result.append(word)
    return result


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class WordListLoader:
    """Loads word lists, one word per line, into a vocabulary."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)

    def load(self, paths: Iterable[PathLike]) -> List[str]:
        """
        Load every path and return the combined vocabulary.

        Args:
            paths: Word list files, read in order

        Returns:
            Sorted list of distinct lines across all files

        Raises:
            FileAccessError: If any path cannot be opened or read
        """
        words = []
        for path in paths:
            words.extend(self._read_file(Path(path)))

        vocabulary = sort_unique(words)
        self.logger.info(f"Loaded {len(vocabulary)} distinct words from {len(words)} lines")
        return vocabulary

    def _read_file(self, path: Path) -> List[str]:
        lines = []
        try:
            with open(path, 'rb') as handle:
                for line_number, raw in enumerate(handle, start=1):
                    try:
                        lines.append(self._decode_line(path, line_number, raw))
                    except LineDecodeError as e:
                        self.logger.warning(f"Skipping line: {e}")
        except OSError as e:
            raise FileAccessError(path, e) from e

        self.logger.debug(f"Read {len(lines)} lines from {path}")
        return lines

    def _decode_line(self, path: Path, line_number: int, raw: bytes) -> str:
        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise LineDecodeError(path, line_number, e) from e
        return _strip_line_ending(text)
