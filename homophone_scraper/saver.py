"""
Output persistence for pair and single-word lists.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from .pair_builder import HomophonePair
from .exceptions import OutputWriteError

PAIR_DELIMITER = ","


class OutputWriter:
    """Writes one record per line, replacing any existing file."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.logger = logging.getLogger(__name__)

    def write_pairs(self, pairs: Iterable[HomophonePair], path: Union[str, Path]) -> int:
        lines = []
        for source, homophone in pairs:
            if PAIR_DELIMITER in source or PAIR_DELIMITER in homophone:
                self.logger.warning(f"Pair ({source!r}, {homophone!r}) contains the delimiter")
            lines.append(f"{source}{PAIR_DELIMITER}{homophone}")
        return self._write_lines(lines, Path(path))

    def write_singles(self, singles: Iterable[str], path: Union[str, Path]) -> int:
        return self._write_lines(list(singles), Path(path))

    def _write_lines(self, lines, path: Path) -> int:
        try:
            with open(path, 'w', encoding=self.encoding, newline='\n') as handle:
                for line in lines:
                    handle.write(line + "\n")
        except OSError as e:
            raise OutputWriteError(path, e) from e

        self.logger.info(f"Wrote {len(lines)} lines to {path}")
        return len(lines)
