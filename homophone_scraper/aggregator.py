"""
Post-processing of pair collections.
"""

from typing import Iterable, List

from .pair_builder import HomophonePair
from .word_loader import sort_unique


def dedupe_pairs(pairs: Iterable[HomophonePair]) -> List[HomophonePair]:
    """Drop repeated (source, homophone) pairs, keeping first occurrences in order."""
    seen = set()
    distinct = []
    for pair in pairs:
        if pair in seen:
            continue
        seen.add(pair)
        distinct.append(pair)
    return distinct


def singularize(pairs: Iterable[HomophonePair]) -> List[str]:
    """Every word on either side of any pair, sorted and duplicate-free."""
    words = []
    for source, homophone in pairs:
        words.append(source)
        words.append(homophone)
    return sort_unique(words)
