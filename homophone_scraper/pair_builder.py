"""
Pair assembly: walks the vocabulary and pairs each word with its homophones.
"""

import logging
from typing import Iterable, List, Tuple

from .fetcher import HomophoneFetcher

HomophonePair = Tuple[str, str]


class PairBuilder:
    """Builds (word, homophone) pairs, one sequential lookup per word."""

    def __init__(self, fetcher: HomophoneFetcher):
        self.fetcher = fetcher
        self.logger = logging.getLogger(__name__)
        self.words_with_homophones = 0

    def build(self, vocabulary: Iterable[str]) -> List[HomophonePair]:
        pairs = []
        self.words_with_homophones = 0

        for word in vocabulary:
            homophones = self.fetcher.fetch(word)
            if not homophones:
                continue

            self.words_with_homophones += 1
            self.logger.info(f"'{word}': {', '.join(homophones)}")
            pairs.extend((word, homophone) for homophone in homophones)

        self.logger.info(
            f"Built {len(pairs)} pairs from {self.words_with_homophones} words with homophones"
        )
        return pairs
