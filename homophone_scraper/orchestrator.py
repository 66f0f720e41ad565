"""
Central orchestrator that runs the homophone pipeline end to end.
Loads word lists, looks up every word, aggregates pairs and writes outputs.
"""

import time
import logging
from typing import Dict, Any

from .config_manager import RunConfig, FetchSettings
from .word_loader import WordListLoader
from .fetcher import HomophoneFetcher
from .pair_builder import PairBuilder
from .aggregator import dedupe_pairs, singularize
from .saver import OutputWriter


class Orchestrator:
    """
    Coordinates the loader, fetcher, pair builder and writer for one run.

    Every lookup finishes before any output is written, so a fatal fetch
    error leaves no output file behind.
    """

    def __init__(self, run_config: RunConfig, fetch_settings: FetchSettings = None,
                 fetcher: HomophoneFetcher = None):
        self.logger = logging.getLogger(__name__)
        self.run_config = run_config
        self.fetch_settings = fetch_settings or FetchSettings()

        self.loader = WordListLoader()
        self.fetcher = fetcher or HomophoneFetcher(self.fetch_settings)
        self.pair_builder = PairBuilder(self.fetcher)
        self.writer = OutputWriter()

    def run(self) -> Dict[str, Any]:
        """
        Execute the complete workflow.

        Returns:
            Summary statistics for the run

        Raises:
            ConfigurationError: If the run configuration is unusable
            FileAccessError: If an input word list cannot be opened
            FatalFetchError: If a lookup fails twice at transport level
            OutputWriteError: If an output file cannot be written
        """
        # Sole validation point for RunConfig; runs before any file or network access
        self.run_config.validate()
        start_time = time.time()

        vocabulary = self.loader.load(self.run_config.inputs)
        self.logger.info(f"Looking up {len(vocabulary)} words")

        pairs = dedupe_pairs(self.pair_builder.build(vocabulary))
        singles = singularize(pairs)

        outputs = {}
        if self.run_config.pairs_path is not None:
            self.writer.write_pairs(pairs, self.run_config.pairs_path)
            outputs['pairs'] = str(self.run_config.pairs_path)
        if self.run_config.singles_path is not None:
            self.writer.write_singles(singles, self.run_config.singles_path)
            outputs['singles'] = str(self.run_config.singles_path)

        return {
            'words_loaded': len(vocabulary),
            'words_with_homophones': self.pair_builder.words_with_homophones,
            'pairs': len(pairs),
            'singles': len(singles),
            'duration_seconds': time.time() - start_time,
            'outputs': outputs,
        }

    def cleanup(self):
        """Release network resources."""
        self.fetcher.close()
