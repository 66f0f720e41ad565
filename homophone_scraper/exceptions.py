"""
Custom exception classes for granular error handling throughout the pipeline.
"""


class HomophoneScraperError(Exception):
    """Base exception for all homophone-scraping errors."""
    pass


class ConfigurationError(HomophoneScraperError):
    """Raised when the run configuration or settings file is unusable."""
    pass


class FileAccessError(HomophoneScraperError):
    """Raised when an input word list cannot be opened."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot open word list {path}: {cause}")


class LineDecodeError(HomophoneScraperError):
    """Raised when a single word-list line is not valid text."""

    def __init__(self, path, line_number: int, cause):
        self.path = path
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"Cannot decode line {line_number} of {path}: {cause}")


class NetworkError(HomophoneScraperError):
    """Raised for transport-level failures while fetching a page."""

    def __init__(self, word: str, cause):
        self.word = word
        self.cause = cause
        super().__init__(f"Failed to fetch page for '{word}': {cause}")


class TransientFetchError(NetworkError):
    """First fetch attempt failed; the fetcher will retry once."""
    pass


class FatalFetchError(NetworkError):
    """The retried fetch attempt failed too; the run cannot continue."""
    pass


class OutputWriteError(HomophoneScraperError):
    """Raised when an output file cannot be created or written."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write output {path}: {cause}")
