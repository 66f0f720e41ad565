"""
Network-facing component that looks words up on the reference site.
Handles the HTTP request, the single fixed-backoff retry and markup extraction.
"""

import time
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional
from urllib.parse import quote

import requests
from tenacity import Retrying, stop_after_attempt, wait_fixed, retry_if_result

from .config_manager import FetchSettings
from .extractor import HomophoneExtractor
from .exceptions import FatalFetchError, TransientFetchError


class OutcomeKind(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    RETRYABLE = "retryable"
    FATAL = "fatal"


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one or more retrieval attempts for a single word."""

    kind: OutcomeKind
    body: Optional[str] = None
    status: Optional[int] = None
    cause: Optional[Exception] = None

    @classmethod
    def success(cls, body: str, status: int) -> "FetchOutcome":
        return cls(OutcomeKind.SUCCESS, body=body, status=status)

    @classmethod
    def not_found(cls, status: int) -> "FetchOutcome":
        return cls(OutcomeKind.NOT_FOUND, status=status)

    @classmethod
    def retryable(cls, cause: Exception) -> "FetchOutcome":
        return cls(OutcomeKind.RETRYABLE, cause=cause)

    @classmethod
    def fatal(cls, cause: Exception) -> "FetchOutcome":
        return cls(OutcomeKind.FATAL, cause=cause)

    @property
    def is_retryable(self) -> bool:
        return self.kind is OutcomeKind.RETRYABLE


class HomophoneFetcher:
    """
    Fetches a word's dictionary page and extracts its homophones.

    A transport failure is retried exactly once after a fixed backoff; a
    second failure is fatal. Non-success status codes and pages without
    homophone links both mean "no homophones".
    """

    MAX_ATTEMPTS = 2

    def __init__(self, settings: FetchSettings = None,
                 session: requests.Session = None,
                 extractor: HomophoneExtractor = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.settings = settings or FetchSettings()
        self.logger = logging.getLogger(__name__)
        self.extractor = extractor or HomophoneExtractor(self.settings.selector)
        self._sleep = sleep

        self.session = session or requests.Session()
        self._setup_session()

    def _setup_session(self):
        """Configure the requests session headers."""
        self.session.headers.update({
            'User-Agent': self.settings.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
        })

    def build_url(self, word: str) -> str:
        """Append the word to the base URL, escaping reserved characters."""
        return self.settings.base_url + quote(word, safe="'")

    def fetch(self, word: str) -> Optional[List[str]]:
        """
        Look up one word.

        Args:
            word: The vocabulary word to look up

        Returns:
            Non-empty list of homophones in page order, or None

        Raises:
            FatalFetchError: If the retried attempt also fails at transport level
        """
        outcome = self.retrieve(word)

        if outcome.kind is OutcomeKind.FATAL:
            raise FatalFetchError(word, outcome.cause)

        if outcome.kind is OutcomeKind.NOT_FOUND:
            self.logger.debug(f"No page for '{word}' (status {outcome.status})")
            return None

        return self.extractor.extract(outcome.body)

    def retrieve(self, word: str) -> FetchOutcome:
        """Run the bounded attempt loop and return the final outcome."""
        url = self.build_url(word)
        retrying = Retrying(
            stop=stop_after_attempt(self.MAX_ATTEMPTS),
            wait=wait_fixed(self.settings.backoff_seconds),
            retry=retry_if_result(lambda outcome: outcome.is_retryable),
            before_sleep=self._log_retry,
            retry_error_callback=lambda retry_state: retry_state.outcome.result(),
            sleep=self._sleep,
        )
        outcome = retrying(self._attempt, word, url)

        if outcome.is_retryable:
            # cause is the TransientFetchError; keep the transport error underneath
            self.logger.error(f"Retry failed for '{word}': {outcome.cause.cause}")
            return FetchOutcome.fatal(outcome.cause.cause)
        return outcome

    def _attempt(self, word: str, url: str) -> FetchOutcome:
        self.logger.info(f"Fetching: {url}")
        try:
            with self.session.get(url, timeout=self.settings.timeout) as response:
                self.logger.debug(f"Response status for '{word}': {response.status_code} {response.reason}")
                if not 200 <= response.status_code < 300:
                    return FetchOutcome.not_found(response.status_code)
                return FetchOutcome.success(response.text, response.status_code)
        except requests.exceptions.RequestException as e:
            return FetchOutcome.retryable(TransientFetchError(word, e))

    def _log_retry(self, retry_state):
        outcome = retry_state.outcome.result()
        self.logger.warning(
            f"{outcome.cause}; retrying in {retry_state.next_action.sleep:.0f}s"
        )

    def close(self):
        """Clean up resources."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
