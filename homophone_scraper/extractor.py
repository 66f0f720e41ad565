"""
Homophone extraction from dictionary page markup.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from .config_manager import DEFAULT_SELECTOR


class HomophoneExtractor:
    """Finds homophone links in a dictionary page with a CSS selector."""

    def __init__(self, selector: str = DEFAULT_SELECTOR, parser: str = "html.parser"):
        self.selector = selector
        self.parser = parser
        self.logger = logging.getLogger(__name__)

    def extract(self, html: str) -> Optional[List[str]]:
        """
        Return the stripped text of every selector match, in document order.

        Returns None when nothing matches, including pages that have a
        homophones container without any links inside it.
        """
        soup = BeautifulSoup(html, self.parser)
        homophones = [element.get_text().strip() for element in soup.select(self.selector)]

        if not homophones:
            return None

        self.logger.debug(f"Extracted {len(homophones)} homophones: {homophones}")
        return homophones
