"""
Homophone Scraper

Builds word/homophone pair lists and flat homophone word lists from plain
text word lists by harvesting the homophones recorded on Wiktionary pages.
"""

__version__ = "1.0.0"
__author__ = "Homophone Scraper Team"
