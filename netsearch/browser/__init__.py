"""Headless browser sessions for scraping and content extraction."""

from netsearch.browser.session import PageFactory, open_page

__all__ = ["PageFactory", "open_page"]
