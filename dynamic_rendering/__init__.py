"""Dynamic rendering of JavaScript-heavy pages for search engine crawlers."""

__version__ = "1.0.0"
