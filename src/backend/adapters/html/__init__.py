"""Static HTML document accessor (BeautifulSoup, no I/O)."""

from .document import HTMLDocumentAdapterError, SoupDocument

__all__ = ["HTMLDocumentAdapterError", "SoupDocument"]
