"""
Sharing component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import Term


class PageContextPort(Protocol):
    """Port for the host's current page and query context."""

    def get_title(self) -> str:
        """Get the current page title."""
        ...

    def get_current_url(self) -> str:
        """Get the current absolute URL."""
        ...

    def is_post_type_archive(self) -> bool:
        """Whether the current page is a post type archive."""
        ...

    def get_queried_post_type(self) -> str:
        """Get the post type of the current archive."""
        ...

    def get_post_type_label(self, post_type: str) -> str:
        """Get the plural label of a post type (empty if unknown)."""
        ...

    def get_post_type_feed_link(self, post_type: str) -> str | None:
        """Get the feed URL of a post type archive."""
        ...

    def is_taxonomy(self) -> bool:
        """Whether the current page is a taxonomy term archive."""
        ...

    def get_queried_term(self) -> Term | None:
        """Get the queried taxonomy term."""
        ...

    def get_taxonomy_label(self, taxonomy: str) -> str:
        """Get the singular label of a taxonomy (empty if unknown)."""
        ...

    def get_term_feed_link(self, term: Term) -> str | None:
        """Get the feed URL of a term archive."""
        ...

    def is_search(self) -> bool:
        """Whether the current page is a search results page."""
        ...

    def get_search_query(self) -> str:
        """Get the raw search query."""
        ...

    def get_search_feed_link(self) -> str | None:
        """Get the feed URL of the search results."""
        ...
