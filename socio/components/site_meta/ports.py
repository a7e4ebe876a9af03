"""
Site metadata port definitions.
"""

from __future__ import annotations

from typing import Protocol


class SiteMetadataPort(Protocol):
    """Port for the host site's metadata."""

    def get_site_name(self) -> str:
        """Get the site name."""
        ...

    def get_site_description(self) -> str:
        """Get the site tagline/description."""
        ...

    def get_canonical_url(self) -> str:
        """Get the site's canonical base URL."""
        ...

    def get_locale(self) -> str:
        """Get the site locale (e.g. 'en_US')."""
        ...

    def get_home_url(self) -> str:
        """Get the URL of the home page."""
        ...
