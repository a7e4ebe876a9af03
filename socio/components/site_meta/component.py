"""
Site meta component - shared title composition.

Pure helpers over the host's site metadata.
"""

from __future__ import annotations

from .ports import SiteMetadataPort

DEFAULT_SEPARATOR = " - "


def build_share_title(
    page_title: str,
    site_name: str,
    *,
    do_append_site_name: bool = True,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """
    Compose the title used when sharing a page.

    Args:
        page_title: Title of the current page (empty on the front page)
        site_name: Name of the site
        do_append_site_name: Whether the site name is appended
        separator: Separator between the page title and the site name

    Returns:
        The composed title
    """
    page_title = page_title.strip()
    site_name = site_name.strip()

    if not page_title:
        return site_name
    if do_append_site_name and site_name and page_title != site_name:
        return f"{page_title}{separator}{site_name}"
    return page_title


def get_share_title(
    page_title: str,
    site: SiteMetadataPort,
    *,
    do_append_site_name: bool = True,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Compose the share title using the site name from ``site``."""
    return build_share_title(
        page_title,
        site.get_site_name(),
        do_append_site_name=do_append_site_name,
        separator=separator,
    )
