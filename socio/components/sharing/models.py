"""
Sharing component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Types ---

# A media key ("facebook") or a (key, label) pair ("facebook", "Share")
MediaEntry = str | tuple[str, str]

DEFAULT_MEDIA: tuple[MediaEntry, ...] = ("facebook", "x", "pocket", "line", "copy", "feed")


# --- Host Context Models ---


@dataclass(frozen=True)
class Term:
    """A taxonomy term queried by the current page."""

    term_id: int
    name: str
    taxonomy: str


@dataclass(frozen=True)
class FeedLink:
    """Feed title and href for the current archive/term/search page."""

    text: str = ""
    href: str = ""


# --- Input Models ---


@dataclass(frozen=True)
class ShareLinksInput:
    """
    Input for rendering share links.

    Markup fields wrap the whole list (before/after) and each link
    (before_link/after_link).
    """

    before: str = "<ul>"
    after: str = "</ul>"
    before_link: str = "<li>"
    after_link: str = "</li>"
    do_append_site_name: bool = True
    separator: str = " - "
    media: tuple[MediaEntry, ...] = DEFAULT_MEDIA


# --- Output Models ---


@dataclass(frozen=True)
class RenderedLink:
    """One rendered share link."""

    media: str
    label: str
    html: str


@dataclass(frozen=True)
class ShareLinksOutput:
    """Output from share link rendering."""

    html: str
    links: list[RenderedLink] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    success: bool = True
