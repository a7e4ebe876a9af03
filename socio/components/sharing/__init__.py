"""
Sharing component - social share links, feed link and copy action.
"""

from .component import (
    COPY_MEDIA,
    FEED_MEDIA,
    JS_ON_COPY_CLICK,
    SOCIAL_MEDIA_LINKS,
    build_share_href,
    media_key_and_label,
    render_link,
    render_share_links,
    resolve_feed_link,
    run,
)
from .models import (
    DEFAULT_MEDIA,
    FeedLink,
    MediaEntry,
    RenderedLink,
    ShareLinksInput,
    ShareLinksOutput,
    Term,
)
from .ports import PageContextPort

__all__ = [
    # Component
    "run",
    # Pure functions
    "render_share_links",
    "render_link",
    "resolve_feed_link",
    "build_share_href",
    "media_key_and_label",
    # Constants
    "SOCIAL_MEDIA_LINKS",
    "JS_ON_COPY_CLICK",
    "FEED_MEDIA",
    "COPY_MEDIA",
    "DEFAULT_MEDIA",
    # Models
    "MediaEntry",
    "Term",
    "FeedLink",
    "ShareLinksInput",
    "ShareLinksOutput",
    "RenderedLink",
    # Ports
    "PageContextPort",
]
