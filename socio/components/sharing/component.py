"""
Sharing component - "share this page" links for social platforms.

Renders one templated anchor per requested media key, plus a contextual
feed link and a clipboard-copy action.

Invariants:
- Link templates are a read-only, process-wide table
- Links are rendered in the order the media keys are given (duplicates allowed)
- Unknown media keys and missing feed context render nothing
- Output passes through the HTML allow-list (onclick permitted on anchors)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from urllib.parse import quote

from socio.components.sanitize import (
    DEFAULT_POLICY,
    SanitizationPolicy,
    escape_attr,
    escape_url,
    sanitize_html,
)
from socio.components.site_meta import SiteMetadataPort, get_share_title

from .models import (
    FeedLink,
    MediaEntry,
    RenderedLink,
    ShareLinksInput,
    ShareLinksOutput,
)
from .ports import PageContextPort

logger = logging.getLogger(__name__)

# --- Templates ---

# <T> = encoded title, <U> = encoded URL
SOCIAL_MEDIA_LINKS: MappingProxyType[str, str] = MappingProxyType(
    {
        "facebook": "https://www.facebook.com/sharer/sharer.php?u=<U>&t=<T>",
        "twitter": "https://twitter.com/intent/tweet?url=<U>&text=<T>",
        "pocket": "https://getpocket.com/edit?url=<U>&title=<T>",
        "line": "https://line.me/R/msg/text/?<T>%0d%0a<U>",
        "x": "https://twitter.com/intent/tweet?url=<U>&text=<T>",
    }
)

JS_ON_COPY_CLICK = (
    "navigator.clipboard.writeText(this.title + ' ' + this.dataset.url);"
    "this.classList.add('copied');"
)

FEED_MEDIA = "feed"
COPY_MEDIA = "copy"

# Feed title templates
FEED_SEPARATOR = "»"
FEED_TITLE_ARCHIVE = "{site} {sep} {post_type} Feed"
FEED_TITLE_TAXONOMY = "{site} {sep} {term} {taxonomy} Feed"
FEED_TITLE_SEARCH = "{site} {sep} Search Results for “{query}” Feed"


# --- Pure Functions (Functional Core) ---


def media_key_and_label(entry: MediaEntry) -> tuple[str, str]:
    """
    Split a media entry into its key and display label.

    A bare key gets its first letter upper-cased as the label.
    """
    if isinstance(entry, (tuple, list)):
        key, label = entry[0], entry[1]
        return str(key), str(label)
    key = str(entry)
    return key, key[:1].upper() + key[1:]


def build_share_href(template: str, title: str, url: str) -> str:
    """Substitute the encoded title and URL into a link template."""
    return template.replace("<T>", quote(title, safe="")).replace("<U>", quote(url, safe=""))


def resolve_feed_link(context: PageContextPort, site: SiteMetadataPort) -> FeedLink:
    """
    Find the feed matching the current archive, term or search page.

    Returns an empty FeedLink when the page has no such context.
    """
    site_name = site.get_site_name()
    text = ""
    href: object = ""

    if context.is_post_type_archive():
        post_type = context.get_queried_post_type()
        text = FEED_TITLE_ARCHIVE.format(
            site=site_name,
            sep=FEED_SEPARATOR,
            post_type=context.get_post_type_label(post_type),
        )
        href = context.get_post_type_feed_link(post_type)
    elif context.is_taxonomy():
        term = context.get_queried_term()
        if term is not None:
            text = FEED_TITLE_TAXONOMY.format(
                site=site_name,
                sep=FEED_SEPARATOR,
                term=term.name,
                taxonomy=context.get_taxonomy_label(term.taxonomy),
            )
            href = context.get_term_feed_link(term)
    elif context.is_search():
        text = FEED_TITLE_SEARCH.format(
            site=site_name,
            sep=FEED_SEPARATOR,
            query=context.get_search_query(),
        )
        href = context.get_search_feed_link()

    if not isinstance(href, str):
        href = ""
    return FeedLink(text=text, href=href)


def render_link(
    media: str,
    label: str,
    *,
    title: str,
    url: str,
    context: PageContextPort,
    site: SiteMetadataPort,
    policy: SanitizationPolicy = DEFAULT_POLICY,
) -> str:
    """
    Render the anchor for one media key.

    Returns an empty string when nothing should be shown.
    """
    template = SOCIAL_MEDIA_LINKS.get(media, "")
    if template:
        href = build_share_href(template, title, url)
        return f'<a href="{escape_url(href, policy)}">{label}</a>'

    if media == FEED_MEDIA:
        feed = resolve_feed_link(context, site)
        if not feed.href:
            logger.debug("No feed for the current page, skipping feed link")
            return ""
        return (
            f'<a href="{escape_url(feed.href, policy)}" '
            f'title="{escape_attr(feed.text)}">{label}</a>'
        )

    if media == COPY_MEDIA:
        return (
            f'<a data-url="{escape_url(url, policy)}" title="{escape_attr(title)}" '
            f'onclick="{JS_ON_COPY_CLICK}">{label}</a>'
        )

    logger.debug("Unknown media key %r, skipping", media)
    return ""


def render_share_links(
    inp: ShareLinksInput,
    *,
    context: PageContextPort,
    site: SiteMetadataPort,
    policy: SanitizationPolicy = DEFAULT_POLICY,
) -> ShareLinksOutput:
    """
    Render share links for the current page.

    Args:
        inp: Wrapper markup, title options and the ordered media keys
        context: Current page context
        site: Site metadata
        policy: HTML allow-list applied to the final markup

    Returns:
        ShareLinksOutput with the filtered markup
    """
    title = get_share_title(
        context.get_title(),
        site,
        do_append_site_name=inp.do_append_site_name,
        separator=inp.separator,
    )
    url = str(context.get_current_url())

    links: list[RenderedLink] = []
    skipped: list[str] = []
    parts: list[str] = []

    for entry in inp.media:
        media, label = media_key_and_label(entry)
        link = render_link(
            media,
            label,
            title=title,
            url=url,
            context=context,
            site=site,
            policy=policy,
        )
        if not link:
            skipped.append(media)
            continue
        links.append(RenderedLink(media=media, label=label, html=link))
        parts.append(f"{inp.before_link}{link}{inp.after_link}\n")

    markup = f"{inp.before}\n{''.join(parts)}{inp.after}\n"
    sanitized = sanitize_html(markup, policy.with_extra_attrs("a", "onclick"))

    return ShareLinksOutput(html=sanitized.html, links=links, skipped=skipped, success=True)


# --- Component Entry Point ---


def run(
    inp: ShareLinksInput,
    *,
    context: PageContextPort,
    site: SiteMetadataPort,
    policy: SanitizationPolicy | None = None,
) -> ShareLinksOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: ShareLinksInput
        context: Current page context port
        site: Site metadata port
        policy: Optional allow-list policy

    Returns:
        ShareLinksOutput
    """
    if isinstance(inp, ShareLinksInput):
        return render_share_links(inp, context=context, site=site, policy=policy or DEFAULT_POLICY)
    raise ValueError(f"Unknown input type: {type(inp)}")
