"""
HTML fragment endpoints for hosts that render through HTTP.

Endpoints:
- POST /fragments/share-links      share link list for a page
- POST /fragments/structured-data  JSON-LD script element for the site

Both return text/html and never fail on content; bad request bodies are
rejected by validation (422).
"""

from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from socio.adapters import StaticExportLinkHint, StaticPageContext
from socio.api.deps import get_policy, get_rules, get_site
from socio.components.sanitize import SanitizationPolicy
from socio.components.sharing import MediaEntry, Term
from socio.components.sharing import run as run_sharing
from socio.components.site_meta import SiteMetadataPort
from socio.components.structured_data import run as run_structured_data
from socio.rules.models import SocioRules

router = APIRouter()


# --- Request Models ---


class FeedContextModel(BaseModel):
    """Archive, term or search context of the page being rendered."""

    kind: Literal["post_type", "term", "search"]
    name: str = Field("", description="Post type key, term name or search query")
    label: str = Field("", description="Post type plural label or taxonomy singular label")
    taxonomy: str = ""
    term_id: int = 0
    href: str = Field(..., description="Feed URL for this context")


class ShareLinksRequest(BaseModel):
    """Request body for share link rendering."""

    url: str = Field(..., description="Absolute URL of the page")
    title: str = Field("", description="Title of the page")
    media: list[MediaEntry] | None = Field(None, description="Override the configured media list")
    do_append_site_name: bool | None = None
    separator: str | None = None
    feed: FeedContextModel | None = None


class StructuredDataRequest(BaseModel):
    """Request body for structured data rendering."""

    overrides: dict[str, Any] = Field(default_factory=dict)
    static_export: bool | None = Field(
        None, description="Emit the static-export logo hint (defaults to rules)"
    )


# --- Helpers ---


def _page_context(request: ShareLinksRequest) -> StaticPageContext:
    feed = request.feed
    if feed is None:
        return StaticPageContext(title=request.title, url=request.url)

    if feed.kind == "post_type":
        return StaticPageContext(
            title=request.title,
            url=request.url,
            post_type=feed.name,
            post_type_labels={feed.name: feed.label},
            feed_links={f"post_type:{feed.name}": feed.href},
        )
    if feed.kind == "term":
        term = Term(term_id=feed.term_id, name=feed.name, taxonomy=feed.taxonomy)
        return StaticPageContext(
            title=request.title,
            url=request.url,
            term=term,
            taxonomy_labels={feed.taxonomy: feed.label},
            feed_links={f"term:{feed.taxonomy}:{feed.term_id}": feed.href},
        )
    return StaticPageContext(
        title=request.title,
        url=request.url,
        search_query=feed.name,
        feed_links={"search": feed.href},
    )


# --- Endpoints ---


@router.post(
    "/share-links",
    response_class=HTMLResponse,
    summary="Render share links",
    description="Render the share link list for a page as an HTML fragment.",
)
def share_links_fragment(
    request: ShareLinksRequest,
    rules: SocioRules = Depends(get_rules),
    site: SiteMetadataPort = Depends(get_site),
    policy: SanitizationPolicy = Depends(get_policy),
) -> HTMLResponse:
    """
    Render share links.

    Configured wrapper markup and media come from rules; the request may
    override the media list, title options and supply a feed context.
    """
    sharing = rules.sharing
    updates: dict[str, Any] = {}
    if request.media is not None:
        updates["media"] = request.media
    if request.do_append_site_name is not None:
        updates["do_append_site_name"] = request.do_append_site_name
    if request.separator is not None:
        updates["separator"] = request.separator
    if updates:
        sharing = sharing.model_copy(update=updates)

    result = run_sharing(
        sharing.to_input(),
        context=_page_context(request),
        site=site,
        policy=policy,
    )
    return HTMLResponse(content=result.html)


@router.post(
    "/structured-data",
    response_class=HTMLResponse,
    summary="Render structured data",
    description="Render the JSON-LD script element describing the site.",
)
def structured_data_fragment(
    request: StructuredDataRequest,
    rules: SocioRules = Depends(get_rules),
    site: SiteMetadataPort = Depends(get_site),
) -> HTMLResponse:
    """
    Render the JSON-LD block.

    Request overrides replace the configured ones entirely.
    """
    config = rules.structured_data
    static_export = (
        request.static_export if request.static_export is not None else config.static_export_hint
    )
    overrides = request.overrides or config.overrides

    result = run_structured_data(
        config.to_input(overrides),
        site=site,
        asset_hints=StaticExportLinkHint() if static_export else None,
    )
    return HTMLResponse(content=result.html)
