"""
In-memory site metadata and page context adapters.

Used by the HTTP fragment routes and by tests; real hosts implement the
ports against their own content/query APIs.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from socio.components.sharing import Term


@dataclass(frozen=True)
class StaticSiteMetadata:
    """SiteMetadataPort backed by fixed values."""

    site_name: str = ""
    site_description: str = ""
    canonical_url: str = ""
    locale: str = "en_US"
    home_url: str = ""

    def get_site_name(self) -> str:
        return self.site_name

    def get_site_description(self) -> str:
        return self.site_description

    def get_canonical_url(self) -> str:
        return self.canonical_url

    def get_locale(self) -> str:
        return self.locale

    def get_home_url(self) -> str:
        return self.home_url or self.canonical_url


@dataclass(frozen=True)
class StaticPageContext:
    """
    PageContextPort backed by fixed values.

    At most one of ``post_type``, ``term`` or ``search_query`` is expected
    to be set; checks follow archive, taxonomy, search order.
    """

    title: str = ""
    url: str = ""
    post_type: str | None = None
    post_type_labels: dict[str, str] = field(default_factory=dict)
    term: Term | None = None
    taxonomy_labels: dict[str, str] = field(default_factory=dict)
    search_query: str | None = None
    feed_links: dict[str, str] = field(default_factory=dict)

    def get_title(self) -> str:
        return self.title

    def get_current_url(self) -> str:
        return self.url

    def is_post_type_archive(self) -> bool:
        return self.post_type is not None

    def get_queried_post_type(self) -> str:
        return self.post_type or ""

    def get_post_type_label(self, post_type: str) -> str:
        return self.post_type_labels.get(post_type, "")

    def get_post_type_feed_link(self, post_type: str) -> str | None:
        return self.feed_links.get(f"post_type:{post_type}")

    def is_taxonomy(self) -> bool:
        return self.term is not None

    def get_queried_term(self) -> Term | None:
        return self.term

    def get_taxonomy_label(self, taxonomy: str) -> str:
        return self.taxonomy_labels.get(taxonomy, "")

    def get_term_feed_link(self, term: Term) -> str | None:
        return self.feed_links.get(f"term:{term.taxonomy}:{term.term_id}")

    def is_search(self) -> bool:
        return self.search_query is not None

    def get_search_query(self) -> str:
        return self.search_query or ""

    def get_search_feed_link(self) -> str | None:
        return self.feed_links.get("search")
