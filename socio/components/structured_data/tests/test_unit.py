"""
Unit tests for the Structured data component.

Tests:
- Default WebSite object built from site metadata
- Overrides (snake_case keys, logo short-hand, sequence replacement)
- Script element output and the static-export asset hint
- Malformed overrides never raise
"""

from __future__ import annotations

import json

import pytest

from socio.adapters import StaticExportLinkHint, StaticSiteMetadata

from ..component import default_tree, render_structured_data, run
from ..models import StructuredDataInput, StructuredDataOutput

# --- Test Fixtures ---


@pytest.fixture
def site() -> StaticSiteMetadata:
    return StaticSiteMetadata(
        site_name="Example",
        site_description="Notes",
        canonical_url="https://e.io/",
        locale="en_US",
        home_url="https://e.io/",
    )


def _render(site: StaticSiteMetadata, **overrides: object) -> StructuredDataOutput:
    return render_structured_data(StructuredDataInput(overrides=overrides), site=site)


# --- Default Tree ---


class TestDefaultTree:
    """Tests for the default object."""

    def test_default_tree_shape(self, site: StaticSiteMetadata) -> None:
        assert default_tree(site) == {
            "@context": "http://schema.org",
            "@type": "WebSite",
            "url": "https://e.io/",
            "name": "Example",
            "inLanguage": "en_US",
            "description": "Notes",
            "sameAs": [],
            "publisher": {"@type": "Organization", "name": "Example", "logo": ""},
        }

    def test_schema_values_configurable(self, site: StaticSiteMetadata) -> None:
        tree = default_tree(
            site,
            schema_context="https://schema.org",
            schema_type="Blog",
            publisher_type="Person",
        )
        assert tree["@context"] == "https://schema.org"
        assert tree["@type"] == "Blog"
        assert tree["publisher"]["@type"] == "Person"

    def test_empty_overrides_reproduce_pruned_default(self, site: StaticSiteMetadata) -> None:
        result = _render(site)
        assert result.data == {
            "@context": "http://schema.org",
            "@type": "WebSite",
            "url": "https://e.io/",
            "name": "Example",
            "inLanguage": "en_US",
            "description": "Notes",
            "publisher": {"@type": "Organization", "name": "Example"},
        }


# --- Overrides ---


class TestOverrides:
    """Tests for caller overrides."""

    def test_logo_shorthand(self, site: StaticSiteMetadata) -> None:
        result = _render(site, logo="https://x/l.png")
        assert result.data["publisher"]["logo"] == "https://x/l.png"
        assert "logo" not in result.data

    def test_logo_shorthand_beats_publisher_logo(self, site: StaticSiteMetadata) -> None:
        result = _render(site, logo="https://x/new.png", publisher={"logo": "https://x/old.png"})
        assert result.data["publisher"]["logo"] == "https://x/new.png"

    def test_null_logo_keeps_configured_publisher_logo(self, site: StaticSiteMetadata) -> None:
        result = _render(site, logo=None, publisher={"logo": "https://p/l.png"})
        assert result.data["publisher"]["logo"] == "https://p/l.png"
        assert "logo" not in result.data

    def test_same_as_replaces(self, site: StaticSiteMetadata) -> None:
        result = _render(site, same_as=["a"])
        assert result.data["sameAs"] == ["a"]
        assert "same_as" not in result.data

    def test_in_language_override(self, site: StaticSiteMetadata) -> None:
        result = _render(site, in_language="ja")
        assert result.data["inLanguage"] == "ja"

    def test_publisher_merged_key_wise(self, site: StaticSiteMetadata) -> None:
        result = _render(site, publisher={"name": "Acme"})
        assert result.data["publisher"] == {"@type": "Organization", "name": "Acme"}

    def test_publisher_type_override(self, site: StaticSiteMetadata) -> None:
        result = _render(site, publisher={"@type": "Person"})
        assert result.data["publisher"]["@type"] == "Person"

    def test_empty_override_prunes_default(self, site: StaticSiteMetadata) -> None:
        result = _render(site, description="")
        assert "description" not in result.data

    def test_key_order_follows_default(self, site: StaticSiteMetadata) -> None:
        result = _render(site, same_as=["a"], name="N")
        assert list(result.data) == [
            "@context",
            "@type",
            "url",
            "name",
            "inLanguage",
            "description",
            "sameAs",
            "publisher",
        ]


# --- Output ---


class TestOutput:
    """Tests for rendered markup."""

    def test_script_wrapper(self, site: StaticSiteMetadata) -> None:
        result = _render(site)
        assert result.html.startswith('<script type="application/ld+json">\n{\n')
        assert result.html.endswith("\n}\n</script>\n")
        assert result.html == f'<script type="application/ld+json">\n{result.json}\n</script>\n'

    def test_json_is_pretty_and_parses(self, site: StaticSiteMetadata) -> None:
        result = _render(site)
        assert '\n    "@context": "http://schema.org",\n' in result.json
        assert json.loads(result.json) == result.data

    def test_script_close_in_data_escaped(self, site: StaticSiteMetadata) -> None:
        result = _render(site, description="</script><script>alert(1)</script>")
        assert result.html.count("</script>") == 1
        assert json.loads(result.json)["description"] == "</script><script>alert(1)</script>"

    def test_unicode_kept(self, site: StaticSiteMetadata) -> None:
        result = _render(site, name="Café")
        assert '"name": "Café"' in result.json


# --- Asset Hints ---


class TestAssetHint:
    """Tests for the static-export logo hint."""

    def test_hint_emitted_with_sink_and_logo(self, site: StaticSiteMetadata) -> None:
        sink = StaticExportLinkHint()
        result = render_structured_data(
            StructuredDataInput(overrides={"logo": "https://x/l.png?a=1&b=2"}),
            site=site,
            asset_hints=sink,
        )
        assert result.asset_hint == (
            '<link href="https://x/l.png?a=1&amp;b=2"><!-- for static export -->\n'
        )
        assert result.html.endswith("</script>\n" + result.asset_hint)
        assert sink.hinted == ["https://x/l.png?a=1&b=2"]

    def test_no_hint_without_sink(self, site: StaticSiteMetadata) -> None:
        result = _render(site, logo="https://x/l.png")
        assert result.asset_hint == ""
        assert "<link" not in result.html

    def test_no_hint_without_logo(self, site: StaticSiteMetadata) -> None:
        sink = StaticExportLinkHint()
        result = render_structured_data(StructuredDataInput(), site=site, asset_hints=sink)
        assert result.asset_hint == ""
        assert sink.hinted == []

    def test_no_hint_for_non_string_logo(self, site: StaticSiteMetadata) -> None:
        sink = StaticExportLinkHint()
        result = render_structured_data(
            StructuredDataInput(overrides={"logo": {"url": "https://x/l.png"}}),
            site=site,
            asset_hints=sink,
        )
        assert result.asset_hint == ""
        assert result.data["publisher"]["logo"] == {"url": "https://x/l.png"}


# --- Malformed Input ---


class TestMalformedOverrides:
    """Malformed overrides are absorbed, never raised."""

    def test_scalar_publisher(self, site: StaticSiteMetadata) -> None:
        result = _render(site, publisher="Acme", logo="https://x/l.png")
        assert result.success is True
        assert result.data["publisher"] == "Acme"
        assert "logo" not in result.data

    def test_non_string_url(self, site: StaticSiteMetadata) -> None:
        result = _render(site, url=42)
        assert result.data["url"] == 42

    def test_string_indexed_same_as(self, site: StaticSiteMetadata) -> None:
        result = _render(site, same_as={"0": "", "1": "https://b"})
        assert result.data["sameAs"] == ["https://b"]

    def test_non_finite_number_omitted(self, site: StaticSiteMetadata) -> None:
        result = _render(site, rating=float("nan"))
        assert "rating" not in result.data
        assert "NaN" not in result.json
        json.loads(result.json)

    def test_list_publisher(self, site: StaticSiteMetadata) -> None:
        result = _render(site, publisher=["a", ""])
        assert result.data["publisher"] == ["a"]


# --- Component Entry Point ---


class TestRun:
    """Tests for run() dispatch."""

    def test_run_renders(self, site: StaticSiteMetadata) -> None:
        result = run(StructuredDataInput(), site=site)
        assert isinstance(result, StructuredDataOutput)
        assert result.success is True

    def test_run_unknown_input_raises(self, site: StaticSiteMetadata) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run({"logo": "x"}, site=site)  # type: ignore[arg-type]
