"""
Structured data component - JSON-LD block describing the site.

Builds the default WebSite object from site metadata, merges caller
overrides onto it, normalizes the result and wraps the JSON in a
<script type="application/ld+json"> element.

Invariants:
- Rendering never raises on malformed overrides
- No key in the output maps to an empty value
- The asset hint is emitted only when a sink is supplied and
  publisher.logo is a non-empty string
"""

from __future__ import annotations

from typing import Any

from socio.components.site_meta import SiteMetadataPort

from ._impl import encode_json_ld, get_publisher_logo, normalize
from .models import StructuredDataInput, StructuredDataOutput, to_python
from .ports import AssetHintSink

SCRIPT_OPEN = '<script type="application/ld+json">'
SCRIPT_CLOSE = "</script>"


def default_tree(
    site: SiteMetadataPort,
    *,
    schema_context: str = "http://schema.org",
    schema_type: str = "WebSite",
    publisher_type: str = "Organization",
) -> dict[str, Any]:
    """
    Build the default structured data object from site metadata.

    Args:
        site: Site metadata port
        schema_context: Value of @context
        schema_type: Value of @type
        publisher_type: Value of publisher.@type

    Returns:
        The default tree as plain data
    """
    site_name = site.get_site_name()
    return {
        "@context": schema_context,
        "@type": schema_type,
        "url": site.get_home_url(),
        "name": site_name,
        "inLanguage": site.get_locale(),
        "description": site.get_site_description(),
        "sameAs": [],
        "publisher": {
            "@type": publisher_type,
            "name": site_name,
            "logo": "",
        },
    }


def render_structured_data(
    inp: StructuredDataInput,
    *,
    site: SiteMetadataPort,
    asset_hints: AssetHintSink | None = None,
) -> StructuredDataOutput:
    """
    Render the JSON-LD script element.

    Args:
        inp: Overrides and schema defaults
        site: Site metadata port
        asset_hints: Optional asset-crawler integration

    Returns:
        StructuredDataOutput with the markup, the JSON text and the data
    """
    defaults = default_tree(
        site,
        schema_context=inp.schema_context,
        schema_type=inp.schema_type,
        publisher_type=inp.publisher_type,
    )
    tree = normalize(inp.overrides, defaults)
    json_text = encode_json_ld(tree)
    markup = f"{SCRIPT_OPEN}\n{json_text}\n{SCRIPT_CLOSE}\n"

    hint = ""
    logo = get_publisher_logo(tree)
    if logo and asset_hints is not None:
        hint = asset_hints.render_hint(logo)

    data = to_python(tree)
    return StructuredDataOutput(
        html=markup + hint,
        json=json_text,
        data=data if isinstance(data, dict) else {},
        asset_hint=hint,
        success=True,
    )


# --- Component Entry Point ---


def run(
    inp: StructuredDataInput,
    *,
    site: SiteMetadataPort,
    asset_hints: AssetHintSink | None = None,
) -> StructuredDataOutput:
    """
    Main entry point for the structured data component.

    Args:
        inp: StructuredDataInput
        site: Site metadata port
        asset_hints: Optional asset-crawler integration

    Returns:
        StructuredDataOutput
    """
    if isinstance(inp, StructuredDataInput):
        return render_structured_data(inp, site=site, asset_hints=asset_hints)
    raise ValueError(f"Unknown input type: {type(inp)}")
