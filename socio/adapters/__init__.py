"""
Adapters implementing the component ports for simple hosts and tests.
"""

from .asset_hints import StaticExportLinkHint
from .static_site import StaticPageContext, StaticSiteMetadata

__all__ = [
    "StaticExportLinkHint",
    "StaticPageContext",
    "StaticSiteMetadata",
]
