"""
Site meta component - site metadata port and title composition.
"""

from .component import DEFAULT_SEPARATOR, build_share_title, get_share_title
from .ports import SiteMetadataPort

__all__ = [
    "DEFAULT_SEPARATOR",
    "build_share_title",
    "get_share_title",
    "SiteMetadataPort",
]
