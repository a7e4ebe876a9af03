"""
Structured data component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class AssetHintSink(Protocol):
    """
    Port for an asset-crawler integration (e.g. a static-site exporter).

    Only supplied by the caller when such an integration is active.
    """

    def render_hint(self, url: str) -> str:
        """Return markup that makes the crawler pick up ``url``."""
        ...
