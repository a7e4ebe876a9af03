"""
Asset hint adapter for static-site export crawlers.

Static exporters only copy assets they find referenced in the rendered
HTML. A logo that appears only inside JSON-LD is invisible to them, so a
bare <link> carrying the URL is emitted next to the script element.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from socio.components.sanitize import escape_attr

logger = logging.getLogger(__name__)


@dataclass
class StaticExportLinkHint:
    """AssetHintSink that emits a <link> tag for a static exporter."""

    comment: str = "for static export"
    hinted: list[str] = field(default_factory=list)

    def render_hint(self, url: str) -> str:
        self.hinted.append(url)
        logger.debug("Asset hint for %s", url)
        return f'<link href="{escape_attr(url)}"><!-- {self.comment} -->\n'
