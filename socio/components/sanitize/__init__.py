"""
Sanitize component - HTML allow-list filtering.
"""

from .component import (
    escape_attr,
    escape_url,
    is_safe_url,
    parse_attributes,
    run,
    sanitize_html,
)
from .models import (
    DEFAULT_POLICY,
    SanitizationPolicy,
    SanitizeHtmlInput,
    SanitizeOutput,
    SanitizeWarning,
)

__all__ = [
    # Component
    "run",
    # Pure functions
    "sanitize_html",
    "escape_attr",
    "escape_url",
    "is_safe_url",
    "parse_attributes",
    # Models
    "DEFAULT_POLICY",
    "SanitizationPolicy",
    "SanitizeHtmlInput",
    "SanitizeOutput",
    "SanitizeWarning",
]
