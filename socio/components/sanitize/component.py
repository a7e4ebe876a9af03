"""
Sanitize component - HTML allow-list filtering and attribute escaping.

Filters template-helper output so only allow-listed tags and attributes
survive.

Invariants:
- I1: Only allow-listed tags in output (text content of stripped tags stays)
- I2: Only allow-listed attributes per tag
- I3: href/src with a forbidden protocol removes the whole tag
- I4: Attribute values are escaped exactly once
"""

from __future__ import annotations

import html
import logging
import re

from .models import (
    DEFAULT_POLICY,
    SanitizationPolicy,
    SanitizeHtmlInput,
    SanitizeOutput,
    SanitizeWarning,
)

logger = logging.getLogger(__name__)

# Regex patterns for HTML parsing
TAG_PATTERN = re.compile(r"<(/?)([a-zA-Z][\w]*)([^<>]*)>")
# A "<" that does not open a complete tag is text
MARKUP_PATTERN = re.compile(TAG_PATTERN.pattern + "|<")
ATTR_PATTERN = re.compile(r'([\w-]+)\s*=\s*(?:"([^"]*)"|\'([^\']*)\'|([^\s>]+))')

URL_ATTRS = frozenset(["href", "src"])


# --- Escaping ---


def escape_attr(value: str) -> str:
    """
    Escape a value for use inside a double-quoted attribute.

    Entities already present are decoded first so nothing is escaped twice.
    """
    return html.escape(html.unescape(value), quote=False).replace('"', "&quot;")


def is_safe_url(url: str, policy: SanitizationPolicy = DEFAULT_POLICY) -> bool:
    """
    Check if URL is safe (no forbidden protocols).

    Returns True if URL is safe, False if it uses a forbidden protocol.
    """
    if not url:
        return True

    url_lower = html.unescape(url).lower().strip()
    # Browsers ignore embedded whitespace in the scheme
    url_lower = re.sub(r"\s+", "", url_lower)

    for protocol in policy.forbid_protocols:
        if url_lower.startswith(protocol):
            return False

    return True


def escape_url(url: str, policy: SanitizationPolicy = DEFAULT_POLICY) -> str:
    """
    Escape a URL for output in an attribute.

    Returns an empty string if the URL uses a forbidden protocol.
    """
    url = url.strip()
    if not is_safe_url(url, policy):
        logger.debug("Refusing unsafe URL: %s", url[:50])
        return ""
    return escape_attr(url)


# --- HTML Sanitizer ---


def parse_attributes(attr_string: str) -> dict[str, str]:
    """Parse HTML attributes from a string."""
    attrs = {}
    for match in ATTR_PATTERN.finditer(attr_string):
        name = match.group(1).lower()
        value = match.group(2) or match.group(3) or match.group(4) or ""
        attrs[name] = value
    return attrs


def sanitize_html(
    markup: str,
    policy: SanitizationPolicy = DEFAULT_POLICY,
) -> SanitizeOutput:
    """
    Sanitize an HTML fragment against an allow-list policy.

    Strips disallowed tags and attributes and blocks forbidden URL
    protocols. Never raises; everything removed is reported as a warning.
    """
    warnings: list[SanitizeWarning] = []

    def process_tag(match: re.Match[str]) -> str:
        if match.group(2) is None:
            return "&lt;"

        is_closing = bool(match.group(1))
        tag_name = match.group(2).lower()
        attr_string = match.group(3)

        if tag_name not in policy.allow_tags:
            warnings.append(
                SanitizeWarning(
                    code="stripped_tag",
                    message=f"Tag '{tag_name}' was stripped",
                )
            )
            return ""

        if is_closing:
            return f"</{tag_name}>"

        attrs = parse_attributes(attr_string)
        allowed_attrs = policy.allow_attrs.get(tag_name, frozenset())

        filtered_attrs: dict[str, str] = {}
        for name, value in attrs.items():
            if name not in allowed_attrs:
                warnings.append(
                    SanitizeWarning(
                        code="stripped_attribute",
                        message=f"Attribute '{name}' stripped from '{tag_name}'",
                    )
                )
                continue
            if name in URL_ATTRS and not is_safe_url(value, policy):
                warnings.append(
                    SanitizeWarning(
                        code="unsafe_url",
                        message=f"Unsafe URL protocol in {name}: {value[:50]}",
                    )
                )
                return ""
            filtered_attrs[name] = value

        if filtered_attrs:
            attr_parts = [f'{name}="{escape_attr(value)}"' for name, value in filtered_attrs.items()]
            return f"<{tag_name} {' '.join(attr_parts)}>"
        return f"<{tag_name}>"

    sanitized = MARKUP_PATTERN.sub(process_tag, markup)
    for warning in warnings:
        logger.debug("sanitize: %s", warning.message)

    return SanitizeOutput(html=sanitized, warnings=warnings, success=True)


# --- Component Entry Point ---


def run(
    inp: SanitizeHtmlInput,
    *,
    policy: SanitizationPolicy | None = None,
) -> SanitizeOutput:
    """
    Main entry point for the sanitize component.

    Args:
        inp: Input containing the markup to filter.
        policy: Optional allow-list policy (defaults to DEFAULT_POLICY).

    Returns:
        SanitizeOutput with filtered markup and warnings.
    """
    if isinstance(inp, SanitizeHtmlInput):
        return sanitize_html(inp.markup, policy or DEFAULT_POLICY)
    raise ValueError(f"Unknown input type: {type(inp)}")
