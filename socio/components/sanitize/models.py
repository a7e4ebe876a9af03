"""
Sanitize component input/output models.

Allow-list policy for HTML emitted by the template helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

# --- Policy ---


@dataclass(frozen=True)
class SanitizationPolicy:
    """HTML allow-list policy."""

    # Allowed HTML tags
    allow_tags: frozenset[str] = field(
        default_factory=lambda: frozenset(
            [
                "a",
                "b",
                "br",
                "div",
                "em",
                "i",
                "img",
                "li",
                "nav",
                "ol",
                "p",
                "section",
                "span",
                "strong",
                "ul",
            ]
        )
    )

    # Allowed attributes per tag
    allow_attrs: dict[str, frozenset[str]] = field(
        default_factory=lambda: {
            "a": frozenset(["href", "title", "class", "id", "data-url", "rel", "target"]),
            "img": frozenset(["src", "alt", "title", "width", "height", "class"]),
            "div": frozenset(["class", "id"]),
            "li": frozenset(["class", "id"]),
            "nav": frozenset(["class", "id", "aria-label"]),
            "ol": frozenset(["class", "id"]),
            "p": frozenset(["class", "id"]),
            "section": frozenset(["class", "id"]),
            "span": frozenset(["class", "id"]),
            "ul": frozenset(["class", "id"]),
        }
    )

    # Forbidden protocols in URLs
    forbid_protocols: frozenset[str] = field(
        default_factory=lambda: frozenset(
            [
                "javascript:",
                "data:",
                "vbscript:",
            ]
        )
    )

    def with_extra_attrs(self, tag: str, *attrs: str) -> SanitizationPolicy:
        """Return a copy of this policy that also permits ``attrs`` on ``tag``."""
        merged = dict(self.allow_attrs)
        merged[tag] = merged.get(tag, frozenset()) | frozenset(attrs)
        return replace(self, allow_tags=self.allow_tags | {tag}, allow_attrs=merged)


# Default policy
DEFAULT_POLICY = SanitizationPolicy()


# --- Warnings ---


@dataclass(frozen=True)
class SanitizeWarning:
    """Something the sanitizer removed."""

    code: str
    message: str


# --- Input/Output Models ---


@dataclass(frozen=True)
class SanitizeHtmlInput:
    """Input for sanitizing an HTML fragment."""

    markup: str


@dataclass(frozen=True)
class SanitizeOutput:
    """Output from HTML sanitization."""

    html: str
    warnings: list[SanitizeWarning] = field(default_factory=list)
    success: bool = True
