from typing import Any

from pydantic import BaseModel, Field, field_validator

from socio.adapters.static_site import StaticSiteMetadata
from socio.components.sanitize import SanitizationPolicy
from socio.components.sharing import DEFAULT_MEDIA, MediaEntry, ShareLinksInput
from socio.components.structured_data import StructuredDataInput


class SiteRules(BaseModel):
    name: str = ""
    description: str = ""
    url: str = ""
    home_url: str = ""
    locale: str = "en_US"

    def to_site_metadata(self) -> StaticSiteMetadata:
        return StaticSiteMetadata(
            site_name=self.name,
            site_description=self.description,
            canonical_url=self.url,
            locale=self.locale,
            home_url=self.home_url or self.url,
        )


class SharingRules(BaseModel):
    before: str = "<ul>"
    after: str = "</ul>"
    before_link: str = "<li>"
    after_link: str = "</li>"
    do_append_site_name: bool = True
    separator: str = " - "
    media: list[MediaEntry] = Field(default_factory=lambda: list(DEFAULT_MEDIA))

    @field_validator("media", mode="before")
    @classmethod
    def _coerce_media(cls, value: Any) -> Any:
        # YAML gives [key, label] lists or {key: label} mappings for labelled entries
        if not isinstance(value, list):
            return value
        coerced: list[Any] = []
        for entry in value:
            if isinstance(entry, dict) and len(entry) == 1:
                coerced.append(next(iter(entry.items())))
            elif isinstance(entry, list):
                coerced.append(tuple(entry))
            else:
                coerced.append(entry)
        return coerced

    def to_input(self) -> ShareLinksInput:
        return ShareLinksInput(
            before=self.before,
            after=self.after,
            before_link=self.before_link,
            after_link=self.after_link,
            do_append_site_name=self.do_append_site_name,
            separator=self.separator,
            media=tuple(self.media),
        )


class StructuredDataRules(BaseModel):
    schema_context: str = "http://schema.org"
    schema_type: str = "WebSite"
    publisher_type: str = "Organization"
    static_export_hint: bool = False
    overrides: dict[str, Any] = Field(default_factory=dict)

    def to_input(self, overrides: dict[str, Any] | None = None) -> StructuredDataInput:
        return StructuredDataInput(
            overrides=overrides if overrides is not None else self.overrides,
            schema_context=self.schema_context,
            schema_type=self.schema_type,
            publisher_type=self.publisher_type,
        )


class SanitizationRules(BaseModel):
    allowed_tags: list[str] | None = None
    allowed_attrs: dict[str, list[str]] | None = None
    forbidden_protocols: list[str] | None = None

    def to_policy(self) -> SanitizationPolicy:
        default = SanitizationPolicy()
        return SanitizationPolicy(
            allow_tags=(
                frozenset(self.allowed_tags)
                if self.allowed_tags is not None
                else default.allow_tags
            ),
            allow_attrs=(
                {tag: frozenset(attrs) for tag, attrs in self.allowed_attrs.items()}
                if self.allowed_attrs is not None
                else default.allow_attrs
            ),
            forbid_protocols=(
                frozenset(p.lower() for p in self.forbidden_protocols)
                if self.forbidden_protocols is not None
                else default.forbid_protocols
            ),
        )


class SocioRules(BaseModel):
    schema_version: int = 1
    site: SiteRules = Field(default_factory=SiteRules)
    sharing: SharingRules = Field(default_factory=SharingRules)
    structured_data: StructuredDataRules = Field(default_factory=StructuredDataRules)
    sanitization: SanitizationRules = Field(default_factory=SanitizationRules)
