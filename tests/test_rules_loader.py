"""
Tests for rules loading and validation.
"""

from pathlib import Path

import pytest

from socio.components.sanitize import DEFAULT_POLICY
from socio.components.sharing import DEFAULT_MEDIA, ShareLinksInput
from socio.rules.loader import load_rules, parse_rules
from socio.rules.models import SocioRules


class TestLoadRules:
    def test_project_rules_load(self, project_rules: SocioRules) -> None:
        assert project_rules.schema_version == 1
        assert project_rules.site.name

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, write_rules) -> None:
        path = write_rules("site: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML syntax"):
            load_rules(path)

    def test_invalid_schema(self, write_rules) -> None:
        path = write_rules("sharing:\n  do_append_site_name: [1, 2]\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_empty_file_gives_defaults(self, write_rules) -> None:
        rules = load_rules(write_rules(""))
        assert rules == SocioRules()

    def test_fenced_yaml(self, write_rules) -> None:
        content = "# Rules\n\nSome prose.\n\n```yaml\nsite:\n  name: Fenced\n```\n\nMore prose.\n"
        assert load_rules(write_rules(content, "rules.md")).site.name == "Fenced"


class TestSharingRules:
    def test_defaults_match_component_defaults(self) -> None:
        assert SocioRules().sharing.to_input() == ShareLinksInput()
        assert tuple(SocioRules().sharing.media) == DEFAULT_MEDIA

    def test_labelled_media_forms(self) -> None:
        rules = parse_rules(
            "sharing:\n  media:\n    - facebook\n    - [x, Post]\n    - copy: Copy link\n"
        )
        assert rules.sharing.to_input().media == (
            "facebook",
            ("x", "Post"),
            ("copy", "Copy link"),
        )

    def test_wrapper_markup(self) -> None:
        rules = parse_rules("sharing:\n  before: '<nav>'\n  after: '</nav>'\n  separator: ' | '\n")
        inp = rules.sharing.to_input()
        assert (inp.before, inp.after, inp.separator) == ("<nav>", "</nav>", " | ")


class TestSanitizationRules:
    def test_defaults_match_default_policy(self) -> None:
        assert SocioRules().sanitization.to_policy() == DEFAULT_POLICY

    def test_custom_policy(self) -> None:
        rules = parse_rules(
            "sanitization:\n"
            "  allowed_tags: [a, ul, li]\n"
            "  allowed_attrs:\n"
            "    a: [href]\n"
            "  forbidden_protocols: ['JavaScript:']\n"
        )
        policy = rules.sanitization.to_policy()
        assert policy.allow_tags == frozenset(["a", "ul", "li"])
        assert policy.allow_attrs == {"a": frozenset(["href"])}
        assert policy.forbid_protocols == frozenset(["javascript:"])


class TestSiteAndStructuredDataRules:
    def test_site_metadata(self) -> None:
        rules = parse_rules("site:\n  name: S\n  url: https://s.io/\n  locale: ja\n")
        site = rules.site.to_site_metadata()
        assert site.get_site_name() == "S"
        assert site.get_home_url() == "https://s.io/"
        assert site.get_locale() == "ja"

    def test_structured_data_input(self) -> None:
        rules = parse_rules(
            "structured_data:\n  schema_type: Blog\n  overrides:\n    same_as: ['https://a/']\n"
        )
        inp = rules.structured_data.to_input()
        assert inp.schema_type == "Blog"
        assert inp.overrides == {"same_as": ["https://a/"]}
        assert rules.structured_data.to_input({"name": "N"}).overrides == {"name": "N"}
