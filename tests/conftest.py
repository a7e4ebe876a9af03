from pathlib import Path

import pytest

from socio.adapters import StaticPageContext, StaticSiteMetadata
from socio.rules.loader import load_rules
from socio.rules.models import SocioRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules() -> SocioRules:
    """
    Rules loaded from the real socio_rules.yaml at the project root.
    """
    rules_path = PROJECT_ROOT / "socio_rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def write_rules(tmp_path):
    """Write rules text to a temporary file and return its path."""

    def _write(content: str, name: str = "socio_rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def site() -> StaticSiteMetadata:
    return StaticSiteMetadata(
        site_name="Example",
        site_description="Notes",
        canonical_url="https://e.io/",
        locale="en_US",
        home_url="https://e.io/",
    )


@pytest.fixture
def page() -> StaticPageContext:
    return StaticPageContext(title="Hi", url="https://e.io/p")
